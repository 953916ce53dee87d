# nvimgen Configuration Module
# Handles YAML-based configuration loading, validation, and defaults

from nvimgen.config.defaults import DEFAULT_CONFIG, default_config, generate_default_config
from nvimgen.config.loader import (
    ensure_config_exists,
    get_config_path,
    load_config,
    load_or_default_config,
    load_selection,
    save_config,
    save_selection,
    validate_config_file,
)
from nvimgen.config.schema import (
    DeliveryConfig,
    ListenerConfig,
    NvimgenConfig,
    OutputConfig,
    ShareConfig,
    UploadFormat,
)

__all__ = [
    # Schema
    "NvimgenConfig",
    "ListenerConfig",
    "DeliveryConfig",
    "ShareConfig",
    "OutputConfig",
    "UploadFormat",
    # Loader
    "load_config",
    "load_or_default_config",
    "save_config",
    "get_config_path",
    "ensure_config_exists",
    "validate_config_file",
    "load_selection",
    "save_selection",
    # Defaults
    "DEFAULT_CONFIG",
    "default_config",
    "generate_default_config",
]
