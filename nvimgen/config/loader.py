# nvimgen Configuration Loader
# Load, save, and manage YAML configuration and selection files

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from nvimgen.config.defaults import default_config, generate_default_config
from nvimgen.config.schema import NvimgenConfig
from nvimgen.selection import Selection

SECTIONS = ("listener", "delivery", "share", "output")


def get_config_dir() -> Path:
    """Get the nvimgen configuration directory."""
    return Path.home() / ".config" / "nvimgen"


def get_config_path() -> Path:
    """Get the path to the configuration file."""
    # Allow override via environment variable
    env_path = os.environ.get("NVIMGEN_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return get_config_dir() / "config.yaml"


def ensure_config_dir(config_path: Optional[Path] = None) -> Path:
    """Ensure the directory holding the configuration file exists."""
    config_dir = (config_path or get_config_path()).parent
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def load_config(config_path: Optional[Path] = None) -> NvimgenConfig:
    """
    Load configuration from YAML file.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        NvimgenConfig: Validated configuration object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        ValidationError: If config file is invalid.
    """
    if config_path is None:
        config_path = get_config_path()

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found: {config_path}\nRun 'nvimgen config init' to create one."
        )

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration must be a mapping of sections: {config_path}")

    return NvimgenConfig.model_validate(_merge_with_defaults(data))


def load_or_default_config(config_path: Optional[Path] = None) -> NvimgenConfig:
    """Load the configuration file, or the built-in defaults if there is none."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return NvimgenConfig.model_validate(default_config())


def save_config(config: NvimgenConfig, config_path: Optional[Path] = None) -> Path:
    """
    Save configuration to YAML file.

    Args:
        config: Configuration object to save.
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Path: Path where config was saved.
    """
    if config_path is None:
        config_path = get_config_path()

    ensure_config_dir(config_path)

    # mode='json' serializes Enums as their string values
    data = config.model_dump(exclude_none=True, mode="json")

    with open(config_path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False, allow_unicode=True)

    return config_path


def ensure_config_exists(config_path: Optional[Path] = None) -> tuple[Path, bool]:
    """
    Ensure configuration file exists, creating default if needed.

    Returns:
        Tuple of (config_path, was_created).
    """
    if config_path is None:
        config_path = get_config_path()

    if config_path.exists():
        return config_path, False

    ensure_config_dir(config_path)
    config_path.write_text(generate_default_config(), encoding="utf-8")
    return config_path, True


def validate_config_file(config_path: Optional[Path] = None) -> tuple[bool, list[str]]:
    """
    Validate a configuration file without loading it into the system.

    Args:
        config_path: Path to config file to validate.

    Returns:
        Tuple of (is_valid, error_messages).
    """
    if config_path is None:
        config_path = get_config_path()

    errors: list[str] = []

    if not config_path.exists():
        return False, [f"Configuration file not found: {config_path}"]

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        return False, [f"Invalid YAML syntax: {e}"]

    if data is None:
        return False, ["Configuration file is empty"]

    if not isinstance(data, dict):
        return False, ["Configuration must be a mapping of sections"]

    try:
        NvimgenConfig.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            loc = " -> ".join(str(part) for part in error["loc"])
            errors.append(f"{loc}: {error['msg']}")
        return False, errors

    for key in data:
        if key not in SECTIONS:
            errors.append(f"Unknown section '{key}'")

    return len(errors) == 0, errors


def _merge_with_defaults(data: dict) -> dict:
    """Merge loaded data with default values for missing keys."""
    result = default_config()
    for section in SECTIONS:
        if isinstance(data.get(section), dict):
            result[section] = {**result[section], **data[section]}
    return result


def load_selection(path: Path) -> Selection:
    """
    Load a saved selection from a YAML file.

    Args:
        path: Selection file.

    Returns:
        Validated Selection.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        ValueError: If the file is not a YAML mapping.
        ValidationError: If a field has the wrong type.
    """
    if not path.exists():
        raise FileNotFoundError(f"Selection file not found: {path}")

    with open(path, encoding="utf-8") as f:
        data: Any = yaml.safe_load(f)

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(f"Selection file must contain a mapping: {path}")

    return Selection.model_validate(data)


def save_selection(selection: Selection, path: Path) -> Path:
    """Write a selection to a YAML file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(selection.model_dump(), f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    return path
