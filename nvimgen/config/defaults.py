# nvimgen Default Configuration
# Full default configuration as Python dict and YAML generator

import copy
from typing import Any

import yaml

DEFAULT_CONFIG: dict[str, Any] = {
    "listener": {
        "host": "127.0.0.1",
        "port": 45831,
        "token": None,
        "timeout": 5.0,
        "upload": "multipart",
    },
    "delivery": {
        "output_path": "~/.config/nvim/init.lua",
        "backup": True,
        "directory_state": "~/.config/nvimgen/directory.yaml",
    },
    "share": {
        "base_url": "http://localhost:5173/",
    },
    "output": {
        "verbose": False,
        "colored": True,
    },
}


def default_config() -> dict[str, Any]:
    """Return a private copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def generate_default_config() -> str:
    """Generate default configuration as YAML string with comments."""
    header = """# nvimgen Configuration
#
# listener: companion HTTP listener running inside Neovim
#   (install it with 'nvimgen listener > listener.lua')
# delivery: where 'nvimgen generate --save' writes init.lua
# share:    base URL used by 'nvimgen share'
# output:   console output preferences

"""
    return header + yaml.dump(DEFAULT_CONFIG, default_flow_style=False, sort_keys=False, allow_unicode=True)
