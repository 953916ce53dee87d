"""Rendering of init.lua and companion scripts."""

from nvimgen.generate.init_lua import generate_init_lua
from nvimgen.generate.installer import generate_installer_script, installer_filename
from nvimgen.generate.listener import DEFAULT_LISTENER_PORT, generate_listener_lua

__all__ = [
    "DEFAULT_LISTENER_PORT",
    "generate_init_lua",
    "generate_installer_script",
    "generate_listener_lua",
    "installer_filename",
]
