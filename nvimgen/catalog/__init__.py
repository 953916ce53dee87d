# nvimgen Option Catalogs
# Static enumerations of languages, themes, plugins, keymap actions and settings

from nvimgen.catalog.actions import ACTIONS, DEFAULT_KEYMAPS, KEYMAP_COMMANDS, ActionEntry, Mode, get_action
from nvimgen.catalog.languages import FORMATTERS, LSP_SERVERS, TREESITTER_PARSERS, Language
from nvimgen.catalog.plugins import Plugin, custom_plugin_id, is_custom_plugin
from nvimgen.catalog.settings import SETTING_DEFINITIONS, SettingDefinition, SettingType, get_definition
from nvimgen.catalog.themes import THEME_PLUGINS, Theme

__all__ = [
    "Language",
    "LSP_SERVERS",
    "FORMATTERS",
    "TREESITTER_PARSERS",
    "Theme",
    "THEME_PLUGINS",
    "Plugin",
    "is_custom_plugin",
    "custom_plugin_id",
    "Mode",
    "ActionEntry",
    "ACTIONS",
    "DEFAULT_KEYMAPS",
    "KEYMAP_COMMANDS",
    "get_action",
    "SettingType",
    "SettingDefinition",
    "SETTING_DEFINITIONS",
    "get_definition",
]
