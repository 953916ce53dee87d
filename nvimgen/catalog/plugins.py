# nvimgen Plugin Catalog
# Built-in plugins in catalog order plus custom plugin id helpers

import re
from enum import Enum

CUSTOM_PREFIX = "custom-"


class Plugin(str, Enum):
    """Built-in plugins. Declaration order is catalog order."""

    TREESITTER = "treesitter"
    TELESCOPE = "telescope"
    NVIM_TREE = "nvim-tree"
    TABBUFLINE = "tabbufline"
    DASHBOARD = "dashboard"
    INDENT_BLANKLINE = "indent-blankline"
    LUALINE = "lualine"
    NVIM_SURROUND = "nvim-surround"
    GITSIGNS = "gitsigns"
    WHICH_KEY = "which-key"
    NVIM_DAP = "nvim-dap"
    NVIM_NOTIFY = "nvim-notify"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: str) -> "Plugin":
        """Map an identifier to a built-in plugin, or UNRECOGNIZED."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNRECOGNIZED

    @classmethod
    def known(cls) -> list["Plugin"]:
        """Return all built-in plugins in catalog order."""
        return [plugin for plugin in cls if plugin is not cls.UNRECOGNIZED]


PLUGIN_LABELS: dict[Plugin, str] = {
    Plugin.TREESITTER: "Treesitter",
    Plugin.TELESCOPE: "Telescope",
    Plugin.NVIM_TREE: "NvimTree",
    Plugin.TABBUFLINE: "Tabbufline",
    Plugin.DASHBOARD: "Dashboard",
    Plugin.INDENT_BLANKLINE: "Indent Blankline",
    Plugin.LUALINE: "Lualine",
    Plugin.NVIM_SURROUND: "nvim-surround",
    Plugin.GITSIGNS: "Gitsigns",
    Plugin.WHICH_KEY: "Which Key",
    Plugin.NVIM_DAP: "nvim-dap",
    Plugin.NVIM_NOTIFY: "nvim-notify",
    Plugin.UNRECOGNIZED: "Unrecognized",
}

PLUGIN_DESCRIPTIONS: dict[Plugin, str] = {
    Plugin.TREESITTER: "Enhanced syntax highlighting and code parsing",
    Plugin.TELESCOPE: "Fuzzy finder for files, text and more",
    Plugin.NVIM_TREE: "File explorer sidebar",
    Plugin.TABBUFLINE: "NvChad UI tabs and buffer line",
    Plugin.DASHBOARD: "Start screen with shortcuts",
    Plugin.INDENT_BLANKLINE: "Indentation guides",
    Plugin.LUALINE: "Fast and configurable statusline",
    Plugin.NVIM_SURROUND: "Add, change and delete surrounding pairs",
    Plugin.GITSIGNS: "Git decorations and hunk actions",
    Plugin.WHICH_KEY: "Popup with available keybindings",
    Plugin.NVIM_DAP: "Debug Adapter Protocol client",
    Plugin.NVIM_NOTIFY: "Animated notification manager",
    Plugin.UNRECOGNIZED: "",
}

# Primary GitHub repository of each plugin
PLUGIN_REPOSITORIES: dict[Plugin, str | None] = {
    Plugin.TREESITTER: "nvim-treesitter/nvim-treesitter",
    Plugin.TELESCOPE: "nvim-telescope/telescope.nvim",
    Plugin.NVIM_TREE: "nvim-tree/nvim-tree.lua",
    Plugin.TABBUFLINE: "nvchad/ui",
    Plugin.DASHBOARD: "nvimdev/dashboard-nvim",
    Plugin.INDENT_BLANKLINE: "lukas-reineke/indent-blankline.nvim",
    Plugin.LUALINE: "nvim-lualine/lualine.nvim",
    Plugin.NVIM_SURROUND: "kylechui/nvim-surround",
    Plugin.GITSIGNS: "lewis6991/gitsigns.nvim",
    Plugin.WHICH_KEY: "folke/which-key.nvim",
    Plugin.NVIM_DAP: "mfussenegger/nvim-dap",
    Plugin.NVIM_NOTIFY: "rcarriga/nvim-notify",
    Plugin.UNRECOGNIZED: None,
}

_SLUG_RE = re.compile(r"[^a-z0-9._-]+")


def is_custom_plugin(plugin_id: str) -> bool:
    """Check if a plugin id has the custom-<slug> form."""
    return plugin_id.startswith(CUSTOM_PREFIX) and len(plugin_id) > len(CUSTOM_PREFIX)


def custom_plugin_id(name: str) -> str:
    """
    Build a custom plugin id from a repository or plugin name.

    Args:
        name: Plugin name such as "oil.nvim".

    Returns:
        Identifier of the form custom-<slug>.
    """
    slug = _SLUG_RE.sub("-", name.strip().lower()).strip("-")
    return f"{CUSTOM_PREFIX}{slug}"


def active_builtin_plugins(plugins: list[str]) -> set[Plugin]:
    """Return the set of recognized built-in plugins in a selection."""
    return {p for p in (Plugin.parse(value) for value in plugins) if p is not Plugin.UNRECOGNIZED}
