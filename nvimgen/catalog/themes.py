# nvimgen Theme Catalog
# Colorschemes and their lazy.nvim plugin specs

from enum import Enum


class Theme(str, Enum):
    """Selectable colorschemes. DEFAULT means no colorscheme override."""

    CATPPUCCIN = "catppuccin"
    GRUVBOX = "gruvbox"
    TOKYONIGHT = "tokyonight"
    NORD = "nord"
    ONEDARK = "onedark"
    DEFAULT = "default"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: str | None) -> "Theme":
        """Map an identifier to a theme. Empty input means DEFAULT."""
        if not value or not value.strip():
            return cls.DEFAULT
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.UNRECOGNIZED

    @property
    def is_override(self) -> bool:
        """True if this theme replaces the built-in colorscheme."""
        return THEME_PLUGINS[self] is not None


THEME_LABELS: dict[Theme, str] = {
    Theme.CATPPUCCIN: "Catppuccin",
    Theme.GRUVBOX: "Gruvbox",
    Theme.TOKYONIGHT: "Tokyo Night",
    Theme.NORD: "Nord",
    Theme.ONEDARK: "One Dark",
    Theme.DEFAULT: "Default",
    Theme.UNRECOGNIZED: "Unrecognized",
}

THEME_PLUGINS: dict[Theme, str | None] = {
    Theme.CATPPUCCIN: '{ "catppuccin/nvim", name = "catppuccin", priority = 1000 }',
    Theme.GRUVBOX: '{ "ellisonleao/gruvbox.nvim", priority = 1000 }',
    Theme.TOKYONIGHT: '{ "folke/tokyonight.nvim", lazy = false, priority = 1000 }',
    Theme.NORD: '{ "shaunsingh/nord.nvim", priority = 1000 }',
    Theme.ONEDARK: '{ "navarasu/onedark.nvim", priority = 1000 }',
    Theme.DEFAULT: None,
    Theme.UNRECOGNIZED: None,
}
