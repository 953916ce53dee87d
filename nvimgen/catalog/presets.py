# nvimgen Preset Stacks
# Ready-made selections for common development setups

from dataclasses import dataclass

from nvimgen.selection import Selection


@dataclass(frozen=True)
class PresetStack:
    """A named starting selection."""

    id: str
    name: str
    description: str
    languages: tuple[str, ...]
    theme: str
    plugins: tuple[str, ...]
    flags: tuple[str, ...]
    leader_key: str = " "

    def to_selection(self) -> Selection:
        """Build a fresh Selection from this preset."""
        return Selection(
            languages=list(self.languages),
            theme=self.theme,
            plugins=list(self.plugins),
            flags=list(self.flags),
            leader_key=self.leader_key,
        )


PRESETS: tuple[PresetStack, ...] = (
    PresetStack(
        id="web-dev",
        name="Web Development",
        description="Perfect for JavaScript, TypeScript, and React development",
        languages=("typescript", "javascript"),
        theme="tokyonight",
        plugins=("treesitter", "telescope", "nvim-tree", "lualine", "gitsigns", "which-key", "nvim-surround"),
        flags=("line_numbers", "auto_save"),
    ),
    PresetStack(
        id="system-programming",
        name="Systems Programming",
        description="Optimized for Rust, C, and C++ development",
        languages=("rust", "c", "cpp"),
        theme="gruvbox",
        plugins=("treesitter", "telescope", "nvim-tree", "nvim-dap", "lualine", "gitsigns", "which-key"),
        flags=("line_numbers",),
    ),
    PresetStack(
        id="data-science",
        name="Data Science",
        description="Configured for Python data analysis and machine learning",
        languages=("python",),
        theme="catppuccin",
        plugins=("treesitter", "telescope", "nvim-tree", "lualine", "indent-blankline", "nvim-notify"),
        flags=("line_numbers", "wrap_text"),
    ),
    PresetStack(
        id="minimal",
        name="Minimal",
        description="Lightweight configuration with essential features only",
        languages=("lua",),
        theme="default",
        plugins=("treesitter", "telescope"),
        flags=("line_numbers",),
    ),
    PresetStack(
        id="game-dev",
        name="Game Development",
        description="Tailored for C# and Unity game development",
        languages=("csharp",),
        theme="onedark",
        plugins=("treesitter", "telescope", "nvim-tree", "lualine", "nvim-dap", "which-key"),
        flags=("line_numbers", "auto_save"),
    ),
    PresetStack(
        id="full-stack",
        name="Full Stack",
        description="Complete setup for full-stack development",
        languages=("typescript", "javascript", "python", "go"),
        theme="catppuccin",
        plugins=(
            "treesitter",
            "telescope",
            "nvim-tree",
            "tabbufline",
            "dashboard",
            "lualine",
            "gitsigns",
            "which-key",
            "nvim-surround",
        ),
        flags=("line_numbers", "auto_save", "wrap_text"),
    ),
)

PRESETS_BY_ID: dict[str, PresetStack] = {preset.id: preset for preset in PRESETS}


def get_preset(preset_id: str) -> PresetStack | None:
    """Get a preset by id."""
    return PRESETS_BY_ID.get(preset_id)
