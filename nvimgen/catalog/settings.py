# nvimgen Settings Catalog
# Editor and plugin setting definitions with defaults and visibility rules

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SettingType(str, Enum):
    """Value type of a setting."""

    BOOLEAN = "boolean"
    NUMBER = "number"
    SELECT = "select"
    TEXT = "text"


class SettingOption(BaseModel):
    """A choice of a select setting."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str
    description: str = ""


class SettingDefinition(BaseModel):
    """Static definition of one setting."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Dotted path into the settings object")
    title: str
    description: str = ""
    category: str
    type: SettingType
    default: Any = Field(description="Catalog default value")
    min: int | None = None
    max: int | None = None
    step: int | None = None
    unit: str | None = None
    options: tuple[SettingOption, ...] = ()
    requires_plugins: tuple[str, ...] = Field(
        default=(), description="Visible only if one of these plugins is selected"
    )
    depends_on: str | None = Field(default=None, description="Visible only if this setting is truthy")

    @property
    def path(self) -> list[str]:
        """Split the dotted id into path segments."""
        return self.id.split(".")

    @property
    def option_values(self) -> list[str]:
        return [option.value for option in self.options]


class SettingCategory(BaseModel):
    """Group of settings shown together."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str


def _opt(value: str, label: str, description: str = "") -> SettingOption:
    return SettingOption(value=value, label=label, description=description)


CATEGORIES: tuple[SettingCategory, ...] = (
    SettingCategory(id="editor", title="Editor", description="Core editing experience and appearance"),
    SettingCategory(id="behavior", title="Behavior", description="Editor behavior and workflow preferences"),
    SettingCategory(id="ui", title="Interface", description="User interface and visual elements"),
    SettingCategory(id="performance", title="Performance", description="Optimize editor performance and responsiveness"),
    SettingCategory(id="telescope", title="Telescope", description="Fuzzy finder settings"),
    SettingCategory(id="nvim_tree", title="File Explorer", description="NvimTree file explorer settings"),
    SettingCategory(id="lualine", title="Status Line", description="Lualine statusline configuration"),
    SettingCategory(id="treesitter", title="Syntax Highlighting", description="TreeSitter syntax parsing settings"),
    SettingCategory(id="debugging", title="Debugging", description="Debug adapter protocol settings"),
    SettingCategory(id="git", title="Git Integration", description="Git workflow and display settings"),
)

_B = SettingType.BOOLEAN
_N = SettingType.NUMBER
_S = SettingType.SELECT
_T = SettingType.TEXT

SETTING_DEFINITIONS: tuple[SettingDefinition, ...] = (
    # Editor
    SettingDefinition(
        id="indent_size", title="Indent Size", description="Number of spaces for indentation",
        category="editor", type=_N, default=2, min=1, max=8, step=1, unit="spaces",
    ),
    SettingDefinition(
        id="line_numbers", title="Line Numbers", description="How to display line numbers",
        category="editor", type=_S, default="both",
        options=(
            _opt("none", "Hidden", "No line numbers"),
            _opt("absolute", "Absolute", "Show absolute line numbers"),
            _opt("relative", "Relative", "Show relative line numbers"),
            _opt("both", "Both", "Show both absolute and relative"),
        ),
    ),
    SettingDefinition(
        id="line_wrapping", title="Line Wrapping", description="Wrap long lines for better readability",
        category="editor", type=_B, default=False,
    ),
    SettingDefinition(
        id="show_whitespace", title="Show Whitespace", description="Display whitespace characters",
        category="editor", type=_B, default=False,
    ),
    SettingDefinition(
        id="cursor_line", title="Highlight Cursor Line", description="Highlight the line where cursor is located",
        category="editor", type=_B, default=True,
    ),
    SettingDefinition(
        id="color_column", title="Color Column",
        description="Show vertical line at specified column (0 to disable)",
        category="editor", type=_N, default=0, min=0, max=200, step=1, unit="characters",
    ),
    SettingDefinition(
        id="scroll_offset", title="Scroll Offset", description="Keep cursor this many lines from screen edges",
        category="editor", type=_N, default=8, min=0, max=20, step=1, unit="lines",
    ),
    # Behavior
    SettingDefinition(
        id="auto_save", title="Auto Save", description="Automatically save files when modified",
        category="behavior", type=_B, default=False,
    ),
    SettingDefinition(
        id="auto_save_delay", title="Auto Save Delay", description="Delay before auto-saving changes",
        category="behavior", type=_N, default=1000, min=100, max=5000, step=100, unit="ms",
        depends_on="auto_save",
    ),
    SettingDefinition(
        id="undo_levels", title="Undo Levels", description="Maximum number of undo operations",
        category="behavior", type=_N, default=1000, min=50, max=10000, step=50,
    ),
    SettingDefinition(
        id="smart_case", title="Smart Case Search", description="Case-insensitive unless uppercase letters are used",
        category="behavior", type=_B, default=True,
    ),
    SettingDefinition(
        id="ignore_case", title="Ignore Case", description="Ignore case in search patterns",
        category="behavior", type=_B, default=True,
    ),
    SettingDefinition(
        id="split_direction", title="Split Direction", description="Default direction for new splits",
        category="behavior", type=_S, default="below",
        options=(
            _opt("right", "Right", "Open vertical splits to the right"),
            _opt("below", "Below", "Open horizontal splits below"),
        ),
    ),
    # Interface
    SettingDefinition(
        id="show_sign_column", title="Show Sign Column",
        description="Always show column for git signs, diagnostics, etc.",
        category="ui", type=_B, default=True,
    ),
    SettingDefinition(
        id="show_fold_column", title="Show Fold Column", description="Display column for code folding indicators",
        category="ui", type=_B, default=False,
    ),
    SettingDefinition(
        id="terminal_position", title="Terminal Position", description="How to open integrated terminal",
        category="ui", type=_S, default="horizontal",
        options=(
            _opt("horizontal", "Bottom", "Horizontal split at bottom"),
            _opt("vertical", "Right", "Vertical split on right"),
            _opt("floating", "Floating", "Floating terminal window"),
        ),
    ),
    SettingDefinition(
        id="completion", title="Completion Style", description="Autocompletion behavior and appearance",
        category="ui", type=_S, default="advanced",
        options=(
            _opt("basic", "Basic", "Simple completion menu"),
            _opt("advanced", "Advanced", "Rich completion with previews"),
        ),
    ),
    # Performance
    SettingDefinition(
        id="update_time", title="Update Time", description="Time to wait before triggering CursorHold event",
        category="performance", type=_N, default=250, min=50, max=2000, step=50, unit="ms",
    ),
    SettingDefinition(
        id="timeout_length", title="Timeout Length", description="Time to wait for key sequence completion",
        category="performance", type=_N, default=300, min=100, max=1000, step=50, unit="ms",
    ),
    SettingDefinition(
        id="lazy_redraw", title="Lazy Redraw", description="Don't redraw during macro execution for better performance",
        category="performance", type=_B, default=False,
    ),
    # Telescope
    SettingDefinition(
        id="telescope.preview_enabled", title="Enable Preview", description="Show file preview in telescope results",
        category="telescope", type=_B, default=True, requires_plugins=("telescope",),
    ),
    SettingDefinition(
        id="telescope.history_limit", title="History Limit", description="Number of recent searches to remember",
        category="telescope", type=_N, default=100, min=10, max=1000, step=10, requires_plugins=("telescope",),
    ),
    SettingDefinition(
        id="telescope.ignored_patterns", title="Ignored Patterns",
        description="File patterns to ignore in search (comma-separated)",
        category="telescope", type=_T, default=("*.git*", "node_modules/*", "*.lock"),
        requires_plugins=("telescope",),
    ),
    # NvimTree
    SettingDefinition(
        id="nvim_tree.width", title="Explorer Width", description="Width of the file explorer sidebar",
        category="nvim_tree", type=_N, default=30, min=20, max=80, step=5, unit="columns",
        requires_plugins=("nvim-tree",),
    ),
    SettingDefinition(
        id="nvim_tree.auto_close", title="Auto Close", description="Close tree when opening a file",
        category="nvim_tree", type=_B, default=False, requires_plugins=("nvim-tree",),
    ),
    SettingDefinition(
        id="nvim_tree.follow_current_file", title="Follow Current File",
        description="Automatically focus the current file in tree",
        category="nvim_tree", type=_B, default=True, requires_plugins=("nvim-tree",),
    ),
    SettingDefinition(
        id="nvim_tree.git_integration", title="Git Integration", description="Show git status in file explorer",
        category="nvim_tree", type=_B, default=True, requires_plugins=("nvim-tree",),
    ),
    # Lualine
    SettingDefinition(
        id="lualine.theme", title="Statusline Theme", description="Visual theme for the status line",
        category="lualine", type=_S, default="auto", requires_plugins=("lualine",),
        options=(
            _opt("auto", "Auto", "Match editor theme"),
            _opt("gruvbox", "Gruvbox", "Gruvbox theme colors"),
            _opt("nord", "Nord", "Nord theme colors"),
            _opt("catppuccin", "Catppuccin", "Catppuccin theme colors"),
            _opt("tokyonight", "TokyoNight", "TokyoNight theme colors"),
        ),
    ),
    SettingDefinition(
        id="lualine.show_file_encoding", title="Show File Encoding", description="Display file encoding in status line",
        category="lualine", type=_B, default=False, requires_plugins=("lualine",),
    ),
    SettingDefinition(
        id="lualine.show_file_type", title="Show File Type", description="Display file type in status line",
        category="lualine", type=_B, default=True, requires_plugins=("lualine",),
    ),
    SettingDefinition(
        id="lualine.show_branch", title="Show Git Branch", description="Display current git branch in status line",
        category="lualine", type=_B, default=True, requires_plugins=("lualine",),
    ),
    # Treesitter
    SettingDefinition(
        id="treesitter.auto_install", title="Auto Install Parsers", description="Automatically install language parsers",
        category="treesitter", type=_B, default=True, requires_plugins=("treesitter",),
    ),
    SettingDefinition(
        id="treesitter.highlight_enabled", title="Syntax Highlighting",
        description="Enable TreeSitter syntax highlighting",
        category="treesitter", type=_B, default=True, requires_plugins=("treesitter",),
    ),
    SettingDefinition(
        id="treesitter.indent_enabled", title="Smart Indentation", description="Enable TreeSitter-based indentation",
        category="treesitter", type=_B, default=True, requires_plugins=("treesitter",),
    ),
    SettingDefinition(
        id="treesitter.folding_enabled", title="Code Folding", description="Enable TreeSitter-based code folding",
        category="treesitter", type=_B, default=False, requires_plugins=("treesitter",),
    ),
    # Debugging
    SettingDefinition(
        id="debugging.auto_open_ui", title="Auto Open Debug UI",
        description="Automatically open debug UI when debugging starts",
        category="debugging", type=_B, default=True, requires_plugins=("nvim-dap",),
    ),
    SettingDefinition(
        id="debugging.show_inline_variables", title="Inline Variables",
        description="Show variable values inline while debugging",
        category="debugging", type=_B, default=True, requires_plugins=("nvim-dap",),
    ),
    SettingDefinition(
        id="debugging.break_on_exception", title="Break on Exception",
        description="Automatically break when exceptions occur",
        category="debugging", type=_B, default=False, requires_plugins=("nvim-dap",),
    ),
    # Git
    SettingDefinition(
        id="git.show_line_blame", title="Show Line Blame", description="Display git blame information for current line",
        category="git", type=_B, default=False, requires_plugins=("gitsigns",),
    ),
    SettingDefinition(
        id="git.show_diff_in_signs", title="Show Diff in Signs", description="Display git changes in sign column",
        category="git", type=_B, default=True, requires_plugins=("gitsigns",),
    ),
    SettingDefinition(
        id="git.word_diff", title="Word-level Diff", description="Show word-level differences in git hunks",
        category="git", type=_B, default=False, requires_plugins=("gitsigns",),
    ),
)

DEFINITIONS_BY_ID: dict[str, SettingDefinition] = {d.id: d for d in SETTING_DEFINITIONS}

# Legacy boolean flags, in the order their blocks are rendered
LEGACY_FLAGS: tuple[str, ...] = ("line_numbers", "auto_save", "wrap_text")


def get_definition(setting_id: str) -> SettingDefinition | None:
    """Get a setting definition by dotted id."""
    return DEFINITIONS_BY_ID.get(setting_id)


def definitions_in_category(category_id: str) -> list[SettingDefinition]:
    """Return the definitions of a category in catalog order."""
    return [d for d in SETTING_DEFINITIONS if d.category == category_id]
