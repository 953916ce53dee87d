# nvimgen Keymap Action Catalog
# General and plugin-specific keymap actions with default chords and commands

from dataclasses import dataclass
from enum import Enum

from nvimgen.catalog.plugins import Plugin


class Mode(str, Enum):
    """Neovim modes a keymap can be bound in."""

    NORMAL = "n"
    INSERT = "i"
    VISUAL = "v"
    VISUAL_BLOCK = "x"
    COMMAND = "c"
    TERMINAL = "t"

    @property
    def label(self) -> str:
        return {
            Mode.NORMAL: "Normal",
            Mode.INSERT: "Insert",
            Mode.VISUAL: "Visual",
            Mode.VISUAL_BLOCK: "Visual Block",
            Mode.COMMAND: "Command",
            Mode.TERMINAL: "Terminal",
        }[self]


@dataclass(frozen=True)
class ActionEntry:
    """A bindable editor action."""

    id: str
    name: str
    description: str
    mode: Mode
    default_chord: str
    section: str
    plugin: Plugin | None = None


@dataclass(frozen=True)
class KeymapSection:
    """A group of actions shown together."""

    id: str
    title: str
    description: str
    plugin: Plugin | None = None


SECTIONS: tuple[KeymapSection, ...] = (
    KeymapSection("general", "General Actions", "Core Neovim keybindings for common operations"),
    KeymapSection("navigation", "Navigation", "Window, buffer and terminal navigation"),
    KeymapSection("display", "Display", "Toggle display options"),
    KeymapSection("terminal", "Terminal Mode", "Keybindings active inside the terminal"),
    KeymapSection("nvim-tree", "NvimTree", "File explorer keybindings", Plugin.NVIM_TREE),
    KeymapSection("telescope", "Telescope", "Fuzzy finder keybindings", Plugin.TELESCOPE),
    KeymapSection("tabbufline", "Tabbufline", "Tab and buffer line keybindings", Plugin.TABBUFLINE),
    KeymapSection("nvim-dap", "Debugging", "Debug adapter keybindings", Plugin.NVIM_DAP),
    KeymapSection("gitsigns", "Gitsigns", "Git hunk keybindings", Plugin.GITSIGNS),
    KeymapSection("which-key", "Which Key", "Keybinding discovery", Plugin.WHICH_KEY),
)

_N = Mode.NORMAL
_T = Mode.TERMINAL

ACTIONS: tuple[ActionEntry, ...] = (
    # General
    ActionEntry("command_mode", "Command Mode", "Enter command mode (map ; to :)", _N, ";", "general"),
    ActionEntry("save_file", "Save File", "Save current file", _N, "<leader>w", "general"),
    ActionEntry("quit", "Quit", "Quit Neovim", _N, "<leader>q", "general"),
    ActionEntry("select_all", "Select All", "Select all text", _N, "<leader>a", "general"),
    ActionEntry("search_replace", "Search & Replace", "Search and replace", _N, "<leader>sr", "general"),
    # Navigation
    ActionEntry("split_horizontal", "Split Horizontal", "Split window horizontally", _N, "<leader>s", "navigation"),
    ActionEntry("split_vertical", "Split Vertical", "Split window vertically", _N, "<leader>v", "navigation"),
    ActionEntry("buffer_next", "Next Buffer", "Switch to next buffer", _N, "<leader>bn", "navigation"),
    ActionEntry("buffer_prev", "Previous Buffer", "Switch to previous buffer", _N, "<leader>bp", "navigation"),
    ActionEntry("buffer_close", "Close Buffer", "Close current buffer", _N, "<leader>bd", "navigation"),
    ActionEntry("terminal_toggle", "Terminal", "Open terminal", _N, "<leader>t", "navigation"),
    # Display
    ActionEntry("toggle_wrap", "Toggle Wrap", "Toggle line wrapping", _N, "<leader>tw", "display"),
    ActionEntry("toggle_numbers", "Toggle Numbers", "Toggle line numbers", _N, "<leader>tn", "display"),
    # Terminal mode
    ActionEntry("terminal_escape", "Exit Terminal Mode", "Return to normal mode from terminal", _T, "<Esc><Esc>", "terminal"),
    ActionEntry("terminal_escape_alt", "Alt Exit Terminal", "Alternative way to exit terminal mode", _T, "<C-q>", "terminal"),
    ActionEntry("terminal_nav_left", "Navigate Left", "Move to window on the left from terminal", _T, "<C-h>", "terminal"),
    ActionEntry("terminal_nav_right", "Navigate Right", "Move to window on the right from terminal", _T, "<C-l>", "terminal"),
    ActionEntry("terminal_nav_up", "Navigate Up", "Move to window above from terminal", _T, "<C-k>", "terminal"),
    ActionEntry("terminal_nav_down", "Navigate Down", "Move to window below from terminal", _T, "<C-j>", "terminal"),
    # NvimTree
    ActionEntry("nvim_tree_toggle", "Toggle File Tree", "Open/close file explorer", _N, "<leader>e", "nvim-tree", Plugin.NVIM_TREE),
    ActionEntry("nvim_tree_focus", "Focus File Tree", "Focus on file explorer", _N, "<leader>ef", "nvim-tree", Plugin.NVIM_TREE),
    ActionEntry("nvim_tree_find_file", "Find Current File", "Find current file in tree", _N, "<leader>ec", "nvim-tree", Plugin.NVIM_TREE),
    # Telescope
    ActionEntry("telescope_find_files", "Find Files", "Search and open files", _N, "<leader>ff", "telescope", Plugin.TELESCOPE),
    ActionEntry("telescope_live_grep", "Live Grep", "Search text in files", _N, "<leader>fg", "telescope", Plugin.TELESCOPE),
    ActionEntry("telescope_buffers", "Buffers", "List and switch buffers", _N, "<leader>fb", "telescope", Plugin.TELESCOPE),
    ActionEntry("telescope_help_tags", "Help Tags", "Search help documentation", _N, "<leader>fh", "telescope", Plugin.TELESCOPE),
    ActionEntry("telescope_git_files", "Git Files", "Search git-tracked files", _N, "<leader>gf", "telescope", Plugin.TELESCOPE),
    # Tabbufline
    ActionEntry("tabbufline_next_tab", "Next Tab", "Switch to next tab", _N, "gt", "tabbufline", Plugin.TABBUFLINE),
    ActionEntry("tabbufline_prev_tab", "Previous Tab", "Switch to previous tab", _N, "gT", "tabbufline", Plugin.TABBUFLINE),
    ActionEntry("tabbufline_close_tab", "Close Tab", "Close current tab", _N, "<leader>tc", "tabbufline", Plugin.TABBUFLINE),
    ActionEntry("tabbufline_next_buffer", "Next Buffer", "Switch to next buffer in tab", _N, "<Tab>", "tabbufline", Plugin.TABBUFLINE),
    ActionEntry("tabbufline_prev_buffer", "Previous Buffer", "Switch to previous buffer in tab", _N, "<S-Tab>", "tabbufline", Plugin.TABBUFLINE),
    ActionEntry("tabbufline_close_buffer", "Close Buffer", "Close current buffer", _N, "<leader>x", "tabbufline", Plugin.TABBUFLINE),
    # nvim-dap
    ActionEntry("dap_toggle_breakpoint", "Toggle Breakpoint", "Set/remove breakpoint", _N, "<leader>db", "nvim-dap", Plugin.NVIM_DAP),
    ActionEntry("dap_continue", "Continue", "Continue debugging", _N, "<leader>dc", "nvim-dap", Plugin.NVIM_DAP),
    ActionEntry("dap_step_over", "Step Over", "Step over line", _N, "<leader>do", "nvim-dap", Plugin.NVIM_DAP),
    ActionEntry("dap_step_into", "Step Into", "Step into function", _N, "<leader>di", "nvim-dap", Plugin.NVIM_DAP),
    ActionEntry("dap_step_out", "Step Out", "Step out of function", _N, "<leader>du", "nvim-dap", Plugin.NVIM_DAP),
    # Gitsigns
    ActionEntry("gitsigns_next_hunk", "Next Hunk", "Go to next git change", _N, "]c", "gitsigns", Plugin.GITSIGNS),
    ActionEntry("gitsigns_prev_hunk", "Previous Hunk", "Go to previous git change", _N, "[c", "gitsigns", Plugin.GITSIGNS),
    ActionEntry("gitsigns_stage_hunk", "Stage Hunk", "Stage current change", _N, "<leader>hs", "gitsigns", Plugin.GITSIGNS),
    ActionEntry("gitsigns_reset_hunk", "Reset Hunk", "Reset current change", _N, "<leader>hr", "gitsigns", Plugin.GITSIGNS),
    ActionEntry("gitsigns_preview_hunk", "Preview Hunk", "Preview git change", _N, "<leader>hp", "gitsigns", Plugin.GITSIGNS),
    # Which Key
    ActionEntry("which_key_show", "Show Keybindings", "Display available keybindings", _N, "<leader>?", "which-key", Plugin.WHICH_KEY),
)

ACTIONS_BY_ID: dict[str, ActionEntry] = {action.id: action for action in ACTIONS}

DEFAULT_KEYMAPS: dict[str, str] = {action.id: action.default_chord for action in ACTIONS}

GENERAL_ACTIONS: tuple[ActionEntry, ...] = tuple(a for a in ACTIONS if a.plugin is None)

# Right-hand side and description for each action.
# Commands starting with "function()" are emitted as Lua functions, the rest as strings.
KEYMAP_COMMANDS: dict[str, tuple[str, str]] = {
    "command_mode": (":", "Enter command mode"),
    "save_file": ("<cmd>write<CR>", "Save file"),
    "quit": ("<cmd>quit<CR>", "Quit"),
    "select_all": ("ggVG", "Select all"),
    "search_replace": (":%s/", "Search and replace"),
    "split_horizontal": ("<cmd>split<CR>", "Split window horizontally"),
    "split_vertical": ("<cmd>vsplit<CR>", "Split window vertically"),
    "buffer_next": ("<cmd>bnext<CR>", "Next buffer"),
    "buffer_prev": ("<cmd>bprev<CR>", "Previous buffer"),
    "buffer_close": ("<cmd>bdelete<CR>", "Close buffer"),
    "terminal_toggle": ("<cmd>terminal<CR>", "Open terminal"),
    "toggle_wrap": ("<cmd>set wrap!<CR>", "Toggle line wrap"),
    "toggle_numbers": ("<cmd>set number! relativenumber!<CR>", "Toggle line numbers"),
    "terminal_escape": ("<C-\\><C-n>", "Exit terminal mode"),
    "terminal_escape_alt": ("<C-\\><C-n>", "Exit terminal mode"),
    "terminal_nav_left": ("<C-\\><C-n><C-w>h", "Move to left window"),
    "terminal_nav_right": ("<C-\\><C-n><C-w>l", "Move to right window"),
    "terminal_nav_up": ("<C-\\><C-n><C-w>k", "Move to upper window"),
    "terminal_nav_down": ("<C-\\><C-n><C-w>j", "Move to lower window"),
    "nvim_tree_toggle": ("<cmd>NvimTreeToggle<CR>", "Toggle file explorer"),
    "nvim_tree_focus": ("<cmd>NvimTreeFocus<CR>", "Focus file explorer"),
    "nvim_tree_find_file": ("<cmd>NvimTreeFindFile<CR>", "Find current file in explorer"),
    "telescope_find_files": ('function() require("telescope.builtin").find_files() end', "Find files"),
    "telescope_live_grep": ('function() require("telescope.builtin").live_grep() end', "Search text in files"),
    "telescope_buffers": ('function() require("telescope.builtin").buffers() end', "List buffers"),
    "telescope_help_tags": ('function() require("telescope.builtin").help_tags() end', "Help tags"),
    "telescope_git_files": ('function() require("telescope.builtin").git_files() end', "Git files"),
    "tabbufline_next_tab": ("<cmd>tabnext<CR>", "Next tab"),
    "tabbufline_prev_tab": ("<cmd>tabprevious<CR>", "Previous tab"),
    "tabbufline_close_tab": ("<cmd>tabclose<CR>", "Close tab"),
    "tabbufline_next_buffer": ('function() require("nvchad.tabufline").next() end', "Next buffer in tab"),
    "tabbufline_prev_buffer": ('function() require("nvchad.tabufline").prev() end', "Previous buffer in tab"),
    "tabbufline_close_buffer": ('function() require("nvchad.tabufline").close_buffer() end', "Close buffer"),
    "dap_toggle_breakpoint": ('function() require("dap").toggle_breakpoint() end', "Toggle breakpoint"),
    "dap_continue": ('function() require("dap").continue() end', "Debug continue"),
    "dap_step_over": ('function() require("dap").step_over() end', "Debug step over"),
    "dap_step_into": ('function() require("dap").step_into() end', "Debug step into"),
    "dap_step_out": ('function() require("dap").step_out() end', "Debug step out"),
    "gitsigns_next_hunk": ('function() require("gitsigns").next_hunk() end', "Next git hunk"),
    "gitsigns_prev_hunk": ('function() require("gitsigns").prev_hunk() end', "Previous git hunk"),
    "gitsigns_stage_hunk": ('function() require("gitsigns").stage_hunk() end', "Stage git hunk"),
    "gitsigns_reset_hunk": ('function() require("gitsigns").reset_hunk() end', "Reset git hunk"),
    "gitsigns_preview_hunk": ('function() require("gitsigns").preview_hunk() end', "Preview git hunk"),
    "which_key_show": ("<cmd>WhichKey<CR>", "Show keybindings"),
}


def get_action(action_id: str) -> ActionEntry | None:
    """Get a catalog action by id."""
    return ACTIONS_BY_ID.get(action_id)


def actions_for_plugin(plugin: Plugin) -> tuple[ActionEntry, ...]:
    """Return the actions contributed by a plugin, in catalog order."""
    return tuple(a for a in ACTIONS if a.plugin is plugin)


def actions_in_section(section_id: str) -> tuple[ActionEntry, ...]:
    """Return the actions of a section, in catalog order."""
    return tuple(a for a in ACTIONS if a.section == section_id)
