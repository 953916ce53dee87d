# nvimgen Analysis Tests
# Tests for health check parsing, init.lua import and plugin search

from datetime import date
from unittest.mock import patch

from nvimgen.analysis.health import IssueType, parse_health_check, summarize_issues
from nvimgen.analysis.importer import import_init_lua
from nvimgen.analysis.plugin_search import (
    PluginSearchResult,
    plugin_id_from_url,
    repository_from_url,
    search_plugins,
)
from nvimgen.catalog.actions import DEFAULT_KEYMAPS
from nvimgen.generate import generate_init_lua
from nvimgen.resolve.keymaps import active_actions
from nvimgen.selection import Selection

CHECKHEALTH_OUTPUT = """
==============================================================================
## nvim-treesitter
- OK `tree-sitter` found 0.20.8
- ERROR `node` executable not found
- WARNING Version of `cc` is old

health#provider
- ERROR No Python executable found for the python3 provider
- Some informational text

## clipboard
- ⚠ No clipboard tool found
- ✗ clipboard: no provider found
- ✓
"""

HAND_WRITTEN_CONFIG = """
vim.g.mapleader = ","

require("lazy").setup({
  { "folke/tokyonight.nvim" },
  { "nvim-tree/nvim-tree.lua" },
  { "goolord/alpha-nvim" },
})

vim.cmd.colorscheme("tokyonight-night")
require("lspconfig").tsserver.setup({})
require("lspconfig").rust_analyzer.setup({})

vim.wo.number = true
vim.opt.wrap = true

vim.keymap.set("n", "<C-s>", ":w<CR>")
vim.keymap.set("n", "<leader>x", "<cmd>bdelete<CR>", { silent = true })
vim.keymap.set("n", "<leader>tt", ":terminal<CR>")
vim.keymap.set("n", "<leader>zz", ":Lazy<CR>")

vim.api.nvim_create_autocmd({ "InsertLeave" }, {
  callback = function() vim.cmd("silent! write") end,
})
"""


class TestParseHealthCheck:
    """Tests for parse_health_check()."""

    def test_issue_types(self):
        issues = parse_health_check(CHECKHEALTH_OUTPUT)
        types = [issue.type for issue in issues]
        assert types == [
            IssueType.OK,
            IssueType.ERROR,
            IssueType.WARNING,
            IssueType.ERROR,
            IssueType.WARNING,
            IssueType.ERROR,
        ]

    def test_categories(self):
        issues = parse_health_check(CHECKHEALTH_OUTPUT)
        assert issues[0].category == "nvim-treesitter"
        assert issues[3].category == "provider"
        assert issues[4].category == "clipboard"

    def test_markers_stripped(self):
        issues = parse_health_check(CHECKHEALTH_OUTPUT)
        assert issues[0].message == "`tree-sitter` found 0.20.8"
        assert issues[1].message == "`node` executable not found"
        assert issues[4].message == "No clipboard tool found"

    def test_message_leading_dashes_kept(self):
        issues = parse_health_check("- ERROR --headless flag missing\n- WARNING -- see docs")
        assert issues[0].message == "--headless flag missing"
        assert issues[1].message == "-- see docs"

    def test_suggestions(self):
        issues = parse_health_check(CHECKHEALTH_OUTPUT)
        assert issues[0].suggestion is None
        assert issues[1].suggestion.startswith("Install node using your package manager")
        assert issues[2].suggestion.startswith("Consider updating")
        assert issues[3].suggestion == "Install the pynvim package: pip install pynvim"
        assert issues[5].suggestion.startswith("Install a clipboard tool")

    def test_default_category(self):
        issues = parse_health_check("- ERROR something broke")
        assert issues[0].category == "General"
        assert issues[0].suggestion is None

    def test_empty(self):
        assert parse_health_check("") == []

    def test_summarize(self):
        counts = summarize_issues(parse_health_check(CHECKHEALTH_OUTPUT))
        assert counts == {IssueType.ERROR: 3, IssueType.WARNING: 2, IssueType.OK: 1}

    def test_summarize_empty_has_every_type(self):
        assert summarize_issues([]) == {IssueType.ERROR: 0, IssueType.WARNING: 0, IssueType.OK: 0}


class TestImportInitLua:
    """Tests for import_init_lua()."""

    def test_empty(self):
        assert import_init_lua("") == Selection()

    def test_generated_config(self):
        original = Selection(languages=["python"], theme="gruvbox", plugins=["telescope"], leader_key=",")
        text = generate_init_lua(original, generated_on=date(2024, 1, 15))

        imported = import_init_lua(text)

        assert imported.languages == ["python"]
        assert imported.theme == "gruvbox"
        assert imported.plugins == ["telescope"]
        assert imported.leader_key == ","
        expected = {action.id: DEFAULT_KEYMAPS[action.id] for action in active_actions(["telescope"])}
        assert imported.keymaps == expected

    def test_generated_overrides(self):
        original = Selection(keymaps={"save_file": "<C-s>", "terminal_escape": "jk"})
        imported = import_init_lua(generate_init_lua(original, generated_on=date(2024, 1, 15)))
        assert imported.keymaps["save_file"] == "<C-s>"
        assert imported.keymaps["terminal_escape"] == "jk"
        assert imported.keymaps["terminal_escape_alt"] == "<C-q>"

    def test_generated_custom_plugins(self):
        original = Selection(
            plugins=["treesitter", "custom-oil.nvim"],
            custom_plugins={"custom-oil.nvim": "stevearc/oil.nvim"},
        )
        imported = import_init_lua(generate_init_lua(original, generated_on=date(2024, 1, 15)))
        assert imported.plugins == ["treesitter", "custom-oil.nvim"]
        assert imported.custom_plugins == {"custom-oil.nvim": "stevearc/oil.nvim"}

    def test_generated_auto_save(self):
        imported = import_init_lua(generate_init_lua(Selection(flags=["auto_save"])))
        assert "auto_save" in imported.flags

    def test_hand_written_languages(self):
        assert import_init_lua(HAND_WRITTEN_CONFIG).languages == ["typescript", "javascript", "rust"]

    def test_hand_written_theme_variant(self):
        assert import_init_lua(HAND_WRITTEN_CONFIG).theme == "tokyonight"

    def test_theme_from_repository(self):
        assert import_init_lua('{ "shaunsingh/nord.nvim" },').theme == "nord"

    def test_hand_written_plugins(self):
        assert import_init_lua(HAND_WRITTEN_CONFIG).plugins == ["nvim-tree", "dashboard"]

    def test_hand_written_leader(self):
        assert import_init_lua(HAND_WRITTEN_CONFIG).leader_key == ","

    def test_multi_character_leader_ignored(self):
        assert import_init_lua("vim.g.mapleader = '<Space>'").leader_key == " "

    def test_hand_written_flags(self):
        assert import_init_lua(HAND_WRITTEN_CONFIG).flags == ["line_numbers", "auto_save", "wrap_text"]

    def test_hand_written_keymaps(self):
        keymaps = import_init_lua(HAND_WRITTEN_CONFIG).keymaps
        assert keymaps == {
            "save_file": "<C-s>",
            "buffer_close": "<leader>x",
            "terminal_toggle": "<leader>tt",
        }

    def test_custom_plugins_need_section(self):
        imported = import_init_lua("{ 'stevearc/oil.nvim' },")
        assert imported.custom_plugins == {}


class TestPluginSearch:
    """Tests for plugin search helpers."""

    def test_blank_query(self):
        assert search_plugins("   ") == []

    def test_phrase_and_terms(self):
        ids = [result.plugin_id for result in search_plugins("file explorer")]
        assert ids == ["custom-nvim-tree.lua", "custom-oil.nvim", "custom-mini.files"]

    def test_case_insensitive(self):
        results = search_plugins("STATUSLINE")
        assert [result.repository for result in results] == ["nvim-lualine/lualine.nvim"]

    def test_limit(self):
        assert len(search_plugins("neovim", limit=2)) == 2

    def test_no_match(self):
        assert search_plugins("quantum-teleporter") == []

    def test_long_description_truncated(self):
        entry = PluginSearchResult("long.nvim - Long", "x" * 250, "https://github.com/me/long.nvim")
        with patch("nvimgen.analysis.plugin_search.PLUGIN_DIRECTORY", (entry,)):
            results = search_plugins("long")
        assert results[0].description == "x" * 200 + "..."

    def test_repository_from_url(self):
        assert repository_from_url("https://github.com/stevearc/oil.nvim.git") == "stevearc/oil.nvim"
        assert repository_from_url("https://github.com/stevearc/oil.nvim/tree/master") == "stevearc/oil.nvim"
        assert repository_from_url("https://github.com/") is None

    def test_plugin_id_from_url(self):
        assert plugin_id_from_url("https://github.com/stevearc/oil.nvim/") == "custom-oil.nvim"
        assert plugin_id_from_url("https://github.com/me/thing.git") == "custom-thing"
