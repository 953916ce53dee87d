# nvimgen Plugin Section
# lazy.nvim bootstrap, language tooling and catalog plugin specs

import re
from typing import Any

from nvimgen.catalog.languages import formatters_for, lsp_servers_for, parsers_for, recognized_languages
from nvimgen.catalog.plugins import Plugin, active_builtin_plugins, is_custom_plugin
from nvimgen.catalog.themes import THEME_PLUGINS, Theme
from nvimgen.generate.lua import indent, lua_bool, lua_list, lua_string

BASE_PARSERS = ["lua", "vim", "vimdoc"]

REPOSITORY_RE = re.compile(r"^[A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+$")

LAZY_BOOTSTRAP = """-- Bootstrap lazy.nvim plugin manager
local lazypath = vim.fn.stdpath("data") .. "/lazy/lazy.nvim"
if not vim.loop.fs_stat(lazypath) then
  vim.fn.system({
    "git",
    "clone",
    "--filter=blob:none",
    "https://github.com/folke/lazy.nvim.git",
    "--branch=stable",
    lazypath,
  })
end
vim.opt.rtp:prepend(lazypath)"""

NVCONFIG_BOOTSTRAP = """-- NvChad UI configuration file for tabbufline
local nvconfig_dir = vim.fn.stdpath("config") .. "/lua"
local nvconfig_path = nvconfig_dir .. "/nvconfig.lua"
if vim.fn.filereadable(nvconfig_path) == 0 then
  vim.fn.mkdir(nvconfig_dir, "p")
  local file = io.open(nvconfig_path, "w")
  if file then
    file:write([[
return {
  ui = {
    tabufline = {
      enabled = true,
      lazyload = true,
      order = { "treeOffset", "buffers", "tabs", "btns" },
    },
  },
}
]])
    file:close()
  end
end"""


def custom_plugin_repositories(plugins: list[str], custom_plugins: dict[str, str]) -> list[str]:
    """
    Resolve selected custom plugin ids to their repositories.

    Ids without a registered repository, or whose repository is not of the
    owner/repo form, are dropped.
    """
    repos: list[str] = []
    for plugin_id in plugins:
        if not is_custom_plugin(plugin_id):
            continue
        repo = (custom_plugins.get(plugin_id) or "").strip()
        if REPOSITORY_RE.match(repo) and repo not in repos:
            repos.append(repo)
    return repos


def needs_plugin_manager(languages: list[str], plugins: list[str], custom_plugins: dict[str, str]) -> bool:
    """True if anything would be placed inside the lazy.nvim setup call."""
    return bool(
        recognized_languages(languages)
        or active_builtin_plugins(plugins)
        or custom_plugin_repositories(plugins, custom_plugins)
    )


def _lsp_blocks(languages: list[str]) -> str:
    servers = lsp_servers_for(languages)
    setups = "\n".join(f"lspconfig.{server}.setup({{ capabilities = capabilities }})" for server in servers)
    return f"""-- LSP Manager (auto-included for language support)
{{
  "williamboman/mason.nvim",
  config = function()
    require("mason").setup()
  end,
}},
{{
  "williamboman/mason-lspconfig.nvim",
  dependencies = {{ "williamboman/mason.nvim" }},
  config = function()
    require("mason-lspconfig").setup({{
      ensure_installed = {lua_list(servers)},
      automatic_installation = false,
    }})
  end,
}},
{{
  "neovim/nvim-lspconfig",
  dependencies = {{ "hrsh7th/cmp-nvim-lsp" }},
  config = function()
    local capabilities = require("cmp_nvim_lsp").default_capabilities()
    local lspconfig = require("lspconfig")
{indent(setups, 2)}
  end,
}},"""


def _formatter_block(languages: list[str]) -> str | None:
    formatters = formatters_for(languages)
    if not formatters:
        return None
    sources = "\n".join(f"null_ls.builtins.formatting.{name}," for name in formatters)
    return f"""-- Formatting (auto-included for selected languages)
{{
  "nvimtools/none-ls.nvim",
  dependencies = {{ "nvim-lua/plenary.nvim" }},
  config = function()
    local null_ls = require("null-ls")
    null_ls.setup({{
      sources = {{
{indent(sources, 4)}
      }},
    }})
  end,
}},"""


def _completion_block(style: str) -> str:
    if style == "basic":
        return """-- Autocompletion (auto-included for language support)
{
  "hrsh7th/nvim-cmp",
  dependencies = {
    "hrsh7th/cmp-nvim-lsp",
    "hrsh7th/cmp-buffer",
    "hrsh7th/cmp-path",
  },
  config = function()
    local cmp = require("cmp")
    cmp.setup({
      mapping = cmp.mapping.preset.insert({
        ["<C-Space>"] = cmp.mapping.complete(),
        ["<C-e>"] = cmp.mapping.abort(),
        ["<CR>"] = cmp.mapping.confirm({ select = true }),
      }),
      sources = cmp.config.sources({
        { name = "nvim_lsp" },
      }, {
        { name = "buffer" },
        { name = "path" },
      }),
    })
  end,
},"""
    return """-- Autocompletion (auto-included for language support)
{
  "hrsh7th/nvim-cmp",
  dependencies = {
    "hrsh7th/cmp-nvim-lsp",
    "hrsh7th/cmp-buffer",
    "hrsh7th/cmp-path",
    "L3MON4D3/LuaSnip",
    "saadparwaiz1/cmp_luasnip",
  },
  config = function()
    local cmp = require("cmp")
    cmp.setup({
      snippet = {
        expand = function(args)
          require("luasnip").lsp_expand(args.body)
        end,
      },
      window = {
        completion = cmp.config.window.bordered(),
        documentation = cmp.config.window.bordered(),
      },
      mapping = cmp.mapping.preset.insert({
        ["<C-b>"] = cmp.mapping.scroll_docs(-4),
        ["<C-f>"] = cmp.mapping.scroll_docs(4),
        ["<C-Space>"] = cmp.mapping.complete(),
        ["<C-e>"] = cmp.mapping.abort(),
        ["<CR>"] = cmp.mapping.confirm({ select = true }),
      }),
      sources = cmp.config.sources({
        { name = "nvim_lsp" },
        { name = "luasnip" },
      }, {
        { name = "buffer" },
        { name = "path" },
      }),
    })
  end,
},"""


def _treesitter_block(languages: list[str], settings: dict[str, Any]) -> str:
    ts = settings["treesitter"]
    parsers = list(BASE_PARSERS)
    parsers += [p for p in parsers_for(languages) if p not in parsers]
    folding = ""
    if ts["folding_enabled"]:
        folding = """
    vim.opt.foldmethod = "expr"
    vim.opt.foldexpr = "nvim_treesitter#foldexpr()"
    vim.opt.foldenable = false"""
    return f"""-- Enhanced syntax highlighting
{{
  "nvim-treesitter/nvim-treesitter",
  build = ":TSUpdate",
  config = function()
    require("nvim-treesitter.configs").setup({{
      ensure_installed = {lua_list(parsers)},
      auto_install = {lua_bool(ts["auto_install"])},
      highlight = {{ enable = {lua_bool(ts["highlight_enabled"])} }},
      indent = {{ enable = {lua_bool(ts["indent_enabled"])} }},
    }}){folding}
  end,
}},"""


def _telescope_block(settings: dict[str, Any]) -> str:
    telescope = settings["telescope"]
    preview = "" if telescope["preview_enabled"] else "\n        preview = false,"
    return f"""-- Fuzzy finder
{{
  "nvim-telescope/telescope.nvim",
  branch = "0.1.x",
  dependencies = {{ "nvim-lua/plenary.nvim" }},
  config = function()
    require("telescope").setup({{
      defaults = {{
        file_ignore_patterns = {lua_list(telescope["ignored_patterns"])},
        history = {{ limit = {int(telescope["history_limit"])} }},{preview}
      }},
    }})
  end,
}},"""


def _nvim_tree_block(settings: dict[str, Any]) -> str:
    tree = settings["nvim_tree"]
    return f"""-- File explorer
{{
  "nvim-tree/nvim-tree.lua",
  dependencies = {{ "nvim-tree/nvim-web-devicons" }},
  config = function()
    vim.g.loaded_netrw = 1
    vim.g.loaded_netrwPlugin = 1
    require("nvim-tree").setup({{
      view = {{ width = {int(tree["width"])} }},
      actions = {{ open_file = {{ quit_on_open = {lua_bool(tree["auto_close"])} }} }},
      update_focused_file = {{ enable = {lua_bool(tree["follow_current_file"])} }},
      git = {{ enable = {lua_bool(tree["git_integration"])} }},
    }})
  end,
}},"""


_TABBUFLINE_BLOCK = """-- NvChad UI for tabs and buffers
{
  "nvchad/ui",
  dependencies = { "nvchad/volt", "nvim-tree/nvim-web-devicons", "nvim-lua/plenary.nvim" },
  config = function()
    require("nvchad")
  end,
},"""


def _dashboard_block(plugins: set[Plugin]) -> str:
    entries = []
    if Plugin.TELESCOPE in plugins:
        entries += [
            "{ icon = ' ', desc = 'Find File', key = 'f', action = 'Telescope find_files' },",
            "{ icon = ' ', desc = 'Recent Files', key = 'r', action = 'Telescope oldfiles' },",
            "{ icon = ' ', desc = 'Find Text', key = 'g', action = 'Telescope live_grep' },",
        ]
    entries += [
        "{ icon = ' ', desc = 'New File', key = 'n', action = 'enew' },",
        "{ icon = ' ', desc = 'Quit', key = 'q', action = 'qa' },",
    ]
    center = "\n".join(entries)
    return f"""-- Dashboard start screen
{{
  "nvimdev/dashboard-nvim",
  event = "VimEnter",
  dependencies = {{ "nvim-tree/nvim-web-devicons" }},
  config = function()
    require("dashboard").setup({{
      theme = "doom",
      config = {{
        header = {{
          "",
          "N E O V I M",
          "",
        }},
        center = {{
{indent(center, 5)}
        }},
      }},
    }})
  end,
}},"""


_INDENT_BLANKLINE_BLOCK = """-- Indentation guides
{
  "lukas-reineke/indent-blankline.nvim",
  main = "ibl",
  config = function()
    require("ibl").setup({
      indent = { char = "│" },
      scope = { enabled = false },
    })
  end,
},"""


def _lualine_block(settings: dict[str, Any]) -> str:
    lualine = settings["lualine"]
    section_b = "{ 'branch', 'diff', 'diagnostics' }" if lualine["show_branch"] else "{ 'diff', 'diagnostics' }"
    section_c = "{ 'filename', 'filetype' }" if lualine["show_file_type"] else "{ 'filename' }"
    section_x = "{ 'encoding', 'fileformat' }" if lualine["show_file_encoding"] else "{}"
    return f"""-- Statusline
{{
  "nvim-lualine/lualine.nvim",
  dependencies = {{ "nvim-tree/nvim-web-devicons" }},
  config = function()
    require("lualine").setup({{
      options = {{
        theme = {lua_string(lualine["theme"])},
        component_separators = {{ left = "", right = "" }},
        section_separators = {{ left = "", right = "" }},
      }},
      sections = {{
        lualine_b = {section_b},
        lualine_c = {section_c},
        lualine_x = {section_x},
      }},
    }})
  end,
}},"""


_SURROUND_BLOCK = """-- Surround text objects
{
  "kylechui/nvim-surround",
  version = "*",
  event = "VeryLazy",
  config = function()
    require("nvim-surround").setup({})
  end,
},"""


def _gitsigns_block(settings: dict[str, Any]) -> str:
    git = settings["git"]
    signs = "{}"
    if git["show_diff_in_signs"]:
        signs = """{
        add = { text = "+" },
        change = { text = "~" },
        delete = { text = "_" },
        topdelete = { text = "‾" },
        changedelete = { text = "~" },
      }"""
    return f"""-- Git integration
{{
  "lewis6991/gitsigns.nvim",
  config = function()
    require("gitsigns").setup({{
      signcolumn = {lua_bool(git["show_diff_in_signs"])},
      signs = {signs},
      current_line_blame = {lua_bool(git["show_line_blame"])},
      current_line_blame_opts = {{ virt_text = true, virt_text_pos = "eol" }},
      word_diff = {lua_bool(git["word_diff"])},
    }})
  end,
}},"""


def _which_key_block(settings: dict[str, Any]) -> str:
    return f"""-- Keybinding helper
{{
  "folke/which-key.nvim",
  event = "VeryLazy",
  config = function()
    vim.o.timeout = true
    vim.o.timeoutlen = {int(settings["timeout_length"])}
    require("which-key").setup({{}})
  end,
}},"""


def _dap_block(settings: dict[str, Any]) -> str:
    debugging = settings["debugging"]
    dependencies = ['"rcarriga/nvim-dap-ui"', '"nvim-neotest/nvim-nio"']
    body = ["local dap = require(\"dap\")", "local dapui = require(\"dapui\")", "dapui.setup()"]
    if debugging["show_inline_variables"]:
        dependencies.append('"theHamsta/nvim-dap-virtual-text"')
        body.append('require("nvim-dap-virtual-text").setup({})')
    if debugging["auto_open_ui"]:
        body += [
            'dap.listeners.after.event_initialized["dapui_config"] = function()',
            "  dapui.open()",
            "end",
        ]
    body += [
        'dap.listeners.before.event_terminated["dapui_config"] = function()',
        "  dapui.close()",
        "end",
        'dap.listeners.before.event_exited["dapui_config"] = function()',
        "  dapui.close()",
        "end",
    ]
    if debugging["break_on_exception"]:
        body.append('dap.defaults.fallback.exception_breakpoints = { "raised" }')
    deps = "\n".join(f"{dep}," for dep in dependencies)
    config = "\n".join(body)
    return f"""-- Debug Adapter Protocol
{{
  "mfussenegger/nvim-dap",
  dependencies = {{
{indent(deps, 2)}
  }},
  config = function()
{indent(config, 2)}
  end,
}},"""


_NOTIFY_BLOCK = """-- Notifications
{
  "rcarriga/nvim-notify",
  config = function()
    local notify = require("notify")
    notify.setup({
      stages = "fade_in_slide_out",
      timeout = 3000,
    })
    vim.notify = notify
  end,
},"""


def _catalog_block(plugin: Plugin, active: set[Plugin], languages: list[str], settings: dict[str, Any]) -> str:
    """Render the lazy.nvim entry of one built-in plugin."""
    if plugin is Plugin.TREESITTER:
        return _treesitter_block(languages, settings)
    if plugin is Plugin.TELESCOPE:
        return _telescope_block(settings)
    if plugin is Plugin.NVIM_TREE:
        return _nvim_tree_block(settings)
    if plugin is Plugin.TABBUFLINE:
        return _TABBUFLINE_BLOCK
    if plugin is Plugin.DASHBOARD:
        return _dashboard_block(active)
    if plugin is Plugin.INDENT_BLANKLINE:
        return _INDENT_BLANKLINE_BLOCK
    if plugin is Plugin.LUALINE:
        return _lualine_block(settings)
    if plugin is Plugin.NVIM_SURROUND:
        return _SURROUND_BLOCK
    if plugin is Plugin.GITSIGNS:
        return _gitsigns_block(settings)
    if plugin is Plugin.WHICH_KEY:
        return _which_key_block(settings)
    if plugin is Plugin.NVIM_DAP:
        return _dap_block(settings)
    if plugin is Plugin.NVIM_NOTIFY:
        return _NOTIFY_BLOCK
    raise ValueError(f"No plugin spec for {plugin.value!r}")


def render_plugin_section(
    languages: list[str],
    theme: str,
    plugins: list[str],
    custom_plugins: dict[str, str],
    settings: dict[str, Any],
) -> str | None:
    """
    Render the lazy.nvim bootstrap and setup call.

    Args:
        languages: Language ids from the selection.
        theme: Theme id.
        plugins: Plugin ids from the selection.
        custom_plugins: Custom plugin id to owner/repo.
        settings: Sanitized settings object.

    Returns:
        The plugin section, or None if nothing needs a plugin manager.
    """
    if not needs_plugin_manager(languages, plugins, custom_plugins):
        return None

    active = active_builtin_plugins(plugins)
    specs: list[str] = []

    theme_spec = THEME_PLUGINS[Theme.parse(theme)]
    if theme_spec:
        specs.append(f"-- Theme\n{theme_spec},")

    if recognized_languages(languages):
        specs.append(_lsp_blocks(languages))
        formatter = _formatter_block(languages)
        if formatter:
            specs.append(formatter)
        specs.append(_completion_block(settings["completion"]))

    for plugin in Plugin.known():
        if plugin in active:
            specs.append(_catalog_block(plugin, active, languages, settings))

    repos = custom_plugin_repositories(plugins, custom_plugins)
    if repos:
        specs.append("-- Custom plugins\n" + "\n".join(f"{{ {lua_string(repo)} }}," for repo in repos))

    parts = [LAZY_BOOTSTRAP]
    if Plugin.TABBUFLINE in active:
        parts.append(NVCONFIG_BOOTSTRAP)
    parts.append("-- Plugin setup\nrequire(\"lazy\").setup({\n" + indent("\n".join(specs), 1) + "\n})")
    return "\n\n".join(parts)
