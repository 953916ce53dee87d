# nvimgen Option Sections
# Header, leader, baseline options, settings-driven and legacy flag blocks

from datetime import date
from typing import Any

from nvimgen.catalog.languages import recognized_languages
from nvimgen.catalog.themes import Theme
from nvimgen.generate.lua import lua_bool, lua_string

AUGROUP = "NvimgenAutoSave"


def render_header(languages: list[str], theme: str, generated_on: date) -> str:
    """Informational comment block. Lists recognized ids only."""
    langs = ", ".join(lang.value for lang in recognized_languages(languages)) or "none"
    parsed = Theme.parse(theme)
    theme_name = parsed.value if parsed.is_override else Theme.DEFAULT.value
    return "\n".join(
        [
            "-- Generated Neovim Configuration",
            f"-- Languages: {langs}",
            f"-- Theme: {theme_name}",
            f"-- Generated on: {generated_on.isoformat()}",
        ]
    )


def render_leader(leader_key: str) -> str:
    """Leader assignment. Must precede any plugin code."""
    display = "Space" if leader_key == " " else leader_key
    literal = lua_string(leader_key)
    return "\n".join(
        [
            f"-- Set leader key ({display}) before plugins load",
            f"vim.g.mapleader = {literal}",
            f"vim.g.maplocalleader = {literal}",
        ]
    )


def render_baseline() -> str:
    """Options emitted for every selection."""
    return "\n".join(
        [
            "-- Basic Options",
            "vim.opt.mouse = 'a'",
            "vim.opt.clipboard = 'unnamedplus'",
            "vim.opt.breakindent = true",
            "vim.opt.undofile = true",
            "vim.opt.hlsearch = true",
            "",
            "-- Highlight on search, but clear on pressing <Esc> in normal mode",
            "vim.keymap.set('n', '<Esc>', '<cmd>nohlsearch<CR>')",
        ]
    )


def render_auto_save(delay: int) -> str:
    """Debounced auto-save: one pending write per buffer burst of edits."""
    return "\n".join(
        [
            f"local autosave_group = vim.api.nvim_create_augroup('{AUGROUP}', {{ clear = true }})",
            "local autosave_timer = nil",
            "vim.api.nvim_create_autocmd({ 'TextChanged', 'TextChangedI' }, {",
            "  group = autosave_group,",
            "  pattern = '*',",
            "  callback = function(args)",
            "    if autosave_timer and not autosave_timer:is_closing() then",
            "      autosave_timer:stop()",
            "      autosave_timer:close()",
            "    end",
            "    autosave_timer = vim.defer_fn(function()",
            "      autosave_timer = nil",
            "      local buf = args.buf",
            "      if vim.api.nvim_buf_is_valid(buf) and vim.bo[buf].modified and vim.bo[buf].buftype == '' then",
            "        vim.api.nvim_buf_call(buf, function()",
            "          vim.cmd('silent! write')",
            "        end)",
            "      end",
            f"    end, {int(delay)})",
            "  end,",
            "})",
        ]
    )


_LINE_NUMBERS: dict[str, tuple[bool, bool]] = {
    "none": (False, False),
    "absolute": (True, False),
    "relative": (False, True),
    "both": (True, True),
}


def render_editor(settings: dict[str, Any]) -> str:
    number, relative = _LINE_NUMBERS.get(settings["line_numbers"], _LINE_NUMBERS["both"])
    indent_size = int(settings["indent_size"])
    lines = [
        "-- Editor Settings",
        f"vim.opt.number = {lua_bool(number)}",
        f"vim.opt.relativenumber = {lua_bool(relative)}",
        f"vim.opt.tabstop = {indent_size}",
        f"vim.opt.shiftwidth = {indent_size}",
        "vim.opt.expandtab = true",
    ]
    if settings["line_wrapping"]:
        lines += ["vim.opt.wrap = true", "vim.opt.linebreak = true"]
    else:
        lines.append("vim.opt.wrap = false")
    if settings["show_whitespace"]:
        lines += ["vim.opt.list = true", "vim.opt.listchars = { space = '·', tab = '→ ', eol = '↴' }"]
    lines.append(f"vim.opt.cursorline = {lua_bool(settings['cursor_line'])}")
    if int(settings["color_column"]) > 0:
        lines.append(f"vim.opt.colorcolumn = '{int(settings['color_column'])}'")
    lines.append(f"vim.opt.scrolloff = {int(settings['scroll_offset'])}")
    return "\n".join(lines)


def render_behavior(settings: dict[str, Any]) -> str:
    lines = ["-- Behavior Settings"]
    if settings["auto_save"]:
        lines += ["-- Auto save", render_auto_save(settings["auto_save_delay"])]
    lines += [
        f"vim.opt.undolevels = {int(settings['undo_levels'])}",
        f"vim.opt.ignorecase = {lua_bool(settings['ignore_case'])}",
        f"vim.opt.smartcase = {lua_bool(settings['smart_case'])}",
        f"vim.opt.splitright = {lua_bool(settings['split_direction'] == 'right')}",
        f"vim.opt.splitbelow = {lua_bool(settings['split_direction'] == 'below')}",
    ]
    return "\n".join(lines)


def render_interface(settings: dict[str, Any]) -> str:
    return "\n".join(
        [
            "-- UI Settings",
            f"vim.opt.signcolumn = {lua_string('yes' if settings['show_sign_column'] else 'auto')}",
            f"vim.opt.foldcolumn = {lua_string('1' if settings['show_fold_column'] else '0')}",
        ]
    )


def render_performance(settings: dict[str, Any]) -> str:
    return "\n".join(
        [
            "-- Performance Settings",
            f"vim.opt.updatetime = {int(settings['update_time'])}",
            f"vim.opt.timeoutlen = {int(settings['timeout_length'])}",
            f"vim.opt.lazyredraw = {lua_bool(settings['lazy_redraw'])}",
        ]
    )


def render_flags(flags: list[str], settings: dict[str, Any]) -> list[str]:
    """
    Render legacy flag blocks in their fixed order.

    Args:
        flags: Legacy flag ids from the selection.
        settings: Resolved settings object.

    Returns:
        One block per active flag; unknown flags are ignored.
    """
    blocks: list[str] = []
    if "line_numbers" in flags:
        blocks.append("-- Line numbers enabled\nvim.opt.number = true\nvim.opt.relativenumber = true")
    # The settings object already installed the same augroup
    if "auto_save" in flags and not settings["auto_save"]:
        blocks.append("-- Auto save\n" + render_auto_save(settings["auto_save_delay"]))
    if "wrap_text" in flags:
        blocks.append("-- Text wrapping\nvim.opt.wrap = true\nvim.opt.linebreak = true")
    return blocks
