# nvimgen Config Importer
# Recover a Selection from an existing init.lua

import re
from typing import Optional

from nvimgen.catalog.actions import ACTIONS, KEYMAP_COMMANDS
from nvimgen.catalog.languages import Language
from nvimgen.catalog.plugins import PLUGIN_REPOSITORIES, Plugin, custom_plugin_id
from nvimgen.catalog.themes import Theme
from nvimgen.generate.keymaps import TERMINAL_COMMANDS
from nvimgen.generate.options import AUGROUP
from nvimgen.selection import Selection

_LUA_STRING = r"""(?:'((?:[^'\\]|\\.)*)'|"((?:[^"\\]|\\.)*)")"""
_UNESCAPES = {"n": "\n", "r": "\r", "t": "\t", "0": "\0"}

LEADER_RE = re.compile(r"vim\.g\.mapleader\s*=\s*" + _LUA_STRING)
COLORSCHEME_RE = re.compile(r"colorscheme[\s,(\"']+([A-Za-z0-9_-]+)")
KEYMAP_RE = re.compile(
    r"vim\.keymap\.set\(\s*" + _LUA_STRING + r"\s*,\s*" + _LUA_STRING + r"\s*,\s*(function\(\).*?\bend(?=\s*,)|" + _LUA_STRING + r")"
)
CUSTOM_SPEC_RE = re.compile(r"^\s*\{\s*['\"]([A-Za-z0-9_.-]+/[A-Za-z0-9_.-]+)['\"]\s*\},?\s*$")

# LSP server names, including ones older configs use
SERVER_LANGUAGES: dict[str, tuple[Language, ...]] = {
    "ts_ls": (Language.TYPESCRIPT, Language.JAVASCRIPT),
    "tsserver": (Language.TYPESCRIPT, Language.JAVASCRIPT),
    "pyright": (Language.PYTHON,),
    "pylsp": (Language.PYTHON,),
    "rust_analyzer": (Language.RUST,),
    "gopls": (Language.GO,),
    "clangd": (Language.C, Language.CPP),
    "ccls": (Language.C, Language.CPP),
    "omnisharp": (Language.CSHARP,),
    "csharp_ls": (Language.CSHARP,),
    "jdtls": (Language.JAVA,),
    "lua_ls": (Language.LUA,),
    "sumneko_lua": (Language.LUA,),
}

THEME_REPOSITORIES: dict[Theme, str] = {
    Theme.CATPPUCCIN: "catppuccin/nvim",
    Theme.GRUVBOX: "ellisonleao/gruvbox.nvim",
    Theme.TOKYONIGHT: "folke/tokyonight.nvim",
    Theme.NORD: "shaunsingh/nord.nvim",
    Theme.ONEDARK: "navarasu/onedark.nvim",
}

PLUGIN_ALIASES: dict[Plugin, tuple[str, ...]] = {
    Plugin.TABBUFLINE: ("nvchad/ui", "nvchad.tabufline"),
    Plugin.DASHBOARD: ("dashboard-nvim", "goolord/alpha-nvim"),
}

# Right-hand sides of hand-written configs
LEGACY_COMMANDS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("save_file", re.compile(r"^(:w(rite)?\b|<cmd>w(rite)?<CR>)")),
    ("quit", re.compile(r"^(:q(uit)?\b|<cmd>q(uit)?<CR>)")),
    ("split_vertical", re.compile(r"^(:vs(plit)?\b|<cmd>vs<CR>)")),
    ("split_horizontal", re.compile(r"^(:sp(lit)?\b|<cmd>sp<CR>)")),
    ("buffer_close", re.compile(r"bdelete|:bd\b")),
    ("terminal_toggle", re.compile(r"terminal", re.IGNORECASE)),
)


def _unescape(text: str) -> str:
    return re.sub(r"\\(.)", lambda m: _UNESCAPES.get(m.group(1), m.group(1)), text)


def _string_value(single: Optional[str], double: Optional[str]) -> str:
    return _unescape(single if single is not None else (double or ""))


def _detect_leader(content: str) -> str:
    match = LEADER_RE.search(content)
    if not match:
        return " "
    leader = _string_value(match.group(1), match.group(2))
    return leader if len(leader) == 1 else " "


def _detect_languages(content: str) -> list[str]:
    found: set[Language] = set()
    for server, languages in SERVER_LANGUAGES.items():
        if re.search(rf"\b{server}\b", content):
            found.update(languages)
    return [lang.value for lang in Language.known() if lang in found]


def _detect_theme(content: str) -> str:
    match = COLORSCHEME_RE.search(content)
    if match:
        name = match.group(1).lower()
        for theme in THEME_REPOSITORIES:
            if name.startswith(theme.value):
                return theme.value
    lowered = content.lower()
    for theme, repo in THEME_REPOSITORIES.items():
        if repo in lowered:
            return theme.value
    return ""


def _detect_plugins(content: str) -> list[str]:
    lowered = content.lower()
    plugins: list[str] = []
    for plugin in Plugin.known():
        needles = (PLUGIN_REPOSITORIES[plugin] or "",) + PLUGIN_ALIASES.get(plugin, ())
        if any(needle and needle.lower() in lowered for needle in needles):
            plugins.append(plugin.value)
    return plugins


def _detect_custom_plugins(content: str) -> dict[str, str]:
    custom: dict[str, str] = {}
    in_section = False
    for line in content.splitlines():
        if line.strip() == "-- Custom plugins":
            in_section = True
            continue
        if not in_section:
            continue
        match = CUSTOM_SPEC_RE.match(line)
        if not match:
            break
        repository = match.group(1)
        custom[custom_plugin_id(repository.split("/")[1])] = repository
    return custom


def _detect_flags(content: str) -> list[str]:
    flags: list[str] = []
    if re.search(r"vim\.(opt|wo)\.number\s*=\s*true", content):
        flags.append("line_numbers")
    if AUGROUP in content or re.search(r"(TextChanged|InsertLeave|FocusLost)[^\n]*\n(.*\n){0,12}.*\bwrite\b", content):
        flags.append("auto_save")
    if re.search(r"vim\.(opt|wo)\.wrap\s*=\s*true", content):
        flags.append("wrap_text")
    return flags


def _command_index() -> dict[tuple[str, str], list[str]]:
    index: dict[tuple[str, str], list[str]] = {}
    for action in ACTIONS:
        command = KEYMAP_COMMANDS.get(action.id)
        if command is None:
            continue
        index.setdefault((action.mode.value, command[0]), []).append(action.id)
    for command in TERMINAL_COMMANDS.values():
        index.setdefault(("n", command), []).append("terminal_toggle")
    return index


def _detect_keymaps(content: str) -> dict[str, str]:
    index = _command_index()
    keymaps: dict[str, str] = {}
    for match in KEYMAP_RE.finditer(content):
        mode = _string_value(match.group(1), match.group(2))
        chord = _string_value(match.group(3), match.group(4))
        if match.group(5).startswith("function()"):
            rhs = match.group(5)
        else:
            rhs = _string_value(match.group(6), match.group(7))

        candidates = [a for a in index.get((mode, rhs), []) if a not in keymaps]
        if not candidates and mode == "n":
            candidates = [a for a, pattern in LEGACY_COMMANDS if a not in keymaps and pattern.search(rhs)]
        if candidates and chord:
            keymaps[candidates[0]] = chord
    return keymaps


def import_init_lua(content: str) -> Selection:
    """
    Recover a selection from the text of an init.lua.

    Detection is pattern based: LSP server names select languages, the
    colorscheme call or theme repository selects the theme, plugin
    repositories select plugins, and vim.keymap.set statements whose
    right-hand side matches a known command recover keymaps. Anything
    unrecognized is ignored.

    Args:
        content: init.lua source.

    Returns:
        Detected selection; settings are left at their defaults.
    """
    custom = _detect_custom_plugins(content)
    return Selection(
        languages=_detect_languages(content),
        theme=_detect_theme(content),
        plugins=_detect_plugins(content) + list(custom),
        flags=_detect_flags(content),
        leader_key=_detect_leader(content),
        keymaps=_detect_keymaps(content),
        custom_plugins=custom,
    )
