# nvimgen Language Catalog
# Supported languages and their LSP, formatter and parser tooling

from enum import Enum


class Language(str, Enum):
    """Languages with built-in tooling support."""

    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    RUST = "rust"
    GO = "go"
    C = "c"
    CPP = "cpp"
    CSHARP = "csharp"
    JAVA = "java"
    LUA = "lua"
    UNRECOGNIZED = "unrecognized"

    @classmethod
    def parse(cls, value: str) -> "Language":
        """Map an identifier to a language, or UNRECOGNIZED."""
        try:
            member = cls(value.strip().lower())
        except ValueError:
            return cls.UNRECOGNIZED
        return member

    @classmethod
    def known(cls) -> list["Language"]:
        """Return all selectable languages in catalog order."""
        return [lang for lang in cls if lang is not cls.UNRECOGNIZED]


LANGUAGE_LABELS: dict[Language, str] = {
    Language.TYPESCRIPT: "TypeScript",
    Language.JAVASCRIPT: "JavaScript",
    Language.PYTHON: "Python",
    Language.RUST: "Rust",
    Language.GO: "Go",
    Language.C: "C",
    Language.CPP: "C++",
    Language.CSHARP: "C#",
    Language.JAVA: "Java",
    Language.LUA: "Lua",
    Language.UNRECOGNIZED: "Unrecognized",
}

# mason-lspconfig server names
LSP_SERVERS: dict[Language, str | None] = {
    Language.TYPESCRIPT: "ts_ls",
    Language.JAVASCRIPT: "ts_ls",
    Language.PYTHON: "pyright",
    Language.RUST: "rust_analyzer",
    Language.GO: "gopls",
    Language.C: "clangd",
    Language.CPP: "clangd",
    Language.CSHARP: "omnisharp",
    Language.JAVA: "jdtls",
    Language.LUA: "lua_ls",
    Language.UNRECOGNIZED: None,
}

# none-ls builtin formatters
FORMATTERS: dict[Language, str | None] = {
    Language.TYPESCRIPT: "prettier",
    Language.JAVASCRIPT: "prettier",
    Language.PYTHON: "black",
    Language.RUST: "rustfmt",
    Language.GO: None,
    Language.C: None,
    Language.CPP: None,
    Language.CSHARP: None,
    Language.JAVA: None,
    Language.LUA: "stylua",
    Language.UNRECOGNIZED: None,
}

TREESITTER_PARSERS: dict[Language, str | None] = {
    Language.TYPESCRIPT: "typescript",
    Language.JAVASCRIPT: "javascript",
    Language.PYTHON: "python",
    Language.RUST: "rust",
    Language.GO: "go",
    Language.C: "c",
    Language.CPP: "cpp",
    Language.CSHARP: "c_sharp",
    Language.JAVA: "java",
    Language.LUA: "lua",
    Language.UNRECOGNIZED: None,
}


def recognized_languages(languages: list[str]) -> list[Language]:
    """
    Filter a list of language ids down to recognized languages.

    Order is preserved and duplicates are dropped.

    Args:
        languages: Raw language identifiers.

    Returns:
        Recognized languages in input order.
    """
    result: list[Language] = []
    for value in languages:
        lang = Language.parse(value)
        if lang is not Language.UNRECOGNIZED and lang not in result:
            result.append(lang)
    return result


def _unique(values: list[str | None]) -> list[str]:
    result: list[str] = []
    for value in values:
        if value and value not in result:
            result.append(value)
    return result


def lsp_servers_for(languages: list[str]) -> list[str]:
    """Return de-duplicated LSP server names for the given languages."""
    return _unique([LSP_SERVERS[lang] for lang in recognized_languages(languages)])


def formatters_for(languages: list[str]) -> list[str]:
    """Return de-duplicated formatter names for the given languages."""
    return _unique([FORMATTERS[lang] for lang in recognized_languages(languages)])


def parsers_for(languages: list[str]) -> list[str]:
    """Return de-duplicated treesitter parser names for the given languages."""
    return _unique([TREESITTER_PARSERS[lang] for lang in recognized_languages(languages)])
