"""nvimgen - Neovim configuration generator.

Resolves a structured selection of languages, theme, plugins, editor
settings and keybindings into a deterministic init.lua, and delivers
the result to the clipboard, a file, a connected directory or a
companion listener running inside Neovim.
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Selection",
    "Session",
    "generate_init_lua",
    "decode_query",
    "encode_query",
]


def __getattr__(name: str):
    """Lazy import to avoid loading dependencies during setup."""
    if name == "Selection":
        from nvimgen.selection import Selection

        return Selection
    if name == "Session":
        from nvimgen.session import Session

        return Session
    if name == "generate_init_lua":
        from nvimgen.generate import generate_init_lua

        return generate_init_lua
    if name in ("decode_query", "encode_query"):
        from nvimgen import share

        return getattr(share, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
