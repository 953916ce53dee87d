# nvimgen Lua Helpers
# Literal escaping for generated Lua source

from typing import Any

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
}


def lua_string(value: str) -> str:
    """Render text as a single-quoted Lua string literal."""
    return "'" + "".join(_ESCAPES.get(ch, ch) for ch in value) + "'"


def lua_bool(value: Any) -> str:
    """Render a truthy value as a Lua boolean."""
    return "true" if value else "false"


def lua_list(values: list[str]) -> str:
    """Render strings as a Lua list table."""
    if not values:
        return "{}"
    return "{ " + ", ".join(lua_string(v) for v in values) + " }"


def indent(block: str, level: int) -> str:
    """Indent every non-empty line of a block by level * 2 spaces."""
    pad = "  " * level
    return "\n".join(pad + line if line else line for line in block.split("\n"))
