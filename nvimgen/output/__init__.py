# nvimgen Output Module
# Rich console output

from nvimgen.output.console import Console, create_console

__all__ = [
    "Console",
    "create_console",
]
