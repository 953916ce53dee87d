# nvimgen Plugin Search
# Keyword search over a bundled directory of popular Neovim plugins

from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

from nvimgen.catalog.plugins import custom_plugin_id

DEFAULT_LIMIT = 6
DESCRIPTION_LIMIT = 200


@dataclass(frozen=True)
class PluginSearchResult:
    """A plugin directory entry."""

    title: str
    description: str
    url: str

    @property
    def plugin_id(self) -> str:
        return plugin_id_from_url(self.url)

    @property
    def repository(self) -> Optional[str]:
        return repository_from_url(self.url)


PLUGIN_DIRECTORY: tuple[PluginSearchResult, ...] = (
    PluginSearchResult(
        "nvim-tree.lua - A File Explorer For Neovim Written In Lua",
        "A file explorer tree for neovim written in lua. Provides filesystem operations and Git integration. "
        "Modern file explorer with extensive customization options.",
        "https://github.com/nvim-tree/nvim-tree.lua",
    ),
    PluginSearchResult(
        "telescope.nvim - Highly extendable fuzzy finder over lists",
        "Telescope.nvim is a highly extendable fuzzy finder over lists. Built on the latest awesome features "
        "from neovim core. Telescope is centered around modularity.",
        "https://github.com/nvim-telescope/telescope.nvim",
    ),
    PluginSearchResult(
        "oil.nvim - Neovim file explorer: edit your filesystem like a buffer",
        "A file explorer that allows you to browse and edit your filesystem like a buffer. Supports various "
        "options and adapters, such as SSH for accessing files remotely.",
        "https://github.com/stevearc/oil.nvim",
    ),
    PluginSearchResult(
        "nvim-cmp - A completion plugin for neovim coded in Lua",
        "A completion engine plugin for neovim written in Lua. Completion sources are installed from external "
        "repositories and 'sourced'. Popular completion plugin.",
        "https://github.com/hrsh7th/nvim-cmp",
    ),
    PluginSearchResult(
        "lualine.nvim - A blazing fast and easy to configure statusline plugin",
        "A blazing fast and easy to configure neovim statusline plugin written in pure lua. Provides beautiful "
        "and customizable statusline with good performance.",
        "https://github.com/nvim-lualine/lualine.nvim",
    ),
    PluginSearchResult(
        "which-key.nvim - Displays a popup with possible keybindings",
        "WhichKey is a lua plugin for Neovim that displays a popup with possible key bindings of the command "
        "you started typing. Great for discovering keybindings.",
        "https://github.com/folke/which-key.nvim",
    ),
    PluginSearchResult(
        "gitsigns.nvim - Git integration for buffers",
        "Super fast git decorations implemented purely in lua/teal. Git integration for buffers with signs, "
        "hunks, blame, and more. Essential for git workflow.",
        "https://github.com/lewis6991/gitsigns.nvim",
    ),
    PluginSearchResult(
        "mini.files - Navigate and manipulate file system",
        "Navigate and manipulate file system. Part of 'mini.nvim' library. Simple and efficient file "
        "management within Neovim.",
        "https://github.com/echasnovski/mini.files",
    ),
)


def repository_from_url(url: str) -> Optional[str]:
    """
    Extract "owner/repo" from a GitHub URL.

    Returns:
        The repository, or None if the URL has fewer than two path segments.
    """
    parts = [part for part in urlsplit(url.strip()).path.split("/") if part]
    if len(parts) < 2:
        return None
    repo = parts[1][:-4] if parts[1].endswith(".git") else parts[1]
    return f"{parts[0]}/{repo}"


def plugin_id_from_url(url: str) -> str:
    """Build the custom-<repo> plugin id for a plugin URL."""
    parts = [part for part in url.strip().rstrip("/").split("/") if part]
    name = parts[-1] if parts else url
    if name.endswith(".git"):
        name = name[:-4]
    return custom_plugin_id(name)


def _matches(entry: PluginSearchResult, query: str) -> bool:
    title = entry.title.lower()
    description = entry.description.lower()
    if query in title or query in description:
        return True
    return any(term in title or term in description for term in query.split())


def search_plugins(query: str, limit: int = DEFAULT_LIMIT) -> list[PluginSearchResult]:
    """
    Search the plugin directory.

    An entry matches when the whole query, or any whitespace separated
    term of it, occurs in its title or description (case-insensitive).
    Descriptions longer than 200 characters are truncated with "...".

    Args:
        query: Search text.
        limit: Maximum number of results.

    Returns:
        Matching entries in directory order; empty for a blank query.
    """
    needle = query.strip().lower()
    if not needle:
        return []
    results: list[PluginSearchResult] = []
    for entry in PLUGIN_DIRECTORY:
        if not _matches(entry, needle):
            continue
        description = entry.description
        if len(description) > DESCRIPTION_LIMIT:
            description = description[:DESCRIPTION_LIMIT] + "..."
        results.append(PluginSearchResult(entry.title, description, entry.url))
        if len(results) >= limit:
            break
    return results
