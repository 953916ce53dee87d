# nvimgen Analysis
# Health check analysis, init.lua import and plugin search

from nvimgen.analysis.health import HealthIssue, IssueType, parse_health_check, summarize_issues
from nvimgen.analysis.importer import import_init_lua
from nvimgen.analysis.plugin_search import (
    PLUGIN_DIRECTORY,
    PluginSearchResult,
    plugin_id_from_url,
    repository_from_url,
    search_plugins,
)

__all__ = [
    "HealthIssue",
    "IssueType",
    "PLUGIN_DIRECTORY",
    "PluginSearchResult",
    "import_init_lua",
    "parse_health_check",
    "plugin_id_from_url",
    "repository_from_url",
    "search_plugins",
    "summarize_issues",
]
