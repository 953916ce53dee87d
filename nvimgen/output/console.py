# nvimgen Console Output
# Rich-based console output for user-friendly display

from typing import Any, Iterable, Optional

from rich.console import Console as RichConsole
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from nvimgen.analysis.health import HealthIssue, IssueType, summarize_issues
from nvimgen.analysis.plugin_search import PluginSearchResult
from nvimgen.catalog.actions import ActionEntry
from nvimgen.catalog.presets import PresetStack
from nvimgen.catalog.settings import SETTING_DEFINITIONS
from nvimgen.config.schema import NvimgenConfig
from nvimgen.delivery.result import DeliveryResult
from nvimgen.resolve.keymaps import effective_chord, has_conflict, is_keymap_changed
from nvimgen.resolve.settings import get_effective, is_changed, is_visible


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "on" if value else "off"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(item) for item in value) or "-"
    if value == "":
        return "-"
    return str(value)


class Console:
    """
    Console output manager using Rich.

    Provides formatted output for generated configs, catalogs and delivery results.
    """

    def __init__(self, *, verbose: bool = False, colored: bool = True):
        """
        Initialize console.

        Args:
            verbose: Enable verbose output.
            colored: Enable colored output.
        """
        self.verbose = verbose
        self._console = RichConsole(force_terminal=colored, no_color=not colored)

    def print(self, *args, **kwargs) -> None:
        """Print to console."""
        self._console.print(*args, **kwargs)

    def print_error(self, message: str) -> None:
        """Print error message."""
        self._console.print(f"[red]Error:[/red] {escape(message)}")

    def print_warning(self, message: str) -> None:
        """Print warning message."""
        self._console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def print_success(self, message: str) -> None:
        """Print success message."""
        self._console.print(f"[green]{escape(message)}[/green]")

    def print_info(self, message: str) -> None:
        """Print info message."""
        self._console.print(f"[blue]{escape(message)}[/blue]")

    def print_lua(self, source: str, *, line_numbers: bool = False) -> None:
        """Print Lua source with syntax highlighting."""
        self._console.print(Syntax(source, "lua", line_numbers=line_numbers, word_wrap=False))

    def print_keymaps(
        self,
        actions: list[ActionEntry],
        keymaps: dict[str, str],
        conflicts: dict[str, set[str]],
    ) -> None:
        """
        Print the keymap table for the active actions.

        Conflicting chords are shown in red, chords that differ from the
        catalog default in yellow.

        Args:
            actions: Active actions in display order.
            keymaps: Explicit user overrides.
            conflicts: Conflict map from compute_conflicts.
        """
        table = Table(show_header=True, header_style="bold")
        table.add_column("Section", style="dim")
        table.add_column("Action")
        table.add_column("Id", style="dim")
        table.add_column("Mode")
        table.add_column("Chord")

        for action in actions:
            chord = effective_chord(action.id, keymaps)
            display = escape(chord) if chord else "[dim]unbound[/dim]"
            if has_conflict(action.id, conflicts):
                display = f"[red]{escape(chord)} (conflict)[/red]"
            elif is_keymap_changed(action.id, keymaps):
                display = f"[yellow]{display}[/yellow]"
            table.add_row(action.section, escape(action.name), action.id, action.mode.label, display)

        self._console.print(table)

        if conflicts:
            self._console.print()
            for key, ids in sorted(conflicts.items()):
                self._console.print(f"[red]![/red] {escape(key)}: {', '.join(sorted(ids))}")

    def print_settings(
        self,
        settings: dict[str, Any],
        plugins: list[str],
        *,
        show_hidden: bool = False,
        category: Optional[str] = None,
    ) -> None:
        """
        Print settings with their effective values.

        Args:
            settings: Settings object.
            plugins: Selected plugin ids, for visibility.
            show_hidden: Also list settings that do not apply to the selection.
            category: Only list one category.
        """
        table = Table(show_header=True, header_style="bold")
        table.add_column("Setting")
        table.add_column("Value")
        table.add_column("Default", style="dim")
        table.add_column("Description", style="dim")

        for definition in SETTING_DEFINITIONS:
            if category and definition.category != category:
                continue
            visible = is_visible(definition, settings, plugins)
            if not visible and not show_hidden:
                continue

            value = escape(_format_value(get_effective(settings, definition.id)))
            if is_changed(settings, definition.id):
                value = f"[yellow]{value} *[/yellow]"
            name = definition.id if visible else f"[dim]{definition.id} (hidden)[/dim]"
            table.add_row(
                name, value, escape(_format_value(definition.default)), escape(definition.description)
            )

        self._console.print(table)

    def print_presets(self, presets: Iterable[PresetStack]) -> None:
        """Print available preset stacks."""
        table = Table(show_header=True, header_style="bold")
        table.add_column("Preset")
        table.add_column("Languages")
        table.add_column("Theme")
        table.add_column("Plugins", style="dim")

        for preset in presets:
            table.add_row(
                f"[bold]{preset.id}[/bold]\n[dim]{escape(preset.description)}[/dim]",
                ", ".join(preset.languages),
                preset.theme,
                ", ".join(preset.plugins),
            )

        self._console.print(table)

    def print_health_issues(self, issues: list[HealthIssue]) -> None:
        """Print analyzed health check issues and a summary panel."""
        if not issues:
            self._console.print("[dim]No health check entries found[/dim]")
            return

        icons = {
            IssueType.ERROR: "[red]✗[/red]",
            IssueType.WARNING: "[yellow]⚠[/yellow]",
            IssueType.OK: "[green]✓[/green]",
        }
        for issue in issues:
            if issue.type is IssueType.OK and not self.verbose:
                continue
            self._console.print(f"{icons[issue.type]} [bold]{escape(issue.category)}[/bold] {escape(issue.message)}")
            if issue.suggestion:
                self._console.print(f"    [dim]→ {escape(issue.suggestion)}[/dim]")

        counts = summarize_issues(issues)
        border = "red" if counts[IssueType.ERROR] else "yellow" if counts[IssueType.WARNING] else "green"
        self._console.print(
            Panel(
                f"Errors: {counts[IssueType.ERROR]}\n"
                f"Warnings: {counts[IssueType.WARNING]}\n"
                f"OK: {counts[IssueType.OK]}",
                title="Health Check",
                border_style=border,
            )
        )

    def print_search_results(self, results: list[PluginSearchResult], selected: Iterable[str] = ()) -> None:
        """Print plugin search results, marking plugins already selected."""
        if not results:
            self._console.print("[dim]No plugins found. Try keywords like 'completion', 'statusline' or 'file explorer'.[/dim]")
            return

        chosen = set(selected)
        table = Table(show_header=True, header_style="bold")
        table.add_column("Plugin")
        table.add_column("Repository")
        table.add_column("Id", style="dim")
        table.add_column("Description", style="dim")

        for result in results:
            marker = "[green]✓[/green] " if result.plugin_id in chosen else ""
            table.add_row(
                marker + escape(result.title.split(" - ")[0]),
                result.repository or "-",
                result.plugin_id,
                escape(result.description),
            )

        self._console.print(table)

    def print_delivery_result(self, result: DeliveryResult) -> None:
        """Print the outcome of a delivery attempt."""
        if result.success:
            self._console.print(f"[green]✓[/green] {escape(result.message)}")
        else:
            self._console.print(f"[red]✗[/red] {result.target}: {escape(result.error or 'unknown error')}")

    def print_config_summary(self, config_path: str, config: NvimgenConfig) -> None:
        """Print configuration summary."""
        token = "set" if config.listener.token else "none"
        self._console.print(
            Panel(
                f"Config: {config_path}\n"
                f"Listener: {config.listener.base_url} (token: {token}, upload: {config.listener.upload.value})\n"
                f"Output: {config.delivery.output_path} (backup: {'on' if config.delivery.backup else 'off'})\n"
                f"Share: {config.share.base_url}",
                title="nvimgen Configuration",
                border_style="blue",
            )
        )

    def confirm(self, message: str, default: bool = False) -> bool:
        """
        Ask for confirmation.

        Args:
            message: Confirmation message.
            default: Default value if user just presses enter.

        Returns:
            True if confirmed.
        """
        suffix = " [Y/n]" if default else " [y/N]"
        response = self._console.input(f"{message}{escape(suffix)}: ").strip().lower()

        if not response:
            return default

        return response in ("y", "yes")


def create_console(*, verbose: bool = False, colored: bool = True) -> Console:
    """
    Create a console instance.

    Args:
        verbose: Enable verbose output.
        colored: Enable colored output.

    Returns:
        Console instance.
    """
    return Console(verbose=verbose, colored=colored)
