"""Click-based CLI for nvimgen - Neovim configuration generator."""

from __future__ import annotations

import asyncio
import functools
import sys
from pathlib import Path
from typing import Any, Callable, Optional

import click
import yaml
from pydantic import ValidationError
from rich.markup import escape

from nvimgen import __version__
from nvimgen.analysis import import_init_lua, parse_health_check, search_plugins, summarize_issues
from nvimgen.analysis.health import IssueType
from nvimgen.catalog.actions import get_action
from nvimgen.catalog.presets import PRESETS, get_preset
from nvimgen.catalog.settings import CATEGORIES, get_definition
from nvimgen.config import (
    NvimgenConfig,
    UploadFormat,
    ensure_config_exists,
    get_config_path,
    load_or_default_config,
    load_selection,
    save_selection,
    validate_config_file,
)
from nvimgen.delivery import ListenerClient, copy_to_clipboard, push_to_listener, save_to_file
from nvimgen.generate import generate_installer_script, generate_listener_lua, installer_filename
from nvimgen.generate.installer import InstallerOS
from nvimgen.output import Console, create_console
from nvimgen.resolve import active_actions, parse_setting_value
from nvimgen.selection import Selection
from nvimgen.session import Session
from nvimgen.share import decode_query, encode_query, share_url
from nvimgen.utils.platform import get_current_platform

PRESET_IDS = [preset.id for preset in PRESETS]


def _console(ctx: click.Context) -> Console:
    return ctx.obj["console"]


def _app_config(ctx: click.Context) -> NvimgenConfig:
    return ctx.obj["config"]


@click.group()
@click.version_option(version=__version__, prog_name="nvimgen")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: ~/.config/nvimgen/config.yaml or $NVIMGEN_CONFIG)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool, no_color: bool) -> None:
    """nvimgen - Neovim configuration generator.

    Turns a selection of languages, theme, plugins, editor settings and
    keybindings into a ready-to-use init.lua.

    \b
    Selections can be given as:
      --selection FILE   YAML file written by 'nvimgen import' or --save-selection
      --query TEXT       shareable link or query string
      --preset NAME      one of the built-in preset stacks
    and refined with -l/--language, -p/--plugin, --theme, --set and --keymap.
    """
    ctx.ensure_object(dict)
    path = config_path or get_config_path()

    try:
        app_config = load_or_default_config(path)
    except (ValidationError, ValueError, yaml.YAMLError) as e:
        # 'config' subcommands must still run to diagnose the file
        if ctx.invoked_subcommand != "config":
            create_console(colored=not no_color).print_error(f"Invalid configuration {path}: {e}")
            sys.exit(1)
        app_config = NvimgenConfig()

    ctx.obj["config_path"] = path
    ctx.obj["config"] = app_config
    ctx.obj["console"] = create_console(
        verbose=verbose or app_config.output.verbose,
        colored=app_config.output.colored and not no_color,
    )


# ============================================================================
# Selection Input
# ============================================================================


def _split_assignment(value: str, option: str) -> tuple[str, str]:
    if "=" not in value:
        raise click.BadParameter(f"expected KEY=VALUE, got {value!r}", param_hint=option)
    key, _, raw = value.partition("=")
    return key.strip(), raw


def selection_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the shared selection input options to a command."""
    options = [
        click.option(
            "--selection",
            "selection_file",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Load a selection from a YAML file",
        ),
        click.option("--query", "-q", help="Load a selection from a share link or query string"),
        click.option("--preset", type=click.Choice(PRESET_IDS), help="Start from a preset stack"),
        click.option("--language", "-l", "languages", multiple=True, help="Add a language (repeatable)"),
        click.option("--theme", "-t", help="Colorscheme (catppuccin, gruvbox, tokyonight, nord, onedark, default)"),
        click.option("--plugin", "-p", "plugins", multiple=True, help="Add a plugin (repeatable)"),
        click.option("--flag", "flags", multiple=True, help="Add a legacy flag: line_numbers, auto_save, wrap_text"),
        click.option("--set", "assignments", multiple=True, help="Set a setting: ID=VALUE (repeatable)"),
        click.option("--keymap", "keymaps", multiple=True, help="Bind an action: ACTION=CHORD (repeatable)"),
        click.option("--leader", help="Leader key: a single character or 'space'"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _base_selection(selection_file: Optional[Path], query: Optional[str], preset: Optional[str]) -> Selection:
    if sum(value is not None for value in (selection_file, query, preset)) > 1:
        raise click.UsageError("Use only one of --selection, --query and --preset")
    if selection_file is not None:
        return load_selection(selection_file)
    if query is not None:
        return decode_query(query)
    if preset is not None:
        return get_preset(preset).to_selection()
    return Selection()


def build_session(ctx: click.Context, options: dict[str, Any]) -> Session:
    """
    Build a session from the shared selection options.

    Languages, plugins and flags are added to the base selection; theme,
    leader, settings and keymaps replace it. Keymap defaults for every
    active plugin are filled in.

    Raises:
        click.BadParameter: For malformed or unknown settings, actions or leader keys.
    """
    try:
        base = _base_selection(options["selection_file"], options["query"], options["preset"])
    except (ValueError, ValidationError) as e:
        _console(ctx).print_error(str(e))
        sys.exit(1)

    session = Session(base, config=_app_config(ctx))
    current = session.selection

    updates: dict[str, Any] = {}
    if options["languages"]:
        updates["languages"] = [*current.languages, *options["languages"]]
    if options["flags"]:
        updates["flags"] = [*current.flags, *options["flags"]]
    if options["theme"] is not None:
        updates["theme"] = options["theme"]
    if options["leader"] is not None:
        try:
            updates["leader_key"] = Selection(leader_key=options["leader"]).leader_key
        except ValidationError:
            raise click.BadParameter(
                f"must be a single character or 'space', got {options['leader']!r}", param_hint="--leader"
            ) from None
    if updates:
        session.update(**updates)

    session.set_plugins([*current.plugins, *options["plugins"]])

    for assignment in options["assignments"]:
        setting_id, raw = _split_assignment(assignment, "--set")
        definition = get_definition(setting_id)
        if definition is None:
            raise click.BadParameter(f"unknown setting {setting_id!r}", param_hint="--set")
        try:
            session.set_setting(setting_id, parse_setting_value(definition, raw))
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--set") from None

    for assignment in options["keymaps"]:
        action_id, chord = _split_assignment(assignment, "--keymap")
        if get_action(action_id) is None:
            raise click.BadParameter(f"unknown action {action_id!r}", param_hint="--keymap")
        session.set_keymap(action_id, chord)

    return session


def _selection_kwargs(kwargs: dict[str, Any]) -> dict[str, Any]:
    keys = (
        "selection_file", "query", "preset", "languages", "theme",
        "plugins", "flags", "assignments", "keymaps", "leader",
    )
    return {key: kwargs.pop(key) for key in keys}


def with_session(func: Callable[..., Any]) -> Callable[..., Any]:
    """Resolve selection options into a Session passed as the first argument."""

    @selection_options
    @click.pass_context
    @functools.wraps(func)
    def wrapper(ctx: click.Context, **kwargs: Any) -> Any:
        session = build_session(ctx, _selection_kwargs(kwargs))
        return ctx.invoke(func, session, **kwargs)

    return wrapper


def _deliver_or_exit(console: Console, result: Any) -> None:
    console.print_delivery_result(result)
    if not result.success:
        sys.exit(1)


# ============================================================================
# Generation Commands
# ============================================================================


@cli.command()
@with_session
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write init.lua to a file")
@click.option("--save", is_flag=True, help="Write to the configured output path (delivery.output_path)")
@click.option("--to-directory", is_flag=True, help="Write into the connected directory (see 'nvimgen connect')")
@click.option("--no-backup", is_flag=True, help="Do not back up an existing file before overwriting")
@click.option("--date", "generated_on", type=click.DateTime(formats=["%Y-%m-%d"]), help="Date for the header")
@click.option("--pretty", is_flag=True, help="Syntax-highlight the output")
@click.option(
    "--save-selection",
    "selection_out",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also save the resolved selection as YAML",
)
@click.pass_context
def generate(
    ctx: click.Context,
    session: Session,
    output: Optional[Path],
    save: bool,
    to_directory: bool,
    no_backup: bool,
    generated_on: Any,
    pretty: bool,
    selection_out: Optional[Path],
) -> None:
    """Generate init.lua from a selection.

    \b
    Examples:
        nvimgen generate --preset web-dev
        nvimgen generate -l python -p telescope --theme gruvbox -o init.lua
        nvimgen generate --query "languages=rust&theme=nord" --save
    """
    console = _console(ctx)
    text = session.generate(generated_on.date() if generated_on else None)
    backup = session.config.delivery.backup and not no_backup

    if selection_out is not None:
        save_selection(session.selection, selection_out)
        console.print_info(f"Selection saved to {selection_out}")

    for conflict_key, ids in sorted(session.conflicts().items()):
        console.print_warning(f"Keymap conflict on {conflict_key}: {', '.join(sorted(ids))}")

    if to_directory:
        _deliver_or_exit(console, session.directory_store.write("init.lua", text, backup=backup))
        return

    target = output or (Path(session.config.delivery.output_path) if save else None)
    if target is not None:
        _deliver_or_exit(console, save_to_file(text, target, backup=backup))
        return

    if pretty:
        console.print_lua(text)
    else:
        click.echo(text, nl=False)


@cli.command()
@with_session
@click.pass_context
def copy(ctx: click.Context, session: Session) -> None:
    """Generate init.lua and copy it to the system clipboard."""
    _deliver_or_exit(_console(ctx), copy_to_clipboard(session.generate()))


@cli.command()
@with_session
@click.option("--file", "source", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Push an existing file instead")
@click.option("--filename", default="init.lua", show_default=True, help="File name inside the Neovim config directory")
@click.option("--upload", type=click.Choice([u.value for u in UploadFormat]), help="Body format (default from config)")
@click.pass_context
def push(
    ctx: click.Context,
    session: Session,
    source: Optional[Path],
    filename: str,
    upload: Optional[str],
) -> None:
    """Push init.lua to the listener running inside Neovim.

    The listener script is produced by 'nvimgen listener'.
    """
    console = _console(ctx)
    content = source.read_text(encoding="utf-8") if source else session.generate()
    if upload:
        listener = session.config.listener.model_copy(update={"upload": UploadFormat(upload)})
        session.config = session.config.model_copy(update={"listener": listener})

    async def _push() -> Any:
        try:
            return await push_to_listener(content, filename, client=session.listener_client)
        finally:
            await session.aclose()

    _deliver_or_exit(console, asyncio.run(_push()))


@cli.command()
@click.pass_context
def ping(ctx: click.Context) -> None:
    """Check whether the Neovim listener is reachable."""
    console = _console(ctx)
    listener = _app_config(ctx).listener

    async def _ping() -> bool:
        async with ListenerClient(listener) as client:
            return await client.ping()

    if asyncio.run(_ping()):
        console.print_success(f"Listener active at {listener.base_url}")
    else:
        console.print_error(f"No listener reachable at {listener.base_url}")
        sys.exit(1)


@cli.command()
@with_session
@click.option("--base-url", help="Base URL of the link (default from config)")
@click.option("--query-only", is_flag=True, help="Print only the query string")
@click.pass_context
def share(ctx: click.Context, session: Session, base_url: Optional[str], query_only: bool) -> None:
    """Print a shareable link for a selection."""
    if query_only:
        click.echo(encode_query(session.selection))
        return
    click.echo(share_url(session.selection, base_url or session.config.share.base_url))


@cli.command()
@with_session
@click.option(
    "--os",
    "os_name",
    type=click.Choice([o.value for o in InstallerOS]),
    default=get_current_platform,
    show_default="current platform",
    help="Target operating system",
)
@click.option("--output", "-o", type=click.Path(file_okay=False, path_type=Path), help="Directory to write the script to")
@click.pass_context
def installer(ctx: click.Context, session: Session, os_name: str, output: Optional[Path]) -> None:
    """Generate an installer script that sets up Neovim and the config."""
    script = generate_installer_script(session.selection, session.generate(), os_name)
    if output is None:
        click.echo(script, nl=False)
        return
    _deliver_or_exit(_console(ctx), save_to_file(script, output / installer_filename(os_name), backup=False))


@cli.command()
@click.option("--port", type=click.IntRange(1, 65535), help="Listener port (default from config)")
@click.option("--token", help="Bearer token the listener requires (default from config)")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Write the script to a file")
@click.pass_context
def listener(ctx: click.Context, port: Optional[int], token: Optional[str], output: Optional[Path]) -> None:
    """Generate the Lua listener that receives pushed configs inside Neovim.

    \b
    Install it with:
        nvimgen listener -o ~/.config/nvim/lua/nvimgen_listener.lua
    and add require("nvimgen_listener") to your init.lua.
    """
    listener_config = _app_config(ctx).listener
    script = generate_listener_lua(
        port or listener_config.port, token if token is not None else listener_config.token
    )
    if output is None:
        click.echo(script, nl=False)
        return
    _deliver_or_exit(_console(ctx), save_to_file(script, output, backup=False))


# ============================================================================
# Inspection Commands
# ============================================================================


@cli.command()
@with_session
@click.pass_context
def keymaps(ctx: click.Context, session: Session) -> None:
    """Show effective keybindings and conflicts for a selection."""
    selection = session.selection
    _console(ctx).print_keymaps(active_actions(selection.plugins), selection.keymaps, session.conflicts())


@cli.command()
@with_session
@click.option("--all", "show_hidden", is_flag=True, help="Include settings that do not apply to the selection")
@click.option("--category", "-c", type=click.Choice([c.id for c in CATEGORIES]), help="Only show one category")
@click.pass_context
def settings(ctx: click.Context, session: Session, show_hidden: bool, category: Optional[str]) -> None:
    """Show settings with effective values. Changed values are marked with *."""
    selection = session.selection
    _console(ctx).print_settings(selection.settings, selection.plugins, show_hidden=show_hidden, category=category)


@cli.command()
@click.pass_context
def presets(ctx: click.Context) -> None:
    """List preset stacks."""
    _console(ctx).print_presets(PRESETS)


@cli.command()
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.pass_context
def health(ctx: click.Context, file: Any) -> None:
    """Analyze :checkhealth output from FILE (or stdin).

    Exits with status 1 when errors are found.
    """
    issues = parse_health_check(file.read())
    _console(ctx).print_health_issues(issues)
    if summarize_issues(issues)[IssueType.ERROR]:
        sys.exit(1)


@cli.command("import")
@click.argument("file", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Save the selection as YAML")
@click.option("--query", "as_query", is_flag=True, help="Print the selection as a share query")
@click.pass_context
def import_config(ctx: click.Context, file: Any, output: Optional[Path], as_query: bool) -> None:
    """Recover a selection from an existing init.lua.

    \b
    Example:
        nvimgen import ~/.config/nvim/init.lua -o selection.yaml
        nvimgen generate --selection selection.yaml
    """
    console = _console(ctx)
    selection = import_init_lua(file.read())

    if as_query:
        click.echo(encode_query(selection))
    elif output is None:
        click.echo(yaml.dump(selection.model_dump(), default_flow_style=False, sort_keys=False, allow_unicode=True), nl=False)

    if output is not None:
        save_selection(selection, output)
        console.print_success(f"Selection saved to {output}")

    console.print_info(
        f"Detected {len(selection.languages)} language(s), {len(selection.plugins)} plugin(s), "
        f"{len(selection.keymaps)} keymap(s)"
    )


@cli.command()
@click.argument("query")
@click.option("--limit", default=6, show_default=True, type=click.IntRange(1, 50), help="Maximum results")
@click.pass_context
def search(ctx: click.Context, query: str, limit: int) -> None:
    """Search popular Neovim plugins.

    Add a result to a selection with --plugin <id> after registering its
    repository, or via 'nvimgen generate --query' with a custom entry.
    """
    _console(ctx).print_search_results(search_plugins(query, limit))


@cli.command()
@click.argument("directory", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option("--forget", is_flag=True, help="Disconnect the current directory")
@click.pass_context
def connect(ctx: click.Context, directory: Optional[Path], forget: bool) -> None:
    """Connect a Neovim config directory for 'generate --to-directory'.

    Without arguments, shows the connected directory.
    """
    console = _console(ctx)
    session = Session(config=_app_config(ctx))
    store = session.directory_store

    if forget:
        store.forget()
        console.print_success("Directory disconnected")
        return

    if directory is None:
        if store.directory is None:
            console.print_info("No directory connected")
        else:
            console.print(f"Connected: {store.directory}")
        return

    _deliver_or_exit(console, store.connect(directory))


# ============================================================================
# Configuration Commands
# ============================================================================


@cli.group()
def config() -> None:
    """Manage the nvimgen configuration file.

    \b
    Location: ~/.config/nvimgen/config.yaml (override with NVIMGEN_CONFIG)
    """
    pass


@config.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration")
@click.pass_context
def config_init(ctx: click.Context, force: bool) -> None:
    """Create a default configuration file."""
    console = _console(ctx)
    path: Path = ctx.obj["config_path"]

    if path.exists() and force:
        path.unlink()

    path, created = ensure_config_exists(path)
    if created:
        console.print_success(f"Created configuration: {path}")
    else:
        console.print_warning(f"Configuration already exists: {path} (use --force to overwrite)")


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    console = _console(ctx)
    path: Path = ctx.obj["config_path"]
    console.print_config_summary(str(path), _app_config(ctx))
    if not path.exists():
        console.print_info("Using built-in defaults. Run 'nvimgen config init' to create a file.")
    if console.verbose:
        data = _app_config(ctx).model_dump(mode="json")
        click.echo(yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True), nl=False)


@config.command("check")
@click.argument("file", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_context
def config_check(ctx: click.Context, file: Optional[Path]) -> None:
    """Validate a configuration file (default: the active one)."""
    console = _console(ctx)
    path = file or ctx.obj["config_path"]
    valid, errors = validate_config_file(path)

    if valid:
        console.print_success(f"Configuration is valid: {path}")
        return

    console.print_error(f"Configuration is invalid: {path}")
    for error in errors:
        console.print(f"  [red]•[/red] {escape(error)}")
    sys.exit(1)


if __name__ == "__main__":
    cli()
