# nvimgen init.lua Generator
# Composes every section of the generated configuration in fixed order

from datetime import date

from nvimgen.catalog.themes import Theme
from nvimgen.generate.keymaps import render_custom_keymaps, render_window_navigation
from nvimgen.generate.options import (
    render_baseline,
    render_behavior,
    render_editor,
    render_flags,
    render_header,
    render_interface,
    render_leader,
    render_performance,
)
from nvimgen.generate.plugins import render_plugin_section
from nvimgen.resolve.settings import sanitize_settings
from nvimgen.selection import Selection


def render_colorscheme(theme: str) -> str | None:
    """Colorscheme activation for a recognized, non-default theme."""
    parsed = Theme.parse(theme)
    if not parsed.is_override:
        return None
    return f"-- Set colorscheme\npcall(vim.cmd.colorscheme, '{parsed.value}')"


def generate_init_lua(selection: Selection, *, generated_on: date | None = None) -> str:
    """
    Render the init.lua for a selection.

    Output depends only on the selection and the date, so two calls with
    the same inputs return identical text. Unknown ids anywhere in the
    selection contribute nothing.

    Args:
        selection: The configuration to render.
        generated_on: Date stamped in the header; today if omitted.

    Returns:
        The complete init.lua text, newline terminated.
    """
    generated_on = generated_on or date.today()
    settings = sanitize_settings(selection.settings)

    blocks: list[str | None] = [
        render_header(selection.languages, selection.theme, generated_on),
        render_leader(selection.leader_key),
        render_baseline(),
        render_editor(settings),
        render_behavior(settings),
        render_interface(settings),
        render_performance(settings),
        *render_flags(selection.flags, settings),
        render_plugin_section(
            selection.languages,
            selection.theme,
            selection.plugins,
            selection.custom_plugins,
            settings,
        ),
        render_colorscheme(selection.theme),
        render_window_navigation(),
        render_custom_keymaps(selection.plugins, selection.keymaps, settings),
    ]
    return "\n\n".join(block for block in blocks if block) + "\n"
