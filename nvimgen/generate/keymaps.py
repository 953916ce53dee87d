# nvimgen Keymap Section
# Window navigation and custom keymap statements

from typing import Any

from nvimgen.catalog.actions import ACTIONS, KEYMAP_COMMANDS
from nvimgen.generate.lua import lua_string
from nvimgen.resolve.keymaps import active_actions, effective_chord

TERMINAL_COMMANDS: dict[str, str] = {
    "horizontal": "<cmd>belowright split | terminal<CR>",
    "vertical": "<cmd>vertical botright split | terminal<CR>",
    "floating": (
        "function() "
        "local buf = vim.api.nvim_create_buf(false, true) "
        "local width = math.floor(vim.o.columns * 0.8) "
        "local height = math.floor(vim.o.lines * 0.8) "
        "vim.api.nvim_open_win(buf, true, { relative = 'editor', width = width, height = height, "
        "row = math.floor((vim.o.lines - height) / 2), col = math.floor((vim.o.columns - width) / 2), "
        "style = 'minimal', border = 'rounded' }) "
        "vim.cmd.terminal() "
        "end"
    ),
}


def render_window_navigation() -> str:
    return "\n".join(
        [
            "-- Window navigation",
            "vim.keymap.set('n', '<C-h>', '<C-w><C-h>', { desc = 'Move focus to the left window' })",
            "vim.keymap.set('n', '<C-l>', '<C-w><C-l>', { desc = 'Move focus to the right window' })",
            "vim.keymap.set('n', '<C-j>', '<C-w><C-j>', { desc = 'Move focus to the lower window' })",
            "vim.keymap.set('n', '<C-k>', '<C-w><C-k>', { desc = 'Move focus to the upper window' })",
        ]
    )


def keymap_command(action_id: str, settings: dict[str, Any]) -> tuple[str, str] | None:
    """
    Look up the right-hand side and description of an action.

    Args:
        action_id: Action identifier.
        settings: Sanitized settings object.

    Returns:
        (command, description), or None if the action has no command.
    """
    entry = KEYMAP_COMMANDS.get(action_id)
    if entry is None:
        return None
    command, description = entry
    if action_id == "terminal_toggle":
        command = TERMINAL_COMMANDS.get(settings["terminal_position"], command)
    return command, description


def _rhs(command: str) -> str:
    if command.startswith("function()"):
        return command
    return lua_string(command)


def render_custom_keymaps(plugins: list[str], keymaps: dict[str, str], settings: dict[str, Any]) -> str | None:
    """
    Render one vim.keymap.set statement per bound active action.

    Actions are visited in catalog order; plugin actions only when their
    plugin is selected. Override ids outside the active set are ignored.

    Returns:
        The keymap block, or None if no action is bound.
    """
    lines: list[str] = []
    for action in sorted(active_actions(plugins), key=ACTIONS.index):
        chord = effective_chord(action.id, keymaps)
        resolved = keymap_command(action.id, settings)
        if not chord.strip() or resolved is None:
            continue
        command, description = resolved
        lines.append(
            f"vim.keymap.set({lua_string(action.mode.value)}, {lua_string(chord)}, {_rhs(command)}, "
            f"{{ desc = {lua_string(description)} }})"
        )
    if not lines:
        return None
    return "-- Custom keymaps\n" + "\n".join(lines)

