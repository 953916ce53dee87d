# nvimgen Keymap Resolver
# Effective chords, same-mode conflict detection and default reconciliation

from dataclasses import dataclass, field

from nvimgen.catalog.actions import (
    ACTIONS,
    DEFAULT_KEYMAPS,
    GENERAL_ACTIONS,
    ActionEntry,
    get_action,
)
from nvimgen.catalog.plugins import Plugin


def effective_chord(
    action_id: str,
    keymaps: dict[str, str],
    defaults: dict[str, str] = DEFAULT_KEYMAPS,
) -> str:
    """
    Resolve the chord bound to an action.

    Args:
        action_id: Action identifier.
        keymaps: Explicit user overrides.
        defaults: Catalog default chords.

    Returns:
        The explicit chord if non-empty, else the catalog default,
        else an empty string (unbound).
    """
    explicit = keymaps.get(action_id, "")
    if explicit and explicit.strip():
        return explicit
    return defaults.get(action_id, "")


def active_actions(plugins: list[str]) -> list[ActionEntry]:
    """
    Return the actions that apply to a plugin selection.

    General actions come first, followed by each active plugin's
    actions in plugin selection order. Unknown plugin ids contribute nothing.
    """
    actions = list(GENERAL_ACTIONS)
    seen: set[Plugin] = set()
    for value in plugins:
        plugin = Plugin.parse(value)
        if plugin is Plugin.UNRECOGNIZED or plugin in seen:
            continue
        seen.add(plugin)
        actions.extend(a for a in ACTIONS if a.plugin is plugin)
    return actions


def conflict_key(chord: str, mode: str) -> str:
    """Build the "<chord>:<mode>" key used by the conflict map."""
    return f"{chord}:{mode}"


def compute_conflicts(
    actions: list[ActionEntry],
    keymaps: dict[str, str],
    defaults: dict[str, str] = DEFAULT_KEYMAPS,
) -> dict[str, set[str]]:
    """
    Find actions sharing the same chord in the same mode.

    Args:
        actions: Active actions to check.
        keymaps: Explicit user overrides.
        defaults: Catalog default chords.

    Returns:
        Mapping of "<chord>:<mode>" to the set of colliding action ids.
        Keys with a single action are omitted; unbound actions never collide.
    """
    groups: dict[str, set[str]] = {}
    for action in actions:
        chord = effective_chord(action.id, keymaps, defaults)
        if not chord:
            continue
        groups.setdefault(conflict_key(chord, action.mode.value), set()).add(action.id)
    return {key: ids for key, ids in groups.items() if len(ids) > 1}


def has_conflict(
    action_id: str,
    conflicts: dict[str, set[str]],
) -> bool:
    """Check whether an action is part of any conflict group."""
    return any(action_id in ids for ids in conflicts.values())


@dataclass
class KeymapPatch:
    """A batch of keymap updates applied as one transition."""

    updates: dict[str, str] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.updates

    def apply(self, keymaps: dict[str, str]) -> dict[str, str]:
        """Return a new keymap mapping with all updates applied."""
        if self.is_empty:
            return dict(keymaps)
        return {**keymaps, **self.updates}


def reconcile_defaults(
    actions: list[ActionEntry],
    keymaps: dict[str, str],
    defaults: dict[str, str] = DEFAULT_KEYMAPS,
) -> KeymapPatch:
    """
    Compute the defaults to fill in for newly exposed actions.

    Every action without a non-empty explicit chord receives its
    catalog default, collected into one patch.

    Args:
        actions: Currently active actions.
        keymaps: Explicit user overrides.
        defaults: Catalog default chords.

    Returns:
        Patch with one entry per action that needs a default.
    """
    patch = KeymapPatch()
    for action in actions:
        current = keymaps.get(action.id, "")
        if current and current.strip():
            continue
        default = defaults.get(action.id, "")
        if default:
            patch.updates[action.id] = default
    return patch


def is_keymap_changed(action_id: str, keymaps: dict[str, str], defaults: dict[str, str] = DEFAULT_KEYMAPS) -> bool:
    """Check whether an action's effective chord differs from its default."""
    return effective_chord(action_id, keymaps, defaults) != defaults.get(action_id, "")


def reset_keymap(keymaps: dict[str, str], action_id: str) -> dict[str, str]:
    """Return a new keymap mapping with an action reset to its catalog default."""
    action = get_action(action_id)
    result = dict(keymaps)
    if action is None:
        result.pop(action_id, None)
    else:
        result[action_id] = action.default_chord
    return result
