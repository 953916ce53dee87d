# nvimgen Resolvers
# Settings and keymap resolution plus key chord capture

from nvimgen.resolve.chords import ChordRecorder, KeyPress, chip_label, format_chord, normalize_key, parse_chord
from nvimgen.resolve.keymaps import (
    KeymapPatch,
    active_actions,
    compute_conflicts,
    effective_chord,
    has_conflict,
    is_keymap_changed,
    reconcile_defaults,
    reset_keymap,
)
from nvimgen.resolve.settings import (
    changed_settings,
    default_settings,
    get_effective,
    is_changed,
    is_visible,
    parse_setting_value,
    reset_all,
    reset_one,
    resolve_settings,
    sanitize_settings,
    set_effective,
    visible_settings,
)

__all__ = [
    # Settings
    "get_effective",
    "set_effective",
    "is_visible",
    "is_changed",
    "reset_one",
    "reset_all",
    "default_settings",
    "resolve_settings",
    "sanitize_settings",
    "visible_settings",
    "changed_settings",
    "parse_setting_value",
    # Keymaps
    "effective_chord",
    "active_actions",
    "compute_conflicts",
    "has_conflict",
    "reconcile_defaults",
    "KeymapPatch",
    "is_keymap_changed",
    "reset_keymap",
    # Chords
    "KeyPress",
    "ChordRecorder",
    "normalize_key",
    "format_chord",
    "parse_chord",
    "chip_label",
]
