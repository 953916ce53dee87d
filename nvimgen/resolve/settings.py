# nvimgen Settings Resolver
# Dotted-path resolution of the settings object against catalog defaults

import copy
from typing import Any

from nvimgen.catalog.settings import (
    SETTING_DEFINITIONS,
    SettingDefinition,
    SettingType,
    get_definition,
)

_TRUE_VALUES = {"true", "yes", "on", "1"}
_FALSE_VALUES = {"false", "no", "off", "0"}


def _fresh(value: Any) -> Any:
    """Copy a value so callers never share mutable state with the catalog."""
    if isinstance(value, tuple):
        return list(value)
    return copy.deepcopy(value)


def get_effective(settings: dict[str, Any], setting_id: str) -> Any:
    """
    Resolve a dotted setting id against a settings object.

    Args:
        settings: Settings object (nested dicts).
        setting_id: Dotted id such as "telescope.history_limit".

    Returns:
        The explicit value if present at the full path, otherwise the
        catalog default. None if the id has no catalog definition.
    """
    definition = get_definition(setting_id)
    if definition is None:
        return None

    node: Any = settings
    for segment in definition.path:
        if not isinstance(node, dict) or segment not in node:
            return _fresh(definition.default)
        node = node[segment]

    if node is None:
        return _fresh(definition.default)
    return _fresh(node)


def set_effective(settings: dict[str, Any], setting_id: str, value: Any) -> dict[str, Any]:
    """
    Return a new settings object with one leaf replaced.

    Sibling branches are preserved and the input is not mutated.

    Args:
        settings: Current settings object.
        setting_id: Dotted id of the leaf to replace.
        value: New value.

    Returns:
        New settings object.
    """
    *parents, leaf = setting_id.split(".")
    result = dict(settings)
    node = result
    for segment in parents:
        child = node.get(segment)
        child = dict(child) if isinstance(child, dict) else {}
        node[segment] = child
        node = child
    node[leaf] = _fresh(value)
    return result


def is_visible(definition: SettingDefinition, settings: dict[str, Any], active_plugins: list[str]) -> bool:
    """
    Check whether a setting applies to the current selection.

    Args:
        definition: Setting definition.
        settings: Current settings object.
        active_plugins: Selected plugin ids.

    Returns:
        False if its required plugins are all inactive or its
        dependency resolves falsy, True otherwise.
    """
    if definition.requires_plugins and not set(definition.requires_plugins) & set(active_plugins):
        return False
    if definition.depends_on and not get_effective(settings, definition.depends_on):
        return False
    return True


def _comparable(value: Any) -> Any:
    if isinstance(value, (list, tuple)):
        return sorted(str(item) for item in value)
    return value


def is_changed(settings: dict[str, Any], setting_id: str) -> bool:
    """
    Check whether a setting differs from its catalog default.

    List values are compared order-insensitively.
    """
    definition = get_definition(setting_id)
    if definition is None:
        return False
    return _comparable(get_effective(settings, setting_id)) != _comparable(definition.default)


def reset_one(settings: dict[str, Any], setting_id: str) -> dict[str, Any]:
    """Reset one setting to its catalog default."""
    definition = get_definition(setting_id)
    if definition is None:
        return dict(settings)
    return set_effective(settings, setting_id, definition.default)


def default_settings() -> dict[str, Any]:
    """Build the settings object of a fresh session."""
    settings: dict[str, Any] = {}
    for definition in SETTING_DEFINITIONS:
        settings = set_effective(settings, definition.id, definition.default)
    return settings


def reset_all() -> dict[str, Any]:
    """Reset every setting to its catalog default."""
    return default_settings()


def resolve_settings(settings: dict[str, Any]) -> dict[str, Any]:
    """Return a fully populated settings object of effective values."""
    resolved: dict[str, Any] = {}
    for definition in SETTING_DEFINITIONS:
        resolved = set_effective(resolved, definition.id, get_effective(settings, definition.id))
    return resolved


def visible_settings(settings: dict[str, Any], active_plugins: list[str]) -> list[SettingDefinition]:
    """Return the definitions visible for the current selection, in catalog order."""
    return [d for d in SETTING_DEFINITIONS if is_visible(d, settings, active_plugins)]


def changed_settings(settings: dict[str, Any]) -> dict[str, Any]:
    """Return a flat mapping of setting id to value for every changed setting."""
    return {d.id: get_effective(settings, d.id) for d in SETTING_DEFINITIONS if is_changed(settings, d.id)}


def parse_setting_value(definition: SettingDefinition, raw: str) -> Any:
    """
    Coerce text input into a typed setting value.

    Args:
        definition: Target setting definition.
        raw: Text as typed by the user.

    Returns:
        Typed value.

    Raises:
        ValueError: If the text is not valid for the setting.
    """
    text = raw.strip()

    if definition.type == SettingType.BOOLEAN:
        lowered = text.lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"{definition.id}: expected a boolean, got {raw!r}")

    if definition.type == SettingType.NUMBER:
        try:
            number = int(text)
        except ValueError:
            raise ValueError(f"{definition.id}: expected a whole number, got {raw!r}") from None
        if definition.min is not None and number < definition.min:
            raise ValueError(f"{definition.id}: {number} is below the minimum of {definition.min}")
        if definition.max is not None and number > definition.max:
            raise ValueError(f"{definition.id}: {number} is above the maximum of {definition.max}")
        return number

    if definition.type == SettingType.SELECT:
        if text not in definition.option_values:
            choices = ", ".join(definition.option_values)
            raise ValueError(f"{definition.id}: {raw!r} is not one of {choices}")
        return text

    if isinstance(definition.default, (list, tuple)):
        return [part.strip() for part in text.split(",") if part.strip()]
    return text


def _is_valid(definition: SettingDefinition, value: Any) -> bool:
    if definition.type == SettingType.BOOLEAN:
        return isinstance(value, bool)
    if definition.type == SettingType.NUMBER:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if definition.min is not None and value < definition.min:
            return False
        return definition.max is None or value <= definition.max
    if definition.type == SettingType.SELECT:
        return isinstance(value, str) and value in definition.option_values
    if isinstance(definition.default, (list, tuple)):
        return isinstance(value, list) and all(isinstance(item, str) for item in value)
    return isinstance(value, str)


def sanitize_settings(settings: dict[str, Any]) -> dict[str, Any]:
    """
    Resolve every setting, replacing ill-typed or out-of-range values with defaults.

    The result is safe to render without further checks.
    """
    resolved: dict[str, Any] = {}
    for definition in SETTING_DEFINITIONS:
        value = get_effective(settings, definition.id)
        if not _is_valid(definition, value):
            value = definition.default
        resolved = set_effective(resolved, definition.id, value)
    return resolved
