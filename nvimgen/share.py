# nvimgen Shareable State
# Serialize a Selection to URL query parameters and back

import json
from typing import Any
from urllib.parse import parse_qs, urlencode, urlsplit

from nvimgen.catalog.settings import get_definition
from nvimgen.resolve.settings import changed_settings, default_settings, set_effective
from nvimgen.selection import LEADER_ALIASES, Selection


def to_query_params(selection: Selection) -> dict[str, str]:
    """
    Flatten a selection into query parameters.

    Lists are comma-joined, keymaps, changed settings and custom plugin
    repositories are JSON objects. Empty values are omitted.

    Args:
        selection: Selection to serialize.

    Returns:
        Ordered mapping of parameter name to value.
    """
    params: dict[str, str] = {}
    if selection.languages:
        params["languages"] = ",".join(selection.languages)
    if selection.theme:
        params["theme"] = selection.theme
    if selection.plugins:
        params["plugins"] = ",".join(selection.plugins)
    if selection.flags:
        params["settings"] = ",".join(selection.flags)
    params["leader"] = selection.leader_key
    keymaps = {k: v for k, v in selection.keymaps.items() if v}
    if keymaps:
        params["keymaps"] = json.dumps(keymaps, sort_keys=True, separators=(",", ":"))
    changed = changed_settings(selection.settings)
    if changed:
        params["config"] = json.dumps(changed, sort_keys=True, separators=(",", ":"))
    if selection.custom_plugins:
        params["custom"] = json.dumps(selection.custom_plugins, sort_keys=True, separators=(",", ":"))
    return params


def encode_query(selection: Selection) -> str:
    """Serialize a selection to a URL query string (without the leading "?")."""
    return urlencode(to_query_params(selection))


def share_url(selection: Selection, base_url: str) -> str:
    """Build a shareable link by appending the selection query to a base URL."""
    base = base_url.split("?", 1)[0]
    return f"{base}?{encode_query(selection)}"


def _split(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def _json_object(value: str | None) -> dict[str, Any]:
    if not value:
        return {}
    try:
        data = json.loads(value)
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _settings_from_changes(changes: dict[str, Any]) -> dict[str, Any]:
    settings = default_settings()
    for setting_id, value in changes.items():
        if get_definition(setting_id) is not None:
            settings = set_effective(settings, setting_id, value)
    return settings


def decode_query(query: str) -> Selection:
    """
    Rebuild a selection from a query string or full URL.

    Each parameter is decoded independently: malformed JSON or an invalid
    leader falls back to that field's default without affecting the rest.

    Args:
        query: Query string, with or without "?", or a URL containing one.

    Returns:
        Decoded Selection.
    """
    if "://" in query:
        query = urlsplit(query).query
    raw = {name: values[-1] for name, values in parse_qs(query.lstrip("?"), keep_blank_values=True).items()}

    keymaps = {k: v for k, v in _json_object(raw.get("keymaps")).items() if isinstance(v, str)}
    custom = {k: v for k, v in _json_object(raw.get("custom")).items() if isinstance(v, str)}
    leader = raw.get("leader", " ")
    if len(leader) != 1 and leader.lower() not in LEADER_ALIASES:
        leader = " "

    return Selection(
        languages=_split(raw.get("languages", "")),
        theme=raw.get("theme", ""),
        plugins=_split(raw.get("plugins", "")),
        flags=_split(raw.get("settings", "")),
        settings=_settings_from_changes(_json_object(raw.get("config"))),
        leader_key=leader,
        keymaps=keymaps,
        custom_plugins=custom,
    )
