# nvimgen Settings Resolver Tests
# Tests for dotted-path setting resolution, visibility and reset

import pytest

from nvimgen.catalog.settings import SETTING_DEFINITIONS, get_definition
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


class TestGetEffective:
    """Tests for get_effective()."""

    def test_explicit_value(self):
        assert get_effective({"indent_size": 4}, "indent_size") == 4

    def test_missing_falls_back_to_default(self):
        assert get_effective({}, "indent_size") == 2

    def test_nested_value(self):
        settings = {"telescope": {"history_limit": 500}}
        assert get_effective(settings, "telescope.history_limit") == 500

    def test_partial_path_falls_back(self):
        settings = {"telescope": {}}
        assert get_effective(settings, "telescope.history_limit") == 100

    def test_non_dict_branch_falls_back(self):
        settings = {"telescope": "oops"}
        assert get_effective(settings, "telescope.history_limit") == 100

    def test_unknown_id(self):
        assert get_effective({"launch": 1}, "launch") is None

    def test_list_default_is_a_fresh_list(self):
        value = get_effective({}, "telescope.ignored_patterns")
        assert value == ["*.git*", "node_modules/*", "*.lock"]
        value.append("dist/*")
        assert get_effective({}, "telescope.ignored_patterns") == ["*.git*", "node_modules/*", "*.lock"]


class TestSetEffective:
    """Tests for set_effective()."""

    def test_does_not_mutate_input(self):
        original = {"telescope": {"history_limit": 100, "preview_enabled": True}}
        updated = set_effective(original, "telescope.history_limit", 200)
        assert original["telescope"]["history_limit"] == 100
        assert updated["telescope"]["history_limit"] == 200

    def test_preserves_siblings(self):
        original = {"telescope": {"history_limit": 100, "preview_enabled": False}, "indent_size": 4}
        updated = set_effective(original, "telescope.history_limit", 200)
        assert updated["telescope"]["preview_enabled"] is False
        assert updated["indent_size"] == 4

    def test_creates_missing_branches(self):
        updated = set_effective({}, "nvim_tree.width", 40)
        assert updated == {"nvim_tree": {"width": 40}}

    def test_get_after_set(self):
        settings = set_effective(default_settings(), "scroll_offset", 3)
        assert get_effective(settings, "scroll_offset") == 3


class TestVisibility:
    """Tests for is_visible() and visible_settings()."""

    def test_plugin_setting_hidden_without_plugin(self):
        definition = get_definition("telescope.history_limit")
        assert is_visible(definition, {}, []) is False

    def test_plugin_setting_visible_with_plugin(self):
        definition = get_definition("telescope.history_limit")
        assert is_visible(definition, {}, ["telescope"]) is True

    def test_dependency_off_hides(self):
        definition = get_definition("auto_save_delay")
        assert is_visible(definition, {"auto_save": False}, []) is False

    def test_dependency_on_shows(self):
        definition = get_definition("auto_save_delay")
        assert is_visible(definition, {"auto_save": True}, []) is True

    def test_core_setting_always_visible(self):
        assert is_visible(get_definition("indent_size"), {}, []) is True

    def test_visible_settings_in_catalog_order(self):
        ids = [d.id for d in visible_settings({}, ["nvim-tree"])]
        assert "nvim_tree.width" in ids
        assert "telescope.history_limit" not in ids
        assert ids.index("indent_size") < ids.index("nvim_tree.width")


class TestIsChanged:
    """Tests for is_changed() and changed_settings()."""

    def test_default_is_unchanged(self):
        assert is_changed(default_settings(), "indent_size") is False

    def test_changed_value(self):
        assert is_changed({"indent_size": 4}, "indent_size") is True

    def test_list_order_insensitive(self):
        settings = {"telescope": {"ignored_patterns": ["*.lock", "*.git*", "node_modules/*"]}}
        assert is_changed(settings, "telescope.ignored_patterns") is False

    def test_list_content_change(self):
        settings = {"telescope": {"ignored_patterns": ["*.lock"]}}
        assert is_changed(settings, "telescope.ignored_patterns") is True

    def test_unknown_id(self):
        assert is_changed({"launch": 1}, "launch") is False

    def test_changed_settings_flat(self):
        settings = set_effective(default_settings(), "nvim_tree.width", 45)
        settings = set_effective(settings, "indent_size", 4)
        assert changed_settings(settings) == {"indent_size": 4, "nvim_tree.width": 45}


class TestReset:
    """Tests for reset_one() and reset_all()."""

    def test_reset_one(self):
        settings = set_effective(default_settings(), "indent_size", 8)
        settings = set_effective(settings, "scroll_offset", 2)
        reset = reset_one(settings, "indent_size")
        assert get_effective(reset, "indent_size") == 2
        assert get_effective(reset, "scroll_offset") == 2

    def test_reset_unknown_returns_copy(self):
        settings = {"indent_size": 4}
        reset = reset_one(settings, "launch")
        assert reset == settings
        assert reset is not settings

    def test_reset_all(self):
        assert reset_all() == default_settings()
        assert changed_settings(reset_all()) == {}

    def test_default_settings_cover_catalog(self):
        settings = default_settings()
        for definition in SETTING_DEFINITIONS:
            assert get_effective(settings, definition.id) == get_effective({}, definition.id)

    def test_resolve_settings_fills_missing(self):
        resolved = resolve_settings({"indent_size": 6})
        assert resolved["indent_size"] == 6
        assert resolved["telescope"]["history_limit"] == 100


class TestParseSettingValue:
    """Tests for parse_setting_value()."""

    @pytest.mark.parametrize("raw,expected", [("true", True), ("on", True), ("No", False), ("0", False)])
    def test_boolean(self, raw, expected):
        assert parse_setting_value(get_definition("cursor_line"), raw) is expected

    def test_boolean_invalid(self):
        with pytest.raises(ValueError, match="boolean"):
            parse_setting_value(get_definition("cursor_line"), "maybe")

    def test_number(self):
        assert parse_setting_value(get_definition("indent_size"), " 4 ") == 4

    def test_number_below_minimum(self):
        with pytest.raises(ValueError, match="minimum"):
            parse_setting_value(get_definition("indent_size"), "0")

    def test_number_above_maximum(self):
        with pytest.raises(ValueError, match="maximum"):
            parse_setting_value(get_definition("telescope.history_limit"), "5000")

    def test_number_not_numeric(self):
        with pytest.raises(ValueError, match="whole number"):
            parse_setting_value(get_definition("indent_size"), "four")

    def test_select(self):
        assert parse_setting_value(get_definition("terminal_position"), "floating") == "floating"

    def test_select_invalid(self):
        with pytest.raises(ValueError, match="not one of"):
            parse_setting_value(get_definition("terminal_position"), "sideways")

    def test_list_text(self):
        value = parse_setting_value(get_definition("telescope.ignored_patterns"), "dist/*, build/* ,")
        assert value == ["dist/*", "build/*"]


class TestSanitizeSettings:
    """Tests for sanitize_settings()."""

    def test_valid_values_kept(self):
        sanitized = sanitize_settings({"indent_size": 4, "line_numbers": "relative"})
        assert sanitized["indent_size"] == 4
        assert sanitized["line_numbers"] == "relative"

    def test_out_of_range_replaced(self):
        assert sanitize_settings({"indent_size": 99})["indent_size"] == 2

    def test_wrong_type_replaced(self):
        sanitized = sanitize_settings({"cursor_line": "yes", "indent_size": True})
        assert sanitized["cursor_line"] is True
        assert sanitized["indent_size"] == 2

    def test_unknown_option_replaced(self):
        assert sanitize_settings({"completion": "psychic"})["completion"] == "advanced"

    def test_list_items_must_be_text(self):
        sanitized = sanitize_settings({"telescope": {"ignored_patterns": ["*.log", 3]}})
        assert sanitized["telescope"]["ignored_patterns"] == ["*.git*", "node_modules/*", "*.lock"]
