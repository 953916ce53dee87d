# nvimgen Session Tests
# Tests for the Selection model and session transitions

from datetime import date
from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from nvimgen.config.schema import NvimgenConfig
from nvimgen.delivery.directory import DirectoryStore
from nvimgen.delivery.listener import ListenerClient
from nvimgen.resolve.keymaps import KeymapPatch
from nvimgen.resolve.settings import default_settings, get_effective
from nvimgen.selection import Selection
from nvimgen.session import Session
from nvimgen.share import decode_query, encode_query

FIXED_DATE = date(2024, 1, 15)


class TestSelection:
    """Tests for the Selection model."""

    def test_defaults(self):
        selection = Selection()
        assert selection.languages == []
        assert selection.theme == ""
        assert selection.leader_key == " "
        assert selection.settings == default_settings()
        assert selection.leader_display == "Space"

    def test_lists_deduplicated(self):
        selection = Selection(languages=["python", "python", " ", "go"], plugins=["telescope", "telescope"])
        assert selection.languages == ["python", "go"]
        assert selection.plugins == ["telescope"]

    @pytest.mark.parametrize("alias", ["space", "<Space>", "SPC", "", None])
    def test_leader_aliases(self, alias):
        assert Selection(leader_key=alias).leader_key == " "

    def test_leader_single_character(self):
        selection = Selection(leader_key=",")
        assert selection.leader_key == ","
        assert selection.leader_display == ","

    def test_leader_rejects_words(self):
        with pytest.raises(ValidationError):
            Selection(leader_key="ctrl")

    def test_frozen(self):
        selection = Selection()
        with pytest.raises(ValidationError):
            selection.theme = "nord"

    def test_evolve_returns_new(self):
        selection = Selection(theme="nord")
        evolved = selection.evolve(theme="gruvbox", languages=["rust"])
        assert selection.theme == "nord"
        assert evolved.theme == "gruvbox"
        assert evolved.languages == ["rust"]

    def test_evolve_validates(self):
        with pytest.raises(ValidationError):
            Selection().evolve(leader_key="abc")


class TestSessionTransitions:
    """Tests for Session mutators."""

    def test_initial_state(self):
        session = Session()
        assert session.revision == 0
        assert session.selection == Selection()
        assert session.query == encode_query(Selection())

    def test_update_notifies_once(self):
        session = Session()
        seen: list[Selection] = []
        session.subscribe(seen.append)

        assert session.update(theme="nord", languages=["go"]) is True
        assert len(seen) == 1
        assert seen[0].theme == "nord"
        assert session.revision == 1

    def test_noop_update_is_not_a_transition(self):
        session = Session(Selection(theme="nord"))
        seen: list[Selection] = []
        session.subscribe(seen.append)

        assert session.update(theme="nord") is False
        assert seen == []
        assert session.revision == 0

    def test_unsubscribe(self):
        session = Session()
        seen: list[Selection] = []
        unsubscribe = session.subscribe(seen.append)
        unsubscribe()
        unsubscribe()
        session.update(theme="nord")
        assert seen == []

    def test_query_tracks_selection(self):
        session = Session()
        session.update(languages=["rust"], theme="nord")
        assert decode_query(session.query).languages == ["rust"]
        assert decode_query(session.query).theme == "nord"

    def test_set_plugins_reconciles_in_one_transition(self):
        session = Session()
        seen: list[Selection] = []
        session.subscribe(seen.append)

        session.set_plugins(["nvim-tree"])

        assert len(seen) == 1
        assert session.selection.plugins == ["nvim-tree"]
        assert session.selection.keymaps["nvim_tree_toggle"] == "<leader>e"
        assert session.selection.keymaps["save_file"] == "<leader>w"

    def test_set_plugins_keeps_overrides(self):
        session = Session(Selection(keymaps={"save_file": "<C-s>"}))
        session.set_plugins(["telescope"])
        assert session.selection.keymaps["save_file"] == "<C-s>"
        assert session.selection.keymaps["telescope_find_files"] == "<leader>ff"

    def test_set_setting(self):
        session = Session()
        assert session.set_setting("telescope.history_limit", 250) is True
        assert get_effective(session.selection.settings, "telescope.history_limit") == 250

    def test_set_unknown_setting(self):
        session = Session()
        assert session.set_setting("launch.rockets", True) is False
        assert session.revision == 0

    def test_reset_setting(self):
        session = Session()
        session.set_setting("indent_size", 4)
        session.reset_setting("indent_size")
        assert get_effective(session.selection.settings, "indent_size") == 2

    def test_reset_settings(self):
        session = Session()
        session.set_setting("indent_size", 4)
        session.set_setting("scroll_offset", 1)
        assert session.reset_settings() is True
        assert session.selection.settings == default_settings()

    def test_set_and_reset_keymap(self):
        session = Session()
        session.set_keymap("save_file", "<C-s>")
        assert session.selection.keymaps["save_file"] == "<C-s>"
        session.reset_keymap("save_file")
        assert session.selection.keymaps["save_file"] == "<leader>w"

    def test_apply_keymap_patch(self):
        session = Session()
        seen: list[Selection] = []
        session.subscribe(seen.append)

        patch = KeymapPatch({"save_file": "<C-s>", "quit": "<C-q>"})
        assert session.apply_keymap_patch(patch) is True
        assert len(seen) == 1
        assert session.selection.keymaps == {"save_file": "<C-s>", "quit": "<C-q>"}

    def test_empty_patch(self):
        session = Session()
        assert session.apply_keymap_patch(KeymapPatch()) is False
        assert session.revision == 0

    def test_reconcile_keymaps(self):
        session = Session(Selection(plugins=["which-key"]))
        assert session.reconcile_keymaps() is True
        assert session.selection.keymaps["which_key_show"] == "<leader>?"
        assert session.reconcile_keymaps() is False

    def test_add_custom_plugin(self):
        session = Session()
        plugin_id = session.add_custom_plugin("oil.nvim", " stevearc/oil.nvim ")
        assert plugin_id == "custom-oil.nvim"
        assert session.selection.plugins == ["custom-oil.nvim"]
        assert session.selection.custom_plugins == {"custom-oil.nvim": "stevearc/oil.nvim"}

    def test_add_custom_plugin_twice(self):
        session = Session()
        session.add_custom_plugin("oil.nvim", "stevearc/oil.nvim")
        session.add_custom_plugin("oil.nvim", "stevearc/oil.nvim")
        assert session.selection.plugins == ["custom-oil.nvim"]

    def test_apply_preset(self):
        session = Session(Selection(keymaps={"save_file": "<C-s>"}))
        session.set_setting("indent_size", 4)

        assert session.apply_preset("web-dev") is True

        selection = session.selection
        assert selection.languages == ["typescript", "javascript"]
        assert selection.theme == "tokyonight"
        assert "nvim-tree" in selection.plugins
        assert selection.keymaps["save_file"] == "<C-s>"
        assert selection.keymaps["nvim_tree_toggle"] == "<leader>e"
        assert get_effective(selection.settings, "indent_size") == 4

    def test_apply_unknown_preset(self):
        session = Session()
        assert session.apply_preset("emacs") is False
        assert session.revision == 0

    def test_conflicts(self):
        session = Session()
        session.set_keymap("quit", "<leader>w")
        assert session.conflicts() == {"<leader>w:n": {"save_file", "quit"}}

    def test_generate(self, sample_selection: Selection):
        session = Session(sample_selection)
        text = session.generate(FIXED_DATE)
        assert "-- Generated on: 2024-01-15" in text
        assert "vim.g.mapleader = ','" in text


class TestSessionResources:
    """Tests for per-session delivery handles."""

    def test_listener_client_is_lazy_and_reused(self):
        config = NvimgenConfig.model_validate({"listener": {"port": 50000}})
        session = Session(config=config)
        assert session._listener_client is None
        client = session.listener_client
        assert isinstance(client, ListenerClient)
        assert client.config.port == 50000
        assert session.listener_client is client

    def test_sessions_do_not_share_clients(self):
        assert Session().listener_client is not Session().listener_client

    def test_directory_store(self, temp_dir):
        config = NvimgenConfig.model_validate({"delivery": {"directory_state": str(temp_dir / "dir.yaml")}})
        store = Session(config=config).directory_store
        assert isinstance(store, DirectoryStore)
        assert store.state_path == temp_dir / "dir.yaml"

    @pytest.mark.asyncio
    async def test_aclose_closes_client(self):
        session = Session()
        client = session.listener_client
        client.close = AsyncMock()
        await session.aclose()
        client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_aclose_without_client(self):
        await Session().aclose()
