# nvimgen Session
# Owns the current Selection, applies transitions and scopes delivery handles

from collections.abc import Callable
from datetime import date
from pathlib import Path
from typing import Any, Optional

from nvimgen.catalog.plugins import custom_plugin_id
from nvimgen.catalog.presets import get_preset
from nvimgen.catalog.settings import get_definition
from nvimgen.config.schema import NvimgenConfig
from nvimgen.delivery.directory import DirectoryStore
from nvimgen.delivery.listener import ListenerClient
from nvimgen.generate.init_lua import generate_init_lua
from nvimgen.resolve.keymaps import KeymapPatch, active_actions, compute_conflicts, reconcile_defaults
from nvimgen.resolve.keymaps import reset_keymap as reset_keymap_in
from nvimgen.resolve.settings import reset_all, reset_one, set_effective
from nvimgen.selection import Selection
from nvimgen.share import encode_query

Subscriber = Callable[[Selection], None]


class Session:
    """
    A single configuration session.

    Every public mutator performs at most one transition: the selection is
    replaced, the share query is re-encoded and subscribers are notified
    exactly once. A mutator that would not change the selection performs
    no transition at all.

    Delivery handles (listener client, directory store) are created on
    first use and belong to this session only.
    """

    def __init__(self, selection: Optional[Selection] = None, *, config: Optional[NvimgenConfig] = None):
        self.config = config or NvimgenConfig()
        self._selection = selection or Selection()
        self._query = encode_query(self._selection)
        self._subscribers: list[Subscriber] = []
        self.revision = 0
        self._listener_client: Optional[ListenerClient] = None
        self._directory_store: Optional[DirectoryStore] = None

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def query(self) -> str:
        """Share query of the current selection."""
        return self._query

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked with the new selection after each transition.

        Returns:
            A function that unregisters the callback.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _commit(self, selection: Selection) -> bool:
        if selection == self._selection:
            return False
        self._selection = selection
        self._query = encode_query(selection)
        self.revision += 1
        for callback in list(self._subscribers):
            callback(selection)
        return True

    def update(self, **fields: Any) -> bool:
        """Replace selection fields in one transition."""
        return self._commit(self._selection.evolve(**fields))

    def set_plugins(self, plugins: list[str]) -> bool:
        """
        Replace the plugin list, filling default chords for newly exposed actions.

        The plugin change and the keymap defaults land in the same transition.
        """
        candidate = self._selection.evolve(plugins=plugins)
        patch = reconcile_defaults(active_actions(candidate.plugins), candidate.keymaps)
        if not patch.is_empty:
            candidate = candidate.evolve(keymaps=patch.apply(candidate.keymaps))
        return self._commit(candidate)

    def set_setting(self, setting_id: str, value: Any) -> bool:
        """Set one setting; unknown ids are ignored."""
        if get_definition(setting_id) is None:
            return False
        return self.update(settings=set_effective(self._selection.settings, setting_id, value))

    def reset_setting(self, setting_id: str) -> bool:
        return self.update(settings=reset_one(self._selection.settings, setting_id))

    def reset_settings(self) -> bool:
        return self.update(settings=reset_all())

    def set_keymap(self, action_id: str, chord: str) -> bool:
        return self.update(keymaps={**self._selection.keymaps, action_id: chord})

    def reset_keymap(self, action_id: str) -> bool:
        return self.update(keymaps=reset_keymap_in(self._selection.keymaps, action_id))

    def apply_keymap_patch(self, patch: KeymapPatch) -> bool:
        """Apply a batch of keymap updates as a single transition."""
        if patch.is_empty:
            return False
        return self.update(keymaps=patch.apply(self._selection.keymaps))

    def reconcile_keymaps(self) -> bool:
        """Fill catalog defaults for every active action without an explicit chord."""
        current = self._selection
        return self.apply_keymap_patch(reconcile_defaults(active_actions(current.plugins), current.keymaps))

    def add_custom_plugin(self, name: str, repository: str) -> str:
        """
        Register and select a custom plugin.

        Args:
            name: Plugin name, used to derive the custom-<slug> id.
            repository: GitHub owner/repo.

        Returns:
            The custom plugin id.
        """
        plugin_id = custom_plugin_id(name)
        current = self._selection
        plugins = current.plugins if plugin_id in current.plugins else [*current.plugins, plugin_id]
        self.update(plugins=plugins, custom_plugins={**current.custom_plugins, plugin_id: repository.strip()})
        return plugin_id

    def apply_preset(self, preset_id: str) -> bool:
        """
        Replace languages, theme, plugins, flags and leader with a preset's.

        Settings and keymap overrides are kept; defaults for the preset's
        plugin actions are filled in the same transition.

        Returns:
            False if the preset is unknown or changes nothing.
        """
        preset = get_preset(preset_id)
        if preset is None:
            return False
        base = preset.to_selection()
        candidate = self._selection.evolve(
            languages=base.languages,
            theme=base.theme,
            plugins=base.plugins,
            flags=base.flags,
            leader_key=base.leader_key,
        )
        patch = reconcile_defaults(active_actions(candidate.plugins), candidate.keymaps)
        if not patch.is_empty:
            candidate = candidate.evolve(keymaps=patch.apply(candidate.keymaps))
        return self._commit(candidate)

    def conflicts(self) -> dict[str, set[str]]:
        """Same-mode chord conflicts among the active actions."""
        return compute_conflicts(active_actions(self._selection.plugins), self._selection.keymaps)

    def generate(self, generated_on: Optional[date] = None) -> str:
        """Render init.lua for the current selection."""
        return generate_init_lua(self._selection, generated_on=generated_on)

    @property
    def listener_client(self) -> ListenerClient:
        """Listener client for this session, created on first access."""
        if self._listener_client is None:
            self._listener_client = ListenerClient(self.config.listener)
        return self._listener_client

    @property
    def directory_store(self) -> DirectoryStore:
        """Connected-directory store for this session, created on first access."""
        if self._directory_store is None:
            self._directory_store = DirectoryStore(Path(self.config.delivery.directory_state))
        return self._directory_store

    async def aclose(self) -> None:
        """Release network resources held by the session."""
        if self._listener_client is not None:
            await self._listener_client.close()
