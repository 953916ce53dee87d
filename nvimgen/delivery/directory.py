# nvimgen Directory Delivery
# Remember a connected config directory and read/write files inside it

from pathlib import Path
from typing import Any, Optional

import yaml

from nvimgen.delivery.result import DeliveryResult
from nvimgen.utils.paths import atomic_write, create_backup, expand_path, is_writable_dir


class DirectoryStore:
    """
    Persisted handle on a user-chosen Neovim config directory.

    The connected directory is stored in a small YAML state file. The
    state is loaded on first use and memoized for the lifetime of the
    store.
    """

    def __init__(self, state_path: Path):
        self.state_path = state_path
        self._loaded = False
        self._directory: Optional[Path] = None

    def _load(self) -> None:
        if self._loaded:
            return
        self._loaded = True
        if not self.state_path.exists():
            return
        try:
            with open(self.state_path, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f)
        except (OSError, yaml.YAMLError):
            return
        if isinstance(data, dict) and isinstance(data.get("directory"), str):
            self._directory = Path(data["directory"])

    @property
    def directory(self) -> Optional[Path]:
        """The connected directory, or None if none is connected."""
        self._load()
        return self._directory

    def connect(self, directory: str | Path) -> DeliveryResult:
        """
        Connect a directory and remember it.

        Args:
            directory: Directory to connect.

        Returns:
            DeliveryResult; failure if the directory is missing or not writable.
        """
        path = expand_path(directory)
        if not path.is_dir():
            return DeliveryResult.failed(str(path), f"Not a directory: {path}")
        if not is_writable_dir(path):
            return DeliveryResult.failed(str(path), f"Permission denied: {path}")
        try:
            atomic_write(
                self.state_path,
                yaml.dump({"directory": str(path)}, default_flow_style=False, sort_keys=False, allow_unicode=True),
            )
        except OSError as e:
            return DeliveryResult.failed(str(path), f"Failed to remember directory: {e}")
        self._loaded = True
        self._directory = path
        return DeliveryResult(target=str(path), message=f"Connected {path}", path=str(path))

    def forget(self) -> None:
        """Disconnect the directory and delete the state file."""
        self._loaded = True
        self._directory = None
        self.state_path.unlink(missing_ok=True)

    def _target(self, filename: str) -> Path | DeliveryResult:
        directory = self.directory
        if directory is None:
            return DeliveryResult.failed(filename, "No directory connected")
        if not filename or Path(filename).name != filename:
            return DeliveryResult.failed(filename, f"Invalid file name: {filename!r}")
        return directory / filename

    def write(self, filename: str, text: str, *, backup: bool = True) -> DeliveryResult:
        """
        Write a file into the connected directory.

        Args:
            filename: Bare file name such as "init.lua".
            text: Content to write.
            backup: Copy an existing file to a timestamped sibling first.

        Returns:
            DeliveryResult with the written path.
        """
        target = self._target(filename)
        if isinstance(target, DeliveryResult):
            return target
        if not is_writable_dir(target.parent):
            return DeliveryResult.failed(str(target), f"Permission denied: {target.parent}")
        try:
            backup_path = create_backup(target) if backup else None
            atomic_write(target, text)
        except OSError as e:
            return DeliveryResult.failed(str(target), f"Failed to write {target}: {e}")
        message = f"Saved {target}"
        if backup_path is not None:
            message += f" (backup: {backup_path.name})"
        return DeliveryResult(target=str(target), message=message, path=str(target))

    def read(self, filename: str) -> Optional[str]:
        """Read a file from the connected directory, or None if unavailable."""
        target = self._target(filename)
        if isinstance(target, DeliveryResult):
            return None
        try:
            return target.read_text(encoding="utf-8")
        except OSError:
            return None
