# nvimgen Utility Tests
# Tests for platform detection and path helpers

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from nvimgen.utils.paths import atomic_write, create_backup, ensure_dir, expand_path, is_writable_dir
from nvimgen.utils.platform import get_current_platform


class TestGetCurrentPlatform:
    """Tests for get_current_platform()."""

    def test_returns_known_value(self):
        """Current platform should be a known value."""
        assert get_current_platform() in ("macos", "linux", "windows")

    @patch("nvimgen.utils.platform.platform.system", return_value="Darwin")
    def test_darwin_maps_to_macos(self, mock_system):
        assert get_current_platform() == "macos"

    @patch("nvimgen.utils.platform.platform.system", return_value="Linux")
    def test_linux_maps_to_linux(self, mock_system):
        assert get_current_platform() == "linux"

    @patch("nvimgen.utils.platform.platform.system", return_value="Windows")
    def test_windows_maps_to_windows(self, mock_system):
        assert get_current_platform() == "windows"

    @patch("nvimgen.utils.platform.platform.system", return_value="FreeBSD")
    def test_unknown_falls_back_to_linux(self, mock_system):
        assert get_current_platform() == "linux"


class TestExpandPath:
    """Tests for expand_path()."""

    def test_home(self, temp_home: Path):
        assert expand_path("~/nvim") == (temp_home / "nvim").resolve()

    def test_env_var(self, temp_dir: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("NVIMGEN_TEST_DIR", str(temp_dir))
        assert expand_path("$NVIMGEN_TEST_DIR/init.lua") == (temp_dir / "init.lua").resolve()


class TestAtomicWrite:
    """Tests for atomic_write()."""

    def test_creates_parents(self, temp_dir: Path):
        target = temp_dir / "a" / "b" / "init.lua"
        atomic_write(target, "-- hello\n")
        assert target.read_text(encoding="utf-8") == "-- hello\n"

    def test_bytes(self, temp_dir: Path):
        target = temp_dir / "data.bin"
        atomic_write(target, b"\x00\x01")
        assert target.read_bytes() == b"\x00\x01"

    def test_overwrite_leaves_no_temp_files(self, temp_dir: Path):
        target = temp_dir / "init.lua"
        atomic_write(target, "one")
        atomic_write(target, "two")
        assert target.read_text(encoding="utf-8") == "two"
        assert [p.name for p in temp_dir.iterdir()] == ["init.lua"]

    def test_newlines_preserved(self, temp_dir: Path):
        target = temp_dir / "init.lua"
        atomic_write(target, "a\r\nb\n")
        assert target.read_bytes() == b"a\r\nb\n"


class TestCreateBackup:
    """Tests for create_backup()."""

    def test_missing_file(self, temp_dir: Path):
        assert create_backup(temp_dir / "init.lua") is None

    def test_copies_content(self, temp_dir: Path):
        target = temp_dir / "init.lua"
        target.write_text("-- old\n", encoding="utf-8")

        backup = create_backup(target)

        assert backup is not None
        assert backup.name.startswith("init.lua.backup.")
        assert backup.read_text(encoding="utf-8") == "-- old\n"
        assert target.exists()


class TestDirectoryHelpers:
    """Tests for ensure_dir() and is_writable_dir()."""

    def test_ensure_dir(self, temp_dir: Path):
        path = ensure_dir(temp_dir / "x" / "y")
        assert path.is_dir()
        assert ensure_dir(path) == path

    def test_writable(self, temp_dir: Path):
        assert is_writable_dir(temp_dir) is True

    def test_missing_or_file(self, temp_dir: Path):
        file_path = temp_dir / "file.txt"
        file_path.write_text("x", encoding="utf-8")
        assert is_writable_dir(temp_dir / "missing") is False
        assert is_writable_dir(file_path) is False

    @pytest.mark.skipif(os.name == "nt" or os.geteuid() == 0, reason="permission bits not enforced")
    def test_read_only(self, temp_dir: Path):
        locked = temp_dir / "locked"
        locked.mkdir()
        locked.chmod(0o500)
        try:
            assert is_writable_dir(locked) is False
        finally:
            locked.chmod(0o700)
