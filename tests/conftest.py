# nvimgen Test Fixtures
# Pytest fixtures for nvimgen tests

import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
import yaml

from nvimgen.selection import Selection


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the configuration file at a temporary location and widen console output."""
    config_path = tmp_path / "nvimgen-config" / "config.yaml"
    monkeypatch.setenv("NVIMGEN_CONFIG", str(config_path))
    monkeypatch.setenv("COLUMNS", "200")
    return config_path


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Create a temporary home directory."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


@pytest.fixture
def config_path(isolated_environment: Path) -> Path:
    """Path of the configuration file used by the CLI in tests."""
    return isolated_environment


@pytest.fixture
def sample_selection() -> Selection:
    """A python/gruvbox/telescope selection with a custom leader."""
    return Selection(
        languages=["python"],
        theme="gruvbox",
        plugins=["telescope"],
        flags=["line_numbers"],
        leader_key=",",
    )


@pytest.fixture
def selection_file(temp_dir: Path) -> Path:
    """A saved selection YAML file."""
    path = temp_dir / "selection.yaml"
    data = {
        "languages": ["rust", "go"],
        "theme": "nord",
        "plugins": ["treesitter", "nvim-tree"],
        "flags": ["wrap_text"],
        "leader_key": " ",
        "keymaps": {"save_file": "<C-s>"},
    }
    path.write_text(yaml.dump(data), encoding="utf-8")
    return path


@pytest.fixture
def sample_config_data(temp_dir: Path) -> dict:
    """Sample configuration for testing."""
    return {
        "listener": {
            "host": "127.0.0.1",
            "port": 50000,
            "token": "secret",
            "timeout": 2.0,
            "upload": "json",
        },
        "delivery": {
            "output_path": str(temp_dir / "nvim" / "init.lua"),
            "backup": False,
            "directory_state": str(temp_dir / "state" / "directory.yaml"),
        },
        "share": {
            "base_url": "https://nvimgen.example.com/",
        },
        "output": {
            "verbose": False,
            "colored": False,
        },
    }
