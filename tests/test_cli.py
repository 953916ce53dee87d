# Tests for nvimgen.cli
# Click-based CLI commands

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
import yaml
from click.testing import CliRunner

from nvimgen.cli import cli
from nvimgen.delivery.listener import ListenerClient
from nvimgen.delivery.result import DeliveryResult
from nvimgen.share import decode_query


def _invoke(*args: str, input: str | None = None):
    return CliRunner().invoke(cli, ["--no-color", *args], input=input)


@pytest.fixture
def written_config(config_path: Path, sample_config_data: dict) -> Path:
    """Write the sample configuration to the active config location."""
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(yaml.dump(sample_config_data), encoding="utf-8")
    return config_path


class TestCliBasic:
    """Tests for group level options."""

    def test_version(self):
        result = _invoke("--version")
        assert result.exit_code == 0
        assert "nvimgen" in result.output

    def test_help(self):
        result = _invoke("--help")
        assert result.exit_code == 0
        assert "generate" in result.output

    def test_invalid_config_file(self, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("listener:\n  port: 0\n", encoding="utf-8")

        result = _invoke("presets")
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestGenerateCommand:
    """Tests for 'nvimgen generate'."""

    def test_prints_lua(self):
        result = _invoke("generate", "-l", "python", "-p", "telescope", "--theme", "gruvbox", "--date", "2024-01-15")
        assert result.exit_code == 0
        assert result.output.startswith("-- Generated Neovim Configuration\n")
        assert "-- Generated on: 2024-01-15" in result.output
        assert "lspconfig.pyright.setup" in result.output
        assert "<leader>ff" in result.output

    def test_preset(self):
        result = _invoke("generate", "--preset", "web-dev")
        assert result.exit_code == 0
        assert "tokyonight" in result.output
        assert "lspconfig.ts_ls.setup" in result.output

    def test_selection_file(self, selection_file: Path):
        result = _invoke("generate", "--selection", str(selection_file))
        assert result.exit_code == 0
        assert "lspconfig.rust_analyzer.setup" in result.output
        assert "vim.keymap.set('n', '<C-s>', '<cmd>write<CR>'" in result.output

    def test_query_with_added_language(self):
        result = _invoke("generate", "--query", "languages=go&theme=nord", "-l", "lua")
        assert result.exit_code == 0
        assert "lspconfig.gopls.setup" in result.output
        assert "lspconfig.lua_ls.setup" in result.output

    def test_set_and_leader(self):
        result = _invoke("generate", "--set", "indent_size=4", "--leader", ",")
        assert result.exit_code == 0
        assert "vim.opt.tabstop = 4" in result.output
        assert "vim.g.mapleader = ','" in result.output

    def test_output_file(self, temp_dir: Path):
        target = temp_dir / "nvim" / "init.lua"
        result = _invoke("generate", "-l", "rust", "-o", str(target))
        assert result.exit_code == 0
        assert "Saved" in result.output
        assert "rust_analyzer" in target.read_text(encoding="utf-8")

    def test_save_to_configured_path(self, written_config: Path, sample_config_data: dict):
        result = _invoke("generate", "--save")
        assert result.exit_code == 0
        assert Path(sample_config_data["delivery"]["output_path"]).exists()

    def test_conflict_warning(self):
        result = _invoke("generate", "--keymap", "quit=<leader>w")
        assert result.exit_code == 0
        assert "Keymap conflict on <leader>w:n: quit, save_file" in result.output

    def test_save_selection(self, temp_dir: Path):
        out = temp_dir / "selection.yaml"
        result = _invoke("generate", "-l", "go", "--save-selection", str(out))
        assert result.exit_code == 0
        assert "Selection saved to" in result.output
        assert yaml.safe_load(out.read_text(encoding="utf-8"))["languages"] == ["go"]

    def test_invalid_leader(self):
        result = _invoke("generate", "--leader", "ctrl")
        assert result.exit_code == 2

    def test_unknown_setting(self):
        result = _invoke("generate", "--set", "warp_speed=9")
        assert result.exit_code == 2
        assert "unknown setting" in result.output

    def test_invalid_setting_value(self):
        result = _invoke("generate", "--set", "indent_size=99")
        assert result.exit_code == 2

    def test_unknown_action(self):
        result = _invoke("generate", "--keymap", "launch=<leader>l")
        assert result.exit_code == 2
        assert "unknown action" in result.output

    def test_assignment_needs_equals(self):
        result = _invoke("generate", "--keymap", "quit")
        assert result.exit_code == 2

    def test_multiple_sources_rejected(self, selection_file: Path):
        result = _invoke("generate", "--selection", str(selection_file), "--preset", "web-dev")
        assert result.exit_code == 2
        assert "Use only one of" in result.output

    def test_to_directory_requires_connection(self, written_config: Path):
        result = _invoke("generate", "--to-directory")
        assert result.exit_code == 1
        assert "No directory connected" in result.output


class TestDeliveryCommands:
    """Tests for copy, push and ping."""

    def test_copy(self):
        success = DeliveryResult(target="clipboard", message="Copied 10 characters to clipboard")
        with patch("nvimgen.cli.copy_to_clipboard", return_value=success) as mock_copy:
            result = _invoke("copy", "-l", "python")
        assert result.exit_code == 0
        assert "Copied 10 characters" in result.output
        assert "pyright" in mock_copy.call_args[0][0]

    def test_copy_failure(self):
        failure = DeliveryResult.failed("clipboard", "System clipboard unavailable: no xclip")
        with patch("nvimgen.cli.copy_to_clipboard", return_value=failure):
            result = _invoke("copy")
        assert result.exit_code == 1
        assert "clipboard: System clipboard unavailable" in result.output

    def test_push(self):
        pushed = DeliveryResult(target="listener", message="File saved", path="/home/u/.config/nvim/init.lua")
        mock_push = AsyncMock(return_value=pushed)
        with patch("nvimgen.cli.push_to_listener", mock_push):
            result = _invoke("push", "-l", "go", "--filename", "test.lua")
        assert result.exit_code == 0
        assert "File saved" in result.output
        args = mock_push.call_args
        assert "gopls" in args[0][0]
        assert args[0][1] == "test.lua"

    def test_push_existing_file(self, temp_dir: Path):
        source = temp_dir / "init.lua"
        source.write_text("-- mine\n", encoding="utf-8")
        mock_push = AsyncMock(return_value=DeliveryResult(target="listener", message="File saved"))
        with patch("nvimgen.cli.push_to_listener", mock_push):
            result = _invoke("push", "--file", str(source))
        assert result.exit_code == 0
        assert mock_push.call_args[0][0] == "-- mine\n"

    def test_push_upload_override(self):
        mock_push = AsyncMock(return_value=DeliveryResult(target="listener", message="File saved"))
        with patch("nvimgen.cli.push_to_listener", mock_push):
            result = _invoke("push", "--upload", "json")
        assert result.exit_code == 0
        client = mock_push.call_args.kwargs["client"]
        assert client.config.upload.value == "json"

    def test_push_failure(self):
        mock_push = AsyncMock(return_value=DeliveryResult.failed("listener", "Network error: refused"))
        with patch("nvimgen.cli.push_to_listener", mock_push):
            result = _invoke("push")
        assert result.exit_code == 1
        assert "Network error" in result.output

    def test_ping_success(self):
        with patch.object(ListenerClient, "ping", AsyncMock(return_value=True)):
            result = _invoke("ping")
        assert result.exit_code == 0
        assert "Listener active at http://127.0.0.1:45831" in result.output

    def test_ping_failure(self, written_config: Path):
        with patch.object(ListenerClient, "ping", AsyncMock(return_value=False)):
            result = _invoke("ping")
        assert result.exit_code == 1
        assert "No listener reachable at http://127.0.0.1:50000" in result.output


class TestScriptCommands:
    """Tests for share, installer and listener."""

    def test_share(self):
        result = _invoke("share", "-l", "go", "--base-url", "https://example.com/")
        assert result.exit_code == 0
        url = result.output.strip()
        assert url.startswith("https://example.com/?")
        assert decode_query(url).languages == ["go"]

    def test_share_default_base_url(self, written_config: Path):
        result = _invoke("share", "--theme", "nord")
        assert result.output.startswith("https://nvimgen.example.com/?")

    def test_share_query_only(self):
        result = _invoke("share", "--query-only", "--theme", "nord")
        assert result.exit_code == 0
        assert "theme=nord" in result.output
        assert "://" not in result.output

    def test_installer_stdout(self):
        result = _invoke("installer", "--os", "windows", "-l", "python")
        assert result.exit_code == 0
        assert result.output.startswith("@echo off")
        assert "call pip install pyright black isort" in result.output

    def test_installer_file(self, temp_dir: Path):
        result = _invoke("installer", "--os", "linux", "-l", "python", "-o", str(temp_dir))
        assert result.exit_code == 0
        script = (temp_dir / "install-neovim-config.sh").read_text(encoding="utf-8")
        assert script.startswith("#!/bin/bash")
        assert "pip install pyright black isort" in script

    def test_installer_invalid_os(self):
        result = _invoke("installer", "--os", "plan9")
        assert result.exit_code == 2

    def test_listener(self):
        result = _invoke("listener", "--port", "50001", "--token", "abc")
        assert result.exit_code == 0
        assert "local port = 50001" in result.output
        assert "local auth_token = 'abc'" in result.output

    def test_listener_defaults_from_config(self, written_config: Path):
        result = _invoke("listener")
        assert "local port = 50000" in result.output
        assert "local auth_token = 'secret'" in result.output

    def test_listener_file(self, temp_dir: Path):
        target = temp_dir / "lua" / "nvimgen_listener.lua"
        result = _invoke("listener", "-o", str(target))
        assert result.exit_code == 0
        assert "local auth_token = nil" in target.read_text(encoding="utf-8")


class TestInspectionCommands:
    """Tests for keymaps, settings, presets, health, import and search."""

    def test_keymaps(self):
        result = _invoke("keymaps", "-p", "telescope")
        assert result.exit_code == 0
        assert "telescope_find_files" in result.output
        assert "nvim_tree_toggle" not in result.output

    def test_keymaps_conflict(self):
        result = _invoke("keymaps", "--keymap", "quit=<leader>w")
        assert result.exit_code == 0
        assert "(conflict)" in result.output

    def test_settings_category(self):
        result = _invoke("settings", "-p", "telescope", "--category", "telescope")
        assert result.exit_code == 0
        assert "telescope.history_limit" in result.output
        assert "indent_size" not in result.output

    def test_settings_changed(self):
        result = _invoke("settings", "--set", "indent_size=4", "--category", "editor")
        assert "4 *" in result.output

    def test_presets(self):
        result = _invoke("presets")
        assert result.exit_code == 0
        assert "web-dev" in result.output
        assert "system-programming" in result.output

    def test_health_file(self, temp_dir: Path):
        report = temp_dir / "health.txt"
        report.write_text("## provider\n- ERROR No python3 provider found\n", encoding="utf-8")
        result = _invoke("health", str(report))
        assert result.exit_code == 1
        assert "pip install pynvim" in result.output
        assert "Errors: 1" in result.output

    def test_health_stdin_clean(self):
        result = _invoke("health", input="## lsp\n- OK everything fine\n")
        assert result.exit_code == 0
        assert "Errors: 0" in result.output

    def test_import(self, temp_dir: Path):
        source = temp_dir / "init.lua"
        source.write_text('require("lspconfig").pyright.setup({})\nvim.cmd.colorscheme("nord")\n', encoding="utf-8")
        result = _invoke("import", str(source))
        assert result.exit_code == 0
        assert "- python" in result.output
        assert "theme: nord" in result.output
        assert "Detected 1 language(s), 0 plugin(s), 0 keymap(s)" in result.output

    def test_import_query(self, temp_dir: Path):
        source = temp_dir / "init.lua"
        source.write_text('require("lspconfig").gopls.setup({})\n', encoding="utf-8")
        result = _invoke("import", str(source), "--query")
        assert "languages=go" in result.output

    def test_import_to_file(self, temp_dir: Path):
        source = temp_dir / "init.lua"
        source.write_text('require("lspconfig").gopls.setup({})\n', encoding="utf-8")
        out = temp_dir / "selection.yaml"
        result = _invoke("import", str(source), "-o", str(out))
        assert result.exit_code == 0
        assert "Selection saved to" in result.output
        assert "languages:" not in result.output

        generated = _invoke("generate", "--selection", str(out))
        assert "lspconfig.gopls.setup" in generated.output

    def test_search(self):
        result = _invoke("search", "statusline")
        assert result.exit_code == 0
        assert "nvim-lualine/lualine.nvim" in result.output

    def test_search_no_results(self):
        result = _invoke("search", "quantum-teleporter")
        assert "No plugins found" in result.output


class TestConnectCommand:
    """Tests for 'nvimgen connect' and directory delivery."""

    def test_connect_lifecycle(self, written_config: Path, temp_dir: Path):
        nvim_dir = temp_dir / "nvim-config"
        nvim_dir.mkdir()

        result = _invoke("connect")
        assert "No directory connected" in result.output

        result = _invoke("connect", str(nvim_dir))
        assert result.exit_code == 0

        result = _invoke("connect")
        assert f"Connected: {nvim_dir.resolve()}" in result.output

        result = _invoke("generate", "-l", "lua", "--to-directory")
        assert result.exit_code == 0
        assert "lua_ls" in (nvim_dir / "init.lua").read_text(encoding="utf-8")

        result = _invoke("connect", "--forget")
        assert "Directory disconnected" in result.output
        assert "No directory connected" in _invoke("connect").output

    def test_connect_missing_directory(self, written_config: Path, temp_dir: Path):
        result = _invoke("connect", str(temp_dir / "missing"))
        assert result.exit_code == 1
        assert "Not a directory" in result.output


class TestConfigCommands:
    """Tests for 'nvimgen config'."""

    def test_init(self, config_path: Path):
        result = _invoke("config", "init")
        assert result.exit_code == 0
        assert "Created configuration:" in result.output
        assert config_path.exists()

        result = _invoke("config", "init")
        assert "already exists" in result.output

    def test_init_force(self, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("listener:\n  port: 40000\n", encoding="utf-8")
        result = _invoke("config", "init", "--force")
        assert "Created configuration:" in result.output
        assert "40000" not in config_path.read_text(encoding="utf-8")

    def test_show_defaults(self):
        result = _invoke("config", "show")
        assert result.exit_code == 0
        assert "nvimgen Configuration" in result.output
        assert "Using built-in defaults" in result.output

    def test_show_verbose(self, written_config: Path):
        result = _invoke("--verbose", "config", "show")
        assert "port: 50000" in result.output

    def test_check_valid(self, written_config: Path):
        result = _invoke("config", "check")
        assert result.exit_code == 0
        assert "Configuration is valid:" in result.output

    def test_check_invalid_still_runs(self, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("listener:\n  port: 0\n", encoding="utf-8")
        result = _invoke("config", "check")
        assert result.exit_code == 1
        assert "Configuration is invalid" in result.output
        assert "listener -> port" in result.output
