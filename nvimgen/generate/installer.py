# nvimgen Installer Scripts
# Per-OS shell and batch scripts that install Neovim, the config and language tools

from enum import Enum

from nvimgen.catalog.languages import Language, recognized_languages
from nvimgen.selection import Selection

HEREDOC_MARKER = "NVIMGEN_INIT_LUA"


class InstallerOS(str, Enum):
    """Supported installer targets."""

    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"


_NPM_TS = "npm install -g typescript typescript-language-server"
_PY_TOOLS = "pip install pyright black isort"
_RUST = "rustup component add rust-analyzer"
_GOPLS = "go install golang.org/x/tools/gopls@latest"
_CSHARP = "dotnet tool install --global csharp-ls"

TOOL_COMMANDS: dict[InstallerOS, dict[Language, str | None]] = {
    InstallerOS.MACOS: {
        Language.TYPESCRIPT: _NPM_TS,
        Language.JAVASCRIPT: _NPM_TS,
        Language.PYTHON: _PY_TOOLS,
        Language.RUST: _RUST,
        Language.GO: _GOPLS,
        Language.C: "brew install llvm",
        Language.CPP: "brew install llvm",
        Language.CSHARP: _CSHARP,
        Language.JAVA: "brew install jdtls",
        Language.LUA: "brew install lua-language-server",
        Language.UNRECOGNIZED: None,
    },
    InstallerOS.LINUX: {
        Language.TYPESCRIPT: _NPM_TS,
        Language.JAVASCRIPT: _NPM_TS,
        Language.PYTHON: _PY_TOOLS,
        Language.RUST: _RUST,
        Language.GO: _GOPLS,
        Language.C: "sudo apt-get install -y clangd || sudo dnf install -y clang-tools-extra || sudo pacman -S clang",
        Language.CPP: "sudo apt-get install -y clangd || sudo dnf install -y clang-tools-extra || sudo pacman -S clang",
        Language.CSHARP: _CSHARP,
        Language.JAVA: "sudo apt-get install -y openjdk-17-jdk || sudo dnf install -y java-17-openjdk-devel",
        Language.LUA: (
            "sudo apt-get install -y lua-language-server"
            " || sudo dnf install -y lua-language-server"
            " || sudo pacman -S lua-language-server"
        ),
        Language.UNRECOGNIZED: None,
    },
    InstallerOS.WINDOWS: {
        Language.TYPESCRIPT: _NPM_TS,
        Language.JAVASCRIPT: _NPM_TS,
        Language.PYTHON: _PY_TOOLS,
        Language.RUST: _RUST,
        Language.GO: _GOPLS,
        Language.C: "winget install LLVM.LLVM",
        Language.CPP: "winget install LLVM.LLVM",
        Language.CSHARP: _CSHARP,
        Language.JAVA: "winget install Microsoft.OpenJDK.17",
        Language.LUA: "winget install LuaLS.lua-language-server",
        Language.UNRECOGNIZED: None,
    },
}

_NEOVIM_INSTALL: dict[InstallerOS, str] = {
    InstallerOS.MACOS: """if ! command -v nvim &> /dev/null; then
    echo "Installing Neovim..."
    brew install neovim
fi""",
    InstallerOS.LINUX: """if ! command -v nvim &> /dev/null; then
    echo "Installing Neovim..."
    if command -v apt-get &> /dev/null; then
        sudo apt-get update && sudo apt-get install -y neovim
    elif command -v dnf &> /dev/null; then
        sudo dnf install -y neovim
    elif command -v pacman &> /dev/null; then
        sudo pacman -S neovim
    else
        echo "Please install Neovim manually from https://neovim.io/"
        exit 1
    fi
fi""",
}

_BATCH_SPECIAL = {"^": "^^", "&": "^&", "|": "^|", "<": "^<", ">": "^>", "(": "^(", ")": "^)", "%": "%%"}


def installer_filename(os_name: InstallerOS | str) -> str:
    """File name the installer for an OS is saved under."""
    return "install-neovim-config.bat" if InstallerOS(os_name) is InstallerOS.WINDOWS else "install-neovim-config.sh"


def tool_commands(languages: list[str], os_name: InstallerOS) -> list[str]:
    """De-duplicated tool install commands for the recognized languages."""
    commands: list[str] = []
    for lang in recognized_languages(languages):
        command = TOOL_COMMANDS[os_name][lang]
        if command and command not in commands:
            commands.append(command)
    return commands


def _shell_script(os_name: InstallerOS, config_text: str, tools: list[str]) -> str:
    body = config_text.rstrip("\n")
    tool_lines = "\n".join(tools) if tools else "echo \"No language tools selected.\""
    return f"""#!/bin/bash
set -e

echo "Installing Neovim configuration..."

# Check if Neovim is installed
{_NEOVIM_INSTALL[os_name]}

# Create config directory
mkdir -p ~/.config/nvim

# Backup existing config if it exists
if [ -f ~/.config/nvim/init.lua ]; then
    echo "Backing up existing config..."
    mv ~/.config/nvim/init.lua ~/.config/nvim/init.lua.backup.$(date +%Y%m%d_%H%M%S)
fi

# Create the init.lua file
cat > ~/.config/nvim/init.lua << '{HEREDOC_MARKER}'
{body}
{HEREDOC_MARKER}

# Install language tools
echo "Installing language tools..."
{tool_lines}

echo "Neovim configuration installed successfully!"
echo "Run 'nvim' to start using your new configuration."
"""


def batch_echo(line: str) -> str:
    """
    Render one line of text as a batch echo that reproduces it verbatim.

    cmd.exe treats everything between double quotes literally except
    ``%``, so carets are only added outside quoted regions.
    """
    if not line.strip():
        return "echo."
    parts: list[str] = []
    quoted = False
    for ch in line:
        if ch == '"':
            quoted = not quoted
            parts.append(ch)
        elif ch == "%":
            parts.append("%%")
        elif quoted:
            parts.append(ch)
        else:
            parts.append(_BATCH_SPECIAL.get(ch, ch))
    return "echo(" + "".join(parts)


def _batch_script(config_text: str, tools: list[str]) -> str:
    echoes = "\n".join(batch_echo(line) for line in config_text.rstrip("\n").split("\n"))
    tool_lines = "\n".join(f"call {command}" for command in tools) if tools else "echo No language tools selected."
    return f"""@echo off
setlocal

echo Installing Neovim configuration...

REM Check if Neovim is installed
where nvim >nul 2>nul
if %errorlevel% neq 0 (
    echo Installing Neovim...
    winget install Neovim.Neovim
)

REM Create config directory
if not exist "%LOCALAPPDATA%\\nvim" mkdir "%LOCALAPPDATA%\\nvim"

REM Backup existing config if it exists
if exist "%LOCALAPPDATA%\\nvim\\init.lua" (
    echo Backing up existing config...
    move "%LOCALAPPDATA%\\nvim\\init.lua" "%LOCALAPPDATA%\\nvim\\init.lua.backup"
)

REM Create the init.lua file
(
{echoes}
) > "%LOCALAPPDATA%\\nvim\\init.lua"

REM Install language tools
echo Installing language tools...
{tool_lines}

echo Neovim configuration installed successfully!
echo Run 'nvim' to start using your new configuration.
pause
"""


def generate_installer_script(selection: Selection, config_text: str, os_name: InstallerOS | str) -> str:
    """
    Render an installer script embedding a generated configuration.

    Args:
        selection: Selection the configuration was generated from.
        config_text: Generated init.lua text, embedded verbatim.
        os_name: Target operating system.

    Returns:
        Bash script for macOS and Linux, batch script for Windows.

    Raises:
        ValueError: If the OS is not supported.
    """
    target = InstallerOS(os_name)
    tools = tool_commands(selection.languages, target)
    if target is InstallerOS.WINDOWS:
        return _batch_script(config_text, tools)
    return _shell_script(target, config_text, tools)
