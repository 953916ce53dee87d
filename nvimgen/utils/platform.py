# nvimgen Platform Detection Utilities
# Maps the running system to an installer target

import platform

# Platform name mapping: system name -> installer target
_PLATFORM_MAP: dict[str, str] = {
    "Darwin": "macos",
    "Linux": "linux",
    "Windows": "windows",
}


def get_current_platform() -> str:
    """
    Get the current platform identifier.

    Returns:
        Platform string: "macos", "linux", or "windows". Other systems are
        treated as "linux".
    """
    return _PLATFORM_MAP.get(platform.system(), "linux")
