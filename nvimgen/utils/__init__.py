# nvimgen Utilities Module
# Helper functions for path handling and platform detection

from nvimgen.utils.paths import atomic_write, create_backup, ensure_dir, expand_path, is_writable_dir
from nvimgen.utils.platform import get_current_platform

__all__ = [
    # Platform
    "get_current_platform",
    # Paths
    "expand_path",
    "ensure_dir",
    "atomic_write",
    "create_backup",
    "is_writable_dir",
]
