# nvimgen File Delivery
# Write generated text to a local file

from pathlib import Path

from nvimgen.delivery.result import DeliveryResult
from nvimgen.utils.paths import atomic_write, create_backup


def save_to_file(text: str, path: Path, *, backup: bool = True) -> DeliveryResult:
    """
    Atomically write text to a file.

    Args:
        text: Content to write.
        path: Target file.
        backup: Copy an existing file to a timestamped sibling first.

    Returns:
        DeliveryResult with the written path, or the OS error.
    """
    try:
        backup_path = create_backup(path) if backup else None
        atomic_write(path, text)
    except OSError as e:
        return DeliveryResult.failed(str(path), f"Failed to write {path}: {e}")

    message = f"Saved {path}"
    if backup_path is not None:
        message += f" (backup: {backup_path.name})"
    return DeliveryResult(target=str(path), message=message, path=str(path))
