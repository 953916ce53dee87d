# nvimgen Clipboard Delivery
# Copy generated text to the system clipboard

import pyperclip

from nvimgen.delivery.result import DeliveryResult


def copy_to_clipboard(text: str) -> DeliveryResult:
    """
    Copy text to the system clipboard.

    Args:
        text: Text to copy.

    Returns:
        DeliveryResult; failure if no clipboard mechanism is available.
    """
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as e:
        return DeliveryResult.failed("clipboard", f"System clipboard unavailable: {e}")
    return DeliveryResult(target="clipboard", message=f"Copied {len(text)} characters to clipboard")
