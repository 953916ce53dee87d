# nvimgen Delivery Module
# Adapters that move generated text to the clipboard, files, directories or Neovim

from nvimgen.delivery.clipboard import copy_to_clipboard
from nvimgen.delivery.directory import DirectoryStore
from nvimgen.delivery.files import save_to_file
from nvimgen.delivery.listener import ListenerClient, ListenerResponse, push_to_listener
from nvimgen.delivery.result import DeliveryResult

__all__ = [
    "DeliveryResult",
    "copy_to_clipboard",
    "save_to_file",
    "DirectoryStore",
    "ListenerClient",
    "ListenerResponse",
    "push_to_listener",
]
