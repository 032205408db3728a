"""Storage and config collaborators consumed by the website core."""

from .app_config import AppConfigStore
from .base import Folder, Node, OwnerView, Storage
from .local import LocalFolder, LocalNode, LocalStorage

__all__ = [
    "AppConfigStore",
    "Folder",
    "LocalFolder",
    "LocalNode",
    "LocalStorage",
    "Node",
    "OwnerView",
    "Storage",
]
