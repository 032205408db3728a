"""Storage collaborator interfaces.

The website guard only needs three things from the hosting platform's file
layer: a per-user folder to look paths and ids up in, the readability flag
of an entry, and the absolute on-disk location of a user-relative path.
These are expressed as structural protocols so any backend (the bundled
``LocalStorage`` or a test double) can be injected.
"""

from __future__ import annotations

from typing import Protocol


class Node(Protocol):
    """A file or folder entry as seen by one account."""

    id: int
    path: str

    def is_readable(self) -> bool: ...


class Folder(Protocol):
    """The storage root of one account."""

    def get(self, path: str) -> Node:
        """Return the entry at ``path``; raise ``NodeNotFoundError`` if absent."""
        ...

    def get_by_id(self, file_id: int) -> list[Node]:
        """Return every entry in this folder that refers to ``file_id``."""
        ...


class Storage(Protocol):
    """Platform-wide access to the per-account storage roots."""

    def get_user_folder(self, user_id: str) -> Folder: ...

    def get_local_file(self, user_id: str, path: str) -> str: ...


class OwnerView:
    """Resolve paths relative to a single owner's storage root.

    Parameters
    ----------
    storage : Storage
        Backend used to map relative paths to absolute on-disk paths.
    user_id : str
        The owning account.
    """

    def __init__(self, storage: Storage, user_id: str) -> None:
        self.storage = storage
        self.user_id = user_id

    def get_local_file(self, path: str) -> str:
        return self.storage.get_local_file(self.user_id, path)


__all__ = ["Folder", "Node", "OwnerView", "Storage"]
