"""Local filesystem implementation of the storage collaborator.

Each account owns ``<data_dir>/<user_id>/files``. File identifiers are inode
numbers, so a symlink placed in another account's tree acts as a share: it
resolves to the same id and is found by ``get_by_id`` when walking that
account's folder. Readability is whatever the operating system reports for
the entry.

Functions and classes
---------------------
- ``LocalNode``: one entry, with its id and absolute path.
- ``LocalFolder``: lookups by relative path and by id under one user root.
- ``LocalStorage``: maps account ids to folders and local paths.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from cms_pico.config import PATH_SEPARATOR
from cms_pico.exceptions import NodeNotFoundError

logger = logging.getLogger(__name__)

USER_FILES_SUBDIR: str = "files"


@dataclass(frozen=True)
class LocalNode:
    id: int
    path: str
    is_dir: bool = False

    def is_readable(self) -> bool:
        return os.access(self.path, os.R_OK)


class LocalFolder:
    r"""Storage root of one account on the local filesystem.

    Parameters
    ----------
    root : Path
        Absolute directory holding the account's files.

    Examples
    --------
    >>> import tempfile
    >>> from pathlib import Path
    >>> root = Path(tempfile.mkdtemp())
    >>> _ = (root / "index.md").write_text("# Hi", encoding="utf-8")
    >>> folder = LocalFolder(root)
    >>> folder.get("index.md").path.endswith("index.md")
    True
    """

    def __init__(self, root: Path) -> None:
        self.root = Path(root)

    def get(self, path: str) -> LocalNode:
        r"""Return the entry at ``path`` relative to this folder.

        The path is normalized lexically before the lookup; a path that
        would leave the folder is reported as missing rather than followed.

        Raises
        ------
        NodeNotFoundError
            If the entry does not exist or lies outside the folder.
        """
        root = os.path.normpath(str(self.root))
        target = os.path.normpath(os.path.join(root, path.lstrip(PATH_SEPARATOR)))
        if target != root and not target.startswith(root + os.sep):
            raise NodeNotFoundError(
                "Path escapes the user folder", context={"path": path}
            )
        try:
            stat = os.stat(target)
        except FileNotFoundError:
            raise NodeNotFoundError(
                "No such file or folder", context={"path": path}
            ) from None
        return LocalNode(id=stat.st_ino, path=target, is_dir=os.path.isdir(target))

    def get_by_id(self, file_id: int) -> list[LocalNode]:
        """Walk the folder, following symlinks, and collect entries with ``file_id``."""
        matches: list[LocalNode] = []
        seen_dirs: set[int] = set()
        for dirpath, dirnames, filenames in os.walk(self.root, followlinks=True):
            try:
                dir_ino = os.stat(dirpath).st_ino
            except OSError:
                continue
            if dir_ino in seen_dirs:
                # symlink cycle
                dirnames[:] = []
                continue
            seen_dirs.add(dir_ino)
            if dir_ino == file_id:
                matches.append(LocalNode(id=dir_ino, path=dirpath, is_dir=True))
            for filename in filenames:
                full = os.path.join(dirpath, filename)
                try:
                    ino = os.stat(full).st_ino
                except OSError:
                    # dangling symlink
                    continue
                if ino == file_id:
                    matches.append(LocalNode(id=ino, path=full))
        logger.debug(f"Found {len(matches)} entries for id {file_id} in {self.root}")
        return matches


class LocalStorage:
    """Per-account storage roots under a single data directory.

    Parameters
    ----------
    data_dir : Path
        Directory containing one ``<user_id>/files`` tree per account.
    """

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = Path(data_dir)

    def user_root(self, user_id: str) -> Path:
        return self.data_dir / user_id / USER_FILES_SUBDIR

    def get_user_folder(self, user_id: str) -> LocalFolder:
        root = self.user_root(user_id)
        if not root.is_dir():
            raise NodeNotFoundError(
                "User folder does not exist", context={"user_id": user_id}
            )
        return LocalFolder(root)

    def get_local_file(self, user_id: str, path: str) -> str:
        """Return the absolute on-disk location of ``path`` for ``user_id``.

        The result is not normalized, so ``..`` segments stay visible to
        callers that check them.
        """
        return os.path.join(str(self.user_root(user_id)), path.lstrip(PATH_SEPARATOR))


__all__ = ["LocalFolder", "LocalNode", "LocalStorage", "USER_FILES_SUBDIR"]
