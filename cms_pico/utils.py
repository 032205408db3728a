"""Small string and path helpers shared by the guard and the themes service."""

from __future__ import annotations

from cms_pico.config import PATH_SEPARATOR


def end_slash(path: str) -> str:
    """Return ``path`` with exactly one trailing separator appended if missing.

    Examples
    --------
    >>> end_slash("/data/alice/files/site")
    '/data/alice/files/site/'
    >>> end_slash("/data/alice/files/site/")
    '/data/alice/files/site/'
    """
    if path.endswith(PATH_SEPARATOR):
        return path
    return path + PATH_SEPARATOR


def check_chars(text: str, allowed: str) -> bool:
    """Return ``True`` when every character of ``text`` is in ``allowed``."""
    return all(char in allowed for char in text)


def path_segments(path: str) -> list[str]:
    """Split a storage path into its segments (empty segments kept)."""
    return path.split(PATH_SEPARATOR)


__all__ = ["check_chars", "end_slash", "path_segments"]
