"""Validation and access control for a single website.

``WebsiteGuard`` wraps one ``Website`` record for the duration of a request
and answers the questions a controller asks around it: is the record fit to
be saved, where do its files live on disk, is a content directory local to
the owner, which page file does a request map to, and may the current
viewer read that page.

System Boundaries
-----------------
- Storage and localization are injected; nothing here reaches for a
  platform singleton.
- The owner view is built on first use and reused for the guard's lifetime.
- Every failure is raised immediately as an ``AppError`` subclass carrying a
  translated message. Only ``is_readable_by_viewer`` answers ``False``
  instead of raising.

Example
-------
>>> from cms_pico.model import Website
>>> from cms_pico.i18n import Localizer
>>> from pathlib import Path
>>> from cms_pico.storage import LocalStorage
>>> website = Website(site="blog", name="My Blog", user_id="alice", path="sites/blog")
>>> guard = WebsiteGuard(website, LocalStorage(Path("/srv/data")), Localizer())
>>> guard.validate_for_save()
>>> guard.absolute_path()
'/srv/data/alice/files/sites/blog/'
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from cms_pico.config import (
    ALPHA_NUMERIC_SCORES,
    FORBIDDEN_PATH_SEGMENTS,
    NAME_LENGTH_MIN,
    OPTION_PRIVATE,
    PAGE_ACCESS_META_KEY,
    PAGE_ACCESS_PRIVATE,
    PATH_SEPARATOR,
    SITE_LENGTH_MIN,
)
from cms_pico.exceptions import (
    AccessDeniedError,
    ContentNotLocalError,
    InvalidCharsError,
    InvalidPathError,
    MinLengthError,
    NodeNotFoundError,
    NotOwnerError,
    PageNotFoundError,
)
from cms_pico.i18n import Localizer
from cms_pico.model.website import Website
from cms_pico.storage.base import OwnerView, Storage
from cms_pico.utils import check_chars, end_slash, path_segments

logger = logging.getLogger(__name__)


class WebsiteGuard:
    r"""Validate a website record and enforce who may read its pages.

    Parameters
    ----------
    website : Website
        The record being validated or served. Read, never mutated.
    storage : Storage
        Backend used for path resolution and file lookups.
    l10n : Localizer
        Translator for the messages of raised errors.
    """

    def __init__(self, website: Website, storage: Storage, l10n: Localizer) -> None:
        self.website = website
        self.storage = storage
        self.l10n = l10n
        self._owner_view: OwnerView | None = None

    @property
    def owner_view(self) -> OwnerView:
        if self._owner_view is None:
            self._owner_view = OwnerView(self.storage, self.website.user_id)
        return self._owner_view

    # ------------------------------------------------------------------
    # Validation before save
    # ------------------------------------------------------------------

    def validate_for_save(self) -> None:
        r"""Check the record before it is persisted.

        Runs, in order, the length checks (site before name), the path
        segment check and the site charset check. The first failing check
        raises; the caller must not persist the record in that case.

        Raises
        ------
        MinLengthError
            If ``site`` is shorter than 3 or ``name`` shorter than 5 chars.
        InvalidPathError
            If ``path`` has a ``.`` or ``..`` segment.
        InvalidCharsError
            If ``site`` has a character outside ``[A-Za-z0-9_-]``.

        Examples
        --------
        >>> guard = WebsiteGuard(Website(site="ab"), storage, Localizer())
        >>> guard.validate_for_save()  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
          ...
        MinLengthError: MIN_LENGTH: The address of the website must be longer
        """
        self._check_min_lengths()
        self._check_path_segments()
        self._check_site_chars()
        logger.debug(f"Website '{self.website.site}' passed validation")

    def _check_min_lengths(self) -> None:
        if len(self.website.site) < SITE_LENGTH_MIN:
            raise MinLengthError(
                self.l10n.t("site_too_short"),
                context={"field": "site", "min": SITE_LENGTH_MIN},
            )
        if len(self.website.name) < NAME_LENGTH_MIN:
            raise MinLengthError(
                self.l10n.t("name_too_short"),
                context={"field": "name", "min": NAME_LENGTH_MIN},
            )

    def _check_path_segments(self) -> None:
        for segment in path_segments(self.website.path):
            if segment in FORBIDDEN_PATH_SEGMENTS:
                raise InvalidPathError(
                    self.l10n.t("path_malformed"), context={"path": self.website.path}
                )

    def _check_site_chars(self) -> None:
        if not check_chars(self.website.site, ALPHA_NUMERIC_SCORES):
            raise InvalidCharsError(
                self.l10n.t("site_invalid_chars"), context={"site": self.website.site}
            )

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def absolute_path(self) -> str:
        """Return the website root on disk, always ending with ``/``."""
        return end_slash(self.owner_view.get_local_file(self.website.path))

    def relative_path(self, candidate: str) -> str:
        r"""Return ``candidate`` relative to the website root.

        Non-absolute candidates are returned unchanged. The root itself, with
        or without its trailing slash, maps to ``""``.

        Raises
        ------
        InvalidPathError
            If an absolute candidate does not start with the website root.

        Examples
        --------
        >>> guard.relative_path("/srv/data/alice/files/sites/blog/content/a.md")
        'content/a.md'
        >>> guard.relative_path("content/a.md")
        'content/a.md'
        """
        if not candidate.startswith(PATH_SEPARATOR):
            return candidate
        root = self.absolute_path()
        if end_slash(candidate) == root:
            return ""
        if not candidate.startswith(root):
            raise InvalidPathError(
                self.l10n.t("path_outside_website"),
                context={"path": candidate, "root": root},
            )
        return candidate[len(root) :]

    def assert_content_is_local(self, path: str) -> None:
        """Raise ``ContentNotLocalError`` unless ``path`` stays inside the website root."""
        root = self.absolute_path()
        if not path.startswith(root) or ".." in path_segments(path):
            logger.info(f"Rejected non-local content path for '{self.website.site}'")
            raise ContentNotLocalError(
                self.l10n.t("content_not_local"), context={"path": path}
            )

    # ------------------------------------------------------------------
    # Storage lookups
    # ------------------------------------------------------------------

    def page_file_id(self, local: str = "") -> int:
        r"""Return the storage id of ``path + local`` in the owner's folder.

        Raises
        ------
        PageNotFoundError
            If the owner's storage has no such entry.
        """
        target = end_slash(self.website.path) + local
        try:
            node = self.storage.get_user_folder(self.website.user_id).get(target)
        except NodeNotFoundError:
            raise PageNotFoundError(
                self.l10n.t("webpage_not_found"), context={"page": local}
            ) from None
        return node.id

    def is_readable_by_viewer(self, local: str = "") -> bool:
        """Return whether the current viewer can read the page at ``local``.

        Answers ``False`` when there is no viewer, when the page does not
        exist, or when the viewer has no storage folder.
        """
        viewer = self.website.viewer
        if not viewer:
            return False
        try:
            file_id = self.page_file_id(local)
            viewer_nodes = self.storage.get_user_folder(viewer).get_by_id(file_id)
        except (PageNotFoundError, NodeNotFoundError):
            return False
        return any(node.is_readable() for node in viewer_nodes)

    # ------------------------------------------------------------------
    # Access control
    # ------------------------------------------------------------------

    def is_page_visible(self, meta: Mapping[str, Any]) -> bool:
        r"""Return ``True`` when a page with front-matter ``meta`` is public.

        A page is private when its ``access`` field equals ``private``
        (case-insensitively), or, without such a field, when the website's
        ``private`` option is ``"1"``.
        """
        access = meta.get(PAGE_ACCESS_META_KEY)
        if access is not None:
            return str(access).lower() != PAGE_ACCESS_PRIVATE
        return self.website.get_option(OPTION_PRIVATE) != "1"

    def assert_viewer_has_access(self, local: str, meta: Mapping[str, Any]) -> None:
        r"""Raise unless the current viewer may read the page.

        Public pages always pass. Private pages pass for the owner and for
        any viewer with read access to the underlying file.

        Raises
        ------
        InvalidPathError
            If ``local`` is absolute but outside the website root.
        AccessDeniedError
            If the page is private and the viewer may not read it.
        """
        relative = self.relative_path(local)
        if self.is_page_visible(meta):
            return
        viewer = self.website.viewer
        if viewer == self.website.user_id or self.is_readable_by_viewer(relative):
            return
        logger.info(
            f"Denied private page '{relative}' of '{self.website.site}' to viewer '{viewer}'"
        )
        raise AccessDeniedError(
            self.l10n.t("website_private"),
            context={"site": self.website.site, "page": relative},
        )

    def assert_owned_by(self, user_id: str) -> None:
        if self.website.user_id != user_id:
            raise NotOwnerError(
                self.l10n.t("not_owner"), context={"site": self.website.site}
            )


__all__ = ["WebsiteGuard"]
