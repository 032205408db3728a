"""Page resolution and rendering for a website.

This module turns a page request (``"blog/first-post"``) into rendered HTML
while enforcing the website guard's rules: the content directory must be
local to the owner, the page must exist, and the viewer must be allowed to
read it according to the page's front-matter ``access`` field and the
website's ``private`` option.

System Boundaries
-----------------
- Front matter is a leading ``---`` fenced YAML block read with
  ``yaml.safe_load``; the body is converted with ``markdown2``. Theming and
  templating belong to the site generator.
- Page files are read from the local path returned by the guard.

Example
-------
>>> service = PageService()
>>> meta, html = service.parse_page("---\\naccess: private\\n---\\n# Hi")
>>> meta["access"]
'private'
>>> html.startswith("<h1>")
True
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path

import markdown2
import yaml

from cms_pico.config import (
    DEFAULT_CONTENT_DIR,
    INDEX_PAGE,
    MARKDOWN_EXTRAS,
    OPTION_CONTENT_DIR,
    PAGE_ACCESS_META_KEY,
    PAGE_ACCESS_PRIVATE,
    PAGE_FILE_SUFFIX,
    PATH_SEPARATOR,
)
from cms_pico.exceptions import PageNotFoundError
from cms_pico.service.website_guard import WebsiteGuard
from cms_pico.utils import end_slash

logger = logging.getLogger(__name__)

FRONT_MATTER_RE = re.compile(
    r"\A---[ \t]*\r?\n(.*?)(?:\r?\n)?^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


@dataclass
class RenderedPage:
    site: str
    page: str
    theme: str
    meta: dict[str, str] = field(default_factory=dict)
    html: str = ""


class PageService:
    """Resolve, authorize and render markdown pages of a website."""

    def parse_page(self, markdown_text: str) -> tuple[dict[str, str], str]:
        r"""Split a page into its front-matter metadata and body HTML.

        Only a ``---`` fenced YAML block at the very start of the page counts
        as front matter; everything after it is rendered as markdown.
        Malformed YAML marks the page private so it is never served to
        strangers by accident.

        Parameters
        ----------
        markdown_text : str
            Page source, optionally starting with a ``---`` delimited
            front-matter block.

        Returns
        -------
        tuple[dict[str, str], str]
            Metadata with lower-cased keys, and the rendered body.
        """
        meta: dict[str, str] = {}
        body = markdown_text
        match = FRONT_MATTER_RE.match(markdown_text)
        if match:
            body = markdown_text[match.end() :]
            try:
                data = yaml.safe_load(match.group(1))
            except yaml.YAMLError as exc:
                logger.warning(f"Malformed page front matter, treating page as private: {exc}")
                data = {PAGE_ACCESS_META_KEY: PAGE_ACCESS_PRIVATE}
            if isinstance(data, dict):
                meta = {
                    str(k).strip().lower(): "" if v is None else str(v).strip()
                    for k, v in data.items()
                }
        html = markdown2.markdown(body, extras=MARKDOWN_EXTRAS)
        return meta, str(html)

    def content_root(self, guard: WebsiteGuard) -> str:
        """Return the absolute content directory of the guarded website.

        Raises
        ------
        ContentNotLocalError
            If the ``content_dir`` option leaves the website root.
        """
        content_dir = guard.website.get_option(OPTION_CONTENT_DIR, DEFAULT_CONTENT_DIR)
        root = end_slash(guard.absolute_path() + content_dir.strip(PATH_SEPARATOR))
        guard.assert_content_is_local(root)
        return root

    @staticmethod
    def page_filename(page: str) -> str:
        """Map a page request to its markdown file name relative to the content root.

        Examples
        --------
        >>> PageService.page_filename("")
        'index.md'
        >>> PageService.page_filename("blog/")
        'blog/index.md'
        >>> PageService.page_filename("/blog/first")
        'blog/first.md'
        """
        page = page.lstrip(PATH_SEPARATOR)
        if page == "" or page.endswith(PATH_SEPARATOR):
            page += INDEX_PAGE
        return page + PAGE_FILE_SUFFIX

    def render_page(self, guard: WebsiteGuard, page: str) -> RenderedPage:
        r"""Render ``page`` of the guarded website for its current viewer.

        Raises
        ------
        ContentNotLocalError
            If the content directory or page path leaves the website root.
        PageNotFoundError
            If the page file does not exist.
        AccessDeniedError
            If the page is private and the viewer may not read it.
        """
        local_file = self.content_root(guard) + self.page_filename(page)
        guard.assert_content_is_local(local_file)
        source = Path(local_file)
        if not source.is_file():
            raise PageNotFoundError(
                guard.l10n.t("webpage_not_found"), context={"page": page}
            )
        meta, html = self.parse_page(source.read_text(encoding="utf-8"))
        guard.assert_viewer_has_access(local_file, meta)
        logger.debug(f"Rendered page '{page}' of '{guard.website.site}'")
        return RenderedPage(
            site=guard.website.site,
            page=page,
            theme=guard.website.theme,
            meta=meta,
            html=html,
        )


__all__ = ["PageService", "RenderedPage"]
