"""Services of the website core.

- ``WebsiteGuard``: validation, path resolution and access control for one
  website record.
- ``ThemesService``: built-in and custom theme registry.
- ``PageService``: page resolution and markdown rendering.
"""

from .pages import PageService, RenderedPage
from .themes import ThemesService
from .website_guard import WebsiteGuard

__all__ = ["PageService", "RenderedPage", "ThemesService", "WebsiteGuard"]
