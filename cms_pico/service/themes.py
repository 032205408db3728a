"""Theme registry.

Themes come from two places: a fixed list of built-in themes shipped with
the plugin, and custom themes an administrator registered, stored as a JSON
array in the application config store. ``ThemesService`` lists and
validates both, and discovers theme directories installed on disk that are
not registered yet.

Functions
---------
- ``ThemesService.list_themes``: built-in and/or custom theme names.
- ``ThemesService.assert_valid_theme``: reject unknown theme names.
- ``ThemesService.list_new_themes``: installed but unregistered themes.
- ``ThemesService.add_custom_theme`` / ``remove_custom_theme``: manage the
  custom list.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from cms_pico.config import BUILTIN_THEMES, CONFIG_CUSTOM_THEMES
from cms_pico.exceptions import ThemeNotFoundError
from cms_pico.i18n import Localizer
from cms_pico.storage.app_config import AppConfigStore

logger = logging.getLogger(__name__)


class ThemesService:
    r"""List, validate and register Pico themes.

    Parameters
    ----------
    config : AppConfigStore
        Store holding the JSON-encoded custom theme list.
    l10n : Localizer
        Translator for error messages.
    themes_dir : Path
        Directory with one sub-directory per installed theme.

    Examples
    --------
    >>> from cms_pico.storage import AppConfigStore
    >>> store = AppConfigStore()
    >>> store.set_app_value("custom_themes", '["dark"]')
    >>> service = ThemesService(store, Localizer(), Path("/srv/themes"))
    >>> service.list_themes()
    ['default', 'dark']
    >>> service.list_themes(custom_only=True)
    ['dark']
    """

    def __init__(
        self, config: AppConfigStore, l10n: Localizer, themes_dir: Path
    ) -> None:
        self.config = config
        self.l10n = l10n
        self.themes_dir = Path(themes_dir)

    def list_themes(self, custom_only: bool = False) -> list[str]:
        """Return built-in themes followed by custom ones, or custom ones only.

        Order is preserved and duplicates are kept.
        """
        themes: list[str] = [] if custom_only else list(BUILTIN_THEMES)
        themes.extend(self._custom_themes())
        return themes

    def _custom_themes(self) -> list[str]:
        raw = self.config.get_app_value(CONFIG_CUSTOM_THEMES)
        if not raw:
            return []
        try:
            customs = json.loads(raw)
        except ValueError:
            logger.warning(f"Ignoring undecodable '{CONFIG_CUSTOM_THEMES}' config value")
            return []
        if isinstance(customs, dict):
            customs = list(customs.values())
        if not isinstance(customs, list):
            logger.warning(f"Ignoring non-list '{CONFIG_CUSTOM_THEMES}' config value")
            return []
        return [str(theme) for theme in customs]

    def assert_valid_theme(self, theme: str) -> None:
        """Raise ``ThemeNotFoundError`` unless ``theme`` is built-in or custom."""
        if theme not in self.list_themes():
            raise ThemeNotFoundError(
                self.l10n.t("theme_not_found"), context={"theme": theme}
            )

    def list_new_themes(self) -> list[str]:
        r"""Return installed theme directories that are not registered.

        Scans the themes root on every call.

        Raises
        ------
        OSError
            If the themes root cannot be listed (for instance it is missing).
        """
        current = self.list_themes()
        return [theme for theme in self._theme_directories() if theme not in current]

    def _theme_directories(self) -> list[str]:
        return sorted(
            entry.name
            for entry in self.themes_dir.iterdir()
            if entry.is_dir() and not entry.name.startswith(".")
        )

    def add_custom_theme(self, theme: str) -> list[str]:
        r"""Register an installed, unregistered theme directory as custom theme.

        Returns
        -------
        list[str]
            The updated custom theme list.

        Raises
        ------
        ThemeNotFoundError
            If ``theme`` is not among ``list_new_themes()``.
        """
        if theme not in self.list_new_themes():
            raise ThemeNotFoundError(
                self.l10n.t("theme_not_found"), context={"theme": theme}
            )
        customs = self.list_themes(custom_only=True)
        customs.append(theme)
        self._save_custom_themes(customs)
        logger.info(f"Registered custom theme '{theme}'")
        return customs

    def remove_custom_theme(self, theme: str) -> list[str]:
        """Unregister every occurrence of a custom theme and return the new list."""
        customs = self.list_themes(custom_only=True)
        if theme not in customs:
            raise ThemeNotFoundError(
                self.l10n.t("theme_not_custom"), context={"theme": theme}
            )
        customs = [custom for custom in customs if custom != theme]
        self._save_custom_themes(customs)
        logger.info(f"Unregistered custom theme '{theme}'")
        return customs

    def _save_custom_themes(self, customs: list[str]) -> None:
        self.config.set_app_value(CONFIG_CUSTOM_THEMES, json.dumps(customs))


__all__ = ["ThemesService"]
