"""Internationalization helpers for user-facing messages.

Provide the message table and the ``Localizer`` passed into services so
every raised error carries translated text. Lookups never fail: a missing
language falls back to English and a missing key falls back to the key.

Typical usage::

    from cms_pico.i18n import Localizer

    l10n = Localizer("sv")
    l10n.t("theme_not_found")

"""

from __future__ import annotations

from typing import Any

from cms_pico.config import LANG

TEXTS: dict[str, dict[str, str]] = {
    "en": {
        "theme_not_found": "Theme does not exist",
        "theme_not_custom": "Theme is not a custom theme",
        "site_too_short": "The address of the website must be longer",
        "name_too_short": "The name of the website must be longer",
        "path_malformed": "Path is malformed, please check.",
        "path_outside_website": "Path is not part of this website.",
        "site_invalid_chars": (
            "The address of the website can only contains alpha numeric chars"
        ),
        "content_not_local": "Content Directory is not valid.",
        "not_owner": "You are not the owner of this website",
        "webpage_not_found": "Webpage does not exist",
        "website_private": (
            "Website is private. You do not have access to this website"
        ),
        "website_valid": "Website {site} is valid.",
        "theme_added": "Theme {theme} added.",
        "theme_removed": "Theme {theme} removed.",
        "no_themes": "No themes found.",
    },
    "sv": {
        "theme_not_found": "Temat finns inte",
        "theme_not_custom": "Temat är inte ett anpassat tema",
        "site_too_short": "Webbplatsens adress måste vara längre",
        "name_too_short": "Webbplatsens namn måste vara längre",
        "path_malformed": "Sökvägen är felaktig, kontrollera den.",
        "path_outside_website": "Sökvägen tillhör inte denna webbplats.",
        "site_invalid_chars": (
            "Webbplatsens adress får bara innehålla alfanumeriska tecken"
        ),
        "content_not_local": "Innehållskatalogen är inte giltig.",
        "not_owner": "Du äger inte denna webbplats",
        "webpage_not_found": "Webbsidan finns inte",
        "website_private": (
            "Webbplatsen är privat. Du har inte åtkomst till denna webbplats"
        ),
        "website_valid": "Webbplatsen {site} är giltig.",
        "theme_added": "Temat {theme} har lagts till.",
        "theme_removed": "Temat {theme} har tagits bort.",
        "no_themes": "Inga teman hittades.",
    },
}


def translate(key: str, lang: str | None = None) -> str:
    r"""Translate a message key to the given (or module default) language.

    Parameters
    ----------
    key : str
        The message key to be translated.
    lang : str | None, optional
        Language code; ``None`` uses the module-level ``LANG``.

    Returns
    -------
    str
        The translated string if available, or the key itself as fallback.

    Examples
    --------
    >>> translate("theme_not_found")
    'Theme does not exist'
    >>> translate("theme_not_found", "sv")
    'Temat finns inte'
    >>> translate("UNKNOWN_KEY")
    'UNKNOWN_KEY'
    """
    table = TEXTS.get(lang or LANG, TEXTS["en"])
    return table.get(key, TEXTS["en"].get(key, key))


_ = translate


class Localizer:
    """Translate message keys for one language.

    Injected into services in place of a host-provided localization
    singleton. ``t`` formats named placeholders when parameters are given.
    """

    def __init__(self, lang: str = LANG) -> None:
        self.lang = lang

    def t(self, key: str, **params: Any) -> str:
        text = translate(key, self.lang)
        if params:
            return text.format(**params)
        return text


__all__ = ["Localizer", "TEXTS", "translate"]
