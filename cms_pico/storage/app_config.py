"""Application-scoped key-value config store.

Stores named string values for the app (for instance the JSON-encoded list
of custom themes). Values live in memory and, when a file path is given,
are persisted as a flat JSON object after each change.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class AppConfigStore:
    r"""Get and set string values scoped to the application.

    Parameters
    ----------
    path : Path | None, optional
        JSON file backing the store. ``None`` keeps values in memory only.

    Examples
    --------
    >>> store = AppConfigStore()
    >>> store.get_app_value("custom_themes")
    ''
    >>> store.set_app_value("custom_themes", '["dark"]')
    >>> store.get_app_value("custom_themes")
    '["dark"]'
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, str] = {}
        if self.path is not None and self.path.exists():
            self._values = self._load(self.path)

    @staticmethod
    def _load(path: Path) -> dict[str, str]:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"App config file {path} must hold a JSON object")
        return {str(k): str(v) for k, v in data.items()}

    def get_app_value(self, key: str, default: str = "") -> str:
        return self._values.get(key, default)

    def set_app_value(self, key: str, value: str) -> None:
        self._values[key] = str(value)
        logger.debug(f"App config value '{key}' updated")
        self._save()

    def delete_app_value(self, key: str) -> None:
        if self._values.pop(key, None) is not None:
            self._save()

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(self._values, ensure_ascii=False, indent=2), encoding="utf-8"
        )


__all__ = ["AppConfigStore"]
