"""Website record.

A ``Website`` is a plain data record: it maps a folder in its owner's
storage to a Pico site and carries the theme and the option map. All
validation and access control lives in
``cms_pico.service.website_guard.WebsiteGuard``, which operates on a record
by reference.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass, field
from typing import Any, Mapping

from cms_pico.config import DEFAULT_THEME, TYPE_PRIVATE, TYPE_PUBLIC


@dataclass
class Website:
    r"""One configured site of one account.

    Attributes
    ----------
    site : str
        Unique slug used in the website address.
    name : str
        Human-readable display name.
    user_id : str
        Owning account.
    path : str
        Folder, relative to the owner's storage root, holding the sources.
    theme : str
        Theme applied when rendering.
    type : int
        ``TYPE_PUBLIC`` or ``TYPE_PRIVATE``.
    options : dict[str, str]
        Free-form string options (``private``, ``content_dir``, ...).
    id : int
        Persistence id; ``0`` until saved.
    creation : int
        Unix timestamp of creation.
    viewer : str | None
        Account requesting a page in the current request. Never persisted.

    Examples
    --------
    >>> w = Website(site="blog", name="My Blog", user_id="alice", path="sites/blog")
    >>> w.set_option("private", "1")
    >>> w.get_option("private")
    '1'
    >>> "viewer" in w.to_dict()
    False
    """

    site: str = ""
    name: str = ""
    user_id: str = ""
    path: str = ""
    theme: str = DEFAULT_THEME
    type: int = TYPE_PUBLIC
    options: dict[str, str] = field(default_factory=dict)
    id: int = 0
    creation: int = field(default_factory=lambda: int(time.time()))
    viewer: str | None = None

    @property
    def is_private_type(self) -> bool:
        return self.type == TYPE_PRIVATE

    def get_option(self, key: str, default: str = "") -> str:
        return self.options.get(key, default)

    def set_option(self, key: str, value: Any) -> None:
        """Store ``value`` as a string under ``key``; ``None`` removes the key."""
        if value is None:
            self.options.pop(key, None)
            return
        self.options[key] = str(value)

    def options_json(self) -> str:
        return json.dumps(self.options, ensure_ascii=False)

    def set_options_json(self, raw: str | None) -> None:
        """Replace the options from a JSON object string; empty input clears them."""
        if not raw:
            self.options = {}
            return
        data = json.loads(raw)
        if not isinstance(data, dict):
            raise ValueError("Website options must be a JSON object")
        self.options = {str(k): str(v) for k, v in data.items()}

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "site": self.site,
            "name": self.name,
            "user_id": self.user_id,
            "path": self.path,
            "theme": self.theme,
            "type": self.type,
            "options": dict(self.options),
            "creation": self.creation,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Website:
        """Build a record from ``to_dict`` output; ``options`` may be a JSON string."""
        website = cls(
            site=str(data.get("site", "")),
            name=str(data.get("name", "")),
            user_id=str(data.get("user_id", "")),
            path=str(data.get("path", "")),
            theme=str(data.get("theme") or DEFAULT_THEME),
            type=int(data.get("type", TYPE_PUBLIC)),
            id=int(data.get("id", 0)),
        )
        if "creation" in data:
            website.creation = int(data["creation"])
        options = data.get("options")
        if isinstance(options, str):
            website.set_options_json(options)
        elif options:
            website.options = {str(k): str(v) for k, v in options.items()}
        return website


__all__ = ["Website"]
