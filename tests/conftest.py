"""Pytest configuration for test environment setup.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides shared fixtures: a local storage tree with two accounts, a
  localizer, an in-memory config store and a themes root.
"""

import os
import sys

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests
from pathlib import Path

import pytest

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from cms_pico.i18n import Localizer  # noqa: E402
from cms_pico.model.website import Website  # noqa: E402
from cms_pico.storage.app_config import AppConfigStore  # noqa: E402
from cms_pico.storage.local import LocalStorage  # noqa: E402


@pytest.fixture
def l10n() -> Localizer:
    return Localizer("en")


@pytest.fixture
def config_store() -> AppConfigStore:
    return AppConfigStore()


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Storage tree with a website of ``alice`` and an empty folder for ``bob``."""
    data = tmp_path / "data"
    site = data / "alice" / "files" / "sites" / "blog"
    (site / "content").mkdir(parents=True)
    (site / "content" / "index.md").write_text("# Welcome", encoding="utf-8")
    (site / "content" / "secret.md").write_text(
        "---\naccess: private\n---\n# Secret", encoding="utf-8"
    )
    (data / "bob" / "files").mkdir(parents=True)
    return data


@pytest.fixture
def storage(data_dir: Path) -> LocalStorage:
    return LocalStorage(data_dir)


@pytest.fixture
def website() -> Website:
    return Website(
        site="blog", name="My Blog", user_id="alice", path="sites/blog", viewer="alice"
    )


@pytest.fixture
def themes_dir(tmp_path: Path) -> Path:
    root = tmp_path / "themes"
    for name in ("default", "dark", "minimal", ".hidden"):
        (root / name).mkdir(parents=True)
    (root / "README.md").write_text("themes", encoding="utf-8")
    return root
