"""Tests for environment driven settings."""

import os
from pathlib import Path

import pytest

import cms_pico.config as cfg
from cms_pico.exceptions import ConfigurationError
from cms_pico.settings import Settings

_VARS = ("PICO_DATA_DIR", "PICO_THEMES_DIR", "PICO_APP_CONFIG", "PICO_LANG", "LOG_LEVEL")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path: Path):
    for var in _VARS:
        monkeypatch.delenv(var, raising=False)
    # Point PROJECT_ROOT away from the real repo to avoid loading a real .env
    monkeypatch.setattr(cfg, "PROJECT_ROOT", tmp_path, raising=False)


def test_defaults():
    s = Settings()
    assert s.data_dir == cfg.DEFAULT_DATA_DIR
    assert s.themes_dir == cfg.DEFAULT_THEMES_DIR
    assert s.app_config_file == cfg.DEFAULT_DATA_DIR / "appconfig.json"
    assert s.language == "en"
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch, tmp_path: Path):
    monkeypatch.setenv("PICO_DATA_DIR", str(tmp_path / "d"))
    monkeypatch.setenv("PICO_THEMES_DIR", str(tmp_path / "t"))
    monkeypatch.setenv("PICO_LANG", "sv")
    s = Settings()
    assert s.data_dir == tmp_path / "d"
    assert s.themes_dir == tmp_path / "t"
    assert s.app_config_file == tmp_path / "d" / "appconfig.json"
    assert s.language == "sv"


def test_unsupported_language(monkeypatch):
    monkeypatch.setenv("PICO_LANG", "xx")
    with pytest.raises(ConfigurationError):
        Settings()


def test_loads_dotenv(monkeypatch, tmp_path: Path):
    (tmp_path / ".env").write_text(
        f"PICO_THEMES_DIR={tmp_path / 'env-themes'}\nPICO_LANG=sv\n", encoding="utf-8"
    )
    s = Settings()
    assert s.themes_dir == tmp_path / "env-themes"
    assert s.language == "sv"
    # load_dotenv writes os.environ directly
    for var in _VARS:
        os.environ.pop(var, None)
