"""Tests for the built-in/custom theme registry."""

import json
from pathlib import Path

import pytest

from cms_pico.config import CONFIG_CUSTOM_THEMES
from cms_pico.exceptions import ThemeNotFoundError
from cms_pico.service.themes import ThemesService


@pytest.fixture
def service(config_store, l10n, themes_dir) -> ThemesService:
    return ThemesService(config_store, l10n, themes_dir)


def test_list_themes_without_customs(service):
    assert service.list_themes() == ["default"]
    assert service.list_themes(custom_only=True) == []


def test_list_themes_appends_customs_in_order(service, config_store):
    config_store.set_app_value(CONFIG_CUSTOM_THEMES, json.dumps(["zeta", "alpha", "default"]))
    assert service.list_themes(custom_only=True) == ["zeta", "alpha", "default"]
    # duplicates are kept
    assert service.list_themes() == ["default", "zeta", "alpha", "default"]


def test_list_themes_accepts_json_object(service, config_store):
    config_store.set_app_value(CONFIG_CUSTOM_THEMES, '{"0": "dark", "1": "light"}')
    assert service.list_themes(custom_only=True) == ["dark", "light"]


@pytest.mark.parametrize("raw", ["not json", "null", "42", '"dark"'])
def test_list_themes_ignores_bad_config(service, config_store, raw):
    config_store.set_app_value(CONFIG_CUSTOM_THEMES, raw)
    assert service.list_themes() == ["default"]


def test_assert_valid_theme(service, config_store):
    config_store.set_app_value(CONFIG_CUSTOM_THEMES, '["dark"]')
    service.assert_valid_theme("default")
    service.assert_valid_theme("dark")
    with pytest.raises(ThemeNotFoundError) as exc:
        service.assert_valid_theme("minimal")
    assert exc.value.message == "Theme does not exist"
    assert exc.value.context == {"theme": "minimal"}


def test_list_new_themes_filters_registered_hidden_and_files(service, config_store):
    assert service.list_new_themes() == ["dark", "minimal"]
    config_store.set_app_value(CONFIG_CUSTOM_THEMES, '["dark"]')
    assert service.list_new_themes() == ["minimal"]


def test_list_new_themes_reads_disk_each_call(service, themes_dir: Path):
    assert "fresh" not in service.list_new_themes()
    (themes_dir / "fresh").mkdir()
    assert "fresh" in service.list_new_themes()


def test_list_new_themes_missing_root_raises_os_error(config_store, l10n, tmp_path):
    service = ThemesService(config_store, l10n, tmp_path / "missing")
    with pytest.raises(OSError):
        service.list_new_themes()


def test_add_custom_theme_persists(service, config_store):
    assert service.add_custom_theme("dark") == ["dark"]
    assert service.add_custom_theme("minimal") == ["dark", "minimal"]
    assert json.loads(config_store.get_app_value(CONFIG_CUSTOM_THEMES)) == ["dark", "minimal"]
    assert service.list_new_themes() == []


@pytest.mark.parametrize("theme", ["default", ".hidden", "README.md", "nope"])
def test_add_custom_theme_rejects_unknown_or_registered(service, theme):
    with pytest.raises(ThemeNotFoundError):
        service.add_custom_theme(theme)


def test_remove_custom_theme(service, config_store):
    config_store.set_app_value(CONFIG_CUSTOM_THEMES, '["dark", "minimal", "dark"]')
    assert service.remove_custom_theme("dark") == ["minimal"]
    assert service.list_themes() == ["default", "minimal"]


def test_remove_builtin_theme_fails(service):
    with pytest.raises(ThemeNotFoundError) as exc:
        service.remove_custom_theme("default")
    assert exc.value.message == "Theme is not a custom theme"
