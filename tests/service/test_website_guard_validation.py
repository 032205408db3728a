"""Tests for the save-time validation and path helpers of ``WebsiteGuard``."""

import pytest

from cms_pico.exceptions import (
    ContentNotLocalError,
    InvalidCharsError,
    InvalidPathError,
    MinLengthError,
    NotOwnerError,
    WebsiteValidationError,
)
from cms_pico.i18n import Localizer
from cms_pico.model.website import Website
from cms_pico.service.website_guard import WebsiteGuard


def _guard(storage, **fields) -> WebsiteGuard:
    defaults = {"site": "my-site_1", "name": "My Site", "user_id": "alice", "path": "valid/dir"}
    defaults.update(fields)
    return WebsiteGuard(Website(**defaults), storage, Localizer("en"))


def test_valid_website_passes(storage):
    _guard(storage).validate_for_save()


@pytest.mark.parametrize("site", ["", "a", "ab"])
def test_short_site_fails_before_charset_check(storage, site):
    # "@" is outside the charset, but the length check runs first
    with pytest.raises(MinLengthError) as exc:
        _guard(storage, site=site.replace("a", "@")).validate_for_save()
    assert exc.value.context["field"] == "site"


def test_short_name_is_reported_after_site(storage):
    with pytest.raises(MinLengthError) as exc:
        _guard(storage, site="abc", name="abcd").validate_for_save()
    assert exc.value.context["field"] == "name"
    assert exc.value.message == "The name of the website must be longer"


def test_short_site_reported_before_short_name(storage):
    with pytest.raises(MinLengthError) as exc:
        _guard(storage, site="ab", name="x").validate_for_save()
    assert exc.value.context["field"] == "site"


@pytest.mark.parametrize("path", ["../x", "a/./b", "a/..", ".", "sites/../../etc"])
def test_dot_segments_fail_with_invalid_path(storage, path):
    with pytest.raises(InvalidPathError):
        _guard(storage, site="abc", name="abcde", path=path).validate_for_save()


def test_invalid_path_reported_before_invalid_chars(storage):
    with pytest.raises(InvalidPathError):
        _guard(storage, site="bad site", path="../x").validate_for_save()


@pytest.mark.parametrize("path", ["a..b/c", ".hidden/site", "site.v2"])
def test_dots_inside_segment_names_are_allowed(storage, path):
    _guard(storage, path=path).validate_for_save()


@pytest.mark.parametrize("site", ["bad site", "a/b/c", "me@home", "café", "dot.com"])
def test_site_with_other_chars_fails(storage, site):
    with pytest.raises(InvalidCharsError) as exc:
        _guard(storage, site=site).validate_for_save()
    assert isinstance(exc.value, WebsiteValidationError)
    assert exc.value.code == "INVALID_CHARS"


@pytest.mark.parametrize("site", ["abc", "ABC-def_123", "___", "a-b"])
def test_site_with_allowed_chars_passes(storage, site):
    _guard(storage, site=site).validate_for_save()


def test_messages_are_translated(storage):
    guard = WebsiteGuard(Website(site="ab", name="Long name"), storage, Localizer("sv"))
    with pytest.raises(MinLengthError) as exc:
        guard.validate_for_save()
    assert exc.value.message == "Webbplatsens adress måste vara längre"


def test_absolute_path_ends_with_slash(storage, data_dir):
    guard = _guard(storage, path="sites/blog")
    assert guard.absolute_path() == f"{data_dir}/alice/files/sites/blog/"
    assert _guard(storage, path="sites/blog/").absolute_path().endswith("blog/")


def test_owner_view_is_built_once(storage):
    guard = _guard(storage)
    first = guard.owner_view
    guard.absolute_path()
    assert guard.owner_view is first
    assert first.user_id == "alice"


def test_relative_path_passthrough_and_strip(storage):
    guard = _guard(storage, path="sites/blog")
    root = guard.absolute_path()
    assert guard.relative_path("content/index.md") == "content/index.md"
    assert guard.relative_path(root + "content/index.md") == "content/index.md"
    assert guard.relative_path(root) == ""


def test_relative_path_of_root_without_trailing_slash(storage):
    guard = _guard(storage, path="sites/blog")
    assert guard.relative_path(guard.absolute_path().rstrip("/")) == ""


def test_relative_path_outside_root_fails(storage):
    guard = _guard(storage, path="sites/blog")
    with pytest.raises(InvalidPathError):
        guard.relative_path("/etc/passwd")
    with pytest.raises(InvalidPathError):
        guard.relative_path(guard.absolute_path().rstrip("/") + "-other/x.md")


def test_content_must_be_local(storage):
    guard = _guard(storage, path="sites/blog")
    root = guard.absolute_path()
    guard.assert_content_is_local(root + "content/")
    with pytest.raises(ContentNotLocalError):
        guard.assert_content_is_local("/tmp/content/")
    with pytest.raises(ContentNotLocalError):
        guard.assert_content_is_local(root + "../../other/content/")


def test_assert_owned_by(storage):
    guard = _guard(storage)
    guard.assert_owned_by("alice")
    with pytest.raises(NotOwnerError):
        guard.assert_owned_by("bob")
