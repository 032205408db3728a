"""Tests for the small path and string helpers."""

from cms_pico.config import ALPHA_NUMERIC_SCORES
from cms_pico.utils import check_chars, end_slash, path_segments


def test_end_slash():
    assert end_slash("a") == "a/"
    assert end_slash("a/") == "a/"
    assert end_slash("") == "/"


def test_check_chars():
    assert check_chars("my-site_1", ALPHA_NUMERIC_SCORES)
    assert check_chars("", ALPHA_NUMERIC_SCORES)
    assert not check_chars("my site", ALPHA_NUMERIC_SCORES)


def test_path_segments():
    assert path_segments("a/../b/") == ["a", "..", "b", ""]
