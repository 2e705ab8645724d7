"""Tests for URL path localization helpers."""

import pytest

from l10nkit.routing import (
    get_localized_path,
    get_localized_segment,
    get_segment_language,
    strip_localized_segment,
    strip_trailing_slash,
)

LANGUAGES = ("en", "it", "en-US")


class TestLocalizedSegment:
    """Test finding the language segment of a path."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/it/home", "/it/"),
            ("/it", "/it"),
            ("/shop/en/cart", "/en/"),
            ("/en-US/home", "/en-US/"),
            ("/home", None),
            ("/items/home", None),
            ("", None),
        ],
    )
    def test_segment(self, path: str, expected: str | None) -> None:
        assert get_localized_segment(path, LANGUAGES) == expected

    def test_first_language_wins(self) -> None:
        assert get_localized_segment("/it/en/page", ["en", "it"]) == "/en/"

    def test_language_is_matched_literally(self) -> None:
        """Regex metacharacters in a language never act as wildcards."""
        assert get_localized_segment("/enXUS/home", ["en.US"]) is None

    def test_segment_language(self) -> None:
        assert get_segment_language("/it/home", LANGUAGES) == "it"
        assert get_segment_language("/home", LANGUAGES) is None


class TestStripLocalizedSegment:
    """Test removing the language segment."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/it/home", "/home"),
            ("/en", "/"),
            ("/shop/it/cart", "/shop/cart"),
            ("/home", "/home"),
        ],
    )
    def test_strip(self, path: str, expected: str) -> None:
        assert strip_localized_segment(path, LANGUAGES) == expected


class TestStripTrailingSlash:
    """Test trailing slash removal on the path part of a URL."""

    @pytest.mark.parametrize(
        ("url", "expected"),
        [
            ("/it/", "/it"),
            ("/it", "/it"),
            ("/it/?q=1", "/it?q=1"),
            ("/it/#top", "/it#top"),
            ("/it?next=/a/", "/it?next=/a/"),
            ("/", ""),
            ("", ""),
        ],
    )
    def test_strip(self, url: str, expected: str) -> None:
        assert strip_trailing_slash(url) == expected


class TestLocalizedPath:
    """Test prefixing paths with a language."""

    @pytest.mark.parametrize(
        ("language", "path", "expected"),
        [
            ("it", "/home", "/it/home"),
            ("it", "/", "/it"),
            ("it", "/it/home", "/it/home"),
            ("en", "/home?q=1", "/en/home?q=1"),
            ("en-US", "/cart/", "/en-US/cart"),
        ],
    )
    def test_localized_path(self, language: str, path: str, expected: str) -> None:
        assert get_localized_path(language, path, LANGUAGES) == expected
