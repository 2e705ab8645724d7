"""Locale utilities: BCP-47 language tags and Babel locale lookup.

Centralizes locale format normalization used throughout the codebase so
that cache keys and Babel lookups agree on one canonical form.

Language tags handled here have the shape used by the formatting layer:

    language[-Script][-REGION][-u-extension]

    en
    en-US
    zh-Hant-TW
    en-US-u-nu-latn-ca-gregory

Python 3.13+.
"""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from babel import Locale

__all__ = [
    "LanguageFormat",
    "LanguageTag",
    "clear_locale_cache",
    "format_language",
    "get_babel_locale",
    "get_numbering_system",
    "lookup_matcher",
    "normalize_locale",
    "parse_language",
    "validate_language",
]

_LANGUAGE_TAG_RE = re.compile(
    r"^(?P<language>[a-z]{2,3})"
    r"(?:-(?P<script>[A-Z][a-z]{3}))?"
    r"(?:-(?P<region>[A-Z]{2}))?"
    r"(?P<extension>-u.+)?$"
)

_EXTENSION_RE = re.compile(r"[-_]u[-_].*$")
_NUMBERING_SYSTEM_RE = re.compile(
    r"[-_]u(?:[-_][0-9a-z]{2,8})*?[-_]nu[-_](?P<system>[0-9a-z]{3,8})(?:[-_]|$)", re.IGNORECASE
)


class LanguageFormat(StrEnum):
    """Which subtags format_language() keeps."""

    LANGUAGE = "language"
    LANGUAGE_SCRIPT = "language-script"
    LANGUAGE_REGION = "language-region"
    LANGUAGE_SCRIPT_REGION = "language-script-region"


@dataclass(frozen=True, slots=True)
class LanguageTag:
    """Parsed BCP-47 language tag.

    Attributes:
        language: ISO 639 language code ("en")
        script: ISO 15924 script code ("Latn"), or None
        region: ISO 3166 region code ("US"), or None
        extension: Unicode extension including its leading "-u", or None
    """

    language: str
    script: str | None = None
    region: str | None = None
    extension: str | None = None


def validate_language(tag: str) -> bool:
    """Check that a tag has the language[-Script][-REGION][-u-ext] shape.

    Example:
        >>> validate_language("en-Zzzz-US-u-nu-latn")
        True
        >>> validate_language("en-nu-latn")
        False
    """
    return _LANGUAGE_TAG_RE.match(tag) is not None


def parse_language(tag: str) -> LanguageTag | None:
    """Split a language tag into its subtags, or None if it is malformed."""
    match = _LANGUAGE_TAG_RE.match(tag)
    if match is None:
        return None
    return LanguageTag(
        language=match["language"],
        script=match["script"],
        region=match["region"],
        extension=match["extension"],
    )


def format_language(tag: str, fmt: LanguageFormat | str | None = None) -> str:
    """Reduce a language tag to the subtags selected by fmt.

    Missing subtags are simply omitted, so formatting "en" as
    "language-region" yields "en". Without fmt the tag is returned unchanged.

    Args:
        tag: Language tag, e.g. "en-Zzzz-US"
        fmt: One of the LanguageFormat values

    Returns:
        Formatted tag ("" for an empty input)

    Raises:
        ValueError: If the tag is malformed or fmt is unknown
    """
    if not tag:
        return ""
    parsed = parse_language(tag)
    if parsed is None:
        msg = f"Invalid language tag '{tag}'"
        raise ValueError(msg)
    if fmt is None:
        return tag

    parts = [parsed.language]
    match LanguageFormat(fmt):
        case LanguageFormat.LANGUAGE:
            pass
        case LanguageFormat.LANGUAGE_SCRIPT:
            parts.append(parsed.script or "")
        case LanguageFormat.LANGUAGE_REGION:
            parts.append(parsed.region or "")
        case LanguageFormat.LANGUAGE_SCRIPT_REGION:
            parts.extend((parsed.script or "", parsed.region or ""))
    return "-".join(part for part in parts if part)


def lookup_matcher(
    languages: Iterable[str], fmt: LanguageFormat | str, language: str
) -> bool:
    """Check whether a requested language matches one of the configured ones.

    Both sides are reduced with format_language() before comparing, so a
    bare "en" matches a configured "en-US" under "language". A malformed
    requested tag never matches.

    Example:
        >>> lookup_matcher(["en-US", "it-IT"], "language", "en")
        True
        >>> lookup_matcher(["en-US", "it-IT"], "language", "fr")
        False
    """
    if not validate_language(language):
        return False
    requested = format_language(language, fmt)
    return any(format_language(configured, fmt) == requested for configured in languages)


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 locale code to the POSIX form Babel expects.

    Hyphens become underscores and a trailing Unicode extension
    ("-u-nu-latn") is dropped, since Babel does not understand it.

    This is the canonical normalization function: normalize at the entry
    point, then use the result for cache keys and lookups.

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("ar-EG-u-nu-arab")
        'ar_EG'
    """
    return _EXTENSION_RE.sub("", locale_code).replace("-", "_")


def get_numbering_system(locale_code: str) -> str | None:
    """Numbering system requested by a "-u-nu-" extension keyword, if any.

    normalize_locale() drops the extension, so callers that honor the
    keyword read it here and pass it to Babel separately.

    Example:
        >>> get_numbering_system("ar-EG-u-nu-latn")
        'latn'
        >>> get_numbering_system("en-US-u-ca-gregory-nu-arab")
        'arab'
        >>> get_numbering_system("ar-EG") is None
        True
    """
    match = _NUMBERING_SYSTEM_RE.search(locale_code)
    return match["system"].lower() if match else None


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Drop cached Babel Locale objects (tests, memory pressure)."""
    get_babel_locale.cache_clear()
