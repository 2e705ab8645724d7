"""URL path localization helpers.

Pure functions over path strings: find the language segment of a path,
strip it, or prefix a path with a language. No router, history or
navigation is involved; callers apply the results themselves.

Languages are passed already formatted the way they appear in URLs (see
locale_utils.format_language), e.g. ("en", "it") or ("en-US", "it-IT").

    get_localized_segment("/it/home", ["en", "it"])   -> "/it/"
    strip_localized_segment("/it/home", ["en", "it"]) -> "/home"
    get_localized_path("it", "/home", ["en", "it"])   -> "/it/home"

Python 3.13+. Zero external dependencies.
"""

import re
from collections.abc import Iterable

__all__ = [
    "get_localized_path",
    "get_localized_segment",
    "get_segment_language",
    "strip_localized_segment",
    "strip_trailing_slash",
]

_PATH_END_RE = re.compile(r"#|\?|$")


def get_localized_segment(path: str, languages: Iterable[str]) -> str | None:
    """Find the first "/lang/" or trailing "/lang" segment of a path.

    Languages are tried in order; the first one present wins.

    Returns:
        The matched segment including its slashes, or None
    """
    for language in languages:
        match = re.search(rf"(/{re.escape(language)}/)|(/{re.escape(language)}$)", path)
        if match is not None:
            return match[0]
    return None


def get_segment_language(path: str, languages: Iterable[str]) -> str | None:
    """Language named by the localized segment of a path, or None."""
    segment = get_localized_segment(path, languages)
    if segment is None:
        return None
    return segment.replace("/", "")


def strip_localized_segment(path: str, languages: Iterable[str]) -> str:
    """Remove the language segment from a path (unchanged if there is none).

    Example:
        >>> strip_localized_segment("/en", ["en"])
        '/'
    """
    segment = get_localized_segment(path, languages)
    if segment is None:
        return path
    return path.replace(segment, "/", 1)


def strip_trailing_slash(url: str) -> str:
    """Drop a slash that ends the path part of a URL, keeping query and fragment.

    Example:
        >>> strip_trailing_slash("/it/?q=1")
        '/it?q=1'
    """
    match = _PATH_END_RE.search(url)
    path_end = match.start() if match is not None else len(url)
    dropped = path_end - 1 if path_end > 0 and url[path_end - 1] == "/" else path_end
    return url[:dropped] + url[path_end:]


def get_localized_path(language: str, path: str, languages: Iterable[str]) -> str:
    """Prefix a path with a language unless it already carries that language.

    Args:
        language: Formatted language to add ("it")
        path: Path starting with "/", optionally with query and fragment
        languages: All languages that may appear as a segment

    Example:
        >>> get_localized_path("it", "/", ["en", "it"])
        '/it'
        >>> get_localized_path("it", "/it/home", ["en", "it"])
        '/it/home'
    """
    segment = get_localized_segment(path, languages)
    if segment is not None and language in segment:
        return path
    return strip_trailing_slash(f"/{language}{path}")
