"""Babel availability layer.

Babel plays the role of the host formatting capability: it renders numbers,
dates and relative times from CLDR data. Every locale-derived artifact in
l10nkit has an ASCII/Western fallback that is used when Babel cannot be
imported, so availability is checked once and reported through
is_babel_available() instead of failing at import time.

Usage Pattern:
    # At module top-level (for type hints only):
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from babel import Locale

    # At function call site (for runtime use):
    if not is_babel_available():
        return fallback
    numbers = get_babel_numbers()

Python 3.13+.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, tzinfo
from decimal import Decimal
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Literal, Protocol

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=redefined-builtin,unnecessary-ellipsis
# Reason: Protocol definitions mirror Babel's API which uses 'format' parameter name
class BabelNumbersProtocol(Protocol):
    """Subset of babel.numbers used by l10nkit."""

    def format_decimal(
        self,
        number: int | float | Decimal,
        format: str | None = None,
        locale: Locale | str | None = None,
        decimal_quantization: bool = True,
        group_separator: bool = True,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Format decimal number with locale-specific formatting."""
        ...

    def format_percent(
        self,
        number: int | float | Decimal,
        format: str | None = None,
        locale: Locale | str | None = None,
        decimal_quantization: bool = True,
        group_separator: bool = True,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Format percentage with locale-specific formatting."""
        ...

    def format_currency(
        self,
        number: int | float | Decimal,
        currency: str,
        format: str | None = None,
        locale: Locale | str | None = None,
        currency_digits: bool = True,
        format_type: Literal["standard", "accounting", "name"] = "standard",
        decimal_quantization: bool = True,
        group_separator: bool = True,
        *,
        numbering_system: str = "latn",
    ) -> str:
        """Format currency with locale-specific formatting."""
        ...


class BabelDatesProtocol(Protocol):
    """Subset of babel.dates used by l10nkit."""

    TIMEDELTA_UNITS: tuple[tuple[str, int], ...]

    def format_skeleton(
        self,
        skeleton: str,
        datetime: date | datetime | None = None,
        tzinfo: tzinfo | None = None,
        fuzzy: bool = True,
        locale: Locale | str | None = None,
    ) -> str:
        """Format datetime from a CLDR skeleton."""
        ...

    def format_date(
        self,
        date: date | datetime | None = None,
        format: str = "medium",
        locale: Locale | str | None = None,
    ) -> str:
        """Format date with locale-specific formatting."""
        ...

    def format_timedelta(
        self,
        delta: timedelta | int | float,
        granularity: str = "second",
        threshold: float = 0.85,
        add_direction: bool = False,
        format: Literal["narrow", "short", "medium", "long"] = "long",
        locale: Locale | str | None = None,
    ) -> str:
        """Format a time delta, optionally with a direction (in / ago)."""
        ...

    def get_timezone(self, zone: str | tzinfo | None = None) -> Any:
        """Resolve an IANA timezone name."""
        ...
# pylint: enable=redefined-builtin,unnecessary-ellipsis


__all__ = [
    "BabelDatesProtocol",
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_dates",
    "get_babel_numbers",
    "get_unknown_locale_error",
    "get_unsupported_numbering_system_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


class BabelImportError(ImportError):
    """Raised when Babel is required but not installed."""

    def __init__(self, feature: str) -> None:
        """Create error with feature-specific message.

        Args:
            feature: Name of the feature/function requiring Babel
        """
        message = (
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install babel"
        )
        super().__init__(message)
        self.feature = feature


def is_babel_available() -> bool:
    """Check if Babel is installed.

    This is the availability check for every formatting capability
    (numbers, dates, relative times). Callers substitute ASCII/Western
    defaults when it returns False.

    Returns:
        True if Babel is installed and importable, False otherwise.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the babel.numbers module (typed via BabelNumbersProtocol).

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers  # type: ignore[return-value]


def get_babel_dates() -> BabelDatesProtocol:
    """Get the babel.dates module (typed via BabelDatesProtocol).

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_dates")
    from babel import dates  # noqa: PLC0415

    return dates  # type: ignore[return-value]


def get_unsupported_numbering_system_error() -> type[Exception]:
    """Get babel.numbers.UnsupportedNumberingSystemError.

    Raised by Babel when a locale has no symbols for the requested
    numbering system.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unsupported_numbering_system_error")
    from babel.numbers import UnsupportedNumberingSystemError  # noqa: PLC0415

    return UnsupportedNumberingSystemError
