"""Diagnostic codes and data structures.

Defines error codes, categories, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for l10nkit errors.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        PARSE: Localized numeral string could not be validated or converted
        FORMATTING: Locale-aware formatting failure (number, date, relative time)
    """

    PARSE = "parse"
    FORMATTING = "formatting"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Configuration problems (aliases, units, locales)
        2000-2999: Formatting errors
        3000-3999: Probing warnings
        4000-4999: Parsing errors (localized string -> value)
    """

    # Configuration (1000-1999)
    INVALID_DIGITS_ALIAS = 1001
    INVALID_DATE_ALIAS = 1002
    INVALID_RELATIVE_TIME_UNIT = 1003
    LOCALE_UNKNOWN = 1004

    # Formatting (2000-2999)
    FORMATTING_FAILED = 2001

    # Probing (3000-3999)
    PROBE_INCONCLUSIVE = 3001
    PROBE_INCONSISTENT = 3002

    # Parsing (4000-4999)
    PARSE_NUMBER_FAILED = 4001
    PARSE_DECIMAL_FAILED = 4002
    PARSE_UNEXPECTED_CHARACTER = 4003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale involved, if any
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    @property
    def is_warning(self) -> bool:
        """True for non-fatal diagnostics (result is still usable)."""
        return self.severity == "warning"

    def format_error(self) -> str:
        """Format diagnostic in the default multi-line style.

        Example output:
            warning[INVALID_DIGITS_ALIAS]: Invalid digits alias '1-2'
              --> locale en_US
              = help: Use the form '{minInt}.{minFrac}-{maxFrac}', e.g. '1.0-3'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
