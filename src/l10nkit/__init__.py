"""l10nkit - locale-aware formatting and numeral validation.

Formats numbers, dates and relative times through Babel (CLDR), and
validates and parses numeral strings written in any locale's conventions by
probing the formatter for the locale's symbols and digit glyphs.

Public API:
    IntlFormatter - Number, percent, currency, date and relative-time formatting
    LocaleValidation - Numeral string validation and parsing
    parse_number / parse_decimal / validate_number - Shared-instance helpers
    DigitsOptions / parse_digits_alias - Digit-count aliases ("1.0-3")

Exceptions:
    L10nError - Base exception class
    L10nParseError - Parse errors (returned in result tuples)
    FormattingError - Formatting failures (carries a fallback value)

Submodules:
    l10nkit.formatting - Formatting primitives and option structures
    l10nkit.validation - Probing, pattern synthesis and parsing
    l10nkit.locale_utils - Language tags and Babel locale lookup
    l10nkit.routing - URL path localization helpers
    l10nkit.diagnostics - Error codes, templates and formatters
"""

from .diagnostics import FormattingError, L10nError, L10nParseError
from .formatting import (
    CurrencyDisplay,
    DateTimeOptions,
    DigitsOptions,
    IntlFormatter,
    NumberFormatStyle,
    RelativeTimeOptions,
    RelativeTimeUnit,
    parse_digits_alias,
)
from .validation import LocaleValidation, parse_decimal, parse_number, validate_number

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("l10nkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CurrencyDisplay",
    "DateTimeOptions",
    "DigitsOptions",
    "FormattingError",
    "IntlFormatter",
    "L10nError",
    "L10nParseError",
    "LocaleValidation",
    "NumberFormatStyle",
    "RelativeTimeOptions",
    "RelativeTimeUnit",
    "__version__",
    "parse_decimal",
    "parse_digits_alias",
    "parse_number",
    "validate_number",
]
