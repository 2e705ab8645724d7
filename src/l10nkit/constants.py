"""Shared constants for l10nkit.

Centralized configuration constants used across the formatting and
validation packages. Placing constants here avoids circular imports and
provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Fallback locale and digit alias
- Probing: Reference values for reverse-engineering locale symbols
- Cache limits: Memory bounds for the locale code cache

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_MINIMUM_INTEGER_DIGITS",
    "DEFAULT_MINIMUM_FRACTION_DIGITS",
    "DEFAULT_MAXIMUM_FRACTION_DIGITS",
    # Probing
    "REFERENCE_VALUE",
    "REFERENCE_DIGITS",
    "DIGIT_DIGITS",
    "GROUPING_MIN_LENGTH",
    "RIGHT_TO_LEFT_MARK",
    "ARABIC_LETTER_MARK",
    "LEFT_TO_RIGHT_MARK",
    "SPACE_VARIANTS",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when neither the caller nor the LocaleValidation instance names one.
DEFAULT_LOCALE: str = "en_US"

# Digit counts applied when an alias omits them ("1.0-3").
DEFAULT_MINIMUM_INTEGER_DIGITS: int = 1
DEFAULT_MINIMUM_FRACTION_DIGITS: int = 0
DEFAULT_MAXIMUM_FRACTION_DIGITS: int = 3

# ============================================================================
# PROBING
# ============================================================================
#
# Locale symbols are never read from CLDR tables directly. Instead, a known
# value is formatted and the output is decoded character by character:
#
#   -1000.9 formatted with exactly one fraction digit
#
#   en    "-1,000.9"            minus at 0, thousand at 2, decimal at 6
#   ar    "\u061c-1\u066c000\u066b9"   bidi mark first, everything shifted by one
#   xx    "-1000,9"              locale without grouping, length 7
#
# Four integer digits plus sign, separator and one fraction digit give a
# length of 8 exactly when a thousand separator was inserted.
#
# ============================================================================

REFERENCE_VALUE: float = -1000.9

# Exactly one fraction digit.
REFERENCE_DIGITS: str = "1.1-1"

# Integer rendering used to discover the glyph of each digit 0-9.
DIGIT_DIGITS: str = "1.0-0"

GROUPING_MIN_LENGTH: int = 8

RIGHT_TO_LEFT_MARK: str = "\u200f"
ARABIC_LETTER_MARK: str = "\u061c"
LEFT_TO_RIGHT_MARK: str = "\u200e"

# No-break space variants some locales use for grouping; normalized to U+0020.
SPACE_VARIANTS: frozenset[str] = frozenset({"\u202f", "\u00a0"})

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached LocaleCodes entries.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
