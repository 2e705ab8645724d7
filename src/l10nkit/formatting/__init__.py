"""Locale-aware formatting of numbers, dates and relative times.

Exports:
    IntlFormatter: Number, date and relative-time formatting via Babel
    DecimalFormatter: Protocol consumed by locale validation
    DigitsOptions / parse_digits_alias: Digit-count aliases ("1.0-3")
    DateTimeOptions / RelativeTimeOptions: Explicit option structures

Python 3.13+.
"""

from .digits import DigitsOptions, ResolvedDigits, parse_digits_alias
from .inputs import FormatInput, RawDate, RawNumber, RawString, classify
from .intl import BabelDecimalFormatter, DecimalFormatter, IntlFormatter
from .options import (
    DATE_FORMAT_ALIASES,
    CurrencyDisplay,
    DateTimeOptions,
    NumberFormatStyle,
    RelativeTimeOptions,
    RelativeTimeUnit,
)

__all__ = [
    "DATE_FORMAT_ALIASES",
    "BabelDecimalFormatter",
    "CurrencyDisplay",
    "DateTimeOptions",
    "DecimalFormatter",
    "DigitsOptions",
    "FormatInput",
    "IntlFormatter",
    "NumberFormatStyle",
    "RawDate",
    "RawNumber",
    "RawString",
    "RelativeTimeOptions",
    "RelativeTimeUnit",
    "ResolvedDigits",
    "classify",
    "parse_digits_alias",
]
