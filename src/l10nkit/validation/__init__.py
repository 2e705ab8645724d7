"""Locale-aware validation and parsing of numeral strings.

Exports:
    LocaleValidation: Validator/parser bound to a formatter and a cache
    parse_number / parse_decimal / validate_number: Shared-instance helpers
    is_valid_number / is_valid_decimal: Result type guards
    LocaleCodeCache: Locale-keyed cache of probed symbols

Python 3.13+.
"""

from .cache import LocaleCodeCache
from .codes import (
    ASCII_DECIMAL_CODE,
    ASCII_NUMBER_CODES,
    DecimalCode,
    LocaleCodes,
    NumberCodes,
    build_number_codes,
    derive_locale_codes,
    probe_decimal_code,
)
from .guards import is_valid_decimal, is_valid_number
from .locale_validation import LocaleValidation, parse_decimal, parse_number, validate_number
from .pattern import compile_pattern, synthesize_pattern

__all__ = [
    "ASCII_DECIMAL_CODE",
    "ASCII_NUMBER_CODES",
    "DecimalCode",
    "LocaleCodeCache",
    "LocaleCodes",
    "LocaleValidation",
    "NumberCodes",
    "build_number_codes",
    "compile_pattern",
    "derive_locale_codes",
    "is_valid_decimal",
    "is_valid_number",
    "parse_decimal",
    "parse_number",
    "probe_decimal_code",
    "synthesize_pattern",
    "validate_number",
]
