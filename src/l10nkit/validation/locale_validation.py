"""Locale-aware validation and parsing of numeral strings.

- parse_number() returns tuple[float | None, tuple[L10nParseError, ...]]
- parse_decimal() returns tuple[Decimal | None, tuple[L10nParseError, ...]]
- validate_number() returns bool
- Errors and warnings are returned in the tuple, never raised

Result conventions:
    None      empty input ("" or None); no errors
    NaN       input present but not a valid numeral for the locale and
              digit setting; one error in the tuple
    value     parsed number; the tuple may still hold warnings (malformed
              digit alias, inconclusive locale probe)

Pipeline:
    1. Normalize whitespace to U+0020 and drop stray bidi marks
    2. Look up (or probe) the locale's decimal code and numeral table
    3. Synthesize and run the validation pattern
    4. Transliterate locale glyphs to ASCII and convert

Thread-safe. Probing results are memoized per locale in a LocaleCodeCache.

Python 3.13+.
"""

import logging
import math
import re
from decimal import Decimal, InvalidOperation
from typing import Literal

from l10nkit.constants import (
    ARABIC_LETTER_MARK,
    DEFAULT_LOCALE,
    LEFT_TO_RIGHT_MARK,
    RIGHT_TO_LEFT_MARK,
)
from l10nkit.diagnostics import Diagnostic, ErrorTemplate, L10nParseError
from l10nkit.formatting.digits import DigitsOptions, parse_digits_alias
from l10nkit.formatting.intl import BabelDecimalFormatter, DecimalFormatter
from l10nkit.locale_utils import get_numbering_system, normalize_locale
from l10nkit.validation.cache import LocaleCodeCache
from l10nkit.validation.codes import LocaleCodes, derive_locale_codes, to_char
from l10nkit.validation.pattern import compile_pattern

__all__ = [
    "LocaleValidation",
    "parse_decimal",
    "parse_number",
    "validate_number",
]

logger = logging.getLogger(__name__)

type ParseType = Literal["number", "decimal"]

_WHITESPACE_RE = re.compile(r"\s")

_BIDI_MARKS = frozenset({LEFT_TO_RIGHT_MARK, RIGHT_TO_LEFT_MARK, ARABIC_LETTER_MARK})


def _cache_key(locale_code: str) -> str:
    """Normalized locale plus any "-u-nu-" numbering system ("ar_EG@latn")."""
    key = normalize_locale(locale_code)
    numbering_system = get_numbering_system(locale_code)
    return f"{key}@{numbering_system}" if numbering_system else key


class LocaleValidation:
    """Validates and parses numeral strings written in a locale's conventions.

    Locale symbols are discovered by probing a DecimalFormatter (Babel by
    default) and cached per locale.

    Examples:
        >>> validation = LocaleValidation("de_DE")
        >>> validation.parse_number("1.234,56", "1.1-2")
        (1234.56, ())
        >>> validation.parse_number("")
        (None, ())
        >>> result, errors = validation.parse_number("12,3,4")
        >>> math.isnan(result), errors[0].parse_type
        (True, 'number')

    Thread Safety:
        Instances hold no per-call state. The locale code cache is guarded by
        a readers-writer lock, so one instance can serve many threads.
    """

    __slots__ = ("_cache", "_default_locale", "_formatter")

    def __init__(
        self,
        default_locale: str = DEFAULT_LOCALE,
        *,
        formatter: DecimalFormatter | None = None,
        cache: LocaleCodeCache | bool | None = True,
    ) -> None:
        """Initialize LocaleValidation.

        Args:
            default_locale: Locale used when a call names none (default en_US)
            formatter: Formatting capability to probe (default
                BabelDecimalFormatter)
            cache: True for a private LocaleCodeCache (default), a
                LocaleCodeCache instance to share one, or None/False to probe
                on every call
        """
        self._default_locale = default_locale
        self._formatter: DecimalFormatter = formatter or BabelDecimalFormatter()
        if cache is True:
            self._cache: LocaleCodeCache | None = LocaleCodeCache()
        elif isinstance(cache, LocaleCodeCache):
            self._cache = cache
        else:
            self._cache = None

    @property
    def default_locale(self) -> str:
        """Locale used when a call names none."""
        return self._default_locale

    @property
    def cache(self) -> LocaleCodeCache | None:
        """The locale code cache, or None when caching is disabled."""
        return self._cache

    def locale_codes(self, locale_code: str | None = None) -> LocaleCodes:
        """Decimal code and numeral table for a locale (probed or cached).

        Results are not cached while the formatter is unavailable, so a
        formatter that becomes available later is probed properly.
        """
        code = locale_code or self._default_locale
        if self._cache is None or not self._formatter.available():
            return derive_locale_codes(self._formatter, code)
        return self._cache.get_or_create(
            _cache_key(code), lambda: derive_locale_codes(self._formatter, code)
        )

    def parse_number(
        self,
        value: str | None,
        digits: str | None = None,
        locale_code: str | None = None,
    ) -> tuple[float | None, tuple[L10nParseError, ...]]:
        """Parse a localized numeral string to float.

        Args:
            value: Numeral string (e.g. "1.234,56" for de_DE)
            digits: Digit alias "{minInt}.{minFrac}-{maxFrac}" (default
                "1.0-3"); a malformed alias adds a warning and the defaults
                apply
            locale_code: Locale of the string (default: the instance default)

        Returns:
            Tuple of (result, errors):
            - result: float, None for empty input, NaN for invalid input
            - errors: Tuple of L10nParseError (warnings and at most one error)
        """
        if not value:
            return None, ()
        normalized, errors = self._normalize(value, digits, locale_code, "number")
        if normalized is None:
            return math.nan, errors
        return float(normalized), errors

    def parse_decimal(
        self,
        value: str | None,
        digits: str | None = None,
        locale_code: str | None = None,
    ) -> tuple[Decimal | None, tuple[L10nParseError, ...]]:
        """Parse a localized numeral string to Decimal without float rounding.

        Same contract as parse_number(), with Decimal("NaN") for invalid input.

        Example:
            >>> LocaleValidation("en_US").parse_decimal("1,234.56", "1.2-2")
            (Decimal('1234.56'), ())
        """
        if not value:
            return None, ()
        normalized, errors = self._normalize(value, digits, locale_code, "decimal")
        if normalized is None:
            return Decimal("NaN"), errors
        return Decimal(normalized), errors

    def validate_number(
        self,
        value: str | None,
        digits: str | None = None,
        locale_code: str | None = None,
    ) -> bool:
        """Check a numeral string against the locale and digit setting.

        Empty input is not a valid number.
        """
        if not value:
            return False
        normalized, _ = self._normalize(value, digits, locale_code, "number")
        return normalized is not None

    def _normalize(
        self,
        value: str,
        digits: str | None,
        locale_code: str | None,
        parse_type: ParseType,
    ) -> tuple[str | None, tuple[L10nParseError, ...]]:
        """Validate value and rewrite it as an ASCII numeral.

        Returns:
            Tuple of (ASCII numeral or None when invalid, errors)
        """
        code = locale_code or self._default_locale
        codes = self.locale_codes(code)
        warnings = list(codes.diagnostics)

        options = DigitsOptions()
        if digits:
            parsed = parse_digits_alias(digits)
            if parsed is None:
                diagnostic = ErrorTemplate.invalid_digits_alias(digits, code)
                logger.warning("%s", diagnostic)
                warnings.append(diagnostic)
            else:
                options = parsed

        errors = [self._error(diagnostic, value, code, parse_type) for diagnostic in warnings]
        text = self._prepare(value, codes)

        pattern = compile_pattern(codes.decimal_code, codes.number_codes, options.resolved())
        if pattern.match(text) is None:
            reason = f"does not match the locale's number format for digits '{options.to_alias()}'"
            errors.append(self._failure(value, code, parse_type, reason))
            return None, tuple(errors)

        table = codes.transliteration_table()
        ascii_chars = []
        for char in text:
            replacement = table.get(char)
            if replacement is None:
                diagnostic = ErrorTemplate.parse_unexpected_character(value, char, code)
                errors.append(self._error(diagnostic, value, code, parse_type))
                return None, tuple(errors)
            ascii_chars.append(replacement)
        normalized = "".join(ascii_chars)

        try:
            Decimal(normalized)
        except InvalidOperation:
            errors.append(self._failure(value, code, parse_type, "no digits"))
            return None, tuple(errors)
        return normalized, tuple(errors)

    @staticmethod
    def _prepare(value: str, codes: LocaleCodes) -> str:
        """Normalize whitespace and drop bidi marks the locale does not use as symbols."""
        text = _WHITESPACE_RE.sub(" ", value)
        kept = {to_char(symbol) for symbol in codes.decimal_code.symbols()}
        return "".join(char for char in text if char not in _BIDI_MARKS or char in kept)

    @staticmethod
    def _error(
        diagnostic: Diagnostic, value: str, locale_code: str, parse_type: ParseType
    ) -> L10nParseError:
        return L10nParseError(
            diagnostic, input_value=value, locale_code=locale_code, parse_type=parse_type
        )

    @classmethod
    def _failure(
        cls, value: str, locale_code: str, parse_type: ParseType, reason: str
    ) -> L10nParseError:
        if parse_type == "decimal":
            diagnostic = ErrorTemplate.parse_decimal_failed(value, locale_code, reason)
        else:
            diagnostic = ErrorTemplate.parse_number_failed(value, locale_code, reason)
        return cls._error(diagnostic, value, locale_code, parse_type)

    def __repr__(self) -> str:
        return f"LocaleValidation(default_locale={self._default_locale!r})"


_default_validation = LocaleValidation()


def parse_number(
    value: str | None,
    digits: str | None = None,
    locale_code: str | None = None,
) -> tuple[float | None, tuple[L10nParseError, ...]]:
    """Parse a localized numeral string to float with the shared validator.

    See LocaleValidation.parse_number().

    Examples:
        >>> parse_number("1234.5")
        (1234.5, ())
        >>> parse_number("1.234,56", "1.1-2", "de-DE")
        (1234.56, ())
    """
    return _default_validation.parse_number(value, digits, locale_code)


def parse_decimal(
    value: str | None,
    digits: str | None = None,
    locale_code: str | None = None,
) -> tuple[Decimal | None, tuple[L10nParseError, ...]]:
    """Parse a localized numeral string to Decimal with the shared validator."""
    return _default_validation.parse_decimal(value, digits, locale_code)


def validate_number(
    value: str | None,
    digits: str | None = None,
    locale_code: str | None = None,
) -> bool:
    """Check a numeral string with the shared validator."""
    return _default_validation.validate_number(value, digits, locale_code)
