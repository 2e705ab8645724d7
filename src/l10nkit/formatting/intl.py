"""Locale-aware number, date and relative-time formatting.

IntlFormatter renders values through Babel (CLDR data). It is the formatting
capability the validation layer probes: LocaleValidation never reads CLDR
tables itself, it formats known numbers through a DecimalFormatter and
decodes the output.

Architecture:
    - IntlFormatter: Static entry points, one per formatting kind
    - DecimalFormatter: Protocol for the single operation validation needs
    - BabelDecimalFormatter: Default DecimalFormatter backed by IntlFormatter

Fallbacks:
    - Babel not installed: values are rendered with str() so callers always
      get a string (no exception)
    - Unknown locale: warning logged, en_US rules used
    - Babel failure for a given value: FormattingError carrying a fallback

Python 3.13+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Literal, Protocol

from l10nkit.constants import DEFAULT_LOCALE
from l10nkit.core.babel_compat import (
    get_babel_dates,
    get_babel_numbers,
    get_unknown_locale_error,
    get_unsupported_numbering_system_error,
    is_babel_available,
)
from l10nkit.diagnostics import ErrorTemplate, FormattingError
from l10nkit.formatting.digits import DigitsOptions, parse_digits_alias
from l10nkit.formatting.inputs import classify, to_datetime, to_number
from l10nkit.formatting.options import (
    DATE_FORMAT_ALIASES,
    CurrencyDisplay,
    DateTimeOptions,
    NumberFormatStyle,
    RelativeTimeOptions,
    RelativeTimeUnit,
)
from l10nkit.locale_utils import get_babel_locale, get_numbering_system

if TYPE_CHECKING:
    from collections.abc import Callable

    from babel import Locale

__all__ = [
    "BabelDecimalFormatter",
    "DecimalFormatter",
    "IntlFormatter",
    "build_skeletons",
    "resolve_locale",
]

logger = logging.getLogger(__name__)

# Numeric core of a CLDR pattern ("#,##0.00" in "¤#,##0.00").
_PATTERN_CORE_RE = re.compile(r"[#0-9,.@]+")

_BIDI_MARKS_RE = re.compile("[\u200e\u200f]")

_CURRENCY_SIGN = "\xa4"

_SKELETON_FIELDS: dict[str, dict[str, str]] = {
    "era": {"narrow": "GGGGG", "short": "G", "long": "GGGG"},
    "year": {"numeric": "y", "2-digit": "yy"},
    "month": {
        "numeric": "M",
        "2-digit": "MM",
        "short": "MMM",
        "long": "MMMM",
        "narrow": "MMMMM",
    },
    "weekday": {"narrow": "EEEEE", "short": "EEE", "long": "EEEE"},
    "day": {"numeric": "d", "2-digit": "dd"},
    "minute": {"numeric": "mm", "2-digit": "mm"},
    "second": {"numeric": "ss", "2-digit": "ss"},
    "time_zone_name": {"short": "z", "long": "zzzz"},
}

_FORMAT_ERRORS = (ValueError, TypeError, InvalidOperation, AttributeError, KeyError, OverflowError)


class DecimalFormatter(Protocol):
    """The formatting capability number validation depends on.

    Implementations render a number with explicit digit counts in a locale.
    The validation layer only ever calls format_decimal() with the reference
    value -1000.9 and with the digits 0-9.
    """

    def available(self) -> bool:
        """Whether locale-aware formatting can be performed at all."""
        ...

    def format_decimal(self, value: int | float | Decimal, digits: str, locale_code: str) -> str:
        """Render value in decimal style using a digit alias ("1.1-1")."""
        ...


class BabelDecimalFormatter:
    """DecimalFormatter backed by Babel through IntlFormatter."""

    __slots__ = ()

    def available(self) -> bool:
        return is_babel_available()

    def format_decimal(self, value: int | float | Decimal, digits: str, locale_code: str) -> str:
        return IntlFormatter.format_decimal(value, digits, locale_code)

    def __repr__(self) -> str:
        return "BabelDecimalFormatter()"


def resolve_locale(locale_code: str | None) -> Locale:
    """Resolve a locale code to a Babel Locale, falling back to en_US.

    Unknown or malformed codes log a warning and use en_US rules.

    Raises:
        BabelImportError: If Babel is not installed
    """
    unknown_locale_error = get_unknown_locale_error()
    code = locale_code or DEFAULT_LOCALE
    try:
        return get_babel_locale(code)
    except (unknown_locale_error, ValueError, TypeError) as e:
        diagnostic = ErrorTemplate.locale_unknown(code, str(e))
        logger.warning("%s. Falling back to %s", diagnostic, DEFAULT_LOCALE)
    return get_babel_locale(DEFAULT_LOCALE)


def _digits_options(digits: str | DigitsOptions | None, locale_code: str) -> DigitsOptions | None:
    """Resolve the digits argument; a malformed alias yields None and a warning.

    An empty alias counts as absent.
    """
    if not digits:
        return None
    if isinstance(digits, DigitsOptions):
        return digits
    options = parse_digits_alias(digits)
    if options is None:
        logger.warning("%s", ErrorTemplate.invalid_digits_alias(digits, locale_code))
    return options


def _replace_pattern_core(pattern: str, core: str) -> str:
    """Swap the numeric core of a locale pattern for another one.

    Only the positive subpattern is kept.

    Example:
        >>> _replace_pattern_core("#,##0\xa0%", "#,##0.0")
        '#,##0.0\xa0%'
    """
    positive = pattern.split(";", 1)[0]
    return _PATTERN_CORE_RE.sub(lambda _: core, positive, count=1)


def _uses_12_hour_clock(locale: Locale) -> bool:
    short_time = locale.time_formats["short"]
    pattern = getattr(short_time, "pattern", str(short_time))
    return "h" in pattern or "K" in pattern


def build_skeletons(options: DateTimeOptions, locale: Locale) -> tuple[str, str]:
    """Translate DateTimeOptions into CLDR date and time skeletons.

    CLDR only lists skeletons for dates or for times, so the two halves are
    matched separately and joined with the locale's date-time pattern.

    Example:
        >>> en = get_babel_locale("en_US")
        >>> build_skeletons(DateTimeOptions(year="numeric", month="short", day="numeric"), en)
        ('yMMMd', '')
        >>> build_skeletons(DateTimeOptions(hour="numeric", minute="numeric", hour12=False), en)
        ('', 'Hmm')
    """
    date_skeleton = []
    for field in ("era", "year", "month", "weekday", "day"):
        width = getattr(options, field)
        if width is not None:
            date_skeleton.append(_SKELETON_FIELDS[field][width])

    time_skeleton = []
    if options.hour is not None:
        twelve = options.hour12 if options.hour12 is not None else _uses_12_hour_clock(locale)
        symbol = "h" if twelve else "H"
        time_skeleton.append(symbol * 2 if options.hour == "2-digit" else symbol)

    for field in ("minute", "second", "time_zone_name"):
        width = getattr(options, field)
        if width is not None:
            time_skeleton.append(_SKELETON_FIELDS[field][width])
    return "".join(date_skeleton), "".join(time_skeleton)


class IntlFormatter:
    """Locale-aware formatting of numbers, dates and relative times.

    All methods are static and thread-safe: no state is kept between calls
    beyond the Babel Locale cache in locale_utils.

    Examples:
        >>> IntlFormatter.format_number(1234.5, "de-DE")
        '1.234,5'
        >>> IntlFormatter.format_number(0.256, "en-US", NumberFormatStyle.PERCENT, "1.1-1")
        '25.6%'
        >>> IntlFormatter.format_relative_time(-3, "day", "en-US")
        '3 days ago'
    """

    @staticmethod
    def format_number(
        value: object,
        locale_code: str | None = None,
        style: NumberFormatStyle | str = NumberFormatStyle.DECIMAL,
        digits: str | DigitsOptions | None = None,
        currency: str | None = None,
        currency_display: CurrencyDisplay | str = CurrencyDisplay.SYMBOL,
    ) -> str:
        """Format a number in decimal, percent or currency style.

        Args:
            value: int, float, Decimal or numeric string
            locale_code: BCP-47 or POSIX locale (default en_US); a "-u-nu-"
                keyword selects the numbering system
            style: decimal (default), percent or currency
            digits: Digit alias ("1.0-3") or DigitsOptions; a malformed alias
                is logged and the locale defaults apply. Decimal output always
                groups in threes so locale validation accepts it
            currency: ISO 4217 code, required for the currency style
            currency_display: symbol (default), code or name

        Returns:
            Formatted string. Without Babel, str(value) (followed by the
            currency code for the currency style).

        Raises:
            ValueError: If style is unknown or currency is missing for the
                currency style
            FormattingError: If value is not numeric or Babel fails
        """
        style = NumberFormatStyle(style)
        currency_display = CurrencyDisplay(currency_display)
        if style is NumberFormatStyle.CURRENCY and not currency:
            msg = "Currency code is required with the currency style"
            raise ValueError(msg)

        if not is_babel_available():
            if style is NumberFormatStyle.CURRENCY:
                return f"{value} {currency}"
            return str(value)

        code = locale_code or DEFAULT_LOCALE
        fallback = f"{currency} {value}" if style is NumberFormatStyle.CURRENCY else str(value)
        number = to_number(classify(value))
        if number is None:
            diagnostic = ErrorTemplate.formatting_failed("number", value, code, "not a number")
            raise FormattingError(diagnostic, fallback_value=fallback)

        options = _digits_options(digits, code)
        locale = resolve_locale(code)
        numbers = get_babel_numbers()
        numbering_system = get_numbering_system(code) or "default"

        try:
            if style is NumberFormatStyle.CURRENCY:
                return IntlFormatter._format_currency(
                    number, currency or "", options, currency_display, locale, numbering_system
                )
            if style is NumberFormatStyle.PERCENT:
                percent_format = None
                if options is not None:
                    percent_format = _replace_pattern_core(
                        locale.percent_formats[None].pattern, options.to_pattern()
                    )
                return IntlFormatter._format_with_numbering_system(
                    numbers.format_percent,
                    number,
                    numbering_system,
                    format=percent_format,
                    locale=locale,
                )
            return IntlFormatter._format_with_numbering_system(
                numbers.format_decimal,
                number,
                numbering_system,
                format=(options or DigitsOptions()).to_pattern(),
                locale=locale,
            )
        except _FORMAT_ERRORS as e:
            diagnostic = ErrorTemplate.formatting_failed("number", value, code, str(e))
            raise FormattingError(diagnostic, fallback_value=fallback) from e

    @staticmethod
    def format_decimal(
        value: int | float | Decimal,
        digits: str | DigitsOptions | None = None,
        locale_code: str | None = None,
    ) -> str:
        """Render a number in decimal style with explicit digit counts.

        Uses the locale's default numbering system unless the code carries a
        "-u-nu-" keyword, so "ar-EG" renders Arabic-Indic digits and
        "ar-EG-u-nu-latn" renders ASCII digits. This is the primitive locale
        validation probes.

        Example:
            >>> IntlFormatter.format_decimal(-1000.9, "1.1-1", "en-US")
            '-1,000.9'
        """
        return IntlFormatter.format_number(
            value, locale_code, NumberFormatStyle.DECIMAL, digits=digits
        )

    @staticmethod
    def format_date(
        value: object,
        locale_code: str | None = None,
        fmt: str | DateTimeOptions | None = None,
        timezone: str | None = None,
    ) -> str:
        """Format a date or timestamp.

        Args:
            value: date, datetime, epoch milliseconds, "YYYY-MM-DD" string or
                ISO-8601 string
            locale_code: BCP-47 or POSIX locale (default en_US)
            fmt: Alias ("short", "mediumDate", ...) or DateTimeOptions; an
                unknown alias is logged and the locale's medium date is used
            timezone: IANA zone name used to render the time (default: the
                value's own zone, UTC for epoch values)

        Returns:
            Formatted string with bidi marks removed. Without Babel, the
            ISO-8601 form of the date (or str(value) if unreadable).

        Raises:
            FormattingError: If value cannot be read as a date or Babel fails
        """
        code = locale_code or DEFAULT_LOCALE
        moment = to_datetime(classify(value))

        if moment is None:
            diagnostic = ErrorTemplate.formatting_failed("date", value, code, "not a date")
            raise FormattingError(diagnostic, fallback_value=str(value))

        if not is_babel_available():
            return moment.isoformat()

        if isinstance(fmt, DateTimeOptions):
            options = fmt
        elif fmt is None:
            options = DateTimeOptions()
        elif fmt in DATE_FORMAT_ALIASES:
            options = DATE_FORMAT_ALIASES[fmt]
        else:
            logger.warning("%s", ErrorTemplate.invalid_date_alias(fmt))
            options = DateTimeOptions()

        locale = resolve_locale(code)
        dates = get_babel_dates()
        try:
            # Naive values are wall-clock times; astimezone() reads them as local time.
            tzinfo = dates.get_timezone(timezone) if timezone else None
            if tzinfo is not None:
                moment = moment.astimezone(tzinfo)
            if options.is_empty:
                rendered = dates.format_date(moment, format="medium", locale=locale)
            else:
                parts = [
                    dates.format_skeleton(skeleton, moment, tzinfo=tzinfo, locale=locale)
                    for skeleton in build_skeletons(options, locale)
                    if skeleton
                ]
                if len(parts) == 2:
                    date_part, time_part = parts
                    rendered = (
                        str(locale.datetime_formats["medium"])
                        .replace("{1}", date_part)
                        .replace("{0}", time_part)
                    )
                else:
                    rendered = parts[0]
        except (*_FORMAT_ERRORS, LookupError) as e:
            diagnostic = ErrorTemplate.formatting_failed("date", value, code, str(e))
            raise FormattingError(diagnostic, fallback_value=moment.isoformat()) from e
        return _BIDI_MARKS_RE.sub("", rendered)

    @staticmethod
    def format_relative_time(
        value: int | float | Decimal | str,
        unit: RelativeTimeUnit | str,
        locale_code: str | None = None,
        options: RelativeTimeOptions | None = None,
    ) -> str:
        """Describe an offset from now ("in 3 days", "2 hours ago").

        Args:
            value: Signed amount; negative values are in the past
            unit: year, month, week, day, hour, minute or second (plural
                forms accepted)
            locale_code: BCP-47 or POSIX locale (default en_US)
            options: RelativeTimeOptions (default style "long")

        Returns:
            Formatted string. Without Babel, f"{value} {unit}".

        Raises:
            FormattingError: If the unit is unsupported, value is not
                numeric, or Babel fails
        """
        fallback = f"{value} {unit}"
        if not is_babel_available():
            return fallback

        code = locale_code or DEFAULT_LOCALE
        try:
            resolved_unit = RelativeTimeUnit.parse(unit)
        except ValueError as e:
            raise FormattingError(
                ErrorTemplate.invalid_relative_time_unit(str(unit)), fallback_value=fallback
            ) from e

        amount = to_number(classify(value))
        if amount is None:
            diagnostic = ErrorTemplate.formatting_failed("relative time", value, code, "not a number")
            raise FormattingError(diagnostic, fallback_value=fallback)

        style: Literal["narrow", "short", "long"] = (options or RelativeTimeOptions()).style
        locale = resolve_locale(code)
        dates = get_babel_dates()
        seconds_per_unit = dict(dates.TIMEDELTA_UNITS)[resolved_unit.value]
        try:
            return dates.format_timedelta(
                float(amount) * seconds_per_unit,
                granularity=resolved_unit.value,
                threshold=float("inf"),
                add_direction=True,
                format=style,
                locale=locale,
            )
        except _FORMAT_ERRORS as e:
            diagnostic = ErrorTemplate.formatting_failed("relative time", value, code, str(e))
            raise FormattingError(diagnostic, fallback_value=fallback) from e

    @staticmethod
    def _format_with_numbering_system(
        babel_function: Callable[..., str],
        number: int | float | Decimal,
        numbering_system: str,
        **kwargs: object,
    ) -> str:
        """Call a babel.numbers function with the given numbering system.

        "default" selects the locale's own system. Falls back to Latin digits
        when Babel has no symbols for the requested system in the locale.
        """
        unsupported = get_unsupported_numbering_system_error()
        try:
            return str(babel_function(number, numbering_system=numbering_system, **kwargs))
        except unsupported:
            logger.debug(
                "Numbering system %s unsupported for %s; using latn",
                numbering_system,
                kwargs.get("locale"),
            )
            return str(babel_function(number, numbering_system="latn", **kwargs))

    @staticmethod
    def _format_currency(
        number: int | float | Decimal,
        currency: str,
        options: DigitsOptions | None,
        currency_display: CurrencyDisplay,
        locale: Locale,
        numbering_system: str,
    ) -> str:
        numbers = get_babel_numbers()

        if currency_display is CurrencyDisplay.NAME:
            # The name format takes a plain decimal pattern.
            return IntlFormatter._format_with_numbering_system(
                numbers.format_currency,
                number,
                numbering_system,
                currency=currency,
                format=options.to_pattern() if options is not None else None,
                locale=locale,
                currency_digits=options is None,
                format_type="name",
            )

        currency_format = None
        if options is not None or currency_display is CurrencyDisplay.CODE:
            currency_format = locale.currency_formats["standard"].pattern.split(";", 1)[0]
            if options is not None:
                currency_format = _replace_pattern_core(currency_format, options.to_pattern())
            if currency_display is CurrencyDisplay.CODE:
                if _CURRENCY_SIGN in currency_format:
                    currency_format = currency_format.replace(_CURRENCY_SIGN, _CURRENCY_SIGN * 2)
                else:
                    logger.debug("Currency pattern for locale %s lacks placeholder", locale)

        return IntlFormatter._format_with_numbering_system(
            numbers.format_currency,
            number,
            numbering_system,
            currency=currency,
            format=currency_format,
            locale=locale,
            currency_digits=options is None,
        )
