"""Tagged inputs for the formatting functions.

Formatting functions accept loosely typed values (numbers, numeric strings,
ISO-8601 strings, dates). The value is classified exactly once at the API
boundary into one of three variants; the formatters then match on the
variant instead of re-inspecting the raw value.

    classify(1234.5)          -> RawNumber(1234.5)
    classify("1234.5")        -> RawString("1234.5")
    classify(date(2024, 1, 2)) -> RawDate(datetime(2024, 1, 2, 0, 0))

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from decimal import Decimal, InvalidOperation

__all__ = [
    "FormatInput",
    "RawDate",
    "RawNumber",
    "RawString",
    "classify",
    "to_datetime",
    "to_number",
]

# YYYY-MM-DD is read as a local calendar date rather than UTC midnight.
_PLAIN_DATE_RE = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$", re.ASCII)


@dataclass(frozen=True, slots=True)
class RawNumber:
    """A numeric value (int, float or Decimal)."""

    value: int | float | Decimal


@dataclass(frozen=True, slots=True)
class RawString:
    """A string that still has to be interpreted (number or date text)."""

    value: str


@dataclass(frozen=True, slots=True)
class RawDate:
    """A calendar date or timestamp."""

    value: datetime


type FormatInput = RawNumber | RawString | RawDate


def classify(value: object) -> FormatInput:
    """Tag a raw value.

    Raises:
        TypeError: For values that are neither numbers, strings nor dates
    """
    match value:
        case RawNumber() | RawString() | RawDate():
            return value
        case bool():
            msg = "Booleans are not formattable values"
            raise TypeError(msg)
        case int() | float() | Decimal():
            return RawNumber(value)
        case str():
            return RawString(value.strip())
        case datetime():
            return RawDate(value)
        case date():
            return RawDate(datetime(value.year, value.month, value.day))
    msg = f"Unsupported value type: {type(value).__name__}"
    raise TypeError(msg)


def to_number(item: FormatInput) -> int | float | Decimal | None:
    """Numeric view of an input, or None when it is not a number.

    Numeric strings are converted to Decimal so no precision is lost.
    """
    match item:
        case RawNumber(value=value):
            return value
        case RawString(value=text):
            try:
                number = Decimal(text)
            except InvalidOperation:
                return None
            return number if number.is_finite() else None
        case RawDate():
            return None


def to_datetime(item: FormatInput) -> datetime | None:
    """Datetime view of an input, or None when it cannot be read as one.

    - RawDate is used as is.
    - RawNumber is milliseconds since the Unix epoch (UTC).
    - RawString is tried as a number of milliseconds, then as "YYYY-MM-DD"
      (local calendar date), then with datetime.fromisoformat() (ISO 8601
      basic or extended form; "Z" or an offset gives an aware datetime).
    """
    match item:
        case RawDate(value=value):
            return value
        case RawNumber(value=value):
            return _from_epoch_millis(value)
        case RawString(value=text):
            millis = to_number(item)
            if millis is not None:
                return _from_epoch_millis(millis)
            if match := _PLAIN_DATE_RE.match(text):
                year, month, day = (int(part) for part in match.groups())
                try:
                    return datetime(year, month, day)
                except ValueError:
                    return None
            try:
                return datetime.fromisoformat(text)
            except ValueError:
                return None


def _from_epoch_millis(millis: int | float | Decimal) -> datetime | None:
    try:
        return datetime(1970, 1, 1, tzinfo=UTC) + timedelta(milliseconds=float(millis))
    except OverflowError:
        return None
