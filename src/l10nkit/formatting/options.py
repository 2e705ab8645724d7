"""Option structures for number, date and relative-time formatting.

Every formatting kind has its own frozen dataclass with fully enumerated
fields; every field is optional and documents its default.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

__all__ = [
    "DATE_FORMAT_ALIASES",
    "CurrencyDisplay",
    "DateTimeOptions",
    "NumberFormatStyle",
    "RelativeTimeOptions",
    "RelativeTimeUnit",
]

type TextWidth = Literal["narrow", "short", "long"]
type NumericWidth = Literal["numeric", "2-digit"]


class NumberFormatStyle(StrEnum):
    """Number rendering style."""

    DECIMAL = "decimal"
    PERCENT = "percent"
    CURRENCY = "currency"


class CurrencyDisplay(StrEnum):
    """How the currency is shown by the currency style."""

    SYMBOL = "symbol"  # €
    CODE = "code"  # EUR
    NAME = "name"  # euros


class RelativeTimeUnit(StrEnum):
    """Units accepted by format_relative_time()."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @classmethod
    def parse(cls, unit: "str | RelativeTimeUnit") -> "RelativeTimeUnit":
        """Accept singular or plural unit names ("day", "days").

        Raises:
            ValueError: If the unit is not supported
        """
        if isinstance(unit, RelativeTimeUnit):
            return unit
        name = unit.strip().lower()
        if name.endswith("s"):
            name = name[:-1]
        return cls(name)


@dataclass(frozen=True, slots=True)
class DateTimeOptions:
    """Which date/time fields to render and how wide.

    Fields left as None are not rendered. When every field is None the
    locale's medium date format is used.

    Attributes:
        weekday: "narrow" | "short" | "long" (default None)
        era: "narrow" | "short" | "long" (default None)
        year: "numeric" | "2-digit" (default None)
        month: "numeric" | "2-digit" | "narrow" | "short" | "long" (default None)
        day: "numeric" | "2-digit" (default None)
        hour: "numeric" | "2-digit" (default None)
        minute: "numeric" | "2-digit" (default None)
        second: "numeric" | "2-digit" (default None)
        time_zone_name: "short" | "long" (default None)
        hour12: Force 12-hour (True) or 24-hour (False) clock; None follows
            the locale (default None)
    """

    weekday: TextWidth | None = None
    era: TextWidth | None = None
    year: NumericWidth | None = None
    month: NumericWidth | TextWidth | None = None
    day: NumericWidth | None = None
    hour: NumericWidth | None = None
    minute: NumericWidth | None = None
    second: NumericWidth | None = None
    time_zone_name: Literal["short", "long"] | None = None
    hour12: bool | None = None

    @property
    def is_empty(self) -> bool:
        """True when no field is requested."""
        return all(
            value is None
            for value in (
                self.weekday,
                self.era,
                self.year,
                self.month,
                self.day,
                self.hour,
                self.minute,
                self.second,
                self.time_zone_name,
            )
        )


@dataclass(frozen=True, slots=True)
class RelativeTimeOptions:
    """Relative time rendering.

    Attributes:
        style: "long" ("in 3 months"), "short" ("in 3 mo."), "narrow"
            (default "long")
    """

    style: TextWidth = "long"


DATE_FORMAT_ALIASES: dict[str, DateTimeOptions] = {
    "short": DateTimeOptions(
        year="numeric", month="numeric", day="numeric", hour="numeric", minute="numeric"
    ),
    "medium": DateTimeOptions(
        year="numeric",
        month="short",
        day="numeric",
        hour="numeric",
        minute="numeric",
        second="numeric",
    ),
    "long": DateTimeOptions(
        year="numeric",
        month="long",
        day="numeric",
        hour="numeric",
        minute="numeric",
        second="numeric",
        time_zone_name="short",
    ),
    "full": DateTimeOptions(
        weekday="long",
        year="numeric",
        month="long",
        day="numeric",
        hour="numeric",
        minute="numeric",
        second="numeric",
        time_zone_name="long",
    ),
    "shortDate": DateTimeOptions(year="numeric", month="numeric", day="numeric"),
    "mediumDate": DateTimeOptions(year="numeric", month="short", day="numeric"),
    "longDate": DateTimeOptions(year="numeric", month="long", day="numeric"),
    "fullDate": DateTimeOptions(weekday="long", year="numeric", month="long", day="numeric"),
    "shortTime": DateTimeOptions(hour="numeric", minute="numeric"),
    "mediumTime": DateTimeOptions(hour="numeric", minute="numeric", second="numeric"),
}
