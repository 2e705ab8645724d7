"""Digit aliases: compact digit-count descriptors for numbers.

A digit alias packs three optional counts into one string:

    {minimumIntegerDigits}.{minimumFractionDigits}-{maximumFractionDigits}

    "1.0-3"   at least one integer digit, zero to three fraction digits
    "1.2-2"   exactly two fraction digits
    "3."      at least three integer digits, fraction digits left at defaults
    ".1"      at least one fraction digit

Aliases are used both to format numbers and to validate localized numeral
strings. A malformed alias is never fatal: parse_digits_alias() returns None
and callers fall back to the defaults, reporting a warning.

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass

from l10nkit.constants import (
    DEFAULT_MAXIMUM_FRACTION_DIGITS,
    DEFAULT_MINIMUM_FRACTION_DIGITS,
    DEFAULT_MINIMUM_INTEGER_DIGITS,
)

__all__ = [
    "DigitsOptions",
    "ResolvedDigits",
    "parse_digits_alias",
]

# Groups: 1 = minInt, 3 = minFrac, 5 = maxFrac
_DIGITS_ALIAS_RE = re.compile(r"^(\d+)?\.((\d+)(-(\d+))?)?\Z", re.ASCII)


@dataclass(frozen=True, slots=True)
class ResolvedDigits:
    """Digit counts with every default applied."""

    minimum_integer_digits: int
    minimum_fraction_digits: int
    maximum_fraction_digits: int


@dataclass(frozen=True, slots=True)
class DigitsOptions:
    """Digit-count constraints; None means "not specified".

    Attributes:
        minimum_integer_digits: Minimum integer digits (default 1)
        minimum_fraction_digits: Minimum fraction digits (default 0)
        maximum_fraction_digits: Maximum fraction digits (default 3, raised
            to minimum_fraction_digits when that is larger)
    """

    minimum_integer_digits: int | None = None
    minimum_fraction_digits: int | None = None
    maximum_fraction_digits: int | None = None

    def __post_init__(self) -> None:
        """Validate digit-count invariants.

        Raises:
            ValueError: If a count is negative or the maximum fraction digit
                count is below the minimum.
        """
        for name in (
            "minimum_integer_digits",
            "minimum_fraction_digits",
            "maximum_fraction_digits",
        ):
            count = getattr(self, name)
            if count is not None and count < 0:
                msg = f"DigitsOptions.{name} must be >= 0, got {count}"
                raise ValueError(msg)
        if (
            self.minimum_fraction_digits is not None
            and self.maximum_fraction_digits is not None
            and self.maximum_fraction_digits < self.minimum_fraction_digits
        ):
            msg = (
                f"DigitsOptions.maximum_fraction_digits ({self.maximum_fraction_digits}) "
                f"must be >= minimum_fraction_digits ({self.minimum_fraction_digits})"
            )
            raise ValueError(msg)

    def resolved(self) -> ResolvedDigits:
        """Apply defaults to the missing counts."""
        min_int = (
            self.minimum_integer_digits
            if self.minimum_integer_digits is not None
            else DEFAULT_MINIMUM_INTEGER_DIGITS
        )
        min_frac = (
            self.minimum_fraction_digits
            if self.minimum_fraction_digits is not None
            else DEFAULT_MINIMUM_FRACTION_DIGITS
        )
        max_frac = (
            self.maximum_fraction_digits
            if self.maximum_fraction_digits is not None
            else max(DEFAULT_MAXIMUM_FRACTION_DIGITS, min_frac)
        )
        return ResolvedDigits(min_int, min_frac, max_frac)

    def to_alias(self) -> str:
        """Render the specified counts back into alias form.

        Example:
            >>> DigitsOptions(1, 2, 3).to_alias()
            '1.2-3'
            >>> DigitsOptions(minimum_integer_digits=2).to_alias()
            '2.'
        """
        alias = "" if self.minimum_integer_digits is None else str(self.minimum_integer_digits)
        alias += "."
        if self.minimum_fraction_digits is not None:
            alias += str(self.minimum_fraction_digits)
            if self.maximum_fraction_digits is not None:
                alias += f"-{self.maximum_fraction_digits}"
        return alias

    def to_pattern(self, *, use_grouping: bool = True) -> str:
        """Build the CLDR number pattern Babel needs for these counts.

        Example:
            >>> DigitsOptions(1, 1, 1).to_pattern()
            '#,##0.0'
            >>> DigitsOptions(1, 0, 2).to_pattern()
            '#,##0.##'
            >>> DigitsOptions(5, 0, 0).to_pattern()
            '00,000'
        """
        digits = self.resolved()
        # Babel has no notion of zero integer digits; "0.5" stays "0.5".
        min_int = max(digits.minimum_integer_digits, 1)

        if use_grouping:
            width = max(min_int, 4)
            integer_part = ("0" * min_int).rjust(width, "#")
            integer_part = f"{integer_part[:-3]},{integer_part[-3:]}"
        else:
            integer_part = "0" * min_int

        if digits.maximum_fraction_digits == 0:
            return integer_part
        required = "0" * digits.minimum_fraction_digits
        optional = "#" * (digits.maximum_fraction_digits - digits.minimum_fraction_digits)
        return f"{integer_part}.{required}{optional}"


def parse_digits_alias(alias: str) -> DigitsOptions | None:
    """Parse a digit alias such as "1.2-3".

    Only the components present in the alias are set on the result, so the
    caller decides which defaults apply to the rest.

    Args:
        alias: Alias string

    Returns:
        DigitsOptions, or None if the alias is malformed (including a
        maximum fraction digit count below the minimum)

    Example:
        >>> parse_digits_alias("1.2-3")
        DigitsOptions(minimum_integer_digits=1, minimum_fraction_digits=2, maximum_fraction_digits=3)
        >>> parse_digits_alias(".1")
        DigitsOptions(minimum_integer_digits=None, minimum_fraction_digits=1, maximum_fraction_digits=None)
        >>> parse_digits_alias("1-3") is None
        True
    """
    match = _DIGITS_ALIAS_RE.match(alias)
    if match is None:
        return None

    min_int, _, min_frac, _, max_frac = match.groups()
    try:
        return DigitsOptions(
            minimum_integer_digits=int(min_int) if min_int is not None else None,
            minimum_fraction_digits=int(min_frac) if min_frac is not None else None,
            maximum_fraction_digits=int(max_frac) if max_frac is not None else None,
        )
    except ValueError:
        return None
