"""Type guards for parse result narrowing.

parse_number() and parse_decimal() return tuple[result, errors], where the
result is None for empty input and NaN for invalid input. The guards reject
both, so a single check replaces inspecting the errors tuple.

Python 3.13+ with TypeIs support (PEP 742).

Example:
    >>> from l10nkit.validation import parse_decimal
    >>> result, errors = parse_decimal("1.234,56", "1.2-2", "de_DE")
    >>> if is_valid_decimal(result):
    ...     # mypy knows result is a finite Decimal
    ...     gross = result * Decimal("1.19")
"""

import math
from decimal import Decimal
from typing import TypeIs

__all__ = ["is_valid_decimal", "is_valid_number"]


def is_valid_decimal(value: Decimal | None) -> TypeIs[Decimal]:
    """Type guard: parsed decimal is present and finite (not None/NaN/Infinity).

    Args:
        value: Decimal from the parse_decimal() result tuple

    Returns:
        True if value is a finite Decimal, False otherwise
    """
    return value is not None and value.is_finite()


def is_valid_number(value: float | None) -> TypeIs[float]:
    """Type guard: parsed number is present and finite (not None/NaN/Infinity).

    Args:
        value: Float from the parse_number() result tuple

    Returns:
        True if value is a finite float, False otherwise
    """
    return value is not None and math.isfinite(value)
