"""Hypothesis strategies for l10nkit property-based testing.

Usage:
    from tests.strategies import digit_aliases, en_us_numerals

Event-Emitting Strategies (HypoFuzz-Optimized):
    - digit_aliases: alias_shape
    - en_us_numerals: numeral_grouped
"""

from .numerals import (
    digit_aliases,
    digit_counts,
    en_us_numerals,
    finite_decimals,
)

__all__ = [
    "digit_aliases",
    "digit_counts",
    "en_us_numerals",
    "finite_decimals",
]
