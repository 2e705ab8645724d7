"""Tests for digit aliases: parsing, defaults, alias and pattern rendering."""

import pytest
from hypothesis import given

from l10nkit.formatting.digits import DigitsOptions, ResolvedDigits, parse_digits_alias
from tests.strategies.numerals import digit_aliases


class TestParseDigitsAlias:
    """Test parse_digits_alias() on well-formed and malformed input."""

    def test_full_alias(self) -> None:
        """All three counts are read."""
        assert parse_digits_alias("1.2-3") == DigitsOptions(1, 2, 3)

    def test_only_components_present_are_set(self) -> None:
        """Missing components stay None so callers choose the defaults."""
        assert parse_digits_alias("3.") == DigitsOptions(minimum_integer_digits=3)
        assert parse_digits_alias(".1") == DigitsOptions(minimum_fraction_digits=1)
        assert parse_digits_alias(".") == DigitsOptions()
        assert parse_digits_alias("2.0") == DigitsOptions(2, 0, None)

    def test_multi_digit_counts(self) -> None:
        """Counts may have several digits."""
        assert parse_digits_alias("10.12-20") == DigitsOptions(10, 12, 20)

    @pytest.mark.parametrize(
        "alias",
        ["", "1", "1-3", "a.b-c", "1.2-", "1..2", "1.2-3-4", " 1.2-3", "1.2-3 ", "-1.2", "١.٢-٣"],
    )
    def test_malformed_alias_returns_none(self, alias: str) -> None:
        """Anything outside the grammar yields None, never an exception."""
        assert parse_digits_alias(alias) is None

    def test_max_below_min_returns_none(self) -> None:
        """An alias whose maximum is below its minimum is malformed."""
        assert parse_digits_alias("1.3-2") is None

    @given(digit_aliases())
    def test_alias_round_trip(self, drawn: tuple[str, int | None, int | None, int | None]) -> None:
        """PROPERTY: parse then re-render reproduces the alias and its counts."""
        alias, min_int, min_frac, max_frac = drawn
        options = parse_digits_alias(alias)
        assert options is not None
        assert options.minimum_integer_digits == min_int
        assert options.minimum_fraction_digits == min_frac
        assert options.maximum_fraction_digits == max_frac
        assert options.to_alias() == alias


class TestDigitsOptions:
    """Test DigitsOptions validation and default resolution."""

    def test_defaults(self) -> None:
        """Unspecified counts resolve to 1, 0 and 3."""
        assert DigitsOptions().resolved() == ResolvedDigits(1, 0, 3)

    def test_max_default_follows_large_minimum(self) -> None:
        """The default maximum is raised to the minimum fraction digits."""
        assert DigitsOptions(minimum_fraction_digits=5).resolved() == ResolvedDigits(1, 5, 5)
        assert DigitsOptions(minimum_fraction_digits=2).resolved() == ResolvedDigits(1, 2, 3)

    def test_negative_count_rejected(self) -> None:
        """Negative counts raise ValueError."""
        with pytest.raises(ValueError, match="minimum_integer_digits"):
            DigitsOptions(minimum_integer_digits=-1)

    def test_max_below_min_rejected(self) -> None:
        """maximum_fraction_digits below minimum raises ValueError."""
        with pytest.raises(ValueError, match="maximum_fraction_digits"):
            DigitsOptions(minimum_fraction_digits=3, maximum_fraction_digits=1)

    def test_frozen(self) -> None:
        """Options are immutable."""
        options = DigitsOptions(1, 0, 3)
        with pytest.raises(AttributeError):
            options.minimum_integer_digits = 2  # type: ignore[misc]


class TestToPattern:
    """Test conversion of digit counts to CLDR number patterns."""

    @pytest.mark.parametrize(
        ("options", "expected"),
        [
            (DigitsOptions(1, 1, 1), "#,##0.0"),
            (DigitsOptions(1, 0, 2), "#,##0.##"),
            (DigitsOptions(1, 2, 4), "#,##0.00##"),
            (DigitsOptions(1, 0, 0), "#,##0"),
            (DigitsOptions(5, 0, 0), "00,000"),
            (DigitsOptions(3, 0, 0), "#,000"),
            (DigitsOptions(), "#,##0.###"),
        ],
    )
    def test_grouped_patterns(self, options: DigitsOptions, expected: str) -> None:
        """Grouped patterns keep a three-digit primary group."""
        assert options.to_pattern() == expected

    def test_ungrouped_pattern(self) -> None:
        """use_grouping=False drops the separator."""
        assert DigitsOptions(2, 1, 2).to_pattern(use_grouping=False) == "00.0#"

    def test_zero_integer_digits_clamped(self) -> None:
        """Zero integer digits still render one integer digit."""
        assert DigitsOptions(0, 1, 1).to_pattern() == "#,##0.0"
