"""Property-based round trips between IntlFormatter and LocaleValidation.

Runs only with: pytest -m fuzz
"""

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from l10nkit import IntlFormatter, parse_decimal, validate_number
from tests.strategies import finite_decimals

pytestmark = pytest.mark.fuzz

# Locales with three-digit grouping only
_LOCALES = ("en_US", "de_DE", "de_CH", "fr_FR", "sv_SE", "ar_EG", "he_IL")


class TestFormatterRoundTrip:
    """Formatted output is always accepted by the validator for the same locale."""

    @given(value=finite_decimals(2), locale_code=st.sampled_from(_LOCALES))
    def test_decimal_round_trip(self, value: Decimal, locale_code: str) -> None:
        """PROPERTY: parse(format(x)) == x for two fixed fraction digits."""
        event(f"locale={locale_code}")
        rendered = IntlFormatter.format_decimal(value, "1.2-2", locale_code)
        parsed, errors = parse_decimal(rendered, "1.2-2", locale_code)
        assert errors == ()
        assert parsed == value

    @given(
        value=st.integers(min_value=-(10**9), max_value=10**9),
        locale_code=st.sampled_from(_LOCALES),
    )
    def test_integers_validate(self, value: int, locale_code: str) -> None:
        """PROPERTY: integers formatted without fraction digits validate."""
        rendered = IntlFormatter.format_decimal(value, "1.0-0", locale_code)
        assert validate_number(rendered, "1.0-0", locale_code)


class TestRejection:
    """Strings outside the numeral grammar never validate."""

    @given(text=st.text(alphabet="abcxyz!?#", min_size=1, max_size=12))
    def test_letters_never_validate(self, text: str) -> None:
        """PROPERTY: text without digits is rejected for every locale."""
        for locale_code in _LOCALES:
            assert not validate_number(text, "1.0-3", locale_code)
