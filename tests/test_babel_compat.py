"""Tests for the Babel availability layer."""

from unittest.mock import patch

import pytest

from l10nkit.core.babel_compat import (
    BabelImportError,
    get_babel_dates,
    get_babel_numbers,
    get_unknown_locale_error,
    get_unsupported_numbering_system_error,
    is_babel_available,
    require_babel,
)

_COMPAT = "l10nkit.core.babel_compat"


class TestAvailability:
    """Test availability checks with Babel installed."""

    def test_babel_installed(self) -> None:
        assert is_babel_available() is True

    def test_require_babel_passes(self) -> None:
        require_babel("format_number")

    def test_module_accessors(self) -> None:
        assert get_babel_numbers().format_decimal(1234.5, locale="en_US") == "1,234.5"
        assert dict(get_babel_dates().TIMEDELTA_UNITS)["day"] == 86400

    def test_exception_accessors(self) -> None:
        from babel.core import UnknownLocaleError
        from babel.numbers import UnsupportedNumberingSystemError

        assert get_unknown_locale_error() is UnknownLocaleError
        assert get_unsupported_numbering_system_error() is UnsupportedNumberingSystemError


class TestBabelMissing:
    """Test behavior when Babel cannot be imported."""

    def test_require_babel_raises(self) -> None:
        with patch(f"{_COMPAT}._check_babel_available", return_value=False):
            assert is_babel_available() is False
            with pytest.raises(BabelImportError, match="format_date requires Babel"):
                require_babel("format_date")

    @pytest.mark.parametrize(
        "accessor",
        [
            get_babel_numbers,
            get_babel_dates,
            get_unknown_locale_error,
            get_unsupported_numbering_system_error,
        ],
    )
    def test_accessors_raise(self, accessor: object) -> None:
        with patch(f"{_COMPAT}._check_babel_available", return_value=False):
            with pytest.raises(BabelImportError):
                accessor()  # type: ignore[operator]


class TestBabelImportError:
    """Test the BabelImportError exception."""

    def test_message_and_feature(self) -> None:
        error = BabelImportError("parse_number")
        assert error.feature == "parse_number"
        assert "pip install babel" in str(error)
        assert isinstance(error, ImportError)
