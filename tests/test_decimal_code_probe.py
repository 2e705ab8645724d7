"""Tests for locale symbol probing: escapes, numeral tables and decimal codes.

Stub formatters supply renderings for the layouts the prober recognizes:
    - plain left-to-right ("-1,000.9")
    - right-to-left / Arabic letter mark prefixed ("\\u200f-1,000.9")
    - left-to-right mark prefixed ("\\u200e-1.000,9")
    - trailing minus, starting with the digit one ("1,000.9-")
and for inconsistent or unreadable renderings that must fall back to ASCII.
"""

import logging

import pytest
from babel.numbers import format_decimal as babel_format_decimal

from l10nkit.constants import (
    DIGIT_DIGITS,
    GROUPING_MIN_LENGTH,
    REFERENCE_DIGITS,
    REFERENCE_VALUE,
)
from l10nkit.diagnostics import DiagnosticCode
from l10nkit.formatting.intl import BabelDecimalFormatter
from l10nkit.validation.codes import (
    ASCII_DECIMAL_CODE,
    ASCII_NUMBER_CODES,
    DecimalCode,
    build_number_codes,
    derive_locale_codes,
    probe_decimal_code,
    to_char,
    to_hex,
    to_regex,
    to_unicode,
)
from tests.helpers.formatters import (
    ARABIC_INDIC_DIGITS,
    FailingDecimalFormatter,
    StubDecimalFormatter,
)


def _code(minus: str, decimal: str, thousand: str) -> DecimalCode:
    return DecimalCode(
        to_unicode(minus), to_unicode(decimal), to_unicode(thousand) if thousand else ""
    )


class TestEscapes:
    """Test the escape helpers used to assemble patterns."""

    def test_to_hex_pads_to_four_digits(self) -> None:
        assert to_hex(0x2D) == "002D"
        assert to_hex(0x1D7CE) == "1D7CE"

    def test_to_unicode_bmp(self) -> None:
        assert to_unicode("-") == "\\u002D"
        assert to_unicode("٫") == "\\u066B"

    def test_to_unicode_astral(self) -> None:
        """Code points above U+FFFF use the eight-digit form."""
        assert to_unicode("\U0001d7ce") == "\\U0001D7CE"

    def test_to_unicode_requires_single_character(self) -> None:
        with pytest.raises(ValueError, match="single character"):
            to_unicode("ab")

    def test_to_char_decodes_every_escape(self) -> None:
        assert to_char("\\u0031\\u002C\\U0001D7CE") == "1,\U0001d7ce"

    def test_to_regex_escapes_special_characters(self) -> None:
        """Decoded characters are regex-escaped; regex syntax is untouched."""
        assert to_regex("[\\u0030-\\u0039]\\u002E\\Z") == "[0-9]\\.\\Z"

    def test_round_trip(self) -> None:
        for char in "-.,'\u00a0\u202f\u066b\u200f":
            assert to_char(to_unicode(char)) == char


class TestBuildNumberCodes:
    """Test discovery of digit glyphs."""

    def test_latin_digits(self) -> None:
        formatter = StubDecimalFormatter("-1,000.9")
        codes, warnings = build_number_codes(formatter, "en_US")
        assert codes == ASCII_NUMBER_CODES
        assert warnings == ()
        assert [call[1] for call in formatter.calls] == [DIGIT_DIGITS] * 10

    def test_arabic_indic_digits(self) -> None:
        formatter = StubDecimalFormatter("-1,000.9", ARABIC_INDIC_DIGITS)
        codes, _ = build_number_codes(formatter, "ar_EG")
        assert codes[0] == "\\u0660"
        assert codes[9] == "\\u0669"
        assert len(codes) == 10

    def test_unavailable_formatter_uses_ascii(self) -> None:
        formatter = StubDecimalFormatter("-1,000.9", available=False)
        assert build_number_codes(formatter, "en_US") == (ASCII_NUMBER_CODES, ())
        assert formatter.calls == []

    def test_multi_character_glyph_is_inconclusive(self) -> None:
        digits = ["0", "1", "2", "3", "4", "5", "6", "7", "8", "\u200f9"]
        codes, warnings = build_number_codes(StubDecimalFormatter("", digits), "xx")
        assert codes == ASCII_NUMBER_CODES
        assert warnings[0].code is DiagnosticCode.PROBE_INCONCLUSIVE

    def test_formatting_error_is_inconclusive(self) -> None:
        codes, warnings = build_number_codes(FailingDecimalFormatter(), "xx")
        assert codes == ASCII_NUMBER_CODES
        assert warnings[0].is_warning


class TestProbeDecimalCode:
    """Test the fixed-offset layouts of the reference rendering."""

    @pytest.mark.parametrize(
        ("rendered", "expected"),
        [
            ("-1,000.9", _code("-", ".", ",")),
            ("-1.000,9", _code("-", ",", ".")),
            ("-1000,9", _code("-", ",", "")),
            ("\u22121\u202f000,9", _code("\u2212", ",", " ")),
            ("-1\u00a0000,9", _code("-", ",", " ")),
            ("-1'000.9", _code("-", ".", "'")),
        ],
    )
    def test_left_to_right(self, rendered: str, expected: DecimalCode) -> None:
        """Plain renderings read minus, decimal and thousand at 0, 6 and 2."""
        code, warnings = probe_decimal_code(StubDecimalFormatter(rendered), "xx")
        assert code == expected
        assert warnings == ()

    def test_right_to_left_mark_prefix(self) -> None:
        code, _ = probe_decimal_code(StubDecimalFormatter("\u200f-1,000.9"), "he")
        assert code == _code("-", ".", ",")

    def test_arabic_letter_mark_prefix_with_native_digits(self) -> None:
        rendered = "\u061c-١٬٠٠٠٫٩"
        formatter = StubDecimalFormatter(rendered, ARABIC_INDIC_DIGITS)
        number_codes, _ = build_number_codes(formatter, "ar")
        code, warnings = probe_decimal_code(formatter, "ar", number_codes)
        assert code == _code("-", "٫", "٬")
        assert warnings == ()

    def test_left_to_right_mark_prefix(self) -> None:
        code, _ = probe_decimal_code(StubDecimalFormatter("\u200e-1.000,9"), "xx")
        assert code == _code("-", ",", ".")

    def test_trailing_minus_starting_with_digit_one(self) -> None:
        code, _ = probe_decimal_code(StubDecimalFormatter("1,000.9-"), "xx")
        assert code == _code("-", ".", ",")

    def test_trailing_minus_without_grouping(self) -> None:
        code, _ = probe_decimal_code(StubDecimalFormatter("1000,9-"), "xx")
        assert code == _code("-", ",", "")

    def test_reference_call(self) -> None:
        """The reference value is rendered with exactly one fraction digit."""
        formatter = StubDecimalFormatter("-1,000.9")
        probe_decimal_code(formatter, "en_US")
        assert formatter.calls == [(REFERENCE_VALUE, REFERENCE_DIGITS, "en_US")]

    @pytest.mark.parametrize(
        ("rendered", "grouped"),
        [("-1,000.9", True), ("-1000.9", False), ("-1 000,9", True), ("-1000,9", False)],
    )
    def test_grouping_detected_by_length(self, rendered: str, grouped: bool) -> None:
        """A thousand separator is reported exactly when the rendering has 8+ characters."""
        code, _ = probe_decimal_code(StubDecimalFormatter(rendered), "xx")
        assert bool(code.thousand_separator) is grouped

    def test_unavailable_formatter_uses_ascii(self) -> None:
        formatter = StubDecimalFormatter("-1.000,9", available=False)
        assert probe_decimal_code(formatter, "de") == (ASCII_DECIMAL_CODE, ())
        assert formatter.calls == []


class TestProbeFallbacks:
    """Test the ASCII fallback for renderings that fit no layout."""

    def test_colliding_separators(self, caplog: pytest.LogCaptureFixture) -> None:
        """Identical decimal and thousand separators are rejected."""
        with caplog.at_level(logging.WARNING, logger="l10nkit.validation.codes"):
            code, warnings = probe_decimal_code(StubDecimalFormatter("-1.000.9"), "xx")
        assert code == ASCII_DECIMAL_CODE
        assert warnings[0].code is DiagnosticCode.PROBE_INCONSISTENT
        assert "not distinct" in caplog.text

    def test_symbol_equal_to_digit(self) -> None:
        """An LRM-prefixed ungrouped rendering misread as grouped lands on a digit."""
        code, warnings = probe_decimal_code(StubDecimalFormatter("\u200e-1000.9"), "xx")
        assert code == ASCII_DECIMAL_CODE
        assert warnings[0].code is DiagnosticCode.PROBE_INCONSISTENT

    @pytest.mark.parametrize("rendered", ["", "-1", "-1.0"])
    def test_rendering_too_short(self, rendered: str) -> None:
        code, warnings = probe_decimal_code(StubDecimalFormatter(rendered), "xx")
        assert code == ASCII_DECIMAL_CODE
        assert warnings[0].code is DiagnosticCode.PROBE_INCONCLUSIVE

    def test_formatting_error(self) -> None:
        code, warnings = probe_decimal_code(FailingDecimalFormatter(), "xx")
        assert code == ASCII_DECIMAL_CODE
        assert warnings[0].severity == "warning"

    def test_derive_collects_all_warnings(self) -> None:
        codes = derive_locale_codes(FailingDecimalFormatter(), "xx")
        assert codes.decimal_code == ASCII_DECIMAL_CODE
        assert codes.number_codes == ASCII_NUMBER_CODES
        assert len(codes.diagnostics) == 2


class TestBabelProbe:
    """Probe real CLDR data through Babel."""

    def test_en_us(self) -> None:
        code, warnings = probe_decimal_code(BabelDecimalFormatter(), "en_US")
        assert code == _code("-", ".", ",")
        assert warnings == ()

    def test_de_de(self) -> None:
        code, _ = probe_decimal_code(BabelDecimalFormatter(), "de-DE")
        assert code == _code("-", ",", ".")

    def test_fr_fr_space_grouping_is_normalized(self) -> None:
        """fr groups with a no-break space variant, normalized to U+0020."""
        code, _ = probe_decimal_code(BabelDecimalFormatter(), "fr_FR")
        assert code.decimal_separator == to_unicode(",")
        assert code.thousand_separator == to_unicode(" ")

    @pytest.mark.parametrize("locale_code", ["en_US", "de_DE", "fr_FR", "sv_SE", "de_CH"])
    def test_grouping_threshold_on_cldr_renderings(self, locale_code: str) -> None:
        """Grouped reference renderings reach the length threshold, ungrouped ones do not."""
        grouped = BabelDecimalFormatter().format_decimal(
            REFERENCE_VALUE, REFERENCE_DIGITS, locale_code
        )
        ungrouped = babel_format_decimal(REFERENCE_VALUE, format="0.0", locale=locale_code)
        assert len(grouped) >= GROUPING_MIN_LENGTH
        assert len(ungrouped) < GROUPING_MIN_LENGTH
        assert probe_decimal_code(StubDecimalFormatter(grouped), locale_code)[0].thousand_separator
        ungrouped_code, _ = probe_decimal_code(StubDecimalFormatter(ungrouped), locale_code)
        assert ungrouped_code.thousand_separator == ""

    def test_locale_codes_are_consistent(self) -> None:
        for locale_code in ("en_US", "de_DE", "fr_FR", "ar_EG", "hi_IN", "he_IL", "sv_SE"):
            codes = derive_locale_codes(BabelDecimalFormatter(), locale_code)
            assert codes.decimal_code.is_consistent(codes.number_codes), locale_code
