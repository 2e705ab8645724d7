"""Locale symbol discovery by probing the formatting capability.

No CLDR table is read here. The symbols of a locale are reverse-engineered
from what the formatter produces for known inputs:

    - the decimal code (minus sign, decimal separator, thousand separator)
      comes from rendering -1000.9 with exactly one fraction digit;
    - the numeral table (glyphs for 0-9) comes from rendering each digit.

Symbols are stored as escapes ("\\u002d") rather than raw characters so they
can be spliced into regular expression templates without colliding with
regex syntax. to_regex() turns a finished template back into literals.

Python 3.13+.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from l10nkit.constants import (
    ARABIC_LETTER_MARK,
    DIGIT_DIGITS,
    GROUPING_MIN_LENGTH,
    LEFT_TO_RIGHT_MARK,
    REFERENCE_DIGITS,
    REFERENCE_VALUE,
    RIGHT_TO_LEFT_MARK,
    SPACE_VARIANTS,
)
from l10nkit.diagnostics import Diagnostic, ErrorTemplate, FormattingError

if TYPE_CHECKING:
    from l10nkit.formatting.intl import DecimalFormatter

__all__ = [
    "ASCII_DECIMAL_CODE",
    "ASCII_LOCALE_CODES",
    "ASCII_NUMBER_CODES",
    "DecimalCode",
    "LocaleCodes",
    "NumberCodes",
    "build_number_codes",
    "derive_locale_codes",
    "probe_decimal_code",
    "to_char",
    "to_hex",
    "to_regex",
    "to_unicode",
]

logger = logging.getLogger(__name__)

type NumberCodes = tuple[str, ...]

_ESCAPE_RE = re.compile(r"\\u([0-9A-Fa-f]{4})|\\U([0-9A-Fa-f]{8})")


def to_hex(code_point: int) -> str:
    """Upper-case hex of a code point, padded to at least four digits."""
    return f"{code_point:04X}"


def to_unicode(char: str) -> str:
    """Escape a single character.

    Example:
        >>> to_unicode("-")
        '\\\\u002D'
        >>> to_unicode("\\U0001D7CE")
        '\\\\U0001D7CE'

    Raises:
        ValueError: If char is not exactly one character
    """
    if len(char) != 1:
        msg = f"Expected a single character, got {char!r}"
        raise ValueError(msg)
    code_point = ord(char)
    if code_point > 0xFFFF:
        return f"\\U{code_point:08X}"
    return f"\\u{to_hex(code_point)}"


def _decode(match: re.Match[str]) -> str:
    return chr(int(match[1] or match[2], 16))


def to_char(text: str) -> str:
    """Replace every escape in text with the character it stands for."""
    return _ESCAPE_RE.sub(_decode, text)


def to_regex(template: str) -> str:
    """Replace every escape in a regex template with a regex-safe literal."""
    return _ESCAPE_RE.sub(lambda match: re.escape(_decode(match)), template)


@dataclass(frozen=True, slots=True)
class DecimalCode:
    """Minus sign, decimal separator and thousand separator of a locale.

    Each field holds one escape. thousand_separator is "" for locales that
    do not group the four-digit reference value.
    """

    minus_sign: str
    decimal_separator: str
    thousand_separator: str

    def symbols(self) -> tuple[str, ...]:
        """The non-empty escapes."""
        return tuple(
            code
            for code in (self.minus_sign, self.decimal_separator, self.thousand_separator)
            if code
        )

    def is_consistent(self, number_codes: NumberCodes) -> bool:
        """Symbols must differ from each other and from every digit glyph."""
        symbols = self.symbols()
        if not self.minus_sign or not self.decimal_separator:
            return False
        if len(set(symbols)) != len(symbols):
            return False
        return not set(symbols) & set(number_codes)


ASCII_DECIMAL_CODE = DecimalCode(to_unicode("-"), to_unicode("."), to_unicode(","))

ASCII_NUMBER_CODES: NumberCodes = tuple(to_unicode(str(digit)) for digit in range(10))

_SPACE = to_unicode(" ")
_BIDI_PREFIXES = frozenset(
    to_unicode(mark) for mark in (RIGHT_TO_LEFT_MARK, ARABIC_LETTER_MARK, LEFT_TO_RIGHT_MARK)
)


@dataclass(frozen=True, slots=True)
class LocaleCodes:
    """Everything probed for one locale.

    Attributes:
        decimal_code: Minus sign and separators
        number_codes: Escapes of the glyphs for 0-9 (index = digit value)
        diagnostics: Warnings raised while probing (fallbacks taken)
    """

    decimal_code: DecimalCode
    number_codes: NumberCodes
    diagnostics: tuple[Diagnostic, ...] = field(default=())

    def transliteration_table(self) -> dict[str, str]:
        """Map each locale character to its ASCII replacement ("" to drop it)."""
        table = {to_char(code): str(digit) for digit, code in enumerate(self.number_codes)}
        table[to_char(self.decimal_code.minus_sign)] = "-"
        table[to_char(self.decimal_code.decimal_separator)] = "."
        if self.decimal_code.thousand_separator:
            table[to_char(self.decimal_code.thousand_separator)] = ""
        return table


ASCII_LOCALE_CODES = LocaleCodes(ASCII_DECIMAL_CODE, ASCII_NUMBER_CODES)


def build_number_codes(
    formatter: DecimalFormatter, locale_code: str
) -> tuple[NumberCodes, tuple[Diagnostic, ...]]:
    """Discover the glyph the locale uses for each digit 0-9.

    Returns:
        Tuple of (number codes, warnings). ASCII digits are used when the
        formatter is unavailable or a digit does not render as exactly one
        distinct glyph.
    """
    if not formatter.available():
        return ASCII_NUMBER_CODES, ()

    try:
        glyphs = [formatter.format_decimal(digit, DIGIT_DIGITS, locale_code) for digit in range(10)]
    except FormattingError as e:
        diagnostic = ErrorTemplate.probe_inconclusive(locale_code, str(e))
        logger.warning("%s", diagnostic)
        return ASCII_NUMBER_CODES, (diagnostic,)

    if any(len(glyph) != 1 for glyph in glyphs) or len(set(glyphs)) != 10:
        diagnostic = ErrorTemplate.probe_inconclusive(locale_code, "".join(glyphs))
        logger.warning("%s", diagnostic)
        return ASCII_NUMBER_CODES, (diagnostic,)

    return tuple(to_unicode(glyph) for glyph in glyphs), ()


def _select_offsets(codes: list[str], number_codes: NumberCodes) -> tuple[int, ...]:
    """Positions of (minus, decimal, thousand) in the rendered reference value.

    The layout is recognized by the leading character:

        bidi mark       "\\u200f-1,000.9"   -> [1, 7, 3]
        digit one       "1,000.9-"         -> [7, 5, 1]
        anything else   "-1,000.9"         -> [0, 6, 2]

    Ungrouped renderings drop the thousand position and shift the decimal
    separator one place left.
    """
    grouped = len(codes) >= GROUPING_MIN_LENGTH
    leading = codes[0] if codes else ""
    if leading in _BIDI_PREFIXES:
        return (1, 7, 3) if grouped else (1, 6)
    if leading == number_codes[1]:
        return (7, 5, 1) if grouped else (6, 4)
    return (0, 6, 2) if grouped else (0, 5)


def probe_decimal_code(
    formatter: DecimalFormatter,
    locale_code: str,
    number_codes: NumberCodes = ASCII_NUMBER_CODES,
) -> tuple[DecimalCode, tuple[Diagnostic, ...]]:
    """Derive the minus sign and separators of a locale.

    Args:
        formatter: Formatting capability to probe
        locale_code: Target locale
        number_codes: Digit glyphs of the locale, used to recognize layouts
            that start with the digit one and to check consistency

    Returns:
        Tuple of (decimal code, warnings). ASCII "-", "." and "," are used
        when the formatter is unavailable (no warning) or when the rendering
        fits no known layout or yields colliding symbols (warning).
    """
    if not formatter.available():
        return ASCII_DECIMAL_CODE, ()

    try:
        rendered = formatter.format_decimal(REFERENCE_VALUE, REFERENCE_DIGITS, locale_code)
    except FormattingError as e:
        diagnostic = ErrorTemplate.probe_inconclusive(locale_code, str(e))
        logger.warning("%s", diagnostic)
        return ASCII_DECIMAL_CODE, (diagnostic,)

    codes = [_SPACE if char in SPACE_VARIANTS else to_unicode(char) for char in rendered]
    offsets = _select_offsets(codes, number_codes)
    if max(offsets) >= len(codes):
        diagnostic = ErrorTemplate.probe_inconclusive(locale_code, rendered)
        logger.warning("%s", diagnostic)
        return ASCII_DECIMAL_CODE, (diagnostic,)

    decimal_code = DecimalCode(
        minus_sign=codes[offsets[0]],
        decimal_separator=codes[offsets[1]],
        thousand_separator=codes[offsets[2]] if len(offsets) == 3 else "",
    )
    if not decimal_code.is_consistent(number_codes):
        diagnostic = ErrorTemplate.probe_inconsistent(
            locale_code,
            (
                decimal_code.minus_sign,
                decimal_code.decimal_separator,
                decimal_code.thousand_separator,
            ),
        )
        logger.warning("%s", diagnostic)
        return ASCII_DECIMAL_CODE, (diagnostic,)

    logger.debug("Probed locale %s: %r -> %s", locale_code, rendered, decimal_code)
    return decimal_code, ()


def derive_locale_codes(formatter: DecimalFormatter, locale_code: str) -> LocaleCodes:
    """Probe both the numeral table and the decimal code of a locale."""
    number_codes, digit_warnings = build_number_codes(formatter, locale_code)
    decimal_code, symbol_warnings = probe_decimal_code(formatter, locale_code, number_codes)
    return LocaleCodes(decimal_code, number_codes, digit_warnings + symbol_warnings)
