"""Regular expression synthesis for localized numeral strings.

The pattern is assembled from escapes (see codes.py) and only turned into
literal characters at the very end, so separators such as "." or a space
never need ad hoc quoting while the template is built.

Pattern layout (D = digit class, T = thousand separator, S = decimal
separator, Z = zero glyph, M = minus sign):

    ^ M? (?: D{minInt,}                                  plain integer
           | (?=(?:T*D){minInt,}(?:S|\\Z))                enough digits ahead
             (?!(?=(?:T*D){minInt+1,}(?:S|\\Z))Z(?!S))    no leading zero
                                                          beyond minInt padding
             D{1,3}(?:TD{3})*                             grouped triples
         )
      fraction \\Z

    fraction:   S D{minF,maxF}        minF > 0
                (?:S D{0,maxF})?      minF == 0 and maxF > 0
                (empty)               maxF == 0

Python 3.13+. Zero external dependencies.
"""

import re

from l10nkit.formatting.digits import ResolvedDigits
from l10nkit.validation.codes import DecimalCode, NumberCodes, to_regex

__all__ = ["compile_pattern", "synthesize_pattern"]


def synthesize_pattern(
    decimal_code: DecimalCode, number_codes: NumberCodes, digits: ResolvedDigits
) -> str:
    """Build the escaped pattern template for one locale and digit setting.

    Example:
        >>> from l10nkit.validation.codes import ASCII_DECIMAL_CODE, ASCII_NUMBER_CODES
        >>> template = synthesize_pattern(
        ...     ASCII_DECIMAL_CODE, ASCII_NUMBER_CODES, ResolvedDigits(1, 0, 0)
        ... )
        >>> to_regex(template)
        '^\\\\-?(?:[0-9]{1,}|(?=(?:,*[0-9]){1,}(?:\\\\.|\\\\Z))(?!(?=(?:,*[0-9]){2,}(?:\\\\.|\\\\Z))0(?!\\\\.))[0-9]{1,3}(?:,[0-9]{3})*)\\\\Z'
    """
    zero = number_codes[0]
    digit = f"[{zero}-{number_codes[9]}]"
    minus = decimal_code.minus_sign
    decimal = decimal_code.decimal_separator
    thousand = decimal_code.thousand_separator
    min_int = digits.minimum_integer_digits

    branches = [f"{digit}{{{min_int},}}"]
    if thousand:
        branches.append(
            f"(?=(?:{thousand}*{digit}){{{min_int},}}(?:{decimal}|\\Z))"
            f"(?!(?=(?:{thousand}*{digit}){{{min_int + 1},}}(?:{decimal}|\\Z))"
            f"{zero}(?!{decimal}))"
            f"{digit}{{1,3}}(?:{thousand}{digit}{{3}})*"
        )
    integer = "(?:" + "|".join(branches) + ")"

    fraction = ""
    if digits.maximum_fraction_digits > 0:
        fraction = (
            f"{decimal}{digit}"
            f"{{{digits.minimum_fraction_digits},{digits.maximum_fraction_digits}}}"
        )
        if digits.minimum_fraction_digits == 0:
            fraction = f"(?:{fraction})?"

    return f"^{minus}?{integer}{fraction}\\Z"


def compile_pattern(
    decimal_code: DecimalCode, number_codes: NumberCodes, digits: ResolvedDigits
) -> re.Pattern[str]:
    """Synthesize the template, resolve its escapes and compile it."""
    return re.compile(to_regex(synthesize_pattern(decimal_code, number_codes, digits)))
