"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All diagnostics are created here. NO f-strings in exception constructors!
    This keeps messages testable, consistent and documented in one place.
    """

    @staticmethod
    def invalid_digits_alias(alias: str, locale_code: str | None = None) -> Diagnostic:
        """Digit alias does not match '{minInt}.{minFrac}-{maxFrac}'.

        Args:
            alias: The rejected alias string
            locale_code: Locale of the surrounding operation, if any

        Returns:
            Warning diagnostic for INVALID_DIGITS_ALIAS
        """
        msg = f"Invalid digits alias '{alias}'; using defaults"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIGITS_ALIAS,
            message=msg,
            hint="Use the form '{minInt}.{minFrac}-{maxFrac}', e.g. '1.0-3'",
            locale_code=locale_code,
            severity="warning",
        )

    @staticmethod
    def invalid_date_alias(alias: str) -> Diagnostic:
        """Unknown date format alias.

        Args:
            alias: The rejected alias

        Returns:
            Warning diagnostic for INVALID_DATE_ALIAS
        """
        msg = f"Invalid date format alias '{alias}'; using locale default"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DATE_ALIAS,
            message=msg,
            hint="Use one of: short, medium, long, full, shortDate, mediumDate, "
            "longDate, fullDate, shortTime, mediumTime",
            severity="warning",
        )

    @staticmethod
    def invalid_relative_time_unit(unit: str) -> Diagnostic:
        """Relative time unit not supported.

        Args:
            unit: The rejected unit

        Returns:
            Diagnostic for INVALID_RELATIVE_TIME_UNIT
        """
        msg = f"Unsupported relative time unit '{unit}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RELATIVE_TIME_UNIT,
            message=msg,
            hint="Use one of: year, month, week, day, hour, minute, second",
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier not recognized by Babel.

        Args:
            locale_code: The unknown locale identifier
            reason: Underlying error message

        Returns:
            Warning diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 or POSIX locale identifier such as 'en-US' or 'de_DE'",
            locale_code=locale_code,
            severity="warning",
        )

    @staticmethod
    def formatting_failed(kind: str, value: object, locale_code: str, reason: str) -> Diagnostic:
        """Babel formatting raised.

        Args:
            kind: What was being formatted ('number', 'date', 'relative time')
            value: The value that failed to format
            locale_code: Target locale
            reason: Underlying error message

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"{kind.capitalize()} formatting failed for '{value}' in locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def probe_inconclusive(locale_code: str, rendered: str) -> Diagnostic:
        """Reference rendering did not fit any known layout.

        Args:
            locale_code: Probed locale
            rendered: The rendering of the reference value

        Returns:
            Warning diagnostic for PROBE_INCONCLUSIVE
        """
        msg = (
            f"Could not derive number symbols for locale '{locale_code}' "
            f"from {rendered!r}; using '-', '.' and ','"
        )
        return Diagnostic(
            code=DiagnosticCode.PROBE_INCONCLUSIVE,
            message=msg,
            locale_code=locale_code,
            severity="warning",
        )

    @staticmethod
    def probe_inconsistent(locale_code: str, symbols: tuple[str, ...]) -> Diagnostic:
        """Derived symbols collide with each other or with digit glyphs.

        Args:
            locale_code: Probed locale
            symbols: Derived (minus, decimal, thousand) escapes

        Returns:
            Warning diagnostic for PROBE_INCONSISTENT
        """
        msg = (
            f"Number symbols derived for locale '{locale_code}' are not distinct "
            f"{symbols}; using '-', '.' and ','"
        )
        return Diagnostic(
            code=DiagnosticCode.PROBE_INCONSISTENT,
            message=msg,
            locale_code=locale_code,
            severity="warning",
        )

    @staticmethod
    def parse_number_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Number parsing failed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_NUMBER_FAILED
        """
        msg = f"Failed to parse number '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_NUMBER_FAILED,
            message=msg,
            hint="Check that the number format matches the locale's conventions",
            locale_code=locale_code,
        )

    @staticmethod
    def parse_decimal_failed(value: str, locale_code: str, reason: str) -> Diagnostic:
        """Decimal parsing failed.

        Args:
            value: The input string that failed to parse
            locale_code: The locale used for parsing
            reason: The reason parsing failed

        Returns:
            Diagnostic for PARSE_DECIMAL_FAILED
        """
        msg = f"Failed to parse decimal '{value}' for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DECIMAL_FAILED,
            message=msg,
            hint="Check that the decimal format matches the locale's conventions",
            locale_code=locale_code,
        )

    @staticmethod
    def parse_unexpected_character(value: str, char: str, locale_code: str) -> Diagnostic:
        """Validated string contained a character outside the locale's symbols.

        Args:
            value: The input string
            char: The offending character
            locale_code: The locale used for parsing

        Returns:
            Diagnostic for PARSE_UNEXPECTED_CHARACTER
        """
        msg = (
            f"Unexpected character {char!r} (U+{ord(char):04X}) in '{value}' "
            f"for locale '{locale_code}'"
        )
        return Diagnostic(
            code=DiagnosticCode.PARSE_UNEXPECTED_CHARACTER,
            message=msg,
            locale_code=locale_code,
        )
