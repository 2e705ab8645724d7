"""l10nkit exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.
Parse errors are returned as values rather than raised; formatting errors
are raised with a usable fallback string.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, ErrorCategory

__all__ = [
    "FormattingError",
    "L10nError",
    "L10nParseError",
]


class L10nError(Exception):
    """Base exception for all l10nkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    category: ErrorCategory | None = None

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize L10nError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)

    @property
    def is_warning(self) -> bool:
        """True when the attached diagnostic is only a warning."""
        return self.diagnostic is not None and self.diagnostic.is_warning


class L10nParseError(L10nError):
    """Error (or warning) produced while parsing a localized numeral string.

    Returned inside the result tuple of parse_number() / parse_decimal()
    instead of being raised. Warnings (malformed digit alias, inconclusive
    locale probe) accompany a usable result; errors accompany the NaN sentinel.

    Attributes:
        input_value: The string that was parsed
        locale_code: The locale used for parsing
        parse_type: Type of parsing attempted ('number', 'decimal')

    Example:
        >>> result, errors = parse_number("abc", locale_code="en_US")
        >>> for error in errors:
        ...     print(f"{error.input_value} ({error.parse_type})")
        abc (number)
    """

    category = ErrorCategory.PARSE

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        input_value: str = "",
        locale_code: str = "",
        parse_type: str = "",
    ) -> None:
        """Initialize L10nParseError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The string that failed to parse
            locale_code: The locale used for parsing
            parse_type: Type of parsing ('number', 'decimal')
        """
        super().__init__(message)
        self.input_value = input_value
        self.locale_code = locale_code
        self.parse_type = parse_type


class FormattingError(L10nError):
    """Raised when locale-aware formatting fails.

    The error carries a fallback_value so callers can still render
    something meaningful (typically the raw value).

    Attributes:
        fallback_value: String to use in output when formatting fails
    """

    category = ErrorCategory.FORMATTING

    def __init__(self, message: str | Diagnostic, fallback_value: str) -> None:
        """Initialize FormattingError.

        Args:
            message: Error message string OR Diagnostic object
            fallback_value: Value to use in output when formatting fails
        """
        super().__init__(message)
        self.fallback_value = fallback_value
