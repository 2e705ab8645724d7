"""Diagnostic system for l10nkit errors.

Provides structured error diagnostics with codes, severities and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import FormattingError, L10nError, L10nParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FormattingError",
    "L10nError",
    "L10nParseError",
    "OutputFormat",
]
