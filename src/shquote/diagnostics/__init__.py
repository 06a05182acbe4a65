"""Diagnostic system for shquote errors.

Provides structured error diagnostics with codes, spans, and hints.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import (
    ShquoteError,
    UnquoteError,
    UnterminatedDoubleQuoteError,
    UnterminatedSingleQuoteError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "ShquoteError",
    "SourceSpan",
    "UnquoteError",
    "UnterminatedDoubleQuoteError",
    "UnterminatedSingleQuoteError",
]
