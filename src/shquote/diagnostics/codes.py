"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Unquote errors (malformed quoted input)
        3000-3999: Cursor errors (scanner misuse)
    """

    # Unquote errors (1000-1999)
    UNTERMINATED_SINGLE_QUOTE = 1001
    UNTERMINATED_DOUBLE_QUOTE = 1002

    # Cursor errors (3000-3999)
    UNEXPECTED_EOF = 3001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points).
        The byte offsets are the same positions measured in UTF-8 code units,
        which is what tools working on the encoded input need.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        byte_start: Starting UTF-8 byte offset (0-indexed)
        byte_end: Ending UTF-8 byte offset (exclusive)
    """

    start: int
    end: int
    line: int
    column: int
    byte_start: int
    byte_end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If an offset is negative, an end precedes its start,
                or line/column is less than 1 (both are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.byte_start < self.start:
            msg = (
                f"SourceSpan.byte_start ({self.byte_start}) must be >= "
                f"start ({self.start})"
            )
            raise ValueError(msg)
        if self.byte_end < self.byte_start:
            msg = (
                f"SourceSpan.byte_end ({self.byte_end}) must be >= "
                f"byte_start ({self.byte_start})"
            )
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Provides error information for both humans (rendered text) and tools
    (codes and offsets).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None when no input position applies)
        hint: Suggestion for fixing the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like the Rust compiler.

        Example output:
            error[UNTERMINATED_SINGLE_QUOTE]: Unterminated single quote
              --> line 1, column 9 (char 8, byte 8)
              = help: Close the single-quoted sequence with a matching '

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
