"""shquote exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ShquoteError",
    "UnquoteError",
    "UnterminatedDoubleQuoteError",
    "UnterminatedSingleQuoteError",
]


class ShquoteError(Exception):
    """Base exception for all shquote errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize ShquoteError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnquoteError(ShquoteError):
    """Input could not be unquoted.

    Parsing stops at the first error and no partial output is produced.
    The offsets point at the opening quote that was never closed, not at
    the end of input.

    Attributes:
        source: The complete input passed to unquote()
        char_cursor: Character index of the opening quote
        byte_cursor: UTF-8 byte offset of the opening quote

    Example:
        >>> try:
        ...     unquote("'Hello' 'World!")
        ... except UnquoteError as e:
        ...     print(e.format_with_context())
        error[UNTERMINATED_SINGLE_QUOTE]: Unterminated single quote
          --> line 1, column 9 (char 8, byte 8)
          = help: ...
        <BLANKLINE>
           1 | 'Hello' 'World!
             |         ^
    """

    diagnostic: Diagnostic

    def __init__(
        self,
        message: Diagnostic,
        *,
        source: str,
        char_cursor: int,
        byte_cursor: int,
    ) -> None:
        """Initialize UnquoteError.

        Args:
            message: Diagnostic describing the failure
            source: The complete input passed to unquote()
            char_cursor: Character index of the opening quote
            byte_cursor: UTF-8 byte offset of the opening quote
        """
        super().__init__(message)
        self.source = source
        self.char_cursor = char_cursor
        self.byte_cursor = byte_cursor

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and a caret under the opening quote.

        Args:
            context_lines: Number of lines to show before/after the error line

        Returns:
            Multi-line formatted error with context
        """
        span = self.diagnostic.span
        if span is None:
            return self.diagnostic.format_error()

        line, col = span.line, span.column
        lines = self.source.split("\n")

        result_lines = [self.diagnostic.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            gutter = f"{i:4} | "
            result_lines.append(gutter + lines[i - 1])

            if i == line:
                pointer = " " * (len(gutter) - 2) + "| " + " " * (col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)


class UnterminatedSingleQuoteError(UnquoteError):
    """A single quote was opened but never closed.

    Single-quoted sequences admit no escapes, so a backslash cannot hide
    the closing quote.
    """


class UnterminatedDoubleQuoteError(UnquoteError):
    """A double quote was opened but never closed.

    Also raised when a backslash is the last character inside an open
    double quote.
    """
