"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    """

    @staticmethod
    def unterminated_single_quote(span: SourceSpan) -> Diagnostic:
        """Single-quoted sequence opened but never closed.

        Args:
            span: Location of the opening single quote

        Returns:
            Diagnostic for UNTERMINATED_SINGLE_QUOTE
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_SINGLE_QUOTE,
            message="Unterminated single quote",
            span=span,
            hint=(
                "Close the single-quoted sequence with a matching '; "
                "single quotes cannot be escaped inside single quotes"
            ),
        )

    @staticmethod
    def unterminated_double_quote(span: SourceSpan) -> Diagnostic:
        """Double-quoted sequence opened but never closed.

        A backslash as the very last character inside an open double quote
        also ends up here.

        Args:
            span: Location of the opening double quote

        Returns:
            Diagnostic for UNTERMINATED_DOUBLE_QUOTE
        """
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_DOUBLE_QUOTE,
            message="Unterminated double quote",
            span=span,
            hint='Close the double-quoted sequence with a matching unescaped "',
        )

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Cursor read past the end of input.

        Args:
            position: Character position of the read

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading the current character",
        )
