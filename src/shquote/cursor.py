"""Immutable cursor infrastructure for quote parsing.

Implements the immutable cursor pattern used by the unquoter.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor; positions only move forward
    - Two synchronized coordinates: character index and UTF-8 byte offset
    - Line:column computed on-demand (only for errors)

Byte Offsets:
    Python strings index by code point. Callers that hold the UTF-8
    encoded input (editors, terminals, log pipelines) need byte offsets
    instead, so the cursor carries both. The byte offset is accumulated
    one character at a time from the code point value; the source is
    never re-encoded.
"""

from dataclasses import dataclass

from shquote.diagnostics import ErrorTemplate

__all__ = ["Cursor", "utf8_width"]

# Code point upper bounds (exclusive) for 1, 2 and 3 byte UTF-8 sequences.
_UTF8_ONE_BYTE_LIMIT: int = 0x80
_UTF8_TWO_BYTE_LIMIT: int = 0x800
_UTF8_THREE_BYTE_LIMIT: int = 0x10000


def utf8_width(char: str) -> int:
    """Return the UTF-8 encoded length of a single character.

    Args:
        char: A one-character string

    Returns:
        Number of UTF-8 code units (1-4)

    Example:
        >>> utf8_width("a")
        1
        >>> utf8_width("é")
        2
        >>> utf8_width("€")
        3
        >>> utf8_width("🐚")
        4
    """
    code_point = ord(char)
    if code_point < _UTF8_ONE_BYTE_LIMIT:
        return 1
    if code_point < _UTF8_TWO_BYTE_LIMIT:
        return 2
    if code_point < _UTF8_THREE_BYTE_LIMIT:
        return 3
    return 4


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Invariant:
        byte_pos == len(source[:pos].encode("utf-8")) for every cursor
        reached from Cursor(source) through advance().

    Example:
        >>> cursor = Cursor("héllo")
        >>> cursor = cursor.advance().advance()
        >>> cursor.pos, cursor.byte_pos
        (2, 3)
        >>> cursor.current
        'l'
    """

    source: str
    pos: int = 0
    byte_pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Use this in while loops: `while not cursor.is_eof:`
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self) -> "Cursor":
        """Return new cursor one character forward.

        At EOF the cursor is returned unchanged.
        """
        if self.is_eof:
            return self
        return Cursor(
            self.source,
            self.pos + 1,
            self.byte_pos + utf8_width(self.source[self.pos]),
        )

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position.
            Only call for error reporting, not during normal parsing!

        Example:
            >>> Cursor("ab\\ncd", 4, 4).compute_line_col()
            (2, 2)
        """
        line = self.source.count("\n", 0, self.pos) + 1

        last_newline = self.source.rfind("\n", 0, self.pos)
        col = self.pos - last_newline if last_newline >= 0 else self.pos + 1

        return (line, col)
