"""Unquote POSIX shell tokens.

Parses a single shell token back into its literal value. The scan is a
single forward pass over an immutable Cursor with three lexical modes:

    plain          outside any quote; backslash makes the next character literal
    single-quoted  everything literal up to the next '
    double-quoted  literal except for ", and backslash before " \\ ` $ <newline>

Each quoted mode is a function that takes the cursor just past the opening
quote and returns the cursor just past the closing quote, or None if the
input ended first. The caller kept the cursor of the opening quote and
uses it to build the error.

The result is canonical: a given input has exactly one unquoted value.
"""

import logging

from shquote.constants import (
    BACKSLASH,
    DOUBLE_QUOTE,
    DOUBLE_QUOTE_ESCAPABLE,
    NEWLINE,
    SINGLE_QUOTE,
)
from shquote.cursor import Cursor
from shquote.diagnostics import (
    ErrorTemplate,
    SourceSpan,
    UnterminatedDoubleQuoteError,
    UnterminatedSingleQuoteError,
)

__all__ = ["unquote"]

logger = logging.getLogger(__name__)


def _span_at(cursor: Cursor) -> SourceSpan:
    """Build the span covering the character under the cursor."""
    line, column = cursor.compute_line_col()
    return SourceSpan(
        start=cursor.pos,
        end=cursor.pos + 1,
        line=line,
        column=column,
        byte_start=cursor.byte_pos,
        byte_end=cursor.advance().byte_pos,
    )


def _unquote_single(cursor: Cursor, acc: list[str]) -> Cursor | None:
    """Copy a single-quoted sequence verbatim up to the closing quote.

    No escape sequences exist here, not even for the single quote.
    """
    while not cursor.is_eof:
        ch = cursor.current
        cursor = cursor.advance()
        if ch == SINGLE_QUOTE:
            return cursor
        acc.append(ch)
    return None


def _unquote_double(cursor: Cursor, acc: list[str]) -> Cursor | None:
    """Decode a double-quoted sequence up to the closing unescaped quote.

    Known escapes produce the escaped character (backslash-newline produces
    nothing). Unknown escapes are copied including the backslash. A
    backslash with nothing after it leaves the sequence unterminated.
    """
    while not cursor.is_eof:
        ch = cursor.current
        cursor = cursor.advance()

        if ch == DOUBLE_QUOTE:
            return cursor

        if ch == BACKSLASH:
            if cursor.is_eof:
                return None
            esc_ch = cursor.current
            cursor = cursor.advance()
            if esc_ch == NEWLINE:
                continue
            if esc_ch not in DOUBLE_QUOTE_ESCAPABLE:
                acc.append(BACKSLASH)
            acc.append(esc_ch)
            continue

        acc.append(ch)
    return None


def _unquote_escape(cursor: Cursor, acc: list[str]) -> Cursor:
    """Take the character after a top-level backslash literally.

    Backslash-newline is a line continuation and produces nothing, as does
    a backslash at the very end of input.
    """
    if cursor.is_eof:
        return cursor
    esc_ch = cursor.current
    if esc_ch != NEWLINE:
        acc.append(esc_ch)
    return cursor.advance()


def unquote(source: str) -> str:
    """Unquote a shell token according to POSIX quoting and escaping rules.

    Args:
        source: A shell token, e.g. "foo'bar'" or '"a \\"b\\""'

    Returns:
        The literal value with all quoting and escaping removed

    Raises:
        UnterminatedSingleQuoteError: A ' is never closed
        UnterminatedDoubleQuoteError: A " is never closed

    Example:
        >>> unquote("foo'bar'")
        'foobar'
        >>> unquote(quote("it's"))
        "it's"
    """
    acc: list[str] = []
    cursor = Cursor(source)

    while not cursor.is_eof:
        ch = cursor.current
        opening = cursor
        cursor = cursor.advance()

        if ch == SINGLE_QUOTE:
            closed = _unquote_single(cursor, acc)
            if closed is None:
                logger.debug(
                    "Unterminated single quote at char %d (byte %d)",
                    opening.pos,
                    opening.byte_pos,
                )
                raise UnterminatedSingleQuoteError(
                    ErrorTemplate.unterminated_single_quote(_span_at(opening)),
                    source=source,
                    char_cursor=opening.pos,
                    byte_cursor=opening.byte_pos,
                )
            cursor = closed
        elif ch == DOUBLE_QUOTE:
            closed = _unquote_double(cursor, acc)
            if closed is None:
                logger.debug(
                    "Unterminated double quote at char %d (byte %d)",
                    opening.pos,
                    opening.byte_pos,
                )
                raise UnterminatedDoubleQuoteError(
                    ErrorTemplate.unterminated_double_quote(_span_at(opening)),
                    source=source,
                    char_cursor=opening.pos,
                    byte_cursor=opening.byte_pos,
                )
            cursor = closed
        elif ch == BACKSLASH:
            cursor = _unquote_escape(cursor, acc)
        else:
            acc.append(ch)

    return "".join(acc)
