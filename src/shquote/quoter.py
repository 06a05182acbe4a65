"""Quote strings for POSIX shells.

The output is always a sequence of single-quoted runs. Inside single
quotes a POSIX shell treats every character literally, so the only
character that needs handling is the single quote itself: the run is
closed, an escaped quote is emitted, and a new run is opened.

There is no canonical quoting of a string. This module produces the
same form many other tools produce, which is not the shortest possible:

    ""  -> ''
    "'" -> ''\\'''

Callers must not rely on the exact output beyond unquote() returning
the original input.
"""

from collections.abc import Iterable

from shquote.constants import QUOTED_SINGLE_QUOTE, SINGLE_QUOTE, WORD_SEPARATOR

__all__ = ["join", "quote"]


def quote(source: str) -> str:
    """Quote a string so a POSIX shell reads it back as one literal token.

    Args:
        source: Arbitrary text

    Returns:
        The quoted token

    Example:
        >>> quote("foobar")
        "'foobar'"
        >>> quote("it's")
        "'it'\\\\''s'"
    """
    return SINGLE_QUOTE + source.replace(SINGLE_QUOTE, QUOTED_SINGLE_QUOTE) + SINGLE_QUOTE


def join(words: Iterable[str]) -> str:
    """Quote each word and join them into one command line.

    Args:
        words: Argument vector, e.g. ["git", "commit", "-m", "a message"]

    Returns:
        Space-separated quoted words ("" for no words)
    """
    return WORD_SEPARATOR.join(quote(word) for word in words)
