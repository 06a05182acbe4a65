"""Shared constants for shquote.

Character tables for the POSIX shell quoting grammar. Placing them here
keeps the quoter and unquoter in agreement and gives one place to look
when auditing which characters are special in which mode.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Delimiters
    "SINGLE_QUOTE",
    "DOUBLE_QUOTE",
    "BACKSLASH",
    "NEWLINE",
    # Escape tables
    "DOUBLE_QUOTE_ESCAPABLE",
    "QUOTED_SINGLE_QUOTE",
    # Joining
    "WORD_SEPARATOR",
]

# ============================================================================
# DELIMITERS
# ============================================================================

SINGLE_QUOTE: str = "'"
DOUBLE_QUOTE: str = '"'
BACKSLASH: str = "\\"
NEWLINE: str = "\n"

# ============================================================================
# ESCAPE TABLES
# ============================================================================

# Characters a backslash escapes inside double quotes (POSIX 2.2.3).
# Backslash-newline is a line continuation and produces no output.
# Any other character keeps its backslash.
DOUBLE_QUOTE_ESCAPABLE: frozenset[str] = frozenset({'"', "\\", "`", "$", "\n"})

# Close the single-quoted run, emit an escaped quote, reopen: '\''
QUOTED_SINGLE_QUOTE: str = "'\\''"

# ============================================================================
# JOINING
# ============================================================================

WORD_SEPARATOR: str = " "
