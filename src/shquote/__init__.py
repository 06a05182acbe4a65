"""shquote - POSIX shell compatible quoting and unquoting.

Quotes arbitrary strings so a POSIX shell does not interpret them, and
unquotes shell tokens back to their literal value. Only the quoting rules
standardized by POSIX are supported; shell-specific extensions such as
$'...' are deliberately not.

Public API:
    quote - Quote a string as a single shell token
    join - Quote an argument vector into one command line
    unquote - Parse a shell token back into its literal value

Exceptions:
    ShquoteError - Base exception class
    UnquoteError - Input could not be unquoted
    UnterminatedSingleQuoteError - A ' is never closed
    UnterminatedDoubleQuoteError - A " is never closed

Submodules:
    shquote.cursor - Immutable cursor with character and byte offsets
    shquote.diagnostics - Diagnostic codes, templates, and formatting

Example:
    >>> from shquote import quote, unquote
    >>> unquote(quote("foo bar")) == "foo bar"
    True
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    ShquoteError,
    UnquoteError,
    UnterminatedDoubleQuoteError,
    UnterminatedSingleQuoteError,
)
from .quoter import join, quote
from .unquoter import unquote

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("shquote")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ShquoteError",
    "UnquoteError",
    "UnterminatedDoubleQuoteError",
    "UnterminatedSingleQuoteError",
    "__version__",
    "join",
    "quote",
    "unquote",
]
