"""Quickstart example for shquote.

This example demonstrates quoting strings for a POSIX shell, unquoting
shell tokens, and reporting unquote failures with a caret diagram.
"""

from shquote import UnquoteError, join, quote, unquote
from shquote.diagnostics import DiagnosticFormatter, OutputFormat

# Example 1: Quoting
print("=" * 50)
print("Example 1: Quoting")
print("=" * 50)

print(quote("Hello World!"))
# Output: 'Hello World!'

print(quote("it's"))
# Output: 'it'\''s'

print(join(["git", "commit", "-m", "fix: don't crash"]))
# Output: 'git' 'commit' '-m' 'fix: don'\''t crash'

# Example 2: Unquoting
print("\n" + "=" * 50)
print("Example 2: Unquoting")
print("=" * 50)

print(unquote("foo'bar'"))
# Output: foobar

print(unquote('"say \\"hi\\" to $USER"'))
# Output: say "hi" to $USER

print(unquote("a\\ b\\\nc"))
# Output: a bc

# Example 3: Roundtrip
print("\n" + "=" * 50)
print("Example 3: Roundtrip")
print("=" * 50)

for text in ["foo bar", "", "'", "$(rm -rf /)", "naïve café"]:
    assert unquote(quote(text)) == text
    print(f"{text!r:>16} -> {quote(text)}")

# Example 4: Diagnostics
print("\n" + "=" * 50)
print("Example 4: Diagnostics")
print("=" * 50)

source = "'Hello' 'World!"
try:
    unquote(source)
except UnquoteError as e:
    print(f"Input: {source}")
    print(f"       {' ' * e.char_cursor}^--- unterminated quote")
    print()
    print(e.format_with_context())
    print()
    print(DiagnosticFormatter(output_format=OutputFormat.JSON).format(e.diagnostic))
