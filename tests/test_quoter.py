"""Tests for shquote.quoter: quote() and join().

quote() always produces single-quoted runs; embedded single quotes close
the run, appear escaped, and reopen it.
"""

from __future__ import annotations

import pytest

from shquote.quoter import join, quote

# ============================================================================
# QUOTE
# ============================================================================


class TestQuote:
    """Test quote() output shape."""

    def test_plain_word(self) -> None:
        """Plain word is wrapped in single quotes."""
        assert quote("foobar") == "'foobar'"

    def test_empty_string(self) -> None:
        """Empty input still yields an empty quoted token."""
        assert quote("") == "''"

    def test_lone_single_quote(self) -> None:
        """Lone single quote yields the six-character form."""
        result = quote("'")

        assert result == "''\\'''"
        assert len(result) == 6

    def test_embedded_single_quote(self) -> None:
        """Embedded single quote closes and reopens the quoted run."""
        assert quote("it's") == "'it'\\''s'"

    def test_consecutive_single_quotes(self) -> None:
        """Each single quote gets its own escape sequence."""
        assert quote("''") == "''\\'''\\'''"

    @pytest.mark.parametrize(
        "source",
        [
            "foo bar",
            "$HOME",
            "`id`",
            "a\\b",
            'say "hi"',
            "line1\nline2",
            "*.txt",
            "a;b|c&d",
            "~user",
            "héllo wörld",
        ],
    )
    def test_special_characters_untouched(self, source: str) -> None:
        """Characters other than ' are copied verbatim inside the quotes."""
        assert quote(source) == f"'{source}'"


# ============================================================================
# JOIN
# ============================================================================


class TestJoin:
    """Test join() of argument vectors."""

    def test_empty_vector(self) -> None:
        """No words gives an empty command line."""
        assert join([]) == ""

    def test_single_word(self) -> None:
        """Single word is just quoted."""
        assert join(["ls"]) == "'ls'"

    def test_words_with_spaces(self) -> None:
        """Words containing spaces stay one word each."""
        assert join(["git", "commit", "-m", "a message"]) == (
            "'git' 'commit' '-m' 'a message'"
        )

    def test_empty_word_preserved(self) -> None:
        """Empty words are kept as ''."""
        assert join(["echo", ""]) == "'echo' ''"

    def test_accepts_generator(self) -> None:
        """Any iterable of strings is accepted."""
        assert join(w for w in ("a", "b")) == "'a' 'b'"
