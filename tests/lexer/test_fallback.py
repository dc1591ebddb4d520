"""Tests for words that begin like a keyword.

"N", "O" and "A" start a keyword attempt. When the letters that follow do not
complete "NOT ", "OR " or "AND ", the accumulated prefix becomes the start of an
ordinary word.
"""

from __future__ import annotations

import logging

import pytest

from searchlex import TokenizerConfig, tokenize
from searchlex.tokens import TokenKind

AND = TokenKind.AND
OR = TokenKind.OR
WORD = TokenKind.WORD
CLOSE = TokenKind.CLOSE

DROP = TokenizerConfig(drop_fallback_char=True)


def kinds(query: str, config: TokenizerConfig | None = None) -> list[tuple[TokenKind, str]]:
    return [(t.kind, t.literal) for t in tokenize(query, config=config)]


class TestNotPrefix:
    """Words starting with N."""

    @pytest.mark.parametrize("word", ["N", "NO", "NOT", "NOx", "Nx", "NOTE", "NOTHING", "NOON"])
    def test_word_kept_whole(self, word: str) -> None:
        assert kinds(word) == [(WORD, word)]

    def test_prefix_followed_by_whitespace(self) -> None:
        assert kinds("N bar") == [(WORD, "N"), (AND, ""), (WORD, "bar")]

    def test_prefix_followed_by_close(self) -> None:
        assert kinds("NO)") == [(WORD, "NO"), (CLOSE, ")")]

    def test_fallback_word_offset(self) -> None:
        tokens = tokenize("foo NOTE")
        assert tokens[-1].literal == "NOTE"
        assert tokens[-1].offset == 4


class TestBinaryKeywordPrefix:
    """Words after whitespace starting with O or A."""

    @pytest.mark.parametrize("word", ["O", "Oslo", "ORACLE", "ORx", "A", "AN", "Apple", "ANDROID", "ANDx"])
    def test_word_kept_whole(self, word: str) -> None:
        assert kinds(f"foo {word}") == [(WORD, "foo"), (AND, ""), (WORD, word)]

    def test_prefix_followed_by_whitespace(self) -> None:
        assert kinds("foo O bar") == [
            (WORD, "foo"),
            (AND, ""),
            (WORD, "O"),
            (AND, ""),
            (WORD, "bar"),
        ]

    def test_prefix_followed_by_close(self) -> None:
        assert kinds("(foo AN)") == [
            (TokenKind.OPEN, "("),
            (WORD, "foo"),
            (AND, ""),
            (WORD, "AN"),
            (CLOSE, ")"),
        ]

    def test_fallback_word_offset(self) -> None:
        tokens = tokenize("foo  ORACLE")
        assert tokens[1].offset == 3
        assert tokens[2].offset == 5

    def test_or_then_and_letters(self) -> None:
        assert kinds("foo OA") == [(WORD, "foo"), (AND, ""), (WORD, "OA")]


class TestDropFallbackChar:
    """drop_fallback_char reproduces the older token stream."""

    def test_not_prefix_drops_breaking_char(self) -> None:
        assert kinds("NOx", DROP) == [(WORD, "NO")]

    def test_complete_not_without_whitespace(self) -> None:
        assert kinds("NOTE", DROP) == [(WORD, "NOT")]

    def test_binary_keyword_drops_breaking_char(self) -> None:
        assert kinds("foo ORx bar", DROP) == [
            (WORD, "foo"),
            (AND, ""),
            (WORD, "OR"),
            (AND, ""),
            (WORD, "bar"),
        ]

    def test_dropped_separator(self) -> None:
        assert kinds("N)", DROP) == [(WORD, "N")]

    def test_regular_input_unaffected(self) -> None:
        query = '(foo OR "bar") AND NOT baz qux'
        assert kinds(query, DROP) == kinds(query)

    def test_drop_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="searchlex")
        tokenize("NOx", config=DROP)
        assert "Dropping 'x'" in caplog.text
