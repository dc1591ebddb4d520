"""Lexical states of the search tokenizer.

A state is an in-progress recognition unit: the text accumulated so far, the
kind of token it will become, and whether it is finished. Once finished the
state is frozen and converted into a Token by the driver.

The classes carry data only. Transition rules live in
searchlex.lexer.transitions, which matches on these classes.

State          Becomes   Notes
-------------  --------  -----------------------------------------------
Dispatch       -         start of a search expression
Term           -         one-character lookahead for NOT/phrase/word
Word           WORD
Phrase         PHRASE
Not            NOT       falls back to Word if "NOT " does not follow
Open           OPEN      finished on construction
Close          CLOSE     finished on construction
ImplicitAndOr  AND / OR  whitespace between terms, optional AND/OR keyword
PostKeywordWhitespace -  whitespace after NOT/AND/OR

"""

from __future__ import annotations

from typing import ClassVar, NoReturn

from searchlex.errors import SearchTokenizerError
from searchlex.tokens import Token, TokenKind


class State:
    """Base class for all lexical states.

    Attributes:
        start: 0-based offset of the first character belonging to this state
        kind: Token kind this state becomes once finished (None for
            pass-through states)
        literal: Accumulated text
        finished: Whether the state is complete and must not change

    """

    __slots__ = ("start", "_chars", "_kind", "_finished")

    KIND: ClassVar[TokenKind | None] = None

    def __init__(self, start: int = 0, literal: str = "") -> None:
        self.start = start
        self._chars: list[str] = list(literal)
        self._kind: TokenKind | None = self.KIND
        self._finished = False

    @property
    def kind(self) -> TokenKind | None:
        return self._kind

    @property
    def literal(self) -> str:
        return "".join(self._chars)

    @property
    def finished(self) -> bool:
        return self._finished

    def __len__(self) -> int:
        return len(self._chars)

    def append(self, char: str) -> None:
        """Append one character to the literal buffer."""
        if self._finished:
            raise RuntimeError(f"{self!r} is already finished")
        self._chars.append(char)

    def finish(self, kind: TokenKind | None = None, literal: str | None = None) -> None:
        """Mark the state finished, optionally fixing its kind and literal."""
        if self._finished:
            raise RuntimeError(f"{self!r} is already finished")
        if kind is not None:
            self._kind = kind
        if literal is not None:
            self._chars = list(literal)
        self._finished = True

    def reject(self, char: str, offset: int) -> NoReturn:
        """Raise the lexical violation for a character this state cannot take."""
        raise SearchTokenizerError(char, type(self).__name__, offset)

    def to_token(self) -> Token:
        """Convert a finished state into its Token."""
        if not self._finished or self._kind is None:
            raise RuntimeError(f"{self!r} does not represent a token")
        return Token(self._kind, self.literal, self.start)

    def __repr__(self) -> str:
        flag = ", finished" if self._finished else ""
        return f"{type(self).__name__}({self.literal!r}, {self.start}{flag})"


class Dispatch(State):
    """Start of a search expression: picks the next state from one character."""

    __slots__ = ()


class Term(State):
    """Start of a search term: NOT keyword, phrase, or word."""

    __slots__ = ()


class Word(State):
    __slots__ = ()

    KIND = TokenKind.WORD


class Phrase(State):
    __slots__ = ()

    KIND = TokenKind.PHRASE


class Not(State):
    """Partial match of the NOT keyword, tracked by literal length."""

    __slots__ = ()

    KIND = TokenKind.NOT


class Open(State):
    __slots__ = ()

    KIND = TokenKind.OPEN

    def __init__(self, start: int = 0) -> None:
        super().__init__(start, "(")
        self.finish()


class Close(State):
    __slots__ = ()

    KIND = TokenKind.CLOSE

    def __init__(self, start: int = 0) -> None:
        super().__init__(start, ")")
        self.finish()


class ImplicitAndOr(State):
    """Whitespace after a term, possibly followed by an AND or OR keyword.

    The literal buffer holds only keyword letters; separating whitespace is
    consumed without being recorded. ``start`` is the first whitespace
    character and ``keyword_start`` the first keyword letter, if any.

    """

    __slots__ = ("keyword_start",)

    def __init__(self, start: int = 0) -> None:
        super().__init__(start)
        self.keyword_start: int | None = None

    def to_token(self) -> Token:
        token = super().to_token()
        if token.literal and self.keyword_start is not None:
            return Token(token.kind, token.literal, self.keyword_start)
        return token


class PostKeywordWhitespace(State):
    """Required whitespace after NOT, AND or OR; never becomes a token."""

    __slots__ = ()
