"""Transition rules of the search tokenizer state machine.

step() takes the current state and one character and returns a Transition:
the next state and whether the character was consumed. A transition that does
not consume its character asks the driver to present the same character to the
returned state. This is how a pass-through state hands a character on to a
freshly created state, and how an abandoned keyword prefix hands it on to the
word that replaces it.

close() is the end-of-input transition, used to flush a state that never saw
the character that would normally finish it.

Grammar:
    searchExpr    = ( OPEN BWS searchExpr BWS CLOSE / searchTerm )
                    [ searchOrExpr / searchAndExpr ]
    searchOrExpr  = RWS 'OR'  RWS searchExpr
    searchAndExpr = RWS [ 'AND' RWS ] searchExpr
    searchTerm    = [ 'NOT' RWS ] ( searchPhrase / searchWord )

"""

from __future__ import annotations

from typing import NamedTuple

from searchlex.charsets import (
    CLOSE_PAREN,
    KEYWORD_AND,
    KEYWORD_NOT,
    KEYWORD_OR,
    OPEN_PAREN,
    QUOTATION_MARK,
    is_phrase_char,
    is_whitespace,
    is_word_char,
)
from searchlex.config import TokenizerConfig
from searchlex.lexer.states import (
    Close,
    Dispatch,
    ImplicitAndOr,
    Not,
    Open,
    Phrase,
    PostKeywordWhitespace,
    State,
    Term,
    Word,
)
from searchlex.tokens import TokenKind
from searchlex.utils.logger import get_logger

logger = get_logger(__name__)

# First letter after separating whitespace -> (keyword, kind it finishes as)
_BINARY_KEYWORDS: dict[str, tuple[str, TokenKind]] = {
    KEYWORD_OR[0]: (KEYWORD_OR, TokenKind.OR),
    KEYWORD_AND[0]: (KEYWORD_AND, TokenKind.AND),
}


class Transition(NamedTuple):
    """Result of feeding one character to a state."""

    state: State
    consumed: bool = True


def step(state: State, char: str, offset: int, config: TokenizerConfig) -> Transition:
    """Feed one character to a state.

    Args:
        state: The current state (mutated in place when it accepts the char)
        char: The next input character
        offset: 0-based index of char in the query
        config: Active tokenizer configuration

    Returns:
        Transition to the next state, which may be the same instance.

    Raises:
        SearchTokenizerError: If char is not allowed in this state.
    """
    match state:
        case Dispatch():
            return _step_dispatch(char, offset)
        case Term():
            return _step_term(state, char, offset)
        case Word():
            return _step_word(state, char, offset)
        case Phrase():
            return _step_phrase(state, char, offset)
        case Not():
            return _step_not(state, char, offset, config)
        case ImplicitAndOr():
            return _step_implicit_and_or(state, char, offset, config)
        case PostKeywordWhitespace():
            if is_whitespace(char):
                return Transition(state)
            return Transition(Dispatch(offset), consumed=False)
        case Open():
            if is_whitespace(char):
                if config.allow_whitespace_after_open:
                    return Transition(PostKeywordWhitespace(offset))
                state.reject(char, offset)
            return Transition(Dispatch(offset), consumed=False)
        case Close():
            return Transition(Dispatch(offset), consumed=False)
        case _:
            raise TypeError(f"Unknown lexical state: {state!r}")


def close(state: State, offset: int, config: TokenizerConfig) -> State:
    """Flush a state at end of input.

    Args:
        state: The last state of the tokenization
        offset: Length of the query (the position of end of input)
        config: Active tokenizer configuration

    Returns:
        The state to emit last. Either ``state`` itself, or a finished Word
        when ``state`` held an incomplete keyword. In the latter case
        ``state`` may itself have finished as an implicit AND.

    Raises:
        SearchTokenizerError: If the input ended inside a phrase.
    """
    match state:
        case Word():
            state.finish()
            return state
        case Not():
            return _finished_word(state.literal, state.start)
        case ImplicitAndOr() if len(state):
            prefix, start = _abandon_keyword(state)
            return _finished_word(prefix, start)
        case Phrase():
            state.reject("", offset)
        case _:
            return state


def _step_dispatch(char: str, offset: int) -> Transition:
    if char == OPEN_PAREN:
        return Transition(Open(offset))
    if is_whitespace(char):
        return Transition(ImplicitAndOr(offset))
    if char == CLOSE_PAREN:
        return Transition(Close(offset))
    return Transition(Term(offset), consumed=False)


def _step_term(state: Term, char: str, offset: int) -> Transition:
    if char == KEYWORD_NOT[0]:
        return Transition(Not(offset, char))
    if char == QUOTATION_MARK:
        return Transition(Phrase(offset, char))
    if is_word_char(char):
        return Transition(Word(offset, char))
    state.reject(char, offset)


def _step_word(state: Word, char: str, offset: int) -> Transition:
    if is_word_char(char):
        state.append(char)
        return Transition(state)
    if char == CLOSE_PAREN:
        state.finish()
        return Transition(Close(offset))
    if is_whitespace(char):
        state.finish()
        return Transition(ImplicitAndOr(offset))
    state.reject(char, offset)


def _step_phrase(state: Phrase, char: str, offset: int) -> Transition:
    if is_phrase_char(char) or is_whitespace(char):
        state.append(char)
        return Transition(state)
    if char == QUOTATION_MARK:
        state.append(char)
        state.finish()
        return Transition(Dispatch(offset + 1))
    state.reject(char, offset)


def _step_not(state: Not, char: str, offset: int, config: TokenizerConfig) -> Transition:
    matched = len(state)
    if matched < len(KEYWORD_NOT) and char == KEYWORD_NOT[matched]:
        state.append(char)
        return Transition(state)
    if matched == len(KEYWORD_NOT) and is_whitespace(char):
        state.finish()
        return Transition(PostKeywordWhitespace(offset))
    # "N", "NO" or "NOT" not followed by whitespace: an ordinary word
    return _fall_back_to_word(state.literal, state.start, char, config)


def _step_implicit_and_or(
    state: ImplicitAndOr, char: str, offset: int, config: TokenizerConfig
) -> Transition:
    if not len(state):
        if is_whitespace(char):
            return Transition(state)
        if char in _BINARY_KEYWORDS:
            state.keyword_start = offset
            state.append(char)
            return Transition(state)
        # Only whitespace separated the previous term from this one
        state.finish(TokenKind.AND)
        return Transition(Dispatch(offset), consumed=False)

    keyword, kind = _BINARY_KEYWORDS[state.literal[0]]
    matched = len(state)
    if matched < len(keyword) and char == keyword[matched]:
        state.append(char)
        return Transition(state)
    if matched == len(keyword) and is_whitespace(char):
        state.finish(kind)
        return Transition(PostKeywordWhitespace(offset))

    prefix, start = _abandon_keyword(state)
    return _fall_back_to_word(prefix, start, char, config)


def _abandon_keyword(state: ImplicitAndOr) -> tuple[str, int]:
    """Finish as an implicit AND and hand back the keyword prefix and its offset."""
    prefix = state.literal
    start = state.keyword_start if state.keyword_start is not None else state.start
    state.finish(TokenKind.AND, literal="")
    return prefix, start


def _fall_back_to_word(
    prefix: str, start: int, char: str, config: TokenizerConfig
) -> Transition:
    word = Word(start, prefix)
    if config.drop_fallback_char:
        logger.debug("Dropping %r after keyword prefix %r at offset %d", char, prefix, start)
        return Transition(word)
    return Transition(word, consumed=False)


def _finished_word(literal: str, start: int) -> Word:
    word = Word(start, literal)
    word.finish()
    return word
