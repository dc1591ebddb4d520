"""State-machine tokenizer for search expressions.

Feeds the query one character at a time to the current state and collects
every state that the character finished.

A token surfaces only on the transition *out of* its state: a word is emitted
once the whitespace or ")" after it has been read, "(" once the character
after it has been read. This one-step lag is what lets "NOT", "AND" and "OR"
be told apart from words starting with the same letters using a single
character of lookahead. The last state never sees a following character, so
it is flushed explicitly after the loop.

Thread Safety:
Tokenizer instances are single-use. Create one per query string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from searchlex.config import TokenizerConfig, get_tokenizer_config
from searchlex.errors import SearchTokenizerError
from searchlex.lexer.states import Dispatch, State
from searchlex.lexer.transitions import close, step
from searchlex.tokens import Token
from searchlex.utils.logger import get_logger

logger = get_logger(__name__)


class Tokenizer:
    """Tokenizer for one search query.

    Usage:
            >>> Tokenizer('NOT foo OR "bar baz"').tokenize()
        [Token(NOT, 'NOT', 0), Token(WORD, 'foo', 4), Token(OR, 'OR', 8),
         Token(PHRASE, '"bar baz"', 11)]

    Complexity: O(n) where n = len(query). Every character is consumed by
    exactly one transition; a character is re-presented at most a bounded
    number of times while pass-through states hand it on.

    """

    __slots__ = ("_query", "_config")

    def __init__(self, query: str, config: TokenizerConfig | None = None) -> None:
        """Initialize tokenizer with query text.

        Args:
            query: Search expression, already percent-decoded
            config: Tokenizer configuration (defaults to the context config)
        """
        self._query = query
        self._config = config if config is not None else get_tokenizer_config()

    def tokenize(self) -> list[Token]:
        """Tokenize the query.

        Returns:
            Tokens in left-to-right order. Empty for an empty query.

        Raises:
            SearchTokenizerError: On the first character not allowed in the
                current state. No partial result is returned.
        """
        try:
            return self._run()
        except SearchTokenizerError as e:
            logger.debug("Rejected search query %r: %s", self._query, e)
            raise

    def _run(self) -> list[Token]:
        config = self._config
        tokens: list[Token] = []
        state: State = Dispatch()

        for offset, char in enumerate(self._query):
            consumed = False
            while not consumed:
                next_state, consumed = step(state, char, offset, config)
                if state.finished:
                    tokens.append(state.to_token())
                state = next_state

        last = close(state, len(self._query), config)
        if state.finished:
            tokens.append(state.to_token())
        if last is not state and last.finished:
            tokens.append(last.to_token())
        return tokens
