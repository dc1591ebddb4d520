"""
searchlex — Tokenizer for boolean search expressions

Turns the value of a $search query option (already percent-decoded) into an
ordered list of classified tokens: OPEN, CLOSE, AND, OR, NOT, WORD and PHRASE.
Building the boolean expression tree from the tokens is left to the caller.

Quick Start:
    >>> from searchlex import tokenize
    >>> [(t.kind.name, t.literal) for t in tokenize('(foo OR bar) NOT "baz qux"')]
    [('OPEN', '('), ('WORD', 'foo'), ('OR', 'OR'), ('WORD', 'bar'), ('CLOSE', ')'),
     ('AND', ''), ('NOT', 'NOT'), ('PHRASE', '"baz qux"')]

Errors:
    >>> tokenize("foo&bar")
    Traceback (most recent call last):
    ...
    searchlex.errors.SearchTokenizerError: col 4: invalid character '&' for Word state

Installation:
    pip install searchlex            # zero runtime dependencies
    pip install searchlex[test]      # + pytest, hypothesis
"""

from searchlex.config import (
    TokenizerConfig,
    get_tokenizer_config,
    reset_tokenizer_config,
    set_tokenizer_config,
    tokenizer_config_context,
)
from searchlex.errors import SearchLexError, SearchTokenizerError
from searchlex.lexer import Tokenizer
from searchlex.tokens import Token, TokenKind

__version__ = "0.1.0"


def tokenize(query: str, *, config: TokenizerConfig | None = None) -> list[Token]:
    """Tokenize a search expression.

    Args:
        query: Search expression, already percent-decoded
        config: Tokenizer configuration (uses the context config if None)

    Returns:
        Tokens in left-to-right order. An empty query yields an empty list.

    Raises:
        SearchTokenizerError: If a character is not allowed where it appears.

    Example:
        >>> tokenize("foo bar")
        [Token(WORD, 'foo', 0), Token(AND, '', 3), Token(WORD, 'bar', 4)]
    """
    return Tokenizer(query, config).tokenize()


__all__ = [
    "SearchLexError",
    "SearchTokenizerError",
    "Token",
    "TokenKind",
    "Tokenizer",
    "TokenizerConfig",
    "get_tokenizer_config",
    "reset_tokenizer_config",
    "set_tokenizer_config",
    "tokenize",
    "tokenizer_config_context",
    "__version__",
]
