"""State-machine tokenizer for search expressions.

Architecture:
lexer/
├── __init__.py          # Re-exports Tokenizer, step, close
├── core.py              # Tokenizer class (driver loop + token collection)
├── states.py            # State classes (data only)
└── transitions.py       # step() / close() transition rules

Usage:
    >>> from searchlex.lexer import Tokenizer
    >>> for token in Tokenizer("(foo bar)").tokenize():
    ...     print(token)
Token(OPEN, '(', 0)
Token(WORD, 'foo', 1)
Token(AND, '', 4)
Token(WORD, 'bar', 5)
Token(CLOSE, ')', 8)

"""

from searchlex.lexer.core import Tokenizer
from searchlex.lexer.transitions import Transition, close, step

__all__ = ["Tokenizer", "Transition", "close", "step"]
