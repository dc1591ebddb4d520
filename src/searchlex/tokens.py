"""Token and TokenKind definitions for the searchlex tokenizer.

The tokenizer produces an ordered list of Token objects that an expression
builder consumes. Each Token has a kind, the literal text it matched, and the
offset of its first character in the query.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TokenKind(Enum):
    """Classifications a finished lexical unit can carry.

    States that never become tokens (Dispatch, Term, PostKeywordWhitespace)
    carry no kind at all rather than a placeholder member.

    """

    # Grouping
    OPEN = auto()  # (
    CLOSE = auto()  # )

    # Boolean operators
    AND = auto()  # AND, or implicit between two terms
    OR = auto()  # OR
    NOT = auto()  # NOT

    # Terms
    WORD = auto()  # 1*(ALPHA / DIGIT)
    PHRASE = auto()  # "quoted text"


@dataclass(frozen=True, slots=True)
class Token:
    """A classified, finished lexical unit.

    Attributes:
        kind: The token kind (from TokenKind enum)
        literal: The exact matched text. PHRASE literals keep both quotation
            marks; an implicit AND has an empty literal.
        offset: 0-based index of the first character in the query. For an
            implicit AND this is the first separating whitespace character.
            Excluded from comparison, so tokens compare by kind and literal.

    """

    kind: TokenKind
    literal: str
    offset: int = field(default=-1, compare=False)

    @property
    def is_implicit(self) -> bool:
        """True for an AND synthesized from whitespace between two terms."""
        return self.kind is TokenKind.AND and not self.literal

    @property
    def end(self) -> int:
        """Offset one past the last matched character."""
        return self.offset + len(self.literal)

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.literal
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.kind.name}, {val!r}, {self.offset})"
