"""Exception classes for searchlex.

Provides standardized exceptions for error handling throughout searchlex.
"""

from __future__ import annotations


class SearchLexError(Exception):
    """Base exception for all searchlex errors.

    Subclass this for specific error categories.
    """

    pass


class SearchTokenizerError(SearchLexError):
    """A character is not allowed in the current lexical state.

    Raised on the first grammar violation; the whole tokenization is
    abandoned and no partial token list is returned.
    """

    def __init__(self, character: str, state: str, offset: int) -> None:
        """Initialize tokenizer error with the offending character.

        Args:
            character: The rejected character, or "" when the input ended
                while a state still required more characters
            state: Name of the state that rejected it (e.g., "Word")
            offset: 0-based index of the character in the query
        """
        self.character = character
        self.state = state
        self.offset = offset

        if character:
            message = f"invalid character {character!r} for {state} state"
        else:
            message = f"unexpected end of input in {state} state"

        super().__init__(f"col {self.col_offset}: {message}")

    @property
    def col_offset(self) -> int:
        """1-indexed column of the offending character."""
        return self.offset + 1
