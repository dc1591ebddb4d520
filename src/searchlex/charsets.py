"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Word characters are restricted to ASCII letters and digits. The grammar
allows any Unicode letter (categories L and Nl); that is deliberately not
supported here.

Usage:
    from searchlex.charsets import is_word_char

    if is_word_char(char):  # O(1) lookup
        ...
"""

import string

# searchWord = 1*ALPHA (ASCII letters and digits only)
WORD_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits)

# qchar-unescaped characters allowed inside a quoted phrase besides word chars:
# unreserved ("-" / "." / "_" / "~") and ":" / "@" / "/" / "$" / "'" / "="
PHRASE_DELIMITERS: frozenset[str] = frozenset("-._~:@/$'=")

PHRASE_CHARS: frozenset[str] = WORD_CHARS | PHRASE_DELIMITERS

# BWS / RWS after percent-decoding: SP / HTAB
WHITESPACE: frozenset[str] = frozenset(" \t")

# Structural characters
OPEN_PAREN = "("
CLOSE_PAREN = ")"
QUOTATION_MARK = '"'

# Keywords (case-sensitive)
KEYWORD_NOT = "NOT"
KEYWORD_AND = "AND"
KEYWORD_OR = "OR"


def is_word_char(char: str) -> bool:
    """Check if character may appear in a searchWord."""
    return char in WORD_CHARS


def is_phrase_char(char: str) -> bool:
    """Check if character may appear unescaped inside a searchPhrase.

    Whitespace is also accepted inside a phrase but is classified separately
    by is_whitespace().

    """
    return char in PHRASE_CHARS


def is_whitespace(char: str) -> bool:
    """Check if character is separator whitespace (space or tab)."""
    return char in WHITESPACE
