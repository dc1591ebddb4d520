"""Report the offending column of a malformed query to the client."""

from searchlex import SearchTokenizerError, tokenize

query = "blue & red"

try:
    tokenize(query)
except SearchTokenizerError as e:
    print(query)
    print(" " * e.offset + "^")
    print(f"Rejected: {e}")
