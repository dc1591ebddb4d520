"""Tokenize a $search expression in 3 lines — zero config, zero deps."""

from searchlex import tokenize

for token in tokenize('(blue OR red) NOT "used car"'):
    print(f"{token.kind.name:<7} {token.literal!r}")
