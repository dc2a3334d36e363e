"""
Tokenizer for intra-line diffs.

Splits a line into runs of letters, digits, whitespace and punctuation so that
word-level comparison never merges a number change into the word next to it.
"""

from __future__ import annotations

import string
from enum import StrEnum
from typing import NamedTuple


# Unicode space separators (Zs), ASCII controls \t \n \v \f \r, the line and
# paragraph separators and the BOM. Unlike str.isspace this leaves out
# U+001C..U+001F and U+0085.
_WHITESPACE = frozenset(
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)


class TokenClass(StrEnum):
    """Character classes used to segment a line."""

    LETTER = "letter"
    DIGIT = "digit"
    WHITESPACE = "whitespace"
    PUNCTUATION = "punctuation"


class Token(NamedTuple):
    text: str
    kind: TokenClass


def classify(char: str) -> TokenClass:
    """Return the class of a single character."""
    if char in string.ascii_letters:
        return TokenClass.LETTER
    if char in string.digits:
        return TokenClass.DIGIT
    if char in _WHITESPACE:
        return TokenClass.WHITESPACE
    return TokenClass.PUNCTUATION


def tokenize(text: str) -> list[Token]:
    """
    Split text into maximal runs of same-class characters.

    A class change between two adjacent characters always starts a new token.
    Empty input yields an empty list.
    """
    tokens: list[Token] = []
    buffer: list[str] = []
    current: TokenClass | None = None

    for char in text:
        kind = classify(char)
        if current is not None and kind != current:
            tokens.append(Token("".join(buffer), current))
            buffer = []
        buffer.append(char)
        current = kind

    if buffer and current is not None:
        tokens.append(Token("".join(buffer), current))

    return tokens
