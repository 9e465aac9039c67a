"""Split raw player input into words."""

import re
from dataclasses import dataclass

_WORD_RE = re.compile(r"[^\s,]+")
_TRAILING_PUNCTUATION = ".!?"


@dataclass(frozen=True)
class Token:
    word: str
    position: int


def tokenize(text: str) -> list[Token]:
    """Return lowercase tokens with their character offsets.

    Commas separate words; sentence punctuation at the end of a word is
    dropped. Empty or whitespace-only input yields no tokens.
    """
    tokens = []
    for match in _WORD_RE.finditer(text):
        word = match.group().lower().rstrip(_TRAILING_PUNCTUATION)
        if word:
            tokens.append(Token(word, match.start()))
    return tokens
