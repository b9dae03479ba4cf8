"""Tag System tokenizer.

Splits a line of text into word symbols. Text with internal whitespace
is split on whitespace; otherwise an alphabet with multi-character
symbols drives a greedy longest-match segmentation, and plain text is
read one character per symbol.
"""

from __future__ import annotations
from typing import Iterable, List, Optional

from .words import Symbol, Word


def tokenize(text: str, alphabet: Optional[Iterable[Symbol]] = None) -> Word:
    """Return the word spelled by *text*."""
    if not isinstance(text, str):
        raise TypeError("text must be a string")
    text = text.strip()
    if not text:
        return ()
    if any(ch.isspace() for ch in text):
        return tuple(text.split())

    names = sorted(
        {s for s in (alphabet or ()) if isinstance(s, str) and s},
        key=len,
        reverse=True,
    )
    if not names or len(names[0]) == 1:
        return tuple(text)
    return tuple(_segment(text, names))


def _segment(text: str, names: List[str]) -> List[str]:
    symbols: List[str] = []
    pos = 0
    while pos < len(text):
        for name in names:
            if text.startswith(name, pos):
                break
        else:
            name = text[pos]
        symbols.append(name)
        pos += len(name)
    return symbols


def render_word(word: Word, alphabet: Optional[Iterable[Symbol]] = None) -> str:
    """Return a printable form of *word* that tokenize() reads back.

    Symbols are concatenated only when they are single characters and
    *alphabet* has no multi-character symbol a concatenation could spell.
    """
    mixed = any(isinstance(s, str) and len(s) > 1 for s in (alphabet or ()))
    if not mixed and all(isinstance(s, str) and len(s) == 1 for s in word):
        return "".join(word)
    return " ".join(str(s) for s in word)
