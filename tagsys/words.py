"""Symbol and word model.

A symbol is any hashable value; the tokenizer produces strings.
A word is a tuple of symbols and is never mutated in place.
"""

from __future__ import annotations
from typing import Hashable, Iterable, Tuple

Symbol = Hashable
Word = Tuple[Symbol, ...]
ExecutionTrace = Tuple[Word, ...]

EMPTY_WORD: Word = ()


def as_word(symbols: Iterable[Symbol]) -> Word:
    """Return *symbols* as an immutable word.

    Strings are treated as a sequence of one-character symbols.
    """
    if isinstance(symbols, tuple):
        return symbols
    return tuple(symbols)


def leftmost(word: Word) -> Symbol:
    """Return the first symbol of a non-empty word."""
    return word[0]
