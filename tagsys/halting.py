"""Tag System halt predicate.

Classifies a word as halting or transformable. A word halts when it is
empty, shorter than the deletion count, or led by the halting symbol.
The check is static and has no side effects.
"""

from __future__ import annotations

from .system import TagSystem
from .words import Word


def is_halting(word: Word, system: TagSystem) -> bool:
    """Return True if *word* stops computation under *system*."""
    if not word:
        return True
    if len(word) < system.deletion_count:
        return True
    return word[0] == system.halting_symbol
