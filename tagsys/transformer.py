"""Tag System transformer.

Applies one rewrite step:

    x w  ->  word[m:] + P(x)

where x is the leftmost symbol, m the deletion count and P(x) the
production selected by x. The input word is left untouched.
"""

from __future__ import annotations

from .errors import InvariantViolation
from .halting import is_halting
from .system import TagSystem
from .words import Word, leftmost


def transform(word: Word, system: TagSystem) -> Word:
    """Return the successor of a non-halting *word*."""
    if is_halting(word, system):
        raise InvariantViolation(f"transform called on halting word {word!r}")
    production = system.production(leftmost(word))
    return tuple(word[system.deletion_count:]) + production
