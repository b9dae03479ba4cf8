"""Tag System definition.

A TagSystem is an immutable value:

    deletion_count  - symbols removed from the front each step (> 1)
    alphabet        - finite, non-empty set of symbols
    halting_symbol  - member of the alphabet that stops computation
    productions     - RuleTable covering every other alphabet symbol

Validation happens at construction time. There is no way to obtain an
instance that violates these constraints.
"""

from __future__ import annotations
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterable, Mapping

from .errors import InvalidDefinition
from .rules import RuleTable
from .words import Symbol, Word


@dataclass(frozen=True)
class TagSystem:
    deletion_count: int
    alphabet: FrozenSet[Symbol]
    halting_symbol: Symbol
    productions: RuleTable = field(hash=False)

    def __post_init__(self) -> None:
        count = self.deletion_count
        # bool is an int subclass; True would read as 1
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidDefinition(
                "deletion_count",
                f"deletion count must be an integer, got {count!r}",
            )
        if count <= 1:
            raise InvalidDefinition(
                "deletion_count",
                f"deletion count must be greater than 1, got {count}",
            )

        try:
            alphabet = frozenset(self.alphabet)
        except TypeError:
            raise InvalidDefinition(
                "malformed", "alphabet must be an iterable of hashable symbols"
            ) from None
        if not alphabet:
            raise InvalidDefinition("empty_alphabet", "alphabet must not be empty")
        if (
            not isinstance(self.halting_symbol, Hashable)
            or self.halting_symbol not in alphabet
        ):
            raise InvalidDefinition(
                "halting_symbol",
                f"halting symbol {self.halting_symbol!r} is not in the alphabet",
            )

        productions = self.productions
        if not isinstance(productions, RuleTable):
            productions = RuleTable(productions)
        productions.validate(alphabet, self.halting_symbol)

        object.__setattr__(self, "alphabet", alphabet)
        object.__setattr__(self, "productions", productions)

    def production(self, symbol: Symbol) -> Word:
        """Return the production appended when *symbol* leads the word."""
        return self.productions.production(symbol)

    def contains(self, word: Iterable[Symbol]) -> bool:
        """True if every symbol of *word* belongs to the alphabet."""
        return all(
            isinstance(sym, Hashable) and sym in self.alphabet for sym in word
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly description of the system."""
        return {
            "deletion_count": self.deletion_count,
            "alphabet": sorted(str(s) for s in self.alphabet),
            "halting_symbol": str(self.halting_symbol),
            "productions": {
                str(sym): [str(s) for s in prod]
                for sym, prod in sorted(
                    self.productions.items(), key=lambda item: str(item[0])
                )
            },
        }


def construct(
    deletion_count: int,
    alphabet: Iterable[Symbol],
    halting_symbol: Symbol,
    productions: Mapping[Symbol, Iterable[Symbol]],
) -> TagSystem:
    """Build and validate a TagSystem, raising InvalidDefinition on failure."""
    return TagSystem(
        deletion_count=deletion_count,
        alphabet=alphabet,
        halting_symbol=halting_symbol,
        productions=productions,
    )
