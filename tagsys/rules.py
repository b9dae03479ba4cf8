"""Tag System rule table.

Maps each non-halting symbol to its production word. The table is
represented as a read-only mapping:

    symbol -> production (tuple of symbols)

Selection is a plain exact-key lookup: no wildcards, no partial
matches, no fallback production.
"""

from __future__ import annotations
from collections.abc import Hashable, Mapping
from typing import Dict, FrozenSet, Iterable, Iterator

from .errors import InvalidDefinition
from .words import Symbol, Word, as_word


class RuleTable(Mapping):
    """Immutable symbol -> production mapping."""

    def __init__(self, productions: Mapping[Symbol, Iterable[Symbol]]) -> None:
        if not isinstance(productions, Mapping):
            raise InvalidDefinition(
                "malformed",
                f"productions must be a mapping, got {type(productions).__name__}",
            )
        rules: Dict[Symbol, Word] = {}
        for symbol, production in productions.items():
            try:
                word = as_word(production)
            except TypeError:
                raise InvalidDefinition(
                    "malformed",
                    f"production for {symbol!r} is not a sequence of symbols",
                ) from None
            if not all(isinstance(sym, Hashable) for sym in word):
                raise InvalidDefinition(
                    "malformed",
                    f"production for {symbol!r} contains an unhashable symbol",
                )
            rules[symbol] = word
        self._rules = rules

    def __getitem__(self, symbol: Symbol) -> Word:
        return self._rules[symbol]

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({self._rules!r})"

    def production(self, symbol: Symbol) -> Word:
        """Return the production selected by *symbol*."""
        return self._rules[symbol]

    def validate(self, alphabet: FrozenSet[Symbol], halting_symbol: Symbol) -> None:
        """Check the table against *alphabet*.

        Every non-halting symbol needs a production, and productions may
        only use alphabet symbols. The halting symbol's entry is optional.
        """
        for symbol in self._rules:
            if symbol not in alphabet:
                raise InvalidDefinition(
                    "unknown_rule_symbol",
                    f"production defined for {symbol!r}, which is not in the alphabet",
                )

        missing = [s for s in alphabet if s != halting_symbol and s not in self._rules]
        if missing:
            raise InvalidDefinition(
                "missing_production",
                "no production for symbol(s) "
                + ", ".join(sorted(repr(s) for s in missing)),
            )

        for symbol, production in self._rules.items():
            for sym in production:
                if sym not in alphabet:
                    raise InvalidDefinition(
                        "foreign_symbol",
                        f"production for {symbol!r} uses {sym!r}, "
                        "which is not in the alphabet",
                    )
