"""Built-in tag systems.

Static, well-known systems that can be run without a definition file:

    * collatz - De Mol's 2-tag system for the Collatz map on unary a^n
    * post    - Post's 3-tag system 0 -> 00, 1 -> 1101
"""

from __future__ import annotations
from typing import Any, Dict, List

from .definition import Definition, parse_definition

CATALOG: Dict[str, Dict[str, Any]] = {
    "collatz": {
        "deletion_count": 2,
        "alphabet": ["a", "b", "c", "H"],
        "halting_symbol": "H",
        "productions": {"a": "bc", "b": "a", "c": "aaa"},
        "initial_word": "aaa",
    },
    "post": {
        "deletion_count": 3,
        "alphabet": ["0", "1", "H"],
        "halting_symbol": "H",
        "productions": {"0": "00", "1": "1101"},
        "initial_word": "10010",
    },
}


def names() -> List[str]:
    """Return the catalog entries in name order."""
    return sorted(CATALOG)


def get(name: str) -> Definition:
    """Return the built-in definition called *name*."""
    if name not in CATALOG:
        raise KeyError(f"unknown catalog system: {name!r}")
    return parse_definition(CATALOG[name], name=name)
