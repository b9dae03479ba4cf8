"""Tag System definition files.

Reads a JSON description of a tag system:

    {
      "name": "collatz",                  (optional)
      "deletion_count": 2,
      "alphabet": ["a", "b", "c", "H"],
      "halting_symbol": "H",
      "productions": {"a": "bc", "b": "a", "c": "aaa"},
      "initial_word": "aaa"               (optional)
    }

Production values and the initial word are either strings, tokenized
against the alphabet, or JSON arrays of symbols.
"""

from __future__ import annotations
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .errors import InvalidDefinition
from .system import TagSystem, construct
from .tokenizer import tokenize
from .words import Word

logger = logging.getLogger(__name__)

REQUIRED_KEYS = ("deletion_count", "alphabet", "halting_symbol", "productions")


@dataclass(frozen=True)
class Definition:
    """A named tag system plus an optional initial word."""

    name: str
    system: TagSystem
    initial_word: Optional[Word] = None


def _symbol_list(value: Any, what: str) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(s, str) for s in value):
        raise InvalidDefinition("malformed", f"{what} must be a list of strings")
    return value


def _word(value: Any, alphabet: List[str], what: str) -> Word:
    if isinstance(value, str):
        return tokenize(value, alphabet)
    return tuple(_symbol_list(value, what))


def parse_definition(data: Dict[str, Any], name: str = "unnamed") -> Definition:
    """Build a Definition from an already-decoded JSON object."""
    if not isinstance(data, dict):
        raise InvalidDefinition("malformed", "definition must be a JSON object")
    missing = [k for k in REQUIRED_KEYS if k not in data]
    if missing:
        raise InvalidDefinition("malformed", f"missing key(s): {', '.join(missing)}")

    alphabet = _symbol_list(data["alphabet"], "alphabet")
    halting_symbol = data["halting_symbol"]
    if not isinstance(halting_symbol, str):
        raise InvalidDefinition("malformed", "halting_symbol must be a string")

    raw_productions = data["productions"]
    if not isinstance(raw_productions, dict):
        raise InvalidDefinition("malformed", "productions must be a JSON object")
    productions = {
        symbol: _word(prod, alphabet, f"production for {symbol!r}")
        for symbol, prod in raw_productions.items()
    }

    system = construct(data["deletion_count"], alphabet, halting_symbol, productions)

    initial_word = None
    if data.get("initial_word") is not None:
        initial_word = _word(data["initial_word"], alphabet, "initial_word")

    return Definition(
        name=str(data.get("name", name)),
        system=system,
        initial_word=initial_word,
    )


def load_definition(path: Union[str, Path]) -> Definition:
    """Read and validate a definition file."""
    path = Path(path)
    logger.debug("loading definition from %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise InvalidDefinition("malformed", f"{path}: not UTF-8 text ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise InvalidDefinition("malformed", f"{path}: invalid JSON ({exc})") from exc
    return parse_definition(data, name=path.stem)
