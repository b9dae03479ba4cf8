import json

import pytest

from tagsys import construct


@pytest.fixture
def immediate_halt_system():
    """m=2, a -> H: the word aa halts after one step."""
    return construct(2, {"a", "H"}, "H", {"a": "H"})


@pytest.fixture
def looping_system():
    """m=2, a -> aa: the word aa maps to itself forever."""
    return construct(2, {"a", "H"}, "H", {"a": "aa"})


@pytest.fixture
def collatz_system():
    """De Mol's 2-tag system for the Collatz map on unary input."""
    return construct(2, {"a", "b", "c", "H"}, "H", {"a": "bc", "b": "a", "c": "aaa"})


@pytest.fixture
def definition_file(tmp_path):
    """Factory writing a JSON definition file based on the looping system."""

    def write(filename="loop.json", **overrides):
        data = {
            "deletion_count": 2,
            "alphabet": ["a", "H"],
            "halting_symbol": "H",
            "productions": {"a": "aa"},
            "initial_word": "aa",
        }
        data.update(overrides)
        path = tmp_path / filename
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return write
