"""
Definition File and Catalog Tests
=================================

JSON definitions are parsed, tokenized against their alphabet and
validated; malformed input is reported as InvalidDefinition.
"""

from pathlib import Path

import pytest

from tagsys import InvalidDefinition, run
from tagsys import catalog
from tagsys.definition import Definition, load_definition, parse_definition


class TestParseDefinition:

    def test_string_and_list_productions(self):
        definition = parse_definition(
            {
                "deletion_count": 2,
                "alphabet": ["a", "b", "H"],
                "halting_symbol": "H",
                "productions": {"a": "bb", "b": ["H"]},
            }
        )

        assert isinstance(definition, Definition)
        assert definition.name == "unnamed"
        assert definition.system.production("a") == ("b", "b")
        assert definition.system.production("b") == ("H",)
        assert definition.initial_word is None

    def test_multi_character_symbols(self):
        definition = parse_definition(
            {
                "name": "counter",
                "deletion_count": 2,
                "alphabet": ["q0", "q1", "H"],
                "halting_symbol": "H",
                "productions": {"q0": "q1q1", "q1": "H q0"},
                "initial_word": ["q0", "q1"],
            }
        )

        assert definition.name == "counter"
        assert definition.system.production("q0") == ("q1", "q1")
        assert definition.system.production("q1") == ("H", "q0")
        assert definition.initial_word == ("q0", "q1")

    def test_structural_errors_surface(self):
        with pytest.raises(InvalidDefinition) as exc:
            parse_definition(
                {
                    "deletion_count": 1,
                    "alphabet": ["a", "H"],
                    "halting_symbol": "H",
                    "productions": {"a": "a"},
                }
            )
        assert exc.value.constraint == "deletion_count"

    @pytest.mark.parametrize(
        "data",
        [
            [],
            {"alphabet": ["a", "H"], "halting_symbol": "H", "productions": {}},
            {"deletion_count": 2, "alphabet": "aH", "halting_symbol": "H", "productions": {}},
            {"deletion_count": 2, "alphabet": ["a", "H"], "halting_symbol": 7, "productions": {}},
            {"deletion_count": 2, "alphabet": ["a", "H"], "halting_symbol": "H", "productions": ["a"]},
            {
                "deletion_count": 2,
                "alphabet": ["a", "H"],
                "halting_symbol": "H",
                "productions": {"a": [1, 2]},
            },
        ],
    )
    def test_malformed_input(self, data):
        with pytest.raises(InvalidDefinition) as exc:
            parse_definition(data)
        assert exc.value.constraint == "malformed"


class TestLoadDefinition:

    def test_name_defaults_to_file_stem(self, definition_file):
        definition = load_definition(definition_file("looper.json"))

        assert definition.name == "looper"
        assert definition.initial_word == ("a", "a")
        assert run(definition.initial_word, definition.system, 3).steps == 3

    def test_explicit_name_wins(self, definition_file):
        definition = load_definition(definition_file("x.json", name="loop"))
        assert definition.name == "loop"

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidDefinition) as exc:
            load_definition(path)
        assert exc.value.constraint == "malformed"

    def test_bundled_collatz_file(self):
        path = Path(__file__).resolve().parents[1] / "systems" / "collatz.json"
        definition = load_definition(path)
        assert definition == catalog.get("collatz")


class TestCatalog:

    def test_names(self):
        assert catalog.names() == ["collatz", "post"]

    def test_unknown_name(self):
        with pytest.raises(KeyError):
            catalog.get("busy_beaver")

    def test_collatz_trace(self):
        definition = catalog.get("collatz")
        assert definition.initial_word == ("a", "a", "a")

        outcome = run(("a", "a"), definition.system, 10)
        assert outcome.trace == (("a", "a"), ("b", "c"), ("a",))

    def test_post_trace(self):
        definition = catalog.get("post")
        assert definition.system.deletion_count == 3

        outcome = run(("0", "0", "0"), definition.system, 10)
        assert outcome.halted
        assert outcome.trace == (("0", "0", "0"), ("0", "0"))
