"""Command-line runner for tagsys.

Runs a tag system from a definition file or the built-in catalog and
prints the trace one word per line:

    tagsys systems/collatz.json --word aaaaaaa --budget 500
    python -m tagsys --catalog post --graph-out post_graph.json

Exit codes: 0 halted, 3 step budget exhausted, 4 invalid definition.
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import catalog
from .config import get_config
from .definition import Definition, load_definition
from .driver import run
from .errors import InvalidDefinition
from .report import write_json_report
from .tokenizer import render_word, tokenize
from .transition_graph import trace_graph

EXIT_HALTED = 0
EXIT_BUDGET_EXCEEDED = 3
EXIT_INVALID_DEFINITION = 4

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagsys",
        description="Run a tag system until it halts or the step budget runs out.",
    )
    parser.add_argument(
        "definition",
        nargs="?",
        type=Path,
        help="JSON tag system definition file",
    )
    parser.add_argument(
        "--catalog",
        choices=catalog.names(),
        help="run a built-in system instead of a definition file",
    )
    parser.add_argument(
        "--word",
        type=str,
        help="initial word (overrides the definition's initial_word)",
    )
    parser.add_argument(
        "--budget",
        type=int,
        help="maximum number of rewrite steps (default: $TAGSYS_STEP_BUDGET or 10000)",
    )
    parser.add_argument(
        "--json-out",
        type=Path,
        help="write trace statistics and the trace to this JSON file",
    )
    parser.add_argument(
        "--graph-out",
        type=Path,
        help="write the trace transition graph to this JSON file",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="do not print the trace",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    return parser


def _configure_logging(level_name: str, verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def _load(args: argparse.Namespace) -> Definition:
    if args.catalog:
        return catalog.get(args.catalog)
    return load_definition(args.definition)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_config()
    _configure_logging(config.log_level, args.verbose)

    if (args.definition is None) == (args.catalog is None):
        parser.error("give exactly one of DEFINITION or --catalog")
    if args.definition is not None and not args.definition.is_file():
        parser.error(f"definition file not found: {args.definition}")
    budget = config.step_budget if args.budget is None else args.budget
    if budget < 0:
        parser.error("--budget must be >= 0")

    try:
        definition = _load(args)
        system = definition.system
        if args.word is not None:
            word = tokenize(args.word, system.alphabet)
        elif definition.initial_word is not None:
            word = definition.initial_word
        else:
            parser.error("no initial word: pass --word or set initial_word")
        outcome = run(word, system, budget)
    except InvalidDefinition as exc:
        print(f"invalid definition: {exc}", file=sys.stderr)
        return EXIT_INVALID_DEFINITION

    if not args.quiet:
        for w in outcome.trace:
            print(render_word(w, system.alphabet))

    if args.json_out is not None:
        out = write_json_report(outcome, args.json_out, system=system)
        logger.info("report written to %s", out)
    if args.graph_out is not None:
        args.graph_out.parent.mkdir(parents=True, exist_ok=True)
        with args.graph_out.open("w", encoding="utf-8") as f:
            json.dump(trace_graph(outcome.trace, system.alphabet), f, indent=2)
        logger.info("graph written to %s", args.graph_out)

    if outcome.halted:
        print(f"{definition.name}: halted after {outcome.steps} step(s)", file=sys.stderr)
        return EXIT_HALTED
    print(
        f"{definition.name}: no halt within {outcome.steps} step(s); "
        f"last word {render_word(outcome.last_word, system.alphabet)!r}",
        file=sys.stderr,
    )
    return EXIT_BUDGET_EXCEEDED


if __name__ == "__main__":
    sys.exit(main())
