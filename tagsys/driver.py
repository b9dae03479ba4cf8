"""Tag System driver.

Iterates the transformer under a caller-supplied step budget:

    record word -> halting?  -> Halted
                -> budget spent? -> BudgetExceeded
                -> transform, repeat

The loop is explicit and bounded by the step budget. Running out of
budget says nothing about whether the system would eventually halt.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from .errors import InvalidDefinition
from .halting import is_halting
from .system import TagSystem
from .transformer import transform
from .words import ExecutionTrace, Symbol, Word, as_word

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    """Result of a run: the trace and the number of transforms applied."""

    trace: ExecutionTrace
    steps: int

    @property
    def halted(self) -> bool:
        return False

    @property
    def kind(self) -> str:
        return "halted" if self.halted else "budget_exceeded"

    @property
    def last_word(self) -> Word:
        return self.trace[-1]


@dataclass(frozen=True)
class Halted(RunOutcome):
    """The run reached a halting word."""

    @property
    def halted(self) -> bool:
        return True

    @property
    def final_word(self) -> Word:
        return self.trace[-1]


@dataclass(frozen=True)
class BudgetExceeded(RunOutcome):
    """The step budget ran out before a halting word appeared."""


def _prepare(initial_word: Iterable[Symbol], system: TagSystem, step_budget: int) -> Word:
    if isinstance(step_budget, bool) or not isinstance(step_budget, int):
        raise InvalidDefinition(
            "step_budget", f"step budget must be an integer, got {step_budget!r}"
        )
    if step_budget < 0:
        raise InvalidDefinition(
            "step_budget", f"step budget must be >= 0, got {step_budget}"
        )
    word = as_word(initial_word)
    if not system.contains(word):
        raise InvalidDefinition(
            "foreign_symbol", f"initial word {word!r} uses symbols outside the alphabet"
        )
    return word


def _walk(word: Word, system: TagSystem, step_budget: int) -> Iterator[Word]:
    steps = 0
    while True:
        yield word
        if is_halting(word, system) or steps == step_budget:
            return
        word = transform(word, system)
        steps += 1


def iter_words(
    initial_word: Iterable[Symbol], system: TagSystem, step_budget: int
) -> Iterator[Word]:
    """Yield the words of a run one by one, initial word first.

    Arguments are checked immediately, not on first iteration.
    """
    word = _prepare(initial_word, system, step_budget)
    return _walk(word, system, step_budget)


def run(initial_word: Iterable[Symbol], system: TagSystem, step_budget: int) -> RunOutcome:
    """Run *system* from *initial_word* for at most *step_budget* steps."""
    word = _prepare(initial_word, system, step_budget)
    logger.debug(
        "run start: m=%d, |word|=%d, budget=%d",
        system.deletion_count, len(word), step_budget,
    )

    trace = tuple(_walk(word, system, step_budget))
    steps = len(trace) - 1

    if is_halting(trace[-1], system):
        logger.debug("halted after %d step(s)", steps)
        return Halted(trace=trace, steps=steps)

    logger.info("step budget of %d exhausted without halting", step_budget)
    return BudgetExceeded(trace=trace, steps=steps)


def resume(outcome: RunOutcome, system: TagSystem, step_budget: int) -> RunOutcome:
    """Continue a BudgetExceeded run from its last word.

    The new words are appended to the existing trace and the step count is
    cumulative. A Halted outcome is returned as is.
    """
    if outcome.halted:
        return outcome
    more = run(outcome.last_word, system, step_budget)
    trace = outcome.trace + more.trace[1:]
    return type(more)(trace=trace, steps=outcome.steps + more.steps)
