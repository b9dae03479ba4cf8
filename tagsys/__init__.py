"""tagsys: a deterministic Tag System rewriting engine."""

from .driver import BudgetExceeded, Halted, RunOutcome, iter_words, resume, run
from .errors import InvalidDefinition, InvariantViolation, TagSystemError
from .halting import is_halting
from .rules import RuleTable
from .system import TagSystem, construct
from .transformer import transform
from .words import EMPTY_WORD, ExecutionTrace, Symbol, Word

__version__ = "0.1.0"

__all__ = [
    "BudgetExceeded",
    "EMPTY_WORD",
    "ExecutionTrace",
    "Halted",
    "InvalidDefinition",
    "InvariantViolation",
    "RuleTable",
    "RunOutcome",
    "Symbol",
    "TagSystem",
    "TagSystemError",
    "Word",
    "construct",
    "is_halting",
    "iter_words",
    "resume",
    "run",
    "transform",
]
