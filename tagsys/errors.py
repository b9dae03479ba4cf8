"""Tag System error types.

Two families live here:
    * TagSystemError / InvalidDefinition - ordinary, reportable failures
    * InvariantViolation                 - internal defects, never reported

A run that exhausts its step budget is not an error; see driver.BudgetExceeded.
"""

from __future__ import annotations


class TagSystemError(Exception):
    """Base class for ordinary tag system failures."""


class InvalidDefinition(TagSystemError, ValueError):
    """A tag system definition (or run argument) violates a constraint.

    ``constraint`` is a short stable tag such as ``"missing_production"``;
    the message explains the specific violation.
    """

    def __init__(self, constraint: str, message: str) -> None:
        super().__init__(f"{constraint}: {message}")
        self.constraint = constraint
        self.message = message


class InvariantViolation(RuntimeError):
    """The engine broke one of its own invariants.

    Raised when a transform is requested for a halting word. Callers are
    not expected to catch this.
    """
