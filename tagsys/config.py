"""Runner configuration.

Read from the environment:

    TAGSYS_STEP_BUDGET  default step budget for the runner (10000)
    TAGSYS_LOG_LEVEL    logging level name (WARNING)

The engine itself never reads configuration; budgets are passed in.
"""

import logging
import os
from typing import NamedTuple

DEFAULT_STEP_BUDGET = 10000
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


class RunnerConfig(NamedTuple):
    step_budget: int
    log_level: str


def get_config() -> RunnerConfig:
    """Build a RunnerConfig from environment variables."""
    raw = os.getenv("TAGSYS_STEP_BUDGET", str(DEFAULT_STEP_BUDGET))
    try:
        budget = int(raw)
    except ValueError:
        budget = -1
    if budget < 0:
        logger.warning(
            "ignoring TAGSYS_STEP_BUDGET=%r (not a non-negative integer); using %d",
            raw, DEFAULT_STEP_BUDGET,
        )
        budget = DEFAULT_STEP_BUDGET

    level = os.getenv("TAGSYS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not level:
        level = DEFAULT_LOG_LEVEL

    return RunnerConfig(step_budget=budget, log_level=level)
