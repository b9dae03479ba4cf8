"""Tag System trace statistics.

Functions:
    * summarize_trace   - lengths, leading-symbol counts, distinct words
    * write_json_report - save summary and rendered trace as JSON

Pure bookkeeping over a finished run; nothing here alters the outcome.
"""

from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .driver import RunOutcome
from .system import TagSystem
from .tokenizer import render_word
from .transition_graph import graph_to_nx, trace_graph


def summarize_trace(outcome: RunOutcome) -> Dict[str, Any]:
    """Return deterministic statistics for a run outcome."""
    trace = outcome.trace
    lengths = [len(w) for w in trace]

    length_hist: Dict[int, int] = {}
    for n in lengths:
        length_hist[n] = length_hist.get(n, 0) + 1

    # every word but the last was consumed by a transform
    symbol_counts: Dict[str, int] = {}
    for word in trace[:-1]:
        key = str(word[0])
        symbol_counts[key] = symbol_counts.get(key, 0) + 1

    g = graph_to_nx(trace_graph(trace))

    return {
        "outcome": outcome.kind,
        "steps": outcome.steps,
        "initial_length": lengths[0],
        "final_length": lengths[-1],
        "min_length": min(lengths),
        "max_length": max(lengths),
        "length_hist": length_hist,
        "symbol_counts": symbol_counts,
        "distinct_words": g.number_of_nodes(),
    }


def write_json_report(
    outcome: RunOutcome,
    path: Union[str, Path],
    system: Optional[TagSystem] = None,
) -> Path:
    """Write summary statistics and the rendered trace to *path*."""
    path = Path(path)
    report: Dict[str, Any] = {
        "summary": summarize_trace(outcome),
        "trace": [
            render_word(w, system.alphabet if system is not None else None)
            for w in outcome.trace
        ],
    }
    if system is not None:
        report["system"] = system.to_dict()

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(report, f, indent=2, sort_keys=True)
    return path
