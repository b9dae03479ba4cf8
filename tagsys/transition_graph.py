"""Tag System transition-graph utilities.

Builds a plain-dict graph from an execution trace, one node per
distinct word and one edge per rewrite step, and converts it into a
NetworkX multigraph for further analysis or visualization.
"""

from typing import Any, Dict, Iterable, List, Optional

import networkx as nx

from .tokenizer import render_word
from .words import ExecutionTrace, Symbol, Word


def trace_graph(
    trace: ExecutionTrace, alphabet: Optional[Iterable[Symbol]] = None
) -> Dict[str, Any]:
    """Return a nodes/edges dict describing *trace*.

    *alphabet* controls how words are rendered; see render_word().
    """
    index: Dict[Word, int] = {}
    nodes: List[Dict[str, Any]] = []
    edges: List[Dict[str, Any]] = []

    for step, word in enumerate(trace):
        if word in index:
            nodes[index[word]]["visits"] += 1
        else:
            index[word] = len(nodes)
            nodes.append(
                {
                    "id": f"w{index[word]}",
                    "word": render_word(word, alphabet),
                    "length": len(word),
                    "first_step": step,
                    "visits": 1,
                }
            )
        if step > 0:
            prev = trace[step - 1]
            edges.append(
                {
                    "source": nodes[index[prev]]["id"],
                    "target": nodes[index[word]]["id"],
                    "step": step,
                    "symbol": str(prev[0]),
                }
            )

    return {
        "nodes": nodes,
        "edges": edges,
    }


def graph_to_nx(graph: Dict[str, Any]) -> nx.MultiDiGraph:
    """Convert a trace graph dict into a NetworkX MultiDiGraph."""
    g = nx.MultiDiGraph()

    for node in graph.get("nodes", []):
        node_id = node["id"]
        g.add_node(node_id, **{k: v for k, v in node.items() if k != "id"})

    for edge in graph.get("edges", []):
        src = edge["source"]
        tgt = edge["target"]
        g.add_edge(src, tgt, step=edge["step"], symbol=edge["symbol"])

    return g
