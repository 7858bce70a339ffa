from __future__ import annotations

from typing import Optional, Sequence

from bwpath.lib.algorithms.base import Bandwidth
from bwpath.lib.graph import EdgeID, EdgeWeightedGraph, NodeID
from bwpath.logging import get_logger

logger = get_logger(__name__)


def check_optimality(
    graph: EdgeWeightedGraph,
    src_node: NodeID,
    bandwidth_to: Sequence[Bandwidth],
    edge_to: Sequence[Optional[EdgeID]],
) -> bool:
    """
    Re-verify the optimality conditions of a maximum-bandwidth path forest.

    Conditions, checked in order:
      1. No edge has a negative bandwidth.
      2. ``bandwidth_to[src_node] == 0`` and ``edge_to[src_node] is None``.
      3. Every other vertex without a predecessor edge has bandwidth 0.
      4. Every edge v->w leaving a reached vertex satisfies
         ``bandwidth_to[v] + bw <= bandwidth_to[w]`` (no edge can still
         improve its head). Unreached tails only hold the 0 placeholder.
      5. Every predecessor edge ends at its vertex and is tight:
         ``bandwidth_to[v] + bw == bandwidth_to[w]``.

    The first violation is logged at ERROR level.

    Args:
        graph: The solved graph.
        src_node: Source vertex of the solve.
        bandwidth_to: Per-vertex cumulative bandwidth.
        edge_to: Per-vertex predecessor edge key, or None.

    Returns:
        True if every condition holds, False otherwise.
    """
    edges = graph.get_edges()

    for e in edges:
        if e.bandwidth < 0:
            logger.error("Negative edge bandwidth detected: %s", e)
            return False

    if bandwidth_to[src_node] != 0 or edge_to[src_node] is not None:
        logger.error(
            "bandwidth_to[%s] and edge_to[%s] inconsistent: %s, %s",
            src_node,
            src_node,
            bandwidth_to[src_node],
            edge_to[src_node],
        )
        return False

    for v in range(graph.num_vertices):
        if v == src_node:
            continue
        if edge_to[v] is None and bandwidth_to[v] != 0:
            logger.error(
                "bandwidth_to[] and edge_to[] inconsistent at vertex %s: "
                "no predecessor edge but bandwidth %s",
                v,
                bandwidth_to[v],
            )
            return False

    for e in edges:
        if e.src != src_node and edge_to[e.src] is None:
            continue
        if bandwidth_to[e.src] + e.bandwidth > bandwidth_to[e.dst]:
            logger.error("Edge %s not relaxed", e)
            return False

    for w in range(graph.num_vertices):
        key = edge_to[w]
        if key is None:
            continue
        e = edges[key]
        if e.dst != w:
            logger.error("Predecessor edge %s of vertex %s does not end at it", e, w)
            return False
        if bandwidth_to[e.src] + e.bandwidth != bandwidth_to[w]:
            logger.error("Edge %s on maximum-bandwidth path not tight", e)
            return False

    return True
