from __future__ import annotations

from typing import List, Optional, Sequence

from bwpath.lib.algorithms.base import Bandwidth, Length
from bwpath.lib.graph import Edge, EdgeID, EdgeWeightedGraph, NodeID


def resolve_to_path(
    graph: EdgeWeightedGraph,
    edge_to: Sequence[Optional[EdgeID]],
    dst_node: NodeID,
) -> List[Edge]:
    """
    Rebuild the source->destination path from a predecessor-edge array.

    Follows ``edge_to[dst_node]``, then ``edge_to`` of that edge's tail, and
    so on until a vertex without a predecessor edge (the source) is reached.

    Args:
        graph: The graph the edge keys refer to.
        edge_to: Per-vertex key of the last edge on the best-known path, or None.
        dst_node: Destination vertex.

    Returns:
        The edges in source-to-destination order; empty if dst_node has no
        predecessor edge.

    Raises:
        ValueError: If the predecessor chain does not terminate within V steps.
    """
    edges = graph.get_edges()
    reversed_path: List[Edge] = []
    key = edge_to[dst_node]
    while key is not None:
        if len(reversed_path) >= len(edge_to):
            raise ValueError(
                f"Predecessor chain to vertex {dst_node} contains a cycle."
            )
        edge = edges[key]
        reversed_path.append(edge)
        key = edge_to[edge.src]
    reversed_path.reverse()
    return reversed_path


def path_bandwidth(path: Sequence[Edge]) -> Bandwidth:
    """Sum of edge bandwidths along the path."""
    return sum(e.bandwidth for e in path)


def path_length(path: Sequence[Edge]) -> Length:
    """Sum of the carried edge lengths along the path."""
    return sum(e.length for e in path)


def format_path(path: Sequence[Edge]) -> str:
    """Render a path as space-separated edges, e.g. ``"0->1  5.00   1->2  3.00   "``."""
    return "".join(f"{e}   " for e in path)
