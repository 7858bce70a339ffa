from __future__ import annotations

from typing import List, Optional

from bwpath.config import SOLVER_CONFIG
from bwpath.lib.algorithms.base import (
    Bandwidth,
    NegativeBandwidthError,
    OptimalityCheckError,
    validate_vertex,
)
from bwpath.lib.algorithms.check import check_optimality
from bwpath.lib.algorithms.index_pq import IndexMaxPQ
from bwpath.lib.algorithms.path_utils import resolve_to_path
from bwpath.lib.graph import Edge, EdgeID, EdgeWeightedGraph, NodeID
from bwpath.logging import get_logger

logger = get_logger(__name__)


class MaxBandwidthPaths:
    """
    Maximum cumulative bandwidth path forest from a single source.

    Produced by ``max_bw_spf``. Lookups are O(1) except ``path_to``, which
    takes time proportional to the number of edges on the path.

    Attributes:
        graph: The solved graph.
        source: Source vertex.
        settled: Number of vertices extracted from the priority queue.
        relaxations: Number of successful edge relaxations.
    """

    def __init__(
        self,
        graph: EdgeWeightedGraph,
        source: NodeID,
        bandwidth_to: List[Bandwidth],
        edge_to: List[Optional[EdgeID]],
        settled: int = 0,
        relaxations: int = 0,
    ) -> None:
        self.graph = graph
        self.source = source
        self._bandwidth_to = bandwidth_to
        self._edge_to = edge_to
        self.settled = settled
        self.relaxations = relaxations

    @property
    def num_vertices(self) -> int:
        return len(self._bandwidth_to)

    def bandwidth_to(self, v: NodeID) -> Bandwidth:
        """
        Cumulative bandwidth of the best path found from the source to ``v``.

        Vertices without a path read 0.

        Raises:
            InvalidVertexError: Unless ``0 <= v < V``.
        """
        v = validate_vertex(v, self.num_vertices)
        return self._bandwidth_to[v]

    def has_path_to(self, v: NodeID) -> bool:
        """
        True if ``v`` was reached through at least one relaxed edge.

        The source always has its empty path.

        Raises:
            InvalidVertexError: Unless ``0 <= v < V``.
        """
        v = validate_vertex(v, self.num_vertices)
        return v == self.source or self._edge_to[v] is not None

    def edge_to(self, v: NodeID) -> Optional[Edge]:
        """Last edge on the best path to ``v``, or None."""
        v = validate_vertex(v, self.num_vertices)
        key = self._edge_to[v]
        return None if key is None else self.graph.get_edge(key)

    def path_to(self, v: NodeID) -> Optional[List[Edge]]:
        """
        Edges of the best path from the source to ``v``, in order.

        Returns:
            The edge list (empty for the source), or None if there is no path.

        Raises:
            InvalidVertexError: Unless ``0 <= v < V``.
        """
        if not self.has_path_to(v):
            return None
        return resolve_to_path(self.graph, self._edge_to, v)

    def reachable(self) -> List[NodeID]:
        """Vertices with a path from the source, in ascending order."""
        return [v for v in range(self.num_vertices) if self.has_path_to(v)]

    def check(self) -> bool:
        """Run the optimality checker over this result."""
        return check_optimality(
            self.graph, self.source, self._bandwidth_to, self._edge_to
        )


def max_bw_spf(
    graph: EdgeWeightedGraph,
    src_node: NodeID,
    check: Optional[bool] = None,
) -> MaxBandwidthPaths:
    """
    Compute maximum cumulative bandwidth paths from a source vertex.

    A Dijkstra-like label-setting loop: vertices are settled in decreasing
    order of recorded bandwidth through an ``IndexMaxPQ``, and each settled
    vertex relaxes its outgoing edges with the rule "larger sum wins".
    Every vertex starts at bandwidth 0. A vertex with no predecessor edge yet
    accepts any incoming edge, so zero-bandwidth edges still count as paths.
    Settled vertices are final and never re-enter the queue.

    Greedy max extraction with additive accumulation is not a general
    longest-path algorithm: when a settled vertex could later be improved
    (e.g. a cycle, or a long detour through low-bandwidth edges), its label
    stays as settled. The optimality checker reports such cases.

    Args:
        graph: The graph to solve. Only read.
        src_node: The source vertex.
        check: Run the optimality checker afterwards. Defaults to
            ``SOLVER_CONFIG.check_optimality``.

    Returns:
        MaxBandwidthPaths: Per-vertex bandwidth and predecessor edges.

    Raises:
        NegativeBandwidthError: If any edge bandwidth is negative.
        InvalidVertexError: Unless ``0 <= src_node < V``.
        OptimalityCheckError: If checking is enabled and fails.
    """
    edges = graph.get_edges()
    for e in edges:
        if e.bandwidth < 0:
            raise NegativeBandwidthError(f"edge {e} has negative bandwidth")

    num_vertices = graph.num_vertices
    src_node = validate_vertex(src_node, num_vertices)

    logger.debug(
        "Solving max-bandwidth paths from vertex %s (V=%d, E=%d)",
        src_node,
        num_vertices,
        len(edges),
    )

    bandwidth_to: List[Bandwidth] = [0] * num_vertices
    edge_to: List[Optional[EdgeID]] = [None] * num_vertices
    done = [False] * num_vertices
    outgoing_adjacencies = graph._adj
    settled = 0
    relaxations = 0

    pq = IndexMaxPQ(num_vertices)
    pq.insert(src_node, bandwidth_to[src_node])

    while not pq.is_empty():
        v = pq.del_max()
        done[v] = True
        settled += 1
        base_bw = bandwidth_to[v]

        for w, edges_map in outgoing_adjacencies[v].items():
            if done[w]:
                continue
            for e_id in edges_map:
                new_bw = base_bw + edges[e_id].bandwidth
                if edge_to[w] is None or bandwidth_to[w] < new_bw:
                    bandwidth_to[w] = new_bw
                    edge_to[w] = e_id
                    relaxations += 1
                    if pq.contains(w):
                        pq.increase_key(w, new_bw)
                    else:
                        pq.insert(w, new_bw)

    logger.debug(
        "Settled %d of %d vertices with %d relaxations",
        settled,
        num_vertices,
        relaxations,
    )

    result = MaxBandwidthPaths(
        graph, src_node, bandwidth_to, edge_to, settled, relaxations
    )

    if check is None:
        check = SOLVER_CONFIG.check_optimality
    if check and not result.check():
        raise OptimalityCheckError(
            f"optimality conditions violated for source {src_node}"
        )
    return result
