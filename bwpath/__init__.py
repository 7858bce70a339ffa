"""bwpath: maximum cumulative bandwidth paths.

Computes, from one source vertex, the path to every other vertex whose edge
bandwidths add up to the largest total, using a Dijkstra-like label-setting
loop over an indexed max-priority queue.

Example:
    from bwpath import EdgeWeightedGraph, max_bw_spf

    g = EdgeWeightedGraph.from_edges(
        3,
        [
            (0, 1, "fiber", 5, 10),
            (1, 2, "fiber", 3, 12),
            (0, 2, "copper", 4, 7),
        ],
    )
    paths = max_bw_spf(g, 0)
    paths.bandwidth_to(2)  # 8
    [str(e) for e in paths.path_to(2)]  # ["0->1  5.00", "1->2  3.00"]
"""

from __future__ import annotations

from bwpath import logging
from bwpath.config import SOLVER_CONFIG, SolverConfig
from bwpath.lib.algorithms.base import (
    InvalidVertexError,
    NegativeBandwidthError,
    OptimalityCheckError,
    QueueMisuseError,
)
from bwpath.lib.algorithms.check import check_optimality
from bwpath.lib.algorithms.index_pq import IndexMaxPQ
from bwpath.lib.algorithms.max_bw import MaxBandwidthPaths, max_bw_spf
from bwpath.lib.graph import Edge, EdgeWeightedGraph

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Graph
    "EdgeWeightedGraph",
    "Edge",
    # Algorithms
    "IndexMaxPQ",
    "max_bw_spf",
    "MaxBandwidthPaths",
    "check_optimality",
    # Errors
    "InvalidVertexError",
    "NegativeBandwidthError",
    "QueueMisuseError",
    "OptimalityCheckError",
    # Configuration
    "SolverConfig",
    "SOLVER_CONFIG",
    "logging",
]
