import random

import networkx as nx
import pytest

from bwpath.lib.algorithms.max_bw import max_bw_spf
from bwpath.lib.graph import EdgeWeightedGraph

random.seed(0)


def create_random_dag(num_vertices: int, num_edges: int):
    """
    Create a random DAG (edges only go from lower to higher vertex ids).

    Args:
        num_vertices: Number of vertices.
        num_edges: Number of edges to add; parallel edges allowed.
    Returns:
        A list of (src, dst, type, bandwidth, length) records.
    """
    edges = []
    while len(edges) < num_edges:
        src = random.randrange(num_vertices)
        dst = random.randrange(num_vertices)
        if src >= dst:
            continue
        edges.append((src, dst, "link", random.randint(1, 100), random.randint(1, 10)))
    return edges


@pytest.fixture
def graph1():
    """
    Build both:
      - EdgeWeightedGraph 'g'
      - NetworkX MultiDiGraph 'gnx' with the same edges
    Then return (g, gnx).
    """
    num_vertices = 1000
    edges = create_random_dag(num_vertices, 10000)

    g = EdgeWeightedGraph.from_edges(num_vertices, edges)
    gnx = nx.MultiDiGraph()
    gnx.add_nodes_from(range(num_vertices))
    for src, dst, _, bandwidth, _ in edges:
        gnx.add_edge(src, dst, bandwidth=bandwidth)
    return g, gnx


def test_bench_max_bw_spf_1(benchmark, graph1):
    """
    Benchmark max_bw_spf on 'graph1[0]', starting from vertex 0.
    """

    def run_max_bw():
        max_bw_spf(graph1[0], 0)

    benchmark(run_max_bw)


def test_bench_networkx_dag_longest_path_1(benchmark, graph1):
    """
    Benchmark NetworkX's DAG longest path on 'graph1[1]' for reference.
    """

    def run_nx_longest_path():
        nx.dag_longest_path_length(graph1[1], weight="bandwidth")

    benchmark(run_nx_longest_path)
