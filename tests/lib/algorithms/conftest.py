import pytest

from bwpath.lib.graph import EdgeWeightedGraph


@pytest.fixture
def triangle1():
    # Bandwidth:
    #        [5]       [3]
    #   0 ───────► 1 ───────► 2
    #   │                     ▲
    #   └─────────────────────┘
    #             [4]
    g = EdgeWeightedGraph(3)
    g.add_edge(0, 1, type="fiber", bandwidth=5, length=10)
    g.add_edge(1, 2, type="fiber", bandwidth=3, length=12)
    g.add_edge(0, 2, type="copper", bandwidth=4, length=7)
    return g.freeze()


@pytest.fixture
def triangle_isolated():
    # Same as triangle1 plus an isolated vertex 3.
    #
    #        [5]       [3]
    #   0 ───────► 1 ───────► 2        3
    #   │                     ▲
    #   └─────────────────────┘
    #             [4]
    return EdgeWeightedGraph.from_edges(
        4,
        [
            (0, 1, "fiber", 5, 10),
            (1, 2, "fiber", 3, 12),
            (0, 2, "copper", 4, 7),
        ],
    )


@pytest.fixture
def zero_edge():
    #      [0]
    #   0 ─────► 1
    return EdgeWeightedGraph.from_edges(2, [(0, 1, "wifi", 0, 1)])


@pytest.fixture
def dag1():
    # Bandwidth:
    #            [10]
    #      ┌──────────► 1 ────┐
    #      │            │     │ [2]
    #      │        [3] │     ▼
    #      0            │     3 ────► 4
    #      │            ▼     ▲  [1]
    #      └──────────► 2 ────┘
    #            [4]       [6]
    #
    # Keys: 0:0->1 1:0->2 2:1->2 3:1->3 4:2->3 5:3->4
    g = EdgeWeightedGraph(5)
    g.add_edge(0, 1, type="a", bandwidth=10, length=1)
    g.add_edge(0, 2, type="a", bandwidth=4, length=1)
    g.add_edge(1, 2, type="b", bandwidth=3, length=2)
    g.add_edge(1, 3, type="b", bandwidth=2, length=2)
    g.add_edge(2, 3, type="c", bandwidth=6, length=3)
    g.add_edge(3, 4, type="c", bandwidth=1, length=4)
    return g.freeze()


@pytest.fixture
def parallel1():
    # Parallel edges with bandwidth [2, 7, 7]:
    #
    #       [2,7,7]
    #   0 ═════════► 1
    g = EdgeWeightedGraph(2)
    g.add_edge(0, 1, bandwidth=2)
    g.add_edge(0, 1, bandwidth=7)
    g.add_edge(0, 1, bandwidth=7)
    return g.freeze()


@pytest.fixture
def greedy_trap():
    # The greedy order settles 1 at bandwidth 5 before the detour
    # 0->2->3->1 (201) is discovered.
    #
    #        [5]
    #   0 ────────► 1
    #   │           ▲
    #   │ [1]       │ [100]
    #   ▼    [100]  │
    #   2 ────────► 3
    #
    # Keys: 0:0->1 1:0->2 2:2->3 3:3->1
    return EdgeWeightedGraph.from_edges(
        4,
        [
            (0, 1, "a", 5, 1),
            (0, 2, "a", 1, 1),
            (2, 3, "a", 100, 1),
            (3, 1, "a", 100, 1),
        ],
    )


@pytest.fixture
def line_links():
    # Symmetric links, each stored as two directed edges:
    #
    #      [5]       [3]
    #   0 ◄───► 1 ◄───► 2
    #
    # Keys: 0:0->1 1:1->0 2:1->2 3:2->1
    g = EdgeWeightedGraph(3)
    g.add_link(0, 1, type="fiber", bandwidth=5, length=1)
    g.add_link(1, 2, type="fiber", bandwidth=3, length=1)
    return g.freeze()
