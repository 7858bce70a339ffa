from __future__ import annotations

from dataclasses import dataclass
from pickle import dumps, loads
from typing import Any, Iterable, List, Optional, Sequence, Tuple

import networkx as nx

from bwpath.lib.algorithms.base import Bandwidth, Length, validate_vertex

NodeID = int
EdgeID = int

#: In-memory form of one edge-list record: (src, dst, type, bandwidth, length).
EdgeRecord = Tuple[NodeID, NodeID, str, Bandwidth, Length]


@dataclass(frozen=True)
class Edge:
    """
    A directed edge with its bandwidth and auxiliary attributes.

    Attributes:
        src: Tail vertex.
        dst: Head vertex.
        type: Short label, not interpreted by the algorithms.
        bandwidth: Non-negative weight accumulated along paths.
        length: Carried for reporting only.
        key: Position of the edge in the owning graph's edge array.
    """

    src: NodeID
    dst: NodeID
    type: str
    bandwidth: Bandwidth
    length: Length
    key: EdgeID

    def either(self) -> NodeID:
        return self.src

    def other(self, v: NodeID) -> NodeID:
        """Return the endpoint opposite to ``v``."""
        if v == self.src:
            return self.dst
        if v == self.dst:
            return self.src
        raise ValueError(f"Vertex {v} is not an endpoint of edge {self}.")

    def __str__(self) -> str:
        return f"{self.src}->{self.dst} {self.bandwidth:5.2f}"


class EdgeWeightedGraph(nx.MultiDiGraph):
    """
    A fixed-size multi-directed graph over vertices ``0..V-1``.

    This class enforces:
      - All V vertices exist from construction; vertices cannot be added
        or removed afterwards.
      - Edge endpoints must lie in ``[0, V)`` (InvalidVertexError otherwise).
      - Edge keys are positions in the edge array, assigned by a counter.
      - Edges can only be appended. Once ``freeze()`` is called, every
        mutation raises ``networkx.NetworkXError``.

    The ``type``, ``bandwidth`` and ``length`` attributes are also stored in
    the NetworkX edge attribute dict, so the graph works with NetworkX
    algorithms (e.g. ``weight="bandwidth"``). Views from ``subgraph()`` or
    ``reverse(copy=False)`` are plain read-only NetworkX views; the edge
    array helpers (``get_edges`` and friends) only describe the full graph.

    Inherits from:
        networkx.MultiDiGraph
    """

    def __init__(self, num_vertices: int = 0) -> None:
        """
        Initialize a graph with ``num_vertices`` isolated vertices.

        Args:
            num_vertices: Vertex count V, fixed for the lifetime of the graph.
                NetworkX builds views through the no-argument form.

        Raises:
            ValueError: If num_vertices is negative.
        """
        if num_vertices < 0:
            raise ValueError(
                f"Number of vertices must be non-negative, got {num_vertices}."
            )
        super().__init__()
        self._num_vertices = num_vertices
        self._edges: List[Edge] = []
        super().add_nodes_from(range(num_vertices))

    @classmethod
    def from_edges(
        cls, num_vertices: int, edges: Iterable[EdgeRecord]
    ) -> EdgeWeightedGraph:
        """
        Build and freeze a graph from ``(src, dst, type, bandwidth, length)`` records.

        Args:
            num_vertices: Vertex count V.
            edges: Edge records, appended in order.

        Returns:
            EdgeWeightedGraph: A frozen graph.
        """
        graph = cls(num_vertices)
        for src, dst, edge_type, bandwidth, length in edges:
            graph.add_edge(
                src, dst, type=edge_type, bandwidth=bandwidth, length=length
            )
        return graph.freeze()

    @property
    def num_vertices(self) -> int:
        return self._num_vertices

    def new_edge_key(self, src_node: NodeID, dst_node: NodeID) -> EdgeID:
        """Return the next position in the edge array."""
        return len(self._edges)

    def freeze(self) -> EdgeWeightedGraph:
        """Make the graph immutable and return it."""
        return nx.freeze(self)

    def is_frozen(self) -> bool:
        return nx.is_frozen(self)

    def copy(self, as_view: bool = False) -> EdgeWeightedGraph:
        """
        Create a pickle-based deep copy of this graph.

        A frozen graph yields a frozen copy. Views are not supported.
        """
        if as_view:
            raise ValueError("EdgeWeightedGraph does not support views.")
        return loads(dumps(self))

    def reverse(self, copy: bool = True) -> EdgeWeightedGraph:
        """
        Return the graph with every edge direction flipped.

        With ``copy=True`` (the default) the result is a new, unfrozen
        EdgeWeightedGraph in which edge ``k`` runs ``dst->src`` and keeps the
        type, bandwidth and length of edge ``k`` here. With ``copy=False`` a
        read-only NetworkX view is returned instead.
        """
        if not copy:
            return nx.reverse_view(self)
        reversed_graph = self.__class__(self._num_vertices)
        for e in self._edges:
            reversed_graph.add_edge(
                e.dst, e.src, type=e.type, bandwidth=e.bandwidth, length=e.length
            )
        return reversed_graph

    #
    # Vertex management
    #
    def add_node(self, node_for_adding: Any, **attr: Any) -> None:
        raise ValueError("Vertices are fixed at construction.")

    def add_nodes_from(self, nodes_for_adding: Any, **attr: Any) -> None:
        raise ValueError("Vertices are fixed at construction.")

    def remove_node(self, n: Any) -> None:
        raise ValueError("Vertices are fixed at construction.")

    def remove_nodes_from(self, nodes: Any) -> None:
        raise ValueError("Vertices are fixed at construction.")

    #
    # Edge management
    #
    def add_edge(
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        *,
        type: str = "",
        bandwidth: Bandwidth = 0,
        length: Length = 0,
        **attr: Any,
    ) -> EdgeID:
        """
        Append a directed edge from u_for_edge to v_for_edge.

        Args:
            u_for_edge: Tail vertex in ``[0, V)``.
            v_for_edge: Head vertex in ``[0, V)``.
            key: Must be None or equal to the next edge position.
            type: Edge type label.
            bandwidth: Edge bandwidth. Not validated here; the solver
                rejects negative values.
            length: Edge length, carried for reporting.
            **attr: Extra NetworkX edge attributes.

        Returns:
            EdgeID: The position of the new edge in the edge array.

        Raises:
            InvalidVertexError: If either endpoint is out of range.
            ValueError: If an explicit key is not the next position.
        """
        u_for_edge = validate_vertex(u_for_edge, self._num_vertices)
        v_for_edge = validate_vertex(v_for_edge, self._num_vertices)

        next_key = self.new_edge_key(u_for_edge, v_for_edge)
        if key is not None and key != next_key:
            raise ValueError(
                f"Edge key must be the next edge position {next_key}, got {key}."
            )

        super().add_edge(
            u_for_edge,
            v_for_edge,
            key=next_key,
            type=type,
            bandwidth=bandwidth,
            length=length,
            **attr,
        )
        self._edges.append(
            Edge(u_for_edge, v_for_edge, type, bandwidth, length, next_key)
        )
        return next_key

    def add_edges_from(
        self, ebunch_to_add: Iterable[Sequence[Any]], **attr: Any
    ) -> List[EdgeID]:
        """
        Append edges given as ``(u, v)`` or ``(u, v, attr_dict)`` tuples.

        Keyword arguments apply to every edge; per-edge dicts take precedence.
        """
        keys = []
        for e in ebunch_to_add:
            if len(e) == 2:
                u, v = e
                edge_attr = {}
            elif len(e) == 3:
                u, v, edge_attr = e
            else:
                raise ValueError(f"Edge tuple {e} must be a 2-tuple or 3-tuple.")
            keys.append(self.add_edge(u, v, **{**attr, **edge_attr}))
        return keys

    def add_link(
        self,
        u: NodeID,
        v: NodeID,
        *,
        type: str = "",
        bandwidth: Bandwidth = 0,
        length: Length = 0,
    ) -> Tuple[EdgeID, EdgeID]:
        """
        Append a symmetric link as two directed edges, u->v then v->u.

        Returns:
            Tuple[EdgeID, EdgeID]: Keys of the forward and reverse edges.
        """
        fwd = self.add_edge(u, v, type=type, bandwidth=bandwidth, length=length)
        rev = self.add_edge(v, u, type=type, bandwidth=bandwidth, length=length)
        return fwd, rev

    def remove_edge(self, u: Any, v: Any, key: Any = None) -> None:
        raise ValueError("Edges can only be appended.")

    def remove_edges_from(self, ebunch: Any) -> None:
        raise ValueError("Edges can only be appended.")

    def clear(self) -> None:
        raise ValueError("Vertices are fixed at construction.")

    def clear_edges(self) -> None:
        raise ValueError("Edges can only be appended.")

    def update(self, edges: Any = None, nodes: Any = None) -> None:
        raise ValueError("Use add_edge() to append edges.")

    #
    # Convenience methods
    #
    def get_edges(self) -> List[Edge]:
        """
        Retrieve all edges, indexed by key.

        Returns:
            List[Edge]: The edge array; ``get_edges()[k].key == k``.
        """
        return self._edges

    def get_edge(self, key: EdgeID) -> Edge:
        """
        Retrieve a specific edge.

        Raises:
            ValueError: If no edge with this key is found.
        """
        if isinstance(key, bool) or not isinstance(key, int) or not (
            0 <= key < len(self._edges)
        ):
            raise ValueError(f"Edge with id='{key}' not found.")
        return self._edges[key]

    def get_out_edges(self, v: NodeID) -> List[Edge]:
        """
        List the outgoing edges of ``v``.

        Edges are grouped by neighbor in first-seen order; within a
        neighbor they follow insertion order.

        Raises:
            InvalidVertexError: If v is out of range.
        """
        v = validate_vertex(v, self._num_vertices)
        edges = self._edges
        return [edges[k] for keydict in self._adj[v].values() for k in keydict]
