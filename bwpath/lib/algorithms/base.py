from __future__ import annotations

from operator import index
from typing import Any, Union

#: Represents a numeric bandwidth value (per edge or accumulated along a path).
Bandwidth = Union[int, float]

#: Auxiliary edge length, carried along but never optimized.
Length = Union[int, float]


class InvalidVertexError(ValueError):
    """A vertex id is outside ``[0, V)``."""

    def __init__(self, vertex: Any, num_vertices: int) -> None:
        super().__init__(f"vertex {vertex} is not between 0 and {num_vertices - 1}")
        self.vertex = vertex
        self.num_vertices = num_vertices


class NegativeBandwidthError(ValueError):
    """An edge carries a negative bandwidth."""


class QueueMisuseError(RuntimeError):
    """
    Internal misuse of the indexed priority queue.

    Under correct solver logic this is unreachable, so it is not meant to be
    caught by callers.
    """


class OptimalityCheckError(AssertionError):
    """The post-solve optimality conditions do not hold."""


def validate_vertex(v: Any, num_vertices: int) -> int:
    """
    Return ``v`` as a plain int, or raise InvalidVertexError unless it is an
    integer in ``[0, num_vertices)``.

    Anything implementing ``__index__`` counts as an integer (e.g.
    ``numpy.int64``). Booleans are rejected even though they are ints.
    """
    if isinstance(v, bool):
        raise InvalidVertexError(v, num_vertices)
    try:
        i = index(v)
    except TypeError:
        raise InvalidVertexError(v, num_vertices) from None
    if i < 0 or i >= num_vertices:
        raise InvalidVertexError(v, num_vertices)
    return i
