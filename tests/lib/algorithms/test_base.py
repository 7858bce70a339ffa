"""Tests for lib.algorithms.base module."""

import pytest

from bwpath.lib.algorithms.base import (
    InvalidVertexError,
    NegativeBandwidthError,
    OptimalityCheckError,
    QueueMisuseError,
    validate_vertex,
)


class TestValidateVertex:
    @pytest.mark.parametrize("v", [0, 1, 4])
    def test_in_range(self, v) -> None:
        validate_vertex(v, 5)

    @pytest.mark.parametrize("v", [-1, 5, 99])
    def test_out_of_range(self, v) -> None:
        with pytest.raises(InvalidVertexError) as exc_info:
            validate_vertex(v, 5)
        assert str(exc_info.value) == f"vertex {v} is not between 0 and 4"
        assert exc_info.value.vertex == v
        assert exc_info.value.num_vertices == 5

    @pytest.mark.parametrize("v", [True, 1.0, "1", None])
    def test_non_int_rejected(self, v) -> None:
        with pytest.raises(InvalidVertexError):
            validate_vertex(v, 5)

    def test_empty_range(self) -> None:
        with pytest.raises(InvalidVertexError):
            validate_vertex(0, 0)

    def test_returns_plain_int(self) -> None:
        assert validate_vertex(3, 5) == 3

    def test_integer_like_accepted(self) -> None:
        class Int64:
            def __init__(self, value):
                self.value = value

            def __index__(self):
                return self.value

        i = validate_vertex(Int64(2), 5)
        assert i == 2 and type(i) is int
        with pytest.raises(InvalidVertexError):
            validate_vertex(Int64(5), 5)


class TestErrorHierarchy:
    def test_caller_errors_are_value_errors(self) -> None:
        assert issubclass(InvalidVertexError, ValueError)
        assert issubclass(NegativeBandwidthError, ValueError)

    def test_internal_errors(self) -> None:
        assert issubclass(QueueMisuseError, RuntimeError)
        assert not issubclass(QueueMisuseError, ValueError)
        assert issubclass(OptimalityCheckError, AssertionError)
