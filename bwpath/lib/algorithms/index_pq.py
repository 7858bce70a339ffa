"""Indexed max-priority queue over integer ids ``0..max_n-1``."""

from __future__ import annotations

from typing import List, Optional

from bwpath.lib.algorithms.base import Bandwidth, QueueMisuseError, validate_vertex


class IndexMaxPQ:
    """
    Binary max-heap of integer indices keyed by priority, with in-place
    priority increase.

    Three fixed-size arrays back the queue:
      - ``_pq``: 1-based heap of indices (``_pq[1]`` holds the maximum).
      - ``_qp``: inverse of ``_pq``; ``_qp[i]`` is the heap slot of index
        ``i``, or -1 if ``i`` is not queued.
      - ``_keys``: ``_keys[i]`` is the priority of index ``i``.

    ``contains`` is O(1); ``insert``, ``increase_key`` and ``del_max`` are
    O(log n). Equal priorities come out in no particular order.

    Args:
        max_n: Capacity; valid indices are ``0..max_n-1``.

    Raises:
        ValueError: If max_n is negative.
    """

    def __init__(self, max_n: int) -> None:
        if max_n < 0:
            raise ValueError(f"Queue capacity must be non-negative, got {max_n}.")
        self._max_n = max_n
        self._n = 0
        self._pq: List[int] = [0] * (max_n + 1)
        self._qp: List[int] = [-1] * max_n
        self._keys: List[Optional[Bandwidth]] = [None] * max_n

    def __len__(self) -> int:
        return self._n

    def __contains__(self, i: int) -> bool:
        return self.contains(i)

    def is_empty(self) -> bool:
        return self._n == 0

    def contains(self, i: int) -> bool:
        i = validate_vertex(i, self._max_n)
        return self._qp[i] != -1

    def insert(self, i: int, key: Bandwidth) -> None:
        """
        Queue index ``i`` with priority ``key``.

        Raises:
            InvalidVertexError: If i is out of range.
            QueueMisuseError: If i is already queued.
        """
        i = validate_vertex(i, self._max_n)
        if self._qp[i] != -1:
            raise QueueMisuseError(f"index {i} is already in the priority queue")
        self._n += 1
        self._qp[i] = self._n
        self._pq[self._n] = i
        self._keys[i] = key
        self._swim(self._n)

    def max_index(self) -> int:
        """Return the index with the maximum priority without removing it."""
        if self._n == 0:
            raise QueueMisuseError("priority queue underflow")
        return self._pq[1]

    def max_key(self) -> Bandwidth:
        """Return the maximum priority without removing it."""
        if self._n == 0:
            raise QueueMisuseError("priority queue underflow")
        return self._keys[self._pq[1]]

    def key_of(self, i: int) -> Bandwidth:
        i = validate_vertex(i, self._max_n)
        if self._qp[i] == -1:
            raise QueueMisuseError(f"index {i} is not in the priority queue")
        return self._keys[i]

    def del_max(self) -> int:
        """
        Remove and return the index with the maximum priority.

        Raises:
            QueueMisuseError: If the queue is empty.
        """
        if self._n == 0:
            raise QueueMisuseError("priority queue underflow")
        top = self._pq[1]
        self._exch(1, self._n)
        self._n -= 1
        self._sink(1)
        self._qp[top] = -1
        self._keys[top] = None
        self._pq[self._n + 1] = 0
        return top

    def increase_key(self, i: int, key: Bandwidth) -> None:
        """
        Raise the priority of a queued index.

        Raises:
            InvalidVertexError: If i is out of range.
            QueueMisuseError: If i is not queued, or key does not strictly
                exceed the current priority.
        """
        i = validate_vertex(i, self._max_n)
        if self._qp[i] == -1:
            raise QueueMisuseError(f"index {i} is not in the priority queue")
        current = self._keys[i]
        if key == current:
            raise QueueMisuseError(
                f"calling increase_key() with a key equal to the current key ({key})"
            )
        if key < current:
            raise QueueMisuseError(
                f"calling increase_key() with a key less than the current key "
                f"({key} < {current})"
            )
        self._keys[i] = key
        self._swim(self._qp[i])

    #
    # Heap helpers
    #
    def _less(self, a: int, b: int) -> bool:
        return self._keys[self._pq[a]] < self._keys[self._pq[b]]

    def _exch(self, a: int, b: int) -> None:
        pq, qp = self._pq, self._qp
        pq[a], pq[b] = pq[b], pq[a]
        qp[pq[a]] = a
        qp[pq[b]] = b

    def _swim(self, k: int) -> None:
        while k > 1 and self._less(k // 2, k):
            self._exch(k, k // 2)
            k //= 2

    def _sink(self, k: int) -> None:
        n = self._n
        while 2 * k <= n:
            j = 2 * k
            if j < n and self._less(j, j + 1):
                j += 1
            if not self._less(k, j):
                break
            self._exch(k, j)
            k = j
