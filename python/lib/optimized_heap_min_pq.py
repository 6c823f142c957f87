#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
optimized_heap_min_pq.py
------------------------

An indexed binary min‑heap implementing the ``MinPQ`` contract.

Features
~~~~~~~~
* O(log n) ``add``, ``remove_min`` and ``change_priority`` (both directions).
* O(1) ``contains`` / ``get_priority`` / ``peek_min``.
* Two construction paths with different costs:

  - ``OptimizedHeapMinPQ(mapping)`` or ``OptimizedHeapMinPQ.heapify(mapping)``
    loads everything and heapifies bottom‑up in O(n);
  - ``OptimizedHeapMinPQ.from_pairs(iterable)`` adds one pair at a time,
    O(n log n).

* ``validate()`` checks both heap invariants – handy in tests.

The heap lives in a list ``_entries`` of ``PriorityNode`` objects laid out as
a complete binary tree (parent of slot i is ``(i - 1) // 2``).  A dict
``_position`` maps each element to its slot so an arbitrary element can be
found without scanning.  Every move goes through ``_swap``, which updates the
list and the dict together.

Typical usage
~~~~~~~~~~~~~
>>> pq = OptimizedHeapMinPQ({"x": 3.0, "y": 1.0, "z": 2.0})
>>> pq.remove_min(), pq.remove_min(), pq.remove_min()
('y', 'z', 'x')
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Type

from min_pq import (
    DuplicateElementError,
    E,
    EmptyQueueError,
    MinPQ,
    NotFoundError,
    PriorityNode,
)

logger = logging.getLogger(__name__)


class OptimizedHeapMinPQ(MinPQ[E]):
    """
    A min‑priority queue backed by a binary heap with an element → slot
    index.  Elements must be hashable; ties between equal priorities are
    broken by heap position.

    Parameters
    ----------
    elements_and_priorities : Mapping[E, float], optional
        Initial contents.  Loaded in O(n) with a bottom‑up heapify.
    """

    __slots__ = ("_entries", "_position")

    def __init__(
        self, elements_and_priorities: Optional[Mapping[E, float]] = None
    ) -> None:
        # The heap itself, a complete binary tree stored level by level.
        self._entries: List[PriorityNode[E]] = []

        # Mapping element -> current index in `_entries`.
        self._position: Dict[E, int] = {}

        if elements_and_priorities:
            self._load(elements_and_priorities.items())

    # ------------------------------------------------------------------
    #   Alternative constructors
    # ------------------------------------------------------------------
    @classmethod
    def heapify(
        cls: Type["OptimizedHeapMinPQ[E]"], elements_and_priorities: Mapping[E, float]
    ) -> "OptimizedHeapMinPQ[E]":
        """Build a queue from a mapping in O(n)."""
        return cls(elements_and_priorities)

    @classmethod
    def from_pairs(
        cls: Type["OptimizedHeapMinPQ[E]"], pairs: Iterable[Tuple[E, float]]
    ) -> "OptimizedHeapMinPQ[E]":
        """
        Build a queue by adding ``(element, priority)`` pairs one at a time,
        O(n log n).  Raises ``DuplicateElementError`` on a repeated element.
        """
        pq = cls()
        pq.extend(pairs)
        return pq

    def _load(self, pairs: Iterable[Tuple[E, float]]) -> None:
        for element, priority in pairs:
            self._position[element] = len(self._entries)
            self._entries.append(PriorityNode(element, priority))
        # Sink every internal node, last one first.
        for idx in range(len(self._entries) // 2 - 1, -1, -1):
            self._sift_down(idx)
        logger.debug("heapified %d entries", len(self._entries))

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def add(self, element: E, priority: float) -> None:
        """
        Insert *element* with the given *priority* and swim it up.
        Raises ``DuplicateElementError`` if the element is already present.
        """
        if element in self._position:
            raise DuplicateElementError(element)
        idx = len(self._entries)
        self._entries.append(PriorityNode(element, priority))
        self._position[element] = idx
        self._sift_up(idx)

    def contains(self, element: E) -> bool:
        """O(1) membership test through the index."""
        return element in self._position

    def get_priority(self, element: E) -> float:
        """Return the priority of *element*; ``NotFoundError`` if absent."""
        return self._entries[self._require(element)].priority

    def peek_min(self) -> E:
        """Return the root, an element with the minimum priority."""
        if not self._entries:
            raise EmptyQueueError("peek_min")
        return self._entries[0].element

    def remove_min(self) -> E:
        """
        Remove and return the element with the smallest priority.
        The root is swapped with the last slot, popped, and the new root
        is sunk back into place.
        """
        if not self._entries:
            raise EmptyQueueError("remove_min")
        self._swap(0, len(self._entries) - 1)
        node = self._entries.pop()
        del self._position[node.element]

        if self._entries:
            self._sift_down(0)
        return node.element

    def change_priority(self, element: E, priority: float) -> None:
        """
        Give *element* a new priority and move it up or down the heap.
        Only one direction can be violated by a single change.
        """
        idx = self._require(element)
        node = self._entries[idx]
        old_priority = node.priority
        node.priority = float(priority)

        if node.priority < old_priority:
            self._sift_up(idx)
        else:
            self._sift_down(idx)

    def size(self) -> int:
        """Return the number of queued elements."""
        return len(self._entries)

    # ------------------------------------------------------------------
    #   Bulk insertion / iteration
    # ------------------------------------------------------------------
    def extend(self, pairs: Iterable[Tuple[E, float]]) -> None:
        """
        Add a bunch of ``(element, priority)`` pairs, one ``add`` each.
        """
        for element, priority in pairs:
            self.add(element, priority)

    def __iter__(self) -> Iterator[E]:
        """Iterate over the elements in heap order (not sorted)."""
        return (node.element for node in self._entries)

    # ------------------------------------------------------------------
    #   Internal heap‑maintenance helpers
    # ------------------------------------------------------------------
    def _require(self, element: E) -> int:
        try:
            return self._position[element]
        except KeyError:
            raise NotFoundError(element) from None

    def _less(self, i: int, j: int) -> bool:
        return self._entries[i].priority < self._entries[j].priority

    def _swap(self, i: int, j: int) -> None:
        """Swap entries at positions i and j and keep `_position` in sync."""
        entries = self._entries
        entries[i], entries[j] = entries[j], entries[i]
        self._position[entries[i].element] = i
        self._position[entries[j].element] = j

    def _sift_up(self, idx: int) -> None:
        while idx > 0:
            parent = (idx - 1) // 2
            if not self._less(idx, parent):
                break
            self._swap(idx, parent)
            idx = parent

    def _sift_down(self, idx: int) -> None:
        n = len(self._entries)
        while (left := 2 * idx + 1) < n:
            smallest = left
            right = left + 1
            if right < n and self._less(right, left):
                smallest = right
            if not self._less(smallest, idx):
                break
            self._swap(idx, smallest)
            idx = smallest

    # ------------------------------------------------------------------
    #   Validation – useful while debugging and in tests
    # ------------------------------------------------------------------
    def validate(self) -> None:
        """
        Verify heap order and index consistency.
        Raises ``AssertionError`` naming the first broken invariant.
        """
        assert len(self._position) == len(
            self._entries
        ), "Index size does not match heap size"
        for i, node in enumerate(self._entries):
            assert (
                self._position.get(node.element) == i
            ), f"Index of {node.element!r} does not point at slot {i}"
            if i > 0:
                parent = self._entries[(i - 1) // 2]
                assert (
                    parent.priority <= node.priority
                ), f"Heap order violated between slot {(i - 1) // 2} and {i}"

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{node.element!r}: {node.priority!r}" for node in self._entries
        )
        return f"OptimizedHeapMinPQ({{{pairs}}})"
