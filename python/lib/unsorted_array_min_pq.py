#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
unsorted_array_min_pq.py
------------------------

The baseline ``MinPQ``: element/priority pairs kept in a plain list in no
particular order.  ``add`` is O(1) (after an O(n) duplicate check); every
other operation is a linear scan.

It exists as a correctness oracle – anything that holds for the heap
backend must hold here as well.
"""

from __future__ import annotations

from typing import List, Mapping, Optional

from min_pq import (
    DuplicateElementError,
    E,
    EmptyQueueError,
    MinPQ,
    NotFoundError,
    PriorityNode,
)


class UnsortedArrayMinPQ(MinPQ[E]):
    """
    Unsorted list implementation of the ``MinPQ`` contract.
    Elements must be hashable, like every ``MinPQ`` backend, even though
    this one only ever compares them with ``==``.
    """

    __slots__ = ("_elements",)

    def __init__(
        self, elements_and_priorities: Optional[Mapping[E, float]] = None
    ) -> None:
        """
        Create an empty queue, or one holding every element of
        *elements_and_priorities* with its mapped priority.
        """
        self._elements: List[PriorityNode[E]] = []
        if elements_and_priorities is not None:
            for element, priority in elements_and_priorities.items():
                self.add(element, priority)

    # ------------------------------------------------------------------
    #   Core public API
    # ------------------------------------------------------------------
    def add(self, element: E, priority: float) -> None:
        """
        Append *element* with the given *priority*.
        Raises ``DuplicateElementError`` if the element is already present,
        ``TypeError`` if it is not hashable.
        """
        hash(element)  # same TypeError the heap backend raises
        if self.contains(element):
            raise DuplicateElementError(element)
        self._elements.append(PriorityNode(element, priority))

    def contains(self, element: E) -> bool:
        """Linear membership test."""
        return self._index_of(element) is not None

    def get_priority(self, element: E) -> float:
        """Return the priority of *element*; ``NotFoundError`` if absent."""
        return self._elements[self._require(element)].priority

    def peek_min(self) -> E:
        """Return the first element with the minimum priority."""
        if not self._elements:
            raise EmptyQueueError("peek_min")
        return self._elements[self._index_of_min()].element

    def remove_min(self) -> E:
        """Remove and return the first element with the minimum priority."""
        if not self._elements:
            raise EmptyQueueError("remove_min")
        return self._elements.pop(self._index_of_min()).element

    def change_priority(self, element: E, priority: float) -> None:
        """Overwrite the priority of *element*; ``NotFoundError`` if absent."""
        self._elements[self._require(element)].priority = float(priority)

    def size(self) -> int:
        """Return the number of queued elements."""
        return len(self._elements)

    # ------------------------------------------------------------------
    #   Linear‑scan helpers
    # ------------------------------------------------------------------
    def _index_of(self, element: E) -> Optional[int]:
        for i, node in enumerate(self._elements):
            if node.element == element:
                return i
        return None

    def _require(self, element: E) -> int:
        idx = self._index_of(element)
        if idx is None:
            raise NotFoundError(element)
        return idx

    def _index_of_min(self) -> int:
        # First minimum wins, so ties resolve in insertion order.
        best = 0
        for i in range(1, len(self._elements)):
            if self._elements[i].priority < self._elements[best].priority:
                best = i
        return best

    def __repr__(self) -> str:
        pairs = ", ".join(
            f"{node.element!r}: {node.priority!r}" for node in self._elements
        )
        return f"UnsortedArrayMinPQ({{{pairs}}})"
