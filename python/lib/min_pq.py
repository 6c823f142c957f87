#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
min_pq.py
---------

The contract shared by every minimum‑priority queue in this package.

A *MinPQ* stores unique, hashable elements, each paired with a numeric
priority.  Lower priority values come out first.  Two backends implement
the contract:

* ``UnsortedArrayMinPQ``  – a plain list, O(1) add / O(n) everything else.
  Slow but obviously correct, so the tests use it as an oracle.
* ``OptimizedHeapMinPQ``  – a binary heap plus an element → slot index,
  giving O(log n) add, remove_min and change_priority.

Callers should depend on ``MinPQ`` only and pick a backend at construction
time (see ``min_pq_factory.create_min_pq``).

Errors
~~~~~~
Every contract violation raises a subclass of ``MinPQError`` that also
derives from the matching built‑in, so ``except KeyError`` keeps working:

* ``DuplicateElementError`` (``ValueError``) – ``add`` of a present element
* ``NotFoundError``         (``KeyError``)   – lookup/update of an absent one
* ``EmptyQueueError``       (``IndexError``) – peek/remove on an empty queue

Typical usage
~~~~~~~~~~~~~
>>> from optimized_heap_min_pq import OptimizedHeapMinPQ
>>> pq = OptimizedHeapMinPQ()
>>> pq.add("a", 5.0)
>>> pq.add("b", 2.0)
>>> pq.peek_min()
'b'
>>> pq.change_priority("a", 1.0)
>>> pq.remove_min_k(2)
['a', 'b']
>>> pq.is_empty()
True
"""

from __future__ import annotations

from typing import (
    Any,
    Generic,
    Hashable,
    List,
    Protocol,
    TypeVar,
    runtime_checkable,
)

# ----------------------------------------------------------------------
#  Generic type variable (elements must be hashable for the index map)
# ----------------------------------------------------------------------
E = TypeVar("E", bound=Hashable)


# ----------------------------------------------------------------------
#  Error taxonomy
# ----------------------------------------------------------------------
class MinPQError(Exception):
    """Base class for all priority‑queue contract violations."""


class DuplicateElementError(MinPQError, ValueError):
    """Raised by ``add`` when the element is already in the queue."""

    def __init__(self, element: Any) -> None:
        super().__init__(f"Already contains {element!r}")
        self.element = element


class NotFoundError(MinPQError, KeyError):
    """Raised when looking up or updating an element that is not queued."""

    def __init__(self, element: Any) -> None:
        super().__init__(f"PQ does not contain {element!r}")
        self.element = element

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return str(self.args[0])


class EmptyQueueError(MinPQError, IndexError):
    """Raised by ``peek_min`` / ``remove_min`` on an empty queue."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"{operation} from an empty priority queue")
        self.operation = operation


# ----------------------------------------------------------------------
#  Element / priority pair
# ----------------------------------------------------------------------
class PriorityNode(Generic[E]):
    """An element together with its current priority value."""

    __slots__ = ("element", "priority")

    def __init__(self, element: E, priority: float) -> None:
        self.element = element
        self.priority = float(priority)

    def __repr__(self) -> str:
        return f"PriorityNode({self.element!r}, {self.priority!r})"


# ----------------------------------------------------------------------
#  The contract
# ----------------------------------------------------------------------
@runtime_checkable
class MinPQ(Protocol[E]):
    """
    Minimum‑priority queue interface.

    Backends declare ``MinPQ`` as their base to pick up the convenience
    methods at the bottom of this class; the abstract operations must be
    supplied by every backend.
    """

    __slots__ = ()

    def add(self, element: E, priority: float) -> None:
        """
        Insert *element* with the given *priority*.
        Raises ``DuplicateElementError`` if the element is already present.
        """
        ...

    def contains(self, element: E) -> bool:
        """Return ``True`` if *element* is currently in the queue."""
        ...

    def get_priority(self, element: E) -> float:
        """
        Return the current priority of *element*.
        Raises ``NotFoundError`` if the element is not present.
        """
        ...

    def peek_min(self) -> E:
        """
        Return, without removing, an element with the minimum priority.
        Raises ``EmptyQueueError`` if the queue is empty.
        """
        ...

    def remove_min(self) -> E:
        """
        Remove and return an element with the minimum priority.
        Raises ``EmptyQueueError`` if the queue is empty.
        """
        ...

    def change_priority(self, element: E, priority: float) -> None:
        """
        Replace the priority of *element* with *priority*.
        Raises ``NotFoundError`` if the element is not present.
        """
        ...

    def size(self) -> int:
        """Return the number of elements in the queue."""
        ...

    # ------------------------------------------------------------------
    #   Derived operations
    # ------------------------------------------------------------------
    def is_empty(self) -> bool:
        return self.size() == 0

    def remove_min_k(self, k: int) -> List[E]:
        """
        Remove and return up to *k* minimum elements, smallest first.
        Stops early if the queue runs out of elements.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        result: List[E] = []
        while len(result) < k and not self.is_empty():
            result.append(self.remove_min())
        return result

    # ------------------------------------------------------------------
    #   Python protocol support
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return self.size()

    def __contains__(self, element: Any) -> bool:
        return self.contains(element)

    def __bool__(self) -> bool:
        return not self.is_empty()
