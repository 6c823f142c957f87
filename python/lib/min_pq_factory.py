#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
min_pq_factory.py
-----------------

Pick a ``MinPQ`` backend by name at construction time.

>>> from min_pq_factory import create_min_pq
>>> pq = create_min_pq("unsorted", {"a": 2.0, "b": 1.0})
>>> pq.peek_min()
'b'
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Mapping, Optional

from min_pq import E, MinPQ
from optimized_heap_min_pq import OptimizedHeapMinPQ
from unsorted_array_min_pq import UnsortedArrayMinPQ

logger = logging.getLogger(__name__)

DEFAULT_BACKEND = "heap"

# Backend name -> constructor taking an optional element/priority mapping.
BACKENDS: Dict[str, Callable[[Optional[Mapping]], MinPQ]] = {
    "heap": OptimizedHeapMinPQ,
    "unsorted": UnsortedArrayMinPQ,
}


def create_min_pq(
    backend: str = DEFAULT_BACKEND,
    elements_and_priorities: Optional[Mapping[E, float]] = None,
) -> MinPQ[E]:
    """
    Return a new, optionally pre‑loaded queue of the requested *backend*.
    Raises ``ValueError`` for an unknown backend name.
    """
    try:
        constructor = BACKENDS[backend]
    except KeyError:
        choices = ", ".join(sorted(BACKENDS))
        raise ValueError(
            f"Unknown MinPQ backend {backend!r} (choose from {choices})"
        ) from None
    logger.debug("creating %s MinPQ", backend)
    return constructor(elements_and_priorities)
