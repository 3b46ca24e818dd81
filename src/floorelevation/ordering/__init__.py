"""
Ordering Layer
==============

Pure geometric core: deduplication, boundary chaining, canonical quad
orientation and the top-deviation fallback.

- No I/O, no host calls, no shared state
- Deterministic for a given input and tolerance
"""

from floorelevation.ordering.chain import build_nearest_neighbor_chain
from floorelevation.ordering.deduplicate import deduplicate_points
from floorelevation.ordering.fallback import select_top_deviation
from floorelevation.ordering.orientation import canonicalize_quad, enforce_clockwise, rotate_to_highest
from floorelevation.ordering.pipeline import (
    InsufficientPointsError,
    OrderingMethod,
    OrderingResult,
    order_points,
)

__all__ = [
    "InsufficientPointsError",
    "OrderingMethod",
    "OrderingResult",
    "build_nearest_neighbor_chain",
    "canonicalize_quad",
    "deduplicate_points",
    "enforce_clockwise",
    "order_points",
    "rotate_to_highest",
    "select_top_deviation",
]
