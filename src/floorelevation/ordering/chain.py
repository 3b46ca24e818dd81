"""
Nearest-Neighbor Chain Builder
==============================
Orders a unique point set into a loop that follows the boundary, by always
stepping to the closest point not yet visited.

Known limitation
----------------
The closure check compares the chain end points against the tolerance. After
deduplication two distinct points are always farther apart than the
tolerance, so in practice every chain of two or more points is reversed. The
check normalises the traversal direction; it is not a proof of a simple
(non self-intersecting) traversal, and concave or twisted quads can still
produce a crossing order.
"""
from __future__ import annotations

from typing import Sequence

import numpy as np

from floorelevation.config import DEFAULT_TOLERANCE
from floorelevation.model.geometry_primitives import Point3D
from floorelevation.model.geometry_utils import distance_matrix


def build_nearest_neighbor_chain(
    points: Sequence[Point3D],
    tolerance: float = DEFAULT_TOLERANCE
) -> list[Point3D]:
    """
    Greedy nearest-neighbor traversal starting at the first input point.

    Ties are resolved in favour of the point that comes first in `points`.
    If the finished chain does not close (first and last point further apart
    than `tolerance`), the whole chain is reversed.

    Args:
        points: Deduplicated points, at least one.
        tolerance: Closure distance.

    Returns:
        Every input point exactly once, in traversal order.
    """
    if not points:
        raise ValueError("Cannot build a chain from an empty point set.")

    distances = distance_matrix(points)
    visited = np.zeros(len(points), dtype=bool)

    current = 0
    visited[current] = True
    order = [current]

    while not visited.all():
        candidates = np.where(visited, np.inf, distances[current])
        # argmin returns the first index among equal minima
        current = int(np.argmin(candidates))
        visited[current] = True
        order.append(current)

    chain = [points[i] for i in order]

    if chain[0].distance_to(chain[-1]) > tolerance:
        chain.reverse()

    return chain
