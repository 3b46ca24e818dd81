"""
Point Deduplication
===================
Tessellated edges share their end points, so the raw samples of a face
boundary contain every corner more than once. This module collapses them.
"""
from __future__ import annotations

from typing import Iterable

import numpy as np

from floorelevation.config import DEFAULT_TOLERANCE
from floorelevation.model.geometry_primitives import Point3D


def deduplicate_points(
    points: Iterable[Point3D],
    tolerance: float = DEFAULT_TOLERANCE
) -> list[Point3D]:
    """
    Remove near-duplicate points, keeping the first occurrence of each group.

    Args:
        points: Raw samples, possibly with exact or near-duplicates.
        tolerance: Two points closer than or equal to this (Euclidean 3D) are the same point.

    Returns:
        The unique points in first-seen order. No spatial sorting is applied.
    """
    if tolerance < 0.0:
        raise ValueError(f"Tolerance must be non-negative, got {tolerance}.")

    unique: list[Point3D] = []
    kept = np.empty((0, 3), dtype=np.float64)

    for point in points:
        coords = point.to_array()
        if len(kept) and np.min(np.linalg.norm(kept - coords, axis=1)) <= tolerance:
            continue
        unique.append(point)
        kept = np.vstack((kept, coords))

    return unique
