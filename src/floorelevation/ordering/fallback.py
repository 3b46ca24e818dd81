"""Fallback selection for boundaries that are not a simple quadrilateral."""
from __future__ import annotations

from typing import Sequence

from floorelevation.config import QUAD_POINT_COUNT
from floorelevation.model.geometry_primitives import Point3D


def select_top_deviation(
    points: Sequence[Point3D],
    count: int = QUAD_POINT_COUNT
) -> list[Point3D]:
    """
    Pick the points that deviate most from the zero datum.

    Points are ordered by descending |z|; equal deviations keep their input
    order (sorted() is stable). No rotation or winding is applied. With fewer
    than `count` points all of them are returned; enforcing a minimum is up to
    the caller.
    """
    ranked = sorted(points, key=lambda p: abs(p.z), reverse=True)
    return ranked[:count]
