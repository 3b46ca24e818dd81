from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from floorelevation.model.geometry_primitives import Point3D, points_to_array


def distance_matrix(points: Sequence[Point3D]) -> npt.NDArray[np.float64]:
    """
    Pairwise Euclidean 3D distances.

    Args:
        points: Sequence of N points.

    Returns:
        Array of shape (N, N) where entry (i, j) is the distance between point i and j.
    """
    coords = points_to_array(points)
    diff = coords[:, np.newaxis, :] - coords[np.newaxis, :, :]
    return np.linalg.norm(diff, axis=-1)


def signed_area_xy(points: Sequence[Point3D]) -> float:
    """
    Signed area of the polygon's projection onto the XY plane (shoelace formula).

    The polygon is closed implicitly (last point connects back to the first).
    Looking down the +Z axis a counter-clockwise traversal is positive and a
    clockwise one negative. Fewer than three points give 0.0.
    """
    if len(points) < 3:
        return 0.0
    coords = points_to_array(points)
    x = coords[:, 0]
    y = coords[:, 1]
    x_next = np.roll(x, -1)
    y_next = np.roll(y, -1)
    return float(0.5 * np.sum(x * y_next - x_next * y))


def projected_turn(origin: Point3D, first: Point3D, last: Point3D) -> float:
    """
    Z component of the cross product of the unit XY directions origin->first and origin->last.

    Positive when `last` lies counter-clockwise of `first` as seen from `origin`
    (right-handed, z up). Coincident projections give a zero direction and so 0.0.
    """
    o = origin.projected()
    v1 = (first.projected() - o).normalize()
    v3 = (last.projected() - o).normalize()
    return v1.cross(v3).z
