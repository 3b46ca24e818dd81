"""
Highest-Point Rotation & Winding Correction
===========================================
Turns a 4-point loop into the canonical form written to the spot parameters:
the highest corner first, the other three following clockwise when viewed
from above.
"""
from __future__ import annotations

import logging
from typing import Sequence

from floorelevation.config import QUAD_POINT_COUNT
from floorelevation.model.geometry_primitives import Point3D
from floorelevation.model.geometry_utils import projected_turn

logger = logging.getLogger(__name__)


def rotate_to_highest(loop: Sequence[Point3D]) -> list[Point3D]:
    """Cyclically rotate the loop so the point with maximum z comes first (first occurrence wins)."""
    if not loop:
        return []
    highest_index = max(range(len(loop)), key=lambda i: (loop[i].z, -i))
    return list(loop[highest_index:]) + list(loop[:highest_index])


def enforce_clockwise(loop: Sequence[Point3D]) -> list[Point3D]:
    """
    Reverse the three trailing points if they run counter-clockwise around point 0.

    Only the XY projection is considered. When the unit directions from point 0
    to point 1 and to point 3 turn counter-clockwise (positive cross product z),
    points 1..3 are reversed in place; otherwise the loop is returned unchanged.
    """
    _require_quad(loop)
    head, rest = loop[0], list(loop[1:])

    turn = projected_turn(head, rest[0], rest[-1])
    if turn > 0:
        logger.debug(f"Counter-clockwise remainder (turn={turn:.6f}), reversing.")
        rest.reverse()

    return [head] + rest


def canonicalize_quad(loop: Sequence[Point3D]) -> list[Point3D]:
    """
    Highest point first, remaining points clockwise from above.

    Args:
        loop: A boundary loop of exactly four points.

    Returns:
        The canonical quad. Point 0 has the maximum z and the signed XY area of
        the sequence is non-positive.
    """
    _require_quad(loop)
    return enforce_clockwise(rotate_to_highest(loop))


def _require_quad(loop: Sequence[Point3D]) -> None:
    if len(loop) != QUAD_POINT_COUNT:
        raise ValueError(f"Expected a loop of {QUAD_POINT_COUNT} points, got {len(loop)}.")
