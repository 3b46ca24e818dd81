"""
Point Ordering Pipeline
=======================
Entry point of the geometric core: raw boundary samples in, four ordered
corners out.

Flow:
    raw points -> deduplicate -> (n == 4) nearest-neighbor chain -> canonical quad
                              -> (n > 4)  top-deviation selection
                              -> (n < 4)  InsufficientPointsError

Every call is independent and deterministic for a given input and tolerance.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Iterable, Sequence, Union

from floorelevation.config import DEFAULT_TOLERANCE, QUAD_POINT_COUNT
from floorelevation.model.geometry_primitives import Point3D
from floorelevation.ordering.chain import build_nearest_neighbor_chain
from floorelevation.ordering.deduplicate import deduplicate_points
from floorelevation.ordering.fallback import select_top_deviation
from floorelevation.ordering.orientation import canonicalize_quad

logger = logging.getLogger(__name__)

PointLike = Union[Point3D, Sequence[float]]


class InsufficientPointsError(ValueError):
    """Fewer unique points than corners remain after deduplication."""

    def __init__(self, unique_count: int, required: int = QUAD_POINT_COUNT):
        self.unique_count = unique_count
        self.required = required
        super().__init__(
            f"Insufficient points: {unique_count} unique point(s) after deduplication, "
            f"at least {required} required."
        )


class OrderingMethod(StrEnum):
    CANONICAL_QUAD = "canonical_quad"
    TOP_DEVIATION = "top_deviation"


@dataclass(frozen=True)
class OrderingResult:
    """
    Ordered corners handed to the spot parameter writer.

    Attributes:
        points: Output positions 0..3, mapped to spot slots 1..4.
        method: CANONICAL_QUAD (highest first, clockwise) or TOP_DEVIATION (descending |z|, no winding).
        unique_count: Number of points left after deduplication.
    """
    points: tuple[Point3D, ...]
    method: OrderingMethod
    unique_count: int

    @property
    def is_canonical(self) -> bool:
        return self.method == OrderingMethod.CANONICAL_QUAD


def order_points(
    raw_points: Iterable[PointLike],
    epsilon: float = DEFAULT_TOLERANCE
) -> OrderingResult:
    """
    Order raw boundary samples into the four corners of a floor.

    Args:
        raw_points: Samples from the face boundary, as Point3D or [x, y, z] sequences.
        epsilon: Tolerance for deduplication and loop closure.

    Returns:
        OrderingResult with four points.

    Raises:
        InsufficientPointsError: Fewer than four unique points.
    """
    points = [p if isinstance(p, Point3D) else Point3D.from_sequence(p) for p in raw_points]
    unique = deduplicate_points(points, tolerance=epsilon)
    logger.debug(f"Deduplicated {len(points)} samples to {len(unique)} unique points.")

    if len(unique) < QUAD_POINT_COUNT:
        raise InsufficientPointsError(len(unique))

    if len(unique) == QUAD_POINT_COUNT:
        loop = build_nearest_neighbor_chain(unique, tolerance=epsilon)
        ordered = canonicalize_quad(loop)
        method = OrderingMethod.CANONICAL_QUAD
    else:
        ordered = select_top_deviation(unique)
        method = OrderingMethod.TOP_DEVIATION

    logger.debug(f"Ordered corners using {method}.")
    return OrderingResult(points=tuple(ordered), method=method, unique_count=len(unique))
