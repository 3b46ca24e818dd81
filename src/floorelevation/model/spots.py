"""
Spot Parameter Mapping
======================
Maps ordered corner positions 0..3 onto the numbered spot parameters of a floor.

Slot i (1-based) receives:
    SpotElevation_i     <- z
    SpotCoordinate_Ni   <- y (northing)
    SpotCoordinate_Ei   <- x (easting)
"""
from __future__ import annotations

from typing import Dict, List, Sequence

from floorelevation.config import (
    QUAD_POINT_COUNT,
    SPOT_EASTING_TEMPLATE,
    SPOT_ELEVATION_TEMPLATE,
    SPOT_NORTHING_TEMPLATE,
)
from floorelevation.model.geometry_primitives import Point3D


def elevation_name(index: int) -> str:
    return SPOT_ELEVATION_TEMPLATE.format(index=index)


def northing_name(index: int) -> str:
    return SPOT_NORTHING_TEMPLATE.format(index=index)


def easting_name(index: int) -> str:
    return SPOT_EASTING_TEMPLATE.format(index=index)


def spot_parameter_names(index: int, include_coordinates: bool = True) -> List[str]:
    """Parameter names for a 1-based slot index."""
    if not 1 <= index <= QUAD_POINT_COUNT:
        raise ValueError(f"Slot index must be between 1 and {QUAD_POINT_COUNT}, got {index}.")
    names = [elevation_name(index)]
    if include_coordinates:
        names.extend([northing_name(index), easting_name(index)])
    return names


def required_parameter_names(include_coordinates: bool = True) -> List[str]:
    """All spot parameter names: elevations first, then the N/E pairs."""
    slots = range(1, QUAD_POINT_COUNT + 1)
    names = [elevation_name(i) for i in slots]
    if include_coordinates:
        for i in slots:
            names.extend([northing_name(i), easting_name(i)])
    return names


def spot_values(points: Sequence[Point3D], include_coordinates: bool = True) -> Dict[str, float]:
    """
    Values to write for each ordered point.

    Args:
        points: Ordered output of the point ordering (at most four).
        include_coordinates: Also emit the N/E coordinate parameters.

    Returns:
        Mapping of parameter name to value. Slots without a point are absent.
    """
    if len(points) > QUAD_POINT_COUNT:
        raise ValueError(f"At most {QUAD_POINT_COUNT} points can be mapped, got {len(points)}.")

    values: Dict[str, float] = {}
    for position, point in enumerate(points):
        index = position + 1
        values[elevation_name(index)] = point.z
        if include_coordinates:
            values[northing_name(index)] = point.y
            values[easting_name(index)] = point.x
    return values
