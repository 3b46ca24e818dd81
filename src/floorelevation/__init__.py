"""Copy a floor slab's corner elevations into spot parameters."""
from floorelevation.model.geometry_primitives import Point3D
from floorelevation.ordering import InsufficientPointsError, OrderingMethod, OrderingResult, order_points

__all__ = [
    "InsufficientPointsError",
    "OrderingMethod",
    "OrderingResult",
    "Point3D",
    "order_points",
]
