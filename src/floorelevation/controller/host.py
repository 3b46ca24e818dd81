"""
Host Capability Interface
=========================
The narrow set of operations the commands need from a CAD host. A host
adapter (the JSON model in `floorelevation.model.io`, or a plugin wrapping a
real CAD API) implements these protocols; the ordering core never sees them.
"""
from __future__ import annotations

from typing import ContextManager, Hashable, Iterable, List, Optional, Protocol, Sequence, runtime_checkable

from floorelevation.model.geometry_primitives import Point3D
from floorelevation.model.shared_parameters import ParameterDefinition


@runtime_checkable
class FloorElement(Protocol):
    """A floor slab in the host document."""

    @property
    def element_id(self) -> Hashable: ...

    def top_face_points(self) -> List[Point3D]:
        """Raw tessellated samples of the top face boundary (duplicates allowed)."""
        ...

    def set_parameter(self, name: str, value: float) -> bool:
        """Write a numeric parameter. Returns False if it does not exist or is not numeric."""
        ...


@runtime_checkable
class FloorHost(Protocol):
    """The host document and its UI services."""

    shared_parameters_filename: Optional[str]

    def floors(self) -> Iterable[FloorElement]: ...

    def pick_floor(self) -> Optional[FloorElement]:
        """Ask the user for a floor. None if cancelled or nothing was selected."""
        ...

    def bind_floor_parameters(self, definitions: Sequence[ParameterDefinition]) -> None:
        """Bind the definitions as instance parameters of the floor category (idempotent)."""
        ...

    def transaction(self, name: str) -> ContextManager[None]:
        """Commit on normal exit, roll back when the block raises."""
        ...

    def show_message(self, title: str, message: str) -> None: ...
