"""
Floor Elevation Commands
========================
The two user-facing commands of the tool, written against the host
capability interface.

- mark_floor:      one picked floor; elevation and N/E coordinates per corner.
- mark_all_floors: every floor in the document; elevations only, floors with
                   too few corners are skipped.

Both load the shared parameter definitions first. The host's configured shared
parameter file is swapped for ours during the load and restored afterwards,
whatever happens in between.
"""
from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Hashable, Iterator, List, Optional

from floorelevation.config import (
    DEFAULT_SHARED_PARAMETER_FILE,
    DEFAULT_TOLERANCE,
    LOAD_PARAMETERS_TRANSACTION,
    SET_PARAMETERS_TRANSACTION,
    SHARED_PARAMETER_GROUP,
)
from floorelevation.controller.host import FloorElement, FloorHost
from floorelevation.model.shared_parameters import SharedParameterError, SharedParameterFile
from floorelevation.model.spots import required_parameter_names, spot_values
from floorelevation.ordering import InsufficientPointsError, order_points

logger = logging.getLogger(__name__)


class CommandStatus(StrEnum):
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass
class CommandResult:
    status: CommandStatus
    message: str = ""
    processed: List[Hashable] = field(default_factory=list)
    skipped: List[Hashable] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == CommandStatus.SUCCEEDED


@contextmanager
def swapped_shared_parameter_file(host: FloorHost, path: str) -> Iterator[str]:
    """Point the host at `path` for the duration of the block, then restore the previous file."""
    original = host.shared_parameters_filename
    host.shared_parameters_filename = path
    logger.debug(f"Shared parameter file swapped: {original} -> {path}")
    try:
        yield path
    finally:
        host.shared_parameters_filename = original
        logger.debug(f"Shared parameter file restored: {original}")


def load_shared_parameters(
    host: FloorHost,
    path: str = DEFAULT_SHARED_PARAMETER_FILE,
    include_coordinates: bool = True
) -> bool:
    """
    Make sure the spot parameters exist in the file and are bound to floors.

    Missing group or definitions are created (LENGTH) and the file is written
    back. Problems are reported to the user through the host.

    Returns:
        True if all parameters are bound, False otherwise.
    """
    if not os.path.exists(path):
        host.show_message("Error", f"Shared parameter file missing: {path}")
        return False

    names = required_parameter_names(include_coordinates)

    try:
        with swapped_shared_parameter_file(host, path):
            spf = SharedParameterFile.read(path)
            known = len(spf.definitions)

            with host.transaction(LOAD_PARAMETERS_TRANSACTION):
                group = spf.ensure_group(SHARED_PARAMETER_GROUP)
                definitions = [spf.ensure_length_parameter(group, name) for name in names]

                host.bind_floor_parameters(definitions)

                # Only touch the file once the host accepted the definitions
                if len(spf.definitions) != known:
                    spf.write(path)
    except SharedParameterError as e:
        logger.error(f"Failed to load shared parameters from '{path}': {e}")
        host.show_message("Parameter Error", f"Failed to load parameters: {e}")
        return False

    logger.info(f"Bound {len(names)} spot parameter(s) from {path}")
    return True


def _write_spots(
    host: FloorHost,
    floor: FloorElement,
    values: dict[str, float],
    reported_missing: set[str]
) -> None:
    for name, value in values.items():
        if not floor.set_parameter(name, value) and name not in reported_missing:
            reported_missing.add(name)
            logger.warning(f"Parameter {name} not found on floor {floor.element_id}.")
            host.show_message("Error", f"Parameter {name} not found. Check shared parameters.")


def mark_floor(
    host: FloorHost,
    floor: Optional[FloorElement] = None,
    tolerance: float = DEFAULT_TOLERANCE,
    shared_parameter_path: str = DEFAULT_SHARED_PARAMETER_FILE
) -> CommandResult:
    """
    Write the four ordered corners of a single floor.

    Args:
        host: Host document.
        floor: Floor to process. When None the user is asked to pick one.
        tolerance: Point tolerance for the ordering.
        shared_parameter_path: Shared parameter file holding the spot definitions.

    Returns:
        CommandResult; CANCELLED when nothing was picked.
    """
    if floor is None:
        floor = host.pick_floor()
        if floor is None:
            host.show_message("Error", "No floor selected")
            return CommandResult(CommandStatus.CANCELLED, "No floor selected")

    if not load_shared_parameters(host, shared_parameter_path, include_coordinates=True):
        return CommandResult(CommandStatus.FAILED, "Shared parameters could not be loaded")

    try:
        result = order_points(floor.top_face_points(), epsilon=tolerance)
    except InsufficientPointsError as e:
        logger.warning(f"Floor {floor.element_id}: {e}")
        host.show_message("Error", "Insufficient top surface points found")
        return CommandResult(
            CommandStatus.FAILED,
            "Insufficient top surface points found",
            skipped=[floor.element_id]
        )

    logger.info(f"Floor {floor.element_id}: {len(result.points)} corner(s) via {result.method}")

    with host.transaction(SET_PARAMETERS_TRANSACTION):
        _write_spots(host, floor, spot_values(result.points, include_coordinates=True), set())

    host.show_message("Success", "Parameters updated successfully")
    return CommandResult(
        CommandStatus.SUCCEEDED,
        "Parameters updated successfully",
        processed=[floor.element_id]
    )


def mark_all_floors(
    host: FloorHost,
    tolerance: float = DEFAULT_TOLERANCE,
    shared_parameter_path: str = DEFAULT_SHARED_PARAMETER_FILE
) -> CommandResult:
    """
    Write corner elevations for every floor in the document.

    Floors with fewer than four unique corners are skipped. Coordinates are not
    written in this mode. All floors are updated in one transaction.
    """
    if not load_shared_parameters(host, shared_parameter_path, include_coordinates=False):
        return CommandResult(CommandStatus.FAILED, "Shared parameters could not be loaded")

    processed: List[Hashable] = []
    skipped: List[Hashable] = []
    reported_missing: set[str] = set()

    with host.transaction(SET_PARAMETERS_TRANSACTION):
        for floor in host.floors():
            try:
                result = order_points(floor.top_face_points(), epsilon=tolerance)
            except InsufficientPointsError as e:
                logger.warning(f"Skipping floor {floor.element_id}: {e}")
                skipped.append(floor.element_id)
                continue

            _write_spots(host, floor, spot_values(result.points, include_coordinates=False), reported_missing)
            processed.append(floor.element_id)

    logger.info(f"Processed {len(processed)} floor(s), skipped {len(skipped)}.")
    message = "Elevation data written successfully for all floors"
    host.show_message("Success", message)
    return CommandResult(CommandStatus.SUCCEEDED, message, processed=processed, skipped=skipped)
