"""
Input/Output Manager (JSON)
Loads and saves floor models, and provides a file-backed host for the commands.

Model document::

    {
        "shared_parameters_filename": null,
        "selected_floor": "F1",
        "bindings": ["SpotElevation_1", ...],
        "floors": [
            {
                "id": "F1",
                "name": "Level 1 slab",
                "top_face_points": [[0, 0, 0], [10, 0, 0], ...],
                "parameters": {"SpotElevation_1": null, ...}
            }
        ]
    }
"""
from __future__ import annotations

import copy
import json
import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union

from floorelevation.model.geometry_primitives import Point3D
from floorelevation.model.shared_parameters import ParameterDefinition

# Get module logger
logger = logging.getLogger(__name__)

FloorId = Union[str, int]


@dataclass
class JsonFloor:
    """A floor stored in a JSON model."""
    id: FloorId
    points: List[Point3D] = field(default_factory=list)
    parameters: Dict[str, Optional[float]] = field(default_factory=dict)
    name: str = ""

    @property
    def element_id(self) -> FloorId:
        return self.id

    def top_face_points(self) -> List[Point3D]:
        return list(self.points)

    def set_parameter(self, name: str, value: float) -> bool:
        if name not in self.parameters:
            return False
        self.parameters[name] = float(value)
        return True

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "top_face_points": [p.to_list() for p in self.points],
            "parameters": dict(self.parameters),
        }
        if self.name:
            data["name"] = self.name
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> JsonFloor:
        if "id" not in data:
            raise ValueError("Floor entry without 'id'.")
        raw_points = data.get("top_face_points", [])
        parameters = data.get("parameters", {})
        if not isinstance(raw_points, list) or not isinstance(parameters, dict):
            raise ValueError(f"Floor '{data['id']}': 'top_face_points' must be a list and 'parameters' an object.")
        return cls(
            id=data["id"],
            points=[Point3D.from_sequence(p) for p in raw_points],
            parameters={k: (None if v is None else float(v)) for k, v in parameters.items()},
            name=data.get("name", ""),
        )


@dataclass
class JsonFloorModel:
    """
    File-backed implementation of the host capability interface.

    Binding a definition adds the parameter to every floor (like an instance
    binding on the floor category). Transactions snapshot the floor parameters
    and put them back if the block raises. Messages go to the log.
    """
    floors_list: List[JsonFloor] = field(default_factory=list)
    shared_parameters_filename: Optional[str] = None
    selected_floor: Optional[FloorId] = None
    bindings: List[str] = field(default_factory=list)
    messages: List[tuple[str, str]] = field(default_factory=list)

    def floors(self) -> List[JsonFloor]:
        return list(self.floors_list)

    def floor(self, floor_id: FloorId) -> JsonFloor:
        for f in self.floors_list:
            if f.id == floor_id or str(f.id) == str(floor_id):
                return f
        raise KeyError(f"No floor with id '{floor_id}'")

    def pick_floor(self) -> Optional[JsonFloor]:
        if self.selected_floor is None:
            return None
        try:
            return self.floor(self.selected_floor)
        except KeyError:
            logger.warning(f"Selected floor '{self.selected_floor}' does not exist.")
            return None

    def bind_floor_parameters(self, definitions: Sequence[ParameterDefinition]) -> None:
        for definition in definitions:
            if definition.name not in self.bindings:
                self.bindings.append(definition.name)
            for f in self.floors_list:
                f.parameters.setdefault(definition.name, None)
        logger.debug(f"Bound {len(definitions)} definition(s) to {len(self.floors_list)} floor(s).")

    @contextmanager
    def transaction(self, name: str) -> Iterator[None]:
        snapshot = copy.deepcopy([f.parameters for f in self.floors_list])
        bindings = list(self.bindings)
        logger.debug(f"Transaction started: {name}")
        try:
            yield
        except Exception:
            for f, params in zip(self.floors_list, snapshot):
                f.parameters = params
            self.bindings = bindings
            logger.warning(f"Transaction rolled back: {name}")
            raise
        logger.debug(f"Transaction committed: {name}")

    def show_message(self, title: str, message: str) -> None:
        self.messages.append((title, message))
        log = logger.error if title.lower().endswith("error") else logger.info
        log(f"{title}: {message}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shared_parameters_filename": self.shared_parameters_filename,
            "selected_floor": self.selected_floor,
            "bindings": list(self.bindings),
            "floors": [f.to_dict() for f in self.floors_list],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> JsonFloorModel:
        if not isinstance(data, dict) or not isinstance(data.get("floors", []), list):
            raise ValueError("Model must be an object with a 'floors' list.")
        return cls(
            floors_list=[JsonFloor.from_dict(f) for f in data.get("floors", [])],
            shared_parameters_filename=data.get("shared_parameters_filename"),
            selected_floor=data.get("selected_floor"),
            bindings=list(data.get("bindings", [])),
        )


class IOManager:

    @staticmethod
    def load_model(filepath: str) -> JsonFloorModel:
        logger.info(f"Loading model from: {filepath}")
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"Model file not found: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            model = JsonFloorModel.from_dict(data)
        except (json.JSONDecodeError, ValueError, TypeError) as e:
            msg = f"Invalid model file '{filepath}': {e}"
            logger.error(msg)
            raise ValueError(msg) from e
        logger.info(f"Loaded {len(model.floors_list)} floor(s).")
        return model

    @staticmethod
    def save_model(model: JsonFloorModel, filepath: str) -> None:
        logger.info(f"Saving model to: {filepath}")
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                json.dump(model.to_dict(), f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save model: {e}")
            raise

    @staticmethod
    def load_points(filepath: str) -> List[Point3D]:
        """Read a point list: either `[[x, y, z], ...]` or `{"points": [[x, y, z], ...]}`."""
        if not os.path.exists(filepath):
            raise FileNotFoundError(f"Points file not found: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
            raw = data["points"] if isinstance(data, dict) else data
            if not isinstance(raw, list):
                raise ValueError("'points' must be a list")
            return [Point3D.from_sequence(p) for p in raw]
        except (json.JSONDecodeError, KeyError, ValueError, TypeError) as e:
            msg = f"Invalid points file '{filepath}': {e}"
            logger.error(msg)
            raise ValueError(msg) from e
