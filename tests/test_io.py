"""Tests for the JSON model input/output."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from floorelevation.model.geometry_primitives import Point3D
from floorelevation.model.io import IOManager, JsonFloor, JsonFloorModel

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "assets" / "examples"


class TestLoadModel:
    def test_bundled_example(self) -> None:
        model = IOManager.load_model(str(EXAMPLES_DIR / "floors_model.json"))
        assert [f.id for f in model.floors()] == ["F1", "F2", "F3"]
        assert model.pick_floor().name == "Sloped ramp slab"
        assert len(model.floor("F1").top_face_points()) == 8

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            IOManager.load_model(str(tmp_path / "missing.json"))

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError):
            IOManager.load_model(str(path))

    def test_floor_without_id(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"floors": [{"top_face_points": []}]}), encoding="utf-8")
        with pytest.raises(ValueError):
            IOManager.load_model(str(path))

    def test_bad_point(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"floors": [{"id": 1, "top_face_points": [[0, 0]]}]}), encoding="utf-8")
        with pytest.raises(ValueError):
            IOManager.load_model(str(path))


class TestSaveModel:
    def test_save_then_load_keeps_values(self, tmp_path: Path) -> None:
        model = JsonFloorModel(
            floors_list=[JsonFloor(id=7, points=[Point3D(1, 2, 3)], parameters={"SpotElevation_1": 3.0})],
            shared_parameters_filename="host.txt",
        )
        path = tmp_path / "model.json"
        IOManager.save_model(model, str(path))
        loaded = IOManager.load_model(str(path))

        floor = loaded.floor(7)
        assert floor.points == [Point3D(1.0, 2.0, 3.0)]
        assert floor.parameters == {"SpotElevation_1": 3.0}
        assert loaded.shared_parameters_filename == "host.txt"


class TestJsonFloorModel:
    def test_floor_lookup_accepts_string_id(self) -> None:
        model = JsonFloorModel(floors_list=[JsonFloor(id=12)])
        assert model.floor("12").id == 12

    def test_unknown_floor(self) -> None:
        with pytest.raises(KeyError):
            JsonFloorModel().floor("nope")

    def test_pick_unknown_selection(self) -> None:
        assert JsonFloorModel(selected_floor="ghost").pick_floor() is None

    def test_set_parameter_requires_binding(self) -> None:
        floor = JsonFloor(id="F")
        assert not floor.set_parameter("SpotElevation_1", 1.0)
        floor.parameters["SpotElevation_1"] = None
        assert floor.set_parameter("SpotElevation_1", 1.0)
        assert floor.parameters["SpotElevation_1"] == 1.0


class TestLoadPoints:
    def test_object_form(self) -> None:
        points = IOManager.load_points(str(EXAMPLES_DIR / "sloped_slab_points.json"))
        assert len(points) == 8
        assert points[0] == Point3D(0.0, 0.0, 0.0)

    def test_list_form(self, tmp_path: Path) -> None:
        path = tmp_path / "pts.json"
        path.write_text("[[1, 2, 3]]", encoding="utf-8")
        assert IOManager.load_points(str(path)) == [Point3D(1.0, 2.0, 3.0)]

    def test_missing_key(self, tmp_path: Path) -> None:
        path = tmp_path / "pts.json"
        path.write_text('{"pts": []}', encoding="utf-8")
        with pytest.raises(ValueError):
            IOManager.load_points(str(path))
