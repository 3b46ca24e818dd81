"""Tests for the command-line interface."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from floorelevation.cli import main

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "assets" / "examples"


def test_order_prints_canonical_quad(capsys) -> None:
    code = main(["order", str(EXAMPLES_DIR / "sloped_slab_points.json")])

    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["method"] == "canonical_quad"
    assert output["unique_count"] == 4
    assert output["points"] == [[0.0, 10.0, 5.0], [10.0, 10.0, 0.0], [10.0, 0.0, 0.0], [0.0, 0.0, 0.0]]


def test_order_insufficient_points(tmp_path: Path, capsys) -> None:
    path = tmp_path / "pts.json"
    path.write_text("[[0, 0, 0], [1, 0, 0], [0, 1, 0]]", encoding="utf-8")

    assert main(["order", str(path)]) == 1
    assert "Insufficient points" in capsys.readouterr().err


def test_order_missing_file(tmp_path: Path) -> None:
    assert main(["order", str(tmp_path / "missing.json")]) == 1


def test_mark_all_writes_output(tmp_path: Path, shared_parameter_path: str, capsys) -> None:
    model_path = tmp_path / "model.json"
    shutil.copy(EXAMPLES_DIR / "floors_model.json", model_path)
    output_path = tmp_path / "out.json"

    code = main([
        "mark", str(model_path), "--all",
        "--shared-parameters", shared_parameter_path,
        "--output", str(output_path),
    ])

    assert code == 0
    assert "Skipped floors: F3" in capsys.readouterr().out
    saved = json.loads(output_path.read_text(encoding="utf-8"))
    f1 = next(f for f in saved["floors"] if f["id"] == "F1")
    assert f1["parameters"]["SpotElevation_1"] == 5.0


def test_mark_single_floor_in_place(tmp_path: Path, shared_parameter_path: str) -> None:
    model_path = tmp_path / "model.json"
    shutil.copy(EXAMPLES_DIR / "floors_model.json", model_path)

    code = main(["mark", str(model_path), "--floor", "F2", "--shared-parameters", shared_parameter_path])

    assert code == 0
    saved = json.loads(model_path.read_text(encoding="utf-8"))
    f2 = next(f for f in saved["floors"] if f["id"] == "F2")
    assert f2["parameters"]["SpotElevation_1"] == 3.4
    assert f2["parameters"]["SpotCoordinate_N1"] == 8.0
    assert f2["parameters"]["SpotCoordinate_E1"] == 4.0


def test_mark_fails_for_degenerate_floor(tmp_path: Path, shared_parameter_path: str) -> None:
    model_path = tmp_path / "model.json"
    shutil.copy(EXAMPLES_DIR / "floors_model.json", model_path)
    before = model_path.read_text(encoding="utf-8")

    code = main(["mark", str(model_path), "--floor", "F3", "--shared-parameters", shared_parameter_path])

    assert code == 1
    assert model_path.read_text(encoding="utf-8") == before
