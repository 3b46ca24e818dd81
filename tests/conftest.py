"""Shared fixtures."""
from __future__ import annotations

import logging
import shutil
from pathlib import Path

import pytest

from floorelevation.config import SHARED_PARAMETER_FILE_NAME
from floorelevation.model.geometry_primitives import Point3D

ASSETS_DIR = Path(__file__).resolve().parent.parent / "assets"


@pytest.fixture
def square_corners() -> list[Point3D]:
    """Corners of a 10 x 10 slab raised 5 units at the fourth corner."""
    return [
        Point3D(0.0, 0.0, 0.0),
        Point3D(10.0, 0.0, 0.0),
        Point3D(10.0, 10.0, 0.0),
        Point3D(0.0, 10.0, 5.0),
    ]


@pytest.fixture
def tessellated_square(square_corners: list[Point3D]) -> list[Point3D]:
    """Edge samples as a host returns them: every corner appears twice, with float noise."""
    a, b, c, d = square_corners
    return [
        a, b,
        Point3D(10.0, 0.0, 0.0004), c,
        c, d,
        Point3D(0.0, 10.0002, 5.0), Point3D(0.0003, 0.0, 0.0),
    ]


@pytest.fixture
def shared_parameter_path(tmp_path: Path) -> str:
    """A writable copy of the bundled shared parameter file."""
    target = tmp_path / SHARED_PARAMETER_FILE_NAME
    shutil.copy(ASSETS_DIR / SHARED_PARAMETER_FILE_NAME, target)
    return str(target)


@pytest.fixture(autouse=True)
def _reset_package_logger():
    yield
    logger = logging.getLogger("floorelevation")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
