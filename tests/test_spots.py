"""Tests for the spot parameter mapping."""

from __future__ import annotations

import pytest

from floorelevation.model.geometry_primitives import Point3D
from floorelevation.model.spots import required_parameter_names, spot_parameter_names, spot_values


class TestParameterNames:
    def test_slot_names(self) -> None:
        assert spot_parameter_names(2) == ["SpotElevation_2", "SpotCoordinate_N2", "SpotCoordinate_E2"]

    def test_slot_names_without_coordinates(self) -> None:
        assert spot_parameter_names(4, include_coordinates=False) == ["SpotElevation_4"]

    @pytest.mark.parametrize("index", [0, 5])
    def test_slot_out_of_range(self, index: int) -> None:
        with pytest.raises(ValueError):
            spot_parameter_names(index)

    def test_required_names_elevations_first(self) -> None:
        names = required_parameter_names()
        assert len(names) == 12
        assert names[:4] == [f"SpotElevation_{i}" for i in range(1, 5)]
        assert names[4:6] == ["SpotCoordinate_N1", "SpotCoordinate_E1"]

    def test_required_names_elevation_only(self) -> None:
        assert required_parameter_names(include_coordinates=False) == [
            "SpotElevation_1", "SpotElevation_2", "SpotElevation_3", "SpotElevation_4",
        ]


class TestSpotValues:
    def test_northing_is_y_and_easting_is_x(self) -> None:
        values = spot_values([Point3D(100.0, 200.0, 3.5)])
        assert values == {
            "SpotElevation_1": 3.5,
            "SpotCoordinate_N1": 200.0,
            "SpotCoordinate_E1": 100.0,
        }

    def test_positions_map_to_slots(self) -> None:
        pts = [Point3D(0, 0, 4), Point3D(0, 0, 3), Point3D(0, 0, 2), Point3D(0, 0, 1)]
        values = spot_values(pts, include_coordinates=False)
        assert values == {
            "SpotElevation_1": 4,
            "SpotElevation_2": 3,
            "SpotElevation_3": 2,
            "SpotElevation_4": 1,
        }

    def test_missing_slots_are_absent(self) -> None:
        values = spot_values([Point3D(0, 0, 1), Point3D(0, 0, 2)], include_coordinates=False)
        assert set(values) == {"SpotElevation_1", "SpotElevation_2"}

    def test_more_than_four_points_raise(self) -> None:
        with pytest.raises(ValueError):
            spot_values([Point3D(0, 0, z) for z in range(5)])
