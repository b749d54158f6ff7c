"""Tests for the building-level results summary."""

from __future__ import annotations

import pytest

from heatload.calculation.summary import HIGH_CONSUMPTION_BAND, efficiency_band, summarize
from heatload.models.results import CalculationResults, PerRoomLoad
from heatload.models.room import Floor, Room


def _load(room_id: str, heat_load: float, area: float) -> PerRoomLoad:
    return PerRoomLoad(
        room_id=room_id,
        room_name=f"Raum {room_id}",
        transmission_loss=heat_load * 0.6,
        ventilation_loss=heat_load * 0.3,
        thermal_bridge_loss=0.0,
        safety_margin=heat_load * 0.1,
        room_heat_load=heat_load,
        area=area,
    )


class TestEfficiencyBand:
    @pytest.mark.parametrize(
        ("watts_per_sqm", "expected"),
        [
            (0.0, "Sehr effizient"),
            (30.0, "Sehr effizient"),
            (30.5, "Effizient"),
            (50.0, "Effizient"),
            (99.9, "Mittel"),
            (150.0, "Erhöht"),
            (150.1, HIGH_CONSUMPTION_BAND),
        ],
    )
    def test_bands(self, watts_per_sqm: float, expected: str) -> None:
        assert efficiency_band(watts_per_sqm) == expected


class TestSummarize:
    def test_building_figures(self) -> None:
        results = CalculationResults(
            per_room_loads=[_load("a", 1.0, 20.0), _load("b", 2.0, 40.0)],
            total_heat_load_kw=3.0,
        )
        floors = [
            Floor(id="eg", name="EG", rooms=[Room(id="a")]),
            Floor(id="og", name="OG", rooms=[Room(id="b")]),
        ]
        summary = summarize(results, floors)
        assert summary.total_rooms == 2
        assert summary.total_load_kw == 3.0
        assert summary.total_area == 60.0
        assert summary.watts_per_sqm == pytest.approx(50.0)
        assert summary.efficiency_band == "Effizient"
        assert summary.annual_energy_kwh == pytest.approx(2400.0)
        assert summary.annual_energy_kwh_per_sqm == pytest.approx(40.0)
        assert [(row.floor, row.room) for row in summary.room_breakdown] == [
            ("EG", "Raum a"),
            ("OG", "Raum b"),
        ]

    def test_room_missing_from_tree(self) -> None:
        results = CalculationResults(per_room_loads=[_load("x", 1.0, 10.0)], total_heat_load_kw=1.0)
        assert summarize(results, []).room_breakdown[0].floor == ""

    def test_zero_area(self) -> None:
        summary = summarize(CalculationResults(), [])
        assert summary.total_rooms == 0
        assert summary.watts_per_sqm == 0.0
        assert summary.annual_energy_kwh_per_sqm == 0.0
        assert summary.efficiency_band == "Sehr effizient"
