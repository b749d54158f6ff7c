"""Tests for EnvelopeAggregator: U·A and Ψ·L sums."""

from __future__ import annotations

import math

import pytest

from heatload.calculation.envelope import EnvelopeAggregator
from heatload.models.enums import SurfaceKind
from heatload.models.room import (
    CeilingConfig,
    DoorDetail,
    FloorConfig,
    Room,
    ThermalBridgeDetail,
    WallDetail,
    WindowDetail,
)


@pytest.fixture()
def aggregator() -> EnvelopeAggregator:
    return EnvelopeAggregator()


def _room(**overrides: object) -> Room:
    defaults: dict[str, object] = {
        "id": "r1",
        "name": "Wohnzimmer",
        "area": 20.0,
        "height": 2.5,
        "target_temperature": 20.0,
    }
    defaults.update(overrides)
    return Room(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Transmission coefficient
# ---------------------------------------------------------------------------


class TestTransmission:
    def test_empty_room_is_zero(self, aggregator: EnvelopeAggregator) -> None:
        result = aggregator.aggregate(_room())
        assert result.transmission_w_per_k == 0.0
        assert result.bridge_w_per_k == 0.0
        assert result.surfaces == ()

    def test_sums_all_element_kinds(self, aggregator: EnvelopeAggregator) -> None:
        room = _room(
            walls=[WallDetail(id="w1", area=10.0, u_value=0.3)],
            windows=[WindowDetail(id="f1", area=2.0, u_value=1.3)],
            doors=[DoorDetail(id="d1", area=2.0, u_value=1.8)],
            ceiling_config=CeilingConfig(area=20.0, u_value=0.2),
            floor_config=FloorConfig(area=20.0, u_value=0.35),
        )
        result = aggregator.aggregate(room)
        # 3.0 + 2.6 + 3.6 + 4.0 + 7.0
        assert result.transmission_w_per_k == pytest.approx(20.2)

    def test_interior_walls_excluded(self, aggregator: EnvelopeAggregator) -> None:
        room = _room(
            walls=[
                WallDetail(id="w1", area=10.0, u_value=0.3),
                WallDetail(id="w2", area=12.0, u_value=1.5, is_exterior=False),
            ]
        )
        assert aggregator.aggregate(room).transmission_w_per_k == pytest.approx(3.0)

    def test_ceiling_without_area_uses_room_area(self, aggregator: EnvelopeAggregator) -> None:
        room = _room(ceiling_config=CeilingConfig(u_value=0.25))
        assert aggregator.aggregate(room).transmission_w_per_k == pytest.approx(5.0)

    @pytest.mark.parametrize("bad_u", [None, 0.0, -1.0, math.nan])
    def test_invalid_u_value_contributes_nothing(
        self, aggregator: EnvelopeAggregator, bad_u: float | None
    ) -> None:
        room = _room(
            walls=[
                WallDetail(id="w1", area=10.0, u_value=bad_u),
                WallDetail(id="w2", area=5.0, u_value=0.4),
            ]
        )
        result = aggregator.aggregate(room)
        assert result.transmission_w_per_k == pytest.approx(2.0)
        assert math.isfinite(result.transmission_w_per_k)

    def test_negative_or_nan_area_contributes_nothing(self, aggregator: EnvelopeAggregator) -> None:
        room = _room(
            windows=[
                WindowDetail(id="f1", area=-2.0, u_value=1.3),
                WindowDetail(id="f2", area=math.nan, u_value=1.3),
            ]
        )
        assert aggregator.aggregate(room).transmission_w_per_k == 0.0


# ---------------------------------------------------------------------------
# Thermal bridges
# ---------------------------------------------------------------------------


class TestBridges:
    def test_psi_times_length(self, aggregator: EnvelopeAggregator) -> None:
        room = _room(
            thermal_bridges=[
                ThermalBridgeDetail(id="tb1", psi_value=0.05, length=10.0),
                ThermalBridgeDetail(id="tb2", psi_value=0.1, length=4.0),
            ]
        )
        assert aggregator.bridge_coefficient(room) == pytest.approx(0.9)

    def test_invalid_bridge_ignored(self, aggregator: EnvelopeAggregator) -> None:
        room = _room(
            thermal_bridges=[
                ThermalBridgeDetail(id="tb1", psi_value=None, length=10.0),
                ThermalBridgeDetail(id="tb2", psi_value=0.1, length=math.nan),
            ]
        )
        assert aggregator.bridge_coefficient(room) == 0.0


# ---------------------------------------------------------------------------
# Surface breakdown
# ---------------------------------------------------------------------------


class TestSurfaces:
    def test_names_and_kinds(self, aggregator: EnvelopeAggregator) -> None:
        room = _room(
            walls=[
                WallDetail(id="w1", name="Südwand", area=10.0, u_value=0.3),
                WallDetail(id="w2", area=8.0, u_value=0.3, is_exterior=False),
            ],
            windows=[WindowDetail(id="f1", area=2.0, u_value=1.3)],
            doors=[DoorDetail(id="d1", area=2.0, u_value=1.8)],
            floor_config=FloorConfig(u_value=0.35),
        )
        surfaces = aggregator.surfaces(room)
        assert [(s.kind, s.name) for s in surfaces] == [
            (SurfaceKind.WALL, "Südwand"),
            (SurfaceKind.WINDOW, "Fenster #1"),
            (SurfaceKind.DOOR, "Tür #1"),
            (SurfaceKind.FLOOR, "Boden"),
        ]
        assert surfaces[0].h_w_per_k == pytest.approx(3.0)
        assert surfaces[-1].area == 20.0
