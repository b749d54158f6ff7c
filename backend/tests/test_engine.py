"""Tests for the HeatLoadEngine: the full room-by-room pipeline."""

from __future__ import annotations

import math

import pytest

from heatload.config import EngineSettings
from heatload.engine import HeatLoadEngine
from heatload.exceptions import ValidationError
from heatload.factory import create_default_engine
from heatload.models.building import BuildingMetadata, DimensioningInputs
from heatload.models.payload import HeatLoadPayload
from heatload.models.room import (
    CeilingConfig,
    DoorDetail,
    Floor,
    FloorConfig,
    Room,
    ThermalBridgeDetail,
    VentilationConfig,
    WallDetail,
    WindowDetail,
)


@pytest.fixture()
def engine() -> HeatLoadEngine:
    return create_default_engine()


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _single_wall_room(
    u_value: float | None = 0.30,
    room_id: str = "r1",
    ventilation: VentilationConfig | None = None,
) -> Room:
    return Room(
        id=room_id,
        name="Wohnzimmer",
        area=10.0,
        height=2.5,
        target_temperature=20.0,
        walls=[WallDetail(id=f"{room_id}-w1", name="Außenwand", area=10.0, u_value=u_value)],
        ventilation=ventilation or VentilationConfig(air_exchange_rate=0.0),
    )


def _full_room(room_id: str, target: float = 20.0) -> Room:
    return Room(
        id=room_id,
        name=f"Raum {room_id}",
        area=18.0,
        height=2.6,
        target_temperature=target,
        walls=[
            WallDetail(id=f"{room_id}-w1", area=12.0),
            WallDetail(id=f"{room_id}-w2", area=9.0, u_value=0.24),
            WallDetail(id=f"{room_id}-w3", area=9.0, is_exterior=False),
        ],
        windows=[WindowDetail(id=f"{room_id}-f1", area=2.4)],
        doors=[DoorDetail(id=f"{room_id}-d1", area=2.0, u_value=1.6)],
        ceiling_config=CeilingConfig(),
        floor_config=FloorConfig(area=18.0),
        thermal_bridges=[ThermalBridgeDetail(id=f"{room_id}-tb", psi_value=0.05, length=8.0)],
        ventilation=VentilationConfig(room_type="living", ventilation_system=True),
    )


def _floors(*rooms: Room) -> list[Floor]:
    return [Floor(id="eg", name="Erdgeschoss", rooms=list(rooms))]


def _building(**overrides: object) -> BuildingMetadata:
    defaults: dict[str, object] = {
        "building_era": "2002-2009",
        "insulation_level": "partial",
    }
    defaults.update(overrides)
    return BuildingMetadata(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Worked scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_single_exterior_wall(self, engine: HeatLoadEngine) -> None:
        results = engine.calculate(_building(), _floors(_single_wall_room()), -10.0)
        load = results.per_room_loads[0]
        assert load.transmission_loss == pytest.approx(0.09)
        assert load.ventilation_loss == 0.0
        assert load.thermal_bridge_loss == 0.0
        assert load.room_heat_load == pytest.approx(0.099)
        assert results.rounded().total_heat_load_kw == 0.099

    def test_missing_u_value_filled_from_legacy_keys(self, engine: HeatLoadEngine) -> None:
        building = BuildingMetadata(building_era="2002_2014", insulation_level="basic")
        results = engine.calculate(building, _floors(_single_wall_room(u_value=None)), -10.0)
        assert results.per_room_loads[0].transmission_loss == pytest.approx(0.12)

    def test_outdoor_equal_to_target(self, engine: HeatLoadEngine) -> None:
        results = engine.calculate(_building(), _floors(_full_room("a")), 20.0)
        load = results.per_room_loads[0]
        assert load.transmission_loss == 0.0
        assert load.ventilation_loss == 0.0
        assert load.thermal_bridge_loss == 0.0
        assert load.room_heat_load == 0.0
        assert results.total_heat_load_kw == 0.0

    def test_two_room_total(self, engine: HeatLoadEngine) -> None:
        # U-values picked so the rooms carry 1.0 and 2.5 kW after the margin
        results = engine.calculate(
            _building(),
            [
                Floor(id="eg", name="EG", rooms=[_single_wall_room(u_value=10 / 3 / 1.1, room_id="a")]),
                Floor(id="og", name="OG", rooms=[_single_wall_room(u_value=25 / 3 / 1.1, room_id="b")]),
            ],
            -10.0,
        )
        heat_loads = [load.room_heat_load for load in results.per_room_loads]
        assert heat_loads == pytest.approx([1.0, 2.5])
        assert results.total_heat_load_kw == pytest.approx(3.5)
        assert results.rounded().total_heat_load_kw == 3.5


# ---------------------------------------------------------------------------
# Invariants
# ---------------------------------------------------------------------------


class TestInvariants:
    def test_total_is_sum_of_rooms(self, engine: HeatLoadEngine) -> None:
        rooms = [_full_room(str(i), target=18.0 + i) for i in range(6)]
        results = engine.calculate(_building(), _floors(*rooms), -12.0)
        assert results.total_heat_load_kw == pytest.approx(
            math.fsum(load.room_heat_load for load in results.per_room_loads), abs=1e-6
        )

    def test_room_load_decomposition(self, engine: HeatLoadEngine) -> None:
        results = engine.calculate(_building(), _floors(_full_room("a")), -12.0)
        load = results.per_room_loads[0]
        assert load.room_heat_load == pytest.approx(
            (load.transmission_loss + load.ventilation_loss + load.thermal_bridge_loss) * 1.1
        )

    def test_losses_never_negative(self, engine: HeatLoadEngine) -> None:
        results = engine.calculate(_building(), _floors(_full_room("a", target=5.0)), 15.0)
        load = results.per_room_loads[0]
        for value in (
            load.transmission_loss,
            load.ventilation_loss,
            load.thermal_bridge_loss,
            load.room_heat_load,
        ):
            assert value >= 0.0

    def test_inputs_not_modified(self, engine: HeatLoadEngine) -> None:
        floors = _floors(_full_room("a"))
        snapshot = [floor.model_dump() for floor in floors]
        engine.calculate(_building(), floors, -10.0)
        assert [floor.model_dump() for floor in floors] == snapshot

    def test_room_order_preserved(self, engine: HeatLoadEngine) -> None:
        floors = [
            Floor(id="eg", name="EG", rooms=[_full_room("b"), _full_room("a")]),
            Floor(id="og", name="OG", rooms=[_full_room("c")]),
        ]
        results = engine.calculate(_building(), floors, -10.0)
        assert [load.room_id for load in results.per_room_loads] == ["b", "a", "c"]

    def test_better_insulation_lowers_load(self, engine: HeatLoadEngine) -> None:
        floors = _floors(_full_room("a"))
        none = engine.calculate(_building(insulation_level="none"), floors, -10.0)
        high = engine.calculate(_building(insulation_level="high"), floors, -10.0)
        assert high.total_heat_load_kw < none.total_heat_load_kw


# ---------------------------------------------------------------------------
# Outdoor temperature and sizing
# ---------------------------------------------------------------------------


class TestOutdoorTemperature:
    def test_argument_wins(self, engine: HeatLoadEngine) -> None:
        building = _building(manual_design_outdoor_temp_c=-14.0, design_outdoor_temp_c=-12.0)
        assert engine.resolve_outdoor_temperature(building, -8.0) == -8.0

    def test_manual_override_before_design_value(self, engine: HeatLoadEngine) -> None:
        building = _building(manual_design_outdoor_temp_c=-14.0, design_outdoor_temp_c=-12.0)
        assert engine.resolve_outdoor_temperature(building) == -14.0

    def test_building_design_value(self, engine: HeatLoadEngine) -> None:
        assert engine.resolve_outdoor_temperature(_building(design_outdoor_temp_c="-12,5")) == -12.5

    def test_settings_default(self) -> None:
        engine = create_default_engine(EngineSettings(design_outdoor_temp_c=-16.0))
        assert engine.resolve_outdoor_temperature(_building()) == -16.0

    def test_meta_records_temperatures(self, engine: HeatLoadEngine) -> None:
        results = engine.calculate(_building(), _floors(_single_wall_room()))
        assert results.meta is not None
        assert results.meta.outdoor_design_temp_c == -10.0
        assert results.meta.effective_outdoor_temp_c == -10.0
        assert results.meta.margin_fraction == 0.1


class TestDimensioning:
    def test_bivalence_raises_effective_temperature(self, engine: HeatLoadEngine) -> None:
        dims = DimensioningInputs(bivalence_temperature_c=-5.0)
        results = engine.calculate(_building(), _floors(_single_wall_room()), -10.0, dimensioning=dims)
        assert results.meta is not None
        assert results.meta.effective_outdoor_temp_c == -5.0
        assert results.meta.bivalence_temperature_c == -5.0
        # 3 W/K * 25 K
        assert results.per_room_loads[0].transmission_loss == pytest.approx(0.075)

    def test_bivalence_below_outdoor_has_no_effect(self, engine: HeatLoadEngine) -> None:
        dims = DimensioningInputs(bivalence_temperature_c=-15.0)
        results = engine.calculate(_building(), _floors(_single_wall_room()), -10.0, dimensioning=dims)
        assert results.meta is not None
        assert results.meta.effective_outdoor_temp_c == -10.0

    def test_hot_water_allowance_kept_out_of_total(self, engine: HeatLoadEngine) -> None:
        dims = DimensioningInputs(residents=4, dhw_per_resident_l_per_day=40)
        results = engine.calculate(_building(), _floors(_single_wall_room()), -10.0, dimensioning=dims)
        assert results.meta is not None
        assert results.meta.dhw_allowance_kw == pytest.approx(4 * 40 * 0.046 / 24)
        assert results.total_heat_load_kw == pytest.approx(0.099)
        assert results.meta.sizing_load_kw == pytest.approx(0.099 + 4 * 40 * 0.046 / 24)

    def test_custom_margin(self, engine: HeatLoadEngine) -> None:
        results = engine.calculate(_building(), _floors(_single_wall_room()), -10.0, margin_fraction=0.2)
        assert results.per_room_loads[0].room_heat_load == pytest.approx(0.108)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_missing_height_names_room_and_field(self, engine: HeatLoadEngine) -> None:
        room = _single_wall_room().model_copy(update={"height": None})
        with pytest.raises(ValidationError, match="Room 'r1' is missing a valid 'height'"):
            engine.calculate(_building(), _floors(room), -10.0)

    def test_partial_data_does_not_raise(self, engine: HeatLoadEngine) -> None:
        room = Room(
            id="sparse",
            area=12.0,
            height=2.5,
            target_temperature=20.0,
            walls=[WallDetail(id="w", area=math.nan), WallDetail(id="w2", area=6.0, u_value="abc")],
            thermal_bridges=[ThermalBridgeDetail(id="tb")],
        )
        results = engine.calculate(BuildingMetadata(building_era="unknown"), _floors(room), -10.0)
        assert math.isfinite(results.total_heat_load_kw)
        assert results.total_heat_load_kw > 0


# ---------------------------------------------------------------------------
# Single rooms and payloads
# ---------------------------------------------------------------------------


class TestCalculateRoom:
    def test_matches_building_calculation(self, engine: HeatLoadEngine) -> None:
        room = _full_room("a")
        single = engine.calculate_room(room, _building(), -10.0)
        whole = engine.calculate(_building(), _floors(room), -10.0)
        assert single == whole.per_room_loads[0]

    def test_surfaces_reported(self, engine: HeatLoadEngine) -> None:
        load = engine.calculate_room(_full_room("a"), _building(), -10.0)
        kinds = [s.kind.value for s in load.surfaces]
        assert kinds == ["wall", "wall", "window", "door", "ceiling", "floor"]


class TestCalculatePayload:
    def test_attaches_rounded_results(self, engine: HeatLoadEngine) -> None:
        payload = HeatLoadPayload(
            quote_id="Q-1",
            building=_building(design_outdoor_temp_c=-10.0),
            floors=_floors(_single_wall_room()),
        )
        updated = engine.calculate_payload(payload)
        assert payload.results is None
        assert updated.results is not None
        assert updated.results.total_heat_load_kw == 0.099
        assert updated.quote_id == "Q-1"
