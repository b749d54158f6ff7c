"""Building-level figures derived from a finished calculation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from heatload.models.results import ResultSummary, SummaryRow

if TYPE_CHECKING:
    from heatload.models.results import CalculationResults
    from heatload.models.room import Floor

# Upper bound of heat density (W/m²) -> label; above the last bound
# the building falls into HIGH_CONSUMPTION_BAND.
EFFICIENCY_BANDS: tuple[tuple[float, str], ...] = (
    (30.0, "Sehr effizient"),
    (50.0, "Effizient"),
    (100.0, "Mittel"),
    (150.0, "Erhöht"),
)
HIGH_CONSUMPTION_BAND = "Hoher Verbrauch"

# Full-load hours per year for the indicative energy figure
EQUIVALENT_FULL_LOAD_HOURS = 800.0


def efficiency_band(watts_per_sqm: float) -> str:
    for upper, label in EFFICIENCY_BANDS:
        if watts_per_sqm <= upper:
            return label
    return HIGH_CONSUMPTION_BAND


def summarize(results: CalculationResults, floors: list[Floor]) -> ResultSummary:
    """Summarize ``results`` for display and export.

    Room rows are matched to ``floors`` by room id to pick up floor names;
    rooms not found in the tree get an empty floor name.
    """
    floor_of = {room.id: floor.name for floor in floors for room in floor.rooms}
    rows = [
        SummaryRow(
            floor=floor_of.get(load.room_id, ""),
            room=load.room_name,
            transmission_loss=load.transmission_loss,
            ventilation_loss=load.ventilation_loss,
            thermal_bridge_loss=load.thermal_bridge_loss,
            safety_margin=load.safety_margin,
            room_heat_load=load.room_heat_load,
            area=load.area,
        )
        for load in results.per_room_loads
    ]
    total_kw = results.total_heat_load_kw
    total_area = results.total_area
    watts_per_sqm = total_kw * 1000 / total_area if total_area > 0 else 0.0
    annual_kwh = total_kw * EQUIVALENT_FULL_LOAD_HOURS
    return ResultSummary(
        total_rooms=len(rows),
        total_load_kw=total_kw,
        total_area=total_area,
        watts_per_sqm=watts_per_sqm,
        efficiency_band=efficiency_band(watts_per_sqm),
        annual_energy_kwh=annual_kwh,
        annual_energy_kwh_per_sqm=annual_kwh / total_area if total_area > 0 else 0.0,
        room_breakdown=rows,
    )
