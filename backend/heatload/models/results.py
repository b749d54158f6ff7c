"""Calculation output models for the heat-load engine."""

from __future__ import annotations

import math

from pydantic import Field

from heatload.formatting import OUTPUT_DIGITS, round_half_away
from heatload.models.base import CamelModel
from heatload.models.enums import SurfaceKind


class SurfaceLoss(CamelModel):
    """Transmission through one envelope surface (per-element transparency)."""

    kind: SurfaceKind
    name: str
    area: float
    u_value: float
    h_w_per_k: float
    loss_w: float


class PerRoomLoad(CamelModel):
    """Heat load of a single room. All loads in kW, area in m².

    ``room_heat_load == (transmission + ventilation + thermal bridge) *
    (1 + margin fraction)``.
    """

    room_id: str
    room_name: str
    transmission_loss: float
    ventilation_loss: float
    thermal_bridge_loss: float
    safety_margin: float
    room_heat_load: float
    area: float
    surfaces: list[SurfaceLoss] = Field(default_factory=list)

    @property
    def base_loss(self) -> float:
        """Loss before the safety margin."""
        return self.transmission_loss + self.ventilation_loss + self.thermal_bridge_loss

    def rounded(self, digits: int = OUTPUT_DIGITS) -> PerRoomLoad:
        """Presentation copy with every kW figure rounded to ``digits``.

        The room load is re-summed from the rounded losses and margin, so the
        displayed parts always add up to the displayed room load.
        """
        transmission = round_half_away(self.transmission_loss, digits)
        ventilation = round_half_away(self.ventilation_loss, digits)
        bridges = round_half_away(self.thermal_bridge_loss, digits)
        margin = round_half_away(self.safety_margin, digits)
        heat_load = round_half_away(math.fsum((transmission, ventilation, bridges, margin)), digits)
        return self.model_copy(
            update={
                "transmission_loss": transmission,
                "ventilation_loss": ventilation,
                "thermal_bridge_loss": bridges,
                "safety_margin": margin,
                "room_heat_load": heat_load,
                "area": round_half_away(self.area, 2),
            }
        )


class CalculationMeta(CamelModel):
    """Conditions a calculation ran under."""

    outdoor_design_temp_c: float
    effective_outdoor_temp_c: float
    bivalence_temperature_c: float | None = None
    margin_fraction: float
    dhw_allowance_kw: float = 0.0
    sizing_load_kw: float = 0.0


class CalculationResults(CamelModel):
    """Per-room loads and the building total (kW).

    ``total_heat_load_kw`` is the sum of ``room_heat_load`` over all rooms;
    the hot-water allowance is reported separately in ``meta``.
    """

    per_room_loads: list[PerRoomLoad] = Field(default_factory=list)
    total_heat_load_kw: float = Field(default=0.0, alias="totalHeatLoadKW")
    meta: CalculationMeta | None = None

    @property
    def total_area(self) -> float:
        return math.fsum(load.area for load in self.per_room_loads)

    def rounded(self, digits: int = OUTPUT_DIGITS) -> CalculationResults:
        """Presentation copy rounded once, uniformly.

        The total is re-summed from the rounded room loads so the displayed
        total always equals the displayed parts.
        """
        loads = [load.rounded(digits) for load in self.per_room_loads]
        total = round_half_away(math.fsum(load.room_heat_load for load in loads), digits)
        meta = self.meta
        if meta is not None:
            meta = meta.model_copy(
                update={
                    "dhw_allowance_kw": round_half_away(meta.dhw_allowance_kw, digits),
                    "sizing_load_kw": round_half_away(
                        total + round_half_away(meta.dhw_allowance_kw, digits), digits
                    ),
                }
            )
        return self.model_copy(
            update={"per_room_loads": loads, "total_heat_load_kw": total, "meta": meta}
        )


class SummaryRow(CamelModel):
    """One room in the printable / exportable results summary."""

    floor: str
    room: str
    transmission_loss: float
    ventilation_loss: float
    thermal_bridge_loss: float
    safety_margin: float
    room_heat_load: float
    area: float

    @property
    def base_loss(self) -> float:
        return self.transmission_loss + self.ventilation_loss + self.thermal_bridge_loss


class ResultSummary(CamelModel):
    """Building-level figures derived from a calculation."""

    total_rooms: int
    total_load_kw: float
    total_area: float
    watts_per_sqm: float
    efficiency_band: str
    annual_energy_kwh: float
    annual_energy_kwh_per_sqm: float
    room_breakdown: list[SummaryRow] = Field(default_factory=list)
