"""Safety margin per room and the building total."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from heatload.calculation.validation import finite_non_negative
from heatload.data.ventilation_defaults import DEFAULT_SAFETY_MARGIN
from heatload.models.results import PerRoomLoad, SurfaceLoss

if TYPE_CHECKING:
    from collections.abc import Iterable

    from heatload.calculation.envelope import EnvelopeCoefficients
    from heatload.calculation.losses import RoomLosses
    from heatload.models.room import Room


class ResultsAggregator:
    """Build ``PerRoomLoad`` values and sum them.

    Values keep full float precision; rounding happens once, in
    ``CalculationResults.rounded``.
    """

    def finalize(
        self,
        room: Room,
        losses: RoomLosses,
        margin_fraction: float = DEFAULT_SAFETY_MARGIN,
        coefficients: EnvelopeCoefficients | None = None,
    ) -> PerRoomLoad:
        if not math.isfinite(margin_fraction) or margin_fraction < 0:
            raise ValueError(f"Margin fraction must be finite and >= 0, got {margin_fraction}")

        base = losses.total
        safety_margin = base * margin_fraction
        surfaces = []
        if coefficients is not None:
            surfaces = [
                SurfaceLoss(
                    kind=s.kind,
                    name=s.name,
                    area=s.area,
                    u_value=s.u_value,
                    h_w_per_k=s.h_w_per_k,
                    loss_w=s.h_w_per_k * losses.delta_t,
                )
                for s in coefficients.surfaces
            ]
        return PerRoomLoad(
            room_id=room.id,
            room_name=room.name,
            transmission_loss=losses.transmission_loss,
            ventilation_loss=losses.ventilation_loss,
            thermal_bridge_loss=losses.thermal_bridge_loss,
            safety_margin=safety_margin,
            room_heat_load=base + safety_margin,
            area=finite_non_negative(room.area),
            surfaces=surfaces,
        )

    def total(self, loads: Iterable[PerRoomLoad]) -> float:
        """Building heat load in kW: the sum of every room's heat load."""
        return math.fsum(load.room_heat_load for load in loads)
