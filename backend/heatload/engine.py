"""Core heat-load engine.

The HeatLoadEngine turns building metadata and a floor/room tree into
per-room and whole-building heat loads:

1. **Validation**: each room must have a usable area, height and target
   temperature; nothing else is required.
2. **Preset resolution**: missing or invalid U-values are filled from the
   era / insulation-level catalog. User values are never overwritten.
3. **Envelope aggregation**: U·A over exterior walls, windows, doors,
   ceiling and floor; Ψ·L over thermal bridges.
4. **Losses**: transmission, ventilation (with heat-recovery credit) and
   thermal-bridge losses from the design temperature difference.
5. **Safety margin and totals**: each room gets the margin; the building
   total is the sum of the room loads.
6. **Sizing metadata**: bivalence clamping of the outdoor temperature and the
   hot-water allowance, reported alongside the total.

Inputs are never modified; every step builds new values.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from heatload.calculation.dimensioning import dhw_allowance_kw, effective_outdoor_temperature
from heatload.calculation.validation import is_finite, validate_room
from heatload.models.results import CalculationMeta, CalculationResults

if TYPE_CHECKING:
    from heatload.calculation.envelope import EnvelopeAggregator
    from heatload.calculation.losses import LossCalculator
    from heatload.calculation.resolver import PresetResolver
    from heatload.calculation.results import ResultsAggregator
    from heatload.config import EngineSettings
    from heatload.models.building import BuildingMetadata, DimensioningInputs
    from heatload.models.payload import HeatLoadPayload
    from heatload.models.results import PerRoomLoad
    from heatload.models.room import Floor, Room

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


class HeatLoadEngine:
    """Orchestrates resolver, aggregator, loss calculator and results.

    Args:
        resolver: Fills missing U-values from the preset catalog.
        aggregator: Sums envelope coefficients per room.
        calculator: Turns coefficients into losses.
        results: Applies the safety margin and sums the building total.
        settings: Defaults for outdoor temperature and safety margin.

    Example::

        from heatload import create_default_engine

        engine = create_default_engine()
        results = engine.calculate(building, floors, -12.0)
        results.rounded().total_heat_load_kw
    """

    def __init__(
        self,
        resolver: PresetResolver,
        aggregator: EnvelopeAggregator,
        calculator: LossCalculator,
        results: ResultsAggregator,
        settings: EngineSettings,
    ) -> None:
        self._resolver = resolver
        self._aggregator = aggregator
        self._calculator = calculator
        self._results = results
        self._settings = settings

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    def resolve_outdoor_temperature(
        self,
        building: BuildingMetadata,
        outdoor_design_temp_c: float | None = None,
    ) -> float:
        """Pick the outdoor design temperature.

        Precedence: explicit argument, the building's manual override, the
        building's design temperature, then the configured default.
        """
        for candidate in (
            outdoor_design_temp_c,
            building.manual_design_outdoor_temp_c,
            building.design_outdoor_temp_c,
        ):
            if is_finite(candidate):
                return float(candidate)
        return self._settings.design_outdoor_temp_c

    def calculate_room(
        self,
        room: Room,
        building: BuildingMetadata,
        outdoor_design_temp_c: float,
        margin_fraction: float | None = None,
    ) -> PerRoomLoad:
        """Heat load of a single room at a fixed outdoor temperature.

        Raises:
            ValidationError: If area, height or target temperature is unusable.
        """
        validate_room(room)
        if margin_fraction is None:
            margin_fraction = self._settings.safety_margin_fraction
        resolved = self._resolver.resolve(room, building)
        coefficients = self._aggregator.aggregate(resolved)
        losses = self._calculator.compute_losses(resolved, coefficients, outdoor_design_temp_c)
        return self._results.finalize(resolved, losses, margin_fraction, coefficients)

    def calculate(
        self,
        building: BuildingMetadata,
        floors: list[Floor],
        outdoor_design_temp_c: float | None = None,
        *,
        dimensioning: DimensioningInputs | None = None,
        margin_fraction: float | None = None,
    ) -> CalculationResults:
        """Compute every room of every floor and the building total.

        Results keep full precision; call ``rounded()`` on the returned
        value for presentation.

        Raises:
            ValidationError: If any room lacks a usable area, height or
                target temperature.
        """
        outdoor = self.resolve_outdoor_temperature(building, outdoor_design_temp_c)
        effective = effective_outdoor_temperature(outdoor, dimensioning)
        if margin_fraction is None:
            margin_fraction = self._settings.safety_margin_fraction

        loads = [
            self.calculate_room(room, building, effective, margin_fraction)
            for floor in floors
            for room in floor.rooms
        ]
        total = self._results.total(loads)
        dhw = dhw_allowance_kw(dimensioning)
        bivalence = dimensioning.bivalence_temperature_c if dimensioning is not None else None

        logger.info(
            "Heat load for %d rooms: %.3f kW at %.1f °C outdoor",
            len(loads),
            total,
            effective,
        )
        return CalculationResults(
            per_room_loads=loads,
            total_heat_load_kw=total,
            meta=CalculationMeta(
                outdoor_design_temp_c=outdoor,
                effective_outdoor_temp_c=effective,
                bivalence_temperature_c=bivalence if is_finite(bivalence) else None,
                margin_fraction=margin_fraction,
                dhw_allowance_kw=dhw,
                sizing_load_kw=math.fsum((total, dhw)),
            ),
        )

    def calculate_payload(
        self,
        payload: HeatLoadPayload,
        dimensioning: DimensioningInputs | None = None,
    ) -> HeatLoadPayload:
        """Return ``payload`` with freshly computed, rounded results."""
        results = self.calculate(payload.building, payload.floors, dimensioning=dimensioning)
        return payload.model_copy(update={"results": results.rounded()})
