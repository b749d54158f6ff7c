"""Persisted payload and request models."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from heatload.models.base import CamelModel, Number
from heatload.models.building import BuildingMetadata, DimensioningInputs, PVHeatPumpSettings
from heatload.models.results import CalculationResults
from heatload.models.room import Floor


class EnvelopeElement(CamelModel):
    """An envelope element described by its layer resistances (m²K/W)."""

    name: str
    area: Number = None
    layer_r_values: list[float] = Field(default_factory=list)


class HeatLoadPayload(CamelModel):
    """Everything the authoring UI saves for one quote."""

    quote_id: str = ""
    building: BuildingMetadata = Field(default_factory=BuildingMetadata)
    pv_heat_pump: PVHeatPumpSettings | None = None
    envelope_elements: list[EnvelopeElement] = Field(default_factory=list)
    floors: list[Floor] = Field(default_factory=list)
    results: CalculationResults | None = None


class HeatLoadRecord(HeatLoadPayload):
    """A stored payload with its identity and timestamps."""

    id: str
    created_at: datetime
    updated_at: datetime


class CalculationRequest(CamelModel):
    """Body of a compute-only request."""

    building: BuildingMetadata = Field(default_factory=BuildingMetadata)
    floors: list[Floor] = Field(default_factory=list)
    outdoor_design_temp_c: Number = None
    dimensioning: DimensioningInputs | None = None
