"""Building-level models for the heat-load engine."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, field_validator

from heatload.models.base import CamelModel, Number
from heatload.models.enums import BuildingEra, InsulationLevel

logger = logging.getLogger(__name__)


class PVHeatPumpSettings(CamelModel):
    """Photovoltaic and heat-pump settings carried alongside the building."""

    has_pv: bool = False
    pv_kwp: Number = None
    has_heat_pump: bool = False
    hp_type: str | None = None
    buffer_tank: bool = False
    buffer_size_liters: Number = None
    brand: str | None = None
    model: str | None = None
    capacity: Number = None


class DimensioningInputs(CamelModel):
    """Heat-pump sizing inputs.

    The bivalence temperature caps the outdoor design temperature (the heat
    pump only covers the load down to that point); hot-water demand is turned
    into a continuous kW allowance.
    """

    residents: Number = None
    dhw_per_resident_l_per_day: Number = None
    bivalence_temperature_c: Number = None


class BuildingMetadata(CamelModel):
    """Input model describing the building as a whole.

    Era and insulation level select the default U-values. Unknown values are
    stored as None rather than rejected: the UI may not know them yet, and
    the preset catalog has a documented default bucket.
    """

    address: str = ""
    postal_code: str = ""
    location: str | None = None
    building_type: str = ""
    construction_year: int | None = None
    renovation_year: int | None = None
    building_era: BuildingEra | None = None
    insulation_level: InsulationLevel | None = None
    floors: int = Field(default=1, ge=0)
    residents: int = Field(default=1, ge=0)
    temperature_preference: Number = None
    domestic_hot_water: str | None = None
    annual_gas_consumption: Number = None
    annual_electric_consumption: Number = None
    design_outdoor_temp_c: Number = None
    manual_design_outdoor_temp_c: Number = None
    pv_heat_pump: PVHeatPumpSettings | None = None

    @field_validator("building_era", mode="before")
    @classmethod
    def parse_era(cls, v: Any) -> BuildingEra | None:
        era = BuildingEra.parse(v)
        if era is None and v is not None:
            logger.debug("Unknown building era %r, using catalog default", v)
        return era

    @field_validator("insulation_level", mode="before")
    @classmethod
    def parse_insulation_level(cls, v: Any) -> InsulationLevel | None:
        level = InsulationLevel.parse(v)
        if level is None and v is not None:
            logger.debug("Unknown insulation level %r, using catalog default", v)
        return level

    @property
    def effective_era(self) -> BuildingEra | None:
        """Explicit era if set, else the bucket of the construction year."""
        if self.building_era is not None:
            return self.building_era
        if self.construction_year is not None:
            return BuildingEra.from_year(self.construction_year)
        return None
