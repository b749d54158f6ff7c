"""Baseline U-values (W/m²K) by building era and insulation multipliers.

Baselines describe an unrenovated building of the era ("none" level). The
insulation level scales every category toward better insulation; the catalog
rounds the product to two decimals.
"""

from __future__ import annotations

from heatload.models.enums import BuildingEra, EnvelopeCategory, InsulationLevel

_W = EnvelopeCategory.WALL
_WIN = EnvelopeCategory.WINDOW
_D = EnvelopeCategory.DOOR
_R = EnvelopeCategory.ROOF
_F = EnvelopeCategory.FLOOR

ERA_BASE_U_VALUES: dict[BuildingEra, dict[EnvelopeCategory, float]] = {
    BuildingEra.PRE_1978: {_W: 1.30, _WIN: 3.00, _D: 2.50, _R: 1.00, _F: 0.90},
    BuildingEra.Y1978_1995: {_W: 1.00, _WIN: 2.70, _D: 2.20, _R: 0.80, _F: 0.80},
    BuildingEra.Y1996_2001: {_W: 0.80, _WIN: 1.90, _D: 2.00, _R: 0.50, _F: 0.50},
    BuildingEra.Y2002_2009: {_W: 0.50, _WIN: 1.60, _D: 1.80, _R: 0.30, _F: 0.35},
    BuildingEra.Y2010_2015: {_W: 0.35, _WIN: 1.30, _D: 1.50, _R: 0.22, _F: 0.25},
    BuildingEra.Y2016_2020: {_W: 0.28, _WIN: 1.10, _D: 1.30, _R: 0.18, _F: 0.22},
    BuildingEra.Y2021_PLUS: {_W: 0.22, _WIN: 0.95, _D: 1.00, _R: 0.14, _F: 0.18},
}

# Must lie in (0, 1] and be non-increasing as the level improves
LEVEL_MULTIPLIERS: dict[InsulationLevel, float] = {
    InsulationLevel.NONE: 1.00,
    InsulationLevel.PARTIAL: 0.80,
    InsulationLevel.RENOVATED: 0.60,
    InsulationLevel.HIGH_EFFICIENCY: 0.45,
}

# Bucket used when the era or level is unknown
DEFAULT_ERA = BuildingEra.Y2002_2009
DEFAULT_INSULATION_LEVEL = InsulationLevel.PARTIAL
