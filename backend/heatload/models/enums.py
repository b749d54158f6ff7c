"""Enums for the heat-load domain models.

Building era and insulation level are closed sets: every lookup table is
keyed by them, and ``parse`` maps anything unrecognised to ``None`` so the
preset catalog can apply its default bucket instead of failing.
"""

from __future__ import annotations

from enum import StrEnum


class BuildingEra(StrEnum):
    """Construction-year buckets used to select baseline U-values."""

    PRE_1978 = "pre1978"
    Y1978_1995 = "1978-1995"
    Y1996_2001 = "1996-2001"
    Y2002_2009 = "2002-2009"
    Y2010_2015 = "2010-2015"
    Y2016_2020 = "2016-2020"
    Y2021_PLUS = "2021+"

    @classmethod
    def from_year(cls, year: int) -> BuildingEra:
        """Bucket a construction year into exactly one era."""
        for upper, era in _ERA_UPPER_BOUNDS:
            if year <= upper:
                return era
        return cls.Y2021_PLUS

    @classmethod
    def parse(cls, value: object) -> BuildingEra | None:
        """Accept members, their values, or legacy keys; unknown -> None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _ERA_ALIASES.get(key)


class InsulationLevel(StrEnum):
    """Retrofit / insulation quality relative to the era baseline."""

    NONE = "none"
    PARTIAL = "partial"
    RENOVATED = "renovated"
    HIGH_EFFICIENCY = "high"

    @classmethod
    def parse(cls, value: object) -> InsulationLevel | None:
        """Accept members, their values, or legacy keys; unknown -> None."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _LEVEL_ALIASES.get(key)


_ERA_UPPER_BOUNDS: tuple[tuple[int, BuildingEra], ...] = (
    (1977, BuildingEra.PRE_1978),
    (1995, BuildingEra.Y1978_1995),
    (2001, BuildingEra.Y1996_2001),
    (2009, BuildingEra.Y2002_2009),
    (2015, BuildingEra.Y2010_2015),
    (2020, BuildingEra.Y2016_2020),
)

# Keys written by older versions of the authoring UI. They map to the row
# holding the U-values those versions used, not to the overlapping years:
# the old "2015_2020" values are the 2010-2015 row, and the old "2021_plus"
# wall/roof/floor values are the 2016-2020 row.
_ERA_ALIASES: dict[str, BuildingEra] = {
    "1978_1995": BuildingEra.Y1978_1995,
    "1996_2001": BuildingEra.Y1996_2001,
    "2002_2014": BuildingEra.Y2002_2009,
    "2015_2020": BuildingEra.Y2010_2015,
    "2021_plus": BuildingEra.Y2016_2020,
}

_LEVEL_ALIASES: dict[str, InsulationLevel] = {
    "basic": InsulationLevel.PARTIAL,
    "high_efficiency": InsulationLevel.HIGH_EFFICIENCY,
    "highefficiency": InsulationLevel.HIGH_EFFICIENCY,
}


class EnvelopeCategory(StrEnum):
    """Preset categories of the U-value catalog."""

    WALL = "wall"
    WINDOW = "window"
    DOOR = "door"
    ROOF = "roof"
    FLOOR = "floor"


class SurfaceKind(StrEnum):
    """Kinds of envelope surface that contribute to transmission loss."""

    WALL = "wall"
    WINDOW = "window"
    DOOR = "door"
    CEILING = "ceiling"
    FLOOR = "floor"


class HeaterType(StrEnum):
    """Heat emitter types."""

    RADIATOR = "radiator"
    UNDERFLOOR = "underfloor"


class MaterialCategory(StrEnum):
    """Bill-of-materials categories."""

    WALL = "Wall"
    WINDOW = "Window"
    DOOR = "Door"
    CEILING = "Ceiling"
    FLOOR = "Floor"
    RADIATOR = "Radiator"
    VENTILATION = "Ventilation"


class MaterialUnit(StrEnum):
    """Units used on bill-of-materials lines."""

    SQUARE_METRE = "m²"
    PIECES = "pcs"
    METRE = "m"
    WATT = "W"
    LITRES_PER_HOUR = "L/h"


class ValveBrand(StrEnum):
    """Thermostatic valve brands with known kv preset bins."""

    HEIMEIER = "Heimeier"
    OVENTROP = "Oventrop"
    DANFOSS = "Danfoss"
