"""U-value preset catalog keyed by building era and insulation level."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from heatload.data.u_value_presets import (
    DEFAULT_ERA,
    DEFAULT_INSULATION_LEVEL,
    ERA_BASE_U_VALUES,
    LEVEL_MULTIPLIERS,
)
from heatload.formatting import round2
from heatload.models.enums import BuildingEra, EnvelopeCategory, InsulationLevel

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UValuePreset:
    """Default U-values (W/m²K) for one (era, level) bucket."""

    wall: float
    window: float
    door: float
    roof: float
    floor: float

    def for_category(self, category: EnvelopeCategory) -> float:
        return getattr(self, category.value)


class PresetCatalog:
    """Static lookup of default U-values.

    Each category value is ``round2(base[era] * multiplier[level])``.
    Unknown or missing era/level fall back to the default bucket, so
    ``lookup`` always answers.

    Args:
        base_values: Unrenovated baseline U-values per era and category.
        multipliers: Scale factor per insulation level, each in (0, 1].

    Raises:
        ValueError: If a multiplier is outside (0, 1] or an era is missing
            a category.

    Example::

        catalog = PresetCatalog()
        catalog.lookup(BuildingEra.Y2002_2009, InsulationLevel.PARTIAL).wall
        # 0.4
    """

    def __init__(
        self,
        base_values: Mapping[BuildingEra, Mapping[EnvelopeCategory, float]] = ERA_BASE_U_VALUES,
        multipliers: Mapping[InsulationLevel, float] = LEVEL_MULTIPLIERS,
    ) -> None:
        for level, factor in multipliers.items():
            if not 0 < factor <= 1:
                raise ValueError(
                    f"Multiplier for insulation level '{level}' must be in (0, 1], got {factor}"
                )
        for era, row in base_values.items():
            missing = [c.value for c in EnvelopeCategory if c not in row]
            if missing:
                raise ValueError(f"Era '{era}' has no base U-value for {missing}")
        if DEFAULT_ERA not in base_values or DEFAULT_INSULATION_LEVEL not in multipliers:
            raise ValueError("Catalog tables must contain the default era and level")

        self._base = {era: dict(row) for era, row in base_values.items()}
        self._multipliers = dict(multipliers)
        self._cache: dict[tuple[BuildingEra, InsulationLevel], UValuePreset] = {}

    def resolve_keys(
        self,
        era: BuildingEra | str | None,
        level: InsulationLevel | str | None,
    ) -> tuple[BuildingEra, InsulationLevel]:
        """Map raw era/level input onto table keys, applying the defaults."""
        era_key = BuildingEra.parse(era)
        if era_key is None or era_key not in self._base:
            if era is not None:
                logger.debug("No U-value row for era %r, using %s", era, DEFAULT_ERA)
            era_key = DEFAULT_ERA
        level_key = InsulationLevel.parse(level)
        if level_key is None or level_key not in self._multipliers:
            if level is not None:
                logger.debug(
                    "No multiplier for insulation level %r, using %s",
                    level,
                    DEFAULT_INSULATION_LEVEL,
                )
            level_key = DEFAULT_INSULATION_LEVEL
        return era_key, level_key

    def lookup(
        self,
        era: BuildingEra | str | None,
        level: InsulationLevel | str | None,
    ) -> UValuePreset:
        """Return the default U-values for an era and insulation level."""
        key = self.resolve_keys(era, level)
        preset = self._cache.get(key)
        if preset is None:
            era_key, level_key = key
            base = self._base[era_key]
            factor = self._multipliers[level_key]
            preset = UValuePreset(
                **{c.value: round2(base[c] * factor) for c in EnvelopeCategory}
            )
            self._cache[key] = preset
        return preset

    def lookup_category(
        self,
        era: BuildingEra | str | None,
        level: InsulationLevel | str | None,
        category: EnvelopeCategory,
    ) -> float:
        """Return one category's default U-value."""
        return self.lookup(era, level).for_category(category)

    def table(self) -> dict[str, dict[str, dict[str, float]]]:
        """Full era x level grid, for display and export."""
        return {
            era.value: {
                level.value: vars(self.lookup(era, level)).copy()
                for level in self._multipliers
            }
            for era in self._base
        }
