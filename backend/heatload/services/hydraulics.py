"""Radiator design flows and thermostatic valve preset suggestions.

Rule-based guidance for hydraulic balancing: the flow each radiator needs at
its design output and the coarse valve preset that delivers it. Full network
pressure-drop balancing is not attempted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from heatload.calculation.validation import finite_non_negative, is_finite
from heatload.data.kv_presets import (
    DEFAULT_RADIATOR_REGIME,
    DEFAULT_VALVE_BRAND,
    FALLBACK_WATER_DELTA_T,
    KV_PRESET_BINS,
    NO_PRESET,
    WATER_HEAT_CAPACITY,
)
from heatload.models.base import coerce_number
from heatload.models.enums import HeaterType, ValveBrand

if TYPE_CHECKING:
    from heatload.models.room import Floor, Heater


def _regime_temperature(part: str | None, fallback: float) -> float:
    value = coerce_number(part)
    if isinstance(value, (int, float)) and math.isfinite(value) and value > 0:
        return float(value)
    return fallback


def delta_t_water(regime: str | None = DEFAULT_RADIATOR_REGIME) -> float:
    """Supply minus return temperature of a regime like '75/65/20' (K).

    Falls back to 10 K when the regime does not give a positive spread.
    """
    parts = (regime or DEFAULT_RADIATOR_REGIME).split("/")
    supply = _regime_temperature(parts[0] if parts else None, 75.0)
    ret = _regime_temperature(parts[1] if len(parts) > 1 else None, 65.0)
    spread = supply - ret
    return spread if spread > 0 else FALLBACK_WATER_DELTA_T


def compute_flow_lps(output_w: float | None, regime: str | None = DEFAULT_RADIATOR_REGIME) -> float:
    """Water flow (L/s) that carries ``output_w`` at the regime's spread.

    ``Q / (c_p * dT)`` with water taken as 1 kg/L; 0.0 for no output.
    """
    q = finite_non_negative(output_w)
    if q <= 0:
        return 0.0
    return q / (WATER_HEAT_CAPACITY * delta_t_water(regime))


def flow_lps_for_heater(heater: Heater) -> float:
    """Stored flow if the heater has one, else computed from its output."""
    if is_finite(heater.flow_lps) and heater.flow_lps > 0:
        return float(heater.flow_lps)
    return compute_flow_lps(heater.output, heater.standard_regime)


def detect_valve_brand(valve_type: str | None) -> ValveBrand:
    """Guess the valve brand from free text, defaulting to Heimeier."""
    text = (valve_type or "").lower()
    for brand in ValveBrand:
        if brand.value.lower() in text:
            return brand
    return DEFAULT_VALVE_BRAND


def kv_preset_for(flow_lps: float, brand: ValveBrand = DEFAULT_VALVE_BRAND) -> str:
    """Preset label for a target flow, e.g. ``kv_preset_for(0.012) == '3'``.

    Returns '—' when there is no flow to balance.
    """
    flow = finite_non_negative(flow_lps)
    if flow <= 0:
        return NO_PRESET
    bins = KV_PRESET_BINS[brand]
    for upper, label in bins:
        if flow <= upper:
            return label
    return bins[-1][1]


def heater_label(heater: Heater) -> str:
    """Display name of a radiator, e.g. 'Kermi Therm-X2 600x1000'."""
    size = f"{_dimension(heater.height)}x{_dimension(heater.width)}"
    parts = [heater.brand or "Heizkörper", heater.series or "", size]
    return " ".join(p for p in parts if p)


def _dimension(value: float | None) -> str:
    if not is_finite(value):
        return "?"
    return f"{value:g}"


@dataclass(frozen=True)
class BalancingRow:
    """Design flow and suggested preset of one radiator."""

    floor: str
    room: str
    heater_id: str
    label: str
    brand: str | None
    series: str | None
    output_w: float
    regime: str
    delta_t_water_k: float
    flow_lps: float
    valve_brand: ValveBrand
    suggested_preset: str
    existing_preset_label: str | None = None
    existing_kv: float | None = None

    @property
    def flow_lph(self) -> float:
        return self.flow_lps * 3600


def balancing_rows(floors: list[Floor]) -> list[BalancingRow]:
    """One row per radiator, in floor/room order. Underfloor loops are skipped."""
    rows: list[BalancingRow] = []
    for floor in floors:
        for room in floor.rooms:
            for heater in room.heaters:
                if heater.type != HeaterType.RADIATOR:
                    continue
                regime = heater.standard_regime or DEFAULT_RADIATOR_REGIME
                flow = flow_lps_for_heater(heater)
                brand = detect_valve_brand(heater.valve_type)
                rows.append(
                    BalancingRow(
                        floor=floor.name,
                        room=room.name,
                        heater_id=heater.id,
                        label=heater_label(heater),
                        brand=heater.brand,
                        series=heater.series,
                        output_w=finite_non_negative(heater.output),
                        regime=regime,
                        delta_t_water_k=delta_t_water(regime),
                        flow_lps=flow,
                        valve_brand=brand,
                        suggested_preset=kv_preset_for(flow, brand),
                        existing_preset_label=heater.kv_preset_label,
                        existing_kv=heater.kv_value if is_finite(heater.kv_value) else None,
                    )
                )
    return rows
