"""Heat-pump sizing adjustments: bivalence point and hot-water allowance."""

from __future__ import annotations

from typing import TYPE_CHECKING

from heatload.calculation.validation import finite_non_negative, is_finite
from heatload.data.ventilation_defaults import DEFAULT_DHW_LITRES_PER_RESIDENT, DHW_KWH_PER_LITRE

if TYPE_CHECKING:
    from heatload.models.building import DimensioningInputs


def effective_outdoor_temperature(outdoor_c: float, dimensioning: DimensioningInputs | None) -> float:
    """Outdoor design temperature the heat pump is sized for.

    Below the bivalence temperature a second heater takes over, so the heat
    pump only sees ``max(outdoor, bivalence)``.
    """
    if dimensioning is not None and is_finite(dimensioning.bivalence_temperature_c):
        return max(outdoor_c, dimensioning.bivalence_temperature_c)
    return outdoor_c


def dhw_allowance_kw(dimensioning: DimensioningInputs | None) -> float:
    """Continuous kW needed to heat the daily hot water of all residents."""
    if dimensioning is None:
        return 0.0
    residents = finite_non_negative(dimensioning.residents)
    litres = dimensioning.dhw_per_resident_l_per_day
    if not is_finite(litres):
        litres = DEFAULT_DHW_LITRES_PER_RESIDENT
    return residents * finite_non_negative(litres) * DHW_KWH_PER_LITRE / 24
