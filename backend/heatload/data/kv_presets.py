"""Thermostatic valve preset bins by brand.

Each bin is ``(max flow in L/s, preset label)``; the first bin whose maximum
is not exceeded wins. The bins are coarse residential guidance, not a
network balancing calculation.
"""

from __future__ import annotations

import math

from heatload.models.enums import ValveBrand

KV_PRESET_BINS: dict[ValveBrand, tuple[tuple[float, str], ...]] = {
    ValveBrand.HEIMEIER: (
        (0.005, "1"),
        (0.010, "2"),
        (0.015, "3"),
        (0.025, "4"),
        (0.040, "5"),
        (math.inf, "6"),
    ),
    ValveBrand.OVENTROP: (
        (0.004, "1"),
        (0.008, "2"),
        (0.012, "3"),
        (0.020, "4"),
        (0.032, "5"),
        (math.inf, "6"),
    ),
    ValveBrand.DANFOSS: (
        (0.004, "1"),
        (0.008, "2"),
        (0.012, "3"),
        (0.018, "4"),
        (0.028, "5"),
        (0.040, "6"),
        (math.inf, "7"),
    ),
}

DEFAULT_VALVE_BRAND = ValveBrand.HEIMEIER
DEFAULT_RADIATOR_REGIME = "75/65/20"

# Specific heat of water, J/(kg·K); 1 kg of water taken as 1 L
WATER_HEAT_CAPACITY = 4180.0
FALLBACK_WATER_DELTA_T = 10.0
NO_PRESET = "—"
