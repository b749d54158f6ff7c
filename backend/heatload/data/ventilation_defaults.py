"""Physical constants and default assumptions for loss calculation."""

from __future__ import annotations

# Volumetric heat capacity of air, Wh/(m³·K)
AIR_HEAT_CAPACITY_WH_PER_M3K = 0.34

# Air changes per hour for a room without any ventilation settings
DEFAULT_AIR_EXCHANGE_RATE = 0.5

# Air changes per hour by room type, for rooms with settings but no rate.
# Keys are matched as substrings of the lower-cased room type or name.
ACH_DEFAULTS: tuple[tuple[tuple[str, ...], float], ...] = (
    (("wohn", "living"), 0.5),
    (("schlaf", "bedroom"), 0.3),
    (("küche", "kueche", "kitchen"), 1.0),
    (("bad", "bath"), 1.0),
)

DEFAULT_HEAT_RECOVERY_EFFICIENCY = 0.8
MAX_HEAT_RECOVERY_EFFICIENCY = 0.95

# Used when neither the caller nor the building supplies one
DESIGN_OUTDOOR_TEMP_C = -10.0

DEFAULT_SAFETY_MARGIN = 0.10

# Flat thermal-bridge surcharge on the envelope area, W/(m²K)
DEFAULT_THERMAL_BRIDGE_ALLOWANCE = 0.04
THERMAL_BRIDGE_ALLOWANCE_ID = "default-k_tb"

# Hot-water heat per litre heated by ~40 K, kWh/L
DHW_KWH_PER_LITRE = 0.046
DEFAULT_DHW_LITRES_PER_RESIDENT = 40.0
