"""Helpers that fill a room with typical ventilation and thermal-bridge values.

Both return a new room and leave the input untouched.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from heatload.calculation.losses import room_type_air_exchange_rate
from heatload.calculation.validation import finite_non_negative, is_finite
from heatload.data.ventilation_defaults import (
    DEFAULT_HEAT_RECOVERY_EFFICIENCY,
    DEFAULT_THERMAL_BRIDGE_ALLOWANCE,
    THERMAL_BRIDGE_ALLOWANCE_ID,
)
from heatload.models.room import ThermalBridgeDetail, VentilationConfig

if TYPE_CHECKING:
    from heatload.models.room import Room


def apply_ventilation_defaults(room: Room, mvhr: bool = False, force: bool = False) -> Room:
    """Give the room a ventilation config with a room-type air exchange rate.

    Args:
        room: Room to complete.
        mvhr: Mark the room as served by a heat-recovery unit.
        force: Overwrite rates and efficiencies that are already set.
    """
    vent = room.ventilation or VentilationConfig(room_type="living", target_temp=room.target_temperature)
    update: dict[str, object] = {}

    rate = vent.air_exchange_rate
    if force or not (is_finite(rate) and rate > 0):
        update["air_exchange_rate"] = room_type_air_exchange_rate(vent.room_type or "living")

    system = mvhr or vent.ventilation_system
    update["ventilation_system"] = system
    if system and (force or not is_finite(vent.heat_recovery_efficiency)):
        update["heat_recovery_efficiency"] = DEFAULT_HEAT_RECOVERY_EFFICIENCY

    return room.model_copy(update={"ventilation": vent.model_copy(update=update)})


def envelope_area(room: Room) -> float:
    """Gross envelope area (m²) used for the flat thermal-bridge allowance."""
    room_area = finite_non_negative(room.area)
    ceiling = room.ceiling_config.area if room.ceiling_config is not None else None
    floor = room.floor_config.area if room.floor_config is not None else None
    return math.fsum(
        [
            *(finite_non_negative(w.area) for w in room.walls),
            *(finite_non_negative(w.area) for w in room.windows),
            *(finite_non_negative(d.area) for d in room.doors),
            finite_non_negative(ceiling) if is_finite(ceiling) and ceiling else room_area,
            finite_non_negative(floor) if is_finite(floor) and floor else room_area,
        ]
    )


def apply_thermal_bridge_allowance(room: Room, k_tb: float = DEFAULT_THERMAL_BRIDGE_ALLOWANCE) -> Room:
    """Add (or replace) a flat ``k_tb x envelope area`` thermal bridge.

    The allowance is stored as a bridge with Ψ = ``k_tb`` over a "length"
    equal to the envelope area, so it flows through the normal Ψ·L sum.
    """
    allowance = ThermalBridgeDetail(
        id=THERMAL_BRIDGE_ALLOWANCE_ID,
        name="Default allowance (k_tb × A)",
        psi_value=k_tb,
        length=envelope_area(room),
    )
    bridges = list(room.thermal_bridges)
    for i, bridge in enumerate(bridges):
        if bridge.id == THERMAL_BRIDGE_ALLOWANCE_ID:
            bridges[i] = allowance
            break
    else:
        bridges.append(allowance)
    return room.model_copy(update={"thermal_bridges": bridges})
