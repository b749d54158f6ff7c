"""Transmission, ventilation and thermal-bridge losses of a room (kW)."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from heatload.calculation.validation import is_finite, validate_room
from heatload.data.ventilation_defaults import (
    ACH_DEFAULTS,
    AIR_HEAT_CAPACITY_WH_PER_M3K,
    DEFAULT_AIR_EXCHANGE_RATE,
    DEFAULT_HEAT_RECOVERY_EFFICIENCY,
    MAX_HEAT_RECOVERY_EFFICIENCY,
)

if TYPE_CHECKING:
    from heatload.calculation.envelope import EnvelopeCoefficients
    from heatload.models.room import Room, VentilationConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RoomLosses:
    """Losses of one room in kW, all >= 0."""

    transmission_loss: float
    ventilation_loss: float
    thermal_bridge_loss: float
    delta_t: float

    @property
    def total(self) -> float:
        return self.transmission_loss + self.ventilation_loss + self.thermal_bridge_loss


def room_type_air_exchange_rate(room_type: str | None, fallback: float = DEFAULT_AIR_EXCHANGE_RATE) -> float:
    """Default air changes per hour for a room type ('Wohnzimmer', 'bathroom', ...)."""
    key = (room_type or "").strip().lower()
    for needles, rate in ACH_DEFAULTS:
        if any(needle in key for needle in needles):
            return rate
    return fallback


class LossCalculator:
    """Combine envelope coefficients with the design temperature difference.

    - ``delta_t = max(0, target - outdoor)``
    - transmission = ``H_T * delta_t / 1000``
    - thermal bridges = ``H_TB * delta_t / 1000``
    - ventilation = ``V * n * 0.34 * delta_t * (1 - eta) / 1000``

    Args:
        default_air_exchange_rate: Air changes per hour for rooms without any
            ventilation settings.
    """

    def __init__(self, default_air_exchange_rate: float = DEFAULT_AIR_EXCHANGE_RATE) -> None:
        if not math.isfinite(default_air_exchange_rate) or default_air_exchange_rate < 0:
            raise ValueError(
                f"Default air exchange rate must be finite and >= 0, got {default_air_exchange_rate}"
            )
        self._default_ach = default_air_exchange_rate

    def air_exchange_rate(self, room: Room) -> float:
        """Air changes per hour for a room.

        An explicit rate (including 0) wins; settings without a rate use the
        room-type default; no settings at all use the fixed default.
        """
        vent = room.ventilation
        if vent is None:
            logger.debug("Room %s has no ventilation settings, using %.2f 1/h", room.id, self._default_ach)
            return self._default_ach
        if is_finite(vent.air_exchange_rate) and vent.air_exchange_rate >= 0:
            return float(vent.air_exchange_rate)
        rate = room_type_air_exchange_rate(vent.room_type or room.name, self._default_ach)
        logger.debug("Room %s has no air exchange rate, using %.2f 1/h for its type", room.id, rate)
        return rate

    @staticmethod
    def heat_recovery_efficiency(vent: VentilationConfig | None) -> float:
        """Recovered fraction of ventilation heat, 0 without a recovery unit."""
        if vent is None or not vent.ventilation_system:
            return 0.0
        eta = DEFAULT_HEAT_RECOVERY_EFFICIENCY
        if is_finite(vent.heat_recovery_efficiency):
            eta = vent.heat_recovery_efficiency
        if eta > 1:
            eta = eta / 100
        return min(max(eta, 0.0), MAX_HEAT_RECOVERY_EFFICIENCY)

    def compute_losses(
        self,
        room: Room,
        coefficients: EnvelopeCoefficients,
        outdoor_design_temp_c: float,
    ) -> RoomLosses:
        """Losses in kW for ``room`` at the given outdoor design temperature.

        Raises:
            ValidationError: If area, height or target temperature is unusable.
            ValueError: If the outdoor design temperature is not finite.
        """
        validate_room(room)
        if not math.isfinite(outdoor_design_temp_c):
            raise ValueError(f"Outdoor design temperature must be finite, got {outdoor_design_temp_c}")

        delta_t = max(0.0, room.target_temperature - outdoor_design_temp_c)  # type: ignore[operator]
        ach = self.air_exchange_rate(room)
        eta = self.heat_recovery_efficiency(room.ventilation)

        transmission = coefficients.transmission_w_per_k * delta_t / 1000
        bridges = coefficients.bridge_w_per_k * delta_t / 1000
        ventilation = (
            room.volume_m3 * ach * AIR_HEAT_CAPACITY_WH_PER_M3K * delta_t * (1 - eta) / 1000
        )
        return RoomLosses(
            transmission_loss=max(0.0, transmission),
            ventilation_loss=max(0.0, ventilation),
            thermal_bridge_loss=max(0.0, bridges),
            delta_t=delta_t,
        )
