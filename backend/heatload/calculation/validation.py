"""Numeric validity checks shared by the calculation steps."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, TypeGuard

from heatload.exceptions import ValidationError

if TYPE_CHECKING:
    from heatload.models.room import Room


def is_finite(value: float | None) -> TypeGuard[float]:
    return value is not None and math.isfinite(value)


def is_valid_u_value(value: float | None) -> TypeGuard[float]:
    """A U-value is usable iff it is finite and strictly positive."""
    return is_finite(value) and value > 0


def finite_non_negative(value: float | None) -> float:
    """Return ``value`` if finite and >= 0, else 0.0."""
    if is_finite(value) and value >= 0:
        return float(value)
    return 0.0


def validate_room(room: Room) -> None:
    """Check the fields that have no fallback policy.

    Raises:
        ValidationError: If area or height is missing, non-finite or not
            positive, or the target temperature is missing or non-finite.
    """
    for field in ("area", "height"):
        value = getattr(room, field)
        if not is_finite(value) or value <= 0:
            raise ValidationError(room.id, field)
    if not is_finite(room.target_temperature):
        raise ValidationError(room.id, "target_temperature")
