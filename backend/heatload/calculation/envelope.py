"""Turn a room's envelope into heat-transfer coefficients (W/K)."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from heatload.calculation.validation import finite_non_negative, is_finite, is_valid_u_value
from heatload.models.enums import SurfaceKind

if TYPE_CHECKING:
    from heatload.models.room import Room


@dataclass(frozen=True)
class SurfaceCoefficient:
    """U·A of one envelope surface."""

    kind: SurfaceKind
    name: str
    area: float
    u_value: float

    @property
    def h_w_per_k(self) -> float:
        return self.u_value * self.area


@dataclass(frozen=True)
class EnvelopeCoefficients:
    """Room-level coefficients plus the surfaces they were summed from."""

    transmission_w_per_k: float
    bridge_w_per_k: float
    surfaces: tuple[SurfaceCoefficient, ...] = ()


def _surface(kind: SurfaceKind, name: str, area: float | None, u_value: float | None) -> SurfaceCoefficient:
    # Unusable numbers contribute nothing instead of propagating NaN
    return SurfaceCoefficient(
        kind=kind,
        name=name,
        area=finite_non_negative(area),
        u_value=u_value if is_valid_u_value(u_value) else 0.0,
    )


class EnvelopeAggregator:
    """Sum U·A over the exterior envelope and Ψ·L over thermal bridges.

    Only exterior walls count. Windows and doors are treated as exterior
    facing. A ceiling or floor without its own area uses the room area.
    """

    def surfaces(self, room: Room) -> list[SurfaceCoefficient]:
        result: list[SurfaceCoefficient] = []
        for i, wall in enumerate(room.walls, start=1):
            if not wall.is_exterior:
                continue
            result.append(_surface(SurfaceKind.WALL, wall.name or f"Wand #{i}", wall.area, wall.u_value))
        for i, window in enumerate(room.windows, start=1):
            result.append(_surface(SurfaceKind.WINDOW, f"Fenster #{i}", window.area, window.u_value))
        for i, door in enumerate(room.doors, start=1):
            result.append(_surface(SurfaceKind.DOOR, f"Tür #{i}", door.area, door.u_value))
        if room.ceiling_config is not None:
            ceiling = room.ceiling_config
            area = ceiling.area if is_finite(ceiling.area) else room.area
            result.append(_surface(SurfaceKind.CEILING, "Decke", area, ceiling.u_value))
        if room.floor_config is not None:
            floor = room.floor_config
            area = floor.area if is_finite(floor.area) else room.area
            result.append(_surface(SurfaceKind.FLOOR, "Boden", area, floor.u_value))
        return result

    def bridge_coefficient(self, room: Room) -> float:
        return math.fsum(
            finite_non_negative(bridge.psi_value) * finite_non_negative(bridge.length)
            for bridge in room.thermal_bridges
        )

    def aggregate(self, room: Room) -> EnvelopeCoefficients:
        surfaces = tuple(self.surfaces(room))
        return EnvelopeCoefficients(
            transmission_w_per_k=math.fsum(s.h_w_per_k for s in surfaces),
            bridge_w_per_k=self.bridge_coefficient(room),
            surfaces=surfaces,
        )
