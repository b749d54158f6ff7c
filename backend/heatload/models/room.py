"""Room and envelope models: the floor/room tree the engine walks.

Numeric fields are deliberately permissive (optional, NaN-tolerant): the tree
is authored interactively and is often incomplete. Missing U-values are
filled by the preset resolver; missing area/height/target temperature on a
room are reported by the engine as a ``ValidationError``.
"""

from __future__ import annotations

from pydantic import Field

from heatload.models.base import CamelModel, Number


class WallDetail(CamelModel):
    """A wall segment. Only exterior walls lose heat to the outside."""

    id: str
    name: str = ""
    type: str | None = None
    material: str | None = None
    custom_material: str | None = None
    is_exterior: bool = True
    u_value: Number = None
    area: Number = 0.0
    length: Number = None
    addon: str | None = None


class WindowDetail(CamelModel):
    """A window; always counted as exterior-facing."""

    id: str
    area: Number = 0.0
    type: str | None = None
    u_value: Number = None
    orientation: str | None = None


class DoorDetail(CamelModel):
    """A door; always counted as exterior-facing."""

    id: str
    area: Number = 0.0
    to_unheated: bool = False
    u_value: Number = None


class CeilingConfig(CamelModel):
    """Ceiling / roof of a room (preset category 'roof').

    Descriptive fields do not enter the calculation.
    """

    area: Number = None
    u_value: Number = None
    layer_r_values: list[float] = Field(default_factory=list)
    material: str | None = None
    insulated: bool | None = None
    insulation_standard: str | None = None
    roof_type: str | None = None
    knee_wall_height: Number = None
    roof_windows: bool = False
    dormers: bool = False
    addon: str | None = None


class FloorConfig(CamelModel):
    """Floor slab of a room (preset category 'floor')."""

    area: Number = None
    u_value: Number = None
    layer_r_values: list[float] = Field(default_factory=list)
    heated: bool = False
    material: str | None = None
    insulated: bool = False
    floor_type: str | None = None
    addon: str | None = None


class ThermalBridgeDetail(CamelModel):
    """Linear thermal bridge, Ψ in W/(m·K) over a length in m."""

    id: str
    name: str = ""
    psi_value: Number = None
    length: Number = None


class VentilationConfig(CamelModel):
    """Ventilation settings of a room.

    ``ventilation_system`` marks a heat-recovery unit; its efficiency may be
    given as a fraction (0.8) or a percentage (80).
    """

    room_type: str | None = None
    target_temp: Number = None
    air_exchange_rate: Number = None
    ventilation_system: bool = False
    heat_recovery_efficiency: Number = None


class Heater(CamelModel):
    """A heat emitter. Only used for the bill of materials and balancing."""

    id: str
    type: str = "radiator"
    sub_type: str | None = None
    height: Number = None
    width: Number = None
    output: Number = None
    valve_type: str | None = None
    valve_brand: str | None = None
    room_temp: Number = None
    replacement: bool = False
    brand: str | None = None
    series: str | None = None
    standard_regime: str | None = None
    nominal_output_at_standard: Number = None
    kv_preset_label: str | None = None
    kv_value: Number = None
    flow_lps: Number = None
    pressure_drop: Number = None


class Room(CamelModel):
    """A heated room and its thermal envelope."""

    id: str
    name: str = ""
    area: Number = None
    height: Number = None
    target_temperature: Number = None
    walls: list[WallDetail] = Field(default_factory=list)
    windows: list[WindowDetail] = Field(default_factory=list)
    doors: list[DoorDetail] = Field(default_factory=list)
    ceiling_config: CeilingConfig | None = None
    floor_config: FloorConfig | None = None
    thermal_bridges: list[ThermalBridgeDetail] = Field(default_factory=list)
    heaters: list[Heater] = Field(default_factory=list)
    ventilation: VentilationConfig | None = None

    @property
    def volume_m3(self) -> float:
        """Air volume (area x height); 0.0 when either is unknown."""
        if self.area is None or self.height is None:
            return 0.0
        return self.area * self.height


class Floor(CamelModel):
    """A storey. Room order is for display only."""

    id: str
    name: str = ""
    rooms: list[Room] = Field(default_factory=list)
