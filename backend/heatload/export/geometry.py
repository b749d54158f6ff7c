"""Geometry exports: the room tree for downstream apps and envelope elements."""

from __future__ import annotations

import json
import math
from typing import TYPE_CHECKING, Any

from heatload.calculation.validation import finite_non_negative, is_finite, is_valid_u_value
from heatload.models.payload import EnvelopeElement

if TYPE_CHECKING:
    from heatload.models.building import BuildingMetadata
    from heatload.models.room import Floor, Room


def _num(value: float | None) -> float | None:
    # JSON has no NaN/Infinity
    return value if value is not None and math.isfinite(value) else None


def _room_geometry(room: Room) -> dict[str, Any]:
    ceiling = room.ceiling_config
    floor = room.floor_config
    return {
        "id": room.id,
        "name": room.name,
        "area_m2": _num(room.area),
        "height_m": _num(room.height),
        "targetTemp_C": _num(room.target_temperature),
        "walls": [
            {
                "id": w.id,
                "name": w.name,
                "type": w.type,
                "isExterior": w.is_exterior,
                "area_m2": _num(w.area),
                "u_W_m2K": _num(w.u_value),
                "length_m": _num(w.length),
                "material": w.material,
            }
            for w in room.walls
        ],
        "windows": [
            {
                "id": w.id,
                "type": w.type,
                "area_m2": _num(w.area),
                "u_W_m2K": _num(w.u_value),
                "orientation": w.orientation,
            }
            for w in room.windows
        ],
        "doors": [
            {
                "id": d.id,
                "area_m2": _num(d.area),
                "toUnheated": d.to_unheated,
                "u_W_m2K": _num(d.u_value),
            }
            for d in room.doors
        ],
        "ceiling": (
            {
                "area_m2": _num(ceiling.area),
                "u_W_m2K": _num(ceiling.u_value),
                "roofType": ceiling.roof_type,
                "insulationStandard": ceiling.insulation_standard,
            }
            if ceiling is not None
            else None
        ),
        "floor": (
            {
                "area_m2": _num(floor.area),
                "u_W_m2K": _num(floor.u_value),
                "floorType": floor.floor_type,
                "insulated": floor.insulated,
            }
            if floor is not None
            else None
        ),
    }


def geometry_payload(building: BuildingMetadata, floors: list[Floor]) -> dict[str, Any]:
    era = building.effective_era
    return {
        "building": {
            "address": building.address,
            "postalCode": building.postal_code,
            "location": building.location,
            "buildingType": building.building_type,
            "era": era.value if era is not None else None,
            "insulationLevel": (
                building.insulation_level.value if building.insulation_level is not None else None
            ),
            "floors": building.floors,
            "residents": building.residents,
        },
        "floors": [
            {
                "id": floor.id,
                "name": floor.name,
                "rooms": [_room_geometry(room) for room in floor.rooms],
            }
            for floor in floors
        ],
    }


def geometry_to_json(building: BuildingMetadata, floors: list[Floor]) -> str:
    """Compact geometry of the whole building as pretty-printed JSON."""
    return json.dumps(geometry_payload(building, floors), indent=2, ensure_ascii=False)


def _r_layers(u_value: float | None, fallback: list[float] | None = None) -> list[float]:
    if is_valid_u_value(u_value):
        return [1 / u_value]
    return [r for r in fallback or [] if math.isfinite(r) and r > 0]


def room_envelope_elements(room: Room) -> list[EnvelopeElement]:
    """Envelope of one room as (name, area, R layers).

    Each U-value becomes a single layer R = 1/U. Elements without area or
    without any layer are left out.
    """
    room_area = finite_non_negative(room.area)
    candidates = [
        EnvelopeElement(
            name=(w.name or "").strip() or "Wand",
            area=finite_non_negative(w.area),
            layer_r_values=_r_layers(w.u_value),
        )
        for w in room.walls
    ]
    if room.ceiling_config is not None:
        c = room.ceiling_config
        candidates.append(
            EnvelopeElement(
                name="Decke",
                area=finite_non_negative(c.area) if is_finite(c.area) else room_area,
                layer_r_values=_r_layers(c.u_value, c.layer_r_values),
            )
        )
    if room.floor_config is not None:
        f = room.floor_config
        candidates.append(
            EnvelopeElement(
                name="Boden",
                area=finite_non_negative(f.area) if is_finite(f.area) else room_area,
                layer_r_values=_r_layers(f.u_value, f.layer_r_values),
            )
        )
    candidates.extend(
        EnvelopeElement(
            name=win.type or "Fenster",
            area=finite_non_negative(win.area),
            layer_r_values=_r_layers(win.u_value),
        )
        for win in room.windows
    )
    candidates.extend(
        EnvelopeElement(
            name="Tür",
            area=finite_non_negative(door.area),
            layer_r_values=_r_layers(door.u_value),
        )
        for door in room.doors
    )
    return [el for el in candidates if el.area and el.layer_r_values]


def envelope_elements(floors: list[Floor]) -> list[EnvelopeElement]:
    """Envelope elements of every room, in floor/room order."""
    return [el for floor in floors for room in floor.rooms for el in room_envelope_elements(room)]
