"""Fill missing U-values of a room from the preset catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from heatload.calculation.validation import is_valid_u_value
from heatload.models.enums import EnvelopeCategory

if TYPE_CHECKING:
    from heatload.data.catalog import PresetCatalog, UValuePreset
    from heatload.models.building import BuildingMetadata
    from heatload.models.room import Floor, Room

_E = TypeVar("_E")


def _with_u_value(element: _E, default: float) -> _E:
    if is_valid_u_value(element.u_value):  # type: ignore[attr-defined]
        return element
    return element.model_copy(update={"u_value": default})  # type: ignore[attr-defined]


class PresetResolver:
    """Replace invalid U-values (missing, non-finite, <= 0) with catalog defaults.

    Valid values are never touched, which makes ``resolve`` idempotent. The
    input room is not modified; a new room is returned.
    """

    def __init__(self, catalog: PresetCatalog) -> None:
        self._catalog = catalog

    def preset_for(self, building: BuildingMetadata) -> UValuePreset:
        return self._catalog.lookup(building.effective_era, building.insulation_level)

    def resolve(self, room: Room, building: BuildingMetadata) -> Room:
        preset = self.preset_for(building)
        wall_u = preset.for_category(EnvelopeCategory.WALL)
        window_u = preset.for_category(EnvelopeCategory.WINDOW)
        door_u = preset.for_category(EnvelopeCategory.DOOR)

        update: dict[str, object] = {
            "walls": [_with_u_value(w, wall_u) for w in room.walls],
            "windows": [_with_u_value(w, window_u) for w in room.windows],
            "doors": [_with_u_value(d, door_u) for d in room.doors],
        }
        if room.ceiling_config is not None:
            update["ceiling_config"] = _with_u_value(
                room.ceiling_config, preset.for_category(EnvelopeCategory.ROOF)
            )
        if room.floor_config is not None:
            update["floor_config"] = _with_u_value(
                room.floor_config, preset.for_category(EnvelopeCategory.FLOOR)
            )
        return room.model_copy(update=update)

    def resolve_floors(self, floors: list[Floor], building: BuildingMetadata) -> list[Floor]:
        """Resolve every room of every floor, keeping the tree's order."""
        return [
            floor.model_copy(
                update={"rooms": [self.resolve(room, building) for room in floor.rooms]}
            )
            for floor in floors
        ]
