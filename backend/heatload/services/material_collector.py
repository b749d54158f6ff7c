"""Bill of materials collected from the floor/room tree."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from heatload.calculation.validation import is_finite, is_valid_u_value
from heatload.formatting import format_u_value, round_half_away
from heatload.models.enums import HeaterType, MaterialCategory, MaterialUnit
from heatload.models.materials import MaterialLine
from heatload.services.hydraulics import heater_label

if TYPE_CHECKING:
    from collections.abc import Iterable

    from heatload.models.room import Floor, Heater, Room

logger = logging.getLogger(__name__)

_NOTE_SEPARATOR = " • "


def _join_notes(*parts: str | None) -> str | None:
    notes = _NOTE_SEPARATOR.join(p for p in parts if p)
    return notes or None


def _u_note(value: float | None) -> str | None:
    return format_u_value(value) if is_valid_u_value(value) else None


class MaterialCollector:
    """Walk floors and rooms and emit one line per envelope element and heater.

    Lines whose quantity is not a finite positive number are dropped. No
    thermal math happens here; U-values only appear as notes.
    """

    def collect(self, floors: list[Floor]) -> list[MaterialLine]:
        lines: list[MaterialLine] = []
        for floor in floors:
            for room in floor.rooms:
                for category, name, quantity, unit, notes in self._room_lines(room):
                    if not (math.isfinite(quantity) and quantity > 0):
                        continue
                    lines.append(
                        MaterialLine(
                            category=category,
                            name=name,
                            unit=unit,
                            quantity=quantity,
                            room_id=room.id,
                            room_name=room.name,
                            notes=notes,
                        )
                    )
        logger.debug("Collected %d material lines from %d floors", len(lines), len(floors))
        return lines

    def group(self, lines: Iterable[MaterialLine]) -> list[MaterialLine]:
        """Merge lines with the same (category, name, unit), summing quantity.

        Output keeps first-seen order. Notes come from the first line; the
        room reference is cleared when lines from different rooms merge.
        """
        grouped: dict[tuple[str, str, str], MaterialLine] = {}
        for line in lines:
            key = (line.category, line.name, line.unit)
            prev = grouped.get(key)
            if prev is None:
                grouped[key] = line
                continue
            update: dict[str, object] = {"quantity": prev.quantity + line.quantity}
            if prev.room_id != line.room_id:
                update.update(room_id=None, room_name=None)
            grouped[key] = prev.model_copy(update=update)
        return list(grouped.values())

    # ------------------------------------------------------------------
    # Per-room lines: (category, name, quantity, unit, notes)
    # ------------------------------------------------------------------

    def _room_lines(
        self, room: Room
    ) -> Iterable[tuple[MaterialCategory, str, float, MaterialUnit, str | None]]:
        for wall in room.walls:
            name = f"{wall.name} ({wall.material})" if wall.material else wall.name
            yield MaterialCategory.WALL, name, _quantity(wall.area), MaterialUnit.SQUARE_METRE, _u_note(wall.u_value)

        for i, window in enumerate(room.windows, start=1):
            name = f"Fenster #{i} ({window.type})" if window.type else f"Fenster #{i}"
            notes = _join_notes(
                f"Orientierung {window.orientation}" if window.orientation else None,
                _u_note(window.u_value),
            )
            yield MaterialCategory.WINDOW, name, _quantity(window.area), MaterialUnit.SQUARE_METRE, notes

        for i, door in enumerate(room.doors, start=1):
            yield MaterialCategory.DOOR, f"Tür #{i}", _quantity(door.area), MaterialUnit.SQUARE_METRE, _u_note(door.u_value)

        if room.ceiling_config is not None:
            ceiling = room.ceiling_config
            yield MaterialCategory.CEILING, "Decke", _quantity(ceiling.area), MaterialUnit.SQUARE_METRE, _u_note(ceiling.u_value)
        if room.floor_config is not None:
            floor = room.floor_config
            yield MaterialCategory.FLOOR, "Boden", _quantity(floor.area), MaterialUnit.SQUARE_METRE, _u_note(floor.u_value)

        for heater in room.heaters:
            yield from _heater_lines(heater)


def _quantity(value: float | None) -> float:
    # NaN is dropped by the quantity filter in collect()
    return float(value) if value is not None else math.nan


def _heater_lines(
    heater: Heater,
) -> Iterable[tuple[MaterialCategory, str, float, MaterialUnit, str | None]]:
    title = heater_label(heater) if heater.type == HeaterType.RADIATOR else "Fußbodenheizung-Kreis"
    kv_note = None
    if heater.kv_preset_label:
        kv_note = f"kv {heater.kv_preset_label}"
        if is_finite(heater.kv_value):
            kv_note += f" ({heater.kv_value:g})"
    notes = _join_notes(
        f"{heater.output:g} W" if is_finite(heater.output) else None,
        f"Regime {heater.standard_regime}" if heater.standard_regime else None,
        kv_note,
    )
    yield MaterialCategory.RADIATOR, title, 1.0, MaterialUnit.PIECES, notes

    if is_finite(heater.flow_lps) and heater.flow_lps > 0:
        litres_per_hour = round_half_away(heater.flow_lps * 3600, 0)
        yield MaterialCategory.RADIATOR, f"{title} – Volumenstrom", litres_per_hour, MaterialUnit.LITRES_PER_HOUR, None
