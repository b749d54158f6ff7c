"""Bill-of-materials line model."""

from __future__ import annotations

from heatload.models.base import CamelModel
from heatload.models.enums import MaterialCategory, MaterialUnit


class MaterialLine(CamelModel):
    """One line of the bill of materials.

    ``room_id`` / ``room_name`` are None on grouped lines that merge several
    rooms.
    """

    category: MaterialCategory
    name: str
    unit: MaterialUnit
    quantity: float
    room_id: str | None = None
    room_name: str | None = None
    notes: str | None = None
    sku: str | None = None
