"""Bill-of-materials exports."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from heatload.export.csv_writer import write_csv
from heatload.formatting import format_de_number

if TYPE_CHECKING:
    from heatload.models.building import BuildingMetadata
    from heatload.models.materials import MaterialLine

MATERIALS_CSV_HEADER = ("Kategorie", "Bezeichnung", "Menge", "Einheit", "Notizen")


def materials_to_csv(lines: list[MaterialLine]) -> str:
    """Materials list as German CSV; quantities with up to two decimals."""
    rows: list[tuple[object, ...]] = [MATERIALS_CSV_HEADER]
    rows.extend(
        (
            line.category.value,
            line.name,
            format_de_number(line.quantity, 2, trim=True),
            line.unit.value,
            line.notes or "",
        )
        for line in lines
    )
    return write_csv(rows)


def materials_payload(lines: list[MaterialLine], building: BuildingMetadata | None = None) -> dict[str, Any]:
    project: dict[str, Any] = {}
    if building is not None:
        project = {
            "address": building.address,
            "constructionYear": building.construction_year,
            "buildingType": building.building_type,
            "postalCode": building.postal_code,
        }
    return {
        "project": project,
        "items": [line.model_dump(mode="json", by_alias=True) for line in lines],
    }


def materials_to_json(lines: list[MaterialLine], building: BuildingMetadata | None = None) -> str:
    """Materials list as pretty-printed JSON for ERP imports."""
    return json.dumps(materials_payload(lines, building), indent=2, ensure_ascii=False)
