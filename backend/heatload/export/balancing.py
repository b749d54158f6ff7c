"""Hydraulic balancing exports (one row per radiator)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from heatload.export.csv_writer import write_csv
from heatload.formatting import format_de_number, round_half_away
from heatload.services.hydraulics import balancing_rows

if TYPE_CHECKING:
    from heatload.models.building import BuildingMetadata
    from heatload.models.room import Floor

BALANCING_CSV_HEADER = (
    "Floor",
    "Room",
    "Radiator",
    "Target_W",
    "DeltaT_water_K",
    "Flow_L_h",
    "Suggested_Preset",
)


def balancing_to_csv(floors: list[Floor]) -> str:
    rows: list[tuple[object, ...]] = [BALANCING_CSV_HEADER]
    for row in balancing_rows(floors):
        rows.append(
            (
                row.floor,
                row.room,
                row.label,
                format_de_number(row.output_w, 0),
                format_de_number(row.delta_t_water_k, 1),
                format_de_number(row.flow_lph, 0),
                f"{row.valve_brand.value} {row.suggested_preset}",
            )
        )
    return write_csv(rows)


def balancing_payload(building: BuildingMetadata, floors: list[Floor]) -> dict[str, Any]:
    radiators = []
    for row in balancing_rows(floors):
        existing = None
        if row.existing_preset_label or row.existing_kv is not None:
            existing = {"label": row.existing_preset_label, "kv": row.existing_kv}
        radiators.append(
            {
                "floor": row.floor,
                "room": row.room,
                "heaterId": row.heater_id,
                "label": row.label,
                "brand": row.brand,
                "series": row.series,
                "outputW": round_half_away(row.output_w, 0),
                "regime": row.regime,
                "deltaT_water_K": row.delta_t_water_k,
                "flow_L_s": round_half_away(row.flow_lps, 4),
                "flow_L_h": round_half_away(row.flow_lph, 0),
                "suggestedPreset": {"brand": row.valve_brand.value, "preset": row.suggested_preset},
                "existingPreset": existing,
            }
        )
    return {
        "building": {
            "address": building.address,
            "constructionYear": building.construction_year,
            "type": building.building_type,
        },
        "radiators": radiators,
    }


def balancing_to_json(building: BuildingMetadata, floors: list[Floor]) -> str:
    return json.dumps(balancing_payload(building, floors), indent=2, ensure_ascii=False)
