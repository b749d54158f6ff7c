"""Results summary export (the printable heat-load report as CSV)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from heatload.export.csv_writer import write_csv
from heatload.formatting import format_de_number

if TYPE_CHECKING:
    from heatload.models.results import ResultSummary

RESULTS_CSV_HEADER = (
    "Stockwerk/Raum",
    "Transmissionsverluste (kW)",
    "Lüftungsverluste (kW)",
    "Wärmebrücken (kW)",
    "Sicherheitszuschlag (kW)",
    "Heizlast inkl. Zuschlag (kW)",
    "Fläche (m²)",
    "Basislast ohne Zuschlag (kW)",
)


def results_to_csv(summary: ResultSummary, recommendation: str = "–") -> str:
    """Summary block, a blank line, then one row per room.

    All numbers have one decimal in German notation.
    """

    def num(value: float) -> str:
        return format_de_number(value, 1)

    rows: list[tuple[object, ...]] = [
        ("Gesamtlast (kW)", num(summary.total_load_kw)),
        ("Gesamtfläche (m²)", num(summary.total_area)),
        ("Heizlast pro m² (W/m²)", num(summary.watts_per_sqm)),
        ("Energieklasse", summary.efficiency_band),
        ("Empfehlung", recommendation),
        (),
        RESULTS_CSV_HEADER,
    ]
    for row in summary.room_breakdown:
        label = f"{row.floor} – {row.room}" if row.floor else row.room
        rows.append(
            (
                label,
                num(row.transmission_loss),
                num(row.ventilation_loss),
                num(row.thermal_bridge_loss),
                num(row.safety_margin),
                num(row.room_heat_load),
                num(row.area),
                num(row.base_loss),
            )
        )
    return write_csv(rows)
