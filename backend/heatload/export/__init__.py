"""CSV and JSON exports of the building tree, materials and results."""

from heatload.export.balancing import balancing_to_csv, balancing_to_json
from heatload.export.geometry import envelope_elements, geometry_to_json
from heatload.export.materials import materials_to_csv, materials_to_json
from heatload.export.results import results_to_csv

__all__ = [
    "balancing_to_csv",
    "balancing_to_json",
    "envelope_elements",
    "geometry_to_json",
    "materials_to_csv",
    "materials_to_json",
    "results_to_csv",
]
