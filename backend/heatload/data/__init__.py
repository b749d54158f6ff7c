"""Reference data for the heat-load engine."""

from heatload.data.catalog import PresetCatalog, UValuePreset

__all__ = [
    "PresetCatalog",
    "UValuePreset",
]
