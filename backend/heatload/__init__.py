"""Heat-load calculation engine.

Usage::

    from heatload import BuildingMetadata, Floor, create_default_engine

    engine = create_default_engine()
    results = engine.calculate(building, floors, outdoor_design_temp_c=-12.0)
    print(results.rounded().total_heat_load_kw)
"""

from heatload.config import EngineSettings, load_settings
from heatload.data.catalog import PresetCatalog, UValuePreset
from heatload.engine import HeatLoadEngine
from heatload.exceptions import HeatLoadError, RecordNotFoundError, ValidationError
from heatload.factory import create_default_engine
from heatload.models.building import BuildingMetadata, DimensioningInputs, PVHeatPumpSettings
from heatload.models.enums import BuildingEra, InsulationLevel
from heatload.models.materials import MaterialLine
from heatload.models.payload import HeatLoadPayload, HeatLoadRecord
from heatload.models.results import CalculationMeta, CalculationResults, PerRoomLoad
from heatload.models.room import (
    CeilingConfig,
    DoorDetail,
    Floor,
    FloorConfig,
    Heater,
    Room,
    ThermalBridgeDetail,
    VentilationConfig,
    WallDetail,
    WindowDetail,
)
from heatload.services.material_collector import MaterialCollector

__all__ = [
    "BuildingEra",
    "BuildingMetadata",
    "CalculationMeta",
    "CalculationResults",
    "CeilingConfig",
    "DimensioningInputs",
    "DoorDetail",
    "EngineSettings",
    "Floor",
    "FloorConfig",
    "HeatLoadEngine",
    "HeatLoadError",
    "HeatLoadPayload",
    "HeatLoadRecord",
    "Heater",
    "InsulationLevel",
    "MaterialCollector",
    "MaterialLine",
    "PVHeatPumpSettings",
    "PerRoomLoad",
    "PresetCatalog",
    "RecordNotFoundError",
    "Room",
    "ThermalBridgeDetail",
    "UValuePreset",
    "ValidationError",
    "VentilationConfig",
    "WallDetail",
    "WindowDetail",
    "create_default_engine",
    "load_settings",
]
