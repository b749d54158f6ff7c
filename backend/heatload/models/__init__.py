"""Domain models for the heat-load engine."""

from heatload.models.building import BuildingMetadata, DimensioningInputs, PVHeatPumpSettings
from heatload.models.enums import (
    BuildingEra,
    EnvelopeCategory,
    HeaterType,
    InsulationLevel,
    MaterialCategory,
    MaterialUnit,
    SurfaceKind,
    ValveBrand,
)
from heatload.models.materials import MaterialLine
from heatload.models.payload import (
    CalculationRequest,
    EnvelopeElement,
    HeatLoadPayload,
    HeatLoadRecord,
)
from heatload.models.results import (
    CalculationMeta,
    CalculationResults,
    PerRoomLoad,
    ResultSummary,
    SummaryRow,
    SurfaceLoss,
)
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

__all__ = [
    "BuildingEra",
    "BuildingMetadata",
    "CalculationMeta",
    "CalculationRequest",
    "CalculationResults",
    "CeilingConfig",
    "DimensioningInputs",
    "DoorDetail",
    "EnvelopeCategory",
    "EnvelopeElement",
    "Floor",
    "FloorConfig",
    "HeatLoadPayload",
    "HeatLoadRecord",
    "Heater",
    "HeaterType",
    "InsulationLevel",
    "MaterialCategory",
    "MaterialLine",
    "MaterialUnit",
    "PVHeatPumpSettings",
    "PerRoomLoad",
    "ResultSummary",
    "Room",
    "SummaryRow",
    "SurfaceKind",
    "SurfaceLoss",
    "ThermalBridgeDetail",
    "ValveBrand",
    "VentilationConfig",
    "WallDetail",
    "WindowDetail",
]
