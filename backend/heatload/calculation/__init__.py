"""Calculation steps of the heat-load pipeline."""

from heatload.calculation.envelope import EnvelopeAggregator, EnvelopeCoefficients, SurfaceCoefficient
from heatload.calculation.losses import LossCalculator, RoomLosses
from heatload.calculation.resolver import PresetResolver
from heatload.calculation.results import ResultsAggregator

__all__ = [
    "EnvelopeAggregator",
    "EnvelopeCoefficients",
    "LossCalculator",
    "PresetResolver",
    "ResultsAggregator",
    "RoomLosses",
    "SurfaceCoefficient",
]
