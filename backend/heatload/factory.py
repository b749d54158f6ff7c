"""Factory functions for creating pre-configured HeatLoadEngine instances."""

from __future__ import annotations

from heatload.calculation.envelope import EnvelopeAggregator
from heatload.calculation.losses import LossCalculator
from heatload.calculation.resolver import PresetResolver
from heatload.calculation.results import ResultsAggregator
from heatload.config import EngineSettings
from heatload.data.catalog import PresetCatalog
from heatload.engine import HeatLoadEngine


def create_default_engine(settings: EngineSettings | None = None) -> HeatLoadEngine:
    """Create a HeatLoadEngine wired up with the built-in U-value presets.

    This is the recommended way to create a HeatLoadEngine. It wires the
    preset catalog, resolver, aggregator, loss calculator and results
    aggregator together so callers don't need to understand the internal
    wiring.

    Args:
        settings: Optional settings; library defaults when omitted.

    Returns:
        A HeatLoadEngine ready to calculate.

    Example::

        from heatload import create_default_engine

        engine = create_default_engine()
        results = engine.calculate(building, floors)
    """
    settings = settings or EngineSettings()
    return HeatLoadEngine(
        resolver=PresetResolver(PresetCatalog()),
        aggregator=EnvelopeAggregator(),
        calculator=LossCalculator(settings.default_air_exchange_rate),
        results=ResultsAggregator(),
        settings=settings,
    )
