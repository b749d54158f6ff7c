"""Dependency construction for the FastAPI endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from heatload.config import load_settings
from heatload.factory import create_default_engine

if TYPE_CHECKING:
    from heatload.config import EngineSettings
    from heatload.engine import HeatLoadEngine

logger = logging.getLogger(__name__)


def create_engine(settings: EngineSettings | None = None) -> HeatLoadEngine:
    """Create a HeatLoadEngine from ``HEATLOAD_*`` settings.

    Reads the environment when no settings are passed.
    """
    settings = settings or load_settings()
    logger.info(
        "Creating heat-load engine (outdoor %.1f °C, margin %.0f%%)",
        settings.design_outdoor_temp_c,
        settings.safety_margin_fraction * 100,
    )
    return create_default_engine(settings)
