"""Runtime settings read from ``HEATLOAD_*`` environment variables."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field, field_validator

from heatload.data.ventilation_defaults import (
    DEFAULT_AIR_EXCHANGE_RATE,
    DEFAULT_SAFETY_MARGIN,
    DESIGN_OUTDOOR_TEMP_C,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

ENV_PREFIX = "HEATLOAD_"


class EngineSettings(BaseModel):
    """Defaults the engine and API fall back to."""

    model_config = {"frozen": True}

    design_outdoor_temp_c: float = DESIGN_OUTDOOR_TEMP_C
    safety_margin_fraction: float = Field(default=DEFAULT_SAFETY_MARGIN, ge=0)
    default_air_exchange_rate: float = Field(default=DEFAULT_AIR_EXCHANGE_RATE, ge=0)
    cors_origins: list[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, v: object) -> object:
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


def load_settings(environ: Mapping[str, str] | None = None) -> EngineSettings:
    """Build settings from ``HEATLOAD_*`` variables.

    Example: ``HEATLOAD_DESIGN_OUTDOOR_TEMP_C=-12`` sets the default outdoor
    design temperature. Unset variables keep their defaults.

    Raises:
        pydantic.ValidationError: If a variable cannot be parsed.
    """
    env = os.environ if environ is None else environ
    values = {
        name: env[ENV_PREFIX + name.upper()]
        for name in EngineSettings.model_fields
        if ENV_PREFIX + name.upper() in env
    }
    if values:
        logger.debug("Settings overridden from environment: %s", sorted(values))
    return EngineSettings(**values)
