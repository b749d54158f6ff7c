"""Shared pydantic base for the heat-load models."""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


def coerce_number(value: Any) -> Any:
    """Read locale-ish numeric input ('1,5' -> 1.5); unparseable text -> None.

    The authoring UI sends whatever the user typed; a value that cannot be
    read is treated as absent so the fallback policies apply to it.
    """
    if isinstance(value, str):
        text = value.replace(",", ".").replace(" ", "").strip()
        if not text:
            return None
        try:
            return float(text)
        except ValueError:
            return None
    return value


# Optional float that tolerates NaN/inf and German decimal commas.
Number = Annotated[float | None, BeforeValidator(coerce_number)]


class CamelModel(BaseModel):
    """Immutable model that reads and writes the UI's camelCase keys.

    Attributes stay snake_case in Python; ``model_dump(by_alias=True)``
    produces the wire format.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )
