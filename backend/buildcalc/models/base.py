"""Shared pydantic configuration for buildcalc models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable model exposed on the wire with camelCase field names.

    Python code uses snake_case attributes; JSON payloads use the camelCase
    aliases, e.g. ``building_type`` <-> ``buildingType``. Floats must be
    finite.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict keyed by the camelCase aliases."""
        return self.model_dump(mode="json", by_alias=True)
