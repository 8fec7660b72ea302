"""Request-boundary validation for building parameters.

The checks mirror what the calculator form promises its users and run
before pydantic parsing so that the common mistakes get short, stable
messages. Anything they let through is still parsed by
``BuildingParameters``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from buildcalc.exceptions import InvalidBuildingParametersError
from buildcalc.models.building import BuildingParameters
from buildcalc.models.enums import BuildingType, ConcreteGrade

REQUIRED_FIELDS = ("length", "width", "floors", "buildingType", "concreteGrade")
POSITIVE_FIELDS = ("length", "width", "floors")

VALID_BUILDING_TYPES = frozenset(t.value for t in BuildingType)
VALID_CONCRETE_GRADES = frozenset(g.value for g in ConcreteGrade)


def parse_building_parameters(payload: Any) -> BuildingParameters:
    """Validate a decoded JSON body and build ``BuildingParameters``.

    Raises:
        InvalidBuildingParametersError: With a message suitable for the
            client when any check fails.
    """
    if not isinstance(payload, Mapping):
        msg = "Request body must be a JSON object"
        raise InvalidBuildingParametersError(msg)

    if any(payload.get(field) in (None, "") for field in REQUIRED_FIELDS):
        msg = "Missing required parameters"
        raise InvalidBuildingParametersError(msg)

    for field in POSITIVE_FIELDS:
        value = _as_number(payload[field])
        if value is not None and value <= 0:
            msg = "Length, width, and floors must be positive numbers"
            raise InvalidBuildingParametersError(msg)

    if not _is_one_of(payload["buildingType"], VALID_BUILDING_TYPES):
        msg = "Invalid building type"
        raise InvalidBuildingParametersError(msg)

    if not _is_one_of(payload["concreteGrade"], VALID_CONCRETE_GRADES):
        msg = "Invalid concrete grade"
        raise InvalidBuildingParametersError(msg)

    try:
        return BuildingParameters.model_validate(payload)
    except ValidationError as exc:
        raise InvalidBuildingParametersError(describe_errors(exc.errors())) from exc


def describe_errors(errors: Sequence[Mapping[str, Any]]) -> str:
    """Turn the first pydantic/FastAPI error into a one-line message."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    if location:
        return f"Invalid value for {location}: {message}"
    return message


def _is_one_of(value: Any, allowed: frozenset[str]) -> bool:
    return isinstance(value, str) and value in allowed


def _as_number(value: Any) -> float | None:
    """Best-effort numeric view of a JSON value; None when not numeric."""
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None
