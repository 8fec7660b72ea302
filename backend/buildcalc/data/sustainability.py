"""Sustainability suggestions attached to every estimate."""

from __future__ import annotations

from buildcalc.models.enums import BuildingType

# Two tips per building type, listed in display order.
TYPE_SUGGESTIONS: dict[BuildingType, tuple[str, str]] = {
    BuildingType.RESIDENTIAL: (
        "Consider using recycled concrete aggregates for non-structural elements.",
        "Implement rainwater harvesting systems to reduce water consumption.",
    ),
    BuildingType.COMMERCIAL: (
        "Install solar panels on the roof to offset energy consumption.",
        "Use low-VOC paints and adhesives to improve indoor air quality.",
    ),
    BuildingType.INDUSTRIAL: (
        "Incorporate natural lighting solutions to reduce energy costs.",
        "Consider using prefabricated elements to reduce on-site waste.",
    ),
}

# Appended after the type-specific tips for every building.
CEMENT_REPLACEMENT_SUGGESTION = (
    "Use fly ash or ground granulated blast furnace slag as partial cement "
    "replacement to reduce CO2 emissions."
)


def suggestions_for(building_type: BuildingType) -> list[str]:
    """Return the ordered suggestion list for a building type."""
    return [*TYPE_SUGGESTIONS.get(building_type, ()), CEMENT_REPLACEMENT_SUGGESTION]
