"""Enums for the buildcalc domain models."""

from __future__ import annotations

from enum import StrEnum


class BuildingType(StrEnum):
    """Building occupancy classes accepted by the estimator."""

    RESIDENTIAL = "Residential"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"


class ConcreteGrade(StrEnum):
    """Concrete grades per IS 456:2000 (characteristic strength in MPa)."""

    M15 = "M15"
    M20 = "M20"
    M25 = "M25"
    M30 = "M30"
    M35 = "M35"
    M40 = "M40"

    @classmethod
    def parse(cls, value: object) -> ConcreteGrade:
        """Resolve a grade label, falling back to M25 when unrecognized."""
        try:
            return cls(value)
        except ValueError:
            return cls.M25


class UnitSystem(StrEnum):
    """Unit system of the length/width inputs."""

    METRIC = "metric"
    IMPERIAL = "imperial"


class SlabType(StrEnum):
    """Simplified slab classification derived from the building type."""

    ONE_WAY = "One-way slab"
    TWO_WAY = "Two-way slab"
