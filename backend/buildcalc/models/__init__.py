"""Domain models for the buildcalc estimator."""

from buildcalc.models.building import BuildingParameters, LaborCosts, MaterialPrices
from buildcalc.models.enums import BuildingType, ConcreteGrade, SlabType, UnitSystem
from buildcalc.models.estimate import (
    CodeReferences,
    Dimensions,
    EstimationResult,
    LaborSummary,
    MaterialCosts,
    MaterialQuantities,
    MixDesign,
    StructuralDetails,
)

__all__ = [
    "BuildingParameters",
    "BuildingType",
    "CodeReferences",
    "ConcreteGrade",
    "Dimensions",
    "EstimationResult",
    "LaborCosts",
    "LaborSummary",
    "MaterialCosts",
    "MaterialPrices",
    "MaterialQuantities",
    "MixDesign",
    "SlabType",
    "StructuralDetails",
    "UnitSystem",
]
