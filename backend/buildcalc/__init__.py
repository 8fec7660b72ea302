"""BuildCalc building material estimator.

Usage::

    from buildcalc import BuildingParameters, estimate

    params = BuildingParameters(
        length=20, width=15, floors=3,
        building_type="Residential", concrete_grade="M25",
    )
    result = estimate(params)
"""

__version__ = "0.1.0"

from buildcalc.engine import estimate
from buildcalc.models.building import BuildingParameters, LaborCosts, MaterialPrices
from buildcalc.models.enums import BuildingType, ConcreteGrade, SlabType, UnitSystem
from buildcalc.models.estimate import EstimationResult, MixDesign

__all__ = [
    "BuildingParameters",
    "BuildingType",
    "ConcreteGrade",
    "EstimationResult",
    "LaborCosts",
    "MaterialPrices",
    "MixDesign",
    "SlabType",
    "UnitSystem",
    "__version__",
    "estimate",
]
