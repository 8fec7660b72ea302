"""Building input models for the buildcalc estimator."""

from __future__ import annotations

from pydantic import Field, field_validator

from buildcalc.models.base import WireModel
from buildcalc.models.enums import BuildingType, ConcreteGrade, UnitSystem

# Limits keep every derived figure (grid lines, labor-days, costs)
# finite for any accepted input.
MAX_DIMENSION = 100_000.0  # meters or feet
MAX_FLOORS = 500
MAX_RATE = 1e9  # unit prices and daily wage
MIN_PRODUCTIVITY_RATE = 0.001  # m²/day
MIN_PROJECT_DURATION = 1.0  # days
MAX_PROJECT_DURATION = 100_000.0


class MaterialPrices(WireModel):
    """Unit prices in the caller's currency.

    Cement, sand and aggregate are priced per ton, steel per kg and water
    per cubic meter. Defaults are typical Indian market rates in INR.
    """

    cement: float = Field(default=6000.0, ge=0, le=MAX_RATE)
    sand: float = Field(default=1800.0, ge=0, le=MAX_RATE)
    aggregate: float = Field(default=1600.0, ge=0, le=MAX_RATE)
    steel: float = Field(default=55.0, ge=0, le=MAX_RATE)
    water: float = Field(default=50.0, ge=0, le=MAX_RATE)


class LaborCosts(WireModel):
    """Labor rates used to size the crew.

    ``productivity_rate`` is floor area (m²) one laborer completes per day.
    """

    daily_wage: float = Field(default=4000.0, gt=0, le=MAX_RATE)
    productivity_rate: float = Field(default=1.0, ge=MIN_PRODUCTIVITY_RATE)
    project_duration: float = Field(
        default=180.0, ge=MIN_PROJECT_DURATION, le=MAX_PROJECT_DURATION,
    )


class BuildingParameters(WireModel):
    """Input to the estimator: overall dimensions, grade and unit prices.

    ``length`` and ``width`` are in meters for the metric unit system and
    in feet for imperial. An unrecognized ``concrete_grade`` is coerced to
    M25 here; rejecting it is the job of the request boundary.
    """

    length: float = Field(gt=0, le=MAX_DIMENSION)
    width: float = Field(gt=0, le=MAX_DIMENSION)
    floors: int = Field(gt=0, le=MAX_FLOORS)
    building_type: BuildingType
    concrete_grade: ConcreteGrade
    unit: UnitSystem = UnitSystem.METRIC
    material_prices: MaterialPrices = Field(default_factory=MaterialPrices)
    labor_costs: LaborCosts = Field(default_factory=LaborCosts)

    @field_validator("concrete_grade", mode="before")
    @classmethod
    def fall_back_to_default_grade(cls, v: object) -> ConcreteGrade:
        return ConcreteGrade.parse(v)
