"""Estimate output models for the buildcalc estimator."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from buildcalc.models.base import WireModel
from buildcalc.models.enums import SlabType


class Dimensions(WireModel):
    """Building envelope after conversion to meters."""

    length: float = Field(ge=0)
    width: float = Field(ge=0)
    floors: int = Field(ge=0)
    building_height: float = Field(ge=0)


class StructuralDetails(WireModel):
    """Coarse structural grid figures.

    ``load_bearing_capacity`` (kN) is a proxy derived from grade strength and
    beam section, not a real capacity check.
    """

    num_columns: int = Field(ge=0)
    num_beams: int = Field(ge=0)
    beam_spacing: float = Field(ge=0)
    slab_type: SlabType
    load_bearing_capacity: float = Field(ge=0)


class MixDesign(WireModel):
    """Proportions per cubic meter of concrete (kg/m³) for one grade."""

    strength: float
    cement: float
    water: float
    fine_aggregate: float
    coarse_aggregate: float
    water_cement_ratio: float


class MaterialQuantities(WireModel):
    """Concrete volume (m³), cement/sand/aggregate (tons), steel (kg), water (m³)."""

    total_concrete_volume: float = Field(ge=0)
    cement: float = Field(ge=0)
    water: float = Field(ge=0)
    sand: float = Field(ge=0)
    aggregate: float = Field(ge=0)
    steel: float = Field(ge=0)


class MaterialCosts(WireModel):
    """Costs in the currency of the input prices."""

    cement: float = Field(ge=0)
    sand: float = Field(ge=0)
    aggregate: float = Field(ge=0)
    steel: float = Field(ge=0)
    water: float = Field(ge=0)
    labor: float = Field(ge=0)
    total: float = Field(ge=0)


class LaborSummary(WireModel):
    number_of_laborers: int = Field(ge=0)
    labor_days_required: float = Field(ge=0)
    total_labor_cost: float = Field(ge=0)


class CodeReferences(WireModel):
    concrete_design: str = "IS 456:2000"
    mix_design: str = "IS 10262:2019"


class EstimationResult(WireModel):
    """Complete material, cost and labor estimate for one building.

    This is the record returned by ``POST /api/calculate`` and consumed by
    the PDF report and the email dispatcher.
    """

    dimensions: Dimensions
    structural_details: StructuralDetails
    mix_design: MixDesign
    quantities: MaterialQuantities
    costs: MaterialCosts
    labor: LaborSummary
    is_code_references: CodeReferences = Field(default_factory=CodeReferences)
    sustainability_suggestions: list[str] = Field(default_factory=list)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict of display strings.

        Used for the plain-text email body and the sample-estimate endpoint.
        """
        from buildcalc.formatting import format_amount, format_quantity

        q = self.quantities
        return {
            "building_height": format_quantity(self.dimensions.building_height, "m"),
            "floors": self.dimensions.floors,
            "slab_type": self.structural_details.slab_type.value,
            "concrete_volume": format_quantity(q.total_concrete_volume, "m³"),
            "cement": format_quantity(q.cement, "tons"),
            "sand": format_quantity(q.sand, "tons"),
            "aggregate": format_quantity(q.aggregate, "tons"),
            "steel": format_quantity(q.steel, "kg"),
            "water": format_quantity(q.water, "m³"),
            "number_of_laborers": self.labor.number_of_laborers,
            "labor_cost": format_amount(self.costs.labor),
            "total_cost": format_amount(self.costs.total),
            "num_suggestions": len(self.sustainability_suggestions),
        }
