"""Tests for BuildingParameters, EstimationResult and related domain types."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from buildcalc.engine import estimate
from buildcalc.models import (
    BuildingParameters,
    BuildingType,
    ConcreteGrade,
    EstimationResult,
    LaborCosts,
    MaterialPrices,
    SlabType,
    UnitSystem,
)
from buildcalc.models.building import MAX_DIMENSION, MAX_FLOORS


def _make_params(**overrides: object) -> BuildingParameters:
    """Helper to build valid BuildingParameters with sensible defaults."""
    defaults: dict[str, object] = {
        "length": 20.0,
        "width": 15.0,
        "floors": 3,
        "building_type": BuildingType.RESIDENTIAL,
        "concrete_grade": ConcreteGrade.M25,
    }
    defaults.update(overrides)
    return BuildingParameters(**defaults)  # type: ignore[arg-type]


class TestValidConstruction:
    def test_minimal_valid_parameters(self) -> None:
        """Build with only required fields — defaults fill the rest."""
        p = _make_params()
        assert p.unit == UnitSystem.METRIC
        assert p.material_prices == MaterialPrices()
        assert p.labor_costs == LaborCosts()

    def test_default_prices(self) -> None:
        prices = MaterialPrices()
        assert prices.cement == 6000
        assert prices.sand == 1800
        assert prices.aggregate == 1600
        assert prices.steel == 55
        assert prices.water == 50

    def test_default_labor(self) -> None:
        labor = LaborCosts()
        assert labor.daily_wage == 4000
        assert labor.productivity_rate == 1.0
        assert labor.project_duration == 180

    def test_from_camel_case_payload(self) -> None:
        p = BuildingParameters.model_validate({
            "length": 30,
            "width": 12,
            "floors": 2,
            "buildingType": "Industrial",
            "concreteGrade": "M30",
            "unit": "imperial",
            "materialPrices": {"cement": 6500, "sand": 1900, "aggregate": 1700, "steel": 60, "water": 40},
            "laborCosts": {"dailyWage": 700, "productivityRate": 8, "projectDuration": 90},
        })
        assert p.building_type == BuildingType.INDUSTRIAL
        assert p.concrete_grade == ConcreteGrade.M30
        assert p.unit == UnitSystem.IMPERIAL
        assert p.material_prices.cement == 6500
        assert p.labor_costs.productivity_rate == 8

    def test_parameters_are_immutable(self) -> None:
        p = _make_params()
        with pytest.raises(ValidationError):
            p.length = 50.0  # type: ignore[misc]


class TestInvalidConstruction:
    @pytest.mark.parametrize("field", ["length", "width", "floors"])
    def test_non_positive_dimension_rejected(self, field: str) -> None:
        with pytest.raises(ValidationError):
            _make_params(**{field: 0})

    def test_unknown_building_type_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_params(building_type="Hospital")

    def test_fractional_floors_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_params(floors=2.5)

    def test_negative_price_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MaterialPrices(steel=-1)

    def test_zero_productivity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LaborCosts(productivity_rate=0)

    def test_zero_duration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LaborCosts(project_duration=0)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_length_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError):
            _make_params(length=value)

    def test_oversized_dimension_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_params(width=MAX_DIMENSION * 2)

    def test_too_many_floors_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _make_params(floors=MAX_FLOORS + 1)

    def test_tiny_productivity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LaborCosts(productivity_rate=1e-320)

    def test_fractional_day_duration_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LaborCosts(project_duration=0.5)


class TestConcreteGrade:
    def test_parse_known_grade(self) -> None:
        assert ConcreteGrade.parse("M40") is ConcreteGrade.M40

    @pytest.mark.parametrize("value", ["M99", "m25", "", None, 25])
    def test_parse_unknown_falls_back_to_m25(self, value: object) -> None:
        assert ConcreteGrade.parse(value) is ConcreteGrade.M25

    def test_model_coerces_unknown_grade(self) -> None:
        assert _make_params(concrete_grade="M12").concrete_grade == ConcreteGrade.M25


class TestEstimationResultWire:
    def test_wire_keys_are_camel_case(self) -> None:
        data = estimate(_make_params()).to_wire()
        assert set(data) == {
            "dimensions",
            "structuralDetails",
            "mixDesign",
            "quantities",
            "costs",
            "labor",
            "isCodeReferences",
            "sustainabilitySuggestions",
        }
        assert data["dimensions"]["buildingHeight"] == 9
        assert data["structuralDetails"]["slabType"] == "One-way slab"
        assert data["mixDesign"]["fineAggregate"] == 680
        assert data["mixDesign"]["waterCementRatio"] == 0.46
        assert "totalConcreteVolume" in data["quantities"]
        assert data["labor"]["numberOfLaborers"] == 5
        assert data["isCodeReferences"] == {
            "concreteDesign": "IS 456:2000",
            "mixDesign": "IS 10262:2019",
        }

    def test_parse_from_wire(self) -> None:
        original = estimate(_make_params(building_type=BuildingType.COMMERCIAL))
        parsed = EstimationResult.model_validate(original.to_wire())
        assert parsed == original
        assert parsed.structural_details.slab_type == SlabType.TWO_WAY

    def test_negative_quantity_rejected(self) -> None:
        data = estimate(_make_params()).to_wire()
        data["quantities"]["cement"] = -1.0
        with pytest.raises(ValidationError):
            EstimationResult.model_validate(data)


class TestSummaryDict:
    def test_summary_formats_two_decimals(self) -> None:
        summary = estimate(_make_params()).to_summary_dict()
        assert summary["building_height"] == "9.00 m"
        assert summary["concrete_volume"] == "581.61 m³"
        assert summary["cement"] == "209.38 tons"
        assert summary["steel"].startswith("45,656.")
        assert summary["steel"].endswith(" kg")
        assert summary["total_cost"] == "9,261,246.34"
        assert summary["number_of_laborers"] == 5
        assert summary["num_suggestions"] == 3
