"""Tests for the top-level buildcalc package exports."""

from __future__ import annotations

import buildcalc


def test_estimate_from_top_level_imports() -> None:
    params = buildcalc.BuildingParameters(
        length=20,
        width=15,
        floors=3,
        building_type=buildcalc.BuildingType.RESIDENTIAL,
        concrete_grade=buildcalc.ConcreteGrade.M25,
    )
    result = buildcalc.estimate(params)
    assert isinstance(result, buildcalc.EstimationResult)
    assert result.structural_details.slab_type == buildcalc.SlabType.ONE_WAY


def test_all_exports_resolve() -> None:
    for name in buildcalc.__all__:
        assert hasattr(buildcalc, name), name
