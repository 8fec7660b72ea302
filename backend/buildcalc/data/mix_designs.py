"""Nominal concrete mix designs by grade.

Proportions follow the IS 10262:2019 mix-design guideline for each grade,
expressed in kg per cubic meter of concrete. Coarse aggregate and water
content are held constant across grades; cement content rises with
strength while fine aggregate falls to keep the yield at one cubic meter.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from buildcalc.models.enums import ConcreteGrade
from buildcalc.models.estimate import MixDesign

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_GRADE = ConcreteGrade.M25

MIX_DESIGNS: Mapping[ConcreteGrade, MixDesign] = MappingProxyType({
    ConcreteGrade.M15: MixDesign(
        strength=15, cement=300, water=165,
        fine_aggregate=720, coarse_aggregate=1265, water_cement_ratio=0.55,
    ),
    ConcreteGrade.M20: MixDesign(
        strength=20, cement=330, water=165,
        fine_aggregate=700, coarse_aggregate=1265, water_cement_ratio=0.50,
    ),
    ConcreteGrade.M25: MixDesign(
        strength=25, cement=360, water=165,
        fine_aggregate=680, coarse_aggregate=1265, water_cement_ratio=0.46,
    ),
    ConcreteGrade.M30: MixDesign(
        strength=30, cement=390, water=165,
        fine_aggregate=660, coarse_aggregate=1265, water_cement_ratio=0.42,
    ),
    ConcreteGrade.M35: MixDesign(
        strength=35, cement=420, water=165,
        fine_aggregate=640, coarse_aggregate=1265, water_cement_ratio=0.39,
    ),
    ConcreteGrade.M40: MixDesign(
        strength=40, cement=450, water=165,
        fine_aggregate=620, coarse_aggregate=1265, water_cement_ratio=0.37,
    ),
})


def get_mix_design(grade: ConcreteGrade | str) -> MixDesign:
    """Look up the mix design for a grade, defaulting to M25."""
    return MIX_DESIGNS.get(ConcreteGrade.parse(grade), MIX_DESIGNS[DEFAULT_GRADE])
