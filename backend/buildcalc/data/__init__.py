"""Reference data for the buildcalc estimator."""

from buildcalc.data.mix_designs import DEFAULT_GRADE, MIX_DESIGNS, get_mix_design
from buildcalc.data.sustainability import suggestions_for

__all__ = [
    "DEFAULT_GRADE",
    "MIX_DESIGNS",
    "get_mix_design",
    "suggestions_for",
]
