"""Core material estimation for the buildcalc library.

``estimate`` turns a ``BuildingParameters`` record into an
``EstimationResult`` using fixed rules of thumb loosely based on
IS 456:2000 and IS 10262:2019:

1. **Unit normalization** — imperial lengths are converted to meters once,
   up front; everything after works in meters, tons and kg.
2. **Structural grid** — beams and columns are laid out on a square 5 m
   grid over the footprint.
3. **Concrete volumes** — beams, columns, slabs, walls and the foundation
   are summed into a total concrete volume.
4. **Materials** — cement, water, sand and aggregate follow from the mix
   design of the selected grade; steel is 1% of the concrete volume.
5. **Costs and labor** — quantities are priced and a crew is sized from the
   floor area, productivity rate and project duration.

The function is pure: no I/O, no logging, no shared state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from buildcalc.data.mix_designs import get_mix_design
from buildcalc.data.sustainability import suggestions_for
from buildcalc.models.enums import BuildingType, SlabType, UnitSystem
from buildcalc.models.estimate import (
    CodeReferences,
    Dimensions,
    EstimationResult,
    LaborSummary,
    MaterialCosts,
    MaterialQuantities,
    StructuralDetails,
)

if TYPE_CHECKING:
    from buildcalc.models.building import BuildingParameters

FEET_TO_METERS = 0.3048

# Member sizes in meters
FLOOR_HEIGHT = 3.0
COLUMN_SIZE = 0.3  # IS 456:2000 cl. 26.5.3.1 minimum
BEAM_WIDTH = 0.25  # IS 456:2000 cl. 26.5.1.1(b) minimum
BEAM_DEPTH = 0.4
SLAB_THICKNESS = 0.125  # IS 456:2000 Table 24, two-way slab minimum
WALL_THICKNESS = 0.2
FOUNDATION_DEPTH = 1.0
BEAM_SPACING = 5.0

# Reinforcement assumed at 1% of concrete volume
STEEL_RATIO = 0.01
STEEL_DENSITY = 7850.0  # kg/m³

_TWO_WAY_SLAB_TYPES = frozenset({BuildingType.COMMERCIAL, BuildingType.INDUSTRIAL})


@dataclass(frozen=True)
class GridLayout:
    """Beam and column counts for a rectangular footprint."""

    beam_lines_length: int
    beam_lines_width: int
    floors: int

    @property
    def num_beams(self) -> int:
        return self.beam_lines_length * self.beam_lines_width

    @property
    def columns_per_floor(self) -> int:
        column_lines_length = self.beam_lines_length - 1
        column_lines_width = self.beam_lines_width - 1
        return (
            column_lines_length * self.beam_lines_width
            + column_lines_width * self.beam_lines_length
        )

    @property
    def num_columns(self) -> int:
        return self.columns_per_floor * self.floors


@dataclass(frozen=True)
class ConcreteVolumes:
    """Concrete volume (m³) per structural element."""

    beams: float
    columns: float
    slabs: float
    walls: float
    foundation: float

    @property
    def total(self) -> float:
        return self.beams + self.columns + self.slabs + self.walls + self.foundation


def normalize_dimensions(params: BuildingParameters) -> tuple[float, float]:
    """Return (length, width) in meters."""
    factor = FEET_TO_METERS if params.unit == UnitSystem.IMPERIAL else 1.0
    return params.length * factor, params.width * factor


def grid_layout(length_m: float, width_m: float, floors: int) -> GridLayout:
    """Lay beams on a fixed grid, one more line than bays along each axis."""
    return GridLayout(
        beam_lines_length=math.ceil(length_m / BEAM_SPACING) + 1,
        beam_lines_width=math.ceil(width_m / BEAM_SPACING) + 1,
        floors=floors,
    )


def concrete_volumes(length_m: float, width_m: float, layout: GridLayout) -> ConcreteVolumes:
    """Compute element volumes.

    Beam volume scales with the full building height; column volume uses a
    single floor height.
    """
    building_height = layout.floors * FLOOR_HEIGHT
    return ConcreteVolumes(
        beams=BEAM_WIDTH * BEAM_DEPTH * building_height * layout.num_beams,
        columns=layout.num_columns * COLUMN_SIZE**2 * FLOOR_HEIGHT,
        slabs=length_m * width_m * SLAB_THICKNESS * layout.floors,
        walls=2 * (length_m + width_m) * WALL_THICKNESS * building_height,
        foundation=length_m * width_m * FOUNDATION_DEPTH,
    )


def estimate(params: BuildingParameters) -> EstimationResult:
    """Estimate concrete, materials, costs and labor for a building.

    Args:
        params: Validated building parameters.

    Returns:
        The full estimate. Costs are in the currency of
        ``params.material_prices`` and ``params.labor_costs``.
    """
    # 1. Normalize units
    length_m, width_m = normalize_dimensions(params)
    floors = params.floors

    # 2. Structural grid and volumes
    layout = grid_layout(length_m, width_m, floors)
    volumes = concrete_volumes(length_m, width_m, layout)
    total_volume = volumes.total

    # 3. Materials from the mix design
    mix = get_mix_design(params.concrete_grade)
    cement = total_volume * mix.cement / 1000
    water = total_volume * mix.water / 1000
    sand = total_volume * mix.fine_aggregate / 1000
    aggregate = total_volume * mix.coarse_aggregate / 1000
    steel = total_volume * STEEL_RATIO * STEEL_DENSITY

    # Simplified proxy, not a capacity check
    load_bearing_capacity = mix.strength * layout.num_beams * BEAM_WIDTH * BEAM_DEPTH * 1000

    # 4. Labor
    rates = params.labor_costs
    total_area = length_m * width_m * floors
    labor_days = total_area / rates.productivity_rate
    laborers = math.ceil(labor_days / rates.project_duration)
    labor_cost = laborers * rates.daily_wage * rates.project_duration

    # 5. Costs
    prices = params.material_prices
    cement_cost = cement * prices.cement
    sand_cost = sand * prices.sand
    aggregate_cost = aggregate * prices.aggregate
    steel_cost = steel * prices.steel
    water_cost = water * prices.water
    total_cost = cement_cost + sand_cost + aggregate_cost + steel_cost + water_cost + labor_cost

    slab_type = (
        SlabType.TWO_WAY if params.building_type in _TWO_WAY_SLAB_TYPES else SlabType.ONE_WAY
    )

    return EstimationResult(
        dimensions=Dimensions(
            length=length_m,
            width=width_m,
            floors=floors,
            building_height=floors * FLOOR_HEIGHT,
        ),
        structural_details=StructuralDetails(
            num_columns=layout.num_columns,
            num_beams=layout.num_beams,
            beam_spacing=BEAM_SPACING,
            slab_type=slab_type,
            load_bearing_capacity=load_bearing_capacity,
        ),
        mix_design=mix,
        quantities=MaterialQuantities(
            total_concrete_volume=total_volume,
            cement=cement,
            water=water,
            sand=sand,
            aggregate=aggregate,
            steel=steel,
        ),
        costs=MaterialCosts(
            cement=cement_cost,
            sand=sand_cost,
            aggregate=aggregate_cost,
            steel=steel_cost,
            water=water_cost,
            labor=labor_cost,
            total=total_cost,
        ),
        labor=LaborSummary(
            number_of_laborers=laborers,
            labor_days_required=labor_days,
            total_labor_cost=labor_cost,
        ),
        is_code_references=CodeReferences(),
        sustainability_suggestions=suggestions_for(params.building_type),
    )
