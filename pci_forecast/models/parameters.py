"""Policy constants of the deterioration and maintenance model.

These are calibration values, not structural parts of the engine. Override
them by building a ModelParameters (or through Settings) instead of editing
literals in the engine.
"""

import math
from dataclasses import dataclass, field

from pci_forecast.models.surface import SurfaceType

# PCI points lost per year at PCI 100 with no funding
ASPHALT_BASE_DECAY_RATE = 2.5
CONCRETE_BASE_DECAY_RATE = 1.5  # Concrete ages slower under equal traffic

# Extra fraction of the base rate lost per year at PCI 0
DETERIORATION_ACCELERATION = 2.0

# Preventive upkeep needed to hold PCI steady, $ per mile per year
ASPHALT_COST_PER_MILE = 25_000.0
CONCRETE_COST_PER_MILE = 18_000.0

SAFETY_FLOOR_PCI = 60.0  # "Fair" threshold used across the product
HORIZON_YEARS = 5

SOLVER_ABS_TOLERANCE = 1.0  # Dollars
SOLVER_REL_TOLERANCE = 1e-9
SOLVER_MAX_ITERATIONS = 100


class InvalidParameterError(ValueError):
    pass


@dataclass(frozen=True)
class SurfaceParameters:
    base_decay_rate: float
    cost_per_mile: float

    def __post_init__(self):
        if not (math.isfinite(self.base_decay_rate) and self.base_decay_rate > 0):
            raise InvalidParameterError(f"base_decay_rate must be > 0, got {self.base_decay_rate}")
        if not (math.isfinite(self.cost_per_mile) and self.cost_per_mile > 0):
            raise InvalidParameterError(f"cost_per_mile must be > 0, got {self.cost_per_mile}")


@dataclass(frozen=True)
class ModelParameters:
    asphalt: SurfaceParameters = field(
        default_factory=lambda: SurfaceParameters(ASPHALT_BASE_DECAY_RATE, ASPHALT_COST_PER_MILE)
    )
    concrete: SurfaceParameters = field(
        default_factory=lambda: SurfaceParameters(CONCRETE_BASE_DECAY_RATE, CONCRETE_COST_PER_MILE)
    )
    acceleration: float = DETERIORATION_ACCELERATION
    safety_floor: float = SAFETY_FLOOR_PCI
    horizon_years: int = HORIZON_YEARS
    solver_abs_tolerance: float = SOLVER_ABS_TOLERANCE
    solver_rel_tolerance: float = SOLVER_REL_TOLERANCE
    solver_max_iterations: int = SOLVER_MAX_ITERATIONS

    def __post_init__(self):
        if not (math.isfinite(self.acceleration) and self.acceleration >= 0):
            raise InvalidParameterError(f"acceleration must be >= 0, got {self.acceleration}")
        if not (math.isfinite(self.safety_floor) and 0 <= self.safety_floor <= 100):
            raise InvalidParameterError(f"safety_floor must be within [0, 100], got {self.safety_floor}")
        if self.horizon_years < 1:
            raise InvalidParameterError(f"horizon_years must be >= 1, got {self.horizon_years}")
        if not self.solver_abs_tolerance > 0:
            raise InvalidParameterError("solver_abs_tolerance must be > 0")
        if self.solver_rel_tolerance < 0:
            raise InvalidParameterError("solver_rel_tolerance must be >= 0")
        if self.solver_max_iterations < 1:
            raise InvalidParameterError("solver_max_iterations must be >= 1")

    def for_surface(self, surface: SurfaceType) -> SurfaceParameters:
        if surface is SurfaceType.ASPHALT:
            return self.asphalt
        return self.concrete


DEFAULT_PARAMETERS = ModelParameters()
