"""Read-side summary types: condition bands and the budget verdict."""

from dataclasses import dataclass, field
from enum import Enum

from pci_forecast.models.surface import SurfaceType


class ConditionBand(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    FAILED = "failed"


class BudgetStatus(Enum):
    ADEQUATE = "adequate"
    INSUFFICIENT = "insufficient"


@dataclass(frozen=True)
class SurfaceSummary:
    surface: SurfaceType
    miles: float
    baseline_pci: float
    final_no_maintenance: float
    final_with_maintenance: float
    final_scenario_average: float  # Mean of the two final-year scenarios
    final_band: ConditionBand
    min_with_maintenance: float


@dataclass(frozen=True)
class ProjectionSummary:
    asphalt: SurfaceSummary
    concrete: SurfaceSummary
    network_pci: tuple[float, ...] = field(default_factory=tuple)  # Mileage-weighted, per year

    annual_budget: float = 0.0
    suggested_budget: float = 0.0
    shortfall: float = 0.0
    budget_status: BudgetStatus = BudgetStatus.ADEQUATE
    floor_breached: bool = False
    target_attainable: bool = True
