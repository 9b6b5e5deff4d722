from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProjectionPoint:
    year: int

    asphalt_no_maintenance: float = 0.0
    asphalt_with_maintenance: float = 0.0
    concrete_no_maintenance: float = 0.0
    concrete_with_maintenance: float = 0.0

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "asphaltNoMaintenance": self.asphalt_no_maintenance,
            "asphaltWithMaintenance": self.asphalt_with_maintenance,
            "concreteNoMaintenance": self.concrete_no_maintenance,
            "concreteWithMaintenance": self.concrete_with_maintenance,
        }


@dataclass(frozen=True)
class ProjectionResults:
    projections: tuple[ProjectionPoint, ...] = field(default_factory=tuple)
    suggested_budget: float = 0.0

    @property
    def final(self) -> ProjectionPoint:
        return self.projections[-1]

    def to_dict(self) -> dict:
        """JSON mapping with the field names the chart and export consumers read."""
        return {
            "projections": [p.to_dict() for p in self.projections],
            "suggestedBudget": self.suggested_budget,
        }
