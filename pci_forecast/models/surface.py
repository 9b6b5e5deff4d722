"""Road surface inventory data types."""

import math
from dataclasses import dataclass
from enum import Enum


class SurfaceType(Enum):
    ASPHALT = "asphalt"
    CONCRETE = "concrete"


class InvalidInputError(ValueError):
    """Caller supplied an input the engine refuses to coerce."""

    def __init__(self, field: str, value: object, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"{field}: {reason} (got {value!r})")


def _check_number(field: str, value: object) -> float:
    # bool is an int subclass; a checkbox value is never a mileage
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, value, "must be a number")
    if not math.isfinite(value):
        raise InvalidInputError(field, value, "must be finite")
    return float(value)


@dataclass(frozen=True)
class SurfaceInputs:
    """Current network extent and condition plus the proposed yearly spend."""

    asphalt_miles: float = 0.0
    concrete_miles: float = 0.0
    asphalt_pci: float = 0.0
    concrete_pci: float = 0.0
    annual_budget: float = 0.0  # Shared across both surface types

    def validate(self) -> None:
        """Raise InvalidInputError naming the first offending field."""
        for name in ("asphalt_miles", "concrete_miles"):
            if _check_number(name, getattr(self, name)) < 0:
                raise InvalidInputError(name, getattr(self, name), "must be >= 0")

        for name in ("asphalt_pci", "concrete_pci"):
            pci = _check_number(name, getattr(self, name))
            if not 0 <= pci <= 100:
                raise InvalidInputError(name, getattr(self, name), "must be within [0, 100]")

        if _check_number("annual_budget", self.annual_budget) < 0:
            raise InvalidInputError("annual_budget", self.annual_budget, "must be >= 0")

    def miles(self, surface: SurfaceType) -> float:
        if surface is SurfaceType.ASPHALT:
            return self.asphalt_miles
        return self.concrete_miles

    def pci(self, surface: SurfaceType) -> float:
        if surface is SurfaceType.ASPHALT:
            return self.asphalt_pci
        return self.concrete_pci

    @property
    def total_miles(self) -> float:
        return self.asphalt_miles + self.concrete_miles

    @property
    def active_surfaces(self) -> tuple[SurfaceType, ...]:
        """Surface types with nonzero mileage."""
        return tuple(s for s in SurfaceType if self.miles(s) > 0)
