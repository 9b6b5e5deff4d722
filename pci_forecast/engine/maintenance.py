"""Maintenance-adjusted deterioration model.

Same recurrence as the no-funding model, with the annual loss scaled by
(1 - funding ratio). Ratio 0 is the unfunded model exactly, ratio 1 holds
the trajectory flat.

Pure functions. No I/O.
"""

from pci_forecast.engine.deterioration import annual_loss, clamp_pci
from pci_forecast.models.parameters import DEFAULT_PARAMETERS, ModelParameters
from pci_forecast.models.surface import SurfaceType


def full_funding_requirement(
    miles: float,
    surface: SurfaceType,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """Annual spend that fully offsets deterioration on `miles` of `surface`."""
    return miles * params.for_surface(surface).cost_per_mile


def allocate_budget(
    annual_budget: float,
    asphalt_miles: float,
    concrete_miles: float,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> dict[SurfaceType, float]:
    """Split a shared annual budget between surface types.

    The pool is split by each type's full-funding requirement, not by
    mileage. A mile of asphalt costs more to hold steady than a mile of
    concrete, so a per-mile split would leave asphalt relatively underfunded.
    Splitting by need gives both types the same funding ratio
    (budget / total requirement).
    """
    need = {
        SurfaceType.ASPHALT: full_funding_requirement(asphalt_miles, SurfaceType.ASPHALT, params),
        SurfaceType.CONCRETE: full_funding_requirement(concrete_miles, SurfaceType.CONCRETE, params),
    }
    total_need = sum(need.values())
    if total_need == 0:
        return {surface: 0.0 for surface in need}
    return {surface: annual_budget * n / total_need for surface, n in need.items()}


def funding_ratio(
    budget_share: float,
    miles: float,
    surface: SurfaceType,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """Funded fraction of the full requirement, clamped to [0, 1].

    Funding beyond the requirement buys nothing extra.
    """
    requirement = full_funding_requirement(miles, surface, params)
    if requirement == 0:
        return 0.0
    return max(0.0, min(1.0, budget_share / requirement))


def maintain(
    pci: float,
    surface: SurfaceType,
    ratio: float,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """One year at a given funding ratio."""
    return clamp_pci(pci - annual_loss(pci, surface, params) * (1 - ratio))


def decay_with_maintenance(
    p0: float,
    t: int,
    surface: SurfaceType,
    miles: float,
    budget_share: float,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """PCI after `t` years with `budget_share` spent on this surface each year."""
    if t < 0:
        raise ValueError(f"elapsed years must be >= 0, got {t}")
    ratio = funding_ratio(budget_share, miles, surface, params)
    pci = float(p0)
    for _ in range(t):
        pci = maintain(pci, surface, ratio, params)
    return pci


def maintained_series(
    p0: float,
    years: int,
    surface: SurfaceType,
    ratio: float,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> list[float]:
    """Years 0..`years` at a fixed funding ratio. Index 0 is `p0` unmodified."""
    series = [float(p0)]
    for _ in range(years):
        series.append(maintain(series[-1], surface, ratio, params))
    return series
