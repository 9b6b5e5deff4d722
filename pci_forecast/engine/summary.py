"""Summary of a projection run: final-year condition and the budget verdict.

Feeds the summary cards and the budget warning.
"""

from pci_forecast.engine.condition import classify_pci
from pci_forecast.engine.solver import floor_margin, search_upper_bound
from pci_forecast.models.parameters import DEFAULT_PARAMETERS, ModelParameters
from pci_forecast.models.results import ProjectionPoint, ProjectionResults
from pci_forecast.models.summary import BudgetStatus, ProjectionSummary, SurfaceSummary
from pci_forecast.models.surface import SurfaceInputs, SurfaceType


def _series(points: tuple[ProjectionPoint, ...], surface: SurfaceType, maintained: bool) -> list[float]:
    attr = f"{surface.value}_{'with' if maintained else 'no'}_maintenance"
    return [getattr(p, attr) for p in points]


def _surface_summary(
    inputs: SurfaceInputs, results: ProjectionResults, surface: SurfaceType
) -> SurfaceSummary:
    no_maint = _series(results.projections, surface, maintained=False)
    with_maint = _series(results.projections, surface, maintained=True)
    return SurfaceSummary(
        surface=surface,
        miles=inputs.miles(surface),
        baseline_pci=inputs.pci(surface),
        final_no_maintenance=no_maint[-1],
        final_with_maintenance=with_maint[-1],
        final_scenario_average=(no_maint[-1] + with_maint[-1]) / 2,
        final_band=classify_pci(with_maint[-1]),
        min_with_maintenance=min(with_maint),
    )


def network_pci(inputs: SurfaceInputs, results: ProjectionResults) -> tuple[float, ...]:
    """Mileage-weighted with-maintenance PCI per year.

    With no mileage the two series are averaged evenly.
    """
    total = inputs.total_miles
    if total == 0:
        weights = {SurfaceType.ASPHALT: 0.5, SurfaceType.CONCRETE: 0.5}
    else:
        weights = {s: inputs.miles(s) / total for s in SurfaceType}
    series = {s: _series(results.projections, s, maintained=True) for s in SurfaceType}
    return tuple(
        sum(weights[s] * series[s][year] for s in SurfaceType)
        for year in range(len(results.projections))
    )


def summarize(
    inputs: SurfaceInputs,
    results: ProjectionResults,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> ProjectionSummary:
    asphalt = _surface_summary(inputs, results, SurfaceType.ASPHALT)
    concrete = _surface_summary(inputs, results, SurfaceType.CONCRETE)

    floor_breached = any(
        s.min_with_maintenance < params.safety_floor
        for s in (asphalt, concrete)
        if s.miles > 0
    )

    suggested = results.suggested_budget
    target_attainable = not (
        suggested >= search_upper_bound(inputs, params)
        and floor_margin(inputs, suggested, params) < 0
    )

    # Judged on the proposed budget itself
    if target_attainable and floor_margin(inputs, inputs.annual_budget, params) >= 0:
        status = BudgetStatus.ADEQUATE
        shortfall = 0.0
    else:
        status = BudgetStatus.INSUFFICIENT
        shortfall = max(0.0, suggested - inputs.annual_budget)

    return ProjectionSummary(
        asphalt=asphalt,
        concrete=concrete,
        network_pci=network_pci(inputs, results),
        annual_budget=inputs.annual_budget,
        suggested_budget=suggested,
        shortfall=shortfall,
        budget_status=status,
        floor_breached=floor_breached,
        target_attainable=target_attainable,
    )
