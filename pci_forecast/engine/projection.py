"""Projection driver: the single entry point of the PCI engine.

Runs both surface types under both funding scenarios across the horizon and
attaches the suggested budget. Pure computation. No I/O.
"""

from pci_forecast.engine.deterioration import decay_series
from pci_forecast.engine.maintenance import allocate_budget, funding_ratio, maintained_series
from pci_forecast.engine.solver import suggest_budget
from pci_forecast.models.parameters import DEFAULT_PARAMETERS, ModelParameters
from pci_forecast.models.results import ProjectionPoint, ProjectionResults
from pci_forecast.models.surface import SurfaceInputs, SurfaceType


def project(
    inputs: SurfaceInputs,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> tuple[ProjectionPoint, ...]:
    """Year 0..horizon points at `inputs.annual_budget`.

    Zero-mileage surfaces are still projected so the output shape is fixed.
    A network with no mileage at all has nothing to age and stays flat at
    the given baselines.
    """
    years = params.horizon_years
    shares = allocate_budget(
        inputs.annual_budget, inputs.asphalt_miles, inputs.concrete_miles, params
    )

    no_maint: dict[SurfaceType, list[float]] = {}
    with_maint: dict[SurfaceType, list[float]] = {}
    for surface in SurfaceType:
        p0 = float(inputs.pci(surface))
        if inputs.total_miles == 0:
            no_maint[surface] = [p0] * (years + 1)
            with_maint[surface] = [p0] * (years + 1)
            continue
        ratio = funding_ratio(shares[surface], inputs.miles(surface), surface, params)
        no_maint[surface] = decay_series(p0, years, surface, params)
        with_maint[surface] = maintained_series(p0, years, surface, ratio, params)

    return tuple(
        ProjectionPoint(
            year=year,
            asphalt_no_maintenance=no_maint[SurfaceType.ASPHALT][year],
            asphalt_with_maintenance=with_maint[SurfaceType.ASPHALT][year],
            concrete_no_maintenance=no_maint[SurfaceType.CONCRETE][year],
            concrete_with_maintenance=with_maint[SurfaceType.CONCRETE][year],
        )
        for year in range(years + 1)
    )


def calculate_projections(
    inputs: SurfaceInputs,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> ProjectionResults:
    """Validate inputs, project both scenarios and suggest a budget.

    Raises InvalidInputError for negative mileage or budget, PCI outside
    [0, 100], or non-finite values.
    """
    inputs.validate()
    return ProjectionResults(
        projections=project(inputs, params),
        suggested_budget=suggest_budget(inputs, params),
    )
