"""Minimum annual budget that keeps every surface at or above the safety floor.

With-maintenance PCI is non-decreasing in budget at every year, so the worst
margin over the horizon is a monotone, continuous function of budget and has
a single crossing. Brent's method on that margin finds it.
"""

import logging
import math

from scipy.optimize import brentq

from pci_forecast.engine.maintenance import (
    allocate_budget,
    full_funding_requirement,
    funding_ratio,
    maintained_series,
)
from pci_forecast.models.parameters import DEFAULT_PARAMETERS, ModelParameters
from pci_forecast.models.surface import SurfaceInputs, SurfaceType

logger = logging.getLogger(__name__)


def search_upper_bound(
    inputs: SurfaceInputs, params: ModelParameters = DEFAULT_PARAMETERS
) -> float:
    """Total full-funding requirement of the network.

    Budgets are split by need, so both surfaces run at ratio
    budget / total requirement. Past this bound the ratio is capped at 1 and
    no series improves further.
    """
    return sum(
        full_funding_requirement(inputs.miles(surface), surface, params)
        for surface in SurfaceType
    )


def floor_margin(
    inputs: SurfaceInputs,
    budget: float,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """Worst (with-maintenance PCI - safety floor) over the horizon.

    Only surfaces with mileage count. An empty network has nothing to
    violate, so the margin is +inf.
    """
    shares = allocate_budget(budget, inputs.asphalt_miles, inputs.concrete_miles, params)
    worst = math.inf
    for surface in inputs.active_surfaces:
        ratio = funding_ratio(shares[surface], inputs.miles(surface), surface, params)
        series = maintained_series(inputs.pci(surface), params.horizon_years, surface, ratio, params)
        worst = min(worst, min(series) - params.safety_floor)
    return worst


def suggest_budget(
    inputs: SurfaceInputs, params: ModelParameters = DEFAULT_PARAMETERS
) -> float:
    """Smallest whole-dollar budget that keeps the floor across the horizon.

    Returns 0 when nothing needs funding, and the search upper bound when the
    floor cannot be held even at full funding (e.g. a baseline already below
    it). The result is advisory: it never raises for an unreachable target.
    """
    if floor_margin(inputs, 0.0, params) >= 0:
        return 0.0

    upper = search_upper_bound(inputs, params)
    if floor_margin(inputs, upper, params) < 0:
        logger.info(
            "Safety floor %.1f unattainable within $%.0f/yr; returning search bound",
            params.safety_floor,
            upper,
        )
        return upper

    xtol = max(params.solver_abs_tolerance, params.solver_rel_tolerance * upper)
    root, info = brentq(
        lambda budget: floor_margin(inputs, budget, params),
        0.0,
        upper,
        xtol=xtol,
        maxiter=params.solver_max_iterations,
        full_output=True,
    )
    logger.debug(
        "Budget solve converged to $%.2f in %d iterations (xtol=%.2f)",
        root,
        info.iterations,
        xtol,
    )

    return _smallest_feasible_dollar(inputs, root, xtol, upper, params)


def _smallest_feasible_dollar(
    inputs: SurfaceInputs,
    root: float,
    xtol: float,
    upper: float,
    params: ModelParameters,
) -> float:
    """Whole-dollar bisection around the Brent root.

    Keeps lo infeasible and hi feasible; $0 is known infeasible and `upper`
    known feasible, so those are the fallbacks when the bracket misses.
    """
    lo = max(0, math.floor(root - xtol) - 1)
    if floor_margin(inputs, lo, params) >= 0:
        lo = 0
    hi = math.ceil(root + xtol) + 1
    if hi >= upper or floor_margin(inputs, hi, params) < 0:
        hi = upper

    while hi - lo > 1:
        mid = lo + math.floor((hi - lo) / 2)
        if floor_margin(inputs, mid, params) >= 0:
            hi = mid
        else:
            lo = mid
    return float(hi)
