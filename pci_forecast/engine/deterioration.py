"""No-funding deterioration model.

Year-over-year recurrence p[t] = p[t-1] - loss(p[t-1]). The loss grows as
condition degrades, so roads in "good" shape lose a few points a year while
"fair"/"poor" roads fall noticeably faster.

Pure functions. No I/O.
"""

from pci_forecast.models.parameters import DEFAULT_PARAMETERS, ModelParameters
from pci_forecast.models.surface import SurfaceType

PCI_MIN = 0.0
PCI_MAX = 100.0


def clamp_pci(pci: float) -> float:
    return max(PCI_MIN, min(PCI_MAX, pci))


def annual_loss(
    pci: float,
    surface: SurfaceType,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """PCI points lost over one unfunded year starting from `pci`.

    Weakly increasing in (100 - pci). Never zero, so PCI 100 still ages.
    """
    distress = (PCI_MAX - clamp_pci(pci)) / PCI_MAX
    return params.for_surface(surface).base_decay_rate * (1 + params.acceleration * distress)


def deteriorate(
    pci: float,
    surface: SurfaceType,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """One unfunded year."""
    return clamp_pci(pci - annual_loss(pci, surface, params))


def decay(
    p0: float,
    t: int,
    surface: SurfaceType,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> float:
    """PCI after `t` unfunded years from baseline `p0`."""
    if t < 0:
        raise ValueError(f"elapsed years must be >= 0, got {t}")
    pci = float(p0)
    for _ in range(t):
        pci = deteriorate(pci, surface, params)
    return pci


def decay_series(
    p0: float,
    years: int,
    surface: SurfaceType,
    params: ModelParameters = DEFAULT_PARAMETERS,
) -> list[float]:
    """Years 0..`years` of the unfunded trajectory. Index 0 is `p0` unmodified."""
    series = [float(p0)]
    for _ in range(years):
        series.append(deteriorate(series[-1], surface, params))
    return series
