"""PCI condition bands shared by the map legend, summary cards and reports."""

import math

from pci_forecast.models.summary import ConditionBand

# Lower bound (inclusive) of each band, best first
BAND_THRESHOLDS: tuple[tuple[float, ConditionBand], ...] = (
    (90.0, ConditionBand.EXCELLENT),
    (70.0, ConditionBand.GOOD),
    (50.0, ConditionBand.FAIR),
    (25.0, ConditionBand.POOR),
    (0.0, ConditionBand.FAILED),
)

BAND_LABELS: dict[ConditionBand, str] = {
    ConditionBand.EXCELLENT: "Excellent",
    ConditionBand.GOOD: "Good",
    ConditionBand.FAIR: "Fair",
    ConditionBand.POOR: "Poor",
    ConditionBand.FAILED: "Failed",
}


def classify_pci(pci: float) -> ConditionBand:
    if not math.isfinite(pci) or not 0 <= pci <= 100:
        raise ValueError(f"PCI must be within [0, 100], got {pci}")
    for lower, band in BAND_THRESHOLDS:
        if pci >= lower:
            return band
    return ConditionBand.FAILED


def band_table() -> list[dict]:
    """Bands with their PCI ranges, best first."""
    rows = []
    upper = 100.0
    for lower, band in BAND_THRESHOLDS:
        rows.append({
            "band": band.value,
            "label": BAND_LABELS[band],
            "min_pci": lower,
            "max_pci": upper,
        })
        upper = lower
    return rows
