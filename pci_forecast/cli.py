"""CLI for the PCI projection engine: prints a terminal report or the JSON export.

Usage:
    python -m pci_forecast.cli --asphalt-miles 100 --concrete-miles 50 --asphalt-pci 75 --concrete-pci 80 --budget 5000000
    python -m pci_forecast.cli --asphalt-miles 100 --asphalt-pci 40 --json
"""

import argparse
import json
import logging

from pci_forecast.config import settings
from pci_forecast.engine.condition import BAND_LABELS
from pci_forecast.engine.projection import calculate_projections
from pci_forecast.engine.summary import summarize
from pci_forecast.models.results import ProjectionResults
from pci_forecast.models.summary import BudgetStatus, ProjectionSummary, SurfaceSummary
from pci_forecast.models.surface import InvalidInputError, SurfaceInputs


# ── Helpers ──────────────────────────────────────────────────────────────────

def _dollar(v) -> str:
    return f"${float(v):,.0f}"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_inputs(inputs: SurfaceInputs) -> None:
    _header("Road Infrastructure")
    print(f"  Asphalt:          {inputs.asphalt_miles:,.1f} mi @ PCI {inputs.asphalt_pci:.1f}")
    print(f"  Concrete:         {inputs.concrete_miles:,.1f} mi @ PCI {inputs.concrete_pci:.1f}")
    print(f"  Annual Budget:    {_dollar(inputs.annual_budget)}/yr")


def print_projection_table(results: ProjectionResults) -> None:
    _header("PCI Projections")
    print(f"  {'Year':>4}  {'Asph (none)':>11}  {'Asph (maint)':>12}  {'Conc (none)':>11}  {'Conc (maint)':>12}")
    for p in results.projections:
        print(
            f"  {p.year:>4}  {p.asphalt_no_maintenance:>11.1f}  {p.asphalt_with_maintenance:>12.1f}"
            f"  {p.concrete_no_maintenance:>11.1f}  {p.concrete_with_maintenance:>12.1f}"
        )


def _print_surface(name: str, s: SurfaceSummary) -> None:
    print(f"  {name}:")
    print(f"    Current → Final:    {s.baseline_pci:.1f} → {s.final_with_maintenance:.1f} ({BAND_LABELS[s.final_band]})")
    print(f"    No maintenance:     {s.final_no_maintenance:.1f}")
    print(f"    Scenario average:   {s.final_scenario_average:.1f}")


def print_summary(summary: ProjectionSummary) -> None:
    _header("Summary")
    _print_surface("Asphalt", summary.asphalt)
    _print_surface("Concrete", summary.concrete)
    network = ", ".join(f"{v:.1f}" for v in summary.network_pci)
    print(f"  Network PCI:        {network}")


def print_budget_analysis(summary: ProjectionSummary) -> None:
    _header("Budget Analysis")
    status = "Adequate" if summary.budget_status is BudgetStatus.ADEQUATE else "Insufficient"
    print(f"  Status:           {status}")
    print(f"  Current:          {_dollar(summary.annual_budget)}")
    print(f"  Suggested:        {_dollar(summary.suggested_budget)}")
    if summary.shortfall > 0:
        print(f"  Shortfall:        {_dollar(summary.shortfall)} additional funding recommended")
    if not summary.target_attainable:
        print("  Note:             safety floor cannot be held within the modeled range")
    if summary.floor_breached:
        print("\n  WARNING: budget may be insufficient to keep PCI above the safety floor.")
    print()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="5-year PCI projection and budget estimate")
    parser.add_argument("--asphalt-miles", type=float, default=0.0, help="Asphalt miles (default: 0)")
    parser.add_argument("--concrete-miles", type=float, default=0.0, help="Concrete miles (default: 0)")
    parser.add_argument("--asphalt-pci", type=float, default=0.0, help="Current asphalt PCI 0-100")
    parser.add_argument("--concrete-pci", type=float, default=0.0, help="Current concrete PCI 0-100")
    parser.add_argument("--budget", type=float, default=0.0, help="Proposed annual budget, USD")
    parser.add_argument("--json", action="store_true", help="Print the JSON export instead of the report")

    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    inputs = SurfaceInputs(
        asphalt_miles=args.asphalt_miles,
        concrete_miles=args.concrete_miles,
        asphalt_pci=args.asphalt_pci,
        concrete_pci=args.concrete_pci,
        annual_budget=args.budget,
    )
    params = settings.engine_parameters()
    try:
        results = calculate_projections(inputs, params)
    except InvalidInputError as e:
        parser.error(str(e))

    if args.json:
        print(json.dumps(results.to_dict(), indent=2))
        return

    summary = summarize(inputs, results, params)
    print_inputs(inputs)
    print_projection_table(results)
    print_summary(summary)
    print_budget_analysis(summary)


if __name__ == "__main__":
    main()
