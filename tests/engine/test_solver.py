"""Tests for the suggested-budget solver."""

from dataclasses import replace

import pytest
from scipy.optimize import brentq

from pci_forecast.engine.projection import calculate_projections, project
from pci_forecast.engine.solver import floor_margin, search_upper_bound, suggest_budget
from pci_forecast.models.parameters import ModelParameters
from pci_forecast.models.surface import SurfaceInputs


def _min_active_pci(inputs: SurfaceInputs, budget: float) -> float:
    points = project(replace(inputs, annual_budget=budget))
    values = []
    for p in points:
        if inputs.asphalt_miles > 0:
            values.append(p.asphalt_with_maintenance)
        if inputs.concrete_miles > 0:
            values.append(p.concrete_with_maintenance)
    return min(values)


class TestSuggestBudget:
    def test_suggestion_holds_floor(self, mixed_network):
        suggested = suggest_budget(mixed_network)
        assert 0 < suggested < search_upper_bound(mixed_network)
        assert _min_active_pci(mixed_network, suggested) >= 60

    def test_suggestion_is_minimal(self, mixed_network):
        """One dollar less already drops below the floor."""
        suggested = suggest_budget(mixed_network)
        assert _min_active_pci(mixed_network, suggested - 1) < 60
        assert _min_active_pci(mixed_network, suggested - 2) < 60

    def test_within_a_dollar_of_exact_crossing(self, mixed_network):
        upper = search_upper_bound(mixed_network)
        root = brentq(lambda b: floor_margin(mixed_network, b), 0.0, upper, xtol=1e-6)
        suggested = suggest_budget(mixed_network)
        assert root - 1e-3 <= suggested < root + 1

    @pytest.mark.parametrize(
        "asphalt_pci, concrete_pci",
        [(62, 95), (70, 61), (88, 64), (65, 65)],
    )
    def test_correct_across_networks(self, asphalt_pci, concrete_pci):
        inputs = SurfaceInputs(
            asphalt_miles=220, concrete_miles=35, asphalt_pci=asphalt_pci, concrete_pci=concrete_pci
        )
        suggested = suggest_budget(inputs)
        assert _min_active_pci(inputs, suggested) >= 60
        assert _min_active_pci(inputs, suggested - 1) < 60
        assert _min_active_pci(inputs, suggested - 2) < 60

    def test_already_safe_needs_nothing(self):
        inputs = SurfaceInputs(
            asphalt_miles=10, concrete_miles=10, asphalt_pci=100, concrete_pci=100
        )
        assert suggest_budget(inputs) == 0

    def test_empty_network_needs_nothing(self, empty_network):
        assert suggest_budget(empty_network) == 0

    def test_zero_mileage_surface_ignored(self):
        """A failed surface with no miles does not drive the suggestion."""
        inputs = SurfaceInputs(
            asphalt_miles=0, concrete_miles=40, asphalt_pci=5, concrete_pci=98
        )
        assert suggest_budget(inputs) == 0

    def test_unreachable_floor_returns_bound(self, failed_network):
        assert suggest_budget(failed_network) == search_upper_bound(failed_network)

    def test_independent_of_proposed_budget(self, mixed_network):
        a = suggest_budget(replace(mixed_network, annual_budget=0))
        b = suggest_budget(replace(mixed_network, annual_budget=9_000_000))
        assert a == b

    def test_lower_floor_needs_less(self, mixed_network):
        strict = suggest_budget(mixed_network, ModelParameters(safety_floor=65))
        lenient = suggest_budget(mixed_network, ModelParameters(safety_floor=55))
        assert lenient < strict

    def test_whole_dollars(self, mixed_network):
        suggested = suggest_budget(mixed_network)
        assert suggested == int(suggested)

    def test_engine_result_carries_suggestion(self, mixed_network):
        assert calculate_projections(mixed_network).suggested_budget == suggest_budget(mixed_network)


class TestFloorMargin:
    def test_empty_network_infinite(self, empty_network):
        assert floor_margin(empty_network, 0) == float("inf")

    def test_baseline_below_floor(self, failed_network):
        assert floor_margin(failed_network, search_upper_bound(failed_network)) == pytest.approx(-50)

    def test_non_decreasing_in_budget(self, mixed_network):
        upper = search_upper_bound(mixed_network)
        margins = [floor_margin(mixed_network, upper * k / 10) for k in range(11)]
        for lo, hi in zip(margins, margins[1:]):
            assert lo <= hi
