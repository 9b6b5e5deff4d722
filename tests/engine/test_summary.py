from dataclasses import replace

import pytest
from scipy.optimize import brentq

from pci_forecast.engine.projection import calculate_projections
from pci_forecast.engine.solver import floor_margin, search_upper_bound
from pci_forecast.engine.summary import network_pci, summarize
from pci_forecast.models.summary import BudgetStatus, ConditionBand
from pci_forecast.models.surface import SurfaceInputs, SurfaceType


class TestSummary:
    def test_adequate_budget(self, mixed_network):
        results = calculate_projections(mixed_network)
        summary = summarize(mixed_network, results)
        assert summary.budget_status == BudgetStatus.ADEQUATE
        assert summary.shortfall == 0
        assert not summary.floor_breached
        assert summary.target_attainable

    def test_insufficient_budget(self, mixed_network):
        inputs = replace(mixed_network, annual_budget=100_000)
        results = calculate_projections(inputs)
        summary = summarize(inputs, results)
        assert summary.budget_status == BudgetStatus.INSUFFICIENT
        assert summary.shortfall == pytest.approx(results.suggested_budget - 100_000)
        assert summary.floor_breached

    def test_unattainable_target(self, failed_network):
        results = calculate_projections(failed_network)
        summary = summarize(failed_network, results)
        assert not summary.target_attainable
        assert summary.budget_status == BudgetStatus.INSUFFICIENT
        assert summary.asphalt.final_band == ConditionBand.FAILED

    def test_unattainable_even_when_over_budget(self, failed_network):
        inputs = replace(failed_network, annual_budget=100_000_000)
        summary = summarize(inputs, calculate_projections(inputs))
        assert summary.budget_status == BudgetStatus.INSUFFICIENT
        assert summary.shortfall == 0

    def test_surface_details(self, mixed_network):
        results = calculate_projections(mixed_network)
        summary = summarize(mixed_network, results)
        final = results.final
        assert summary.asphalt.surface is SurfaceType.ASPHALT
        assert summary.asphalt.baseline_pci == 75
        assert summary.asphalt.final_with_maintenance == final.asphalt_with_maintenance
        assert summary.concrete.final_no_maintenance == final.concrete_no_maintenance
        assert summary.concrete.final_scenario_average == pytest.approx(
            (final.concrete_no_maintenance + final.concrete_with_maintenance) / 2
        )

    def test_zero_mileage_surface_does_not_breach(self):
        inputs = SurfaceInputs(asphalt_miles=0, concrete_miles=30, asphalt_pci=20, concrete_pci=95)
        summary = summarize(inputs, calculate_projections(inputs))
        assert not summary.floor_breached
        assert summary.budget_status == BudgetStatus.ADEQUATE


    def test_budget_just_past_crossing_is_adequate(self, mixed_network):
        """A budget that holds the floor is adequate even below the whole-dollar suggestion."""
        upper = search_upper_bound(mixed_network)
        root = brentq(lambda b: floor_margin(mixed_network, b), 0.0, upper, xtol=1e-6)
        inputs = replace(mixed_network, annual_budget=root + 0.5)
        summary = summarize(inputs, calculate_projections(inputs))
        assert not summary.floor_breached
        assert summary.budget_status == BudgetStatus.ADEQUATE
        assert summary.shortfall == 0

    @pytest.mark.parametrize("offset", [-3.0, -1.5, -0.75, -0.25, 0.0, 0.25, 1.0])
    def test_status_agrees_with_floor_warning(self, mixed_network, offset):
        suggested = calculate_projections(mixed_network).suggested_budget
        inputs = replace(mixed_network, annual_budget=suggested + offset)
        summary = summarize(inputs, calculate_projections(inputs))
        assert (summary.budget_status == BudgetStatus.ADEQUATE) == (not summary.floor_breached)
        if summary.floor_breached:
            assert summary.shortfall > 0

class TestNetworkPCI:
    def test_mileage_weighted(self, mixed_network):
        results = calculate_projections(mixed_network)
        series = network_pci(mixed_network, results)
        assert len(series) == 6
        assert series[0] == pytest.approx((100 * 75 + 50 * 80) / 150)

    def test_empty_network_even_weights(self, empty_network):
        series = network_pci(empty_network, calculate_projections(empty_network))
        assert series == pytest.approx((50,) * 6)
