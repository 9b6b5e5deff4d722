"""Canonical test fixtures used across all engine tests.

Fixture network: 100 mi asphalt @ PCI 75, 50 mi concrete @ PCI 80,
$5M/yr proposed budget (the estimator form defaults).
"""

import pytest

from pci_forecast.models.parameters import ModelParameters
from pci_forecast.models.surface import SurfaceInputs


@pytest.fixture
def default_params() -> ModelParameters:
    return ModelParameters()


@pytest.fixture
def mixed_network() -> SurfaceInputs:
    """Typical mid-size city network, both surface types."""
    return SurfaceInputs(
        asphalt_miles=100,
        concrete_miles=50,
        asphalt_pci=75,
        concrete_pci=80,
        annual_budget=5_000_000,
    )


@pytest.fixture
def unfunded_mixed_network() -> SurfaceInputs:
    """Poor asphalt, good concrete, nothing budgeted."""
    return SurfaceInputs(
        asphalt_miles=100,
        concrete_miles=50,
        asphalt_pci=40,
        concrete_pci=85,
        annual_budget=0,
    )


@pytest.fixture
def asphalt_only() -> SurfaceInputs:
    return SurfaceInputs(
        asphalt_miles=100,
        concrete_miles=0,
        asphalt_pci=75,
        concrete_pci=0,
        annual_budget=0,
    )


@pytest.fixture
def empty_network() -> SurfaceInputs:
    return SurfaceInputs(
        asphalt_miles=0,
        concrete_miles=0,
        asphalt_pci=50,
        concrete_pci=50,
        annual_budget=1_000_000,
    )


@pytest.fixture
def failed_network() -> SurfaceInputs:
    """Baseline already far below the safety floor."""
    return SurfaceInputs(
        asphalt_miles=100,
        concrete_miles=0,
        asphalt_pci=10,
        concrete_pci=0,
        annual_budget=0,
    )
