"""FastAPI dependency injection."""

from pci_forecast.config import settings
from pci_forecast.models.parameters import ModelParameters


def get_model_parameters() -> ModelParameters:
    return settings.engine_parameters()
