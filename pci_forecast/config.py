from pydantic_settings import BaseSettings

from pci_forecast.models import parameters as defaults
from pci_forecast.models.parameters import ModelParameters, SurfaceParameters


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Deterioration (PCI points per year at PCI 100)
    asphalt_decay_rate: float = defaults.ASPHALT_BASE_DECAY_RATE
    concrete_decay_rate: float = defaults.CONCRETE_BASE_DECAY_RATE
    deterioration_acceleration: float = defaults.DETERIORATION_ACCELERATION

    # Full preventive upkeep, $ per mile per year
    asphalt_cost_per_mile: float = defaults.ASPHALT_COST_PER_MILE
    concrete_cost_per_mile: float = defaults.CONCRETE_COST_PER_MILE

    # Budget target
    safety_floor_pci: float = defaults.SAFETY_FLOOR_PCI
    horizon_years: int = defaults.HORIZON_YEARS

    # Solver
    solver_abs_tolerance: float = defaults.SOLVER_ABS_TOLERANCE
    solver_rel_tolerance: float = defaults.SOLVER_REL_TOLERANCE
    solver_max_iterations: int = defaults.SOLVER_MAX_ITERATIONS

    def engine_parameters(self) -> ModelParameters:
        return ModelParameters(
            asphalt=SurfaceParameters(self.asphalt_decay_rate, self.asphalt_cost_per_mile),
            concrete=SurfaceParameters(self.concrete_decay_rate, self.concrete_cost_per_mile),
            acceleration=self.deterioration_acceleration,
            safety_floor=self.safety_floor_pci,
            horizon_years=self.horizon_years,
            solver_abs_tolerance=self.solver_abs_tolerance,
            solver_rel_tolerance=self.solver_rel_tolerance,
            solver_max_iterations=self.solver_max_iterations,
        )


settings = Settings()
