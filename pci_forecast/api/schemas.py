"""Pydantic schemas for API request/response models.

Field names are camelCase on the wire, snake_case in Python.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ---- Request schemas ----

class ProjectionRequest(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, strict=True)

    asphalt_miles: float = Field(0.0, description="Asphalt network extent, miles")
    concrete_miles: float = Field(0.0, description="Concrete network extent, miles")
    asphalt_pci: float = Field(0.0, alias="asphaltPCI", description="Current asphalt PCI, 0-100")
    concrete_pci: float = Field(0.0, alias="concretePCI", description="Current concrete PCI, 0-100")
    annual_budget: float = Field(0.0, description="Proposed yearly maintenance spend, USD")


# ---- Response schemas ----

class ProjectionPointResponse(CamelModel):
    year: int
    asphalt_no_maintenance: float
    asphalt_with_maintenance: float
    concrete_no_maintenance: float
    concrete_with_maintenance: float


class SurfaceSummaryResponse(CamelModel):
    surface: str
    miles: float
    baseline_pci: float
    final_no_maintenance: float
    final_with_maintenance: float
    final_scenario_average: float
    final_band: str
    min_with_maintenance: float


class SummaryResponse(CamelModel):
    asphalt: SurfaceSummaryResponse
    concrete: SurfaceSummaryResponse
    network_pci: list[float]
    annual_budget: float
    suggested_budget: float
    shortfall: float
    budget_status: str
    floor_breached: bool
    target_attainable: bool


class ProjectionResponse(CamelModel):
    projections: list[ProjectionPointResponse]
    suggested_budget: float
    summary: SummaryResponse


class ConditionBandResponse(CamelModel):
    band: str
    label: str
    min_pci: float
    max_pci: float
