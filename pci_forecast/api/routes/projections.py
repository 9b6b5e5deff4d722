"""PCI projection routes: the primary API entry point."""

from fastapi import APIRouter, Depends, HTTPException

from pci_forecast.api.deps import get_model_parameters
from pci_forecast.api.schemas import (
    ConditionBandResponse,
    ProjectionPointResponse,
    ProjectionRequest,
    ProjectionResponse,
    SummaryResponse,
    SurfaceSummaryResponse,
)
from pci_forecast.engine.condition import band_table
from pci_forecast.engine.projection import calculate_projections
from pci_forecast.engine.summary import summarize
from pci_forecast.models.parameters import ModelParameters
from pci_forecast.models.results import ProjectionResults
from pci_forecast.models.summary import ProjectionSummary, SurfaceSummary
from pci_forecast.models.surface import InvalidInputError, SurfaceInputs

router = APIRouter(prefix="/api/v1/projections", tags=["projections"])


def _wire_name(field: str) -> str:
    """Request alias of an engine input field (asphalt_miles -> asphaltMiles)."""
    info = ProjectionRequest.model_fields.get(field)
    if info is None or info.alias is None:
        return field
    return info.alias


def _surface_to_response(s: SurfaceSummary) -> SurfaceSummaryResponse:
    return SurfaceSummaryResponse(
        surface=s.surface.value,
        miles=s.miles,
        baseline_pci=s.baseline_pci,
        final_no_maintenance=s.final_no_maintenance,
        final_with_maintenance=s.final_with_maintenance,
        final_scenario_average=s.final_scenario_average,
        final_band=s.final_band.value,
        min_with_maintenance=s.min_with_maintenance,
    )


def _result_to_response(
    results: ProjectionResults, summary: ProjectionSummary
) -> ProjectionResponse:
    """Convert engine results and summary to the API response."""
    points = [
        ProjectionPointResponse(
            year=p.year,
            asphalt_no_maintenance=p.asphalt_no_maintenance,
            asphalt_with_maintenance=p.asphalt_with_maintenance,
            concrete_no_maintenance=p.concrete_no_maintenance,
            concrete_with_maintenance=p.concrete_with_maintenance,
        )
        for p in results.projections
    ]
    return ProjectionResponse(
        projections=points,
        suggested_budget=results.suggested_budget,
        summary=SummaryResponse(
            asphalt=_surface_to_response(summary.asphalt),
            concrete=_surface_to_response(summary.concrete),
            network_pci=list(summary.network_pci),
            annual_budget=summary.annual_budget,
            suggested_budget=summary.suggested_budget,
            shortfall=summary.shortfall,
            budget_status=summary.budget_status.value,
            floor_breached=summary.floor_breached,
            target_attainable=summary.target_attainable,
        ),
    )


@router.post("", response_model=ProjectionResponse)
def create_projection(
    req: ProjectionRequest,
    params: ModelParameters = Depends(get_model_parameters),
):
    """Forecast PCI under both funding scenarios and suggest a budget.

    Nothing is stored; identical requests give identical responses.
    """
    inputs = SurfaceInputs(
        asphalt_miles=req.asphalt_miles,
        concrete_miles=req.concrete_miles,
        asphalt_pci=req.asphalt_pci,
        concrete_pci=req.concrete_pci,
        annual_budget=req.annual_budget,
    )
    try:
        results = calculate_projections(inputs, params)
    except InvalidInputError as e:
        field = _wire_name(e.field)
        raise HTTPException(
            status_code=422,
            detail={"field": field, "message": f"{field}: {e.reason}"},
        )

    return _result_to_response(results, summarize(inputs, results, params))


@router.get("/bands", response_model=list[ConditionBandResponse])
def list_condition_bands():
    """PCI condition bands, best first."""
    return [ConditionBandResponse(**row) for row in band_table()]
