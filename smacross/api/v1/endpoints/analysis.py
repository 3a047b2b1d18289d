"""
Analysis API Endpoints

Endpoints for SMA crossover analysis.
"""

from fastapi import APIRouter, Depends

from smacross.core.config import Settings, get_settings
from smacross.schemas.analysis import AnalysisRequest, AnalysisResult, ErrorResponse
from smacross.services.analysis import AnalysisService, get_analysis_service
from smacross.services.data_ingestion import get_providers_status
from smacross.services.data_ingestion.indices import get_index_presets

router = APIRouter()


@router.post(
    "",
    response_model=AnalysisResult,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        503: {"model": ErrorResponse},
    },
)
async def run_analysis(
    request: AnalysisRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Run an SMA crossover analysis.

    Returns the last windowDays closes with both SMAs and the crossovers
    dated inside that window. Errors use the {"error": {kind, message}} body.
    """
    return await service.execute(request)


@router.get("/providers")
async def list_providers(settings: Settings = Depends(get_settings)):
    """
    List market data providers.

    Shows whether each one needs an API key and whether a default key is
    configured on the server.
    """
    return {"providers": get_providers_status(settings)}


@router.get("/presets")
async def list_presets(settings: Settings = Depends(get_settings)):
    """
    Get preset indices and default analysis parameters for the settings form.
    """
    return {
        "indices": get_index_presets(),
        "defaults": {
            "shortPeriod": settings.default_short_period,
            "longPeriod": settings.default_long_period,
            "windowDays": settings.default_window_days,
        },
    }
