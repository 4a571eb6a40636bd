"""
Scoring Parameter API Routes.

Provides endpoints for:
- Reading the active parameters (override text and full values)
- Applying override text
- Reading per-frequency RSSI thresholds
- Setting per-band RSSI thresholds
- Replacing and querying frequency weights
"""

from typing import Dict, Any, List
from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from wifiscore.api.dependencies import get_scoring_params
from wifiscore.config.params import (
    ScoringParams,
    Band,
    FrequencyWeight,
    band_for_frequency,
    render_values,
)
from wifiscore.config.params.models import EXIT, ENTRY, SUFFICIENT, GOOD


router = APIRouter(prefix="/params", tags=["parameters"])


# =============================================================================
# Request / Response Models
# =============================================================================

class ParamsResponse(BaseModel):
    """Response for parameter retrieval."""
    params: str = Field(..., description="Overridable parameters as override text")
    values: Dict[str, Any] = Field(..., description="Every active parameter value")


class OverrideRequest(BaseModel):
    """Request for applying override text."""
    override: str = Field(..., description="Comma-separated key=value list")


class ThresholdsResponse(BaseModel):
    """RSSI thresholds that apply to one frequency."""
    frequency: int
    band: Band
    exit: int
    entry: int
    sufficient: int
    good: int


class RssiThresholdsRequest(BaseModel):
    """Request for setting one band's RSSI thresholds."""
    thresholds: List[int] = Field(
        ...,
        min_length=4,
        max_length=4,
        description="exit, entry, sufficient, good (dBm); all zeros restores defaults"
    )


class FrequencyWeightsRequest(BaseModel):
    """Request for replacing the frequency weights table."""
    weights: Dict[int, FrequencyWeight] = Field(
        ...,
        description="Frequency (MHz) to weight class"
    )


class FrequencyScoreResponse(BaseModel):
    """Frequency weight score for one frequency."""
    frequency: int
    score: int


def _params_response(params: ScoringParams) -> ParamsResponse:
    values = params.snapshot()
    return ParamsResponse(
        params=render_values(values),
        values=values.model_dump(),
    )


# =============================================================================
# Endpoints
# =============================================================================

@router.get(
    "",
    response_model=ParamsResponse,
    summary="Get parameters",
    description="Get the active scoring parameters."
)
async def get_params(params: ScoringParams = Depends(get_scoring_params)):
    """Get the active parameters."""
    return _params_response(params)


@router.put(
    "",
    response_model=ParamsResponse,
    summary="Apply override",
    description="Apply key=value override text. Nothing changes if any part is rejected."
)
async def update_params(
    request: OverrideRequest,
    params: ScoringParams = Depends(get_scoring_params)
):
    """Apply override text to the active parameters."""
    if not params.update(request.override):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid scoring params override: {params.sanitize(request.override)}"
        )
    return _params_response(params)


@router.get(
    "/thresholds/{frequency}",
    response_model=ThresholdsResponse,
    summary="Get RSSI thresholds",
    description="Get the RSSI thresholds that apply to a frequency (MHz)."
)
async def get_thresholds(
    frequency: int,
    params: ScoringParams = Depends(get_scoring_params)
):
    """Get RSSI thresholds for a frequency."""
    band = band_for_frequency(frequency)
    rssi = params.snapshot().get_rssi_for_band(band)
    return ThresholdsResponse(
        frequency=frequency,
        band=band,
        exit=rssi[EXIT],
        entry=rssi[ENTRY],
        sufficient=rssi[SUFFICIENT],
        good=rssi[GOOD],
    )


@router.put(
    "/rssi/{band}",
    response_model=ParamsResponse,
    summary="Set RSSI thresholds",
    description="Set one band's RSSI thresholds. All zeros restores the platform defaults."
)
async def set_rssi_thresholds(
    band: Band,
    request: RssiThresholdsRequest,
    params: ScoringParams = Depends(get_scoring_params)
):
    """Set RSSI thresholds for a band."""
    if not params.set_rssi_thresholds(band, request.thresholds):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid RSSI thresholds for {band.value}: {request.thresholds}"
        )
    return _params_response(params)


@router.put(
    "/frequency-weights",
    summary="Set frequency weights",
    description="Replace the whole frequency weights table."
)
async def set_frequency_weights(
    request: FrequencyWeightsRequest,
    params: ScoringParams = Depends(get_scoring_params)
):
    """Replace the frequency weights table."""
    params.set_frequency_weights(request.weights)
    return {
        "message": f"Set {len(request.weights)} frequency weights",
        "supported": params.frequency_weights_supported,
    }


@router.get(
    "/frequency-weights/{frequency}",
    response_model=FrequencyScoreResponse,
    summary="Get frequency score",
    description="Get the frequency weight score for a frequency (MHz)."
)
async def get_frequency_score(
    frequency: int,
    params: ScoringParams = Depends(get_scoring_params)
):
    """Get the frequency weight score."""
    return FrequencyScoreResponse(
        frequency=frequency,
        score=params.get_frequency_score(frequency),
    )
