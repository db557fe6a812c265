"""Mixture, trend and frequency API endpoints."""

from datetime import date

from fastapi import APIRouter, Query

from color_diary_api.deps import AnalysisServiceDep, AsOf
from color_diary_api.schemas.analysis import (
    AnalysisOverview,
    FrequencyReport,
    MixturePeriod,
    MixtureResponse,
    TrendResult,
)
from color_diary_api.schemas.base import ApiResponse

router = APIRouter(prefix="/analysis", tags=["Analysis"])


@router.get("/mixture", response_model=ApiResponse[MixtureResponse])
async def get_mixture(
    analysis_service: AnalysisServiceDep,
    as_of: AsOf,
    period: MixturePeriod = Query(default=MixturePeriod.ALL),
) -> ApiResponse[MixtureResponse]:
    """
    Get the color mixture of a period ending at the reference date.

    ``mixture`` is null when the period has no entries.
    """
    result = await analysis_service.get_mixture(period, as_of)
    return ApiResponse.ok(result)


@router.get("/trend", response_model=ApiResponse[TrendResult | None])
async def get_trend(analysis_service: AnalysisServiceDep, as_of: AsOf) -> ApiResponse[TrendResult | None]:
    """Intensity trend over the most recent entries; null without entries."""
    result = await analysis_service.get_trend(as_of)
    return ApiResponse.ok(result)


@router.get("/frequency", response_model=ApiResponse[FrequencyReport])
async def get_frequency(
    analysis_service: AnalysisServiceDep,
    as_of: AsOf,
    start: date | None = Query(default=None, description="First date, inclusive; omit for all history"),
    top: int | None = Query(default=None, ge=1, le=10, description="Number of top colors"),
) -> ApiResponse[FrequencyReport]:
    """How often each palette color was picked up to the reference date."""
    result = await analysis_service.get_frequency(start, as_of, top)
    return ApiResponse.ok(result)


@router.get("/overview", response_model=ApiResponse[AnalysisOverview | None])
async def get_overview(analysis_service: AnalysisServiceDep, as_of: AsOf) -> ApiResponse[AnalysisOverview | None]:
    """
    Combined analysis of the recent window.

    Includes the weekly trend, mixture, color frequency and mood by
    weekday. Null when the window has no entries.
    """
    result = await analysis_service.get_overview(as_of)
    return ApiResponse.ok(result)
