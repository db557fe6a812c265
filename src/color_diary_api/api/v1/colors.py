"""Palette and color classification API endpoints."""

from fastapi import APIRouter, Query

from color_diary_api.deps import AnalysisServiceDep
from color_diary_api.schemas.base import ApiResponse
from color_diary_api.schemas.color import ColorAnalysis, PaletteEntry

router = APIRouter(prefix="/colors", tags=["Colors"])


@router.get("/palette", response_model=ApiResponse[list[PaletteEntry]])
async def get_palette(analysis_service: AnalysisServiceDep) -> ApiResponse[list[PaletteEntry]]:
    """The ten mood colors in their fixed order."""
    return ApiResponse.ok(analysis_service.get_palette())


@router.get("/analyze", response_model=ApiResponse[ColorAnalysis])
async def analyze_color(
    analysis_service: AnalysisServiceDep,
    hex: str = Query(..., description="Color as #RRGGBB"),
) -> ApiResponse[ColorAnalysis]:
    """
    Classify a color against the palette.

    Returns the nearest mood color with its analysis text and suggestions.
    Malformed colors are rejected rather than mapped to a default.
    """
    return ApiResponse.ok(analysis_service.analyze_color(hex))


@router.get("/wheel", response_model=ApiResponse[ColorAnalysis])
async def wheel_color(
    analysis_service: AnalysisServiceDep,
    angle: float = Query(..., description="Hue angle in degrees"),
    distance: float = Query(..., ge=0, le=1, description="Distance from the centre as a fraction of the radius"),
) -> ApiResponse[ColorAnalysis]:
    """Color under a point of the color wheel."""
    return ApiResponse.ok(analysis_service.wheel_color(angle, distance))
