"""API v1 router - combines all endpoint routers."""

from fastapi import APIRouter

from color_diary_api.api.v1.analysis import router as analysis_router
from color_diary_api.api.v1.colors import router as colors_router
from color_diary_api.api.v1.entries import router as entries_router
from color_diary_api.api.v1.preferences import router as preferences_router
from color_diary_api.api.v1.report import router as report_router
from color_diary_api.api.v1.stats import router as stats_router

router = APIRouter()

# Include all routers
router.include_router(entries_router)
router.include_router(colors_router)
router.include_router(analysis_router)
router.include_router(stats_router)
router.include_router(preferences_router)
router.include_router(report_router)
