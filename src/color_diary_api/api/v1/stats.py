"""Weekly, monthly and usage statistics API endpoints."""

from datetime import date

from fastapi import APIRouter, Query

from color_diary_api.core.logging import ActionType, activity_logger
from color_diary_api.deps import AsOf, StatsServiceDep
from color_diary_api.engine.periods import parse_month
from color_diary_api.schemas.base import ApiResponse
from color_diary_api.schemas.stats import MonthlySummary, MonthOverview, UsageStats, WeeklySummary

router = APIRouter(prefix="/stats", tags=["Statistics"])


@router.get("/weekly", response_model=ApiResponse[WeeklySummary | None])
async def get_weekly_stats(
    stats_service: StatsServiceDep,
    day: date = Query(..., alias="date", description="Any date of the week"),
) -> ApiResponse[WeeklySummary | None]:
    """Persisted stats of a week; refreshed in the background after writes."""
    activity_logger.log(action_type=ActionType.STATS_VIEW, action_data={"kind": "weekly", "date": day.isoformat()})
    return ApiResponse.ok(await stats_service.get_weekly_stats(day))


@router.get("/monthly", response_model=ApiResponse[MonthlySummary | None])
async def get_monthly_trend(
    stats_service: StatsServiceDep,
    month: str = Query(..., pattern=r"^\d{4}-\d{2}$", description="Month as YYYY-MM"),
) -> ApiResponse[MonthlySummary | None]:
    """Persisted trend of a month; refreshed in the background after writes."""
    activity_logger.log(action_type=ActionType.STATS_VIEW, action_data={"kind": "monthly", "month": month})
    return ApiResponse.ok(await stats_service.get_monthly_trend(parse_month(month)))


@router.get("/month-summary", response_model=ApiResponse[MonthOverview | None])
async def get_month_summary(
    stats_service: StatsServiceDep,
    month: str = Query(..., pattern=r"^\d{4}-\d{2}$", description="Month as YYYY-MM"),
) -> ApiResponse[MonthOverview | None]:
    """Live calendar summary of a month; null when it has no entries."""
    return ApiResponse.ok(await stats_service.get_month_overview(parse_month(month)))


@router.get("/usage", response_model=ApiResponse[UsageStats])
async def get_usage_stats(stats_service: StatsServiceDep, as_of: AsOf) -> ApiResponse[UsageStats]:
    """Total diary days and completion rate since the first entry."""
    return ApiResponse.ok(await stats_service.get_usage_stats(as_of))
