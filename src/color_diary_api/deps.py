"""Dependency injection for FastAPI."""

from datetime import date
from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from color_diary_api.db.session import get_db
from color_diary_api.services import (
    AnalysisService,
    EntryService,
    PreferenceService,
    ReportService,
    SqlEntryStore,
    StatsRefresher,
    StatsService,
    stats_refresher,
)

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_stats_refresher() -> StatsRefresher:
    """Get the application-wide StatsRefresher."""
    return stats_refresher


def get_as_of(
    as_of: Annotated[date | None, Query(alias="asOf", description="Reference date, defaults to today")] = None,
) -> date:
    """Resolve the reference date once at the edge of the app."""
    return as_of or date.today()


AsOf = Annotated[date, Depends(get_as_of)]
RefresherDep = Annotated[StatsRefresher, Depends(get_stats_refresher)]


# Service dependencies
def get_entry_store(db: DbSession) -> SqlEntryStore:
    """Get SqlEntryStore instance."""
    return SqlEntryStore(db)


def get_entry_service(db: DbSession, refresher: RefresherDep) -> EntryService:
    """Get EntryService instance."""
    return EntryService(db, refresher)


def get_analysis_service(store: Annotated[SqlEntryStore, Depends(get_entry_store)]) -> AnalysisService:
    """Get AnalysisService instance."""
    return AnalysisService(store)


def get_stats_service(db: DbSession) -> StatsService:
    """Get StatsService instance."""
    return StatsService(db)


def get_preference_service(db: DbSession) -> PreferenceService:
    """Get PreferenceService instance."""
    return PreferenceService(db)


def get_report_service(store: Annotated[SqlEntryStore, Depends(get_entry_store)]) -> ReportService:
    """Get ReportService instance."""
    return ReportService(store)


# Service type aliases
EntryServiceDep = Annotated[EntryService, Depends(get_entry_service)]
AnalysisServiceDep = Annotated[AnalysisService, Depends(get_analysis_service)]
StatsServiceDep = Annotated[StatsService, Depends(get_stats_service)]
PreferenceServiceDep = Annotated[PreferenceService, Depends(get_preference_service)]
ReportServiceDep = Annotated[ReportService, Depends(get_report_service)]
