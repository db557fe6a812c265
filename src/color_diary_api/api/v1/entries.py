"""Daily color entry API endpoints."""

from datetime import date

from fastapi import APIRouter, Query, status

from color_diary_api.deps import EntryServiceDep
from color_diary_api.schemas.base import ApiResponse
from color_diary_api.schemas.entry import ColorEntry, ColorEntryCreate

router = APIRouter(prefix="/entries", tags=["Entries"])


@router.post("", response_model=ApiResponse[ColorEntry], status_code=status.HTTP_201_CREATED)
async def save_entry(
    data: ColorEntryCreate,
    entry_service: EntryServiceDep,
) -> ApiResponse[ColorEntry]:
    """
    Commit the color of a day.

    The date defaults to today. Saving again for the same date replaces
    the earlier color; weekly and monthly stats are refreshed in the
    background.
    """
    entry = await entry_service.save_entry(data.date or date.today(), data.color_hex, data.notes)
    return ApiResponse.ok(entry)


@router.get("", response_model=ApiResponse[list[ColorEntry]])
async def list_entries(
    entry_service: EntryServiceDep,
    end: date = Query(..., description="Last date, inclusive"),
    start: date | None = Query(default=None, description="First date, inclusive; omit for all history"),
) -> ApiResponse[list[ColorEntry]]:
    """List entries in a date range, newest first."""
    entries = await entry_service.list_entries(start, end)
    return ApiResponse.ok(entries)


@router.get("/{day}", response_model=ApiResponse[ColorEntry])
async def get_entry(day: date, entry_service: EntryServiceDep) -> ApiResponse[ColorEntry]:
    """Get the entry of a single day."""
    entry = await entry_service.get_entry(day)
    return ApiResponse.ok(entry)
