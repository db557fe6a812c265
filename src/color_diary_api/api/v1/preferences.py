"""User preference API endpoints."""

from fastapi import APIRouter

from color_diary_api.deps import PreferenceServiceDep
from color_diary_api.schemas.base import ApiResponse
from color_diary_api.schemas.preference import PreferenceResponse, PreferenceValue

router = APIRouter(prefix="/preferences", tags=["Preferences"])


@router.get("/{key}", response_model=ApiResponse[PreferenceResponse])
async def get_preference(key: str, preference_service: PreferenceServiceDep) -> ApiResponse[PreferenceResponse]:
    """Get a preference; the value is null when it was never set."""
    value = await preference_service.get_preference(key)
    return ApiResponse.ok(PreferenceResponse(key=key, value=value))


@router.put("/{key}", response_model=ApiResponse[PreferenceResponse])
async def set_preference(
    key: str,
    data: PreferenceValue,
    preference_service: PreferenceServiceDep,
) -> ApiResponse[PreferenceResponse]:
    """Store a JSON value under a preference key."""
    value = await preference_service.set_preference(key, data.value)
    return ApiResponse.ok(PreferenceResponse(key=key, value=value))
