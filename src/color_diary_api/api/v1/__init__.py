"""API v1 endpoints."""

from color_diary_api.api.v1.router import router

__all__ = ["router"]
