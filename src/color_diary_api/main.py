"""Color Diary API application entry point."""

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from color_diary_api.api.v1 import router as api_v1_router
from color_diary_api.config import get_settings
from color_diary_api.core.exceptions import ColorDiaryException
from color_diary_api.db.session import close_db, init_db
from color_diary_api.schemas.base import ApiResponse
from color_diary_api.services.stats import stats_refresher

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Seconds to wait for queued stats refreshes on shutdown
SHUTDOWN_DRAIN_TIMEOUT = 5.0

ERROR_STATUS_CODES = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "PARSE_ERROR": 422,
}


def error_response(status_code: int, code: str, message: str, details: dict[str, Any] | None = None) -> JSONResponse:
    body = ApiResponse.fail(code, message, details)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude={"data"}))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create tables and run the stats refresher for the app's lifetime."""
    await init_db()
    stats_refresher.start()
    logger.info("Color Diary API ready (%s)", settings.environment)

    yield

    try:
        await asyncio.wait_for(stats_refresher.join(), timeout=SHUTDOWN_DRAIN_TIMEOUT)
    except asyncio.TimeoutError:
        logger.warning("Dropping %d pending stats refreshes", stats_refresher.pending)
    await stats_refresher.stop()
    await close_db()
    logger.info("Color Diary API stopped")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
Color Diary API - Daily Mood Color Tracking Backend

- One mood color per day, classified against a fixed palette
- Recency-weighted color mixtures per week, month and year
- Weekly mood trends, consistency and color frequency
- Weekly and monthly statistics and PDF reports
    """,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ColorDiaryException)
async def color_diary_exception_handler(request: Request, exc: ColorDiaryException) -> JSONResponse:
    status_code = ERROR_STATUS_CODES.get(exc.code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return error_response(status_code, exc.code, exc.message, exc.details)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed query parameters or request bodies."""
    errors = [{"loc": list(error["loc"]), "msg": error["msg"]} for error in exc.errors()]
    return error_response(
        422,
        "REQUEST_VALIDATION_ERROR",
        "Request validation failed",
        {"errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


@app.exception_handler(Exception)
async def unexpected_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "INTERNAL_ERROR", "An unexpected error occurred")


@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Liveness probe with the background queue depth."""
    return {
        "status": "healthy",
        "version": settings.app_version,
        "today": date.today().isoformat(),
        "pendingStatsRefreshes": stats_refresher.pending,
        "statsRefresherRunning": stats_refresher.running,
    }


@app.get("/", tags=["Root"])
async def root() -> dict:
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "api": "/api",
        "health": "/health",
    }


app.include_router(api_v1_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("color_diary_api.main:app", host=settings.host, port=settings.port, reload=settings.debug)
