"""studytrack - academic productivity tracker."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from studytrack.core.config import settings
from studytrack.core.errors import DuplicateIdError, RecordNotFoundError, StoreError, classify_error_with_response
from studytrack.core.logging import configure_logfire, instrument_fastapi, log_with_context
from studytrack.data.seed import build_seed
from studytrack.interface.api_router import router as api_router
from studytrack.services.entity_store import EntityStore


logger = logging.getLogger(__name__)


def build_store() -> EntityStore:
    """Create the application store, seeded with demo data unless disabled."""
    if settings.seed_demo_data:
        return EntityStore.from_seed(build_seed())
    return EntityStore()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    # Configure logging first so seeding logs are captured
    configure_logfire()

    # A store installed before startup (tests) is kept
    if getattr(app.state, "store", None) is None:
        app.state.store = build_store()
    logger.info("Entity store ready", extra={"task_count": len(app.state.store.tasks)})
    yield


app = FastAPI(
    title="studytrack",
    description="Academic productivity tracker with derived task priorities",
    version="0.1.0",
    lifespan=lifespan,
)

# Instrument FastAPI with Logfire
instrument_fastapi(app)

# Register routers
app.include_router(api_router)


def _status_for(exception: Exception) -> int:
    if isinstance(exception, RecordNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exception, DuplicateIdError):
        return status.HTTP_409_CONFLICT
    return status.HTTP_422_UNPROCESSABLE_ENTITY


@app.exception_handler(StoreError)
@app.exception_handler(ValueError)
async def handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    """Turn store and merged-record validation errors into structured responses."""
    response = classify_error_with_response(exc)
    log_with_context(logger, "warning", "Request failed", code=response.code, path=request.url.path)
    return JSONResponse(content=response.model_dump(mode="json"), status_code=_status_for(exc))


@app.get("/health")
async def health_check() -> JSONResponse:
    """Health check endpoint."""
    return JSONResponse(content={"status": "healthy"}, status_code=200)
