"""FastAPI application factory.

The VideoStore is created here and handed to routers through the
get_store dependency, so each app instance owns its own records.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from videohub import __version__
from videohub.config import Settings
from videohub.errors import NotFoundError, RequestValidationFailed
from videohub.models.types import ErrorsResponse, HealthResponse
from videohub.store.memory import VideoStore

logger = logging.getLogger(__name__)


def get_store(request: Request) -> VideoStore:
    """Dependency to get the app's video store."""
    return request.app.state.store


async def _not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    logger.debug(f"{request.method} {request.url.path}: {exc}")
    return JSONResponse(status_code=404, content={"detail": "Video not found"})


async def _validation_handler(request: Request, exc: RequestValidationFailed) -> JSONResponse:
    logger.info(f"{request.method} {request.url.path} rejected: {exc}")
    body = ErrorsResponse(errors_messages=exc.errors)
    return JSONResponse(status_code=400, content=body.model_dump(by_alias=True))


def create_app(store: VideoStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        store: Store to serve. A fresh empty store is created if omitted.
        settings: Service settings. Read from the environment if omitted.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings()
    if store is None:
        store = VideoStore()
        if settings.seed_sample:
            store.seed_sample()

    app = FastAPI(
        title="videohub API",
        description="In-memory video catalogue",
        version=__version__,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(NotFoundError, _not_found_handler)
    app.add_exception_handler(RequestValidationFailed, _validation_handler)

    # Include routes
    from videohub.api.routes import testing, videos

    app.include_router(videos.router)
    app.include_router(testing.router)

    @app.get("/health", response_model=HealthResponse)
    def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="ok")

    return app


# Default app instance
app = create_app()
