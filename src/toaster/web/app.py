"""FastAPI application exposing the toast store.

Renderers poll or drive the live toast list through the REST endpoints in
``toast_router``; the service itself stays an in-process object on
``app.state``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from toaster.core.config import Settings
from toaster.notifications.engine import ToastEngine
from toaster.notifications.service import ToastService
from toaster.web.toast_router import router as toast_router


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    service: str
    version: str = "0.1.0"
    toasts: int = 0


def create_app(
    settings: Settings | None = None,
    service: ToastService | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Uses the factory pattern so tests can create isolated app instances,
    each with its own ToastService.

    Args:
        settings: Application settings. Defaults to Settings().
        service: Optional pre-built ToastService.

    Returns:
        A configured FastAPI instance.
    """
    if settings is None:
        settings = Settings()

    logging.getLogger("toaster").setLevel(settings.log_level.upper())

    if service is None:
        service = ToastService(config=settings.toast)
    engine = ToastEngine(service=service, templates_path=settings.toast.templates_path)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        service.close()

    app = FastAPI(
        title="Toaster",
        description="Ephemeral notification store",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for development
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.toast_service = service
    app.state.toast_engine = engine

    app.include_router(toast_router)

    @app.get("/api/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            service="toaster",
            toasts=len(service.toasts),
        )

    return app
