"""FastAPI application with lifespan and router mounting."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from idack.api.routes import admin, health
from idack.core.config import AppSettings
from idack.core.logging_config import configure_logging
from idack.host.runner import ProcessorRunner
from idack.persistence import create_state_manager


def create_app(settings: AppSettings | None = None, runner: ProcessorRunner | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``runner`` overrides the one built from settings (tests inject a runner
    over a fake state manager).
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize and tear down application resources."""
        app_settings = settings if settings is not None else AppSettings()
        configure_logging(app_settings)
        app.state.settings = app_settings
        app.state.runner = runner if runner is not None else ProcessorRunner(
            state_manager=create_state_manager(app_settings),
            config=app_settings.processor,
        )
        yield

    app = FastAPI(
        title="IdAck Processor",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(health.router)
    app.include_router(admin.router, prefix="/admin")
    return app
