"""
FastAPI application factory.
"""

import logging
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from appointment_manager.api.exception_handlers import register_exception_handlers
from appointment_manager.api.middleware import RequestLoggingMiddleware
from appointment_manager.api.router import api_router
from appointment_manager.config.settings import Settings, get_settings
from appointment_manager.core.lifecycle import lifespan

logger = logging.getLogger(__name__)


class AppFactory:
    """
    Builds the appointments API from a Settings instance.

    The settings are attached to ``app.state.settings`` so the lifespan
    handler sees the same configuration the factory used.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @property
    def api_prefix(self) -> str:
        return self.settings.API_V1_STR

    def create_app(self) -> FastAPI:
        app = FastAPI(
            title=self.settings.PROJECT_NAME,
            description=self.settings.PROJECT_DESCRIPTION,
            version=self.settings.VERSION,
            docs_url=f"{self.api_prefix}/docs",
            redoc_url=f"{self.api_prefix}/redoc",
            openapi_url=f"{self.api_prefix}/openapi.json",
            lifespan=lifespan,
        )
        app.state.settings = self.settings

        self._install_middleware(app)
        register_exception_handlers(app)
        app.include_router(api_router, prefix=self.api_prefix)
        self._install_service_endpoints(app)

        logger.info(f"{self.settings.PROJECT_NAME} {self.settings.VERSION} ready ({self.settings.ENVIRONMENT})")
        return app

    def _install_middleware(self, app: FastAPI) -> None:
        # Added last so CORS wraps request logging
        app.add_middleware(RequestLoggingMiddleware)

        origins = self.settings.cors_origins
        wildcard = "*" in origins
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"] if wildcard else origins,
            allow_credentials=not wildcard,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def _install_service_endpoints(self, app: FastAPI) -> None:
        """Liveness probe and a root document pointing at the API."""
        settings = self.settings
        prefix = self.api_prefix

        @app.get("/health", tags=["health"])
        async def health_check() -> dict[str, str]:
            return {"status": "ok", "environment": settings.ENVIRONMENT}

        @app.get("/", tags=["health"])
        async def root() -> dict[str, Any]:
            return {
                "message": f"{settings.PROJECT_NAME} is running",
                "version": settings.VERSION,
                "docs_url": f"{prefix}/docs",
                "health_url": "/health",
                "api_url": f"{prefix}/appointments",
            }


def create_app(settings: Settings | None = None) -> FastAPI:
    return AppFactory(settings).create_app()
