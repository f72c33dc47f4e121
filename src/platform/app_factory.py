"""
Shared FastAPI App Factory

Provides common app setup for production and test environments.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.platform.config.core_setting import settings
from src.platform.constant import route_constant
from src.platform.exception.exception_handlers import register_exception_handlers
from src.service.ticketing.driving_adapter.http_controller.admin_controller import (
    router as admin_router,
)
from src.service.ticketing.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.ticketing.driving_adapter.http_controller.event_controller import (
    router as event_router,
)


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Local events ticketing backend',
) -> FastAPI:
    """
    Create a configured FastAPI application.

    Args:
        lifespan: Async context manager for app lifespan (startup/shutdown)
        title_suffix: Optional suffix for app title (e.g., " (Test)")
        description: App description

    Returns:
        Configured FastAPI application
    """
    title = f'{settings.PROJECT_NAME}{title_suffix}'

    app = FastAPI(
        title=title,
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    # Register exception handlers
    register_exception_handlers(app)

    # Include routers
    app.include_router(admin_router, prefix=route_constant.ADMIN_BASE, tags=['admin'])
    app.include_router(event_router, prefix=route_constant.EVENT_BASE, tags=['event'])
    app.include_router(booking_router, prefix=route_constant.BOOKING_BASE, tags=['booking'])

    # Register common endpoints
    _register_common_endpoints(app)

    return app


def _register_common_endpoints(app: FastAPI) -> None:
    @app.get(route_constant.HEALTH)
    async def health_check() -> dict[str, str]:
        """Liveness check"""
        return {'status': 'OK', 'service': settings.PROJECT_NAME}
