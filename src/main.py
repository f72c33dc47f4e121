"""
Production FastAPI Application
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    config = container.config_service()
    Logger.base.info(f'🚀 [{config.PROJECT_NAME}] Starting up...')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Startup] Dependency injection wired')

    # Create tables that don't exist yet
    database = container.database()
    await database.create_tables()
    Logger.base.info('🗄️  [Startup] Database schema ready')

    Logger.base.info('✅ [Startup] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Shutdown] Shutting down...')

    await database.dispose()

    # Unwire DI
    container.unwire()

    Logger.base.info('👋 [Shutdown] Shutdown complete')


# Create FastAPI app using shared factory
app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
