"""
Production FastAPI Application

Run with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Club-Verse] Starting up...')

    # Fail fast on a missing secret / bad config before serving anything
    settings = container.config_service()
    Logger.base.info(
        f'⚙️  [Club-Verse] env={settings.ENVIRONMENT} email_backend={settings.EMAIL_BACKEND}'
    )

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Club-Verse] Dependency injection wired')

    database = container.database()
    await database.create_all()
    Logger.base.info('🗄️  [Club-Verse] Database tables ensured')

    Logger.base.info('✅ [Club-Verse] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Club-Verse] Shutting down...')

    # Let in-flight confirmation emails finish
    await container.notification_dispatcher().drain()
    Logger.base.info('📧 [Club-Verse] Pending notifications drained')

    await database.dispose()
    Logger.base.info('🗄️  [Club-Verse] Database engine disposed')

    container.unwire()

    Logger.base.info('👋 [Club-Verse] Shutdown complete')


app = create_app(lifespan=lifespan)
