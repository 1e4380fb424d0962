"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py;
no business logic here, only wiring of infrastructure (logging,
schema creation, DB engine dispose).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.infrastructure.persistence import database
from app.shared.telemetry.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup order: logging, database schema (create missing tables).
    Shutdown: SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    setup_logging()
    await database.init_models()
    logger.info(
        "%s %s started (db_driver=%s, user_repository=%s)",
        settings.app_name,
        settings.app_version,
        settings.db_driver,
        settings.user_repository,
    )

    yield

    # ---- Shutdown ----
    await database.dispose_engine()
