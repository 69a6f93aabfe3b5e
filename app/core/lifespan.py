"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Used by main.py; no business
logic here, only wiring of infrastructure (logging, telemetry, DB engine).
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from app.core.config import get_settings
from app.domain.exceptions import SqlNotConfiguredException

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: SQLAlchemy instrumentation (if telemetry is on). Shutdown
    order: telemetry shutdown, SQL engine dispose.
    """
    settings = get_settings()

    # ---- Startup ----
    from app.shared.telemetry.telemetry import get_telemetry

    telemetry = get_telemetry()
    if telemetry is not None and settings.telemetry_enabled:
        from app.infrastructure.persistence import database

        try:
            database.get_session_factory()
        except SqlNotConfiguredException:
            logger.warning("SQLAlchemy instrumentation skipped: database not configured")
        else:
            telemetry.instrument_sqlalchemy(database.engine)

    logger.info("%s %s started", settings.app_name, settings.app_version)

    yield

    # ---- Shutdown ----
    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        logger.info("Telemetry shutdown complete")

    from app.infrastructure.persistence.database import dispose_engine

    await dispose_engine()
    logger.info("Database engine disposed")
