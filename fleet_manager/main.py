"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fleet_manager.application.use_cases.notifications import generate_notifications
from fleet_manager.config import get_settings
from fleet_manager.domain.exceptions import FleetManagerError
from fleet_manager.infrastructure import database
from fleet_manager.interfaces.api.routes import register_routes
from fleet_manager.utils import configure_logging

logger = logging.getLogger(__name__)


def run_startup_generation() -> int:
    """Generate pending notifications once; failures are logged, not raised."""

    session = database.SessionLocal()
    try:
        created = generate_notifications(session)
    except FleetManagerError:
        logger.exception("Startup notification generation failed")
        return 0
    finally:
        session.close()
    return len(created)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize the database on startup and release resources on shutdown."""

    database.initialize_database()
    if get_settings().generate_notifications_on_startup:
        created = run_startup_generation()
        logger.info("Startup generation created %d notifications", created)
    yield
    database.engine.dispose()


def create_app() -> FastAPI:
    """Create and configure the main FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Fleet Manager", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app
