"""Shared fixtures: an isolated in-memory database per test."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable, Iterator
from datetime import date, datetime, timezone
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "fleet_manager_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["APP_TIMEZONE"] = "UTC"
os.environ["GENERATE_NOTIFICATIONS_ON_STARTUP"] = "false"

from fleet_manager.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fleet_manager.domain.entities import Actor  # noqa: E402
from fleet_manager.infrastructure.database import Base  # noqa: E402
from fleet_manager.infrastructure import models  # noqa: E402,F401
from fleet_manager.infrastructure.models import (  # noqa: E402
    ReminderModel,
    VehicleModel,
)

FIXED_NOW = datetime(2025, 3, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def session_factory(engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def session(session_factory) -> Iterator[Session]:
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def actor() -> Actor:
    return Actor(
        id=7,
        username="dispatcher",
        role="admin",
        ip_address="10.0.0.5",
        user_agent="pytest",
    )


@pytest.fixture()
def make_vehicle(session: Session) -> Callable[..., VehicleModel]:
    def _make_vehicle(
        vehicle_id: str = "AB-1234",
        *,
        make: str = "Volvo",
        model: str = "FH16",
        mileage: str | None = "45000 km",
        last_service: date | None = None,
    ) -> VehicleModel:
        vehicle = VehicleModel(
            id=vehicle_id,
            status="active",
            type="truck",
            make=make,
            model=model,
            year=2019,
            mileage=mileage,
            last_service=last_service,
            documents=False,
        )
        session.add(vehicle)
        session.commit()
        return vehicle

    return _make_vehicle


@pytest.fixture()
def make_reminder(session: Session) -> Callable[..., ReminderModel]:
    def _make_reminder(
        vehicle_id: str,
        name: str,
        due_date: date,
        *,
        enabled: bool = True,
    ) -> ReminderModel:
        reminder = ReminderModel(
            vehicle_id=vehicle_id, name=name, due_date=due_date, enabled=enabled
        )
        session.add(reminder)
        session.commit()
        return reminder

    return _make_reminder
