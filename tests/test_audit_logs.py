import json
from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from fleet_manager.application.use_cases.audit_logs import (
    get_audit_log,
    query_audit,
    record_audit,
    record_audit_safely,
)
from fleet_manager.domain.entities import AuditAction, AuditLog
from fleet_manager.domain.exceptions import (
    AuditWriteFailure,
    NotFoundError,
    ValidationError,
)
from fleet_manager.infrastructure.models import AuditLogModel
from fleet_manager.infrastructure.repositories import AuditLogRepository

BASE_TIME = datetime(2025, 3, 10, 12, 0)


def _seed(session, **overrides) -> AuditLog:
    values = {
        "id": None,
        "action": "Update",
        "page": "Vehicles",
        "user_id": 1,
        "username": "Alice",
        "field": "status",
        "old_value": "active",
        "new_value": "in_service",
        "details": None,
        "ip_address": None,
        "user_agent": None,
        "timestamp": BASE_TIME,
    }
    values.update(overrides)
    entry = AuditLogRepository(session).create(AuditLog(**values))
    session.commit()
    return entry


def _raise_db_error(*_args, **_kwargs):
    raise OperationalError("INSERT INTO audit_logs", {}, Exception("read-only"))


def test_record_audit_fills_actor_fields(session, actor):
    entry = record_audit(
        session,
        action=AuditAction.LOGIN,
        page="Login",
        actor=actor,
        details={"method": "password"},
    )

    assert entry.id is not None
    assert entry.action == "Login"
    assert entry.user_id == 7
    assert entry.username == "dispatcher"
    assert entry.ip_address == "10.0.0.5"
    assert entry.user_agent == "pytest"
    assert json.loads(entry.details) == {"method": "password"}
    assert entry.timestamp is not None


def test_record_audit_keeps_strings_and_serializes_structures(session):
    entry = record_audit(
        session,
        action="Update",
        page="Vehicles",
        field="mileage",
        old_value="45000 km",
        new_value={"mileage": 45500},
    )

    assert entry.old_value == "45000 km"
    assert json.loads(entry.new_value) == {"mileage": 45500}
    assert entry.user_id is None


@pytest.mark.parametrize(
    ("action", "page"),
    [("", "Vehicles"), ("Update", ""), ("  ", "Vehicles"), ("Update", "  ")],
)
def test_record_audit_requires_action_and_page(session, action, page):
    with pytest.raises(ValidationError):
        record_audit(session, action=action, page=page)

    assert session.query(AuditLogModel).count() == 0


def test_record_audit_reports_write_failures(session, monkeypatch):
    monkeypatch.setattr(AuditLogRepository, "create", _raise_db_error)

    with pytest.raises(AuditWriteFailure):
        record_audit(session, action="Debug", page="Diagnostics")


def test_record_audit_safely_swallows_write_failures(session, monkeypatch):
    monkeypatch.setattr(AuditLogRepository, "create", _raise_db_error)

    assert record_audit_safely(session, action="Debug", page="Diagnostics") is None


def test_query_orders_newest_first_and_counts_all_matches(session):
    oldest = _seed(session, timestamp=BASE_TIME - timedelta(hours=2))
    middle = _seed(session, timestamp=BASE_TIME - timedelta(hours=1))
    newest = _seed(session, timestamp=BASE_TIME)

    page = query_audit(session, limit=2)
    rest = query_audit(session, limit=2, offset=2)

    assert [entry.id for entry in page.entries] == [newest.id, middle.id]
    assert page.total == 3
    assert [entry.id for entry in rest.entries] == [oldest.id]
    assert rest.total == 3


def test_query_filters(session):
    _seed(session, action="Create", page="Service History", user_id=2, username="Bob")
    _seed(session, action="Delete", page="Vehicles", user_id=1, username="alice.smith")
    _seed(
        session,
        action="Update",
        page="Vehicles",
        field="mileage",
        old_value="45000 km",
        new_value="45500 km",
    )

    assert query_audit(session, action="Create").total == 1
    assert query_audit(session, page="Vehicles").total == 2
    assert query_audit(session, user_id=1).total == 2
    assert query_audit(session, username="ALICE").total == 2
    assert query_audit(session, search="45500").total == 1
    assert query_audit(session, search="mileage").total == 1
    assert query_audit(session, action="Update", search="status").total == 0


def test_query_search_treats_wildcards_literally(session):
    _seed(session, new_value="100% done")
    _seed(session, new_value="1000 done")

    assert query_audit(session, search="0%").total == 1


def test_query_date_range_is_inclusive(session):
    _seed(session, timestamp=datetime(2025, 3, 1, 8, 0))
    _seed(session, timestamp=datetime(2025, 3, 5, 8, 0))
    _seed(session, timestamp=datetime(2025, 3, 9, 8, 0))

    result = query_audit(
        session,
        start_date=datetime(2025, 3, 5, 8, 0),
        end_date=datetime(2025, 3, 9, 8, 0),
    )

    assert result.total == 2


def test_query_rejects_negative_pagination(session):
    with pytest.raises(ValidationError):
        query_audit(session, limit=-1)


def test_get_audit_log(session):
    entry = _seed(session)

    assert get_audit_log(session, entry.id).field == "status"
    with pytest.raises(NotFoundError):
        get_audit_log(session, entry.id + 100)
