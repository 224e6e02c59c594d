"""Integration tests for the service history and audit endpoints."""

from __future__ import annotations

from datetime import date

import pytest


@pytest.fixture()
def reminder(make_vehicle, make_reminder):
    make_vehicle("AB-1234", make="Volvo", model="FH16", mileage="45000 km")
    return make_reminder("AB-1234", "Annual Service", date(2025, 3, 5))


def _create_payload(**overrides):
    payload = {
        "vehicle_id": "AB-1234",
        "service_type": "Annual Service",
        "service_date": "2025-03-10",
        "mileage": 45500,
        "cost": "120.50",
    }
    payload.update(overrides)
    return payload


def test_service_history_requires_authentication(client):
    assert client.get("/service-history/").status_code == 401
    assert client.post("/service-history/", json=_create_payload()).status_code == 401


def test_service_record_lifecycle(client, admin_headers, reminder):
    response = client.post(
        "/service-history/",
        json=_create_payload(reminder_id=reminder.id),
        headers=admin_headers,
    )
    assert response.status_code == 201
    created = response.json()
    assert created["reminder_id"] == reminder.id
    assert created["cost"] == "120.50"
    assert created["created_by"] == 7
    assert created["vehicle_make"] == "Volvo"

    record_id = created["id"]
    fetched = client.get(f"/service-history/{record_id}", headers=admin_headers)
    assert fetched.status_code == 200
    assert fetched.json()["mileage"] == 45500

    per_vehicle = client.get("/vehicles/AB-1234/service-history", headers=admin_headers)
    assert [r["id"] for r in per_vehicle.json()] == [record_id]

    updated = client.put(
        f"/service-history/{record_id}",
        json={"service_type": "Annual Service + tyres", "service_date": "2025-03-11"},
        headers=admin_headers,
    )
    assert updated.status_code == 200
    assert updated.json()["service_type"] == "Annual Service + tyres"

    deleted = client.delete(f"/service-history/{record_id}", headers=admin_headers)
    assert deleted.status_code == 200
    assert deleted.json()["id"] == record_id
    assert client.get(f"/service-history/{record_id}", headers=admin_headers).status_code == 404

    audit = client.get("/audit-logs/?page=Service%20History", headers=admin_headers).json()
    assert audit["total"] == 3
    assert [entry["action"] for entry in audit["entries"]] == ["Delete", "Update", "Create"]


def test_create_validation_and_missing_references(client, user_headers, reminder):
    missing = client.post(
        "/service-history/", json={"vehicle_id": "AB-1234"}, headers=user_headers
    )
    assert missing.status_code == 400
    assert "Missing required fields" in missing.json()["detail"]

    unknown_vehicle = client.post(
        "/service-history/", json=_create_payload(vehicle_id="ZZ-0000"), headers=user_headers
    )
    assert unknown_vehicle.status_code == 404

    unknown_reminder = client.post(
        "/service-history/", json=_create_payload(reminder_id=404), headers=user_headers
    )
    assert unknown_reminder.status_code == 404


def test_complete_reminder_endpoint(client, user_headers, reminder):
    response = client.post(
        f"/reminders/{reminder.id}/complete",
        json={"mileage": 46000},
        headers=user_headers,
    )

    assert response.status_code == 201
    body = response.json()
    assert body["service_type"] == "Annual Service"
    assert body["reminder_id"] == reminder.id
    assert body["created_by"] == 9

    assert client.post("/reminders/404/complete", headers=user_headers).status_code == 404


def test_audit_trail_is_admin_only_for_reads(client, admin_headers, user_headers):
    created = client.post(
        "/audit-logs/",
        json={"action": "View", "page": "Vehicles", "details": "opened list"},
        headers=user_headers,
    )
    assert created.status_code == 201
    entry = created.json()
    assert entry["username"] == "driver"
    assert entry["user_id"] == 9
    assert entry["user_agent"] == "testclient"

    assert client.get("/audit-logs/", headers=user_headers).status_code == 403
    assert client.get(f"/audit-logs/{entry['id']}", headers=user_headers).status_code == 403

    listing = client.get("/audit-logs/?username=DRIV", headers=admin_headers)
    assert listing.status_code == 200
    assert listing.json()["total"] == 1
    assert client.get(f"/audit-logs/{entry['id']}", headers=admin_headers).status_code == 200


def test_audit_entry_requires_page(client, user_headers):
    response = client.post(
        "/audit-logs/", json={"action": "View", "page": "  "}, headers=user_headers
    )

    assert response.status_code == 400
