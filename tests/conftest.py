import os

# Must be set before app.core.config is imported anywhere
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("LOG_DIR", "logs")

import pytest
from unittest.mock import patch
from fastapi.testclient import TestClient

from app.core.config import settings
from app.services.booking_service import BookingService
from app.services.db_service import MemoryBookingStore


VALID_FORM = {
    "name": "John Doe",
    "email": "john@example.com",
    "phone": "9876543210",
    "date": "February 15, 2026",
    "timeSlot": "10:00 AM - 11:00 AM",
}


@pytest.fixture
def valid_form():
    return dict(VALID_FORM)


@pytest.fixture
def booking_service():
    return BookingService(store=MemoryBookingStore())


@pytest.fixture
def client(booking_service):
    from app.main import app
    with patch("app.api.bookings.booking_service", booking_service):
        yield TestClient(app)


@pytest.fixture
def admin_headers(client):
    response = client.post(
        "/api/admin/login",
        json={"username": settings.ADMIN_USERNAME, "password": settings.ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"X-Admin-Token": response.json()["data"]["token"]}
