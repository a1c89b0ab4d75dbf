"""
Shared test fixtures for the energy monitor test suite.

Provides:
- In-memory SQLite database with all tables created
- Repository instances wired to the test database
- Mock collaborators for the store and notifier contracts
- Service factories for the application services
- Helper utilities for seeding test data

Usage:
    def test_example(device_repo, seed):
        heater = seed.device("Heater", 1000, is_on=True)
        assert device_repo.get(heater.device_id).is_on
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from app.domain.energy import Device, EnergyPlan
from infrastructure.database.repositories.devices import DeviceRepository
from infrastructure.database.repositories.energy_plans import EnergyPlanRepository
from infrastructure.database.repositories.notifications import NotificationRepository

# ---------------------------------------------------------------------------
# Database & Repositories
# ---------------------------------------------------------------------------
from infrastructure.database.sqlite_handler import SQLiteDatabaseHandler

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("infrastructure").setLevel(logging.WARNING)
logging.getLogger("app").setLevel(logging.WARNING)


# ========================== Database Fixtures ==============================


@pytest.fixture()
def db_handler():
    """In-memory SQLite database with all tables created.

    Each test gets a fresh database.
    """
    handler = SQLiteDatabaseHandler(":memory:", default_daily_limit_kwh=5.0)
    handler.create_tables()
    yield handler
    handler.close_db()


# ========================== Repository Fixtures ============================


@pytest.fixture()
def device_repo(db_handler):
    """DeviceRepository backed by the in-memory DB."""
    return DeviceRepository(db_handler)


@pytest.fixture()
def energy_plan_repo(db_handler):
    """EnergyPlanRepository backed by the in-memory DB."""
    return EnergyPlanRepository(db_handler)


@pytest.fixture()
def notification_repo(db_handler):
    """NotificationRepository backed by the in-memory DB."""
    return NotificationRepository(db_handler)


# ========================== Mock Collaborator Fixtures =====================


@pytest.fixture()
def mock_device_store():
    """Mock DeviceStore: empty by default, records update calls."""
    store = MagicMock()
    store.get.return_value = None
    store.get_all.return_value = []
    return store


@pytest.fixture()
def mock_plan_store():
    """Mock EnergyPlanStore returning a 1.0 kWh plan."""
    store = MagicMock()
    store.get_current_plan.return_value = EnergyPlan(daily_limit_kwh=1.0)
    return store


@pytest.fixture()
def mock_notifier():
    """Mock Notifier that records send_alert calls."""
    notifier = MagicMock()
    notifier.send_alert = MagicMock()
    return notifier


# ========================== Service Factory Fixtures =======================


@pytest.fixture()
def device_service(mock_device_store):
    """DeviceService over the mock store."""
    from app.services.application.device_service import DeviceService

    return DeviceService(mock_device_store)


@pytest.fixture()
def energy_monitor_service(mock_device_store, mock_plan_store, mock_notifier):
    """EnergyMonitorService over mock collaborators."""
    from app.services.application.energy_monitor_service import EnergyMonitorService

    return EnergyMonitorService(mock_device_store, mock_plan_store, mock_notifier)


@pytest.fixture()
def notifications_service(notification_repo):
    """NotificationsService with a real repo."""
    from app.services.application.notifications_service import NotificationsService

    return NotificationsService(notification_repo, history_limit=10)


# ========================== Seeding Helpers ================================


class _Seeder:
    """Inserts devices straight through the repository."""

    def __init__(self, device_repo: DeviceRepository) -> None:
        self._repo = device_repo

    def device(self, name: str, watts: float, *, is_on: bool = False) -> Device:
        return self._repo.create(name=name, power_usage_watts=watts, is_on=is_on)


@pytest.fixture()
def seed(device_repo):
    return _Seeder(device_repo)


@pytest.fixture()
def make_devices():
    """Build ``Device`` values from ``(is_on, watts)`` pairs with sequential ids."""

    def _make(*specs: tuple[bool, float]) -> list[Device]:
        return [
            Device(device_id=index, name=f"Device {index}", is_on=is_on, power_usage_watts=watts)
            for index, (is_on, watts) in enumerate(specs, start=1)
        ]

    return _make
