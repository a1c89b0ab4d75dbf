"""Repository facades exposing typed accessors over low-level mixins.

Each facade wraps a backend that provides the matching operations mixin
(normally :class:`~infrastructure.database.sqlite_handler.SQLiteDatabaseHandler`).
"""

from infrastructure.database.repositories.devices import DeviceRepository
from infrastructure.database.repositories.energy_plans import EnergyPlanRepository
from infrastructure.database.repositories.notifications import NotificationRepository

__all__ = [
    "DeviceRepository",
    "EnergyPlanRepository",
    "NotificationRepository",
]
