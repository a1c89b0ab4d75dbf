from __future__ import annotations

import logging
from dataclasses import dataclass

from app.config import AppConfig
from app.services.application.device_service import DeviceService
from app.services.application.energy_monitor_service import EnergyMonitorService
from app.services.application.notifications_service import NotificationsService
from infrastructure.database.repositories.devices import DeviceRepository
from infrastructure.database.repositories.energy_plans import EnergyPlanRepository
from infrastructure.database.repositories.notifications import NotificationRepository
from infrastructure.database.sqlite_handler import SQLiteDatabaseHandler

logger = logging.getLogger(__name__)


@dataclass
class ServiceContainer:
    """Aggregate and manage core backend services."""

    config: AppConfig
    database: SQLiteDatabaseHandler
    device_repo: DeviceRepository
    energy_plan_repo: EnergyPlanRepository
    notification_repo: NotificationRepository
    notifications_service: NotificationsService
    device_service: DeviceService
    energy_monitor_service: EnergyMonitorService

    @classmethod
    def build(cls, config: AppConfig) -> "ServiceContainer":
        """Construct the service container with all dependencies.

        Args:
            config: Application configuration
        """
        logger.info("Building ServiceContainer...")
        database = SQLiteDatabaseHandler(
            config.database_path,
            default_daily_limit_kwh=config.default_daily_limit_kwh,
        )
        database.create_tables()

        device_repo = DeviceRepository(database)
        energy_plan_repo = EnergyPlanRepository(database)
        notification_repo = NotificationRepository(database)

        notifications_service = NotificationsService(
            notification_repo,
            history_limit=config.alert_history_limit,
        )
        container = cls(
            config=config,
            database=database,
            device_repo=device_repo,
            energy_plan_repo=energy_plan_repo,
            notification_repo=notification_repo,
            notifications_service=notifications_service,
            device_service=DeviceService(device_repo),
            energy_monitor_service=EnergyMonitorService(device_repo, energy_plan_repo, notifications_service),
        )
        logger.info("ServiceContainer built successfully.")
        return container

    def shutdown(self) -> None:
        """Release external resources before process exit."""
        self.database.close_db()
        logger.info("Database connection closed")
