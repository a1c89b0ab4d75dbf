"""Repository for notification-related database operations."""

from __future__ import annotations

from typing import Any

from infrastructure.database.ops.notifications import NotificationOperations


class NotificationRepository:
    """Repository providing typed access to notification-related data."""

    def __init__(self, backend: NotificationOperations) -> None:
        self._backend = backend

    def create_message(self, message: str, severity: str) -> int:
        """Create a new notification message."""
        return self._backend.create_notification_message(message, severity)

    def get_recent_messages(self, limit: int = 50) -> list[dict[str, Any]]:
        """Get the newest messages first."""
        return self._backend.get_notification_messages(limit)
