"""
Notification Service
====================

Household alert delivery. Satisfies ``app.services.protocols.Notifier``:
each alert is stored in the notification history and written to the
application log at WARNING level, where the console and rotating file
handlers pick it up.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, TYPE_CHECKING

from app.domain.exceptions import ValidationError
from app.enums import NotificationSeverity

if TYPE_CHECKING:
    from infrastructure.database.repositories.notifications import NotificationRepository

logger = logging.getLogger(__name__)


class NotificationsService:
    """Stores and logs household alerts."""

    def __init__(self, notification_repo: "NotificationRepository", *, history_limit: int = 50):
        """
        Initialize NotificationsService.

        Args:
            notification_repo: Repository for notification data.
            history_limit: Default and maximum number of alerts returned by ``get_recent_alerts``.
        """
        self._repo = notification_repo
        self._history_limit = history_limit

    def send_alert(self, message: str) -> None:
        """Deliver an alert. Repository failures propagate to the caller."""
        notification_id = self._repo.create_message(message, str(NotificationSeverity.WARNING))
        logger.warning("ALERT #%s: %s", notification_id, message)

    def get_recent_alerts(self, limit: int | None = None) -> List[Dict[str, Any]]:
        """Newest alerts first, never more than ``history_limit``.

        Raises:
            ValidationError: If ``limit`` is given and below 1.
        """
        if limit is None:
            limit = self._history_limit
        elif limit < 1:
            raise ValidationError(f"Alert limit must be at least 1, got {limit}", detail={"limit": limit})
        return self._repo.get_recent_messages(min(limit, self._history_limit))
