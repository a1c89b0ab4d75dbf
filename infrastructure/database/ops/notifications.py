"""Database operations for Notification entities."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any

from app.domain.exceptions import RepositoryError
from app.utils.time import iso_now

logger = logging.getLogger(__name__)


class NotificationOperations:
    """Database operations for alert messages."""

    def create_notification_message(self, message: str, severity: str) -> int:
        """Store an alert and return its id."""
        try:
            db = self.get_db()
            cur = db.execute(
                "INSERT INTO Notifications (message, severity, created_at) VALUES (?, ?, ?)",
                (message, severity, iso_now()),
            )
            db.commit()
            return int(cur.lastrowid)
        except sqlite3.Error as exc:
            logger.error("Failed to create notification message: %s", exc)
            raise RepositoryError("Failed to store notification") from exc

    def get_notification_messages(self, limit: int = 50) -> list[dict[str, Any]]:
        """Most recent alerts first."""
        try:
            db = self.get_db()
            rows = db.execute(
                """
                SELECT notification_id, message, severity, created_at
                FROM Notifications
                ORDER BY notification_id DESC
                LIMIT ?
                """,
                (limit,),
            ).fetchall()
            return [dict(row) for row in rows]
        except sqlite3.Error as exc:
            logger.error("Failed to get notification messages: %s", exc)
            raise RepositoryError("Failed to list notifications") from exc
