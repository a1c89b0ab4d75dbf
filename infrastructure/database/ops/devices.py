"""Database operations for Device entities."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Optional

from app.domain.exceptions import RepositoryError
from app.utils.time import iso_now

logger = logging.getLogger(__name__)


class DeviceOperations:
    """Device CRUD helpers shared across database handlers."""

    def insert_device(self, name: str, power_usage_watts: float, is_on: bool = False) -> int:
        try:
            db = self.get_db()
            cur = db.execute(
                """
                INSERT INTO Devices (name, is_on, power_usage_watts, created_at, updated_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (name, int(is_on), power_usage_watts, iso_now(), iso_now()),
            )
            db.commit()
            device_id = int(cur.lastrowid)
            logger.info("Device '%s' inserted with id %s", name, device_id)
            return device_id
        except sqlite3.Error as exc:
            logger.error("Error inserting device '%s': %s", name, exc)
            raise RepositoryError(f"Failed to insert device '{name}'") from exc

    def get_device_row(self, device_id: int) -> Optional[Dict[str, Any]]:
        try:
            db = self.get_db()
            row = db.execute(
                "SELECT device_id, name, is_on, power_usage_watts FROM Devices WHERE device_id = ?",
                (device_id,),
            ).fetchone()
            return dict(row) if row else None
        except sqlite3.Error as exc:
            logger.error("Error loading device %s: %s", device_id, exc)
            raise RepositoryError(f"Failed to load device {device_id}") from exc

    def get_device_rows(self) -> List[Dict[str, Any]]:
        try:
            db = self.get_db()
            rows = db.execute(
                "SELECT device_id, name, is_on, power_usage_watts FROM Devices ORDER BY device_id"
            ).fetchall()
            return [dict(row) for row in rows]
        except sqlite3.Error as exc:
            logger.error("Error listing devices: %s", exc)
            raise RepositoryError("Failed to list devices") from exc

    def update_device_row(self, device_id: int, *, name: str, is_on: bool, power_usage_watts: float) -> bool:
        """Write the mutable columns of a device. Returns ``False`` if no row matched."""
        try:
            db = self.get_db()
            cur = db.execute(
                """
                UPDATE Devices
                SET name = ?, is_on = ?, power_usage_watts = ?, updated_at = ?
                WHERE device_id = ?
                """,
                (name, int(is_on), power_usage_watts, iso_now(), device_id),
            )
            db.commit()
            return cur.rowcount > 0
        except sqlite3.Error as exc:
            logger.error("Error updating device %s: %s", device_id, exc)
            raise RepositoryError(f"Failed to update device {device_id}") from exc
