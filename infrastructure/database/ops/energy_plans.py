"""Database operations for the singleton energy plan."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any

from app.domain.exceptions import RepositoryError
from app.utils.time import iso_now

logger = logging.getLogger(__name__)

CURRENT_PLAN_ID = 1


class EnergyPlanOperations:
    """Load and replace the single EnergyPlan row (``plan_id = 1``)."""

    def _ensure_energy_plan_seeded(self, default_limit_kwh: float) -> None:
        db = self.get_db()
        db.execute(
            """
            INSERT OR IGNORE INTO EnergyPlan (plan_id, name, daily_limit_kwh, updated_at)
            VALUES (?, ?, ?, ?)
            """,
            (CURRENT_PLAN_ID, "Default plan", default_limit_kwh, iso_now()),
        )
        db.commit()

    def load_energy_plan(self) -> dict[str, Any] | None:
        try:
            db = self.get_db()
            row = db.execute(
                "SELECT plan_id, name, daily_limit_kwh FROM EnergyPlan WHERE plan_id = ?",
                (CURRENT_PLAN_ID,),
            ).fetchone()
            return dict(row) if row else None
        except sqlite3.Error as exc:
            logger.error("Error loading energy plan: %s", exc)
            raise RepositoryError("Failed to load energy plan") from exc

    def save_energy_plan(self, name: str, daily_limit_kwh: float) -> None:
        try:
            db = self.get_db()
            db.execute(
                """
                INSERT OR REPLACE INTO EnergyPlan (plan_id, name, daily_limit_kwh, updated_at)
                VALUES (?, ?, ?, ?)
                """,
                (CURRENT_PLAN_ID, name, daily_limit_kwh, iso_now()),
            )
            db.commit()
        except sqlite3.Error as exc:
            logger.error("Error saving energy plan: %s", exc)
            raise RepositoryError("Failed to save energy plan") from exc
