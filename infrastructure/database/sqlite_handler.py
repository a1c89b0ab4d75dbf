import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from infrastructure.database.ops.devices import DeviceOperations
from infrastructure.database.ops.energy_plans import EnergyPlanOperations
from infrastructure.database.ops.notifications import NotificationOperations

logger = logging.getLogger(__name__)

DEFAULT_DAILY_LIMIT_KWH = 10.0

_PRAGMAS = (
    "PRAGMA journal_mode=WAL",
    "PRAGMA synchronous=NORMAL",
    "PRAGMA temp_store=MEMORY",
)


class SQLiteDatabaseHandler(
    DeviceOperations,
    EnergyPlanOperations,
    NotificationOperations,
):
    """SQLite backend for devices, the energy plan and alerts.

    One connection per thread. ``close_db`` releases the calling thread's
    connection; Flask calls it on app-context teardown.
    """

    def __init__(self, database_path: str, *, default_daily_limit_kwh: float = DEFAULT_DAILY_LIMIT_KWH) -> None:
        self._database_path = database_path
        self._default_daily_limit_kwh = default_daily_limit_kwh
        self._local = threading.local()

        if database_path != ":memory:":
            Path(database_path).parent.mkdir(parents=True, exist_ok=True)

    def get_db(self) -> sqlite3.Connection:
        connection: Optional[sqlite3.Connection] = getattr(self._local, "connection", None)
        if connection is None:
            connection = sqlite3.connect(self._database_path, check_same_thread=False)
            connection.row_factory = sqlite3.Row
            for pragma in _PRAGMAS:
                connection.execute(pragma)
            self._local.connection = connection
            logger.debug("Opened SQLite connection to %s", self._database_path)
        return connection

    def close_db(self, _exc: Optional[BaseException] = None) -> None:
        connection: Optional[sqlite3.Connection] = getattr(self._local, "connection", None)
        if connection is not None:
            connection.close()
            del self._local.connection

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        conn = self.get_db()
        try:
            yield conn
        finally:
            conn.commit()

    # --- Schema ----------------------------------------------------------------
    def create_tables(self) -> None:
        """Create the Devices, EnergyPlan and Notifications tables and seed the plan."""
        with self.connection() as db:
            db.execute(
                """
                CREATE TABLE IF NOT EXISTS Devices (
                    device_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT NOT NULL,
                    is_on INTEGER NOT NULL DEFAULT 0 CHECK (is_on IN (0, 1)),
                    power_usage_watts REAL NOT NULL DEFAULT 0 CHECK (power_usage_watts >= 0),
                    created_at TIMESTAMP,
                    updated_at TIMESTAMP
                )
                """
            )
            # Single-row table: there is always exactly one current plan
            db.execute(
                """
                CREATE TABLE IF NOT EXISTS EnergyPlan (
                    plan_id INTEGER PRIMARY KEY CHECK (plan_id = 1),
                    name TEXT,
                    daily_limit_kwh REAL NOT NULL,
                    updated_at TIMESTAMP
                )
                """
            )
            db.execute(
                """
                CREATE TABLE IF NOT EXISTS Notifications (
                    notification_id INTEGER PRIMARY KEY AUTOINCREMENT,
                    message TEXT NOT NULL,
                    severity TEXT NOT NULL,
                    created_at TIMESTAMP
                )
                """
            )
        self._ensure_energy_plan_seeded(self._default_daily_limit_kwh)
        logger.debug("Database schema ready at %s", self._database_path)
