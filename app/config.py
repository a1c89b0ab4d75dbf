"""
Configuration for the Energy Monitor
====================================
Main application runtime settings loaded from environment variables.
Setups the logging configuration as well.
"""

import logging
import os
import sys
from contextlib import suppress
from dataclasses import dataclass, field
from logging.handlers import RotatingFileHandler
from typing import Any

from app.domain.exceptions import ConfigurationError


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"Environment variable {name} must be an integer.") from None


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"Environment variable {name} must be a number.") from None


@dataclass
class AppConfig:
    """Runtime configuration loaded from environment variables."""

    environment: str = field(default_factory=lambda: os.getenv("ENERGY_ENV", "development"))
    secret_key: str = field(default_factory=lambda: os.getenv("ENERGY_SECRET_KEY", "EnergyMonitorDevSecretKey"))
    database_path: str = field(
        default_factory=lambda: os.getenv("ENERGY_DATABASE_PATH", "database/energy_monitor.db")
    )

    # Seed value for the singleton plan row; only used when the database is new.
    default_daily_limit_kwh: float = field(
        default_factory=lambda: _env_float("ENERGY_DEFAULT_DAILY_LIMIT_KWH", 10.0)
    )
    alert_history_limit: int = field(default_factory=lambda: _env_int("ENERGY_ALERT_HISTORY_LIMIT", 50))

    host: str = field(default_factory=lambda: os.getenv("ENERGY_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: _env_int("ENERGY_PORT", 8000))

    DEBUG: bool = field(default_factory=lambda: _env_bool("ENERGY_DEBUG", False))
    log_level: str = field(default_factory=lambda: os.getenv("ENERGY_LOG_LEVEL", "INFO"))
    log_dir: str = field(default_factory=lambda: os.getenv("ENERGY_LOG_DIR", "logs"))

    def validate(self) -> None:
        if self.alert_history_limit <= 0:
            raise ConfigurationError("ENERGY_ALERT_HISTORY_LIMIT must be positive.")
        if not 0 < self.port < 65536:
            raise ConfigurationError(f"ENERGY_PORT {self.port} is out of range.")
        if logging.getLevelName(self.log_level.upper()) == f"Level {self.log_level.upper()}":
            raise ConfigurationError(f"Unknown log level '{self.log_level}'.")

    def as_flask_config(self) -> dict[str, Any]:
        """Render configuration values for Flask application."""
        secret = self.secret_key or os.getenv("FLASK_SECRET_KEY")
        if not secret:
            raise ConfigurationError(
                "Missing ENERGY_SECRET_KEY or FLASK_SECRET_KEY environment variable. "
                "Production systems must set an explicit secret key."
            )

        return {
            "ENV": self.environment,
            "SECRET_KEY": secret,
            "DATABASE_PATH": self.database_path,
            "DEBUG": self.DEBUG,
        }


def setup_logging(debug: bool = False, *, level: str = "INFO", log_dir: str = "logs") -> None:
    """Setup logging configuration."""
    log_level = logging.DEBUG if debug else logging.getLevelName(level.upper())

    # Root logger
    root = logging.getLogger()
    root.setLevel(log_level)

    # Keep existing handlers but avoid adding duplicates when create_app is called multiple times
    has_console = any(getattr(h, "name", "") == "energy_console" for h in root.handlers)
    log_file = os.path.abspath(os.path.join(log_dir, "energy_monitor.log"))
    has_file = False
    added_handler = False

    # A file handler left over from an earlier call with another log_dir is replaced
    for handler in list(root.handlers):
        if getattr(handler, "name", "") != "energy_file":
            continue
        if getattr(handler, "baseFilename", None) == log_file:
            has_file = True
        else:
            root.removeHandler(handler)
            handler.close()

    # Console handler (force UTF-8 to avoid UnicodeEncodeError on Windows terminals)
    stream = sys.stdout
    with suppress(AttributeError, ValueError):
        stream.reconfigure(encoding="utf-8", errors="replace")
    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    if not has_console:
        console_handler = logging.StreamHandler(stream=stream)
        console_handler.name = "energy_console"
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)
        added_handler = True

    # File handler
    if not has_file:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.name = "energy_file"
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        added_handler = True

    # Ensure handler levels follow the desired log level
    for handler in root.handlers:
        if getattr(handler, "name", "") in {"energy_console", "energy_file"}:
            handler.setLevel(log_level)

    if added_handler:
        root.info("Logging initialized at level: %s", logging.getLevelName(log_level))

    if _env_bool("ENERGY_SILENCE_WERKZEUG", True):
        logging.getLogger("werkzeug").setLevel(logging.WARNING)


def load_config() -> AppConfig:
    """Helper for callers to load and validate configuration."""
    config = AppConfig()
    config.validate()
    return config
