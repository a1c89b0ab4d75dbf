"""
Common Enumerations
====================

This module contains enums shared across services.
"""

from enum import Enum


class NotificationSeverity(str, Enum):
    """
    Notification severity levels.
    Used by: notifications_service
    """
    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"

    def __str__(self) -> str:
        return self.value


class PowerState(str, Enum):
    """
    Human-readable device power state.
    Used by: devices API responses
    """
    ON = "ON"
    OFF = "OFF"

    @classmethod
    def from_bool(cls, is_on: bool) -> "PowerState":
        return cls.ON if is_on else cls.OFF

    def __str__(self) -> str:
        return self.value
