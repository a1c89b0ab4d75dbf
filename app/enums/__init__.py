"""
Enums Module
============

This module provides enumeration types for the energy monitor.
Enums ensure type safety and consistency across the codebase.
"""

from app.enums.common import NotificationSeverity, PowerState

__all__ = [
    "NotificationSeverity",
    "PowerState",
]
