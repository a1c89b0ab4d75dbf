"""
Energy Monitoring Domain Objects
=================================
Dataclasses for devices, the active energy plan and derived usage figures.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

from app.domain.exceptions import ValidationError

WATTS_PER_KILOWATT = 1000.0


@dataclass
class Device:
    """A controllable appliance with an on/off state and a wattage rating."""

    device_id: int
    name: str = ""
    is_on: bool = False
    power_usage_watts: float = 0.0  # Watts, counted only while on

    def __post_init__(self) -> None:
        if not math.isfinite(self.power_usage_watts) or self.power_usage_watts < 0:
            raise ValidationError(
                f"Device {self.device_id} power usage must be a finite non-negative number, got {self.power_usage_watts}",
                detail={"device_id": self.device_id, "power_usage_watts": self.power_usage_watts},
            )

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Device":
        """Build a device from a database row or plain mapping."""
        return cls(
            device_id=int(row["device_id"]),
            name=row["name"] or "",
            is_on=bool(row["is_on"]),
            power_usage_watts=float(row["power_usage_watts"] or 0.0),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "device_id": self.device_id,
            "name": self.name,
            "is_on": self.is_on,
            "power_usage_watts": self.power_usage_watts,
        }


@dataclass(frozen=True)
class EnergyPlan:
    """The single active daily consumption budget.

    Frozen: updates build a new value with ``dataclasses.replace``.
    """

    daily_limit_kwh: float
    plan_id: int = 1
    name: str = "Default plan"

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "EnergyPlan":
        return cls(
            daily_limit_kwh=float(row["daily_limit_kwh"]),
            plan_id=int(row["plan_id"]),
            name=row["name"] or "",
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "plan_id": self.plan_id,
            "name": self.name,
            "daily_limit_kwh": self.daily_limit_kwh,
        }


@dataclass(frozen=True)
class UsageSnapshot:
    """Point-in-time usage compared against the plan limit."""

    usage_kwh: float
    daily_limit_kwh: float
    active_device_count: int

    @property
    def is_overloaded(self) -> bool:
        return self.usage_kwh > self.daily_limit_kwh

    def to_dict(self) -> dict[str, Any]:
        return {
            "usage_kwh": round(self.usage_kwh, 3),
            "daily_limit_kwh": self.daily_limit_kwh,
            "is_overloaded": self.is_overloaded,
            "active_device_count": self.active_device_count,
        }


def watts_to_kwh(watts: float) -> float:
    """Convert a wattage figure to kWh, treating it as one hour of draw."""
    return watts / WATTS_PER_KILOWATT
