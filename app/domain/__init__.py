"""
Domain Objects Package
======================
Devices, the active energy plan and derived usage values, plus the
exception hierarchy shared by every layer.
"""

from .energy import Device, EnergyPlan, UsageSnapshot, watts_to_kwh

__all__ = [
    "Device",
    "EnergyPlan",
    "UsageSnapshot",
    "watts_to_kwh",
]
