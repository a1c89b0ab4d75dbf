"""
Device Control API Blueprint
============================

Listing, registration and on/off control of household devices.

All routes are registered under /api/devices prefix.
"""

from __future__ import annotations

from flask import Blueprint

devices_api = Blueprint("devices_api", __name__)

# Import route module to register its endpoints (must be after blueprint creation)
from . import control

_ = (control,)

__all__ = ["devices_api"]
