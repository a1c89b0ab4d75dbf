"""
Energy Monitoring API Blueprint
===============================

Usage figures, overload checks, the daily plan limit and alert history.

All routes are registered under /api/energy prefix.
"""

from __future__ import annotations

from flask import Blueprint

energy_api = Blueprint("energy_api", __name__)

from . import monitor, plan

_ = (monitor, plan)

__all__ = ["energy_api"]
