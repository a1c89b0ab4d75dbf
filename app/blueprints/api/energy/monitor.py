"""
Energy Usage Operations
Current usage, on-demand overload checks and alert history.
"""

from flask import request

from app.blueprints.api._common import (
    get_energy_monitor_service as _monitor_service,
    get_notifications_service as _notifications_service,
    success as _success,
)
from app.utils.http import safe_route

from . import energy_api


@energy_api.get("/usage")
@safe_route("Failed to compute energy usage")
def get_usage():
    """Current usage compared with the plan limit. Never alerts."""
    snapshot = _monitor_service().get_usage_snapshot()
    return _success(snapshot.to_dict())


@energy_api.post("/check")
@safe_route("Failed to check for overload")
def check_overload():
    """Run the overload check now; an alert is sent if usage exceeds the limit."""
    service = _monitor_service()
    service.check_for_overload()
    return _success(service.get_usage_snapshot().to_dict())


@energy_api.get("/alerts")
@safe_route("Failed to load alerts")
def list_alerts():
    """Most recent alerts first. Optional ``?limit=N``."""
    limit = request.args.get("limit", type=int)
    alerts = _notifications_service().get_recent_alerts(limit)
    return _success({"alerts": alerts, "count": len(alerts)})
