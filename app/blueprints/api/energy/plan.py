"""
Energy Plan Operations
Reading and changing the daily kWh limit.
"""

from app.blueprints.api._common import (
    get_container,
    get_energy_monitor_service as _monitor_service,
    parse_body,
    success as _success,
)
from app.schemas import UpdateEnergyLimitRequest
from app.utils.http import safe_route

from . import energy_api


@energy_api.get("/plan")
@safe_route("Failed to load energy plan")
def get_plan():
    plan = get_container().energy_plan_repo.get_current_plan()
    return _success(plan.to_dict())


@energy_api.put("/plan")
@safe_route("Failed to update energy plan")
def update_plan():
    """
    Change the daily limit.

    Request body:
        {"daily_limit_kwh": 10.5}
    """
    body = parse_body(UpdateEnergyLimitRequest)
    _monitor_service().update_energy_limit(body.daily_limit_kwh)
    plan = get_container().energy_plan_repo.get_current_plan()
    return _success(plan.to_dict(), message=f"Daily limit set to {body.daily_limit_kwh} kWh")
