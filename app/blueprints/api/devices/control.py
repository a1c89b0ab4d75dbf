"""
Device Control Operations
Handles device listing, registration and ON/OFF toggling.
"""

import logging

from app.blueprints.api._common import (
    get_container,
    get_device_service as _device_service,
    parse_body,
    success as _success,
)
from app.enums import PowerState
from app.schemas import CreateDeviceRequest, ToggleDeviceRequest
from app.utils.http import safe_route

from . import devices_api

logger = logging.getLogger(__name__)


def _device_payload(device) -> dict:
    payload = device.to_dict()
    payload["state"] = str(PowerState.from_bool(device.is_on))
    return payload


# ======================== DEVICE LISTING ========================


@devices_api.get("")
@safe_route("Failed to list devices")
def list_devices():
    """List every registered device."""
    devices = get_container().device_repo.get_all()
    return _success({"devices": [_device_payload(d) for d in devices], "count": len(devices)})


@devices_api.get("/active")
@safe_route("Failed to list active devices")
def list_active_devices():
    """List devices that are currently ON."""
    devices = _device_service().get_active_devices()
    return _success({"devices": [_device_payload(d) for d in devices], "count": len(devices)})


@devices_api.post("")
@safe_route("Failed to register device")
def create_device():
    """
    Register a device.

    Request body:
        {
            "name": "Heater",
            "power_usage_watts": 1000,
            "is_on": false
        }
    """
    body = parse_body(CreateDeviceRequest)
    device = get_container().device_repo.create(
        name=body.name,
        power_usage_watts=body.power_usage_watts,
        is_on=body.is_on,
    )
    logger.info("Registered device %s (%s, %s W)", device.device_id, device.name, device.power_usage_watts)
    return _success(_device_payload(device), 201)


# ======================== DEVICE CONTROL ========================


@devices_api.post("/<int:device_id>/toggle")
@safe_route("Failed to toggle device")
def toggle_device(device_id: int):
    """
    Switch a device ON or OFF.

    Request body:
        {"is_on": true}
    """
    body = parse_body(ToggleDeviceRequest)
    is_on = _device_service().toggle_device(device_id, body.is_on)
    new_state = str(PowerState.from_bool(is_on))
    return _success(
        {
            "device_id": device_id,
            "is_on": is_on,
            "state": new_state,
            "message": f"Device {device_id} switched {new_state}",
        }
    )
