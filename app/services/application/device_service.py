"""
Device Control Service
======================

Validates and applies on/off transitions for individual devices.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, List

from app.domain.energy import Device
from app.domain.exceptions import InvalidArgumentError

if TYPE_CHECKING:
    from app.services.protocols import DeviceStore

logger = logging.getLogger(__name__)


class DeviceService:
    """Owns toggle validation and state mutation for single devices."""

    def __init__(self, repository: "DeviceStore") -> None:
        self._repo = repository

    def toggle_device(self, device_id: int, desired_on: bool) -> bool:
        """
        Switch a device to the requested state and persist it.

        Args:
            device_id: Identifier of an existing device.
            desired_on: Target power state.

        Returns:
            The device's ``is_on`` value after the update.

        Raises:
            InvalidArgumentError: If no device has this id. Nothing is persisted.
        """
        device = self._repo.get(device_id)
        if device is None:
            raise InvalidArgumentError(
                f"Device {device_id} not found",
                detail={"device_id": device_id},
            )

        device.is_on = desired_on
        self._repo.update(device)
        logger.info("Device %s (%s) switched %s", device.device_id, device.name, "ON" if device.is_on else "OFF")
        return device.is_on

    def get_active_devices(self) -> List[Device]:
        """Return devices that are currently on, in store order."""
        return [device for device in self._repo.get_all() if device.is_on]
