from __future__ import annotations

from typing import List, Optional

from app.domain.energy import Device
from app.domain.exceptions import NotFoundError
from infrastructure.database.ops.devices import DeviceOperations


class DeviceRepository:
    """Facade over device persistence.

    Satisfies ``app.services.protocols.DeviceStore``. Every read builds fresh
    ``Device`` values, so callers own what they receive.
    """

    def __init__(self, backend: DeviceOperations) -> None:
        self._backend = backend

    # Store contract -----------------------------------------------------------
    def get(self, device_id: int) -> Optional[Device]:
        row = self._backend.get_device_row(device_id)
        return Device.from_row(row) if row else None

    def get_all(self) -> List[Device]:
        return [Device.from_row(row) for row in self._backend.get_device_rows()]

    def update(self, device: Device) -> None:
        updated = self._backend.update_device_row(
            device.device_id,
            name=device.name,
            is_on=device.is_on,
            power_usage_watts=device.power_usage_watts,
        )
        if not updated:
            raise NotFoundError(f"Device {device.device_id} not found", detail={"device_id": device.device_id})

    # Lifecycle ----------------------------------------------------------------
    def create(self, *, name: str, power_usage_watts: float, is_on: bool = False) -> Device:
        # Validate through the domain type before touching the database
        Device(device_id=0, name=name, is_on=is_on, power_usage_watts=power_usage_watts)
        device_id = self._backend.insert_device(name, power_usage_watts, is_on)
        return Device(device_id=device_id, name=name, is_on=is_on, power_usage_watts=power_usage_watts)
