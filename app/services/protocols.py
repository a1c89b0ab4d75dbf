"""
Service protocols (structural typing interfaces).

Protocols let consumer services declare the *minimal* surface they depend on
without importing the concrete class, breaking circular imports and making
tests trivially mockable.

Usage
-----
In a consumer service::

    from __future__ import annotations
    from typing import TYPE_CHECKING
    if TYPE_CHECKING:
        from app.services.protocols import DeviceStore

    class DeviceService:
        def __init__(self, repository: "DeviceStore"): ...

At runtime the concrete ``DeviceRepository`` already satisfies the protocol
via structural subtyping; no explicit inheritance needed.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from app.domain.energy import Device, EnergyPlan


@runtime_checkable
class DeviceStore(Protocol):
    """Persistence contract for device records.

    ``get`` must return a value the caller owns: mutating it has no effect
    until it is handed back through ``update``.
    """

    def get(self, device_id: int) -> Optional[Device]:
        """Return a single device, or ``None`` if not found."""
        ...

    def get_all(self) -> List[Device]:
        """Return every device in store order."""
        ...

    def update(self, device: Device) -> None:
        """Persist the device's current field values."""
        ...


@runtime_checkable
class EnergyPlanStore(Protocol):
    """Persistence contract for the single active energy plan."""

    def get_current_plan(self) -> EnergyPlan:
        """Return the current plan. Exactly one plan always exists."""
        ...

    def update_plan(self, plan: EnergyPlan) -> None:
        """Replace the current plan wholesale."""
        ...


@runtime_checkable
class Notifier(Protocol):
    """Delivers a text alert to the household."""

    def send_alert(self, message: str) -> None:
        ...
