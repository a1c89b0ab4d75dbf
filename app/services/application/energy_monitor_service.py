"""
Energy Monitor Service
======================

Aggregates instantaneous usage across devices, compares it with the active
energy plan, raises overload alerts and manages the plan's daily limit.

Usage is computed from nameplate wattage: the summed watts of every device
that is on are divided by 1000 and read as kWh, i.e. each device is assumed
to draw its rating for a full hour. No time integration happens here.

The service keeps no state between calls; every operation re-reads the stores.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import List, TYPE_CHECKING

from app.domain.energy import Device, EnergyPlan, UsageSnapshot, watts_to_kwh

if TYPE_CHECKING:
    from app.services.protocols import DeviceStore, EnergyPlanStore, Notifier

logger = logging.getLogger(__name__)

OVERLOAD_ALERT_PREFIX = "Overload detected"


class EnergyMonitorService:
    """Usage computation, overload detection and plan-limit updates."""

    def __init__(
        self,
        device_repo: "DeviceStore",
        plan_repo: "EnergyPlanStore",
        notifier: "Notifier",
    ) -> None:
        self._device_repo = device_repo
        self._plan_repo = plan_repo
        self._notifier = notifier

    # --- Usage -------------------------------------------------------------------
    def _active_devices(self) -> List[Device]:
        return [device for device in self._device_repo.get_all() if device.is_on]

    @staticmethod
    def _usage_kwh(active: List[Device]) -> float:
        return watts_to_kwh(sum(device.power_usage_watts for device in active))

    def calculate_current_usage_kwh(self) -> float:
        """Sum the wattage of devices that are on and convert it to kWh.

        Devices that are off contribute nothing regardless of their rating.
        Returns ``0.0`` when no device is on or the store is empty.
        """
        usage = self._usage_kwh(self._active_devices())
        logger.debug("Current usage %.3f kWh", usage)
        return usage

    def get_usage_snapshot(self) -> UsageSnapshot:
        """Current usage against the plan limit. Never sends an alert."""
        active = self._active_devices()
        plan = self._plan_repo.get_current_plan()
        return UsageSnapshot(
            usage_kwh=self._usage_kwh(active),
            daily_limit_kwh=plan.daily_limit_kwh,
            active_device_count=len(active),
        )

    # --- Overload ----------------------------------------------------------------
    def check_for_overload(self) -> None:
        """Send one alert if usage strictly exceeds the plan's daily limit.

        Usage equal to the limit is within the plan.
        """
        usage = self.calculate_current_usage_kwh()
        plan = self._plan_repo.get_current_plan()

        if usage > plan.daily_limit_kwh:
            message = (
                f"{OVERLOAD_ALERT_PREFIX}: usage {usage:.2f} kWh exceeds limit {plan.daily_limit_kwh:.2f} kWh"
            )
            logger.warning("%s", message)
            self._notifier.send_alert(message)

    # --- Plan --------------------------------------------------------------------
    def update_energy_limit(self, new_limit: float) -> None:
        """Replace the plan's daily limit, keeping every other plan field.

        The value is stored exactly as given. Zero and negative limits are
        accepted.
        """
        current = self._plan_repo.get_current_plan()
        updated: EnergyPlan = dataclasses.replace(current, daily_limit_kwh=new_limit)
        self._plan_repo.update_plan(updated)
        logger.info("Daily energy limit changed from %s to %s kWh", current.daily_limit_kwh, new_limit)
