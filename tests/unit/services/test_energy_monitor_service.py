"""
Tests for EnergyMonitorService.

Covers:
- usage aggregation over on/off devices
- overload detection and alert text
- plan limit updates
- usage snapshots
"""

from __future__ import annotations

import pytest

from app.domain.energy import EnergyPlan
from app.services.application.energy_monitor_service import EnergyMonitorService


class TestCalculateCurrentUsage:
    def test_sums_only_devices_that_are_on(self, energy_monitor_service, mock_device_store, make_devices):
        mock_device_store.get_all.return_value = make_devices((True, 1000), (True, 500), (False, 800))

        assert energy_monitor_service.calculate_current_usage_kwh() == 1.5

    @pytest.mark.parametrize(
        "power1, power2",
        [
            (1000, 500),
            (2000, 3000),
            (0, 0),
        ],
    )
    def test_all_devices_off_yields_zero(
        self, energy_monitor_service, mock_device_store, make_devices, power1, power2
    ):
        mock_device_store.get_all.return_value = make_devices((False, power1), (False, power2))

        assert energy_monitor_service.calculate_current_usage_kwh() == 0.0

    def test_empty_store_yields_zero(self, energy_monitor_service):
        assert energy_monitor_service.calculate_current_usage_kwh() == 0.0

    def test_has_no_side_effects(
        self, energy_monitor_service, mock_device_store, mock_plan_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((True, 5000))

        energy_monitor_service.calculate_current_usage_kwh()

        mock_device_store.update.assert_not_called()
        mock_plan_store.update_plan.assert_not_called()
        mock_notifier.send_alert.assert_not_called()


class TestCheckForOverload:
    def test_sends_alert_when_usage_exceeds_limit(
        self, energy_monitor_service, mock_device_store, mock_plan_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((True, 1500))
        mock_plan_store.get_current_plan.return_value = EnergyPlan(daily_limit_kwh=1.0)

        energy_monitor_service.check_for_overload()

        mock_notifier.send_alert.assert_called_once()

    def test_alert_message_names_the_overload(
        self, energy_monitor_service, mock_device_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((True, 1500))

        energy_monitor_service.check_for_overload()

        message = mock_notifier.send_alert.call_args.args[0]
        assert "Overload detected" in message
        assert "1.50" in message
        assert "1.00" in message

    def test_no_alert_within_limit(self, energy_monitor_service, mock_device_store, mock_notifier, make_devices):
        mock_device_store.get_all.return_value = make_devices((True, 500))

        energy_monitor_service.check_for_overload()

        mock_notifier.send_alert.assert_not_called()

    def test_usage_equal_to_limit_does_not_alert(
        self, energy_monitor_service, mock_device_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((True, 600), (True, 400))

        energy_monitor_service.check_for_overload()

        mock_notifier.send_alert.assert_not_called()

    def test_off_devices_do_not_trigger_alert(
        self, energy_monitor_service, mock_device_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((False, 9000), (True, 100))

        energy_monitor_service.check_for_overload()

        mock_notifier.send_alert.assert_not_called()

    def test_each_check_rereads_the_stores(
        self, energy_monitor_service, mock_device_store, mock_plan_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((True, 1500))
        energy_monitor_service.check_for_overload()

        mock_plan_store.get_current_plan.return_value = EnergyPlan(daily_limit_kwh=2.0)
        energy_monitor_service.check_for_overload()

        assert mock_notifier.send_alert.call_count == 1
        assert mock_plan_store.get_current_plan.call_count == 2

    def test_notifier_failure_propagates(
        self, energy_monitor_service, mock_device_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((True, 1500))
        mock_notifier.send_alert.side_effect = ConnectionError("gateway down")

        with pytest.raises(ConnectionError):
            energy_monitor_service.check_for_overload()


class TestUpdateEnergyLimit:
    def test_persists_plan_with_new_limit(self, energy_monitor_service, mock_plan_store):
        mock_plan_store.get_current_plan.return_value = EnergyPlan(daily_limit_kwh=5.0)

        energy_monitor_service.update_energy_limit(10.5)

        mock_plan_store.update_plan.assert_called_once()
        saved = mock_plan_store.update_plan.call_args.args[0]
        assert saved.daily_limit_kwh == 10.5

    def test_keeps_other_plan_fields(self, energy_monitor_service, mock_plan_store):
        current = EnergyPlan(daily_limit_kwh=5.0, plan_id=1, name="Winter")
        mock_plan_store.get_current_plan.return_value = current

        energy_monitor_service.update_energy_limit(3.25)

        saved = mock_plan_store.update_plan.call_args.args[0]
        assert saved == EnergyPlan(daily_limit_kwh=3.25, plan_id=1, name="Winter")
        assert current.daily_limit_kwh == 5.0

    @pytest.mark.parametrize("new_limit", [0.0, -2.5, 0.1 + 0.2])
    def test_stores_value_exactly_as_given(self, energy_monitor_service, mock_plan_store, new_limit):
        energy_monitor_service.update_energy_limit(new_limit)

        saved = mock_plan_store.update_plan.call_args.args[0]
        assert saved.daily_limit_kwh == new_limit


class TestUsageSnapshot:
    def test_reports_usage_limit_and_active_count(
        self, energy_monitor_service, mock_device_store, mock_notifier, make_devices
    ):
        mock_device_store.get_all.return_value = make_devices((True, 1000), (True, 500), (False, 800))

        snapshot = energy_monitor_service.get_usage_snapshot()

        assert snapshot.usage_kwh == 1.5
        assert snapshot.daily_limit_kwh == 1.0
        assert snapshot.active_device_count == 2
        assert snapshot.is_overloaded is True
        mock_notifier.send_alert.assert_not_called()

    def test_not_overloaded_at_limit(self, energy_monitor_service, mock_device_store, make_devices):
        mock_device_store.get_all.return_value = make_devices((True, 1000))

        assert energy_monitor_service.get_usage_snapshot().is_overloaded is False

    @pytest.mark.parametrize(
        "specs",
        [
            [],
            [(False, 800)],
            [(True, 0.1), (True, 0.2), (False, 3000)],
            [(True, 1234.5), (True, 765.5)],
        ],
    )
    def test_agrees_with_calculated_usage(self, energy_monitor_service, mock_device_store, make_devices, specs):
        mock_device_store.get_all.return_value = make_devices(*specs)

        assert energy_monitor_service.get_usage_snapshot().usage_kwh == energy_monitor_service.calculate_current_usage_kwh()


def test_end_to_end_with_sqlite_repositories(device_repo, energy_plan_repo, notifications_service, seed):
    """Real repositories: toggling a heater on pushes usage past the seeded 5 kWh plan."""
    from app.services.application.device_service import DeviceService

    heater = seed.device("Heater", 4000)
    seed.device("Oven", 2000, is_on=True)
    monitor = EnergyMonitorService(device_repo, energy_plan_repo, notifications_service)

    monitor.check_for_overload()
    assert notifications_service.get_recent_alerts() == []

    DeviceService(device_repo).toggle_device(heater.device_id, True)
    monitor.check_for_overload()

    alerts = notifications_service.get_recent_alerts()
    assert len(alerts) == 1
    assert "Overload detected" in alerts[0]["message"]

    monitor.update_energy_limit(6.0)
    assert energy_plan_repo.get_current_plan().daily_limit_kwh == 6.0
