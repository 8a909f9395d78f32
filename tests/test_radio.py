"""Tests for RadioPowerController."""

import pytest

from airpods_pro.core import RadioPowerController
from airpods_pro.exceptions import CapabilityUnavailableError, WaitTimeoutError
from tests.fakes import FakeRadio, FakeToggle


@pytest.mark.unit
class TestEnsurePoweredOn:
    """Test powering the radio on."""

    def test_already_on_is_noop(self, waiter, sleep):
        radio = FakeRadio(powered_on=True)
        toggle = FakeToggle(radio)
        controller = RadioPowerController(radio, toggle, waiter)

        controller.ensure_powered_on()
        controller.ensure_powered_on()

        assert toggle.requests == []
        assert sleep.calls == []

    def test_idempotent_after_powering_on(self, waiter):
        radio = FakeRadio(powered_on=False)
        toggle = FakeToggle(radio)
        controller = RadioPowerController(radio, toggle, waiter)

        controller.ensure_powered_on()
        controller.ensure_powered_on()

        assert toggle.requests == [True]
        assert radio.powered_on

    def test_waits_for_power_state(self, waiter, sleep):
        radio = FakeRadio(powered_on=False, checks_until_on=2)
        toggle = FakeToggle(radio)
        controller = RadioPowerController(radio, toggle, waiter)

        controller.ensure_powered_on()

        assert toggle.requests == [True]
        assert len(sleep.calls) == 2

    def test_times_out_if_radio_never_reports_on(self, waiter):
        radio = FakeRadio(powered_on=False, checks_until_on=1000)
        controller = RadioPowerController(radio, FakeToggle(radio), waiter)

        with pytest.raises(WaitTimeoutError) as exc_info:
            controller.ensure_powered_on()

        assert exc_info.value.timeout == 5.0

    def test_missing_toggle_fails_without_waiting(self, waiter, sleep):
        radio = FakeRadio(powered_on=False)
        controller = RadioPowerController(radio, None, waiter)

        with pytest.raises(CapabilityUnavailableError):
            controller.ensure_powered_on()

        assert sleep.calls == []
        assert not controller.can_toggle

    def test_missing_toggle_is_fine_when_already_on(self, waiter):
        controller = RadioPowerController(FakeRadio(powered_on=True), None, waiter)

        controller.ensure_powered_on()

        assert controller.is_powered_on()

    def test_toggle_failure_becomes_capability_error(self, waiter, sleep):
        original = RuntimeError("setPoweredOn: raised")
        radio = FakeRadio(powered_on=False)
        controller = RadioPowerController(radio, FakeToggle(radio, error=original), waiter)

        with pytest.raises(CapabilityUnavailableError) as exc_info:
            controller.ensure_powered_on()

        assert exc_info.value.__cause__ is original
        assert "setPoweredOn: raised" in exc_info.value.technical_message
        assert sleep.calls == []
