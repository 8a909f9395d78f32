"""Bluetooth radio power management."""

import logging
from typing import Optional

from airpods_pro.exceptions import CapabilityUnavailableError
from airpods_pro.protocols import RadioPower, RadioPowerToggle

from .waiter import PollingWaiter

logger = logging.getLogger(__name__)


class RadioPowerController:
    """
    Ensures the host Bluetooth radio is powered on.

    The power toggle is optional: it relies on a private system capability
    that may be missing, in which case it is passed as None and powering on
    fails fast with CapabilityUnavailableError instead of waiting out the
    timeout.
    """

    def __init__(
        self,
        radio: RadioPower,
        toggle: Optional[RadioPowerToggle],
        waiter: PollingWaiter,
    ):
        self._radio = radio
        self._toggle = toggle
        self._waiter = waiter

    @property
    def can_toggle(self) -> bool:
        """Check if the privileged power toggle is available."""
        return self._toggle is not None

    def is_powered_on(self) -> bool:
        return self._radio.is_powered_on()

    def ensure_powered_on(self) -> None:
        """
        Power the radio on if it is off and wait for it to report on.

        Does nothing when the radio is already on.

        Raises:
            CapabilityUnavailableError: If the radio is off and cannot be toggled,
                or the toggle call itself fails
            WaitTimeoutError: If the radio does not report on within the timeout
            WaitCancelledError: If the wait is cancelled
        """
        if self._radio.is_powered_on():
            logger.debug("Bluetooth radio already powered on")
            return

        if self._toggle is None:
            raise CapabilityUnavailableError(
                "Bluetooth power toggle",
                reason="IOBluetoothPreferences.setPoweredOn: could not be resolved",
            )

        logger.info("Bluetooth radio is off, requesting power on")
        try:
            self._toggle.set_powered_on(True)
        except Exception as e:
            raise CapabilityUnavailableError("Bluetooth power toggle", reason=str(e)) from e
        self._waiter.wait_until(self._radio.is_powered_on, description="Bluetooth radio to power on")
        logger.info("Bluetooth radio powered on")
