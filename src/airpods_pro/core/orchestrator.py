"""
Activation workflow for a named device.

Stage Flow
==========

::

    Start ──► RadioOn ──► Connected ──► ModeSet ──► AudioBound ──► Done
      │          │            │            │             │
      └──────────┴────────────┴────────────┴─────────────┴──► Failed

Each stage only runs once the previous one succeeded. A failure stops the
workflow at that stage; side effects already applied (radio power, mode
change) are left in place.

Three use cases are built from the same steps:

- ``activate``: all stages
- ``set_mode_only``: lookup, optional radio power-on, connect, set mode
- ``list_devices``: discovery only
"""

import logging
from typing import Callable, Optional

from airpods_pro.exceptions import AirPodsProError, DeviceNotFoundError, ErrorContext
from airpods_pro.models import (
    ActivationRequest,
    ActivationResult,
    ActivationStage,
    Device,
    ListeningMode,
)
from airpods_pro.protocols import DeviceDirectory

from .audio_route import AudioRouteBinder
from .connection import ConnectionManager
from .listening_mode import ListeningModeController
from .radio import RadioPowerController

logger = logging.getLogger(__name__)


class ActivationOrchestrator:
    """
    Sequences radio power, connection, mode and audio binding for one device.

    The orchestrator owns exactly one request at a time and is strictly
    sequential. Failures propagate as AirPodsProError subclasses with their
    ``stage`` attribute set to the stage that could not be reached; the
    command layer decides what to print and which exit code to use.
    """

    def __init__(
        self,
        directory: DeviceDirectory,
        radio: RadioPowerController,
        connections: ConnectionManager,
        modes: ListeningModeController,
        audio: AudioRouteBinder,
    ):
        self._directory = directory
        self._radio = radio
        self._connections = connections
        self._modes = modes
        self._audio = audio
        self.stage = ActivationStage.START

    # ================================================================
    # DISCOVERY
    # ================================================================

    def list_devices(self) -> list[Device]:
        """Discover all eligible devices, in discovery order."""
        devices = self._directory.find_all()
        logger.debug(f"Discovered {len(devices)} device(s)")
        return devices

    def find_device(self, name: str) -> Device:
        """
        Look up a device by name.

        Names are not guaranteed unique; the first match in discovery order
        wins.

        Raises:
            DeviceNotFoundError: If no eligible device has that name
        """
        matches = [d for d in self.list_devices() if d.name == name]
        if not matches:
            raise DeviceNotFoundError(name)
        if len(matches) > 1:
            logger.warning(f"{len(matches)} devices named {name!r}, using the first one")
        return matches[0]

    # ================================================================
    # USE CASES
    # ================================================================

    def activate(self, request: ActivationRequest) -> ActivationResult:
        """
        Run the full activation workflow.

        Raises:
            DeviceNotFoundError: If the device does not exist (no side effects)
            CapabilityUnavailableError: If the radio is off and cannot be toggled
            ConnectionFailedError: If the device could not be connected
            ListeningModeAccessError: If the Bluetooth stack rejected the mode write
            WaitTimeoutError: If the radio or audio registration wait times out
            WaitCancelledError: If a wait was cancelled
            AudioRouteError: If setting a default endpoint failed
        """
        self.stage = ActivationStage.START
        logger.info(
            f"Activating {request.device_name!r}: mode={request.mode.value}, audio={request.channel.value}"
        )
        device = self.find_device(request.device_name)

        self._advance(ActivationStage.RADIO_ON, "power on Bluetooth", self._radio.ensure_powered_on)
        self._advance(
            ActivationStage.CONNECTED,
            f"connect {device.name}",
            lambda: self._connections.ensure_connected(device),
        )
        self._advance(
            ActivationStage.MODE_SET,
            f"set listening mode of {device.name}",
            lambda: self._modes.set_mode(device, request.mode),
        )
        bindings = self._advance(
            ActivationStage.AUDIO_BOUND,
            f"bind {device.name} as default audio device",
            lambda: self._audio.bind_as_default(device.name, request.channel),
        )

        self.stage = ActivationStage.DONE
        logger.info(f"Activation of {device.name!r} complete")
        return ActivationResult(device=device, stage=self.stage, bindings=bindings or [])

    def set_mode_only(self, name: str, mode: ListeningMode, power_on: bool = True) -> Device:
        """
        Set the listening mode of a named device without touching audio routing.

        Args:
            name: Device name
            mode: Listening mode to set
            power_on: Power the radio on first if it is off

        Returns:
            The device whose mode was set

        Raises:
            DeviceNotFoundError: If the device does not exist (no side effects)
            CapabilityUnavailableError: If power_on is set and the radio cannot be toggled
            ConnectionFailedError: If the device could not be connected
            ListeningModeAccessError: If the Bluetooth stack rejected the mode write
            WaitTimeoutError: If the radio power-on wait times out
        """
        self.stage = ActivationStage.START
        device = self.find_device(name)

        if power_on:
            self._advance(ActivationStage.RADIO_ON, "power on Bluetooth", self._radio.ensure_powered_on)
        self._advance(
            ActivationStage.CONNECTED,
            f"connect {device.name}",
            lambda: self._connections.ensure_connected(device),
        )
        self._advance(
            ActivationStage.MODE_SET,
            f"set listening mode of {device.name}",
            lambda: self._modes.set_mode(device, mode),
        )
        return device

    # ================================================================
    # STAGE TRACKING
    # ================================================================

    def _advance(self, stage: ActivationStage, operation: str, step: Callable[[], Optional[object]]):
        """Run one step and move to ``stage`` if it succeeds."""
        try:
            with ErrorContext(operation, logger_instance=logger):
                result = step()
        except Exception as e:
            if isinstance(e, AirPodsProError):
                e.stage = stage.value
            failed_after = self.stage
            self.stage = ActivationStage.FAILED
            logger.error(f"Activation failed after {failed_after.value}, could not reach {stage.value}")
            raise

        self.stage = stage
        logger.debug(f"Stage reached: {stage.value}")
        return result
