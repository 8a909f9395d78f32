"""Adapters over IOBluetooth objects.

Everything here works on the objects pyobjc hands back (IOBluetoothDevice,
IOBluetoothHostController, IOBluetoothPreferences) purely by calling their
selectors, so it imports without pyobjc. `macos_bluetooth` does the
framework lookups and wraps the results in these adapters.
"""

import logging
from typing import Any, Iterable, Optional

from airpods_pro.exceptions import CapabilityUnavailableError, UnknownListeningModeError
from airpods_pro.models import ConnectionState, Device, ListeningMode

logger = logging.getLogger(__name__)

# kBluetoothHCIPowerStateON from IOBluetooth/Bluetooth.h
BLUETOOTH_HCI_POWER_STATE_ON = 1
# kIOReturnSuccess
IO_RETURN_SUCCESS = 0


def supports_anc(bt_device: Any) -> bool:
    return bool(bt_device.respondsToSelector_("isANCSupported") and bt_device.isANCSupported())


def device_from_handle(bt_device: Any) -> Device:
    """
    Snapshot an IOBluetoothDevice as a Device.

    Raises:
        UnknownListeningModeError: If the device reports a mode code outside 1-3
    """
    name = bt_device.name() or ""
    state = ConnectionState.CONNECTED if bt_device.isConnected() else ConnectionState.DISCONNECTED
    code = int(bt_device.listeningMode())
    try:
        mode = ListeningMode.from_code(code)
    except UnknownListeningModeError as e:
        raise UnknownListeningModeError(code, device_name=name) from e
    return Device(name=name, state=state, mode=mode, handle=bt_device)


def devices_from_paired(paired: Optional[Iterable[Any]]) -> list[Device]:
    """
    Convert paired devices into Devices, keeping only noise-cancelling ones.

    A device whose listening mode cannot be decoded is logged and left out,
    so one odd accessory does not hide the others.
    """
    if paired is None:
        logger.info("No paired Bluetooth devices found")
        return []

    devices = []
    for bt_device in paired:
        if not supports_anc(bt_device):
            continue
        try:
            devices.append(device_from_handle(bt_device))
        except UnknownListeningModeError as e:
            logger.warning(f"Skipping device: {e.user_message}")

    logger.debug(f"Found {len(devices)} noise-cancelling device(s)")
    return devices


class HostControllerRadio:
    """Power state of a Bluetooth host controller."""

    def __init__(self, controller: Any):
        self._controller = controller

    def is_powered_on(self) -> bool:
        """
        Check the controller power state.

        Raises:
            CapabilityUnavailableError: If the host has no Bluetooth controller
        """
        if self._controller is None:
            raise CapabilityUnavailableError(
                "Bluetooth host controller", reason="IOBluetoothHostController.defaultController() is nil"
            )
        return self._controller.powerState() == BLUETOOTH_HCI_POWER_STATE_ON


class PreferencesPowerToggle:
    """Turns the radio on and off through the private IOBluetoothPreferences class."""

    def __init__(self, preferences: Any):
        self._preferences = preferences

    def set_powered_on(self, powered_on: bool) -> None:
        logger.debug(f"IOBluetoothPreferences.setPoweredOn:({powered_on})")
        self._preferences.setPoweredOn_(1 if powered_on else 0)


class HandleConnector:
    """Opens baseband connections; openConnection blocks until done."""

    def open_connection(self, handle: Any) -> None:
        result = handle.openConnection()
        if result != IO_RETURN_SUCCESS:
            raise ConnectionError(f"openConnection returned {result:#x}")


class HandleListeningMode:
    """Reads and writes the private listeningMode property."""

    def get_mode_code(self, handle: Any) -> int:
        return int(handle.listeningMode())

    def set_mode_code(self, handle: Any, code: int) -> None:
        handle.setListeningMode_(code)
