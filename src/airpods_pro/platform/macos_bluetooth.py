"""IOBluetooth framework lookups (macOS only).

Requires pyobjc-framework-IOBluetooth. The listening mode, ANC support and
power toggle are private API; pyobjc resolves them from the Objective-C
runtime and the adapters in `airpods_pro.platform.bluetooth` call them.
"""

import logging
from typing import Optional

import IOBluetooth
import objc

from airpods_pro.models import Device

from .bluetooth import HostControllerRadio, PreferencesPowerToggle, devices_from_paired

logger = logging.getLogger(__name__)


class IOBluetoothDeviceDirectory:
    """Lists paired devices that report noise cancellation support."""

    def find_all(self) -> list[Device]:
        return devices_from_paired(IOBluetooth.IOBluetoothDevice.pairedDevices())


def default_radio() -> HostControllerRadio:
    """Wrap the default host controller, which is nil on hosts without Bluetooth."""
    return HostControllerRadio(IOBluetooth.IOBluetoothHostController.defaultController())


def resolve_power_toggle() -> Optional[PreferencesPowerToggle]:
    """
    Look up the private power toggle once.

    Returns:
        The toggle, or None when this macOS version does not provide it
    """
    try:
        preferences_class = objc.lookUpClass("IOBluetoothPreferences")
    except objc.nosuchclass_error:
        logger.info("IOBluetoothPreferences is not available, radio power cannot be toggled")
        return None

    preferences = preferences_class.alloc().init()
    if not preferences.respondsToSelector_("setPoweredOn:"):
        logger.info("IOBluetoothPreferences does not respond to setPoweredOn:")
        return None
    return PreferencesPowerToggle(preferences)
