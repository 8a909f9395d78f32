"""Listening mode reads and writes."""

import logging

from airpods_pro.exceptions import ListeningModeAccessError, UnknownListeningModeError
from airpods_pro.models import Device, ListeningMode
from airpods_pro.protocols import ListeningModeAccess

logger = logging.getLogger(__name__)


class ListeningModeController:
    """
    Reads and writes a device's listening mode code.

    Writes are fire-and-forget: the device sends no acknowledgement, so
    callers that care must read the mode back themselves.
    """

    def __init__(self, access: ListeningModeAccess):
        self._access = access

    def get_mode(self, device: Device) -> ListeningMode:
        """
        Read the current mode from the device.

        Raises:
            UnknownListeningModeError: If the device reports an unknown code
            ListeningModeAccessError: If the Bluetooth stack rejects the read
        """
        try:
            code = self._access.get_mode_code(device.handle)
        except Exception as e:
            raise ListeningModeAccessError(device.name, original_error=str(e)) from e

        try:
            return ListeningMode.from_code(code)
        except UnknownListeningModeError as e:
            raise UnknownListeningModeError(code, device_name=device.name) from e

    def set_mode(self, device: Device, mode: ListeningMode) -> None:
        """
        Write ``mode`` to the device.

        Raises:
            ListeningModeAccessError: If the Bluetooth stack rejects the write
        """
        logger.info(f"Setting {device.name} listening mode to {mode.value} (code {mode.code})")
        try:
            self._access.set_mode_code(device.handle, mode.code)
        except Exception as e:
            raise ListeningModeAccessError(device.name, original_error=str(e)) from e
