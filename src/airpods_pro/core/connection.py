"""Device connection management."""

import logging

from airpods_pro.exceptions import ConnectionFailedError
from airpods_pro.models import Device
from airpods_pro.protocols import DeviceConnector

logger = logging.getLogger(__name__)


class ConnectionManager:
    """Opens a connection to a device when it is not already connected."""

    def __init__(self, connector: DeviceConnector):
        self._connector = connector

    def ensure_connected(self, device: Device) -> None:
        """
        Connect ``device`` unless it was connected at discovery time.

        The underlying open call blocks until the connection is up or fails,
        so no polling is layered on top.

        Raises:
            ConnectionFailedError: If the backend could not open the connection
        """
        if device.is_connected:
            logger.debug(f"{device.name} already connected")
            return

        logger.info(f"Connecting to {device.name}")
        try:
            self._connector.open_connection(device.handle)
        except Exception as e:
            raise ConnectionFailedError(device.name, original_error=str(e)) from e
        logger.info(f"Connected to {device.name}")
