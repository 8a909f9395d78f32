"""Binding a device as the default audio input/output."""

import logging
from typing import Optional

from airpods_pro.exceptions import AirPodsProError, AudioRouteError
from airpods_pro.models import AudioChannel, AudioEndpoint, AudioRole
from airpods_pro.protocols import AudioDirectory

from .waiter import PollingWaiter

logger = logging.getLogger(__name__)


class AudioRouteBinder:
    """
    Makes a freshly connected device the system default audio endpoint.

    A device that has just connected over Bluetooth takes a moment to
    register with the audio subsystem, so binding first waits for an
    endpoint with the device's name to appear.

    One accessory may register several endpoints (for example a separate
    input-only and output-only entry). Every output-only endpoint becomes the
    default output and every input-only endpoint the default input.
    Endpoints that are both or neither are left alone.

    Note:
        The requested channel does not currently restrict which endpoints
        are bound; it is only logged. Input-only endpoints are bound as
        input even when Output was requested, and vice versa.
    """

    def __init__(self, audio: AudioDirectory, waiter: PollingWaiter, timeout: Optional[float] = None):
        """
        Initialize the binder.

        Args:
            audio: Audio directory capability
            waiter: Waiter used for the registration wait
            timeout: Registration wait timeout (defaults to the waiter's)
        """
        self._audio = audio
        self._waiter = waiter
        self._timeout = timeout

    def find_endpoints(self, device_name: str) -> list[AudioEndpoint]:
        """Return all audio endpoints whose name equals ``device_name``."""
        return [e for e in self._audio.list_endpoints() if e.name == device_name]

    def bind_as_default(
        self, device_name: str, channel: AudioChannel
    ) -> list[tuple[AudioEndpoint, AudioRole]]:
        """
        Wait for ``device_name`` to register as an audio endpoint and bind it.

        Args:
            device_name: Name the endpoint must match exactly
            channel: Requested audio roles (see class note)

        Returns:
            The (endpoint, role) pairs that were set as defaults

        Raises:
            WaitTimeoutError: If no matching endpoint appears within the timeout
            WaitCancelledError: If the wait is cancelled
            AudioRouteError: If the audio subsystem rejects a default change
        """
        logger.info(f"Binding {device_name} as default audio device (requested: {channel.value})")
        self._waiter.wait_until(
            lambda: bool(self.find_endpoints(device_name)),
            timeout=self._timeout,
            description=f"{device_name} to register as an audio device",
        )

        bindings: list[tuple[AudioEndpoint, AudioRole]] = []
        for endpoint in self.find_endpoints(device_name):
            if endpoint.is_output_only:
                self._set_default(endpoint, AudioRole.OUTPUT)
                bindings.append((endpoint, AudioRole.OUTPUT))
            elif endpoint.is_input_only:
                self._set_default(endpoint, AudioRole.INPUT)
                bindings.append((endpoint, AudioRole.INPUT))
            else:
                logger.debug(f"Skipping endpoint {endpoint.name} (input={endpoint.is_input}, output={endpoint.is_output})")

        return bindings

    def _set_default(self, endpoint: AudioEndpoint, role: AudioRole) -> None:
        try:
            if role == AudioRole.OUTPUT:
                self._audio.set_default_output(endpoint)
            else:
                self._audio.set_default_input(endpoint)
        except AirPodsProError:
            raise
        except Exception as e:
            raise AudioRouteError(endpoint.name, role.value, original_error=str(e)) from e
        logger.info(f"Default audio {role.value} set to {endpoint.name}")
