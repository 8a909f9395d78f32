"""Capability protocols consumed by the core components.

The core never talks to IOBluetooth or CoreAudio directly. It is handed
objects implementing these protocols: the macOS backends in
`airpods_pro.platform` in production, in-memory fakes in tests.
"""

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from airpods_pro.models import AudioEndpoint, Device


@runtime_checkable
class DeviceDirectory(Protocol):
    """Lists paired devices that support noise cancellation."""

    def find_all(self) -> list["Device"]:
        """
        Discover eligible devices.

        Returns:
            Devices in discovery order (freshly queried on every call)
        """
        ...


@runtime_checkable
class RadioPower(Protocol):
    """Read-only view of the host Bluetooth radio power state."""

    def is_powered_on(self) -> bool:
        ...


@runtime_checkable
class RadioPowerToggle(Protocol):
    """
    Privileged capability that changes the radio power state.

    Not every host exposes one; callers receive ``None`` instead of an
    implementation when it is unavailable.
    """

    def set_powered_on(self, powered_on: bool) -> None:
        ...


@runtime_checkable
class DeviceConnector(Protocol):
    """Opens a Bluetooth connection to a device."""

    def open_connection(self, handle: Any) -> None:
        """
        Connect to the device behind ``handle``.

        Blocks until the connection is open.

        Raises:
            Exception: Any backend error if the connection could not be opened
        """
        ...


@runtime_checkable
class ListeningModeAccess(Protocol):
    """Reads and writes the numeric listening mode code of a device."""

    def get_mode_code(self, handle: Any) -> int:
        ...

    def set_mode_code(self, handle: Any, code: int) -> None:
        ...


@runtime_checkable
class AudioDirectory(Protocol):
    """Lists audio endpoints and changes the default input/output."""

    def list_endpoints(self) -> list["AudioEndpoint"]:
        """Return the endpoints currently registered with the audio subsystem."""
        ...

    def set_default_input(self, endpoint: "AudioEndpoint") -> None:
        ...

    def set_default_output(self, endpoint: "AudioEndpoint") -> None:
        ...
