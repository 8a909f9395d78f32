"""Enumerations for airpods-pro."""

from enum import Enum

from airpods_pro.exceptions import UnknownListeningModeError


class ConnectionState(str, Enum):
    """Bluetooth connection state of a device."""

    CONNECTED = "Connected"
    DISCONNECTED = "Disconnected"


class ListeningMode(str, Enum):
    """
    Acoustic listening mode of a noise-cancelling device.

    IOBluetooth stores the mode as a small integer, so each mode also has a
    fixed numeric code.
    """

    OFF = "Off"
    NOISE_CANCELLATION = "NoiseCancellation"
    TRANSPARENCY = "Transparency"

    @property
    def code(self) -> int:
        """Numeric code written to the device."""
        return _MODE_CODES[self]

    @classmethod
    def from_code(cls, code: int) -> "ListeningMode":
        """
        Decode a numeric mode code.

        Raises:
            UnknownListeningModeError: If the code is not 1, 2 or 3
        """
        for mode, mode_code in _MODE_CODES.items():
            if mode_code == code:
                return mode
        raise UnknownListeningModeError(code)


_MODE_CODES = {
    ListeningMode.OFF: 1,
    ListeningMode.NOISE_CANCELLATION: 2,
    ListeningMode.TRANSPARENCY: 3,
}


class AudioChannel(str, Enum):
    """Which audio roles to bind when activating a device."""

    INPUT = "Input"
    OUTPUT = "Output"
    BOTH = "Both"


class AudioRole(str, Enum):
    """Role of a default audio endpoint."""

    INPUT = "input"
    OUTPUT = "output"


class OutputFormat(str, Enum):
    """Output format of the device list."""

    TEXT = "Text"
    JSON = "Json"


class ActivationStage(str, Enum):
    """Stages of the activation workflow, in order."""

    START = "Start"
    RADIO_ON = "RadioOn"
    CONNECTED = "Connected"
    MODE_SET = "ModeSet"
    AUDIO_BOUND = "AudioBound"
    DONE = "Done"
    FAILED = "Failed"
