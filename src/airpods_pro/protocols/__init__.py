"""Protocol definitions for the host capabilities the core depends on."""

from .capabilities import (
    AudioDirectory,
    DeviceConnector,
    DeviceDirectory,
    ListeningModeAccess,
    RadioPower,
    RadioPowerToggle,
)

__all__ = [
    "AudioDirectory",
    "DeviceConnector",
    "DeviceDirectory",
    "ListeningModeAccess",
    "RadioPower",
    "RadioPowerToggle",
]
