"""Device-related exceptions.

This module defines exceptions for Bluetooth accessory errors:
- DeviceError: Base class for device errors
- DeviceNotFoundError: No eligible device has the requested name
- ConnectionFailedError: Opening a connection to the device failed
- UnknownListeningModeError: The device reported a mode code we cannot decode
- ListeningModeAccessError: The Bluetooth stack rejected a listening mode access
- CapabilityUnavailableError: A host capability (e.g. radio power toggle) is missing
- AudioRouteError: Setting a default audio endpoint failed
"""

from typing import Optional

from .base import AirPodsProError


class DeviceError(AirPodsProError):
    """Device lookup or operation failed."""

    def __init__(self, user_message: str, device_name: Optional[str] = None, **kwargs):
        """
        Initialize device error.

        Args:
            user_message: User-friendly error message
            device_name: The name of the device involved (if applicable)
        """
        super().__init__(user_message, **kwargs)
        self.device_name = device_name


class DeviceNotFoundError(DeviceError):
    """No paired noise-cancelling device carries the requested name."""

    def __init__(self, device_name: str):
        user_msg = f"There are no AirPods Pro devices named {device_name} available"
        recovery = "Run 'airpods-pro list' to see the names of paired devices."

        super().__init__(
            user_message=user_msg,
            device_name=device_name,
            recoverable=True,
            recovery_hint=recovery,
        )


class ConnectionFailedError(DeviceError):
    """Opening a connection to the device failed."""

    def __init__(self, device_name: str, original_error: Optional[str] = None):
        """
        Initialize connection-failed error.

        Args:
            device_name: The device that could not be connected
            original_error: The error reported by the Bluetooth stack
        """
        user_msg = f"Could not connect to {device_name}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        recovery = (
            "Make sure the device is out of its case and within range, "
            "then try again."
        )

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            device_name=device_name,
            recoverable=True,
            recovery_hint=recovery,
        )


class UnknownListeningModeError(DeviceError):
    """The device reported a listening mode code outside the known set."""

    def __init__(self, code: int, device_name: Optional[str] = None):
        user_msg = f"Unknown listening mode code: {code}"
        if device_name:
            user_msg = f"{device_name} reported an unknown listening mode code: {code}"

        super().__init__(user_message=user_msg, device_name=device_name)
        self.code = code


class ListeningModeAccessError(DeviceError):
    """Writing or reading the listening mode through the Bluetooth stack failed."""

    def __init__(self, device_name: str, original_error: Optional[str] = None):
        user_msg = f"Could not access the listening mode of {device_name}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            device_name=device_name,
            recoverable=True,
            recovery_hint="Put the device in your ears and try again.",
        )


class CapabilityUnavailableError(AirPodsProError):
    """A host capability required by the operation is not available."""

    def __init__(self, capability: str, reason: Optional[str] = None):
        """
        Initialize capability-unavailable error.

        Args:
            capability: Human-readable capability name (e.g. "Bluetooth power toggle")
            reason: Why it is unavailable
        """
        user_msg = f"{capability} is not available on this host."
        tech_msg = user_msg
        if reason:
            tech_msg += f" Reason: {reason}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recovery_hint="Turn Bluetooth on manually and run the command again.",
        )
        self.capability = capability


class PlatformUnsupportedError(CapabilityUnavailableError):
    """The Bluetooth and audio backends only exist on macOS."""

    def __init__(self, platform_name: str):
        super().__init__("Bluetooth device control", reason=f"unsupported platform {platform_name}")
        self.recovery_hint = "airpods-pro only runs on macOS."


class AudioRouteError(AirPodsProError):
    """Setting a default audio endpoint failed."""

    def __init__(self, endpoint_name: str, role: str, original_error: Optional[str] = None):
        user_msg = f"Could not set {endpoint_name} as the default audio {role}."
        tech_msg = user_msg
        if original_error:
            tech_msg += f"\nOriginal error: {original_error}"

        super().__init__(
            user_message=user_msg,
            technical_message=tech_msg,
            recovery_hint="Check that SwitchAudioSource is installed (brew install switchaudio-osx).",
        )
        self.endpoint_name = endpoint_name
        self.role = role
