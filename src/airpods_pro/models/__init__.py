"""Data models for airpods-pro."""

from .enums import (
    ActivationStage,
    AudioChannel,
    AudioRole,
    ConnectionState,
    ListeningMode,
    OutputFormat,
)
from .device import ActivationRequest, ActivationResult, AudioEndpoint, Device
from .config import AppConfig

__all__ = [
    # Models
    "ActivationRequest",
    "ActivationResult",
    "AppConfig",
    "AudioEndpoint",
    "Device",
    # Enums
    "ActivationStage",
    "AudioChannel",
    "AudioRole",
    "ConnectionState",
    "ListeningMode",
    "OutputFormat",
]
