"""airpods-pro: control paired noise-cancelling Bluetooth headphones."""

__version__ = "0.2.0"

from .core import ActivationOrchestrator, PollingWaiter
from .models import ActivationRequest, AudioChannel, Device, ListeningMode

__all__ = [
    "ActivationOrchestrator",
    "ActivationRequest",
    "AudioChannel",
    "Device",
    "ListeningMode",
    "PollingWaiter",
]
