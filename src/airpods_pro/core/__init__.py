"""Core activation components."""

from .audio_route import AudioRouteBinder
from .connection import ConnectionManager
from .listening_mode import ListeningModeController
from .orchestrator import ActivationOrchestrator
from .radio import RadioPowerController
from .waiter import DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT, PollingWaiter

__all__ = [
    "ActivationOrchestrator",
    "AudioRouteBinder",
    "ConnectionManager",
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_TIMEOUT",
    "ListeningModeController",
    "PollingWaiter",
    "RadioPowerController",
]
