"""Composition of capabilities and core components.

Host capabilities are resolved exactly once per command here; the core
components only ever see the resulting objects.
"""

import logging
import sys
import threading
from typing import Optional

from airpods_pro.core import (
    ActivationOrchestrator,
    AudioRouteBinder,
    ConnectionManager,
    ListeningModeController,
    PollingWaiter,
    RadioPowerController,
)
from airpods_pro.exceptions import PlatformUnsupportedError
from airpods_pro.models import AppConfig
from airpods_pro.protocols import (
    AudioDirectory,
    DeviceConnector,
    DeviceDirectory,
    ListeningModeAccess,
    RadioPower,
    RadioPowerToggle,
)

from .bluetooth import HandleConnector, HandleListeningMode

logger = logging.getLogger(__name__)


def compose_orchestrator(
    *,
    directory: DeviceDirectory,
    radio: RadioPower,
    toggle: Optional[RadioPowerToggle],
    connector: DeviceConnector,
    modes: ListeningModeAccess,
    audio: AudioDirectory,
    config: AppConfig,
    cancel_event: Optional[threading.Event] = None,
) -> ActivationOrchestrator:
    """Wire capabilities into the core components using ``config`` timings."""
    waiter = PollingWaiter(
        poll_interval=config.poll_interval,
        timeout=config.wait_timeout,
        cancel_event=cancel_event,
    )
    return ActivationOrchestrator(
        directory=directory,
        radio=RadioPowerController(radio, toggle, waiter),
        connections=ConnectionManager(connector),
        modes=ListeningModeController(modes),
        audio=AudioRouteBinder(audio, waiter, timeout=config.audio_wait_timeout),
    )


def build_environment(
    config: AppConfig, cancel_event: Optional[threading.Event] = None
) -> ActivationOrchestrator:
    """
    Build an orchestrator backed by the real macOS Bluetooth and audio stacks.

    Raises:
        PlatformUnsupportedError: When not running on macOS
    """
    if sys.platform != "darwin":
        raise PlatformUnsupportedError(sys.platform)

    # Lazy imports: pyobjc and PortAudio only exist on macOS hosts
    from .macos_audio import CoreAudioDirectory
    from .macos_bluetooth import IOBluetoothDeviceDirectory, default_radio, resolve_power_toggle

    toggle = resolve_power_toggle()
    logger.debug(f"Radio power toggle available: {toggle is not None}")

    return compose_orchestrator(
        directory=IOBluetoothDeviceDirectory(),
        radio=default_radio(),
        toggle=toggle,
        connector=HandleConnector(),
        modes=HandleListeningMode(),
        audio=CoreAudioDirectory(config.switch_audio_source_path),
        config=config,
        cancel_event=cancel_event,
    )
