"""Core Audio endpoint listing and default device switching.

Endpoints are enumerated through sounddevice (PortAudio). PortAudio snapshots
the device list when it is initialised, so it is re-initialised before every
enumeration to pick up a headset that has only just connected.

PortAudio cannot change the system default devices, so that is delegated to
the SwitchAudioSource command line tool (brew install switchaudio-osx).
"""

import logging
import subprocess

import sounddevice as sd

from airpods_pro.models import AudioEndpoint, AudioRole

logger = logging.getLogger(__name__)

SWITCH_TIMEOUT = 5


class CoreAudioDirectory:
    """Audio directory backed by sounddevice and SwitchAudioSource."""

    def __init__(self, switch_audio_source: str = "SwitchAudioSource"):
        """
        Initialize the audio directory.

        Args:
            switch_audio_source: Path or name of the SwitchAudioSource executable
        """
        self._switch_audio_source = switch_audio_source

    @staticmethod
    def _refresh() -> None:
        sd._terminate()
        sd._initialize()

    def list_endpoints(self) -> list[AudioEndpoint]:
        self._refresh()
        endpoints = []
        for info in sd.query_devices():
            endpoints.append(AudioEndpoint(
                name=info['name'],
                is_input=info['max_input_channels'] > 0,
                is_output=info['max_output_channels'] > 0,
            ))
        return endpoints

    def set_default_input(self, endpoint: AudioEndpoint) -> None:
        self._switch(endpoint, AudioRole.INPUT)

    def set_default_output(self, endpoint: AudioEndpoint) -> None:
        self._switch(endpoint, AudioRole.OUTPUT)

    def _switch(self, endpoint: AudioEndpoint, role: AudioRole) -> None:
        """
        Run SwitchAudioSource for one role.

        Raises:
            FileNotFoundError: If the executable is not installed
            subprocess.CalledProcessError: If it exits non-zero
            subprocess.TimeoutExpired: If it hangs
        """
        command = [self._switch_audio_source, "-t", role.value, "-s", endpoint.name]
        logger.debug(f"Running {' '.join(command)}")
        subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=SWITCH_TIMEOUT,
            check=True,
        )
