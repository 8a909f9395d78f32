"""Tests for the host platform backends that run without macOS."""

import subprocess
from unittest.mock import patch

import pytest

from airpods_pro.exceptions import PlatformUnsupportedError
from airpods_pro.models import AudioEndpoint
from airpods_pro.platform import build_environment

try:
    from airpods_pro.platform import macos_audio
except OSError as e:
    # sounddevice raises OSError when the PortAudio library is missing
    pytest.skip(f"PortAudio not available: {e}", allow_module_level=True)


@pytest.mark.unit
def test_build_environment_requires_macos(monkeypatch, fast_config):
    monkeypatch.setattr("airpods_pro.platform.environment.sys.platform", "linux")

    with pytest.raises(PlatformUnsupportedError) as exc_info:
        build_environment(fast_config)

    assert "linux" in exc_info.value.technical_message


@pytest.mark.unit
class TestCoreAudioDirectory:
    """Test endpoint listing and default switching with sounddevice mocked."""

    @pytest.fixture
    def mock_sd(self):
        with patch.object(macos_audio, "sd") as mock:
            mock.query_devices.return_value = [
                {"index": 0, "name": "MacBook Pro Microphone", "max_input_channels": 1, "max_output_channels": 0},
                {"index": 1, "name": "MacBook Pro Speakers", "max_input_channels": 0, "max_output_channels": 2},
                {"index": 2, "name": "Eli's AirPods Pro", "max_input_channels": 1, "max_output_channels": 2},
            ]
            yield mock

    def test_list_endpoints(self, mock_sd):
        endpoints = macos_audio.CoreAudioDirectory().list_endpoints()

        assert [e.name for e in endpoints] == [
            "MacBook Pro Microphone",
            "MacBook Pro Speakers",
            "Eli's AirPods Pro",
        ]
        assert endpoints[0].is_input_only
        assert endpoints[1].is_output_only
        assert endpoints[2].is_input and endpoints[2].is_output

    def test_list_refreshes_portaudio(self, mock_sd):
        macos_audio.CoreAudioDirectory().list_endpoints()

        mock_sd._terminate.assert_called_once()
        mock_sd._initialize.assert_called_once()

    def test_set_default_output_runs_switch_audio_source(self):
        directory = macos_audio.CoreAudioDirectory("/opt/homebrew/bin/SwitchAudioSource")

        with patch.object(macos_audio.subprocess, "run") as mock_run:
            directory.set_default_output(AudioEndpoint(name="Eli's AirPods Pro", is_output=True))

        command = mock_run.call_args.args[0]
        assert command == ["/opt/homebrew/bin/SwitchAudioSource", "-t", "output", "-s", "Eli's AirPods Pro"]
        assert mock_run.call_args.kwargs["check"] is True

    def test_set_default_input_uses_input_type(self):
        with patch.object(macos_audio.subprocess, "run") as mock_run:
            macos_audio.CoreAudioDirectory().set_default_input(AudioEndpoint(name="Mic", is_input=True))

        assert mock_run.call_args.args[0][:3] == ["SwitchAudioSource", "-t", "input"]

    def test_switch_failure_propagates(self):
        error = subprocess.CalledProcessError(1, ["SwitchAudioSource"])

        with patch.object(macos_audio.subprocess, "run", side_effect=error):
            with pytest.raises(subprocess.CalledProcessError):
                macos_audio.CoreAudioDirectory().set_default_output(AudioEndpoint(name="X", is_output=True))
