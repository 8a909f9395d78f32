"""Pytest fixtures for tests."""

import importlib
from pathlib import Path
from tempfile import TemporaryDirectory
from types import SimpleNamespace

import pytest

from airpods_pro.core import PollingWaiter
from airpods_pro.models import AppConfig, AudioEndpoint, ConnectionState, ListeningMode
from airpods_pro.platform import compose_orchestrator
from tests.fakes import (
    FakeAudioDirectory,
    FakeConnector,
    FakeDeviceDirectory,
    FakeModeAccess,
    FakeRadio,
    FakeToggle,
    RecordingSleep,
    make_device,
)


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def isolated_home(temp_dir, monkeypatch):
    """Keep logs and config lookups out of the real home directory."""
    monkeypatch.setattr(importlib.import_module("airpods_pro.cli.main"), "DEFAULT_LOG_DIR", temp_dir / "logs")
    monkeypatch.setattr(
        importlib.import_module("airpods_pro.models.config"), "DEFAULT_CONFIG_PATH", temp_dir / "config.json"
    )


@pytest.fixture
def sleep():
    return RecordingSleep()


@pytest.fixture
def waiter(sleep):
    """Waiter with 1s interval and 5s timeout that never really sleeps."""
    return PollingWaiter(poll_interval=1.0, timeout=5.0, sleep=sleep)


@pytest.fixture
def eli_airpods():
    return make_device("Eli's AirPods Pro", ConnectionState.CONNECTED, ListeningMode.OFF)


@pytest.fixture
def bob_banana():
    return make_device("Bob's Bluetooth Banana", ConnectionState.DISCONNECTED, ListeningMode.NOISE_CANCELLATION)


@pytest.fixture
def fast_config():
    """Config whose waits finish almost immediately with real sleeps."""
    return AppConfig(poll_interval=0.01, wait_timeout=0.05, audio_wait_timeout=0.05)


@pytest.fixture
def fake_env(eli_airpods, bob_banana, fast_config):
    """A full set of fake capabilities with two devices and Eli's audio endpoints."""
    radio = FakeRadio(powered_on=True)
    env = SimpleNamespace(
        directory=FakeDeviceDirectory([eli_airpods, bob_banana]),
        radio=radio,
        toggle=FakeToggle(radio),
        connector=FakeConnector(),
        modes=FakeModeAccess(),
        audio=FakeAudioDirectory([
            AudioEndpoint(name="Eli's AirPods Pro", is_output=True),
            AudioEndpoint(name="Eli's AirPods Pro", is_input=True),
            AudioEndpoint(name="MacBook Pro Speakers", is_output=True),
        ]),
        config=fast_config,
    )

    def build(config=None, cancel_event=None):
        return compose_orchestrator(
            directory=env.directory,
            radio=env.radio,
            toggle=env.toggle,
            connector=env.connector,
            modes=env.modes,
            audio=env.audio,
            config=config or env.config,
            cancel_event=cancel_event,
        )

    env.build = build
    return env
