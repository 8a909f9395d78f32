"""Tests for ConnectionManager and ListeningModeController."""

import pytest

from airpods_pro.core import ConnectionManager, ListeningModeController
from airpods_pro.exceptions import (
    ConnectionFailedError,
    ListeningModeAccessError,
    UnknownListeningModeError,
)
from airpods_pro.models import ListeningMode
from tests.fakes import FakeConnector, FakeModeAccess


@pytest.mark.unit
class TestConnectionManager:
    """Test connecting devices."""

    def test_connected_device_is_left_alone(self, eli_airpods):
        connector = FakeConnector()

        ConnectionManager(connector).ensure_connected(eli_airpods)

        assert connector.opened == []

    def test_disconnected_device_is_opened(self, bob_banana):
        connector = FakeConnector()

        ConnectionManager(connector).ensure_connected(bob_banana)

        assert connector.opened == [bob_banana.handle]

    def test_backend_failure_becomes_connection_failed(self, bob_banana):
        original = ConnectionError("openConnection returned 0xe00002bc")
        manager = ConnectionManager(FakeConnector(error=original))

        with pytest.raises(ConnectionFailedError) as exc_info:
            manager.ensure_connected(bob_banana)

        error = exc_info.value
        assert error.device_name == "Bob's Bluetooth Banana"
        assert error.__cause__ is original
        assert "0xe00002bc" in error.technical_message
        assert "Bob's Bluetooth Banana" in error.user_message


@pytest.mark.unit
class TestListeningModeController:
    """Test reading and writing listening modes."""

    @pytest.mark.parametrize("mode,code", [
        (ListeningMode.OFF, 1),
        (ListeningMode.NOISE_CANCELLATION, 2),
        (ListeningMode.TRANSPARENCY, 3),
    ])
    def test_set_mode_writes_code(self, eli_airpods, mode, code):
        access = FakeModeAccess()

        ListeningModeController(access).set_mode(eli_airpods, mode)

        assert access.writes == [(eli_airpods.handle, code)]

    def test_get_mode_decodes(self, eli_airpods):
        access = FakeModeAccess({eli_airpods.handle: 3})

        assert ListeningModeController(access).get_mode(eli_airpods) == ListeningMode.TRANSPARENCY

    def test_get_mode_unknown_code(self, eli_airpods):
        access = FakeModeAccess({eli_airpods.handle: 7})

        with pytest.raises(UnknownListeningModeError) as exc_info:
            ListeningModeController(access).get_mode(eli_airpods)

        assert exc_info.value.code == 7
        assert exc_info.value.device_name == "Eli's AirPods Pro"

    def test_write_failure_becomes_access_error(self, eli_airpods):
        original = RuntimeError("setListeningMode: unrecognized selector")
        controller = ListeningModeController(FakeModeAccess(error=original))

        with pytest.raises(ListeningModeAccessError) as exc_info:
            controller.set_mode(eli_airpods, ListeningMode.OFF)

        assert exc_info.value.device_name == "Eli's AirPods Pro"
        assert exc_info.value.__cause__ is original

    def test_read_failure_becomes_access_error(self, eli_airpods):
        controller = ListeningModeController(FakeModeAccess(error=RuntimeError("no reply")))

        with pytest.raises(ListeningModeAccessError):
            controller.get_mode(eli_airpods)
