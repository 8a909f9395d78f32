"""Tests for configuration loading and error wrapping."""

import pytest

from airpods_pro.exceptions import ConfigFileInvalidError, ConfigValidationError
from airpods_pro.models import AppConfig


@pytest.mark.unit
class TestAppConfig:
    """Test AppConfig.load_or_default."""

    def test_missing_file_gives_defaults(self, temp_dir):
        config = AppConfig.load_or_default(temp_dir / "missing.json")

        assert config == AppConfig()
        assert config.poll_interval == 0.2
        assert config.wait_timeout == 5.0
        # Read-only: nothing gets created
        assert not (temp_dir / "missing.json").exists()

    def test_default_path_is_used(self, temp_dir):
        (temp_dir / "config.json").write_text('{"wait_timeout": 8}')

        assert AppConfig.load_or_default().wait_timeout == 8.0

    def test_partial_file_keeps_other_defaults(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"audio_wait_timeout": 12.5}')

        config = AppConfig.load_or_default(path)

        assert config.audio_wait_timeout == 12.5
        assert config.poll_interval == 0.2

    def test_invalid_json(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"wait_timeout": 8,}')

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.file_path == str(path)

    def test_empty_file(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text("   ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            AppConfig.load_or_default(path)

        assert "empty" in exc_info.value.user_message

    def test_invalid_value(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"poll_interval": -1}')

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        error = exc_info.value
        assert error.field == "poll_interval"
        assert "seconds" in error.recovery_hint

    def test_multiple_invalid_values(self, temp_dir):
        path = temp_dir / "config.json"
        path.write_text('{"poll_interval": "fast", "wait_timeout": 0}')

        with pytest.raises(ConfigValidationError) as exc_info:
            AppConfig.load_or_default(path)

        assert exc_info.value.field == "multiple fields"
        assert "2 validation errors" in exc_info.value.user_message
