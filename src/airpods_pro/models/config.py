"""Application configuration model."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field

from airpods_pro.utils.persistence import PydanticPersistence

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".airpods-pro" / "config.json"


class AppConfig(BaseModel):
    """
    Application settings.

    The config file is optional and read-only: airpods-pro never writes it.
    Command-line options override the values loaded here.
    """

    poll_interval: float = Field(
        default=0.2, gt=0, description="Delay between state checks while waiting (seconds)"
    )
    wait_timeout: float = Field(
        default=5.0, gt=0, description="How long to wait for the radio to power on (seconds)"
    )
    audio_wait_timeout: float = Field(
        default=5.0,
        gt=0,
        description="How long to wait for the device to appear as an audio endpoint (seconds)",
    )
    switch_audio_source_path: str = Field(
        default="SwitchAudioSource",
        description="Executable used to change the default audio input/output",
    )

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "AppConfig":
        """
        Load config from file or return defaults.

        Args:
            path: Path to config file. If None, uses ~/.airpods-pro/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        if not path.exists():
            logger.debug(f"No config file at {path}, using defaults")
            return cls()

        return PydanticPersistence.load_json(path, cls)
