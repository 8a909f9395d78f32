"""Errors raised while reading ~/.airpods-pro/config.json.

The file is optional: a missing file means defaults. These errors only
appear when a file is present but unusable.
"""

from typing import Any, Optional

from .base import AirPodsProError


class ConfigurationError(AirPodsProError):
    """The config file exists but cannot be used."""


class ConfigFileInvalidError(ConfigurationError):
    """The config file is not a JSON document (or is blank)."""

    def __init__(self, file_path: str, parse_error: str):
        """
        Args:
            file_path: Config file that failed to parse
            parse_error: Parser or I/O error text
        """
        problem = parse_error.lower()
        if "empty" in problem:
            user_msg = "Configuration file is empty"
            recovery = f"Delete {file_path} to use the defaults, or add a JSON object to it"
        elif "trailing comma" in problem:
            user_msg = "Configuration file has a trailing comma"
            recovery = f"Remove the comma after the last setting in {file_path}"
        else:
            user_msg = "Configuration file is not valid JSON"
            recovery = (
                f"Fix or delete {file_path}. A valid file looks like:\n"
                '  {"poll_interval": 0.2, "wait_timeout": 5, "audio_wait_timeout": 5}'
            )

        super().__init__(
            user_message=user_msg,
            technical_message=f"Cannot parse {file_path}: {parse_error}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.file_path = file_path
        self.parse_error = parse_error


class ConfigValidationError(ConfigurationError):
    """A setting in the config file has the wrong type or is out of range."""

    def __init__(self, field: str, value: Any, error_msg: str, file_path: Optional[str] = None):
        """
        Args:
            field: Setting name, or "multiple fields"
            value: Rejected value (None when several settings failed)
            error_msg: Validation message
            file_path: Config file the setting came from
        """
        recovery = f"Correct '{field}'"
        if file_path:
            recovery += f" in {file_path}"
        if "timeout" in field or "interval" in field:
            recovery += "\nDurations are given in seconds and must be greater than zero"

        super().__init__(
            user_message=f"Invalid configuration value for '{field}': {error_msg}",
            technical_message=f"Validation error for {field}={value!r}: {error_msg}",
            recoverable=True,
            recovery_hint=recovery,
        )
        self.field = field
        self.value = value
        self.error_msg = error_msg
        self.file_path = file_path
