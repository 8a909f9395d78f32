"""Formatting of the device list for console output."""

import json

from airpods_pro.models.device import Device
from airpods_pro.models.enums import OutputFormat

NAME_WIDTH = 30
STATE_WIDTH = 20
MODE_WIDTH = 20


def _pad(value: str, width: int) -> str:
    """Left-align value in a fixed-width column, truncating if too long."""
    return value[:width].ljust(width)


def _text_row(name: str, state: str, mode: str) -> str:
    return f"{_pad(name, NAME_WIDTH)} {_pad(state, STATE_WIDTH)} {_pad(mode, MODE_WIDTH)}"


def format_as_text(devices: list[Device]) -> str:
    """
    Format devices as a fixed-width table.

    The header comes first and rows are joined by newlines, with no newline
    after the last row. Every row is exactly 72 characters wide.
    """
    rows = [_text_row("Name", "Connection State", "Listening Mode")]
    rows.extend(_text_row(d.name, d.state.value, d.mode.value) for d in devices)
    return "\n".join(rows)


def device_as_dict(device: Device) -> dict[str, str]:
    """Serialize a device with the public JSON keys."""
    return {
        "name": device.name,
        "connectionState": device.state.value,
        "listeningMode": device.mode.value,
    }


def format_as_json(devices: list[Device]) -> str:
    """Format devices as a pretty-printed JSON array in discovery order."""
    return json.dumps([device_as_dict(d) for d in devices], indent=2, ensure_ascii=False)


def format_devices(devices: list[Device], output_format: OutputFormat) -> str:
    """Format devices in the requested output format."""
    if output_format == OutputFormat.JSON:
        return format_as_json(devices)
    return format_as_text(devices)
