"""CLI commands for airpods-pro."""

from .activate import activate
from .list import list_devices
from .set_mode import set_mode

__all__ = ["activate", "list_devices", "set_mode"]
