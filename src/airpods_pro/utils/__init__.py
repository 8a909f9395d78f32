"""Generic utility modules for airpods-pro.

- persistence: Loading Pydantic models from JSON files
- formatting: Text table and JSON rendering of the device list
"""

from .persistence import PydanticPersistence

__all__ = ["PydanticPersistence"]
