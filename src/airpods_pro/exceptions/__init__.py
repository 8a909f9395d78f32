"""
Custom exception hierarchy for airpods-pro.

## Exception Hierarchy

```
AirPodsProError (base)
├── DeviceError
│   ├── DeviceNotFoundError
│   ├── ConnectionFailedError
│   ├── UnknownListeningModeError
│   └── ListeningModeAccessError
├── CapabilityUnavailableError
│   └── PlatformUnsupportedError
├── AudioRouteError
├── WaitError
│   ├── WaitTimeoutError
│   └── WaitCancelledError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `AirPodsProError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.

### Example: Connection failure

```python
from airpods_pro.exceptions import ConnectionFailedError

try:
    status = connector.open_connection(device.handle)
except objc.error as e:
    raise ConnectionFailedError(device.name, original_error=str(e)) from e
```

See `airpods_pro.exceptions.handlers` for the utilities the CLI uses to
present these errors.
"""

from .base import AirPodsProError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import (
    AudioRouteError,
    CapabilityUnavailableError,
    ConnectionFailedError,
    DeviceError,
    DeviceNotFoundError,
    ListeningModeAccessError,
    PlatformUnsupportedError,
    UnknownListeningModeError,
)
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error
from .wait import WaitCancelledError, WaitError, WaitTimeoutError

__all__ = [
    # Base
    "AirPodsProError",
    # Device
    "AudioRouteError",
    "CapabilityUnavailableError",
    "ConnectionFailedError",
    "DeviceError",
    "DeviceNotFoundError",
    "ListeningModeAccessError",
    "PlatformUnsupportedError",
    "UnknownListeningModeError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Wait
    "WaitCancelledError",
    "WaitError",
    "WaitTimeoutError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
