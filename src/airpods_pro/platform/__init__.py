"""Host integration: macOS backends and their composition.

`bluetooth` holds the adapters over IOBluetooth objects and imports anywhere.
The pyobjc and PortAudio modules (`macos_bluetooth`, `macos_audio`) are
imported lazily by `build_environment` so the package stays importable on
other platforms.
"""

from .environment import build_environment, compose_orchestrator

__all__ = ["build_environment", "compose_orchestrator"]
