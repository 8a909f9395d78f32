"""Per-invocation state shared by the CLI commands."""

import logging
import threading
from pathlib import Path
from typing import Optional

from airpods_pro.core import ActivationOrchestrator
from airpods_pro.models import AppConfig
from airpods_pro.platform import build_environment

logger = logging.getLogger(__name__)


class CliContext:
    """
    Holds the loaded configuration and builds the orchestrator on demand.

    The orchestrator is only built by commands that need the host stack, so
    ``--help`` and argument errors never touch Bluetooth.
    """

    def __init__(self, config: AppConfig, log_path: Optional[Path] = None):
        self.config = config
        self.log_path = log_path
        self.cancel_event = threading.Event()
        self._deadline_timer: Optional[threading.Timer] = None

    def orchestrator(self, **overrides) -> ActivationOrchestrator:
        """
        Build the orchestrator, applying non-None config ``overrides``.

        Example:
            ctx.orchestrator(wait_timeout=10.0)
        """
        updates = {k: v for k, v in overrides.items() if v is not None}
        config = self.config.model_copy(update=updates) if updates else self.config
        return build_environment(config, cancel_event=self.cancel_event)

    def arm_deadline(self, seconds: Optional[float]) -> None:
        """Cancel any wait still running ``seconds`` from now."""
        if seconds is None:
            return
        logger.debug(f"Overall deadline: {seconds}s")
        self._deadline_timer = threading.Timer(seconds, self.cancel_event.set)
        self._deadline_timer.daemon = True
        self._deadline_timer.start()

    def disarm_deadline(self) -> None:
        if self._deadline_timer is not None:
            self._deadline_timer.cancel()
            self._deadline_timer = None
