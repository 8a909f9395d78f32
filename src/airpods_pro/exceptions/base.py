"""Root of the airpods-pro exception tree.

Every failure the core can explain is raised as an AirPodsProError. Each one
carries two texts: what the person at the terminal should read, and what
goes into the log file. The activation orchestrator also stamps the stage
it was trying to reach, so a log line says where the workflow stopped.
"""

from typing import Optional


class AirPodsProError(Exception):
    """
    A failure with a printable explanation.

    Attributes:
        user_message: One line for the terminal
        technical_message: Log text, including backend error details
        recoverable: True when running the command again may succeed
        recovery_hint: What to try next, printed under the error banner
        stage: Activation stage that could not be reached; None outside activation
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint
        self.stage: Optional[str] = None

    def __str__(self) -> str:
        return self.user_message

    @property
    def log_message(self) -> str:
        """Technical message prefixed with the failed stage when known."""
        if self.stage:
            return f"[{self.stage}] {self.technical_message}"
        return self.technical_message
