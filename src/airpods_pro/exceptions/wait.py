"""Bounded-wait exceptions.

- WaitError: Base class for polling wait failures
- WaitTimeoutError: The condition did not become true within the timeout
- WaitCancelledError: The wait was cancelled from outside (interrupt or deadline)
"""

from typing import Optional

from .base import AirPodsProError


class WaitError(AirPodsProError):
    """A bounded wait did not succeed."""

    def __init__(self, user_message: str, description: Optional[str] = None, **kwargs):
        super().__init__(user_message, **kwargs)
        self.description = description


class WaitTimeoutError(WaitError):
    """Timed out waiting for a condition."""

    def __init__(self, timeout: float, description: Optional[str] = None):
        """
        Initialize timeout error.

        Args:
            timeout: The configured timeout in seconds
            description: What was being waited for
        """
        what = description or "condition"
        user_msg = f"Timed out after {timeout:g}s waiting for {what}."

        super().__init__(
            user_message=user_msg,
            description=description,
            recoverable=True,
            recovery_hint="Try again, or raise the limit with --timeout.",
        )
        self.timeout = timeout


class WaitCancelledError(WaitError):
    """The wait was cancelled before the condition became true."""

    def __init__(self, description: Optional[str] = None):
        what = description or "condition"
        super().__init__(
            user_message=f"Cancelled while waiting for {what}.",
            description=description,
        )
