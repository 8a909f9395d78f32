"""Bounded polling wait."""

import logging
import threading
from typing import Callable, Optional

from airpods_pro.exceptions import WaitCancelledError, WaitTimeoutError

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL = 0.2
DEFAULT_TIMEOUT = 5.0


class PollingWaiter:
    """
    Repeatedly evaluates a predicate until it is true or a timeout elapses.

    Elapsed time is accumulated from the poll intervals actually slept, and
    the predicate is always evaluated once before any time is counted, so a
    condition that already holds returns without sleeping.

    Sleeping is done with ``cancel_event.wait()``. Setting the event from
    another thread (a deadline timer, a signal handler) wakes the waiter
    immediately and raises WaitCancelledError.
    """

    def __init__(
        self,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        timeout: float = DEFAULT_TIMEOUT,
        cancel_event: Optional[threading.Event] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ):
        """
        Initialize the waiter.

        Args:
            poll_interval: Delay between predicate evaluations (seconds)
            timeout: Default upper bound on accumulated waiting (seconds)
            cancel_event: Event that cancels any wait in progress when set
            sleep: Replacement sleep function (tests); cancellation is then
                   only checked between sleeps
        """
        self.poll_interval = poll_interval
        self.timeout = timeout
        self.cancel_event = cancel_event or threading.Event()
        self._sleep = sleep

    def _pause(self, seconds: float) -> bool:
        """Sleep for ``seconds``; return True if cancelled."""
        if self._sleep is not None:
            self._sleep(seconds)
            return self.cancel_event.is_set()
        return self.cancel_event.wait(seconds)

    def wait_until(
        self,
        predicate: Callable[[], bool],
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        description: Optional[str] = None,
    ) -> None:
        """
        Block until ``predicate()`` returns True.

        Args:
            predicate: Zero-argument query, assumed free of side effects
            timeout: Override for the default timeout (seconds)
            poll_interval: Override for the default poll interval (seconds)
            description: What is being waited for (used in logs and errors)

        Raises:
            WaitTimeoutError: If accumulated waiting exceeds the timeout
            WaitCancelledError: If the cancel event is set during the wait
        """
        timeout = self.timeout if timeout is None else timeout
        interval = self.poll_interval if poll_interval is None else poll_interval
        what = description or "condition"

        elapsed = 0.0
        evaluations = 0
        while True:
            evaluations += 1
            if predicate():
                logger.debug(f"{what} satisfied after {evaluations} check(s), {elapsed:.2f}s")
                return

            if self.cancel_event.is_set() or self._pause(interval):
                logger.info(f"Wait for {what} cancelled after {elapsed:.2f}s")
                raise WaitCancelledError(description)

            elapsed += interval
            if elapsed > timeout:
                logger.warning(f"Timed out after {timeout}s waiting for {what}")
                raise WaitTimeoutError(timeout, description)
