# ================================================================================
# Wait Policy Module
# ================================================================================
#
# Timeouts, retry counts and fixed delays used by page objects.
#
# Key Features:
#   - Explicit wait timeout for element conditions (milliseconds, Playwright units)
#   - Bounded retry with a fixed backoff interval
#   - Settle delays after navigation clicks
#   - Cancellable waits: a threading.Event set from elsewhere ends a wait early
#
# Usage:
#   policy = WaitPolicy.from_config(ConfigLoader())
#   if not policy.pause(1.0):
#       return False  # cancelled
#
# ================================================================================

import threading
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from .config_loader import ConfigLoader


@dataclass
class WaitPolicy:
    """
    Wait configuration for element lookups.

    Attributes:
        timeout_ms: Explicit wait per condition check
        retry_delay_seconds: Fixed backoff between retry attempts
        max_retries: Default number of lookup attempts
        page_settle_seconds: Delay before page-load quorum checks
        cancel_event: Setting this event interrupts any pending pause
    """

    timeout_ms: int = 15000
    retry_delay_seconds: float = 1.0
    max_retries: int = 3
    page_settle_seconds: float = 2.0
    cancel_event: threading.Event = field(default_factory=threading.Event)

    @classmethod
    def from_config(cls, config: Optional[ConfigLoader] = None) -> "WaitPolicy":
        """Build a policy from the `ui.*` configuration keys."""
        config = config or ConfigLoader()
        return cls(
            timeout_ms=int(config.get("ui.wait_timeout_ms", 15000)),
            retry_delay_seconds=float(config.get("ui.retry_delay_seconds", 1.0)),
            max_retries=int(config.get("ui.max_retries", 3)),
            page_settle_seconds=float(config.get("ui.page_settle_seconds", 2.0)),
        )

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def cancel(self) -> None:
        """Interrupt the current and any future pause."""
        self.cancel_event.set()

    def pause(self, seconds: float) -> bool:
        """
        Block for a fixed delay.

        Returns:
            True if the full delay elapsed, False if the wait was cancelled.
            A cancelled event stays set so callers further up can see it.
        """
        if seconds <= 0:
            return not self.cancelled
        if self.cancel_event.wait(seconds):
            logger.warning(f"Wait of {seconds}s interrupted")
            return False
        return True


__all__ = [
    "WaitPolicy",
]
