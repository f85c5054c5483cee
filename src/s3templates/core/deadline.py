"""Deadline and cancellation context threaded through resolver calls."""

import threading
import time
from collections.abc import Callable

from .errors import DeadlineExceededError


class Deadline:
    """Bound the time a caller is willing to spend on a resolution.

    A deadline without a timeout never expires on its own but can still be
    cancelled from another thread.
    """

    def __init__(
        self,
        timeout: float | None = None,
        timer: Callable[[], float] = time.monotonic,
    ):
        self._timer = timer
        self._expires_at = None if timeout is None else timer() + timeout
        self._cancelled = threading.Event()

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(timeout=seconds)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def remaining(self) -> float | None:
        """Seconds left, or None when there is no timeout."""
        if self._expires_at is None:
            return None
        return max(0.0, self._expires_at - self._timer())

    def expired(self) -> bool:
        if self.cancelled:
            return True
        remaining = self.remaining()
        return remaining is not None and remaining <= 0.0

    def check(self, operation: str) -> None:
        """Raise DeadlineExceededError if the deadline has passed."""
        if self.cancelled:
            raise DeadlineExceededError(f"{operation} cancelled")
        if self.expired():
            raise DeadlineExceededError(f"{operation} exceeded deadline")
