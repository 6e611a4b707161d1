"""Cancellation and deadline signal passed down to every remote call."""

from __future__ import annotations

import threading
import time
from typing import Callable

from dynv6dns.exceptions import DeadlineExceededError


class Deadline:
    """An optional expiry time that can also be cancelled from another thread.

    Example::

        deadline = Deadline.after(10)
        provider.set_records("example.dynv6.net", records, deadline=deadline)
    """

    def __init__(self, expires_at: float | None = None):
        """Initialize a deadline.

        Args:
            expires_at: Absolute ``time.monotonic()`` value, or None for a
                deadline that only ends when cancelled.
        """
        self.expires_at = expires_at
        self._cancelled = threading.Event()
        self._callbacks: list[Callable[[], None]] = []
        self._lock = threading.Lock()

    @classmethod
    def after(cls, seconds: float) -> Deadline:
        """Create a deadline that expires *seconds* from now."""
        return cls(time.monotonic() + seconds)

    def cancel(self) -> None:
        """Cancel the deadline, interrupting any call waiting on it."""
        with self._lock:
            self._cancelled.set()
            callbacks = list(self._callbacks)
        for callback in callbacks:
            callback()

    def add_callback(self, callback: Callable[[], None]) -> None:
        """Run *callback* on cancel, or right away if already cancelled."""
        with self._lock:
            if not self._cancelled.is_set():
                self._callbacks.append(callback)
                return
        callback()

    def remove_callback(self, callback: Callable[[], None]) -> None:
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def remaining(self) -> float | None:
        """Return the seconds left, or None if there is no expiry.

        Raises:
            DeadlineExceededError: If cancelled or already expired.
        """
        if self.cancelled:
            raise DeadlineExceededError("operation cancelled")
        if self.expires_at is None:
            return None
        left = self.expires_at - time.monotonic()
        if left <= 0:
            raise DeadlineExceededError("deadline exceeded")
        return left
