"""
Transient success notification with a pausable countdown.

``Toast`` is what the participation controller hands to a ``Notifier``.
``ToastTimer`` is a helper for notifiers that render toasts on a pointer
surface: create one per shown toast, call ``pause``/``resume`` from the
hover events, and dismiss the toast once ``expired`` is True. The console
notifier prints each toast once and does not need it.
"""

import time
from dataclasses import dataclass
from typing import Callable, Optional


@dataclass(frozen=True)
class Toast:
    """A success toast request."""
    text: str
    icon: str = "success"
    duration_ms: int = 3000
    pause_on_hover: bool = True


class ToastTimer:
    """
    Countdown for one toast.

    The timer starts when created, stops while the pointer hovers over the
    toast (``pause``), and continues with the time that was left when the
    pointer leaves (``resume``).
    """

    def __init__(self, duration_ms: int = 3000, pause_on_hover: bool = True,
                 clock: Optional[Callable[[], float]] = None):
        if duration_ms <= 0:
            raise ValueError("duration_ms must be positive")
        self.duration_ms = duration_ms
        self.pause_on_hover = pause_on_hover
        self._clock = clock or time.monotonic
        self._remaining_ms = float(duration_ms)
        self._started_at: Optional[float] = self._clock()

    @classmethod
    def for_toast(cls, toast: Toast, clock: Optional[Callable[[], float]] = None) -> "ToastTimer":
        return cls(toast.duration_ms, toast.pause_on_hover, clock)

    @property
    def paused(self) -> bool:
        return self._started_at is None

    @property
    def remaining_ms(self) -> float:
        if self._started_at is None:
            return self._remaining_ms
        elapsed_ms = (self._clock() - self._started_at) * 1000
        return max(self._remaining_ms - elapsed_ms, 0.0)

    @property
    def expired(self) -> bool:
        return self.remaining_ms <= 0

    def pause(self) -> None:
        """Pointer entered the toast."""
        if not self.pause_on_hover or self.paused or self.expired:
            return
        self._remaining_ms = self.remaining_ms
        self._started_at = None

    def resume(self) -> None:
        """Pointer left the toast."""
        if not self.paused:
            return
        self._started_at = self._clock()
