"""Transient notification shown after saving the draft."""

from __future__ import annotations

import logging
import time
from typing import Callable

from config import TOAST_DURATION_SECONDS

logger = logging.getLogger(__name__)

Clock = Callable[[], float]


class Toast:
    """Visibility flag with fire-and-forget hide deadlines.

    Each :meth:`show` schedules one more hide deadline and never cancels the
    ones already pending, so a toast re-shown before an earlier deadline
    passes is hidden by that earlier deadline. Deadlines are evaluated
    lazily whenever the state is read, and before each :meth:`show` so a
    deadline that expired unread never hides the next toast.
    """

    def __init__(self, *, duration: float = TOAST_DURATION_SECONDS, clock: Clock = time.monotonic) -> None:
        self.duration = duration
        self._clock = clock
        self.message = ""
        self._visible = False
        self._deadlines: list[float] = []

    def show(self, message: str) -> None:
        self.refresh()
        self.message = message
        self._visible = True
        self._deadlines.append(self._clock() + self.duration)
        logger.debug("Toast shown: %s", message)

    def refresh(self) -> None:
        """Apply every hide deadline that has passed."""

        now = self._clock()
        pending = [deadline for deadline in self._deadlines if deadline > now]
        if len(pending) != len(self._deadlines):
            self._visible = False
        self._deadlines = pending

    @property
    def visible(self) -> bool:
        self.refresh()
        return self._visible
