"""Step index state machine and the progress indicator derived from it."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class MarkerStatus(str, Enum):
    """Visual state of a progress marker."""

    ACTIVE = "active"
    COMPLETE = "complete"
    UPCOMING = "upcoming"


@dataclass(frozen=True)
class ProgressState:
    """Progress bar percentage plus one status per marker."""

    percent: float
    markers: tuple[MarkerStatus, ...]

    @property
    def css_value(self) -> str:
        """Return the value assigned to the ``--progress`` custom property."""

        return f"{self.percent:g}%"


class StepNavigator:
    """Own the current step index of a wizard with a fixed number of steps.

    Exactly one step is active at a time. Transitions outside ``[0, N-1]``
    are ignored. Every applied transition raises a scroll request that the
    UI consumes once via :meth:`consume_scroll_request`.
    """

    def __init__(self, step_count: int, *, marker_count: int | None = None) -> None:
        if step_count < 2:
            raise ValueError("a wizard needs at least two steps")
        if marker_count is not None and marker_count < 1:
            raise ValueError("marker_count must be positive")
        self._step_count = step_count
        self._marker_count = marker_count if marker_count is not None else step_count
        self._current = 0
        self._scroll_requested = False

    @property
    def step_count(self) -> int:
        return self._step_count

    @property
    def current_index(self) -> int:
        return self._current

    @property
    def last_index(self) -> int:
        return self._step_count - 1

    @property
    def is_last(self) -> bool:
        return self._current == self.last_index

    def show_step(self, index: int) -> bool:
        """Activate step ``index``; return ``False`` when it is out of range."""

        if index < 0 or index >= self._step_count:
            logger.debug("Ignoring transition to out-of-range step %s", index)
            return False
        previous = self._current
        self._current = index
        self._scroll_requested = True
        logger.info("Wizard step %s -> %s", previous, index)
        return True

    def next_step(self) -> bool:
        return self.show_step(self._current + 1)

    def previous_step(self) -> bool:
        return self.show_step(self._current - 1)

    def show_last(self) -> bool:
        return self.show_step(self.last_index)

    def consume_scroll_request(self) -> bool:
        """Return and clear the pending scroll-into-view request."""

        requested = self._scroll_requested
        self._scroll_requested = False
        return requested

    def progress(self) -> ProgressState:
        """Recompute the progress indicator for the current step."""

        total_stages = self._step_count - 1
        safe_step = min(self._current, total_stages)
        active_index = min(self._current, self._marker_count - 1)
        on_last = self._current == total_stages
        percent = safe_step / total_stages * 100

        markers: list[MarkerStatus] = []
        for index in range(self._marker_count):
            if index == active_index and not on_last:
                markers.append(MarkerStatus.ACTIVE)
            elif index < safe_step or (on_last and index == active_index):
                markers.append(MarkerStatus.COMPLETE)
            else:
                markers.append(MarkerStatus.UPCOMING)
        return ProgressState(percent=percent, markers=tuple(markers))
