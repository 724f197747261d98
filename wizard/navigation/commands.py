from __future__ import annotations

from enum import Enum


class NavigationCommand(str, Enum):
    """User commands understood by the wizard controller."""

    NEXT = "next"
    PREV = "prev"
    SHOW_SUMMARY = "summary"
    PRINT = "print"

    @property
    def requires_validation(self) -> bool:
        return self in (NavigationCommand.NEXT, NavigationCommand.SHOW_SUMMARY)
