"""Step navigation for the contract wizard."""

from .commands import NavigationCommand
from .navigator import MarkerStatus, ProgressState, StepNavigator

__all__ = [
    "MarkerStatus",
    "NavigationCommand",
    "ProgressState",
    "StepNavigator",
]
