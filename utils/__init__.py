"""Utility helpers for the contract wizard."""

from __future__ import annotations

from .errors import display_error as display_error
from .errors import display_validation_warning as display_validation_warning
