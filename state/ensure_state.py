"""Helpers for initializing Streamlit session state."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Callable

import streamlit as st

from constants.keys import StateKeys
from wizard.navigation import StepNavigator
from wizard.toast import Toast
from wizard_pages import WIZARD_PAGES

logger = logging.getLogger(__name__)


_DEFAULT_STATE_FACTORIES: Mapping[str, Callable[[], Any]] = MappingProxyType(
    {
        StateKeys.SESSION_ID: lambda: uuid.uuid4().hex[:12],
        StateKeys.FORM_DATA: dict,
        StateKeys.NAVIGATOR: lambda: StepNavigator(len(WIZARD_PAGES)),
        StateKeys.TOAST: Toast,
        StateKeys.SUMMARY_SECTIONS: tuple,
        StateKeys.SUMMARY_HTML: lambda: "",
        StateKeys.PRINT_REQUESTED: lambda: False,
    }
)


def ensure_state() -> None:
    """Initialize ``st.session_state`` with required keys.

    Existing keys are preserved to respect user interactions.
    """

    navigator = st.session_state.get(StateKeys.NAVIGATOR)
    if navigator is not None and not isinstance(navigator, StepNavigator):
        logger.warning("Discarding unexpected navigator state of type %s", type(navigator).__name__)
        del st.session_state[StateKeys.NAVIGATOR]
    form_data = st.session_state.get(StateKeys.FORM_DATA)
    if form_data is not None and not isinstance(form_data, dict):
        st.session_state[StateKeys.FORM_DATA] = dict(form_data) if isinstance(form_data, Mapping) else {}

    for key, factory in _DEFAULT_STATE_FACTORIES.items():
        if key not in st.session_state:
            st.session_state[key] = factory()


def reset_state() -> None:
    """Drop every wizard value and reinitialize defaults, keeping the session id."""

    session_id = st.session_state.get(StateKeys.SESSION_ID)
    for key in list(st.session_state.keys()):
        del st.session_state[key]
    if session_id is not None:
        st.session_state[StateKeys.SESSION_ID] = session_id
    ensure_state()
