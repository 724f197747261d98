"""Utility helpers for rendering error messages in Streamlit."""

from __future__ import annotations

import streamlit as st

import config


def display_error(msg: str, detail: str | None = None) -> None:
    """Render a user-facing error with optional debug details.

    Args:
        msg: Short error message for the user.
        detail: Optional technical detail shown when ``WIZARD_DEBUG`` is set.
    """

    st.error(msg)
    if detail and config.DEBUG:
        with st.expander("Detalles"):
            st.code(detail)


def display_validation_warning(report: str | None) -> None:
    """Show the message of the first invalid field, if any."""

    if report:
        st.warning(f"⚠️ {report}")
