"""Contract wizard package."""

from __future__ import annotations


def run_wizard() -> None:
    """Render the wizard for the current Streamlit session."""

    from wizard.ui import render_wizard

    render_wizard()


__all__ = ["run_wizard"]
