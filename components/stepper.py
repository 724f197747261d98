"""Progress bar and step markers for the wizard header."""

from __future__ import annotations

import html
from typing import Sequence

import streamlit as st

from wizard.navigation import MarkerStatus, ProgressState


_STYLE_STATE_KEY = "_workflow_stepper_styles_v1"

_STATUS_ICONS = {
    MarkerStatus.COMPLETE: "✔︎",
    MarkerStatus.ACTIVE: "➤",
    MarkerStatus.UPCOMING: "•",
}


def _inject_workflow_styles() -> None:
    """Inject the progress bar styling once per session."""

    if st.session_state.get(_STYLE_STATE_KEY):
        return

    st.session_state[_STYLE_STATE_KEY] = True
    st.markdown(
        """
        <style>
        .progress-bar {
            position: relative;
            height: 6px;
            border-radius: 999px;
            background: rgba(148, 163, 184, 0.35);
            margin: 0.5rem 0 0.75rem;
        }

        .progress-bar::after {
            content: "";
            position: absolute;
            inset: 0 auto 0 0;
            width: var(--progress, 0%);
            border-radius: inherit;
            background: #2563eb;
            transition: width 0.3s ease;
        }

        .progress-steps {
            display: flex;
            flex-wrap: wrap;
            gap: 0.35rem;
            font-size: 0.85rem;
            color: rgba(15, 23, 42, 0.55);
            margin-bottom: 0.75rem;
        }

        .progress-step.active {
            color: #1e3a8a;
            font-weight: 600;
        }

        .progress-step.complete {
            color: #15803d;
        }

        .summary__section h3 {
            margin-bottom: 0.25rem;
        }

        .summary__list {
            margin-top: 0;
        }

        @media print {
            .progress-bar, .progress-steps {
                display: none;
            }
        }
        </style>
        """,
        unsafe_allow_html=True,
    )


def build_progress_markup(progress: ProgressState, labels: Sequence[str]) -> str:
    """Return the HTML for the progress bar and its step markers."""

    segments: list[str] = []
    for idx, (status, label) in enumerate(zip(progress.markers, labels)):
        css_class = "progress-step"
        if status is not MarkerStatus.UPCOMING:
            css_class += f" {status.value}"
        annotated_label = f"{_STATUS_ICONS[status]} {idx + 1}. {label}"
        segments.append(f"<span class='{css_class}' data-state='{status.value}'>{html.escape(annotated_label)}</span>")

    arrow = "<span aria-hidden='true'>→</span>"
    return (
        f"<div class='progress-bar' id='progressBar' style='--progress: {progress.css_value}'></div>"
        "<div class='progress-steps'>" + arrow.join(segments) + "</div>"
    )


def render_progress(progress: ProgressState, labels: Sequence[str]) -> None:
    """Render the progress bar above the step heading."""

    _inject_workflow_styles()
    st.markdown(build_progress_markup(progress, labels), unsafe_allow_html=True)
