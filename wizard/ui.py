"""Streamlit rendering of the contract wizard."""

from __future__ import annotations

import logging
from typing import Any, Callable

import streamlit as st
import streamlit.components.v1 as components

from components.form_fields import render_form_field
from components.stepper import render_progress
from constants.keys import StateKeys, UIKeys
from state import ensure_state, reset_state
from utils.errors import display_error, display_validation_warning
from utils.logging_context import bind_context, log_context
from wizard.controller import WizardController
from wizard.form_state import collect_form_data
from wizard.navigation import NavigationCommand
from wizard.summary import render_summary_text
from wizard_pages import WIZARD_PAGES
from wizard_pages.base import FieldKind, WizardPage

logger = logging.getLogger(__name__)

_TOAST_REFRESH_SECONDS = 0.5
_FULL_WIDTH_KINDS = (FieldKind.TEXTAREA, FieldKind.CHECKBOX, FieldKind.CHECKBOX_GROUP)

_SCROLL_TO_TOP_SCRIPT = """
<script>
(function() {
    const root = window.parent;
    const target = root.document.querySelector('section.main') || root.document.body;
    target.scrollIntoView({ behavior: 'smooth', block: 'start' });
})();
</script>
"""

_PRINT_SCRIPT = "<script>window.parent.print();</script>"


def _request_print() -> None:
    st.session_state[StateKeys.PRINT_REQUESTED] = True


def build_controller(session_state: Any | None = None) -> WizardController:
    """Build a controller over the wizard state stored in ``session_state``."""

    state = st.session_state if session_state is None else session_state
    form_data = state[StateKeys.FORM_DATA]
    return WizardController(
        navigator=state[StateKeys.NAVIGATOR],
        toast=state[StateKeys.TOAST],
        read_form_state=lambda: collect_form_data(form_data, WIZARD_PAGES),
        session_state=state,
        pages=WIZARD_PAGES,
        on_print=_request_print,
    )


def _run_callback(action: Callable[[WizardController], object]) -> None:
    """Run ``action`` with the step the event was raised on bound for logging."""

    controller = build_controller()
    with log_context(
        session_id=st.session_state.get(StateKeys.SESSION_ID),
        wizard_step=controller.current_page.key,
    ):
        action(controller)


def _dispatch(command: NavigationCommand) -> None:
    _run_callback(lambda controller: controller.dispatch(command))


def _on_field_input() -> None:
    _run_callback(WizardController.handle_input)


def _on_submit() -> None:
    _run_callback(WizardController.submit)


def _on_reset() -> None:
    logger.info("Starting a new contract")
    reset_state()


def maybe_scroll_to_top(controller: WizardController) -> None:
    if not controller.navigator.consume_scroll_request():
        return
    components.html(_SCROLL_TO_TOP_SCRIPT, height=0)


def maybe_print() -> None:
    if not st.session_state.pop(StateKeys.PRINT_REQUESTED, False):
        return
    components.html(_PRINT_SCRIPT, height=0)


@st.fragment(run_every=_TOAST_REFRESH_SECONDS)
def render_toast() -> None:
    toast = st.session_state[StateKeys.TOAST]
    if toast.visible:
        st.success(toast.message, icon="💾")


def _render_step_fields(page: WizardPage, form_data: dict[str, Any]) -> None:
    columns = st.columns(2)
    for index, field in enumerate(page.fields):
        if field.kind in _FULL_WIDTH_KINDS:
            render_form_field(field, form_data, on_input=_on_field_input)
            continue
        with columns[index % 2]:
            render_form_field(field, form_data, on_input=_on_field_input)


def _render_summary(controller: WizardController) -> None:
    st.subheader("Resumen del contrato")
    markup = controller.summary_html
    if not markup:
        st.caption("Pulsa «Ver resumen» o edita cualquier campo para generar el resumen.")
        return
    st.markdown(f"<div id='summary'>{markup}</div>", unsafe_allow_html=True)
    with st.expander("Copiar como texto"):
        st.code(render_summary_text(controller.summary_sections), language=None)


def _render_navigation(controller: WizardController) -> None:
    navigator = controller.navigator
    display_validation_warning(st.session_state.get(StateKeys.VALIDATION_ERROR))
    prev_col, next_col, summary_col, print_col = st.columns(4)
    with prev_col:
        if navigator.current_index > 0:
            st.button(
                "◀ Anterior",
                key=UIKeys.NAV_PREVIOUS,
                on_click=_dispatch,
                args=(NavigationCommand.PREV,),
                width="stretch",
            )
    with next_col:
        if not navigator.is_last:
            st.button(
                "Siguiente ▶",
                key=UIKeys.NAV_NEXT,
                type="primary",
                on_click=_dispatch,
                args=(NavigationCommand.NEXT,),
                width="stretch",
            )
    with summary_col:
        st.button(
            "Ver resumen",
            key=UIKeys.NAV_SUMMARY,
            on_click=_dispatch,
            args=(NavigationCommand.SHOW_SUMMARY,),
            width="stretch",
        )
    with print_col:
        if navigator.is_last:
            st.button(
                "🖨️ Imprimir",
                key=UIKeys.NAV_PRINT,
                on_click=_dispatch,
                args=(NavigationCommand.PRINT,),
                width="stretch",
            )
    if navigator.is_last:
        submit_col, reset_col = st.columns(2)
        with submit_col:
            st.button("Guardar borrador", key=UIKeys.SUBMIT, type="primary", on_click=_on_submit)
        with reset_col:
            st.button("Empezar de nuevo", key=UIKeys.RESET, on_click=_on_reset)


def render_wizard() -> None:
    """Render the active step, the navigation bar and the summary."""

    ensure_state()
    controller = build_controller()
    page = controller.current_page
    bind_context(session_id=st.session_state.get(StateKeys.SESSION_ID), wizard_step=page.key)

    render_progress(controller.navigator.progress(), [item.label for item in controller.pages])
    maybe_scroll_to_top(controller)
    st.header(page.panel_header)
    st.caption(page.panel_subheader)

    try:
        _render_step_fields(page, st.session_state[StateKeys.FORM_DATA])
        if page.shows_summary:
            _render_summary(controller)
    except Exception as exc:  # pragma: no cover - surfaced to the user
        logger.exception("Rendering step %s failed", page.key)
        display_error(
            f"No se pudo mostrar el paso «{page.label}». Recarga la página e inténtalo de nuevo.",
            detail=repr(exc),
        )

    _render_navigation(controller)
    render_toast()
    maybe_print()
