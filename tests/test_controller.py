from __future__ import annotations

import socket
from typing import Any

import pytest

from config import SAVE_TOAST_MESSAGE
from constants.keys import StateKeys
from wizard.controller import WizardController
from wizard.form_state import collect_form_data
from wizard.navigation import NavigationCommand, StepNavigator
from wizard.summary import NO_DOCUMENTS
from wizard.toast import Toast
from wizard_pages import WIZARD_PAGES


def _build(
    form_data: dict[str, Any],
    clock,
    session_state: dict[str, Any] | None = None,
) -> tuple[WizardController, dict[str, Any], list[str]]:
    state: dict[str, Any] = {} if session_state is None else session_state
    printed: list[str] = []
    controller = WizardController(
        navigator=StepNavigator(len(WIZARD_PAGES)),
        toast=Toast(duration=2.8, clock=clock),
        read_form_state=lambda: collect_form_data(form_data),
        session_state=state,
        on_print=lambda: printed.append("print"),
    )
    return controller, state, printed


def test_next_blocked_when_required_field_empty(clock) -> None:
    controller, state, _ = _build({}, clock)

    result = controller.dispatch(NavigationCommand.NEXT)

    assert result is not None and not result.valid
    assert controller.navigator.current_index == 0
    assert state[StateKeys.VALIDATION_ERROR].startswith("Ciudad de formalización")


def test_next_advances_when_step_is_valid(filled_form: dict[str, Any], clock) -> None:
    controller, state, _ = _build(filled_form, clock)
    state[StateKeys.VALIDATION_ERROR] = "stale"

    result = controller.dispatch("next")

    assert result is not None and result.valid
    assert controller.navigator.current_index == 1
    assert StateKeys.VALIDATION_ERROR not in state


def test_prev_does_not_validate(clock) -> None:
    controller, _, _ = _build({}, clock)
    controller.navigator.show_step(2)

    assert controller.dispatch(NavigationCommand.PREV) is None
    assert controller.navigator.current_index == 1


def test_show_summary_renders_and_jumps_to_last(filled_form: dict[str, Any], clock) -> None:
    controller, state, _ = _build(filled_form, clock)

    controller.dispatch(NavigationCommand.SHOW_SUMMARY)

    assert controller.navigator.is_last
    assert "1.500,00 €" in state[StateKeys.SUMMARY_HTML]
    assert len(controller.summary_sections) == 5


def test_show_summary_blocked_by_validation(clock) -> None:
    controller, state, _ = _build({}, clock)

    controller.dispatch(NavigationCommand.SHOW_SUMMARY)

    assert controller.navigator.current_index == 0
    assert StateKeys.SUMMARY_HTML not in state


def test_print_delegates_without_validation(clock) -> None:
    controller, _, printed = _build({}, clock)

    controller.dispatch(NavigationCommand.PRINT)

    assert printed == ["print"]
    assert controller.navigator.current_index == 0


def test_input_rerenders_only_on_last_step(filled_form: dict[str, Any], clock) -> None:
    controller, state, _ = _build(filled_form, clock)

    controller.handle_input()
    assert StateKeys.SUMMARY_HTML not in state

    controller.navigator.show_last()
    controller.handle_input()
    assert NO_DOCUMENTS in controller.summary_html

    filled_form["documentos"] = ["Ficha técnica"]
    controller.handle_input()
    assert "Ficha técnica" in controller.summary_html
    assert NO_DOCUMENTS not in controller.summary_html


def test_submit_shows_toast_without_network(
    filled_form: dict[str, Any],
    clock,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    def _forbid(*_args: object, **_kwargs: object) -> None:
        raise AssertionError("network access attempted")

    monkeypatch.setattr(socket.socket, "connect", _forbid)
    monkeypatch.setattr(socket, "create_connection", _forbid)
    controller, state, _ = _build(filled_form, clock)

    controller.submit()

    assert controller.toast.visible
    assert controller.toast.message == SAVE_TOAST_MESSAGE
    assert state[StateKeys.SUMMARY_HTML]
    clock.advance(2.9)
    assert not controller.toast.visible


def test_unknown_command_is_rejected(clock) -> None:
    controller, _, _ = _build({}, clock)

    with pytest.raises(ValueError):
        controller.dispatch("jump")


def test_navigator_must_match_pages(clock) -> None:
    with pytest.raises(ValueError):
        WizardController(
            navigator=StepNavigator(2),
            toast=Toast(clock=clock),
            read_form_state=dict,
            session_state={},
        )


def test_summary_renders_very_large_price(filled_form: dict[str, Any], clock) -> None:
    form = dict(filled_form, precio="1" + "0" * 27)
    controller, state, _ = _build(form, clock)
    controller.navigator.show_last()

    result = controller.dispatch(NavigationCommand.SHOW_SUMMARY)

    assert result is not None and result.valid
    assert "1" + ".000" * 9 + ",00 €" in state[StateKeys.SUMMARY_HTML]


def test_second_save_after_unread_expiry_shows_toast(filled_form: dict[str, Any], clock) -> None:
    controller, _, _ = _build(filled_form, clock)
    controller.navigator.show_last()
    controller.submit()
    clock.advance(3.0)

    controller.submit()
    clock.advance(0.1)

    assert controller.toast.visible
    assert controller.toast.message == SAVE_TOAST_MESSAGE
