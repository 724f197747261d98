"""Dispatch wizard commands and form events to the navigator and renderer."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, MutableMapping, Sequence

from config import SAVE_TOAST_MESSAGE
from constants.keys import StateKeys
from wizard.navigation import NavigationCommand, StepNavigator
from wizard.summary import SummarySection, build_summary, render_summary_html
from wizard.toast import Toast
from wizard.validation import StepValidation, validate_step
from wizard_pages import WIZARD_PAGES
from wizard_pages.base import WizardPage

logger = logging.getLogger(__name__)

FormStateReader = Callable[[], Mapping[str, Any]]


class WizardController:
    """Glue between UI events and the wizard state held in ``session_state``.

    The controller itself is stateless and cheap to rebuild on every rerun;
    the navigator, the toast and the last rendered summary live in
    ``session_state`` under :class:`~constants.keys.StateKeys`.
    """

    def __init__(
        self,
        *,
        navigator: StepNavigator,
        toast: Toast,
        read_form_state: FormStateReader,
        session_state: MutableMapping[str, Any],
        pages: Sequence[WizardPage] = WIZARD_PAGES,
        on_print: Callable[[], None] | None = None,
    ) -> None:
        if navigator.step_count != len(pages):
            raise ValueError("navigator step count does not match the number of pages")
        self.navigator = navigator
        self.toast = toast
        self.pages = tuple(pages)
        self._read_form_state = read_form_state
        self._session_state = session_state
        self._on_print = on_print

    @property
    def current_page(self) -> WizardPage:
        return self.pages[self.navigator.current_index]

    @property
    def summary_html(self) -> str:
        return str(self._session_state.get(StateKeys.SUMMARY_HTML, ""))

    @property
    def summary_sections(self) -> tuple[SummarySection, ...]:
        return tuple(self._session_state.get(StateKeys.SUMMARY_SECTIONS, ()))

    def validate_current_step(self) -> StepValidation:
        """Validate the active step and record the failure for display."""

        result = validate_step(self.current_page, self._read_form_state())
        if result.valid:
            self._session_state.pop(StateKeys.VALIDATION_ERROR, None)
        else:
            self._session_state[StateKeys.VALIDATION_ERROR] = result.report
        return result

    def render_summary(self) -> tuple[SummarySection, ...]:
        """Rebuild the summary from the live form state."""

        sections = build_summary(self._read_form_state())
        self._session_state[StateKeys.SUMMARY_SECTIONS] = sections
        self._session_state[StateKeys.SUMMARY_HTML] = render_summary_html(sections)
        return sections

    def dispatch(self, command: NavigationCommand | str) -> StepValidation | None:
        """Run ``command``; return the validation result when it needed one."""

        command = NavigationCommand(command)
        logger.debug("Dispatching %s on step %s", command.value, self.current_page.key)
        if not command.requires_validation:
            if command is NavigationCommand.PREV:
                self._session_state.pop(StateKeys.VALIDATION_ERROR, None)
                self.navigator.previous_step()
            elif self._on_print is not None:
                self._on_print()
            return None

        result = self.validate_current_step()
        if not result.valid:
            return result
        if command is NavigationCommand.NEXT:
            self.navigator.next_step()
        else:
            self.render_summary()
            self.navigator.show_last()
        return result

    def handle_input(self) -> None:
        """React to a field edit; only the last step re-renders the summary."""

        if self.navigator.is_last:
            self.render_summary()

    def submit(self) -> None:
        """Save the draft for this session only and confirm it with a toast."""

        self.render_summary()
        self.toast.show(SAVE_TOAST_MESSAGE)
        logger.info("Draft saved on step %s", self.current_page.key)


__all__ = ["WizardController"]
