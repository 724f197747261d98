class UIKeys:
    """Keys for UI widgets in ``st.session_state``."""

    FIELD_PREFIX = "form."
    NAV_PREVIOUS = "ui.nav.previous"
    NAV_NEXT = "ui.nav.next"
    NAV_SUMMARY = "ui.nav.summary"
    NAV_PRINT = "ui.nav.print"
    SUBMIT = "ui.nav.submit"
    RESET = "ui.nav.reset"

    @classmethod
    def field(cls, name: str) -> str:
        """Return the widget key bound to the form field ``name``."""

        return f"{cls.FIELD_PREFIX}{name}"


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    FORM_DATA = "contract_form_data"
    NAVIGATOR = "wizard.navigator"
    TOAST = "wizard.toast"
    SUMMARY_SECTIONS = "data.summary_sections"
    SUMMARY_HTML = "data.summary_html"
    VALIDATION_ERROR = "wizard.validation_error"
    PRINT_REQUESTED = "_wizard_print_requested"
    SESSION_ID = "session_id"
