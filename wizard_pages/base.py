from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class FieldKind(str, Enum):
    """Widget flavour of a form field, mirroring the HTML input types."""

    TEXT = "text"
    EMAIL = "email"
    TEL = "tel"
    DATE = "date"
    TIME = "time"
    NUMBER = "number"
    SELECT = "select"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    CHECKBOX_GROUP = "checkbox_group"


@dataclass(frozen=True)
class FormField:
    """Declarative description of a single form control.

    Constraints are declared here rather than in the widgets so that step
    validation can run without any UI attached. ``pattern`` is matched
    against the whole value, like the HTML ``pattern`` attribute, and
    ``pattern_hint`` is appended to the mismatch message.
    """

    name: str
    label: str
    kind: FieldKind = FieldKind.TEXT
    required: bool = False
    pattern: str | None = None
    pattern_hint: str | None = None
    min_value: float | None = None
    options: Tuple[str, ...] = ()
    placeholder: str | None = None
    help: str | None = None


@dataclass(frozen=True)
class WizardPage:
    """Static metadata describing an individual wizard step.

    The navigator only knows step indices; everything that is rendered for a
    step, and everything that is validated before leaving it, comes from the
    ``WizardPage`` at that index.
    """

    key: str
    label: str
    panel_header: str
    panel_subheader: str
    fields: Tuple[FormField, ...] = ()
    shows_summary: bool = False

    def required_fields(self) -> Iterator[FormField]:
        """Yield the required fields in declaration order."""

        return (field for field in self.fields if field.required)
