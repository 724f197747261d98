"""Conversion between widget values and the string-based form state.

The form state follows HTML form semantics: every field maps to a string,
dates are ISO ``YYYY-MM-DD``, times ``HH:MM``, a checked checkbox is ``"on"``
and an unchecked one is absent, and the checkbox group maps to the list of
selected labels in declaration order.
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Iterable, Mapping

from wizard_pages import WIZARD_PAGES, iter_fields
from wizard_pages.base import FieldKind, FormField, WizardPage


def normalize_widget_value(field: FormField, raw: Any) -> str | list[str] | None:
    """Return the form-state value for a widget value, ``None`` when absent."""

    if field.kind is FieldKind.CHECKBOX:
        return "on" if raw else None
    if field.kind is FieldKind.CHECKBOX_GROUP:
        selected = set(raw or ())
        return [option for option in field.options if option in selected]
    if raw is None:
        return ""
    if isinstance(raw, datetime):
        return raw.date().isoformat()
    if isinstance(raw, date):
        return raw.isoformat()
    if isinstance(raw, time):
        return raw.strftime("%H:%M")
    return raw if isinstance(raw, str) else str(raw)


def widget_value(field: FormField, stored: Any) -> Any:
    """Return the value a widget for ``field`` should display for ``stored``."""

    if field.kind is FieldKind.CHECKBOX:
        return stored == "on"
    if field.kind is FieldKind.CHECKBOX_GROUP:
        return [item for item in (stored or []) if item in field.options]
    if field.kind is FieldKind.SELECT:
        return stored if stored in field.options else None
    if field.kind is FieldKind.DATE:
        try:
            return date.fromisoformat(stored) if stored else None
        except ValueError:
            return None
    if field.kind is FieldKind.TIME:
        try:
            return time.fromisoformat(stored) if stored else None
        except ValueError:
            return None
    return "" if stored is None else str(stored)


def store_widget_value(form_data: dict[str, Any], field: FormField, raw: Any) -> None:
    """Write the normalised widget value for ``field`` into ``form_data``."""

    value = normalize_widget_value(field, raw)
    if value is None:
        form_data.pop(field.name, None)
    else:
        form_data[field.name] = value


def collect_form_data(
    form_data: Mapping[str, Any],
    pages: Iterable[WizardPage] = WIZARD_PAGES,
) -> dict[str, Any]:
    """Return a snapshot of every declared field of ``pages``.

    Text-like fields default to ``""``, the checkbox group to ``[]`` and
    unchecked checkboxes are left out.
    """

    snapshot: dict[str, Any] = {}
    for field in iter_fields(tuple(pages)):
        stored = form_data.get(field.name)
        if field.kind is FieldKind.CHECKBOX:
            if stored == "on":
                snapshot[field.name] = "on"
        elif field.kind is FieldKind.CHECKBOX_GROUP:
            snapshot[field.name] = list(stored or [])
        else:
            snapshot[field.name] = "" if stored is None else str(stored)
    return snapshot


__all__ = [
    "collect_form_data",
    "normalize_widget_value",
    "store_widget_value",
    "widget_value",
]
