"""Render wizard form fields as Streamlit widgets bound to the form state."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any

import streamlit as st

from constants.keys import UIKeys
from wizard.form_state import store_widget_value, widget_value
from wizard_pages.base import FieldKind, FormField

__all__ = ["render_form_field"]


def _ensure_widget_state(key: str, value: Any) -> None:
    """Prime ``st.session_state[key]`` when the widget has no value yet."""

    if key not in st.session_state:
        st.session_state[key] = value


def _build_on_change(
    field: FormField,
    key: str,
    form_data: MutableMapping[str, Any],
    on_input: Callable[[], None] | None,
) -> Callable[[], None]:
    def _callback() -> None:
        store_widget_value(form_data, field, st.session_state.get(key))
        if on_input is not None:
            on_input()

    return _callback


def _label(field: FormField) -> str:
    return f"{field.label} *" if field.required else field.label


def render_form_field(
    field: FormField,
    form_data: MutableMapping[str, Any],
    *,
    on_input: Callable[[], None] | None = None,
) -> Any:
    """Render the widget for ``field`` and sync edits back into ``form_data``.

    Widgets of inactive steps are not rendered, so Streamlit forgets their
    keys; ``form_data`` is the source the widget is primed from again.
    """

    key = UIKeys.field(field.name)
    _ensure_widget_state(key, widget_value(field, form_data.get(field.name)))
    kwargs: dict[str, Any] = {
        "key": key,
        "on_change": _build_on_change(field, key, form_data, on_input),
        "help": field.help,
    }
    label = _label(field)

    if field.kind is FieldKind.CHECKBOX:
        return st.checkbox(label, **kwargs)
    if field.kind is FieldKind.CHECKBOX_GROUP:
        return st.multiselect(label, list(field.options), placeholder="Selecciona los documentos", **kwargs)
    if field.kind is FieldKind.SELECT:
        return st.selectbox(label, list(field.options), index=None, placeholder="Selecciona una opción", **kwargs)
    if field.kind is FieldKind.DATE:
        return st.date_input(label, value=None, format="DD/MM/YYYY", **kwargs)
    if field.kind is FieldKind.TIME:
        return st.time_input(label, value=None, **kwargs)
    if field.kind is FieldKind.TEXTAREA:
        return st.text_area(label, placeholder=field.placeholder, **kwargs)
    return st.text_input(label, placeholder=field.placeholder, **kwargs)
