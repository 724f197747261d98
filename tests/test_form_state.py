from __future__ import annotations

from datetime import date, time

from wizard.form_state import collect_form_data, normalize_widget_value, store_widget_value, widget_value
from wizard_pages import WIZARD_PAGES, iter_fields
from wizard_pages.base import FieldKind, FormField


_DATE = FormField("fecha", "Fecha", FieldKind.DATE)
_TIME = FormField("hora", "Hora", FieldKind.TIME)
_CHECK = FormField("clausula", "Cláusula", FieldKind.CHECKBOX)
_GROUP = FormField("docs", "Docs", FieldKind.CHECKBOX_GROUP, options=("a", "b", "c"))


def test_collect_includes_every_declared_field() -> None:
    snapshot = collect_form_data({"precio": "1500", "clausula_datos": "on"})
    names = {field.name for field in iter_fields(WIZARD_PAGES)}

    unchecked = {"clausula_garantia", "clausula_revision"}
    assert set(snapshot) == names - unchecked
    assert snapshot["precio"] == "1500"
    assert snapshot["ciudad_formalizacion"] == ""
    assert snapshot["documentos"] == []
    assert snapshot["clausula_datos"] == "on"


def test_widget_values_normalise_to_html_strings() -> None:
    assert normalize_widget_value(_DATE, date(2026, 10, 18)) == "2026-10-18"
    assert normalize_widget_value(_DATE, None) == ""
    assert normalize_widget_value(_TIME, time(9, 30)) == "09:30"
    assert normalize_widget_value(_CHECK, True) == "on"
    assert normalize_widget_value(_CHECK, False) is None
    assert normalize_widget_value(_GROUP, ["c", "a"]) == ["a", "c"]


def test_store_widget_value_drops_unchecked_checkbox() -> None:
    form_data = {"clausula": "on"}

    store_widget_value(form_data, _CHECK, False)

    assert form_data == {}


def test_widget_value_restores_widget_types() -> None:
    assert widget_value(_DATE, "2026-10-18") == date(2026, 10, 18)
    assert widget_value(_DATE, "garbage") is None
    assert widget_value(_TIME, "09:30") == time(9, 30)
    assert widget_value(_CHECK, "on") is True
    assert widget_value(_GROUP, ["b", "zzz"]) == ["b"]
    assert widget_value(FormField("x", "X"), None) == ""
