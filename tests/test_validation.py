from __future__ import annotations

import pytest

from wizard.validation import (
    BAD_DATE,
    CHECKBOX_MISSING,
    PATTERN_MISMATCH,
    RANGE_UNDERFLOW,
    TYPE_MISMATCH_EMAIL,
    VALUE_MISSING,
    is_value_present,
    validate_field,
    validate_step,
)
from wizard_pages import WIZARD_PAGES
from wizard_pages.base import FieldKind, FormField, WizardPage


def test_required_empty_field_blocks_step(filled_form: dict[str, object]) -> None:
    filled_form["ciudad_formalizacion"] = "   "

    result = validate_step(WIZARD_PAGES[0], filled_form)

    assert not result
    assert result.field is not None
    assert result.field.name == "ciudad_formalizacion"
    assert result.message == VALUE_MISSING
    assert result.report == f"Ciudad de formalización: {VALUE_MISSING}"


def test_all_required_fields_filled_passes(filled_form: dict[str, object]) -> None:
    for page in WIZARD_PAGES:
        result = validate_step(page, filled_form)
        assert result.valid, (page.key, result.report)
        assert result.report is None


def test_validation_stops_at_first_invalid_field() -> None:
    seller = WIZARD_PAGES[1]

    result = validate_step(seller, {})

    assert result.field is not None
    assert result.field.name == "vendedor_nombre"


def test_optional_invalid_fields_are_not_checked(filled_form: dict[str, object]) -> None:
    filled_form["vendedor_email"] = "not-an-email"
    filled_form["vendedor_telefono"] = "abc"

    assert validate_step(WIZARD_PAGES[1], filled_form).valid


def test_dni_pattern_mismatch(filled_form: dict[str, object]) -> None:
    filled_form["comprador_dni"] = "1234"

    result = validate_step(WIZARD_PAGES[2], filled_form)

    assert result.field is not None
    assert result.field.name == "comprador_dni"
    assert result.message is not None
    assert result.message.startswith(PATTERN_MISMATCH)


def test_email_constraint() -> None:
    field = FormField("correo", "Correo", FieldKind.EMAIL, required=True)

    assert validate_field(field, "ana@example.com") is None
    assert validate_field(field, "ana@") == TYPE_MISMATCH_EMAIL


def test_date_constraint() -> None:
    field = FormField("dia", "Día", FieldKind.DATE, required=True)

    assert validate_field(field, "2026-02-28") is None
    assert validate_field(field, "2026-02-30") == BAD_DATE


def test_number_minimum() -> None:
    field = FormField("precio", "Precio", FieldKind.NUMBER, required=True, min_value=0)

    assert validate_field(field, "1500.50") is None
    assert validate_field(field, "-1") == RANGE_UNDERFLOW.format(minimum="0")
    assert validate_field(field, "mil") is not None


def test_select_requires_known_option() -> None:
    field = FormField("pago", "Pago", FieldKind.SELECT, required=True, options=("Efectivo",))

    assert validate_field(field, "Efectivo") is None
    assert validate_field(field, "Trueque") == VALUE_MISSING


def test_required_checkbox() -> None:
    field = FormField("acepto", "Acepto", FieldKind.CHECKBOX, required=True)
    page = WizardPage(key="x", label="X", panel_header="X", panel_subheader="X", fields=(field,))

    assert validate_step(page, {}).message == CHECKBOX_MISSING
    assert validate_step(page, {"acepto": "on"}).valid


@pytest.mark.parametrize(
    ("value", "expected"),
    [(None, False), ("", False), ("  ", False), ([], False), ("x", True), (["a"], True), (0, True)],
)
def test_is_value_present(value: object, expected: bool) -> None:
    assert is_value_present(value) is expected
