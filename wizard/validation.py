"""Constraint validation for the fields of a wizard step.

Only required fields take part in step validation. Each one is checked
against the rules declared on its :class:`~wizard_pages.base.FormField`, in
the order the step declares them, and the first failure stops the check.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import date, time
from decimal import Decimal, InvalidOperation
from typing import Final, Mapping

from pydantic import EmailStr, ValidationError
from pydantic.type_adapter import TypeAdapter

from wizard_pages.base import FieldKind, FormField, WizardPage

logger = logging.getLogger(__name__)

_EMAIL_ADAPTER: Final[TypeAdapter[EmailStr]] = TypeAdapter(EmailStr)

VALUE_MISSING: Final[str] = "Completa este campo."
CHECKBOX_MISSING: Final[str] = "Marca esta casilla si deseas continuar."
SELECTION_MISSING: Final[str] = "Selecciona al menos una opción."
TYPE_MISMATCH_EMAIL: Final[str] = "Introduce una dirección de correo electrónico válida."
PATTERN_MISMATCH: Final[str] = "Utiliza un formato que coincida con el solicitado."
BAD_DATE: Final[str] = "Introduce una fecha válida."
BAD_TIME: Final[str] = "Introduce una hora válida."
BAD_NUMBER: Final[str] = "Introduce un número."
RANGE_UNDERFLOW: Final[str] = "El valor debe ser superior o igual a {minimum}."


@dataclass(frozen=True)
class StepValidation:
    """Outcome of validating one step: valid, or the first offending field."""

    valid: bool
    field: FormField | None = None
    message: str | None = None

    def __bool__(self) -> bool:
        return self.valid

    @property
    def report(self) -> str | None:
        """Return ``"<label>: <message>"`` for an invalid result."""

        if self.valid or self.field is None:
            return None
        return f"{self.field.label}: {self.message}"


VALID: Final[StepValidation] = StepValidation(valid=True)


def is_value_present(value: object) -> bool:
    """Return ``True`` when ``value`` counts as filled in."""

    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) > 0
    return True


def _format_minimum(minimum: float) -> str:
    return f"{minimum:g}".replace(".", ",")


def _check_number(field: FormField, value: str) -> str | None:
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return BAD_NUMBER
    if not number.is_finite():
        return BAD_NUMBER
    if field.min_value is not None and number < Decimal(str(field.min_value)):
        return RANGE_UNDERFLOW.format(minimum=_format_minimum(field.min_value))
    return None


def _check_type(field: FormField, value: str) -> str | None:
    if field.kind is FieldKind.EMAIL:
        try:
            _EMAIL_ADAPTER.validate_python(value.strip())
        except (ValidationError, TypeError):
            return TYPE_MISMATCH_EMAIL
    elif field.kind is FieldKind.DATE:
        try:
            date.fromisoformat(value)
        except ValueError:
            return BAD_DATE
    elif field.kind is FieldKind.TIME:
        try:
            time.fromisoformat(value)
        except ValueError:
            return BAD_TIME
    elif field.kind is FieldKind.NUMBER:
        return _check_number(field, value)
    elif field.kind is FieldKind.SELECT and field.options and value not in field.options:
        return VALUE_MISSING
    return None


def validate_field(field: FormField, value: object) -> str | None:
    """Return the validation message for ``value`` or ``None`` when valid."""

    if field.kind is FieldKind.CHECKBOX:
        if field.required and value != "on":
            return CHECKBOX_MISSING
        return None
    if field.kind is FieldKind.CHECKBOX_GROUP:
        if field.required and not is_value_present(value):
            return SELECTION_MISSING
        return None

    if not is_value_present(value):
        return VALUE_MISSING if field.required else None
    text = value if isinstance(value, str) else str(value)
    type_error = _check_type(field, text)
    if type_error:
        return type_error
    if field.pattern and re.fullmatch(field.pattern, text.strip()) is None:
        if field.pattern_hint:
            return f"{PATTERN_MISMATCH} {field.pattern_hint}"
        return PATTERN_MISMATCH
    return None


def validate_step(page: WizardPage, form_state: Mapping[str, object]) -> StepValidation:
    """Validate the required fields of ``page`` and stop at the first failure."""

    for field in page.required_fields():
        message = validate_field(field, form_state.get(field.name))
        if message is not None:
            logger.info("Step %s blocked by field %s: %s", page.key, field.name, message)
            return StepValidation(valid=False, field=field, message=message)
    return VALID


__all__ = [
    "StepValidation",
    "VALID",
    "is_value_present",
    "validate_field",
    "validate_step",
]
