"""Seller and buyer steps share the same identification fields."""

from __future__ import annotations

from .base import FieldKind, FormField, WizardPage


DNI_NIE_PATTERN = r"[0-9XYZxyz][0-9]{7}[A-Za-z]"
PHONE_PATTERN = r"\+?[0-9 ]{9,15}"


def party_fields(prefix: str) -> tuple[FormField, ...]:
    """Return the identification fields for a contract party."""

    return (
        FormField(f"{prefix}_nombre", "Nombre y apellidos", required=True),
        FormField(
            f"{prefix}_dni",
            "DNI/NIE",
            required=True,
            pattern=DNI_NIE_PATTERN,
            pattern_hint="8 dígitos y letra (DNI) o X/Y/Z, 7 dígitos y letra (NIE).",
            placeholder="12345678Z",
        ),
        FormField(f"{prefix}_email", "Email", FieldKind.EMAIL),
        FormField(
            f"{prefix}_telefono",
            "Teléfono",
            FieldKind.TEL,
            pattern=PHONE_PATTERN,
            pattern_hint="Entre 9 y 15 dígitos.",
        ),
        FormField(f"{prefix}_direccion", "Domicilio", required=True),
    )


SELLER_PAGE = WizardPage(
    key="seller",
    label="Vendedor",
    panel_header="Datos del vendedor",
    panel_subheader="Titular actual del vehículo",
    fields=party_fields("vendedor"),
)

BUYER_PAGE = WizardPage(
    key="buyer",
    label="Comprador",
    panel_header="Datos del comprador",
    panel_subheader="Persona que adquiere el vehículo",
    fields=party_fields("comprador"),
)
