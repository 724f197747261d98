from __future__ import annotations

from .base import FieldKind, FormField, WizardPage


PAYMENT_OPTIONS: tuple[str, ...] = (
    "Transferencia bancaria",
    "Efectivo",
    "Cheque bancario",
    "Financiación",
)


PAGE = WizardPage(
    key="conditions",
    label="Condiciones y resumen",
    panel_header="Condiciones económicas",
    panel_subheader="Precio, pago, cláusulas y firma",
    fields=(
        FormField("precio", "Precio de venta (€)", FieldKind.NUMBER, required=True, min_value=0),
        FormField("deposito", "Señal o depósito (€)", FieldKind.NUMBER, min_value=0),
        FormField("forma_pago", "Forma de pago", FieldKind.SELECT, required=True, options=PAYMENT_OPTIONS),
        FormField("fecha_pago", "Fecha prevista de pago", FieldKind.DATE),
        FormField("observaciones", "Observaciones", FieldKind.TEXTAREA),
        FormField(
            "clausula_garantia",
            "El vendedor declara que el vehículo está libre de cargas, impuestos y multas pendientes.",
            FieldKind.CHECKBOX,
        ),
        FormField(
            "clausula_revision",
            "El comprador ha probado el vehículo y acepta su estado.",
            FieldKind.CHECKBOX,
        ),
        FormField(
            "clausula_datos",
            "Ambas partes autorizan el tratamiento de sus datos personales.",
            FieldKind.CHECKBOX,
        ),
        FormField("lugar_firma", "Lugar de firma", required=True),
        FormField("fecha_firma", "Fecha de firma", FieldKind.DATE, required=True),
    ),
    shows_summary=True,
)
