from __future__ import annotations

from .base import FieldKind, FormField, WizardPage


PAGE = WizardPage(
    key="contract",
    label="Contrato",
    panel_header="Datos del contrato",
    panel_subheader="Dónde y cuándo se formaliza la compraventa",
    fields=(
        FormField("ciudad_formalizacion", "Ciudad de formalización", required=True, placeholder="Madrid"),
        FormField("fecha_contrato", "Fecha del contrato", FieldKind.DATE, required=True),
        FormField("lugar_entrega", "Lugar de entrega del vehículo"),
        FormField("hora_entrega", "Hora de entrega", FieldKind.TIME),
    ),
)
