from __future__ import annotations

from .base import FieldKind, FormField, WizardPage


FUEL_OPTIONS: tuple[str, ...] = (
    "Gasolina",
    "Diésel",
    "Híbrido",
    "Eléctrico",
    "GLP",
    "Otro",
)

DOCUMENT_OPTIONS: tuple[str, ...] = (
    "Permiso de circulación",
    "Ficha técnica",
    "Informe de la DGT",
    "Último recibo del IVTM",
    "Libro de mantenimiento",
    "Segunda llave",
)


PAGE = WizardPage(
    key="vehicle",
    label="Vehículo",
    panel_header="Datos del vehículo",
    panel_subheader="Identificación, estado y documentación",
    fields=(
        FormField("vehiculo_matricula", "Matrícula", required=True, placeholder="1234 ABC"),
        FormField("vehiculo_marca", "Marca", required=True),
        FormField("vehiculo_modelo", "Modelo", required=True),
        FormField(
            "vehiculo_anio",
            "Año de matriculación",
            pattern=r"(19|20)[0-9]{2}",
            pattern_hint="Año con cuatro cifras.",
        ),
        FormField(
            "vehiculo_bastidor",
            "Nº de bastidor (VIN)",
            pattern=r"[A-HJ-NPR-Za-hj-npr-z0-9]{17}",
            pattern_hint="17 caracteres sin I, O ni Q.",
        ),
        FormField("vehiculo_km", "Kilometraje", FieldKind.NUMBER, min_value=0),
        FormField("vehiculo_combustible", "Combustible", FieldKind.SELECT, options=FUEL_OPTIONS),
        FormField("vehiculo_itv", "ITV vigente hasta", FieldKind.DATE),
        FormField("documentos", "Documentación entregada", FieldKind.CHECKBOX_GROUP, options=DOCUMENT_OPTIONS),
    ),
)
