"""Build the contract review summary from the current form values.

:func:`build_summary` is a pure mapping from form state to sections; the
markup helpers rebuild their output wholesale from those sections on every
call, so equal form state always produces identical output.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Final, Iterable, Mapping, Sequence

from config import CURRENCY_SYMBOL


NO_DOCUMENTS: Final[str] = "Sin documentación marcada."
NO_CLAUSES: Final[str] = "Sin cláusulas marcadas."

CLAUSE_SENTENCES: Final[tuple[tuple[str, str], ...]] = (
    (
        "clausula_garantia",
        "El vendedor declara estar al corriente de impuestos, multas y cargas administrativas.",
    ),
    (
        "clausula_revision",
        "El comprador reconoce haber probado el vehículo y acepta su estado actual.",
    ),
    ("clausula_datos", "Autorización para el tratamiento de datos personales."),
)

_CENTS: Final[Decimal] = Decimal("0.01")


@dataclass(frozen=True)
class SummaryEntry:
    label: str
    value: str


@dataclass(frozen=True)
class SummarySection:
    title: str
    entries: tuple[SummaryEntry, ...]


def _text(form_state: Mapping[str, object], name: str) -> str:
    value = form_state.get(name)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def join_present(values: Iterable[str], separator: str) -> str:
    """Join the non-empty ``values`` with ``separator``."""

    return separator.join(value for value in values if value)


def format_currency(value: str | None) -> str:
    """Format ``value`` as euros in Spanish notation (``1.500,00 €``).

    Empty or blank input yields ``""``; input that is not a finite number
    is returned unchanged. Amounts of any magnitude are rounded exactly.
    """

    if not value or not value.strip():
        return ""
    if "_" in value:
        return value
    try:
        number = Decimal(value.strip())
    except InvalidOperation:
        return value
    if not number.is_finite():
        return value
    with localcontext() as ctx:
        # Room for every integer digit plus the two cents.
        ctx.prec = max(ctx.prec, number.adjusted() + 3)
        try:
            rounded = number.quantize(_CENTS, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            return value
    formatted = f"{rounded.copy_abs():,.2f}"
    formatted = formatted.replace(",", "X").replace(".", ",").replace("X", ".")
    sign = "-" if rounded < 0 else ""
    return f"{sign}{formatted} {CURRENCY_SYMBOL}"


def _documents(form_state: Mapping[str, object]) -> str:
    selected = form_state.get("documentos") or []
    if isinstance(selected, str):
        selected = [selected]
    labels = [str(item) for item in selected]
    return ", ".join(labels) if labels else NO_DOCUMENTS


def _clauses(form_state: Mapping[str, object]) -> str:
    sentences = [sentence for name, sentence in CLAUSE_SENTENCES if form_state.get(name)]
    return " · ".join(sentences) if sentences else NO_CLAUSES


def _party_entries(form_state: Mapping[str, object], prefix: str) -> list[tuple[str, str]]:
    return [
        ("Nombre", _text(form_state, f"{prefix}_nombre")),
        ("DNI/NIE", _text(form_state, f"{prefix}_dni")),
        ("Email", _text(form_state, f"{prefix}_email")),
        ("Teléfono", _text(form_state, f"{prefix}_telefono")),
        ("Domicilio", _text(form_state, f"{prefix}_direccion")),
    ]


def _section(title: str, pairs: Sequence[tuple[str, str]]) -> SummarySection:
    entries = tuple(SummaryEntry(label, value) for label, value in pairs if value)
    return SummarySection(title=title, entries=entries)


def build_summary(form_state: Mapping[str, object]) -> tuple[SummarySection, ...]:
    """Return the five summary sections for ``form_state``."""

    def get(name: str) -> str:
        return _text(form_state, name)

    contract = [
        ("Ciudad de formalización", get("ciudad_formalizacion")),
        ("Fecha del contrato", get("fecha_contrato")),
        ("Lugar y hora de entrega", join_present([get("lugar_entrega"), get("hora_entrega")], " - ")),
    ]

    mileage = get("vehiculo_km")
    vehicle = [
        ("Matrícula", get("vehiculo_matricula")),
        ("Marca y modelo", join_present([get("vehiculo_marca"), get("vehiculo_modelo")], " - ")),
        ("Año", get("vehiculo_anio")),
        ("Nº bastidor", get("vehiculo_bastidor")),
        ("Kilometraje", f"{mileage} km" if mileage else ""),
        ("Combustible", get("vehiculo_combustible")),
        ("ITV vigente hasta", get("vehiculo_itv")),
        ("Documentación entregada", _documents(form_state)),
    ]

    conditions = [
        ("Precio de venta", format_currency(get("precio"))),
        ("Señal o depósito", format_currency(get("deposito"))),
        ("Forma de pago", get("forma_pago")),
        ("Fecha prevista de pago", get("fecha_pago")),
        ("Observaciones", get("observaciones")),
        ("Cláusulas aceptadas", _clauses(form_state)),
        ("Lugar y fecha de firma", join_present([get("lugar_firma"), get("fecha_firma")], ", ")),
    ]

    return (
        _section("Datos del contrato", contract),
        _section("Vendedor", _party_entries(form_state, "vendedor")),
        _section("Comprador", _party_entries(form_state, "comprador")),
        _section("Vehículo", vehicle),
        _section("Condiciones económicas", conditions),
    )


def render_summary_html(sections: Iterable[SummarySection]) -> str:
    """Render ``sections`` as the summary markup shown on the last step."""

    parts: list[str] = []
    for section in sections:
        items = "".join(
            f"<li><strong>{html.escape(entry.label)}:</strong> {html.escape(entry.value)}</li>"
            for entry in section.entries
        )
        parts.append(
            "<section class='summary__section'>"
            f"<h3>{html.escape(section.title)}</h3>"
            f"<ul class='summary__list'>{items}</ul>"
            "</section>"
        )
    return "".join(parts)


def render_summary_text(sections: Iterable[SummarySection]) -> str:
    """Render ``sections`` as plain text for copying."""

    blocks: list[str] = []
    for section in sections:
        lines = [section.title.upper()]
        lines.extend(f"- {entry.label}: {entry.value}" for entry in section.entries)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


__all__ = [
    "CLAUSE_SENTENCES",
    "NO_CLAUSES",
    "NO_DOCUMENTS",
    "SummaryEntry",
    "SummarySection",
    "build_summary",
    "format_currency",
    "join_present",
    "render_summary_html",
    "render_summary_text",
]
