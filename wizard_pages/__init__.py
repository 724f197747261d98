"""Wizard step metadata registry in canonical order."""

from __future__ import annotations

from .base import FieldKind, FormField, WizardPage
from .conditions import PAGE as CONDITIONS_PAGE
from .contract import PAGE as CONTRACT_PAGE
from .parties import BUYER_PAGE, SELLER_PAGE
from .vehicle import PAGE as VEHICLE_PAGE


WIZARD_PAGES: tuple[WizardPage, ...] = (
    CONTRACT_PAGE,
    SELLER_PAGE,
    BUYER_PAGE,
    VEHICLE_PAGE,
    CONDITIONS_PAGE,
)


def iter_fields(pages: tuple[WizardPage, ...] = WIZARD_PAGES) -> tuple[FormField, ...]:
    """Return every field of ``pages`` in step order."""

    return tuple(field for page in pages for field in page.fields)


__all__ = ["FieldKind", "FormField", "WizardPage", "WIZARD_PAGES", "iter_fields"]
