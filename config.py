"""Central configuration for the vehicle sale contract wizard.

Values are read from the environment (optionally populated from a ``.env``
file) once at import time. Malformed values fall back to the defaults below
and emit a warning instead of failing the app start.
"""

import logging
import os

from dotenv import load_dotenv

load_dotenv()


logger = logging.getLogger(__name__)


DEFAULT_TOAST_DURATION_SECONDS = 2.8
DEFAULT_LOG_LEVEL = "INFO"

CURRENCY_SYMBOL = "€"

SAVE_TOAST_MESSAGE = "¡Borrador guardado! Puedes imprimirlo o copiar la información."


def _read_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring non-positive %s=%r; using %s", name, raw, default)
        return default
    return value


def _read_log_level(name: str, default: str) -> int:
    raw = (os.getenv(name) or default).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    logger.warning("Ignoring unknown %s=%r; using %s", name, raw, default)
    return logging.getLevelName(default)


def _is_truthy_flag(raw: str | None) -> bool:
    return (raw or "").strip().lower() in ("1", "true", "yes", "on")


APP_TITLE = os.getenv("APP_TITLE", "Contrato de compraventa de vehículo")
LOG_LEVEL = _read_log_level("LOG_LEVEL", DEFAULT_LOG_LEVEL)
TOAST_DURATION_SECONDS = _read_float("TOAST_DURATION_SECONDS", DEFAULT_TOAST_DURATION_SECONDS)
DEBUG = _is_truthy_flag(os.getenv("WIZARD_DEBUG"))
