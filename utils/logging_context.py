"""Session and wizard-step context for log records.

Streamlit serves every browser session from the same process, so each record
carries the ``session_id`` and ``wizard_step`` bound for the code that
emitted it. Values live in context variables and are copied onto records by
a wrapped log record factory.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Mapping

LOG_FORMAT = "%(asctime)s %(levelname)s [session=%(session_id)s step=%(wizard_step)s] %(name)s: %(message)s"
UNBOUND = "-"

_CONTEXT_VARS: Mapping[str, contextvars.ContextVar[str]] = {
    name: contextvars.ContextVar(name, default=UNBOUND) for name in ("session_id", "wizard_step")
}
_FACTORY_MARKER = "_wizard_context"

RecordFactory = Callable[..., logging.LogRecord]


def _clean(value: str | None) -> str:
    return (value or "").strip() or UNBOUND


def _with_context(factory: RecordFactory) -> RecordFactory:
    def _factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = factory(*args, **kwargs)
        for name, var in _CONTEXT_VARS.items():
            setattr(record, name, var.get())
        return record

    setattr(_factory, _FACTORY_MARKER, True)
    return _factory


def configure_logging(*, level: int = logging.INFO) -> None:
    """Set the root level and make every new record carry the wizard context.

    Safe to call on every rerun: the record factory is wrapped only once.
    """

    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    current = logging.getLogRecordFactory()
    if not getattr(current, _FACTORY_MARKER, False):
        logging.setLogRecordFactory(_with_context(current))


def bind_context(*, session_id: str | None = None, wizard_step: str | None = None) -> None:
    """Bind the given values for the rest of the current script run."""

    for name, value in (("session_id", session_id), ("wizard_step", wizard_step)):
        if value is not None:
            _CONTEXT_VARS[name].set(_clean(value))


@contextmanager
def log_context(*, session_id: str | None = None, wizard_step: str | None = None) -> Iterator[None]:
    """Bind values inside the ``with`` block only."""

    tokens = [
        (_CONTEXT_VARS[name], _CONTEXT_VARS[name].set(_clean(value)))
        for name, value in (("session_id", session_id), ("wizard_step", wizard_step))
        if value is not None
    ]
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)


__all__ = ["LOG_FORMAT", "UNBOUND", "bind_context", "configure_logging", "log_context"]
