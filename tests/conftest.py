from pathlib import Path
import sys
from dataclasses import dataclass

import streamlit as st

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@dataclass
class _SessionDict(dict[str, object]):
    """Lightweight replacement for ``st.session_state`` during tests."""

    def clear(self) -> None:  # type: ignore[override]
        super().clear()


@pytest.fixture(autouse=True)
def _stub_streamlit_session_state(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace Streamlit's runtime-bound session state with a plain dictionary."""

    session_state = _SessionDict()
    monkeypatch.setattr(st, "session_state", session_state, raising=False)
    yield


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def filled_form() -> dict[str, object]:
    """Form state in which every required field holds a valid value."""

    return {
        "ciudad_formalizacion": "Madrid",
        "fecha_contrato": "2026-10-18",
        "vendedor_nombre": "Ana López",
        "vendedor_dni": "12345678Z",
        "vendedor_direccion": "Calle Mayor 1",
        "comprador_nombre": "Luis Pérez",
        "comprador_dni": "X1234567L",
        "comprador_direccion": "Calle Sol 2",
        "vehiculo_matricula": "1234 ABC",
        "vehiculo_marca": "Seat",
        "vehiculo_modelo": "Ibiza",
        "precio": "1500",
        "forma_pago": "Transferencia bancaria",
        "lugar_firma": "Madrid",
        "fecha_firma": "2026-10-20",
        "documentos": [],
    }
