# app.py — vehicle sale contract wizard (Streamlit entrypoint)
from __future__ import annotations

from pathlib import Path
import sys

import streamlit as st

APP_ROOT = Path(__file__).resolve().parent
if str(APP_ROOT) not in sys.path:
    sys.path.insert(0, str(APP_ROOT))

from config import APP_TITLE, LOG_LEVEL  # noqa: E402
from utils.logging_context import configure_logging  # noqa: E402
from wizard import run_wizard  # noqa: E402

configure_logging(level=LOG_LEVEL)

st.set_page_config(
    page_title=APP_TITLE,
    page_icon="🚗",
    layout="centered",
)

st.title(APP_TITLE)
st.caption("Rellena los datos paso a paso y revisa el resumen antes de imprimir.")

run_wizard()
