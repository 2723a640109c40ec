"""Configuración del logging y utilidades de texto para el log."""

import logging
from typing import Any

LOG_FORMAT = "%(asctime)s  |  %(levelname)s  |  %(name)s  |  %(message)s"


def safe_text(value: Any, max_len: int = 300) -> str:
    """Texto de una sola línea y longitud acotada, apto para el log."""
    try:
        text = str(value)
    except Exception:
        text = repr(value)
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(text) > max_len:
        return text[: max_len - 3] + "..."
    return text


def setup_logging(level: str = "INFO") -> None:
    """Configura el logging raíz una sola vez (Streamlit re-ejecuta el script)."""
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
