"""Obtención del reporte diario: HTTP(S) o archivo local."""

import json
import logging
from datetime import date
from functools import partial
from pathlib import Path
from urllib.parse import unquote, urlparse

import requests

import config
from models.report_data import ReportEntry
from parsers.report_parser import parse_report_payload
from utils.log import safe_text

logger = logging.getLogger(__name__)

REPORT_FILENAME = "rapport_{date}.json"


class ReportUnavailable(Exception):
    """El reporte de un día no pudo obtenerse o no es válido.

    Cubre errores de red, timeout, respuestas no 2xx, archivo inexistente
    y JSON mal formado.
    """

    def __init__(self, location: str, reason: str):
        super().__init__(f"{location}: {reason}")
        self.location = location
        self.reason = reason


def build_report_location(base: str, report_date: date) -> str:
    """Construye la ubicación del reporte para una fecha.

    Si `base` trae el marcador "{date}" se formatea con la fecha ISO; si no,
    se le agrega rapport_<fecha>.json.
    """
    iso = report_date.isoformat()
    if "{date}" in base:
        return base.replace("{date}", iso)
    filename = REPORT_FILENAME.format(date=iso)
    if _is_http(base):
        return base.rstrip("/") + "/" + filename
    return str(Path(base) / filename)


def _is_http(location: str) -> bool:
    return urlparse(location).scheme in ("http", "https")


def _read_http(location: str, timeout: float):
    try:
        resp = requests.get(location, timeout=timeout)
        resp.raise_for_status()
    except requests.Timeout as e:
        raise ReportUnavailable(location, f"timeout tras {timeout}s") from e
    except requests.HTTPError as e:
        raise ReportUnavailable(location, f"HTTP {getattr(e.response, 'status_code', '?')}") from e
    except requests.RequestException as e:
        raise ReportUnavailable(location, f"error de red: {e}") from e

    try:
        return resp.json()
    except (ValueError, RecursionError) as e:
        raise ReportUnavailable(location, f"JSON inválido: {safe_text(resp.text, 120)}") from e


def _read_file(location: str):
    parsed = urlparse(location)
    path = Path(unquote(parsed.path)) if parsed.scheme == "file" else Path(location)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise ReportUnavailable(location, "archivo inexistente") from e
    except OSError as e:
        raise ReportUnavailable(location, f"no se pudo leer: {e}") from e
    except (ValueError, RecursionError) as e:
        raise ReportUnavailable(location, f"JSON inválido: {e}") from e


def fetch_report(report_date: date, location: str = None, timeout: float = None) -> list[ReportEntry]:
    """Descarga y parsea el reporte de `report_date`.

    Cualquier falla se traduce a ReportUnavailable.
    """
    base = location or config.REPORT_LOCATION
    timeout = config.FETCH_TIMEOUT if timeout is None else timeout
    target = build_report_location(base, report_date)

    logger.info("Cargando reporte %s", target)
    payload = _read_http(target, timeout) if _is_http(target) else _read_file(target)

    try:
        return parse_report_payload(payload, expected_date=report_date.isoformat())
    except ValueError as e:
        raise ReportUnavailable(target, str(e)) from e


def make_fetcher(location: str = None, timeout: float = None):
    """Fetcher de un solo argumento (la fecha) para ReportStore."""
    return partial(fetch_report, location=location, timeout=timeout)
