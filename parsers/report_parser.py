"""Parser del JSON diario de resultados de backup.

Formato esperado: un arreglo de objetos con al menos
client, status, subject, body, date (timestamp ISO) y opcionalmente mailLink.
"""

import logging
from typing import Any, Optional

from dateutil import parser as date_parser

from models.report_data import ReportEntry
from utils.log import safe_text

logger = logging.getLogger(__name__)


def date_key(value: str) -> str:
    """Retorna la parte YYYY-MM-DD de un timestamp ISO."""
    return str(value).split("T")[0].strip()


def _text(record: dict, key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def _parse_date(value: Any):
    if not value:
        return None
    try:
        return date_parser.isoparse(str(value))
    except (ValueError, OverflowError):
        logger.warning("Fecha inválida en el reporte: %s", safe_text(value))
        return None


def parse_entry(record: dict) -> ReportEntry:
    """Convierte un objeto del JSON en un ReportEntry."""
    status = record.get("status")
    mail_link: Optional[str] = record.get("mailLink") or None
    raw_date = _text(record, "date")

    return ReportEntry(
        client=_text(record, "client").strip(),
        status=status if status is None else str(status),
        subject=_text(record, "subject"),
        body=_text(record, "body"),
        date=_parse_date(raw_date),
        raw_date=raw_date,
        mail_link=str(mail_link) if mail_link else None,
    )


def parse_report_payload(payload: Any, expected_date: Optional[str] = None) -> list[ReportEntry]:
    """Parsea el documento completo de un día.

    Lanza ValueError si el documento no es un arreglo. Los elementos que no
    son objetos se ignoran, igual que las líneas mal formadas de un CSV.
    """
    if not isinstance(payload, list):
        raise ValueError(f"se esperaba un arreglo JSON, se recibió {type(payload).__name__}")

    entries = []
    for i, record in enumerate(payload):
        if not isinstance(record, dict):
            logger.warning("Registro %d ignorado (no es un objeto): %s", i, safe_text(record))
            continue

        entry = parse_entry(record)
        if expected_date and entry.raw_date and date_key(entry.raw_date) != expected_date:
            logger.debug("Entrada de %s con fecha %s en el reporte del %s",
                         entry.client, entry.raw_date, expected_date)
        entries.append(entry)

    return entries
