"""Clasificación de entradas del reporte por status."""

import unicodedata
from typing import Iterable, Optional

from models.report_data import CATEGORIES, Category, ReportEntry

OK_STATUSES = ("terminé", "ok", "succès")
NOK_STATUSES = ("échec", "nok", "ko")
ERROR_MARKER = "erreurs"


def _normalize(status) -> str:
    if not isinstance(status, str):
        return ""
    # NFC: "é" puede llegar descompuesto (e + acento combinado) desde el correo
    return unicodedata.normalize("NFC", status).strip().lower()


def categorize_status(status: Optional[str]) -> Category:
    """Mapea un status libre a su categoría.

    Las coincidencias exactas se evalúan antes que la búsqueda de "erreurs";
    gana la primera regla que aplica. Cualquier otro valor (incluido None)
    es UNKNOWN.
    """
    s = _normalize(status)
    if s in OK_STATUSES:
        return Category.OK
    if s in NOK_STATUSES:
        return Category.NOK
    if ERROR_MARKER in s:
        return Category.ERROR
    return Category.UNKNOWN


def categorize(entry: ReportEntry) -> Category:
    return categorize_status(entry.status)


def group_by_category(entries: Iterable[ReportEntry]) -> dict:
    """Agrupa las entradas en las cuatro categorías, respetando el orden original.

    Siempre retorna las cuatro claves, aunque alguna quede vacía.
    """
    groups = {cat: [] for cat in CATEGORIES}
    for entry in entries:
        groups[categorize(entry)].append(entry)
    return groups
