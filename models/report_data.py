"""Modelos de datos para el reporte diario de backups."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class Category(Enum):
    """Categoría derivada del status de una entrada. Nunca se almacena."""
    OK = "OK"
    NOK = "NOK"
    ERROR = "ERROR"
    UNKNOWN = "UNKNOWN"


# Orden de las columnas en el dashboard
CATEGORIES = [Category.OK, Category.NOK, Category.ERROR, Category.UNKNOWN]

CATEGORY_LABELS = {
    Category.OK: "OK",
    Category.NOK: "NOK",
    Category.ERROR: "Erreurs /!\\",
    Category.UNKNOWN: "Inconnu",
}


@dataclass
class ReportEntry:
    """Resultado del backup de un cliente para un día."""
    client: str = ""
    status: Optional[str] = None
    subject: str = ""
    body: str = ""
    date: Optional[datetime] = None
    raw_date: str = ""  # timestamp tal como llegó en el JSON
    mail_link: Optional[str] = None
