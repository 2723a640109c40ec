"""Utilidades de cálculo y formato para el resumen del día."""

import pandas as pd

from models.report_data import CATEGORIES, CATEGORY_LABELS, Category, ReportEntry

CATEGORY_COLORS = {
    Category.OK: "#3fb950",
    Category.NOK: "#f85149",
    Category.ERROR: "#d29922",
    Category.UNKNOWN: "#8b949e",
}


def format_pct(value: float) -> str:
    """Formatea un porcentaje con 2 decimales."""
    return f"{value:.2f}%"


def category_counts(groups: dict) -> dict:
    """Cantidad de entradas por categoría, en orden de columnas."""
    return {cat: len(groups.get(cat, [])) for cat in CATEGORIES}


def success_rate(groups: dict) -> float:
    """Porcentaje de clientes en OK sobre el total del día (0 si no hay datos)."""
    counts = category_counts(groups)
    total = sum(counts.values())
    return counts[Category.OK] / total * 100 if total > 0 else 0.0


def get_category_color(category: Category) -> str:
    return CATEGORY_COLORS.get(category, CATEGORY_COLORS[Category.UNKNOWN])


def get_rate_color(pct: float) -> str:
    """Retorna color según la tasa de éxito del día."""
    if pct >= 97:
        return "#00e676"  # Verde
    elif pct >= 90:
        return "#ffab00"  # Amarillo
    elif pct >= 80:
        return "#ff6d00"  # Naranja
    else:
        return "#ff1744"  # Rojo


def format_entry_time(entry: ReportEntry) -> str:
    """Hora local de la entrada (HH:MM:SS), o "—" si no tiene fecha."""
    if entry.date is None:
        return "—"
    dt = entry.date.astimezone() if entry.date.tzinfo else entry.date
    return dt.strftime("%H:%M:%S")


def build_summary_frame(groups: dict) -> pd.DataFrame:
    """Tabla resumen: una fila por categoría con su conteo y clientes."""
    rows = []
    for cat in CATEGORIES:
        entries = groups.get(cat, [])
        rows.append({
            "Catégorie": CATEGORY_LABELS[cat],
            "Nombre": len(entries),
            "Clients": ", ".join(e.client for e in entries),
        })
    return pd.DataFrame(rows, columns=["Catégorie", "Nombre", "Clients"])
