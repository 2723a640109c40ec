"""Aplicación principal - Rapport de Sauvegarde.

Dashboard diario de resultados de backup por cliente, agrupados por status,
con navegación día a día y vista de detalle. Interfaz web con Streamlit.
"""

import streamlit as st
import html
import os
import sys

# Agregar el directorio raíz al path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from models.report_data import CATEGORIES, CATEGORY_LABELS
from services.report_source import make_fetcher
from services.report_store import ReportStore
from utils.calculations import (
    build_summary_frame,
    category_counts,
    format_entry_time,
    format_pct,
    get_category_color,
    get_rate_color,
    success_rate,
)
from utils.log import setup_logging

# ══════════════════════════════════════════════════════════════
# CONFIGURACIÓN
# ══════════════════════════════════════════════════════════════

setup_logging(config.LOG_LEVEL)


def get_report_location() -> str:
    """Ubicación del reporte: st.secrets tiene prioridad sobre config/entorno."""
    try:
        return st.secrets["reports"]["location"]
    except (KeyError, FileNotFoundError):
        return config.REPORT_LOCATION


st.set_page_config(
    page_title="Rapport de Sauvegarde",
    page_icon="🛡️",
    layout="wide",
)

# CSS Custom (Dark Default)
st.markdown("""
<style>
    html, body, [class*="css"] { font-family: 'Inter', sans-serif; color: #e6edf3; }

    .main-header {
        display: flex; align-items: center; justify-content: center; gap: 16px;
        padding: 8px 0 16px 0; border-bottom: 1px solid #30363d; margin-bottom: 24px;
    }
    .header-title { font-size: 28px; font-weight: 700; color: #e6edf3; text-align: center; }
    .header-sub { font-size: 12px; color: #8b949e; text-align: center; }

    .cat-title { font-size: 16px; font-weight: 600; padding: 6px 0; border-bottom: 2px solid; margin-bottom: 8px; }
    .cat-empty { color: #484f58; font-size: 14px; }

    .detail-card {
        background: #1c2128; border: 1px solid #30363d; border-radius: 6px; padding: 16px;
    }
    .detail-subject { font-size: 16px; font-weight: 600; margin-bottom: 8px; }
    .detail-meta { font-size: 12px; color: #8b949e; margin-bottom: 12px; }

    div[data-testid="stMetric"], [data-testid="stDataFrame"] {
        background-color: #1c2128; border: 1px solid #30363d !important;
        border-radius: 6px !important; box-shadow: none !important;
    }

    #MainMenu { visibility: hidden; }
    footer { visibility: hidden; }
</style>
""", unsafe_allow_html=True)


# ══════════════════════════════════════════════════════════════
# ESTADO DE SESIÓN
# ══════════════════════════════════════════════════════════════

if "report_store" not in st.session_state:
    store = ReportStore(make_fetcher(get_report_location(), config.FETCH_TIMEOUT))
    store.initialize()
    st.session_state.report_store = store

store: ReportStore = st.session_state.report_store


# ══════════════════════════════════════════════════════════════
# NAVEGACIÓN
# ══════════════════════════════════════════════════════════════

col_prev, col_date, col_next = st.columns([1, 6, 1])

if col_prev.button("⬅️", use_container_width=True, key="nav_prev"):
    store.navigate(-1)

if col_next.button("➡️", use_container_width=True, key="nav_next", disabled=not store.can_navigate(1)):
    store.navigate(1)

col_date.markdown(f"""
<div class="main-header">
    <div>
        <div class="header-title">{store.selected_date.isoformat()}</div>
        <div class="header-sub">Rapport de Sauvegarde</div>
    </div>
</div>
""", unsafe_allow_html=True)

if store.loading:
    with st.spinner("Chargement..."):
        store.wait(timeout=config.FETCH_TIMEOUT + 5)

if store.load_error:
    reason = store.last_error.reason if store.last_error else ""
    st.warning(f"Rapport indisponible pour le {store.selected_date.isoformat()}. {reason}", icon="⚠️")


# ══════════════════════════════════════════════════════════════
# RESUMEN DEL DÍA
# ══════════════════════════════════════════════════════════════

groups = store.groups()
counts = category_counts(groups)
rate = success_rate(groups)

metric_cols = st.columns(len(CATEGORIES) + 1)
for col, cat in zip(metric_cols, CATEGORIES):
    col.metric(CATEGORY_LABELS[cat], counts[cat])
metric_cols[-1].markdown(
    f'<div style="font-size:12px; color:#8b949e;">Taux de succès</div>'
    f'<div style="font-size:28px; font-weight:700; color:{get_rate_color(rate)}">{format_pct(rate)}</div>',
    unsafe_allow_html=True,
)

with st.expander("Résumé", expanded=False):
    st.dataframe(build_summary_frame(groups), use_container_width=True, hide_index=True)


# ══════════════════════════════════════════════════════════════
# COLUMNAS POR CATEGORÍA
# ══════════════════════════════════════════════════════════════

columns = st.columns(len(CATEGORIES))
for col, cat in zip(columns, CATEGORIES):
    with col:
        color = get_category_color(cat)
        st.markdown(
            f'<div class="cat-title" style="border-color:{color}; color:{color}">{CATEGORY_LABELS[cat]}</div>',
            unsafe_allow_html=True,
        )
        if not groups[cat]:
            st.markdown('<div class="cat-empty">—</div>', unsafe_allow_html=True)
            continue

        for i, entry in enumerate(groups[cat]):
            label = f"{entry.client} · {entry.status or '—'} · {format_entry_time(entry)}"
            if st.button(label, key=f"entry_{cat.value}_{i}", use_container_width=True):
                store.select_entry(entry)


# ══════════════════════════════════════════════════════════════
# DETALLE
# ══════════════════════════════════════════════════════════════

selected = store.selected_entry
if selected is not None:
    st.markdown("---")
    st.subheader(selected.client)
    st.markdown(f"""
    <div class="detail-card">
        <div class="detail-subject">{html.escape(selected.subject) or "(sans objet)"}</div>
        <div class="detail-meta">{html.escape(selected.status or "—")} · {format_entry_time(selected)}</div>
    </div>
    """, unsafe_allow_html=True)
    st.text(selected.body)

    col_link, col_close = st.columns([4, 1])
    if selected.mail_link:
        col_link.link_button("Voir mail", selected.mail_link)
    if col_close.button("Fermer", key="close_detail", use_container_width=True):
        store.clear_selection()
        st.rerun()
