"""Estado del dashboard: fecha seleccionada, entradas cargadas y selección.

Toda mutación pasa por las operaciones de ReportStore; el código de render
sólo lee. Las descargas corren en un executor para no bloquear la interfaz y
cada carga lleva un token creciente: sólo se aplica el resultado de la última
carga emitida.
"""

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from datetime import date, timedelta
from typing import Callable, Optional

from models.report_data import ReportEntry
from services.report_source import ReportUnavailable
from utils.classification import group_by_category

logger = logging.getLogger(__name__)


class ReportStore:
    """Dueño único del estado de navegación y del reporte en memoria."""

    def __init__(
        self,
        fetcher: Callable[[date], list],
        today: Callable[[], date] = date.today,
        executor: Optional[Executor] = None,
    ):
        self._fetcher = fetcher
        self._today = today
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="report-load")
        self._lock = threading.Lock()
        self._token = 0
        self._pending: Optional[Future] = None

        self.selected_date: Optional[date] = None
        self.entries: list[ReportEntry] = []
        self.load_error: Optional[bool] = None
        self.last_error: Optional[ReportUnavailable] = None
        self.loading = False
        self.selected_entry: Optional[ReportEntry] = None

    # ── Navegación ──

    def initialize(self) -> Future:
        """Selecciona el día de ayer y lo carga."""
        self.selected_date = self._today() - timedelta(days=1)
        return self.load(self.selected_date)

    def can_navigate(self, delta_days: int) -> bool:
        if self.selected_date is None:
            return False
        return self.selected_date + timedelta(days=delta_days) <= self._today()

    def navigate(self, delta_days: int) -> Optional[Future]:
        """Mueve la fecha seleccionada `delta_days` días de calendario.

        Avanzar más allá de hoy no tiene efecto y retorna None.
        """
        if not self.can_navigate(delta_days):
            logger.debug("Navegación %+d rechazada desde %s", delta_days, self.selected_date)
            return None
        self.selected_date = self.selected_date + timedelta(days=delta_days)
        return self.load(self.selected_date)

    # ── Carga ──

    def load(self, report_date: date) -> Future:
        """Lanza la descarga del reporte de `report_date` sin bloquear.

        Las entradas y la selección actuales se descartan de inmediato. El
        future resuelve a True si el resultado se aplicó, False si llegó tarde.
        """
        with self._lock:
            self._token += 1
            token = self._token
            self.entries = []
            self.selected_entry = None
            self.load_error = None
            self.last_error = None
            self.loading = True

        future = self._executor.submit(self._run_load, token, report_date)
        self._pending = future
        return future

    def _run_load(self, token: int, report_date: date) -> bool:
        with self._lock:
            if token != self._token:
                logger.debug("Carga de %s omitida: ya hay una más reciente", report_date)
                return False

        try:
            entries = self._fetcher(report_date)
        except ReportUnavailable as e:
            return self._finish(token, report_date, [], e)
        except Exception as e:
            # El estado debe quedar asentado aunque el error no sea esperado
            logger.exception("Error inesperado cargando el reporte del %s", report_date)
            self._finish(token, report_date, [],
                         ReportUnavailable(report_date.isoformat(), f"error inesperado: {e!r}"))
            raise
        return self._finish(token, report_date, list(entries), None)

    def _finish(self, token, report_date, entries, error) -> bool:
        with self._lock:
            if token != self._token:
                logger.debug("Resultado obsoleto de %s descartado (token %d, último %d)",
                             report_date, token, self._token)
                return False

            self.entries = entries
            self.load_error = error is not None
            self.last_error = error
            self.loading = False

        if error is not None:
            logger.warning("Reporte del %s no disponible: %s", report_date, error)
        else:
            logger.info("Reporte del %s cargado: %d entradas", report_date, len(entries))
        return True

    def wait(self, timeout: Optional[float] = None) -> None:
        """Espera a que termine la última carga emitida."""
        pending = self._pending
        if pending is not None:
            wait([pending], timeout=timeout)

    # ── Selección ──

    def select_entry(self, entry: ReportEntry) -> None:
        self.selected_entry = entry

    def clear_selection(self) -> None:
        self.selected_entry = None

    def groups(self) -> dict:
        return group_by_category(self.entries)

    def close(self) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=False)
