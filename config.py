"""Configuración de despliegue del dashboard."""

import os

# Ubicación del reporte diario. Puede ser una URL (documento remoto) o una ruta
# local; "{date}" se reemplaza por la fecha ISO del día seleccionado.
DEFAULT_REPORT_LOCATION = "public/rapports/rapport_{date}.json"
REPORT_LOCATION = os.environ.get("BACKUP_REPORT_LOCATION", DEFAULT_REPORT_LOCATION)

# Segundos antes de dar por fallida la descarga
FETCH_TIMEOUT = float(os.environ.get("BACKUP_REPORT_TIMEOUT", "10"))

LOG_LEVEL = os.environ.get("BACKUP_REPORT_LOG_LEVEL", "INFO").upper()
