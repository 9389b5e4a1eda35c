"""
AuditLogger - Registro estructurado de eventos de sincronización.

Implementación por defecto de IEventLogger sobre loguru:
- Cada evento se escribe como una linea con su payload en JSON
- Los eventos llevan `context="audit"` para poder filtrarlos
- Un archivo diario dedicado en AUDIT_LOG_DIR (ver `initialize`)
"""
import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from loguru import logger

from app.domain.events.event_logger import EventKind, IEventLogger


class AuditLogger(IEventLogger):
    """
    Emisor de eventos de auditoría.

    Uso:
        # Al inicio de la app
        AuditLogger.initialize("logs/audit")

        # En un caso de uso
        audit = AuditLogger()
        audit.log_event(EventKind.RECEIVED, {"id": "BP1"})
    """

    FILE_TIMESTAMP_FORMAT = "%Y-%m-%d"
    LOG_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%f"

    # Eventos que se registran con nivel ERROR
    ERROR_KINDS = frozenset({EventKind.ERROR})

    _sink_id: Optional[int] = None
    _initialized: bool = False

    def __init__(self, source: str = "business_partners"):
        """
        Args:
            source: Nombre del componente que emite los eventos
        """
        self.source = source
        self._logger = logger.bind(context="audit", source=source)

    @classmethod
    def initialize(cls, log_dir: str) -> None:
        """
        Crea el directorio de auditoría y registra el sink diario.
        Debe llamarse al inicio de la aplicación; es idempotente.
        """
        if cls._initialized:
            return

        audit_dir = Path(log_dir)
        audit_dir.mkdir(parents=True, exist_ok=True)

        today = datetime.now().strftime(cls.FILE_TIMESTAMP_FORMAT)
        audit_file = audit_dir / f"audit_{today}.log"

        cls._sink_id = logger.add(
            str(audit_file),
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}",
            filter=lambda record: record["extra"].get("context") == "audit",
            rotation="1 day",
            retention="30 days",
            level="DEBUG"
        )

        cls._initialized = True
        logger.info(f"AuditLogger inicializado en {audit_dir}")

    @classmethod
    def shutdown(cls) -> None:
        """Retira el sink de auditoría (cierre de la aplicación)."""
        if cls._sink_id is not None:
            logger.remove(cls._sink_id)
        cls._sink_id = None
        cls._initialized = False

    def log_event(self, kind: EventKind, payload: Dict[str, Any]) -> None:
        """
        Registra un evento de auditoría.

        Args:
            kind: Tipo de evento
            payload: Datos del evento
        """
        kind = EventKind(kind)
        log_data = {
            "type": kind.value,
            "timestamp": datetime.now().strftime(self.LOG_TIMESTAMP_FORMAT),
            "source": self.source,
            "payload": payload,
        }
        level = "ERROR" if kind in self.ERROR_KINDS else "INFO"
        self._logger.log(
            level,
            f"EVENT {kind.value.upper()}: {json.dumps(log_data, default=str, ensure_ascii=False)}"
        )
