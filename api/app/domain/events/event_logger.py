"""
Contrato del colaborador de observabilidad.

La lógica de reconciliación no escribe logs directamente; emite eventos
estructurados a través de un IEventLogger inyectado.
"""
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict


class EventKind(str, Enum):
    """Tipos de evento emitidos por el servicio."""
    RECEIVED = "received"
    CREATED = "created"
    UPDATED = "updated"
    ERROR = "error"
    READ_REQUESTED = "read_requested"
    READ_COMPLETED = "read_completed"


class IEventLogger(ABC):
    """Receptor de eventos estructurados. No debe alterar el flujo del llamador."""

    @abstractmethod
    def log_event(self, kind: EventKind, payload: Dict[str, Any]) -> None:
        """
        Registra un evento.

        Args:
            kind: Tipo de evento
            payload: Datos del evento (serializables a JSON)
        """
        pass
