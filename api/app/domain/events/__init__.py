"""
Eventos observables del dominio.
"""
from app.domain.events.event_logger import EventKind, IEventLogger

__all__ = ["EventKind", "IEventLogger"]
