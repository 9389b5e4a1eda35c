"""
Servicios de aplicación.

Contiene la lógica de negocio reutilizable que no pertenece
a un caso de uso específico.
"""
from app.application.services.upsert_reconciler import (
    ReconcileOutcome,
    ReconcileResult,
    UpsertMode,
    UpsertReconciler,
)

__all__ = [
    "ReconcileOutcome",
    "ReconcileResult",
    "UpsertMode",
    "UpsertReconciler",
]
