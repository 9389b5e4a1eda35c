"""
Reconciliador de Business Partners recibidos del ERP.

Decide entre alta y actualización y aplica las reglas de timestamps:
- Alta: created_at = modified_at = ahora
- Actualización: modified_at = ahora, created_at se copia del registro
  almacenado (los timestamps que envie el llamador se descartan)

Cada invocación hace exactamente una lectura y una escritura contra el
repositorio, y confirma la escritura antes de soltar el lock del ID.
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import AsyncIterator, Callable, Optional

from app.domain.entities.business_partner import BusinessPartner
from app.domain.events.event_logger import EventKind, IEventLogger
from app.domain.repositories.business_partner_repository import IBusinessPartnerRepository
from app.infrastructure.locks.partner_lock import PartnerLockManager, PartnerLockTimeoutError
from app.shared.exceptions.base import AppException
from app.shared.exceptions.domain import (
    PartnerLockedException,
    StorageException,
    ValidationException,
)
from app.shared.utils.datetime_utils import DateTimeUtils


# Prefijo de los mensajes de error devueltos al sistema origen
FAILURE_PREFIX = "Failed to process Business Partner"


class ReconcileOutcome(str, Enum):
    """Resultado de una reconciliación."""
    CREATED = "created"
    UPDATED = "updated"


class UpsertMode(str, Enum):
    """Forma de la escritura contra el repositorio."""
    ATOMIC = "atomic"
    READ_THEN_WRITE = "read_then_write"


@dataclass(frozen=True)
class ReconcileResult:
    """Resultado devuelto por UpsertReconciler.reconcile."""
    outcome: ReconcileOutcome
    id: str


class UpsertReconciler:
    """
    Inserta o actualiza un Business Partner por su ID.

    Dependencias:
    - repository: colaborador de almacenamiento
    - event_logger: colaborador de observabilidad
    - clock: fuente de "ahora" (UTC por defecto)
    - lock_manager: si se indica, serializa lectura, escritura y commit por ID
    """

    def __init__(
        self,
        repository: IBusinessPartnerRepository,
        event_logger: IEventLogger,
        clock: Callable[[], datetime] = DateTimeUtils.now_utc,
        mode: UpsertMode = UpsertMode.ATOMIC,
        lock_manager: Optional[PartnerLockManager] = None,
        lock_timeout: Optional[float] = None,
    ):
        self.repository = repository
        self.event_logger = event_logger
        self.clock = clock
        self.mode = UpsertMode(mode)
        self.lock_manager = lock_manager
        self.lock_timeout = lock_timeout

    async def reconcile(self, candidate: BusinessPartner) -> ReconcileResult:
        """
        Reconcilia un partner entrante con el almacenado.

        Args:
            candidate: Partner recibido; sus timestamps se ignoran

        Returns:
            ReconcileResult: CREATED o UPDATED junto con el ID

        Raises:
            ValidationException: Si falta el ID (sin tocar el almacenamiento)
            StorageException: Si falla la lectura o la escritura
            PartnerLockedException: Si no se obtiene el lock del ID a tiempo
        """
        partner_id = candidate.id
        if not isinstance(partner_id, str) or not partner_id.strip():
            error = ValidationException(f"{FAILURE_PREFIX}: ID is required", field="ID")
            self._log_error(partner_id, error)
            raise error

        async with self._key_scope(partner_id):
            existing = await self._find_existing(partner_id)

            if existing is None:
                record = candidate.stamp_created(DateTimeUtils.ensure_utc(self.clock()))
                await self._write(record, existing=None)
                outcome = ReconcileOutcome.CREATED
            else:
                now = DateTimeUtils.next_after(self.clock(), existing.modified_at)
                record = candidate.stamp_updated(existing, now)
                await self._write(record, existing=existing)
                outcome = ReconcileOutcome.UPDATED

        self.event_logger.log_event(
            EventKind.CREATED if outcome is ReconcileOutcome.CREATED else EventKind.UPDATED,
            {
                "id": partner_id,
                "created_at": record.created_at,
                "modified_at": record.modified_at,
            },
        )
        return ReconcileResult(outcome=outcome, id=partner_id)

    @asynccontextmanager
    async def _key_scope(self, partner_id: str) -> AsyncIterator[None]:
        if self.lock_manager is None:
            yield
            return

        try:
            async with self.lock_manager.lock(partner_id, timeout=self.lock_timeout):
                yield
        except PartnerLockTimeoutError as e:
            error = PartnerLockedException(partner_id, e.timeout)
            self._log_error(partner_id, error)
            raise error from e

    async def _find_existing(self, partner_id: str) -> Optional[BusinessPartner]:
        try:
            return await self.repository.find_by_id(partner_id)
        except Exception as e:
            raise self._storage_error(partner_id, "find_by_id", e) from e

    async def _write(self, record: BusinessPartner, existing: Optional[BusinessPartner]) -> None:
        """Escribe y confirma el registro; se llama con el scope del ID tomado."""
        if self.mode is UpsertMode.ATOMIC:
            operation = "upsert"
        else:
            operation = "insert" if existing is None else "update"

        try:
            if operation == "upsert":
                await self.repository.upsert(record)
            elif operation == "insert":
                await self.repository.create(record)
            else:
                await self.repository.update(record.id, record)
        except Exception as e:
            raise self._storage_error(record.id, operation, e) from e

        try:
            await self.repository.commit()
        except Exception as e:
            raise self._storage_error(record.id, "commit", e) from e

    def _storage_error(self, partner_id: str, operation: str, cause: Exception) -> StorageException:
        error = StorageException(f"{FAILURE_PREFIX}: {cause}", operation=operation, cause=cause)
        self._log_error(partner_id, error)
        return error

    def _log_error(self, partner_id: Optional[str], error: AppException) -> None:
        self.event_logger.log_event(
            EventKind.ERROR,
            {
                "id": partner_id,
                "error": error.error_code,
                "message": error.message,
                "details": error.details,
            },
        )
