"""
Lock por ID de Business Partner.

Motivación:
- La reconciliación lee y luego escribe; dos peticiones con el mismo ID
  pueden intercalarse entre ambas operaciones.
- Dentro de un proceso, serializar por ID elimina esa carrera sin
  bloquear peticiones de otros partners.

Caracteristicas:
- Un asyncio.Lock por partner_id
- Timeout configurable para evitar esperas indefinidas
- Los locks sin uso se eliminan al liberarse
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, Optional

from loguru import logger


# Timeout por defecto para adquirir un lock (en segundos)
DEFAULT_LOCK_TIMEOUT = 10.0


class PartnerLockTimeoutError(Exception):
    """Excepción lanzada cuando no se puede adquirir el lock dentro del timeout."""

    def __init__(self, partner_id: str, timeout: float):
        self.partner_id = partner_id
        self.timeout = timeout
        super().__init__(
            f"Timeout ({timeout}s) adquiriendo lock para Business Partner: {partner_id}"
        )


class PartnerLockManager:
    """
    Gestor de locks por `partner_id`.

    Se cuenta cuantas corrutinas esperan o mantienen cada lock para poder
    eliminarlo cuando nadie lo usa.
    """

    def __init__(self) -> None:
        self._locks: Dict[str, asyncio.Lock] = {}
        self._waiters: Dict[str, int] = {}

    def _acquire_entry(self, partner_id: str) -> asyncio.Lock:
        lock = self._locks.get(partner_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[partner_id] = lock
            self._waiters[partner_id] = 0
        self._waiters[partner_id] += 1
        return lock

    def _release_entry(self, partner_id: str) -> None:
        self._waiters[partner_id] -= 1
        if self._waiters[partner_id] == 0:
            del self._waiters[partner_id]
            del self._locks[partner_id]

    @asynccontextmanager
    async def lock(
        self,
        partner_id: str,
        timeout: Optional[float] = DEFAULT_LOCK_TIMEOUT
    ) -> AsyncIterator[None]:
        """
        Context manager async para serializar el trabajo sobre un partner.

        Args:
            partner_id: ID del partner
            timeout: Tiempo máximo de espera (segundos). None o <= 0 espera
                     indefinidamente.

        Raises:
            PartnerLockTimeoutError: Si el lock no se obtiene a tiempo

        Ejemplo:
            async with manager.lock("BP1"):
                existing = await repo.find_by_id("BP1")
                ...
        """
        lock = self._acquire_entry(partner_id)
        try:
            if timeout and timeout > 0:
                try:
                    await asyncio.wait_for(lock.acquire(), timeout=timeout)
                except asyncio.TimeoutError:
                    logger.warning(
                        f"Timeout adquiriendo lock para partner {partner_id} "
                        f"(timeout: {timeout}s)"
                    )
                    raise PartnerLockTimeoutError(partner_id, timeout)
            else:
                await lock.acquire()

            try:
                yield
            finally:
                lock.release()
        finally:
            self._release_entry(partner_id)

    def is_locked(self, partner_id: str) -> bool:
        """Indica si algún request mantiene el lock del partner."""
        lock = self._locks.get(partner_id)
        return lock is not None and lock.locked()

    def get_active_locks_count(self) -> int:
        """Retorna el número de locks activos (para monitoreo)."""
        return len(self._locks)


# Instancia compartida por todas las peticiones del proceso
partner_locks = PartnerLockManager()
