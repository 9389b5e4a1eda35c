"""
Dependencias para inyección de casos de uso.
"""
from fastapi import Depends

from app.application.services.upsert_reconciler import UpsertMode, UpsertReconciler
from app.application.use_cases.business_partner_use_cases import BusinessPartnerUseCases
from app.core.config import settings
from app.domain.events.event_logger import IEventLogger
from app.domain.repositories.business_partner_repository import IBusinessPartnerRepository
from app.api.v1.dependencies.repository_deps import (
    get_business_partner_repository,
    get_event_logger,
)
from app.infrastructure.locks.partner_lock import partner_locks


def get_upsert_reconciler(
    repository: IBusinessPartnerRepository = Depends(get_business_partner_repository),
    event_logger: IEventLogger = Depends(get_event_logger),
) -> UpsertReconciler:
    """
    Dependencia para obtener el reconciliador configurado según settings.

    Returns:
        UpsertReconciler: Reconciliador ligado al repositorio del request
    """
    return UpsertReconciler(
        repository=repository,
        event_logger=event_logger,
        mode=UpsertMode(settings.PARTNER_UPSERT_MODE),
        lock_manager=partner_locks if settings.PARTNER_KEY_LOCKING else None,
        lock_timeout=settings.PARTNER_LOCK_TIMEOUT,
    )


async def get_business_partner_use_cases(
    reconciler: UpsertReconciler = Depends(get_upsert_reconciler),
    repository: IBusinessPartnerRepository = Depends(get_business_partner_repository),
    event_logger: IEventLogger = Depends(get_event_logger),
) -> BusinessPartnerUseCases:
    """
    Dependencia para obtener los casos de uso de Business Partners.

    Returns:
        BusinessPartnerUseCases: Instancia de casos de uso
    """
    return BusinessPartnerUseCases(reconciler, repository, event_logger)
