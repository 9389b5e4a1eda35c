"""
Dependencias para inyección de repositorios y colaboradores.
"""
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.events.event_logger import IEventLogger
from app.infrastructure.database.session import get_db
from app.infrastructure.repositories.business_partner_repository_impl import (
    BusinessPartnerRepositoryImpl,
)
from app.shared.utils.audit_logger import AuditLogger


async def get_business_partner_repository(
    session: AsyncSession = Depends(get_db)
) -> BusinessPartnerRepositoryImpl:
    """
    Dependencia para obtener el repositorio de Business Partners.

    Args:
        session: Sesión de base de datos

    Returns:
        BusinessPartnerRepositoryImpl: Repositorio ligado al request
    """
    return BusinessPartnerRepositoryImpl(session)


def get_event_logger() -> IEventLogger:
    """Dependencia para obtener el colaborador de observabilidad."""
    return AuditLogger()
