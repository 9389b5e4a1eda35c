"""
Casos de uso relacionados con Business Partners.
"""
from typing import List, Optional

from app.application.dto.business_partner_dto import (
    BusinessPartnerInDTO,
    BusinessPartnerReceiveResponseDTO,
    BusinessPartnerResponseDTO,
)
from app.application.services.upsert_reconciler import (
    ReconcileOutcome,
    UpsertReconciler,
)
from app.domain.entities.business_partner import BusinessPartner
from app.domain.events.event_logger import EventKind, IEventLogger
from app.domain.repositories.business_partner_repository import IBusinessPartnerRepository
from app.shared.exceptions.domain import EntityNotFoundException


# Mensajes devueltos al sistema origen
RECEIVE_MESSAGES = {
    ReconcileOutcome.CREATED: "Business Partner created successfully",
    ReconcileOutcome.UPDATED: "Business Partner updated successfully",
}


class BusinessPartnerUseCases:
    """
    Casos de uso para la sincronización y consulta de Business Partners.
    Orquesta el reconciliador, el repositorio y los eventos de observabilidad.
    """

    def __init__(
        self,
        reconciler: UpsertReconciler,
        repository: IBusinessPartnerRepository,
        event_logger: IEventLogger,
    ):
        """
        Inicializa los casos de uso con sus dependencias.

        Args:
            reconciler: Reconciliador de altas/actualizaciones
            repository: Repositorio de Business Partners (lecturas)
            event_logger: Colaborador de observabilidad
        """
        self.reconciler = reconciler
        self.repository = repository
        self.event_logger = event_logger

    async def receive_business_partner(
        self, dto: BusinessPartnerInDTO
    ) -> BusinessPartnerReceiveResponseDTO:
        """
        Recibe un Business Partner del ERP y lo reconcilia.

        Args:
            dto: Datos recibidos

        Returns:
            BusinessPartnerReceiveResponseDTO: Mensaje e ID

        Raises:
            ValidationException: Si falta el ID
            StorageException: Si falla el almacenamiento
        """
        self.event_logger.log_event(
            EventKind.RECEIVED,
            dto.model_dump(by_alias=True),
        )

        result = await self.reconciler.reconcile(dto.to_entity())

        return BusinessPartnerReceiveResponseDTO(
            message=RECEIVE_MESSAGES[result.outcome],
            id=result.id,
        )

    async def list_business_partners(
        self,
        country: Optional[str] = None,
        partner_type: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> List[BusinessPartnerResponseDTO]:
        """
        Lista Business Partners con filtros opcionales.

        Args:
            country: Filtrar por país
            partner_type: Filtrar por tipo de partner
            skip: Número de registros a saltar
            limit: Número máximo de registros

        Returns:
            List[BusinessPartnerResponseDTO]: Partners encontrados
        """
        self.event_logger.log_event(
            EventKind.READ_REQUESTED,
            {
                "filters": {"country": country, "partner_type": partner_type},
                "skip": skip,
                "limit": limit,
            },
        )

        partners = await self.repository.list(
            country=country,
            partner_type=partner_type,
            skip=skip,
            limit=limit,
        )

        self.event_logger.log_event(EventKind.READ_COMPLETED, {"count": len(partners)})
        return [self._to_response_dto(partner) for partner in partners]

    async def get_business_partner(self, partner_id: str) -> BusinessPartnerResponseDTO:
        """
        Obtiene un Business Partner por su ID.

        Raises:
            EntityNotFoundException: Si no existe
        """
        self.event_logger.log_event(EventKind.READ_REQUESTED, {"filters": {"id": partner_id}})

        partner = await self.repository.find_by_id(partner_id)

        self.event_logger.log_event(
            EventKind.READ_COMPLETED, {"count": 0 if partner is None else 1}
        )
        if partner is None:
            raise EntityNotFoundException("BusinessPartner", partner_id)

        return self._to_response_dto(partner)

    @staticmethod
    def _to_response_dto(partner: BusinessPartner) -> BusinessPartnerResponseDTO:
        return BusinessPartnerResponseDTO(
            id=partner.id,
            first_name=partner.first_name,
            last_name=partner.last_name,
            email=partner.email,
            phone=partner.phone,
            country=partner.country,
            partner_type=partner.partner_type,
            created_at=partner.created_at,
            modified_at=partner.modified_at,
        )
