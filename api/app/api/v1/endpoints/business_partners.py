"""
Endpoints de Business Partners.

- POST /business-partners/receive: API de entrada desde el ERP (upsert)
- GET /business-partners: listado con filtros
- GET /business-partners/{partner_id}: consulta por ID
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from app.application.dto.business_partner_dto import (
    BusinessPartnerInDTO,
    BusinessPartnerReceiveResponseDTO,
    BusinessPartnerResponseDTO,
)
from app.application.use_cases.business_partner_use_cases import BusinessPartnerUseCases
from app.api.v1.dependencies.use_case_deps import get_business_partner_use_cases


router = APIRouter(prefix="/business-partners", tags=["Business Partners"])


@router.post(
    "/receive",
    response_model=BusinessPartnerReceiveResponseDTO,
    status_code=status.HTTP_200_OK,
    summary="Recibir un Business Partner desde el ERP"
)
async def receive_business_partner(
    dto: BusinessPartnerInDTO,
    use_cases: BusinessPartnerUseCases = Depends(get_business_partner_use_cases)
) -> BusinessPartnerReceiveResponseDTO:
    """
    Inserta o actualiza un Business Partner por su ID.

    - ID nuevo: se crea con CreatedAt = ModifiedAt = ahora
    - ID existente: se reemplazan todos los campos y se conserva CreatedAt
    - CreatedAt/ModifiedAt enviados por el llamador se ignoran
    """
    return await use_cases.receive_business_partner(dto)


@router.get(
    "",
    response_model=List[BusinessPartnerResponseDTO],
    summary="Listar Business Partners"
)
async def list_business_partners(
    country: Optional[str] = Query(default=None, description="Filtrar por país"),
    partner_type: Optional[str] = Query(default=None, description="Filtrar por tipo de partner"),
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=100, ge=1, le=1000),
    use_cases: BusinessPartnerUseCases = Depends(get_business_partner_use_cases)
) -> List[BusinessPartnerResponseDTO]:
    """Lista Business Partners, por ejemplo solo clientes de India."""
    return await use_cases.list_business_partners(
        country=country,
        partner_type=partner_type,
        skip=skip,
        limit=limit,
    )


@router.get(
    "/{partner_id}",
    response_model=BusinessPartnerResponseDTO,
    summary="Obtener un Business Partner por ID"
)
async def get_business_partner(
    partner_id: str,
    use_cases: BusinessPartnerUseCases = Depends(get_business_partner_use_cases)
) -> BusinessPartnerResponseDTO:
    """Obtiene un Business Partner por su ID."""
    return await use_cases.get_business_partner(partner_id)
