"""
Data Transfer Objects (DTOs) para la capa de aplicación.
"""
from .business_partner_dto import (
    BusinessPartnerInDTO,
    BusinessPartnerReceiveResponseDTO,
    BusinessPartnerResponseDTO,
)

__all__ = [
    "BusinessPartnerInDTO",
    "BusinessPartnerReceiveResponseDTO",
    "BusinessPartnerResponseDTO",
]
