"""
Entidades de dominio.
"""
from app.domain.entities.business_partner import BusinessPartner, MUTABLE_FIELDS

__all__ = ["BusinessPartner", "MUTABLE_FIELDS"]
