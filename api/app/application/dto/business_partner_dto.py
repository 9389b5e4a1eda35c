"""
DTOs relacionados con Business Partners.

Los nombres en JSON son los del sistema origen (ID, FirstName, ...).
"""
from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from app.domain.entities.business_partner import BusinessPartner


class BusinessPartnerInDTO(BaseModel):
    """
    DTO de entrada enviado por el ERP.

    ID es opcional aquí para que la validación la haga el reconciliador;
    CreatedAt/ModifiedAt u otros campos extra se ignoran.
    """

    id: Optional[str] = Field(None, alias="ID", description="ID asignado por el sistema origen")
    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    email: Optional[str] = Field(None, alias="Email")
    phone: Optional[str] = Field(None, alias="Phone")
    country: Optional[str] = Field(None, alias="Country")
    partner_type: Optional[str] = Field(None, alias="PartnerType")

    class Config:
        """Configuración de Pydantic."""
        populate_by_name = True
        extra = "ignore"

    def to_entity(self) -> BusinessPartner:
        """Convierte el DTO en entidad de dominio, sin timestamps."""
        return BusinessPartner(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            email=self.email,
            phone=self.phone,
            country=self.country,
            partner_type=self.partner_type,
        )


class BusinessPartnerReceiveResponseDTO(BaseModel):
    """DTO de respuesta de la sincronización entrante."""

    message: str
    id: str = Field(..., alias="ID")

    class Config:
        """Configuración de Pydantic."""
        populate_by_name = True


class BusinessPartnerResponseDTO(BaseModel):
    """DTO de respuesta con un Business Partner almacenado."""

    id: str = Field(..., alias="ID")
    first_name: Optional[str] = Field(None, alias="FirstName")
    last_name: Optional[str] = Field(None, alias="LastName")
    email: Optional[str] = Field(None, alias="Email")
    phone: Optional[str] = Field(None, alias="Phone")
    country: Optional[str] = Field(None, alias="Country")
    partner_type: Optional[str] = Field(None, alias="PartnerType")
    created_at: datetime = Field(..., alias="CreatedAt")
    modified_at: datetime = Field(..., alias="ModifiedAt")

    class Config:
        """Configuración de Pydantic."""
        populate_by_name = True
        from_attributes = True
