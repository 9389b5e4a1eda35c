"""
Modelos de base de datos (ORM).
"""
from sqlalchemy import Column, String, DateTime

from app.infrastructure.database.session import Base


class BusinessPartnerModel(Base):
    """
    Modelo de base de datos para Business Partners sincronizados desde el ERP.

    El ID lo asigna el sistema origen. Los timestamps los calcula el servicio:
    - created_at: primera escritura, nunca se sobrescribe
    - modified_at: última escritura
    """

    __tablename__ = "business_partners"

    id = Column(String(255), primary_key=True)
    first_name = Column(String(255), nullable=True)
    last_name = Column(String(255), nullable=True)
    email = Column(String(255), nullable=True)
    phone = Column(String(255), nullable=True)
    country = Column(String(255), nullable=True, index=True)
    partner_type = Column(String(255), nullable=True, index=True)

    created_at = Column(DateTime(timezone=True), nullable=False)
    modified_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<BusinessPartner(id={self.id}, country={self.country}, type={self.partner_type})>"
