"""
Casos de uso de la aplicación.
"""
from app.application.use_cases.business_partner_use_cases import BusinessPartnerUseCases

__all__ = ["BusinessPartnerUseCases"]
