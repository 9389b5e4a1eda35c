"""
Excepciones de la lógica de dominio y de la capa de almacenamiento.
"""
from typing import Any, Optional

from app.shared.exceptions.base import AppException


class DomainException(AppException):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR", details=None):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class EntityNotFoundException(DomainException):
    """Excepción cuando no se encuentra una entidad."""

    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            message=f"{entity_name} con ID {entity_id} no encontrado",
            error_code="ENTITY_NOT_FOUND",
            details={"entity": entity_name, "id": str(entity_id)}
        )
        self.status_code = 404


class ValidationException(DomainException):
    """
    Excepción para errores de validación de un registro entrante.

    Se lanza antes de tocar el almacenamiento.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else None
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            details=details
        )


class StorageException(AppException):
    """
    Excepción cuando falla una lectura o escritura contra el repositorio.

    Envuelve el error original; no se reintenta.
    """

    def __init__(self, message: str, operation: str, cause: Optional[BaseException] = None):
        details = {"operation": operation}
        if cause is not None:
            details["cause"] = type(cause).__name__
        super().__init__(
            message=message,
            status_code=500,
            error_code="STORAGE_ERROR",
            details=details
        )
        self.operation = operation


class PartnerLockedException(AppException):
    """Excepción cuando otro request mantiene el lock del mismo partner."""

    def __init__(self, partner_id: str, timeout: float):
        super().__init__(
            message=f"Business Partner {partner_id} está siendo procesado por otra petición",
            status_code=503,
            error_code="PARTNER_LOCKED",
            details={"id": partner_id, "timeout": timeout}
        )
