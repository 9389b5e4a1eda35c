"""
Entidad de dominio: BusinessPartner.
"""
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Optional, Dict, Any


# Campos que se reemplazan completos en cada sincronización
MUTABLE_FIELDS = (
    "first_name",
    "last_name",
    "email",
    "phone",
    "country",
    "partner_type",
)


@dataclass
class BusinessPartner:
    """
    Entidad de dominio que representa un Business Partner recibido del ERP.

    El ID lo asigna el sistema origen y no cambia. `created_at` se fija en
    la primera escritura y `modified_at` se actualiza en cada una.
    """

    id: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    country: Optional[str] = None
    partner_type: Optional[str] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None

    def stamp_created(self, now: datetime) -> "BusinessPartner":
        """
        Copia del partner como primera versión: created_at = modified_at = now.

        Args:
            now: Instante de la escritura

        Returns:
            BusinessPartner: Nueva instancia con ambos timestamps fijados
        """
        return replace(self, created_at=now, modified_at=now)

    def stamp_updated(self, existing: "BusinessPartner", now: datetime) -> "BusinessPartner":
        """
        Copia del partner como reemplazo de `existing`.

        Conserva el created_at original y toma `now` como modified_at.

        Args:
            existing: Versión almacenada actualmente
            now: Instante de la escritura

        Returns:
            BusinessPartner: Nueva instancia lista para actualizar
        """
        if existing.id != self.id:
            raise ValueError(
                f"No se puede reemplazar el partner {existing.id} con datos de {self.id}"
            )
        return replace(self, created_at=existing.created_at, modified_at=now)

    def mutable_values(self) -> Dict[str, Any]:
        """Valores de los campos que se sobrescriben en una actualización."""
        return {name: getattr(self, name) for name in MUTABLE_FIELDS}
