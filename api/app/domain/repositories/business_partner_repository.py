"""
Interfaz del repositorio de Business Partners.
Define el contrato que debe cumplir cualquier implementación de almacenamiento.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.business_partner import BusinessPartner


class IBusinessPartnerRepository(ABC):
    """
    Interfaz del repositorio de Business Partners.
    Define las operaciones de persistencia por clave.
    """

    @abstractmethod
    async def find_by_id(self, partner_id: str) -> Optional[BusinessPartner]:
        """
        Obtiene un partner por su ID.

        Args:
            partner_id: ID asignado por el sistema origen

        Returns:
            Optional[BusinessPartner]: Partner encontrado o None
        """
        pass

    @abstractmethod
    async def create(self, partner: BusinessPartner) -> None:
        """
        Inserta un partner nuevo.

        Args:
            partner: Partner completo, con timestamps ya fijados
        """
        pass

    @abstractmethod
    async def update(self, partner_id: str, partner: BusinessPartner) -> None:
        """
        Reemplaza los campos mutables y modified_at de un partner existente.

        Args:
            partner_id: ID del partner a actualizar
            partner: Nueva versión del partner

        Raises:
            EntityNotFoundException: Si el partner no existe
        """
        pass

    @abstractmethod
    async def upsert(self, partner: BusinessPartner) -> None:
        """
        Inserta o reemplaza un partner en una sola sentencia.

        Si el ID ya existe, se conserva el created_at almacenado.

        Args:
            partner: Partner completo, con timestamps ya fijados
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """
        Confirma las escrituras pendientes.

        Una escritura no es visible para otras peticiones hasta que se
        confirma.
        """
        pass

    @abstractmethod
    async def list(
        self,
        country: Optional[str] = None,
        partner_type: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[BusinessPartner]:
        """
        Lista partners filtrando por país y/o tipo.

        Args:
            country: Código de país exacto
            partner_type: Tipo de partner exacto
            skip: Número de registros a saltar
            limit: Número máximo de registros

        Returns:
            List[BusinessPartner]: Partners ordenados por ID
        """
        pass
