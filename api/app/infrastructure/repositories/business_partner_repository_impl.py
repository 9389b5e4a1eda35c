"""
Implementación del repositorio de Business Partners usando SQLAlchemy.
"""
from typing import List, Optional
from sqlalchemy import select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities.business_partner import BusinessPartner, MUTABLE_FIELDS
from app.domain.repositories.business_partner_repository import IBusinessPartnerRepository
from app.infrastructure.database.models import BusinessPartnerModel
from app.shared.exceptions.domain import EntityNotFoundException
from app.shared.utils.datetime_utils import DateTimeUtils


# Dialectos con INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class BusinessPartnerRepositoryImpl(IBusinessPartnerRepository):
    """Implementación del repositorio de Business Partners con SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """
        Inicializa el repositorio con una sesión de base de datos.

        Args:
            session: Sesión de SQLAlchemy
        """
        self.session = session

    async def find_by_id(self, partner_id: str) -> Optional[BusinessPartner]:
        """Obtiene un partner por su ID."""
        result = await self.session.execute(
            select(BusinessPartnerModel)
            .where(BusinessPartnerModel.id == partner_id)
            .execution_options(populate_existing=True)
        )
        db_partner = result.scalar_one_or_none()

        if db_partner is None:
            return None

        return self._to_entity(db_partner)

    async def create(self, partner: BusinessPartner) -> None:
        """Inserta un partner nuevo."""
        self.session.add(BusinessPartnerModel(**self._to_row(partner)))
        await self.session.flush()

    async def update(self, partner_id: str, partner: BusinessPartner) -> None:
        """Reemplaza los campos mutables y modified_at de un partner."""
        values = partner.mutable_values()
        values["modified_at"] = partner.modified_at

        result = await self.session.execute(
            update(BusinessPartnerModel)
            .where(BusinessPartnerModel.id == partner_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )

        if result.rowcount == 0:
            raise EntityNotFoundException("BusinessPartner", partner_id)

    async def upsert(self, partner: BusinessPartner) -> None:
        """
        Inserta o reemplaza el partner con INSERT ... ON CONFLICT.

        created_at queda fuera del SET, así que una fila existente
        conserva su fecha de creación aunque dos peticiones compitan.
        """
        dialect_name = self.session.bind.dialect.name
        insert_fn = _UPSERT_INSERTS.get(dialect_name)
        if insert_fn is None:
            raise NotImplementedError(
                f"Upsert atómico no soportado para el dialecto '{dialect_name}'"
            )

        stmt = insert_fn(BusinessPartnerModel).values(**self._to_row(partner))
        set_columns = list(MUTABLE_FIELDS) + ["modified_at"]
        stmt = stmt.on_conflict_do_update(
            index_elements=[BusinessPartnerModel.id],
            set_={name: stmt.excluded[name] for name in set_columns},
        )
        await self.session.execute(stmt)

    async def commit(self) -> None:
        """Confirma la transacción de la sesión."""
        await self.session.commit()

    async def list(
        self,
        country: Optional[str] = None,
        partner_type: Optional[str] = None,
        skip: int = 0,
        limit: int = 100
    ) -> List[BusinessPartner]:
        """Lista partners filtrando por país y/o tipo."""
        query = select(BusinessPartnerModel)
        if country is not None:
            query = query.where(BusinessPartnerModel.country == country)
        if partner_type is not None:
            query = query.where(BusinessPartnerModel.partner_type == partner_type)

        query = (
            query.order_by(BusinessPartnerModel.id)
            .offset(skip)
            .limit(limit)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)

        return [self._to_entity(db_partner) for db_partner in result.scalars().all()]

    @staticmethod
    def _to_row(partner: BusinessPartner) -> dict:
        row = partner.mutable_values()
        row.update(
            id=partner.id,
            created_at=partner.created_at,
            modified_at=partner.modified_at,
        )
        return row

    @staticmethod
    def _to_entity(db_partner: BusinessPartnerModel) -> BusinessPartner:
        """
        Convierte un modelo de base de datos a entidad de dominio.

        Args:
            db_partner: Modelo de SQLAlchemy

        Returns:
            BusinessPartner: Entidad de dominio con timestamps en UTC
        """
        return BusinessPartner(
            id=db_partner.id,
            first_name=db_partner.first_name,
            last_name=db_partner.last_name,
            email=db_partner.email,
            phone=db_partner.phone,
            country=db_partner.country,
            partner_type=db_partner.partner_type,
            created_at=DateTimeUtils.ensure_utc(db_partner.created_at),
            modified_at=DateTimeUtils.ensure_utc(db_partner.modified_at),
        )
