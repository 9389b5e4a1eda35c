"""
Tests del repositorio SQLAlchemy de Business Partners sobre SQLite en memoria.
"""
from __future__ import annotations

from datetime import datetime, timezone

import pytest

from app.domain.entities.business_partner import BusinessPartner
from app.infrastructure.repositories.business_partner_repository_impl import (
    BusinessPartnerRepositoryImpl,
)
from app.shared.exceptions.domain import EntityNotFoundException


T1 = datetime(2025, 3, 1, 8, 30, 0, tzinfo=timezone.utc)
T2 = datetime(2025, 3, 2, 9, 45, 0, tzinfo=timezone.utc)


def _partner(partner_id: str = "BP1", at: datetime = T1, **fields) -> BusinessPartner:
    return BusinessPartner(id=partner_id, created_at=at, modified_at=at, **fields)


@pytest.mark.asyncio
async def test_find_by_id_returns_none_for_unknown(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)

    assert await repo.find_by_id("missing") is None


@pytest.mark.asyncio
async def test_create_then_find_returns_utc_timestamps(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)

    await repo.create(_partner(first_name="Ana", country="IN", partner_type="Customer"))
    found = await repo.find_by_id("BP1")

    assert found is not None
    assert found.first_name == "Ana"
    assert found.country == "IN"
    assert found.created_at == T1
    assert found.modified_at == T1
    assert found.created_at.tzinfo is not None


@pytest.mark.asyncio
async def test_update_replaces_mutable_fields_only(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)
    await repo.create(_partner(first_name="Ana", last_name="Gomez", country="IN"))

    replacement = BusinessPartner(
        id="BP1",
        first_name="Ana",
        country="DE",
        created_at=T2,
        modified_at=T2,
    )
    await repo.update("BP1", replacement)
    found = await repo.find_by_id("BP1")

    assert found.country == "DE"
    assert found.last_name is None
    assert found.modified_at == T2
    assert found.created_at == T1


@pytest.mark.asyncio
async def test_update_unknown_id_raises(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)

    with pytest.raises(EntityNotFoundException):
        await repo.update("ghost", _partner("ghost"))


@pytest.mark.asyncio
async def test_upsert_inserts_new_row(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)

    await repo.upsert(_partner(email="ana@example.com"))
    found = await repo.find_by_id("BP1")

    assert found.email == "ana@example.com"
    assert found.created_at == T1


@pytest.mark.asyncio
async def test_upsert_on_existing_keeps_stored_created_at(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)
    await repo.upsert(_partner(country="IN"))
    # Una segunda alta concurrente traería su propio created_at
    await repo.upsert(_partner(at=T2, country="DE"))

    found = await repo.find_by_id("BP1")

    assert found.country == "DE"
    assert found.created_at == T1
    assert found.modified_at == T2


@pytest.mark.asyncio
async def test_list_filters_by_country_and_type(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)
    await repo.create(_partner("BP1", country="IN", partner_type="Customer"))
    await repo.create(_partner("BP2", country="IN", partner_type="Supplier"))
    await repo.create(_partner("BP3", country="DE", partner_type="Customer"))

    by_country = await repo.list(country="IN")
    by_both = await repo.list(country="IN", partner_type="Customer")
    everything = await repo.list()

    assert [p.id for p in by_country] == ["BP1", "BP2"]
    assert [p.id for p in by_both] == ["BP1"]
    assert [p.id for p in everything] == ["BP1", "BP2", "BP3"]


@pytest.mark.asyncio
async def test_list_paginates(db_session) -> None:
    repo = BusinessPartnerRepositoryImpl(db_session)
    for i in range(5):
        await repo.create(_partner(f"BP{i}"))

    page = await repo.list(skip=1, limit=2)

    assert [p.id for p in page] == ["BP1", "BP2"]


@pytest.mark.asyncio
async def test_write_is_visible_to_other_sessions_only_after_commit(file_session_factory) -> None:
    async with file_session_factory() as writer_session, file_session_factory() as reader_session:
        writer = BusinessPartnerRepositoryImpl(writer_session)
        reader = BusinessPartnerRepositoryImpl(reader_session)

        await writer.upsert(_partner(country="IN"))
        assert await reader.find_by_id("BP1") is None

        await writer.commit()
        found = await reader.find_by_id("BP1")

    assert found is not None
    assert found.country == "IN"
