"""
Tests unitarios para la entidad BusinessPartner.
"""
from datetime import datetime, timezone

import pytest

from app.domain.entities.business_partner import BusinessPartner, MUTABLE_FIELDS


T1 = datetime(2025, 1, 1, tzinfo=timezone.utc)
T2 = datetime(2025, 1, 2, tzinfo=timezone.utc)


def test_stamp_created_sets_both_timestamps():
    """Test de que el alta fija created_at y modified_at al mismo instante."""
    partner = BusinessPartner(id="BP1", first_name="Ana").stamp_created(T1)

    assert partner.created_at == T1
    assert partner.modified_at == T1
    assert partner.first_name == "Ana"


def test_stamp_updated_keeps_existing_created_at():
    """Test de que la actualización conserva created_at del registro almacenado."""
    existing = BusinessPartner(id="BP1", created_at=T1, modified_at=T1)
    incoming = BusinessPartner(id="BP1", country="DE", created_at=T2)

    updated = incoming.stamp_updated(existing, T2)

    assert updated.created_at == T1
    assert updated.modified_at == T2
    assert updated.country == "DE"


def test_stamp_updated_rejects_different_id():
    """Test de que no se puede reemplazar un partner con datos de otro ID."""
    existing = BusinessPartner(id="BP1", created_at=T1, modified_at=T1)

    with pytest.raises(ValueError):
        BusinessPartner(id="BP2").stamp_updated(existing, T2)


def test_stamping_does_not_mutate_original():
    """Test de que los métodos stamp_* devuelven copias."""
    incoming = BusinessPartner(id="BP1")
    incoming.stamp_created(T1)

    assert incoming.created_at is None
    assert incoming.modified_at is None


def test_mutable_values_excludes_id_and_timestamps():
    """Test de los campos que se sobrescriben en una actualización."""
    partner = BusinessPartner(id="BP1", email="ana@example.com", created_at=T1, modified_at=T1)

    values = partner.mutable_values()

    assert set(values) == set(MUTABLE_FIELDS)
    assert "id" not in values
    assert "created_at" not in values
    assert values["email"] == "ana@example.com"
    assert values["phone"] is None
