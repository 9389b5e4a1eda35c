"""
Configuración de fixtures para pytest.
"""
import os

# Los tests no necesitan PostgreSQL: el engine global apunta a SQLite
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")

from datetime import datetime, timedelta, timezone
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.infrastructure.database.session import Base
import app.infrastructure.database.models  # noqa: F401


# URL de base de datos de prueba
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """
    Session factory sobre una base SQLite en memoria compartida
    (StaticPool) para que varias sesiones vean los mismos datos.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture
async def file_session_factory(tmp_path) -> AsyncGenerator[async_sessionmaker, None]:
    """
    Session factory sobre un fichero SQLite con pool normal: cada sesión
    usa su propia conexión y solo ve lo que las demás ya confirmaron.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'partners.db'}", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    Fixture que proporciona una sesión de base de datos para tests.
    Crea una base de datos en memoria para cada test.
    """
    async with session_factory() as session:
        yield session


class StepClock:
    """Reloj controlable: devuelve `start` y avanza `step` en cada llamada."""

    def __init__(self, start: datetime, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value


@pytest.fixture
def clock() -> StepClock:
    """Reloj que arranca en 2025-01-01 10:00 UTC y avanza 1 minuto por llamada."""
    return StepClock(
        datetime(2025, 1, 1, 10, 0, 0, tzinfo=timezone.utc),
        step=timedelta(minutes=1),
    )


@pytest.fixture
def clock_factory() -> Callable[..., StepClock]:
    """Construye relojes con inicio y paso arbitrarios."""
    return StepClock
