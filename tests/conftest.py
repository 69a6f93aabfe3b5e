"""Pytest configuration and fixtures for record search.

Environment is set before app.main is imported so that create_app() can
load settings. HTTP tests use app.main:app with dependency overrides;
repository tests use an in-memory aiosqlite database.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("SEARCH_RATE_LIMIT", "1000/minute")

from collections.abc import AsyncIterator, Callable, Iterable
from datetime import UTC, date, datetime, timedelta
from itertools import count
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.domain.entities.records import DeceasedRecordEntity, InvestigationReportEntity
from app.infrastructure.persistence.database import Base, install_sqlite_unicode_lower
from app.infrastructure.persistence import models  # noqa: F401  (register tables)
from app.main import app

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class InMemoryRecordStore:
    """Record store over fixed lists; counts reads. Implements IRecordStore."""

    def __init__(
        self,
        deceased: Iterable[DeceasedRecordEntity] = (),
        reports: Iterable[InvestigationReportEntity] = (),
    ) -> None:
        self.deceased = list(deceased)
        self.reports = list(reports)
        self.reads: list[str] = []

    async def list_deceased_records(self, query: str) -> list[DeceasedRecordEntity]:
        self.reads.append("deceased")
        return list(self.deceased)

    async def list_deceased_records_by_date_of_death(
        self, day: date
    ) -> list[DeceasedRecordEntity]:
        self.reads.append("deceased")
        return [r for r in self.deceased if r.date_of_death == day]

    async def list_investigation_reports(
        self, query: str
    ) -> list[InvestigationReportEntity]:
        self.reads.append("investigation_report")
        return list(self.reports)


@pytest.fixture
def make_deceased() -> Callable[..., DeceasedRecordEntity]:
    """Factory for deceased record entities with unique ids and increasing created_at."""
    seq = count(1)

    def _make(full_name: str | None = "Test Person", **kwargs: Any) -> DeceasedRecordEntity:
        n = next(seq)
        kwargs.setdefault("id", f"dr-{n:04d}")
        kwargs.setdefault("created_at", BASE_TIME + timedelta(minutes=n))
        return DeceasedRecordEntity(full_name=full_name, **kwargs)

    return _make


@pytest.fixture
def make_report() -> Callable[..., InvestigationReportEntity]:
    """Factory for investigation report entities."""
    seq = count(1)

    def _make(case_id: str | None = None, **kwargs: Any) -> InvestigationReportEntity:
        n = next(seq)
        kwargs.setdefault("id", f"pr-{n:04d}")
        kwargs.setdefault("deceased_record_id", "dr-0001")
        kwargs.setdefault("created_at", BASE_TIME + timedelta(minutes=n))
        return InvestigationReportEntity(
            case_id=case_id if case_id is not None else f"CASE-{n:04d}", **kwargs
        )

    return _make


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI). Clears overrides afterwards."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Session factory over a fresh in-memory SQLite database with all tables."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    install_sqlite_unicode_lower(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    """Database session for repository tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def make_store() -> Callable[..., InMemoryRecordStore]:
    """Factory for in-memory record stores."""
    return InMemoryRecordStore
