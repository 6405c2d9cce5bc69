"""Tests for SQLAlchemyMovieRepository against an in-memory SQLite database."""

from contextlib import asynccontextmanager
from datetime import date, datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.domain.entities import Genre, Movie
from app.infrastructure.database import Base
from app.infrastructure.database.repositories import SQLAlchemyMovieRepository

_START = datetime(2024, 1, 1, tzinfo=timezone.utc)


@asynccontextmanager
async def _repository():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with factory() as session:
            yield SQLAlchemyMovieRepository(session)
    finally:
        await engine.dispose()


def _movie(title: str, minutes: int) -> Movie:
    return Movie(
        title=title,
        description=f"About {title}",
        release=date(1999, 3, 31),
        director="Jane Doe",
        genre=Genre.DRAMA,
        created_by="alice",
        created_at=_START + timedelta(minutes=minutes),
    )


@pytest.mark.asyncio
async def test_get_all_returns_insertion_order():
    async with _repository() as repo:
        for minutes, title in enumerate(["Zulu", "Alpha", "Mike"]):
            await repo.create(_movie(title, minutes))

        movies = await repo.get_all()

    assert [m.title for m in movies] == ["Zulu", "Alpha", "Mike"]
    assert all(m.id for m in movies)
    assert movies[0].genre is Genre.DRAMA


@pytest.mark.asyncio
async def test_update_persists_mutable_fields():
    async with _repository() as repo:
        created = await repo.create(_movie("Heat", 0))
        created.title = "Heat (1995)"
        created.genre = Genre.CRIME

        await repo.update(created)
        reloaded = await repo.get_by_id(created.id)

    assert reloaded is not None
    assert reloaded.title == "Heat (1995)"
    assert reloaded.genre is Genre.CRIME
    assert reloaded.created_by == "alice"


@pytest.mark.asyncio
async def test_delete_reports_whether_a_row_was_removed():
    async with _repository() as repo:
        created = await repo.create(_movie("Heat", 0))

        first = await repo.delete(created.id)
        second = await repo.delete(created.id)
        remaining = await repo.get_all()

    assert first is True
    assert second is False
    assert remaining == []


@pytest.mark.asyncio
async def test_get_by_id_missing_returns_none():
    async with _repository() as repo:
        assert await repo.get_by_id("no-such-movie") is None
