"""Concrete repository implementation for Movie backed by SQLAlchemy."""

import uuid

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import MovieRepository
from app.domain.entities import Genre, Movie
from app.infrastructure.database.models import MovieModel


class SQLAlchemyMovieRepository(MovieRepository):
    """Implements the MovieRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: MovieModel) -> Movie:
        """Map ORM model → domain entity."""
        return Movie(
            id=model.id,
            title=model.title,
            description=model.description,
            release=model.release,
            director=model.director,
            genre=Genre(model.genre),
            created_by=model.created_by,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Movie) -> MovieModel:
        """Map domain entity → ORM model (for creation)."""
        return MovieModel(
            id=entity.id or str(uuid.uuid4()),
            title=entity.title,
            description=entity.description,
            release=entity.release,
            director=entity.director,
            genre=Genre(entity.genre).value,
            created_by=entity.created_by,
            created_at=entity.created_at,
        )

    async def get_by_id(self, movie_id: str) -> Movie | None:
        result = await self._session.get(MovieModel, movie_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[Movie]:
        stmt = select(MovieModel).order_by(MovieModel.created_at.asc())
        result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def create(self, movie: Movie) -> Movie:
        model = self._to_model(movie)
        self._session.add(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update(self, movie: Movie) -> Movie:
        model = await self._session.get(MovieModel, movie.id)
        if model is None:
            raise ValueError(f"Movie {movie.id} not found in database")
        model.title = movie.title
        model.description = movie.description
        model.release = movie.release
        model.director = movie.director
        model.genre = Genre(movie.genre).value
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, movie_id: str) -> bool:
        result = await self._session.execute(
            delete(MovieModel).where(MovieModel.id == movie_id)
        )
        await self._session.flush()
        return result.rowcount > 0
