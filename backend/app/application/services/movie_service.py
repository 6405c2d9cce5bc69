"""Application service (use case) for Movie operations."""

import logging
from datetime import datetime, timezone

from app.application.interfaces import MovieRepository
from app.application.schemas import MovieCreate, MovieUpdate
from app.application.services.catalog_query import compute_result_page, list_genres
from app.domain.entities import Movie, MovieQuery, MoviePage, User
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class MovieService:
    """Orchestrates movie catalog logic. Depends on the repository port (DI)."""

    def __init__(self, repository: MovieRepository, listing_path: str = "/movies"):
        self._repository = repository
        self._listing_path = listing_path

    async def get_movie(self, movie_id: str) -> Movie:
        movie = await self._repository.get_by_id(movie_id)
        if movie is None:
            raise EntityNotFoundError("Movie", movie_id)
        return movie

    async def list_movies(self, query: MovieQuery) -> MoviePage:
        movies = await self._repository.get_all()
        page = compute_result_page(movies, query, self._listing_path)
        logger.debug(
            "Listed movies page=%d limit=%d search=%r genre=%r → %d/%d",
            query.page, query.limit, query.search, query.genre, len(page.value), page.total,
        )
        return page

    async def create_movie(self, data: MovieCreate, author: User) -> Movie:
        movie = Movie(
            title=data.title,
            description=data.description,
            release=data.release,
            director=data.director,
            genre=data.genre,
            created_by=author.username,
            created_at=datetime.now(timezone.utc),
        )
        created = await self._repository.create(movie)
        logger.info("Movie '%s' created by %s (id=%s)", created.title, author.username, created.id)
        return created

    async def update_movie(self, movie_id: str, data: MovieUpdate) -> Movie:
        movie = await self.get_movie(movie_id)
        movie.apply_changes(data.model_dump(exclude_none=True))
        updated = await self._repository.update(movie)
        logger.info("Movie %s updated", movie_id)
        return updated

    async def delete_movie(self, movie_id: str) -> None:
        deleted = await self._repository.delete(movie_id)
        if not deleted:
            raise EntityNotFoundError("Movie", movie_id)
        logger.info("Movie %s deleted", movie_id)

    def list_genres(self) -> list[str]:
        return list_genres()
