"""Shared in-memory fakes and fixtures for unit and API tests."""

from datetime import date

import pytest

from app.application.interfaces import MovieRepository, UserRepository
from app.application.services import MovieService, UserService
from app.domain.entities import Genre, Movie, User
from app.infrastructure.security import BcryptPasswordHasher, JWTTokenService


class FakeMovieRepository(MovieRepository):
    """In-memory fake repository; dict order doubles as storage order."""

    def __init__(self):
        self.movies: dict[str, Movie] = {}
        self._next_id = 1

    async def get_by_id(self, movie_id: str) -> Movie | None:
        return self.movies.get(movie_id)

    async def get_all(self) -> list[Movie]:
        return list(self.movies.values())

    async def create(self, movie: Movie) -> Movie:
        movie.id = f"movie-{self._next_id}"
        self._next_id += 1
        self.movies[movie.id] = movie
        return movie

    async def update(self, movie: Movie) -> Movie:
        if movie.id not in self.movies:
            raise ValueError(f"Movie {movie.id} not found")
        self.movies[movie.id] = movie
        return movie

    async def delete(self, movie_id: str) -> bool:
        return self.movies.pop(movie_id, None) is not None


class FakeUserRepository(UserRepository):
    def __init__(self):
        self.users: dict[str, User] = {}

    async def get_by_username(self, username: str) -> User | None:
        return self.users.get(username)

    async def create(self, user: User) -> User:
        user.id = f"user-{len(self.users) + 1}"
        self.users[user.username] = user
        return user


def make_movie(
    title: str,
    description: str = "A film.",
    genre: Genre = Genre.DRAMA,
    movie_id: str | None = None,
) -> Movie:
    return Movie(
        id=movie_id,
        title=title,
        description=description,
        release=date(2010, 7, 16),
        director="Jane Doe",
        genre=genre,
        created_by="alice",
    )


@pytest.fixture
def movie_repository() -> FakeMovieRepository:
    return FakeMovieRepository()


@pytest.fixture
def user_repository() -> FakeUserRepository:
    return FakeUserRepository()


@pytest.fixture
def token_service() -> JWTTokenService:
    return JWTTokenService(secret_key="test-secret", issuer="movie-catalog-tests")


@pytest.fixture
def movie_service(movie_repository: FakeMovieRepository) -> MovieService:
    return MovieService(movie_repository, listing_path="/movies")


@pytest.fixture
def user_service(
    user_repository: FakeUserRepository, token_service: JWTTokenService
) -> UserService:
    return UserService(
        repository=user_repository,
        password_hasher=BcryptPasswordHasher(rounds=4),
        token_service=token_service,
    )


@pytest.fixture
def movie_factory():
    return make_movie
