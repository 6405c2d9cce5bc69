from .movie_repository import SQLAlchemyMovieRepository
from .user_repository import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyMovieRepository",
    "SQLAlchemyUserRepository",
]
