from .movie_service import MovieService
from .user_service import UserService

__all__ = [
    "MovieService",
    "UserService",
]
