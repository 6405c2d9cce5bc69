from .movie_repository import MovieRepository
from .user_repository import UserRepository
from .password_hasher import PasswordHasher
from .token_service import TokenService

__all__ = [
    "MovieRepository",
    "UserRepository",
    "PasswordHasher",
    "TokenService",
]
