from .movie import MovieModel
from .user import UserModel

__all__ = [
    "MovieModel",
    "UserModel",
]
