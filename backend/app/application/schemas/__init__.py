from .movie import (
    MovieCreate,
    MovieUpdate,
    MovieResponse,
    MoviePageResponse,
    DeleteResponse,
)
from .user import UserCreate, UserResponse, LoginRequest, TokenResponse

__all__ = [
    "MovieCreate",
    "MovieUpdate",
    "MovieResponse",
    "MoviePageResponse",
    "DeleteResponse",
    "UserCreate",
    "UserResponse",
    "LoginRequest",
    "TokenResponse",
]
