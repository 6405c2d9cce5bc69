from .base import Base
from .session import engine, async_session_factory, create_tables, get_db_session
from .models import MovieModel, UserModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "create_tables",
    "get_db_session",
    "MovieModel",
    "UserModel",
]
