"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.application.services import MovieService, UserService
from app.domain.entities import User
from app.domain.exceptions import AuthenticationError
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyMovieRepository,
    SQLAlchemyUserRepository,
)
from app.infrastructure.security import BcryptPasswordHasher, JWTTokenService

_bearer = HTTPBearer(auto_error=False)


async def get_movie_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[MovieService, None]:
    """Provides a MovieService instance with its repository wired up."""
    settings = get_settings()
    repository = SQLAlchemyMovieRepository(session)
    yield MovieService(repository, listing_path=settings.movies_listing_path)


async def get_user_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService with bcrypt hashing and JWT tokens."""
    settings = get_settings()
    token_service = JWTTokenService(
        secret_key=settings.jwt_secret_key,
        issuer=settings.jwt_issuer,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )
    yield UserService(
        repository=SQLAlchemyUserRepository(session),
        password_hasher=BcryptPasswordHasher(),
        token_service=token_service,
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
    service: UserService = Depends(get_user_service),
) -> User:
    """Resolve the bearer token on the request to a User, or fail with 401."""
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return await service.resolve_token(credentials.credentials)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
