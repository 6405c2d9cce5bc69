"""Application service for user registration and bearer-token authentication."""

import logging

from app.application.interfaces import PasswordHasher, TokenService, UserRepository
from app.application.schemas import UserCreate
from app.domain.entities import User
from app.domain.exceptions import AuthenticationError, DuplicateEntityError

logger = logging.getLogger(__name__)


class UserService:
    """Registers accounts, checks credentials, and resolves token holders."""

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._repository = repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def register(self, data: UserCreate) -> User:
        if await self._repository.get_by_username(data.username) is not None:
            raise DuplicateEntityError("User", "username", data.username)

        user = User(
            username=data.username,
            password_hash=self._password_hasher.hash(data.password),
            sex=data.sex,
            age=data.age,
        )
        created = await self._repository.create(user)
        logger.info("Registered user %s", created.username)
        return created

    async def authenticate(self, username: str, password: str) -> str:
        """Verify credentials and return a fresh access token.

        The same error is raised for an unknown username and a wrong
        password so callers cannot probe which accounts exist.
        """
        user = await self._repository.get_by_username(username)
        if user is None or not self._password_hasher.verify(password, user.password_hash):
            logger.warning("Failed login attempt for %s", username)
            raise AuthenticationError("Invalid username or password")
        return self._token_service.issue(user.username)

    async def resolve_token(self, token: str) -> User:
        """Return the user a valid access token was issued to."""
        username = self._token_service.verify(token)
        user = await self._repository.get_by_username(username)
        if user is None:
            raise AuthenticationError("Token subject no longer exists")
        return user
