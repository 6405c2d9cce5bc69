"""Abstract repository interface (port) for User persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import User


class UserRepository(ABC):
    """Port for user account persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_username(self, username: str) -> User | None:
        """Retrieve a user by their unique username."""
        ...

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return it with its generated ID."""
        ...
