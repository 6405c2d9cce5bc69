"""Abstract interface (port) for password hashing."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Port for one-way password hashing — implemented in the infrastructure layer."""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Return a salted hash suitable for storage."""
        ...

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Check a plain password against a stored hash."""
        ...
