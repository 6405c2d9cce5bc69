"""Abstract interface (port) for bearer token issuing and verification."""

from abc import ABC, abstractmethod


class TokenService(ABC):
    """Port for access tokens — implemented in the infrastructure layer."""

    @abstractmethod
    def issue(self, subject: str) -> str:
        """Create a signed access token for the given subject (username)."""
        ...

    @abstractmethod
    def verify(self, token: str) -> str:
        """Return the token's subject.

        Raises:
            AuthenticationError: if the token is malformed, expired, or forged.
        """
        ...
