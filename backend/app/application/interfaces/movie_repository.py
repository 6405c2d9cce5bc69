"""Abstract repository interface (port) for Movie persistence."""

from abc import ABC, abstractmethod

from app.domain.entities import Movie


class MovieRepository(ABC):
    """Port for movie persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, movie_id: str) -> Movie | None:
        """Retrieve a single movie by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Movie]:
        """Retrieve every stored movie in storage (insertion) order."""
        ...

    @abstractmethod
    async def create(self, movie: Movie) -> Movie:
        """Persist a new movie and return it with its generated ID."""
        ...

    @abstractmethod
    async def update(self, movie: Movie) -> Movie:
        """Save the mutable fields of an existing movie."""
        ...

    @abstractmethod
    async def delete(self, movie_id: str) -> bool:
        """Delete a movie. Returns True if deleted, False if not found."""
        ...
