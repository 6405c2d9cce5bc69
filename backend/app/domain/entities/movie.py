"""Domain entity for catalog movies."""

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any

from app.domain.exceptions import RestrictedFieldError


class Genre(str, Enum):
    """Closed set of genres a movie may be tagged with."""

    ACTION = "Action"
    ADVENTURE = "Adventure"
    ANIMATION = "Animation"
    COMEDY = "Comedy"
    CRIME = "Crime"
    DOCUMENTARY = "Documentary"
    DRAMA = "Drama"
    FANTASY = "Fantasy"
    HORROR = "Horror"
    MYSTERY = "Mystery"
    ROMANCE = "Romance"
    SCI_FI = "Sci-Fi"
    THRILLER = "Thriller"
    WESTERN = "Western"


# Keep in the same order as Genre above.
GENRE_LABELS: tuple[str, ...] = (
    "Action",
    "Adventure",
    "Animation",
    "Comedy",
    "Crime",
    "Documentary",
    "Drama",
    "Fantasy",
    "Horror",
    "Mystery",
    "Romance",
    "Sci-Fi",
    "Thriller",
    "Western",
)

MUTABLE_FIELDS: frozenset[str] = frozenset({
    "title",
    "description",
    "release",
    "director",
    "genre",
})


@dataclass
class Movie:
    """A stored catalog entry for one movie.

    ``created_by`` and ``created_at`` are stamped once on creation and
    never change afterwards.
    """

    title: str
    description: str
    release: date
    director: str
    genre: Genre
    created_by: str
    id: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def apply_changes(self, changes: dict[str, Any]) -> None:
        """Assign the given fields, rejecting the whole batch if any key is not mutable."""
        for key in changes:
            if key not in MUTABLE_FIELDS:
                raise RestrictedFieldError(key)
        for key, value in changes.items():
            setattr(self, key, value)
