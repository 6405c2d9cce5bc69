"""Domain entities for catalog listings — query descriptor and result page."""

import re
from dataclasses import dataclass, field

from app.domain.entities.movie import Movie
from app.domain.exceptions import InvalidQueryError

# Leading integer, the way JavaScript's parseInt reads "2.5" as 2 and "3abc" as 3.
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_count(parameter: str, raw: str | int | None) -> int:
    """Parse a page/limit value; missing, non-numeric, or zero falls back to 1."""
    if raw is None:
        return 1
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(raw)
        if match is None:
            return 1
        value = int(match.group(1))
    if value == 0:
        return 1
    if value < 0:
        raise InvalidQueryError(parameter, value)
    return value


@dataclass(frozen=True)
class MovieQuery:
    """Pagination and filter parameters for one listing request."""

    page: int = 1
    limit: int = 1
    search: str | None = None
    genre: str | None = None

    @classmethod
    def from_params(
        cls,
        page: str | int | None = None,
        limit: str | int | None = None,
        search: str | None = None,
        genre: str | None = None,
    ) -> "MovieQuery":
        """Build a query from raw caller-supplied parameters."""
        return cls(
            page=_parse_count("page", page),
            limit=_parse_count("limit", limit),
            search=search or None,
            genre=genre or None,
        )

    @property
    def start(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def end(self) -> int:
        return self.start + self.limit


@dataclass
class MoviePage:
    """One filtered, paginated slice of the catalog."""

    page: int
    limit: int
    total: int
    next: str | None = None
    value: list[Movie] = field(default_factory=list)
