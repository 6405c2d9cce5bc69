"""Catalog query engine — in-process filtering and offset pagination of movies.

The repository hands over every stored movie; this module narrows that
snapshot with the listing's search/genre predicate, counts the matches, and
cuts out the requested page. Nothing here touches storage or raises: bad
paging input has already been defaulted by ``MovieQuery.from_params`` and
an unknown genre or search term just matches nothing.
"""

from collections.abc import Callable, Sequence
from urllib.parse import urlencode

from app.domain.entities import GENRE_LABELS, Movie, MovieQuery, MoviePage


def build_filter(query: MovieQuery) -> Callable[[Movie], bool]:
    """Predicate: search term in title OR description, AND exact genre when given."""
    needle = (query.search or "").casefold()
    genre = query.genre

    def predicate(movie: Movie) -> bool:
        if needle not in movie.title.casefold() and needle not in movie.description.casefold():
            return False
        if genre is not None and movie.genre != genre:
            return False
        return True

    return predicate


def build_next_link(query: MovieQuery, listing_path: str) -> str:
    """Link to the page after ``query``, carrying over limit and filters."""
    params: dict[str, str | int] = {"page": query.page + 1, "limit": query.limit}
    if query.search:
        params["search"] = query.search
    if query.genre:
        params["genre"] = query.genre
    return f"{listing_path}?{urlencode(params)}"


def compute_result_page(
    movies: Sequence[Movie],
    query: MovieQuery,
    listing_path: str = "/movies",
) -> MoviePage:
    """Filter ``movies`` (in storage order) and return the page described by ``query``."""
    predicate = build_filter(query)
    matched = [movie for movie in movies if predicate(movie)]
    total = len(matched)

    start, end = query.start, query.end
    next_link = None if end >= total else build_next_link(query, listing_path)

    return MoviePage(
        page=query.page,
        limit=query.limit,
        total=total,
        next=next_link,
        value=matched[start:end],
    )


def list_genres() -> list[str]:
    """Every genre label, in declaration order."""
    return list(GENRE_LABELS)
