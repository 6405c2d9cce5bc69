from .movie import Movie, Genre, GENRE_LABELS, MUTABLE_FIELDS
from .user import User, Sex
from .catalog import MovieQuery, MoviePage

__all__ = [
    "Movie",
    "Genre",
    "GENRE_LABELS",
    "MUTABLE_FIELDS",
    "User",
    "Sex",
    "MovieQuery",
    "MoviePage",
]
