"""Movie catalog endpoints — listing, lookup, and CRUD."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    DeleteResponse,
    MovieCreate,
    MoviePageResponse,
    MovieResponse,
    MovieUpdate,
)
from app.application.services import MovieService
from app.domain.entities import MovieQuery, User
from app.domain.exceptions import EntityNotFoundError, InvalidRequestError
from app.infrastructure.dependencies import get_current_user, get_movie_service

router = APIRouter(prefix="/movies", tags=["Movies"])


@router.get("", response_model=MoviePageResponse)
async def list_movies(
    page: str | None = Query(None, description="1-based page number"),
    limit: str | None = Query(None, description="Movies per page"),
    search: str | None = Query(None, description="Case-insensitive text matched against title or description"),
    genre: str | None = Query(None, description="Exact genre label"),
    service: MovieService = Depends(get_movie_service),
) -> MoviePageResponse:
    """Retrieve a filtered, paginated page of movies."""
    try:
        query = MovieQuery.from_params(page=page, limit=limit, search=search, genre=genre)
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    result = await service.list_movies(query)
    return MoviePageResponse(
        page=result.page,
        limit=result.limit,
        total=result.total,
        next=result.next,
        value=[MovieResponse.model_validate(m, from_attributes=True) for m in result.value],
    )


@router.get("/genres", response_model=list[str])
async def list_genres(
    service: MovieService = Depends(get_movie_service),
) -> list[str]:
    """List every genre label a movie may carry."""
    return service.list_genres()


@router.get("/{movie_id}", response_model=MovieResponse)
async def get_movie(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
) -> MovieResponse:
    """Retrieve a single movie by ID."""
    try:
        movie = await service.get_movie(movie_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return MovieResponse.model_validate(movie, from_attributes=True)


@router.post("", response_model=MovieResponse, status_code=status.HTTP_201_CREATED)
async def create_movie(
    data: MovieCreate,
    user: User = Depends(get_current_user),
    service: MovieService = Depends(get_movie_service),
) -> MovieResponse:
    """Create a new movie authored by the authenticated user."""
    movie = await service.create_movie(data, user)
    return MovieResponse.model_validate(movie, from_attributes=True)


@router.put("/{movie_id}", response_model=MovieResponse)
async def update_movie(
    movie_id: str,
    data: MovieUpdate,
    service: MovieService = Depends(get_movie_service),
) -> MovieResponse:
    """Update the mutable fields of an existing movie."""
    try:
        movie = await service.update_movie(movie_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidRequestError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return MovieResponse.model_validate(movie, from_attributes=True)


@router.delete("/{movie_id}", response_model=DeleteResponse)
async def delete_movie(
    movie_id: str,
    service: MovieService = Depends(get_movie_service),
) -> DeleteResponse:
    """Delete a movie by ID."""
    try:
        await service.delete_movie(movie_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return DeleteResponse()
