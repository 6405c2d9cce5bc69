"""Pydantic DTOs (Data Transfer Objects) for the Movie feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from app.domain.entities import Genre


class MovieCreate(BaseModel):
    """Schema for creating a new movie."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Inception"])
    description: str = Field(..., min_length=1, examples=["A thief who steals corporate secrets through dreams."])
    release: date = Field(..., examples=["2010-07-16"])
    director: str = Field(..., min_length=1, max_length=255, examples=["Christopher Nolan"])
    genre: Genre = Field(..., examples=[Genre.SCI_FI])


class MovieUpdate(BaseModel):
    """Schema for updating an existing movie — all fields optional, no others accepted."""

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    release: date | None = None
    director: str | None = Field(None, min_length=1, max_length=255)
    genre: Genre | None = None

    model_config = {"extra": "forbid"}


class MovieResponse(BaseModel):
    """Public representation of a movie returned to the client."""

    id: str
    title: str
    description: str
    release: date
    director: str
    genre: Genre
    created_by: str
    created_at: datetime

    model_config = {"from_attributes": True}


class MoviePageResponse(BaseModel):
    """One page of a filtered movie listing."""

    page: int
    limit: int
    total: int
    next: str | None
    value: list[MovieResponse]


class DeleteResponse(BaseModel):
    status: str = "deleted"
