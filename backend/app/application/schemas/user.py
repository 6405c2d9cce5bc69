"""Pydantic DTOs (Data Transfer Objects) for user accounts and login."""

from datetime import datetime

from pydantic import BaseModel, Field, StrictInt, model_validator

from app.domain.entities import Sex


class UserCreate(BaseModel):
    """Schema for registering a new user."""

    username: str = Field(..., min_length=1, max_length=100, examples=["moviebuff"])
    password: str = Field(..., min_length=6, max_length=20)
    confirm_password: str = Field(..., min_length=6, max_length=20)
    sex: Sex
    age: StrictInt

    @model_validator(mode="after")
    def check_passwords_match(self) -> "UserCreate":
        if self.password != self.confirm_password:
            raise ValueError("passwords are not equal")
        return self


class UserResponse(BaseModel):
    """Schema returned to the client — never includes the password hash."""

    id: str
    username: str
    sex: Sex
    age: int
    created_at: datetime

    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
