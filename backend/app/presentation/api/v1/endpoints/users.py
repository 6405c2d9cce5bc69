"""User account endpoints — registration, login, and current user."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import LoginRequest, TokenResponse, UserCreate, UserResponse
from app.application.services import UserService
from app.domain.entities import User
from app.domain.exceptions import AuthenticationError, DuplicateEntityError
from app.infrastructure.dependencies import get_current_user, get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a new user account."""
    try:
        user = await service.register(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("/login", response_model=TokenResponse)
async def login(
    data: LoginRequest,
    service: UserService = Depends(get_user_service),
) -> TokenResponse:
    """Exchange username and password for a bearer access token."""
    try:
        token = await service.authenticate(data.username, data.password)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )
    return TokenResponse(access_token=token)


@router.get("/me", response_model=UserResponse)
async def read_current_user(
    user: User = Depends(get_current_user),
) -> UserResponse:
    """Return the account the bearer token belongs to."""
    return UserResponse.model_validate(user, from_attributes=True)
