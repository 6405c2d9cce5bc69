"""Unit tests for UserService registration and token handling."""

import pytest

from app.application.schemas import UserCreate
from app.application.services import UserService
from app.domain.exceptions import AuthenticationError, DuplicateEntityError


def _registration(username: str = "bob", password: str = "secret1") -> UserCreate:
    return UserCreate(
        username=username,
        password=password,
        confirm_password=password,
        sex="male",
        age=41,
    )


@pytest.mark.asyncio
async def test_register_hashes_password(user_service: UserService, user_repository):
    user = await user_service.register(_registration())

    assert user.id is not None
    stored = user_repository.users["bob"]
    assert stored.password_hash != "secret1"
    assert stored.password_hash.startswith("$2")


@pytest.mark.asyncio
async def test_register_duplicate_username(user_service: UserService):
    await user_service.register(_registration())

    with pytest.raises(DuplicateEntityError):
        await user_service.register(_registration())


@pytest.mark.asyncio
async def test_authenticate_and_resolve_token(user_service: UserService):
    await user_service.register(_registration())

    token = await user_service.authenticate("bob", "secret1")
    user = await user_service.resolve_token(token)

    assert user.username == "bob"


@pytest.mark.asyncio
async def test_authenticate_wrong_password(user_service: UserService):
    await user_service.register(_registration())

    with pytest.raises(AuthenticationError):
        await user_service.authenticate("bob", "wrong-password")


@pytest.mark.asyncio
async def test_authenticate_unknown_user(user_service: UserService):
    with pytest.raises(AuthenticationError):
        await user_service.authenticate("nobody", "secret1")


@pytest.mark.asyncio
async def test_resolve_token_for_deleted_user(user_service: UserService, token_service):
    token = token_service.issue("ghost")

    with pytest.raises(AuthenticationError):
        await user_service.resolve_token(token)
