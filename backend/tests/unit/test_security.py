"""Unit tests for the bcrypt hasher and JWT token service."""

import jwt
import pytest

from app.domain.exceptions import AuthenticationError
from app.infrastructure.security import BcryptPasswordHasher, JWTTokenService


def test_bcrypt_round_trip():
    hasher = BcryptPasswordHasher(rounds=4)
    hashed = hasher.hash("secret1")

    assert hasher.verify("secret1", hashed)
    assert not hasher.verify("secret2", hashed)


def test_bcrypt_verify_against_garbage_hash():
    assert not BcryptPasswordHasher(rounds=4).verify("secret1", "not-a-hash")


def test_token_subject_round_trip(token_service: JWTTokenService):
    token = token_service.issue("alice")

    assert token_service.verify(token) == "alice"


def test_expired_token_is_rejected():
    service = JWTTokenService(secret_key="k", issuer="tests", expire_minutes=-1)
    token = service.issue("alice")

    with pytest.raises(AuthenticationError, match="expired"):
        service.verify(token)


def test_token_signed_with_other_key_is_rejected(token_service: JWTTokenService):
    forged = JWTTokenService(secret_key="other", issuer="movie-catalog-tests").issue("alice")

    with pytest.raises(AuthenticationError):
        token_service.verify(forged)


def test_token_from_other_issuer_is_rejected(token_service: JWTTokenService):
    foreign = jwt.encode(
        {"sub": "alice", "iss": "someone-else", "exp": 4102444800},
        "test-secret",
        algorithm="HS256",
    )

    with pytest.raises(AuthenticationError):
        token_service.verify(foreign)


def test_malformed_token_is_rejected(token_service: JWTTokenService):
    with pytest.raises(AuthenticationError):
        token_service.verify("definitely.not.a-jwt")
