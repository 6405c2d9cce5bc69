from .bcrypt_hasher import BcryptPasswordHasher
from .jwt_token_service import JWTTokenService

__all__ = [
    "BcryptPasswordHasher",
    "JWTTokenService",
]
