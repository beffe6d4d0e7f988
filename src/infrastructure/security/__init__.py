"""Security infrastructure adapters.

- Password hashing (bcrypt)
- JWT access token generation/validation (PyJWT)
- Opaque token and token pair issuing
"""

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from src.infrastructure.security.jwt_service import JWTService
from src.infrastructure.security.token_issuer import IssuedTokens, TokenIssuer

__all__ = [
    "BcryptPasswordService",
    "IssuedTokens",
    "JWTService",
    "TokenIssuer",
]
