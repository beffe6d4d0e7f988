"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, UnitOfWorkProtocol
"""

# Service protocols
from src.domain.protocols.email_protocol import EmailProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import TokenGenerationProtocol

# Repository protocols
from src.domain.protocols.token_repository import TokenRepository
from src.domain.protocols.unit_of_work import UnitOfWorkProtocol
from src.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "EmailProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "TokenRepository",
    "UnitOfWorkProtocol",
    "UserRepository",
]
