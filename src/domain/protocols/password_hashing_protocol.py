"""Password hashing protocol for domain layer.

Infrastructure layer provides the concrete implementation (bcrypt).
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """One-way password hashing and verification.

    Implementations:
        - BcryptPasswordService: bcrypt with configurable cost factor

    Usage:
        password_hash = hasher.hash_password("SecurePass123!")
        is_valid = hasher.verify_password("SecurePass123!", password_hash)
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...).
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a hash.

        Returns:
            True if password matches hash. False on mismatch or on a
            malformed hash (never raises).
        """
        ...
