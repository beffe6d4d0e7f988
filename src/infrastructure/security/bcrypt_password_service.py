"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt.

Security:
    - Adaptive algorithm (cost factor raised over time via settings)
    - Random salt per hash, so equal passwords hash differently
    - Constant-time verification

Performance:
    Cost factor is logarithmic: each +1 doubles computation time.
    12 is ~250ms per hash. Tests run with 4.
"""

import bcrypt

# bcrypt only reads the first 72 bytes; newer releases reject longer input
BCRYPT_MAX_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (4 to 31, default: 12).

        Raises:
            ValueError: If cost factor is outside the range bcrypt accepts.
        """
        if not 4 <= cost_factor <= 31:
            msg = "Cost factor must be between 4 and 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$<cost>$...), 60 chars.
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_bytes = password.encode("utf-8")[:BCRYPT_MAX_BYTES]
        password_hash = bcrypt.hashpw(password_bytes, salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash. False on mismatch or when the
            stored hash is not a bcrypt hash.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.verify_password("SecurePass123!", "invalid_hash")
            False
        """
        try:
            return bcrypt.checkpw(
                password.encode("utf-8")[:BCRYPT_MAX_BYTES],
                password_hash.encode("utf-8"),
            )
        except (ValueError, AttributeError):
            return False
