"""Result types for railway-oriented programming.

Handlers in this service never raise for expected failures (bad password,
consumed token, duplicate email). They return a Result instead, which keeps
every failure path explicit at the call site.

Usage:
    result = await login_handler.handle(LoginUser(email=..., password=...))
    match result:
        case Success(value=auth):
            print(auth.access_token)
        case Failure(error=error):
            print(error.code, error.message)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
Result: TypeAlias = Success[T] | Failure[E]
