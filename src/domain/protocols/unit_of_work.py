"""Unit of work protocol.

Every auth workflow opens exactly one unit of work, performs its reads and
writes through the repositories exposed here, and commits once. Leaving the
context without committing discards the work.

Usage:
    async with uow:
        user = await uow.users.find_by_email(email)
        await uow.tokens.save(token)
        await uow.commit()
"""

from contextlib import AbstractAsyncContextManager
from types import TracebackType
from typing import Protocol, Self

from src.domain.protocols.token_repository import TokenRepository
from src.domain.protocols.user_repository import UserRepository


class UnitOfWorkProtocol(Protocol):
    """Transaction boundary shared by the user and token repositories.

    Attributes:
        users: User repository bound to this transaction.
        tokens: Token repository bound to this transaction.
    """

    users: UserRepository
    tokens: TokenRepository

    async def __aenter__(self) -> Self: ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...

    async def commit(self) -> None:
        """Commit all pending changes."""
        ...

    async def rollback(self) -> None:
        """Discard all pending changes."""
        ...

    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Open a nested transaction.

        An exception inside the block rolls back only the nested work and is
        re-raised. The outer transaction stays usable.
        """
        ...
