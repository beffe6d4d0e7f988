"""SQLAlchemy unit of work.

Wraps one AsyncSession and exposes the user and token repositories bound
to it. Handlers commit explicitly. Leaving the context without a commit
rolls back whatever is still pending.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    TokenRepository,
    UserRepository,
)


class SqlAlchemyUnitOfWork:
    """Implements UnitOfWorkProtocol over a single AsyncSession.

    Args:
        session: Session shared by both repositories.
        close_on_exit: Close the session when the context exits. Used by
            background jobs that create their own sessions. Request-scoped
            sessions are closed by the FastAPI dependency instead.

    Example:
        >>> async with db.get_session() as session:
        ...     async with SqlAlchemyUnitOfWork(session) as uow:
        ...         await uow.tokens.save(token)
        ...         await uow.commit()
    """

    def __init__(self, session: AsyncSession, *, close_on_exit: bool = False) -> None:
        self.session = session
        self.users = UserRepository(session)
        self.tokens = TokenRepository(session)
        self._close_on_exit = close_on_exit

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.rollback()
        if self._close_on_exit:
            await self.session.close()

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        """Run a block inside SAVEPOINT (``session.begin_nested()``)."""
        async with self.session.begin_nested():
            yield
