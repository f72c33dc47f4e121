"""
Unit of Work - one database transaction shared by several repositories

- The UoW opens the session on enter and gives the same session to every repository
- ``commit()`` must be called explicitly; leaving the block without it rolls back
- The session (and its pooled connection) is released on every exit path
"""

from __future__ import annotations

import abc
from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
    from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Usage:
        async with uow:
            event = await uow.event_command_repo.get_for_update(event_id=...)
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()
    """

    booking_command_repo: IBookingCommandRepo
    event_command_repo: IEventCommandRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    def __init__(
        self, session_factory: Callable[[], AbstractAsyncContextManager[AsyncSession]]
    ) -> None:
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._session_cm: Optional[AbstractAsyncContextManager[AsyncSession]] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.ticketing.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
            EventCommandRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Repositories share the UoW session
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.event_command_repo = EventCommandRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            session_cm, self._session_cm, self.session = self._session_cm, None, None
            if session_cm is not None:
                await session_cm.__aexit__(*args)

    async def _commit(self) -> None:
        assert self.session is not None, 'UnitOfWork used outside of "async with"'
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
