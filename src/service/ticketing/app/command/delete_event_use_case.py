from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.enum.event_status import EventStatus


class DeleteEventUseCase:
    """Soft delete: the event turns inactive, its bookings stay readable."""

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, event_id: int) -> None:
        async with self.uow:
            updated = await self.uow.event_command_repo.update_status(
                event_id=event_id, status=EventStatus.INACTIVE
            )
            if not updated:
                raise NotFoundError('Event not found')
            await self.uow.commit()

        Logger.base.info(f'🗑️ [DELETE_EVENT] Event {event_id} deactivated')
