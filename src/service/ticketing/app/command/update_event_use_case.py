from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.event_entity import EventEntity


class UpdateEventUseCase:
    """
    Edit an event under its row lock.

    A new total_tickets shifts available_tickets by the same amount, so
    bookings made before the edit keep their tickets. Shrinking below the
    tickets already sold is rejected.
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, event_id: int, changes: Dict[str, Any]) -> EventEntity:
        """
        Args:
            changes: only the fields to overwrite, keyed by EventEntity attribute

        Raises:
            NotFoundError: no such event (inactive events can still be edited)
            ValidationError: total_tickets below the tickets already sold
        """
        async with self.uow:
            event = await self.uow.event_command_repo.get_for_update(event_id=event_id)
            if event is None:
                raise NotFoundError('Event not found')

            event.update_details(**changes)
            event = await self.uow.event_command_repo.update(event=event)
            await self.uow.commit()

        Logger.base.info(
            f'✏️ [UPDATE_EVENT] Event {event_id} updated: '
            f'{event.available_tickets}/{event.total_tickets} available'
        )
        return event
