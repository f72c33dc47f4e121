from datetime import date
from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.event_entity import EventEntity


class CreateEventUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        title: str,
        total_tickets: int,
        price: Decimal,
        description: str = '',
        short_description: str = '',
        venue: str = '',
        location: str = '',
        event_date: Optional[date] = None,
        event_time: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> EventEntity:
        """New events start active with available_tickets == total_tickets."""
        event = EventEntity.create(
            title=title,
            total_tickets=total_tickets,
            price=price,
            description=description,
            short_description=short_description,
            venue=venue,
            location=location,
            event_date=event_date,
            event_time=event_time,
            image_url=image_url,
        )

        async with self.uow:
            event = await self.uow.event_command_repo.create(event=event)
            await self.uow.commit()

        Logger.base.info(f'🎪 [CREATE_EVENT] Event {event.id} "{event.title}" created')
        return event
