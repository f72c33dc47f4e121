"""
Event Command Repository Implementation

Owns every write to ``event.available_tickets``. The increment and decrement are
single conditional UPDATE statements, so the range check and the write happen
atomically in the database even without the preceding row lock. ``update``
writes absolute counter values and relies on the lock from ``get_for_update``.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import (
    ConflictError,
    InsufficientInventoryError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.driven_adapter.model.event_model import EventModel


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_event: EventModel) -> EventEntity:
        return EventEntity(
            id=db_event.id,
            title=db_event.title,
            description=db_event.description,
            short_description=db_event.short_description,
            venue=db_event.venue,
            location=db_event.location,
            event_date=db_event.event_date,
            event_time=db_event.event_time,
            image_url=db_event.image_url,
            total_tickets=db_event.total_tickets,
            available_tickets=db_event.available_tickets,
            price=db_event.price,
            status=EventStatus(db_event.status),
            created_at=db_event.created_at,
            updated_at=db_event.updated_at,
        )

    async def _available_tickets(self, *, event_id: int) -> Optional[int]:
        result = await self.session.execute(
            select(EventModel.available_tickets).where(EventModel.id == event_id)
        )
        return result.scalar_one_or_none()

    @Logger.io
    async def create(self, *, event: EventEntity) -> EventEntity:
        db_event = EventModel(
            title=event.title,
            description=event.description,
            short_description=event.short_description,
            venue=event.venue,
            location=event.location,
            event_date=event.event_date,
            event_time=event.event_time,
            image_url=event.image_url,
            total_tickets=event.total_tickets,
            available_tickets=event.available_tickets,
            price=event.price,
            status=event.status.value,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )
        self.session.add(db_event)
        await self.session.flush()
        await self.session.refresh(db_event)
        return self._to_entity(db_event)

    @Logger.io
    async def get_for_update(self, *, event_id: int) -> Optional[EventEntity]:
        result = await self.session.execute(
            select(EventModel).where(EventModel.id == event_id).with_for_update()
        )
        db_event = result.scalar_one_or_none()
        if not db_event:
            return None
        return self._to_entity(db_event)

    @Logger.io
    async def decrement_available_tickets(self, *, event_id: int, tickets: int) -> int:
        result = await self.session.execute(
            update(EventModel)
            .where(EventModel.id == event_id, EventModel.available_tickets >= tickets)
            .values(
                available_tickets=EventModel.available_tickets - tickets,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # pyright: ignore[reportAttributeAccessIssue]
            available = await self._available_tickets(event_id=event_id)
            raise InsufficientInventoryError(available=available or 0)

        remaining = await self._available_tickets(event_id=event_id)
        return remaining or 0

    @Logger.io
    async def increment_available_tickets(self, *, event_id: int, tickets: int) -> int:
        result = await self.session.execute(
            update(EventModel)
            .where(
                EventModel.id == event_id,
                EventModel.available_tickets + tickets <= EventModel.total_tickets,
            )
            .values(
                available_tickets=EventModel.available_tickets + tickets,
                updated_at=datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # pyright: ignore[reportAttributeAccessIssue]
            raise ConflictError('Returning these tickets would exceed the event total')

        remaining = await self._available_tickets(event_id=event_id)
        return remaining or 0

    @Logger.io
    async def update(self, *, event: EventEntity) -> EventEntity:
        result = await self.session.execute(
            update(EventModel)
            .where(EventModel.id == event.id)
            .values(
                title=event.title,
                description=event.description,
                short_description=event.short_description,
                venue=event.venue,
                location=event.location,
                event_date=event.event_date,
                event_time=event.event_time,
                image_url=event.image_url,
                total_tickets=event.total_tickets,
                available_tickets=event.available_tickets,
                price=event.price,
                status=event.status.value,
                updated_at=event.updated_at or datetime.now(timezone.utc),
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:  # pyright: ignore[reportAttributeAccessIssue]
            raise NotFoundError('Event not found')
        return event

    @Logger.io
    async def update_status(self, *, event_id: int, status: EventStatus) -> bool:
        result = await self.session.execute(
            update(EventModel)
            .where(EventModel.id == event_id)
            .values(status=status.value, updated_at=datetime.now(timezone.utc))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount > 0  # pyright: ignore[reportAttributeAccessIssue]
