from datetime import date
from typing import AsyncContextManager, Callable, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.repo.event_command_repo_impl import (
    EventCommandRepoImpl,
)


LIKE_ESCAPE = '\\'


def escape_like(value: str) -> str:
    """Make %, _ and the escape character match themselves in a LIKE pattern."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace('%', f'{LIKE_ESCAPE}%')
        .replace('_', f'{LIKE_ESCAPE}_')
    )


class EventQueryRepoImpl(IEventQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @Logger.io
    async def get_by_id(self, *, event_id: int) -> Optional[EventEntity]:
        async with self.session_factory() as session:
            result = await session.execute(select(EventModel).where(EventModel.id == event_id))
            db_event = result.scalar_one_or_none()
            if not db_event:
                return None
            return EventCommandRepoImpl._to_entity(db_event)

    @Logger.io(truncate_content=True)  # type: ignore
    async def list_active(
        self,
        *,
        limit: int,
        offset: int,
        search: Optional[str] = None,
        upcoming: bool = False,
    ) -> List[EventEntity]:
        query = select(EventModel).where(EventModel.status == EventStatus.ACTIVE.value)
        if search:
            pattern = f'%{escape_like(search)}%'
            query = query.where(
                or_(
                    EventModel.title.ilike(pattern, escape=LIKE_ESCAPE),
                    EventModel.description.ilike(pattern, escape=LIKE_ESCAPE),
                    EventModel.venue.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        if upcoming:
            query = query.where(EventModel.event_date >= date.today())
        query = (
            query.order_by(EventModel.event_date.asc(), EventModel.id.asc())
            .limit(limit)
            .offset(offset)
        )

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [EventCommandRepoImpl._to_entity(db_event) for db_event in result.scalars()]
