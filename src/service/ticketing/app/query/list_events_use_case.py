from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity


class ListEventsUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def execute(
        self,
        *,
        limit: int = 20,
        offset: int = 0,
        search: Optional[str] = None,
        upcoming: bool = False,
    ) -> List[EventEntity]:
        Logger.base.info('🌟 [LIST_EVENTS] Loading active events')

        events = await self.event_query_repo.list_active(
            limit=limit, offset=offset, search=search, upcoming=upcoming
        )

        Logger.base.info(f'✅ [LIST_EVENTS] Found {len(events)} active events')
        return events
