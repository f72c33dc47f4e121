from typing import Any, Dict, List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo


class ListBookingsUseCase:
    def __init__(self, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def execute(
        self, *, event_id: Optional[int] = None, limit: int = 50, offset: int = 0
    ) -> List[Dict[str, Any]]:
        """Newest first, optionally narrowed to one event"""
        bookings = await self.booking_query_repo.list_with_event(
            event_id=event_id, limit=limit, offset=offset
        )
        Logger.base.info(
            f'📋 [LIST_BOOKINGS] {len(bookings)} booking(s) '
            f'(event={event_id}, limit={limit}, offset={offset})'
        )
        return bookings
