from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo


class GetBookingByReferenceUseCase:
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
    async def execute(self, *, booking_reference: str) -> Dict[str, Any]:
        """Booking plus the event's title, date, time and venue."""
        booking = await self.booking_query_repo.get_by_reference_with_event(
            booking_reference=booking_reference
        )
        if booking is None:
            raise NotFoundError('Booking not found')
        return booking
