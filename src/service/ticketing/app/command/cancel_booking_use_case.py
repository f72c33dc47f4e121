from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.booking_entity import Booking


class CancelBookingUseCase:
    """
    Cancel a confirmed booking and return its tickets to the event.

    The booking row is locked first, so two concurrent cancels serialize and
    the second one sees the cancelled status (no double re-credit).
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, booking_id: int) -> Booking:
        async with self.uow:
            booking = await self.uow.booking_command_repo.get_for_update(booking_id=booking_id)
            if booking is None:
                raise NotFoundError('Booking not found')

            # Raises AlreadyCancelledError before anything is written
            cancelled = booking.cancel()
            await self.uow.booking_command_repo.update_status(booking=cancelled)

            remaining = await self.uow.event_command_repo.increment_available_tickets(
                event_id=cancelled.event_id, tickets=cancelled.tickets_booked
            )
            await self.uow.commit()

        Logger.base.info(
            f'↩️ [CANCEL] Booking {booking_id} cancelled, '
            f'{cancelled.tickets_booked} ticket(s) back to event {cancelled.event_id} ({remaining} left)'
        )
        return cancelled
