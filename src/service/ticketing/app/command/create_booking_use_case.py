from decimal import Decimal
from typing import Callable, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.domain.entity.booking_entity import Booking
from src.service.ticketing.domain.value_object.booking_reference import generate_booking_reference


class CreateBookingUseCase:
    """
    Book tickets for an event in one transaction.

    Flow:
    1. Lock the event row (FOR UPDATE / BEGIN IMMEDIATE on SQLite)
    2. Check the event is active and has enough tickets
    3. Insert a confirmed booking with a fresh reference and frozen total
    4. Decrement available_tickets
    5. Commit; any failure before this point rolls everything back
    """

    def __init__(
        self,
        *,
        uow: AbstractUnitOfWork,
        reference_generator: Callable[[], str] = generate_booking_reference,
    ) -> None:
        self.uow = uow
        self.reference_generator = reference_generator

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        event_id: int,
        user_name: str,
        user_email: str,
        user_phone: str,
        tickets_booked: int,
    ) -> Booking:
        """
        Raises:
            NotFoundError: event missing or inactive
            InsufficientInventoryError: fewer tickets left than requested (carries ``available``)
            ValidationError: tickets_booked < 1 or blank name
        """
        async with self.uow:
            event = await self.uow.event_command_repo.get_for_update(event_id=event_id)
            if event is None or not event.is_active:
                raise NotFoundError('Event not found or inactive')

            event.ensure_can_book(tickets=tickets_booked)

            booking = Booking.create(
                event_id=event_id,
                user_name=user_name,
                user_email=user_email,
                user_phone=user_phone,
                tickets_booked=tickets_booked,
                unit_price=Decimal(event.price),
                booking_reference=self.reference_generator(),
            )
            booking = await self.uow.booking_command_repo.create(booking=booking)

            remaining = await self.uow.event_command_repo.decrement_available_tickets(
                event_id=event_id, tickets=tickets_booked
            )
            await self.uow.commit()

        Logger.base.info(
            f'🎟️ [BOOKING] {booking.booking_reference} confirmed: '
            f'{tickets_booked} ticket(s) for event {event_id}, {remaining} left'
        )
        return booking
