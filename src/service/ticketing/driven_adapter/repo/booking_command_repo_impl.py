"""
Booking Command Repository Implementation

Runs on the Unit of Work session. Never commits; the use case decides.
"""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.domain.entity.booking_entity import Booking, BookingStatus
from src.service.ticketing.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @staticmethod
    def _to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            event_id=db_booking.event_id,
            user_name=db_booking.user_name,
            user_email=db_booking.user_email,
            user_phone=db_booking.user_phone,
            tickets_booked=db_booking.tickets_booked,
            total_amount=db_booking.total_amount,
            booking_reference=db_booking.booking_reference,
            status=BookingStatus(db_booking.status),
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        db_booking = BookingModel(
            event_id=booking.event_id,
            user_name=booking.user_name,
            user_email=booking.user_email,
            user_phone=booking.user_phone,
            tickets_booked=booking.tickets_booked,
            total_amount=booking.total_amount,
            booking_reference=booking.booking_reference,
            status=booking.status.value,
            created_at=booking.created_at,
            updated_at=booking.updated_at,
        )
        self.session.add(db_booking)
        # Flush so the id is assigned and unique-reference violations surface inside the UoW
        await self.session.flush()
        await self.session.refresh(db_booking)
        return self._to_entity(db_booking)

    @Logger.io
    async def get_for_update(self, *, booking_id: int) -> Optional[Booking]:
        result = await self.session.execute(
            select(BookingModel).where(BookingModel.id == booking_id).with_for_update()
        )
        db_booking = result.scalar_one_or_none()
        if not db_booking:
            return None
        return self._to_entity(db_booking)

    @Logger.io
    async def update_status(self, *, booking: Booking) -> Booking:
        await self.session.execute(
            update(BookingModel)
            .where(BookingModel.id == booking.id)
            .values(status=booking.status.value, updated_at=booking.updated_at)
            .execution_options(synchronize_session=False)
        )
        return booking
