from datetime import datetime, timezone
from decimal import Decimal
from enum import StrEnum
from typing import Optional

import attrs

from src.platform.exception.exceptions import AlreadyCancelledError, ValidationError
from src.platform.logging.loguru_io import Logger


class BookingStatus(StrEnum):
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'


@attrs.define
class Booking:
    event_id: int
    user_name: str
    user_email: str
    user_phone: str
    tickets_booked: int
    total_amount: Decimal
    booking_reference: str
    status: BookingStatus = BookingStatus.CONFIRMED
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        event_id: int,
        user_name: str,
        user_email: str,
        user_phone: str,
        tickets_booked: int,
        unit_price: Decimal,
        booking_reference: str,
    ) -> 'Booking':
        """total_amount is frozen here: later price changes on the event do not touch it."""
        if tickets_booked < 1:
            raise ValidationError('tickets_booked must be a positive integer')
        if not user_name.strip():
            raise ValidationError('user_name is required')

        now = datetime.now(timezone.utc)
        return cls(
            event_id=event_id,
            user_name=user_name,
            user_email=user_email,
            user_phone=user_phone,
            tickets_booked=tickets_booked,
            total_amount=Decimal(unit_price) * tickets_booked,
            booking_reference=booking_reference,
            status=BookingStatus.CONFIRMED,
            created_at=now,
            updated_at=now,
        )

    @Logger.io
    def cancel(self) -> 'Booking':
        """
        Raises:
            AlreadyCancelledError: confirmed → cancelled happens exactly once
        """
        if self.status == BookingStatus.CANCELLED:
            raise AlreadyCancelledError()

        return attrs.evolve(
            self, status=BookingStatus.CANCELLED, updated_at=datetime.now(timezone.utc)
        )
