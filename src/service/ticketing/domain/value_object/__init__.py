"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.booking_reference import (
    generate_booking_reference,
)

__all__ = ['generate_booking_reference']
