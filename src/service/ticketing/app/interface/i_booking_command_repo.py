from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    """
    Booking writes. Always runs on the Unit of Work session; the caller commits.
    """

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        """Insert a booking and return it with its generated id"""
        pass

    @abstractmethod
    async def get_for_update(self, *, booking_id: int) -> Optional[Booking]:
        """Read a booking holding a row lock until the transaction ends"""
        pass

    @abstractmethod
    async def update_status(self, *, booking: Booking) -> Booking:
        pass
