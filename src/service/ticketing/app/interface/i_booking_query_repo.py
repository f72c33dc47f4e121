from abc import ABC, abstractmethod
from typing import List, Optional


class IBookingQueryRepo(ABC):
    """Repository interface for booking read operations"""

    @abstractmethod
    async def get_by_reference_with_event(self, *, booking_reference: str) -> Optional[dict]:
        """Booking joined with event display fields (title, date, time, venue)"""
        pass

    @abstractmethod
    async def list_with_event(
        self, *, event_id: Optional[int], limit: int, offset: int
    ) -> List[dict]:
        """Newest first; limit/offset are bound parameters"""
        pass
