from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


class IEventCommandRepo(ABC):
    """
    Event writes, including the available_tickets counter.
    Runs on the Unit of Work session; the caller commits.
    """

    @abstractmethod
    async def create(self, *, event: EventEntity) -> EventEntity:
        pass

    @abstractmethod
    async def get_for_update(self, *, event_id: int) -> Optional[EventEntity]:
        """Read an event holding a row lock until the transaction ends"""
        pass

    @abstractmethod
    async def decrement_available_tickets(self, *, event_id: int, tickets: int) -> int:
        """
        Guarded decrement (never below zero).

        Returns:
            Remaining available_tickets

        Raises:
            InsufficientInventoryError: when fewer than ``tickets`` are left
        """
        pass

    @abstractmethod
    async def increment_available_tickets(self, *, event_id: int, tickets: int) -> int:
        """Returns remaining available_tickets; never exceeds total_tickets"""
        pass

    @abstractmethod
    async def update_status(self, *, event_id: int, status: EventStatus) -> bool:
        """Returns False when the event does not exist"""
        pass

    @abstractmethod
    async def update(self, *, event: EventEntity) -> EventEntity:
        """
        Overwrite every column of an existing event, counters included.
        Call only while holding the row lock from get_for_update.

        Raises:
            NotFoundError: the event does not exist
        """
        pass
