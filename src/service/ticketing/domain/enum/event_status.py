from enum import StrEnum


class EventStatus(StrEnum):
    """Only ACTIVE events are listed publicly and accept bookings."""

    ACTIVE = 'active'
    INACTIVE = 'inactive'  # soft-deleted
