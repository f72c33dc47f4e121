"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.event_status import EventStatus

__all__ = ['EventStatus']
