"""
Unit test fixtures for the ticketing service.

The Unit of Work is an AsyncMock: entering it yields itself and its command
repositories are AsyncMocks too, so use cases run without a database.
"""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from src.service.ticketing.domain.entity.booking_entity import Booking, BookingStatus
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


@pytest.fixture
def mock_uow() -> Mock:
    uow = AsyncMock()
    uow.__aenter__.return_value = uow
    uow.__aexit__.return_value = False  # never swallow exceptions
    uow.booking_command_repo = AsyncMock()
    uow.event_command_repo = AsyncMock()
    return uow


@pytest.fixture
def active_event() -> EventEntity:
    return EventEntity(
        id=1,
        title='Jazz Night at the Park',
        venue='VOC Park',
        total_tickets=10,
        available_tickets=10,
        price=Decimal('50.00'),
        status=EventStatus.ACTIVE,
    )


@pytest.fixture
def confirmed_booking() -> Booking:
    now = datetime.now(timezone.utc)
    return Booking(
        id=7,
        event_id=1,
        user_name='Priya Raman',
        user_email='priya@example.com',
        user_phone='+91 98765 43210',
        tickets_booked=3,
        total_amount=Decimal('150.00'),
        booking_reference='CBEM0TEST0ABCDEFGH',
        status=BookingStatus.CONFIRMED,
        created_at=now,
        updated_at=now,
    )
