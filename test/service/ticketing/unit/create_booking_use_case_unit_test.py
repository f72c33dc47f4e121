"""
Unit tests for CreateBookingUseCase

Test Focus:
1. Happy path: booking inserted, inventory decremented, transaction committed
2. Fail Fast: missing/inactive event, not enough tickets, invalid ticket count
3. Failures after the insert never reach commit (the UoW rolls back on exit)
"""

from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import attrs
import pytest

from src.platform.exception.exceptions import (
    InsufficientInventoryError,
    NotFoundError,
    ValidationError,
)
from src.service.ticketing.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.ticketing.domain.entity.booking_entity import Booking, BookingStatus
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


BOOKING_KWARGS = {
    'event_id': 1,
    'user_name': 'Priya Raman',
    'user_email': 'priya@example.com',
    'user_phone': '+91 98765 43210',
}


def _persisted(booking: Booking) -> Booking:
    return attrs.evolve(booking, id=42)


@pytest.mark.unit
class TestCreateBookingUseCase:
    @pytest.fixture
    def use_case(self, mock_uow: Mock) -> CreateBookingUseCase:
        return CreateBookingUseCase(uow=mock_uow, reference_generator=lambda: 'CBETESTREF00000001')

    @pytest.mark.asyncio
    async def test_booking_is_confirmed_and_inventory_decremented(
        self, use_case: CreateBookingUseCase, mock_uow: Mock, active_event: EventEntity
    ) -> None:
        # Arrange
        mock_uow.event_command_repo.get_for_update = AsyncMock(return_value=active_event)
        mock_uow.booking_command_repo.create = AsyncMock(
            side_effect=lambda *, booking: _persisted(booking)
        )
        mock_uow.event_command_repo.decrement_available_tickets = AsyncMock(return_value=7)

        # Act
        booking = await use_case.execute(**BOOKING_KWARGS, tickets_booked=3)

        # Assert
        assert booking.id == 42
        assert booking.booking_reference == 'CBETESTREF00000001'
        assert booking.status == BookingStatus.CONFIRMED
        assert booking.total_amount == Decimal('150.00')

        mock_uow.event_command_repo.get_for_update.assert_awaited_once_with(event_id=1)
        mock_uow.event_command_repo.decrement_available_tickets.assert_awaited_once_with(
            event_id=1, tickets=3
        )
        mock_uow.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_total_amount_is_price_times_tickets(
        self, use_case: CreateBookingUseCase, mock_uow: Mock, active_event: EventEntity
    ) -> None:
        # Arrange
        active_event.price = Decimal('12.75')
        mock_uow.event_command_repo.get_for_update = AsyncMock(return_value=active_event)
        mock_uow.booking_command_repo.create = AsyncMock(
            side_effect=lambda *, booking: _persisted(booking)
        )

        # Act
        booking = await use_case.execute(**BOOKING_KWARGS, tickets_booked=4)

        # Assert
        assert booking.total_amount == Decimal('51.00')

    @pytest.mark.asyncio
    async def test_fail_when_event_not_found(
        self, use_case: CreateBookingUseCase, mock_uow: Mock
    ) -> None:
        # Arrange
        mock_uow.event_command_repo.get_for_update = AsyncMock(return_value=None)

        # Act & Assert
        with pytest.raises(NotFoundError, match='Event not found or inactive'):
            await use_case.execute(**BOOKING_KWARGS, tickets_booked=1)

        mock_uow.booking_command_repo.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail_when_event_inactive(
        self, use_case: CreateBookingUseCase, mock_uow: Mock, active_event: EventEntity
    ) -> None:
        # Arrange
        inactive_event = attrs.evolve(active_event, status=EventStatus.INACTIVE)
        mock_uow.event_command_repo.get_for_update = AsyncMock(return_value=inactive_event)

        # Act & Assert
        with pytest.raises(NotFoundError, match='Event not found or inactive'):
            await use_case.execute(**BOOKING_KWARGS, tickets_booked=1)

        mock_uow.booking_command_repo.create.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail_when_not_enough_tickets_reports_available(
        self, use_case: CreateBookingUseCase, mock_uow: Mock, active_event: EventEntity
    ) -> None:
        # Arrange
        active_event.available_tickets = 2
        mock_uow.event_command_repo.get_for_update = AsyncMock(return_value=active_event)

        # Act
        with pytest.raises(InsufficientInventoryError, match='Not enough tickets available') as exc:
            await use_case.execute(**BOOKING_KWARGS, tickets_booked=3)

        # Assert
        assert exc.value.available == 2
        assert exc.value.extra == {'available': 2}
        mock_uow.booking_command_repo.create.assert_not_awaited()
        mock_uow.event_command_repo.decrement_available_tickets.assert_not_awaited()
        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_fail_when_tickets_not_positive(
        self, use_case: CreateBookingUseCase, mock_uow: Mock, active_event: EventEntity
    ) -> None:
        # Arrange
        mock_uow.event_command_repo.get_for_update = AsyncMock(return_value=active_event)

        # Act & Assert
        with pytest.raises(ValidationError, match='tickets_booked must be a positive integer'):
            await use_case.execute(**BOOKING_KWARGS, tickets_booked=0)

        mock_uow.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_decrement_failure_skips_commit(
        self, use_case: CreateBookingUseCase, mock_uow: Mock, active_event: EventEntity
    ) -> None:
        # Arrange
        mock_uow.event_command_repo.get_for_update = AsyncMock(return_value=active_event)
        mock_uow.booking_command_repo.create = AsyncMock(
            side_effect=lambda *, booking: _persisted(booking)
        )
        mock_uow.event_command_repo.decrement_available_tickets = AsyncMock(
            side_effect=RuntimeError('connection lost')
        )

        # Act & Assert
        with pytest.raises(RuntimeError, match='connection lost'):
            await use_case.execute(**BOOKING_KWARGS, tickets_booked=1)

        mock_uow.booking_command_repo.create.assert_awaited_once()
        mock_uow.commit.assert_not_awaited()
        mock_uow.__aexit__.assert_awaited_once()
