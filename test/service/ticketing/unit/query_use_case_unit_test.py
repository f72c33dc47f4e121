from unittest.mock import AsyncMock

import attrs
import pytest

from src.platform.exception.exceptions import NotFoundError
from src.service.ticketing.app.query.get_booking_by_reference_use_case import (
    GetBookingByReferenceUseCase,
)
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


@pytest.mark.unit
class TestGetBookingByReferenceUseCase:
    @pytest.mark.asyncio
    async def test_returns_booking_with_event_fields(self) -> None:
        # Arrange
        row = {'id': 1, 'booking_reference': 'CBEREF', 'event_title': 'Jazz Night'}
        repo = AsyncMock()
        repo.get_by_reference_with_event = AsyncMock(return_value=row)

        # Act
        result = await GetBookingByReferenceUseCase(booking_query_repo=repo).execute(
            booking_reference='CBEREF'
        )

        # Assert
        assert result['event_title'] == 'Jazz Night'
        repo.get_by_reference_with_event.assert_awaited_once_with(booking_reference='CBEREF')

    @pytest.mark.asyncio
    async def test_unknown_reference_raises_not_found(self) -> None:
        repo = AsyncMock()
        repo.get_by_reference_with_event = AsyncMock(return_value=None)

        with pytest.raises(NotFoundError, match='Booking not found'):
            await GetBookingByReferenceUseCase(booking_query_repo=repo).execute(
                booking_reference='CBEMISSING'
            )


@pytest.mark.unit
class TestListBookingsUseCase:
    @pytest.mark.asyncio
    async def test_passes_filter_and_pagination(self) -> None:
        repo = AsyncMock()
        repo.list_with_event = AsyncMock(return_value=[])

        result = await ListBookingsUseCase(booking_query_repo=repo).execute(
            event_id=3, limit=10, offset=20
        )

        assert result == []
        repo.list_with_event.assert_awaited_once_with(event_id=3, limit=10, offset=20)


@pytest.mark.unit
class TestEventQueries:
    @pytest.mark.asyncio
    async def test_get_event_hides_inactive(self, active_event: EventEntity) -> None:
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(
            return_value=attrs.evolve(active_event, status=EventStatus.INACTIVE)
        )

        with pytest.raises(NotFoundError, match='Event not found'):
            await GetEventUseCase(event_query_repo=repo).execute(event_id=1)

    @pytest.mark.asyncio
    async def test_get_event_returns_active(self, active_event: EventEntity) -> None:
        repo = AsyncMock()
        repo.get_by_id = AsyncMock(return_value=active_event)

        result = await GetEventUseCase(event_query_repo=repo).execute(event_id=1)

        assert result.id == 1

    @pytest.mark.asyncio
    async def test_list_events_forwards_search(self, active_event: EventEntity) -> None:
        repo = AsyncMock()
        repo.list_active = AsyncMock(return_value=[active_event])

        result = await ListEventsUseCase(event_query_repo=repo).execute(
            limit=5, offset=0, search='jazz'
        )

        assert result == [active_event]
        repo.list_active.assert_awaited_once_with(
            limit=5, offset=0, search='jazz', upcoming=False
        )

    @pytest.mark.asyncio
    async def test_list_events_forwards_upcoming(self, active_event: EventEntity) -> None:
        repo = AsyncMock()
        repo.list_active = AsyncMock(return_value=[active_event])

        await ListEventsUseCase(event_query_repo=repo).execute(upcoming=True)

        repo.list_active.assert_awaited_once_with(
            limit=20, offset=0, search=None, upcoming=True
        )
