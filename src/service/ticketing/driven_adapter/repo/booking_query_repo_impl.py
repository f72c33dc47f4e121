from typing import Any, AsyncContextManager, Callable, List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.driven_adapter.model.booking_model import BookingModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(self, session_factory: Callable[..., AsyncContextManager[AsyncSession]]) -> None:
        self.session_factory = session_factory

    @staticmethod
    def _booking_with_event_query() -> Select[Any]:
        return select(
            BookingModel,
            EventModel.title.label('event_title'),
            EventModel.event_date,
            EventModel.event_time,
            EventModel.venue,
        ).join(EventModel, BookingModel.event_id == EventModel.id)

    @staticmethod
    def _to_booking_dict(row: Any) -> dict:
        db_booking: BookingModel = row.BookingModel
        return {
            'id': db_booking.id,
            'event_id': db_booking.event_id,
            'user_name': db_booking.user_name,
            'user_email': db_booking.user_email,
            'user_phone': db_booking.user_phone,
            'tickets_booked': db_booking.tickets_booked,
            'total_amount': db_booking.total_amount,
            'booking_reference': db_booking.booking_reference,
            'status': db_booking.status,
            'created_at': db_booking.created_at,
            'updated_at': db_booking.updated_at,
            'event_title': row.event_title,
            'event_date': row.event_date,
            'event_time': row.event_time,
            'venue': row.venue,
        }

    @Logger.io
    async def get_by_reference_with_event(self, *, booking_reference: str) -> Optional[dict]:
        async with self.session_factory() as session:
            result = await session.execute(
                self._booking_with_event_query().where(
                    BookingModel.booking_reference == booking_reference
                )
            )
            row = result.first()
            if not row:
                return None
            return self._to_booking_dict(row)

    @Logger.io(truncate_content=True)  # type: ignore
    async def list_with_event(
        self, *, event_id: Optional[int], limit: int, offset: int
    ) -> List[dict]:
        query = self._booking_with_event_query()
        if event_id is not None:
            query = query.where(BookingModel.event_id == event_id)

        # .limit()/.offset() render as bound parameters
        query = (
            query.order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            .limit(limit)
            .offset(offset)
        )

        async with self.session_factory() as session:
            result = await session.execute(query)
            return [self._to_booking_dict(row) for row in result.all()]
