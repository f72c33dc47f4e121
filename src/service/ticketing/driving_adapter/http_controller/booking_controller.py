from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.cancel_booking_use_case import CancelBookingUseCase
from src.service.ticketing.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.ticketing.app.query.get_booking_by_reference_use_case import (
    GetBookingByReferenceUseCase,
)
from src.service.ticketing.app.query.list_bookings_use_case import ListBookingsUseCase
from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.admin_auth import require_admin
from src.service.ticketing.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingCreateResponse,
    BookingListResponse,
    BookingWithEventResponse,
    CancelBookingResponse,
    PaginationResponse,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> BookingCreateResponse:
    booking = await use_case.execute(
        event_id=request.event_id,
        user_name=request.user_name,
        user_email=request.user_email,
        user_phone=request.user_phone,
        tickets_booked=request.tickets_booked,
    )

    if booking.id is None:
        raise ValueError('Booking ID should not be None after creation.')

    return BookingCreateResponse(
        booking_id=booking.id,
        booking_reference=booking.booking_reference,
        total_amount=float(booking.total_amount),
    )


@router.get('/reference/{booking_reference}')
@Logger.io
async def get_booking_by_reference(
    booking_reference: str,
    use_case: GetBookingByReferenceUseCase = Depends(GetBookingByReferenceUseCase.depends),
) -> BookingWithEventResponse:
    booking = await use_case.execute(booking_reference=booking_reference)
    return BookingWithEventResponse(**booking)


@router.get('')
@Logger.io
async def list_bookings(
    event_id: Optional[int] = Query(default=None, gt=0),
    limit: int = Query(default=50, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    current_admin: AdminUserEntity = Depends(require_admin),
    use_case: ListBookingsUseCase = Depends(ListBookingsUseCase.depends),
) -> BookingListResponse:
    bookings = await use_case.execute(event_id=event_id, limit=limit, offset=offset)
    return BookingListResponse(
        bookings=[BookingWithEventResponse(**booking) for booking in bookings],
        pagination=PaginationResponse(limit=limit, offset=offset),
    )


@router.put('/{booking_id}/cancel')
@Logger.io
async def cancel_booking(
    booking_id: int,
    current_admin: AdminUserEntity = Depends(require_admin),
    use_case: CancelBookingUseCase = Depends(CancelBookingUseCase.depends),
) -> CancelBookingResponse:
    # AlreadyCancelledError / NotFoundError are mapped by the exception handlers
    await use_case.execute(booking_id=booking_id)
    return CancelBookingResponse()
