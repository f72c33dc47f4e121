from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class BookingCreateRequest(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            'example': {
                'event_id': 1,
                'user_name': 'Priya Raman',
                'user_email': 'priya@example.com',
                'user_phone': '+91 98765 43210',
                'tickets_booked': 2,
            }
        },
    )

    event_id: int = Field(..., gt=0)
    user_name: str = Field(..., min_length=1, max_length=255)
    user_email: EmailStr
    user_phone: str = Field(..., min_length=1, max_length=32)
    tickets_booked: int = Field(..., gt=0, strict=True)


class BookingCreateResponse(BaseModel):
    booking_id: int
    booking_reference: str
    total_amount: float
    message: str = 'Booking confirmed successfully'


class BookingWithEventResponse(BaseModel):
    id: int
    event_id: int
    user_name: str
    user_email: str
    user_phone: str
    tickets_booked: int
    total_amount: Decimal
    booking_reference: str
    status: str
    created_at: datetime
    updated_at: Optional[datetime] = None
    event_title: str
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    venue: str


class PaginationResponse(BaseModel):
    limit: int
    offset: int


class BookingListResponse(BaseModel):
    bookings: List[BookingWithEventResponse]
    pagination: PaginationResponse


class CancelBookingResponse(BaseModel):
    message: str = 'Booking cancelled successfully'
