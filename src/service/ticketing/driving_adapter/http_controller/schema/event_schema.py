from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


# price * MAX_TOTAL_TICKETS must fit booking.total_amount Numeric(14, 2)
PRICE_MAX_DIGITS = 8
MAX_TOTAL_TICKETS = 1_000_000


class EventCreateRequest(BaseModel):
    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={
            'example': {
                'title': 'Jazz Night at the Park',
                'description': 'An evening of live jazz under the stars',
                'short_description': 'Live jazz',
                'venue': 'VOC Park',
                'location': 'Coimbatore',
                'event_date': '2026-12-20',
                'event_time': '19:30',
                'total_tickets': 200,
                'price': '499.00',
            }
        },
    )

    title: str = Field(..., min_length=1, max_length=255)
    description: str = ''
    short_description: str = Field(default='', max_length=500)
    venue: str = Field(default='', max_length=255)
    location: str = Field(default='', max_length=255)
    event_date: Optional[date] = None
    event_time: Optional[str] = Field(default=None, max_length=16)
    image_url: Optional[str] = Field(default=None, max_length=500)
    total_tickets: int = Field(..., ge=0, le=MAX_TOTAL_TICKETS)
    price: Decimal = Field(..., ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=2)


class EventUpdateRequest(BaseModel):
    """Every field is optional; omitted or null fields keep their current value."""

    model_config = ConfigDict(
        str_strip_whitespace=True,
        json_schema_extra={'example': {'total_tickets': 250, 'price': '549.00'}},
    )

    title: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    short_description: Optional[str] = Field(default=None, max_length=500)
    venue: Optional[str] = Field(default=None, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    event_date: Optional[date] = None
    event_time: Optional[str] = Field(default=None, max_length=16)
    image_url: Optional[str] = Field(default=None, max_length=500)
    total_tickets: Optional[int] = Field(default=None, ge=0, le=MAX_TOTAL_TICKETS)
    price: Optional[Decimal] = Field(
        default=None, ge=0, max_digits=PRICE_MAX_DIGITS, decimal_places=2
    )
    status: Optional[EventStatus] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class EventUpdateResponse(BaseModel):
    message: str = 'Event updated successfully'


class EventCreateResponse(BaseModel):
    id: int
    message: str = 'Event created successfully'


class EventResponse(BaseModel):
    id: int
    title: str
    description: str
    short_description: str
    venue: str
    location: str
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    image_url: Optional[str] = None
    total_tickets: int
    available_tickets: int
    price: Decimal
    status: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, event: EventEntity) -> 'EventResponse':
        if event.id is None:
            raise ValueError('Event ID should not be None after persistence.')
        return cls(
            id=event.id,
            title=event.title,
            description=event.description,
            short_description=event.short_description,
            venue=event.venue,
            location=event.location,
            event_date=event.event_date,
            event_time=event.event_time,
            image_url=event.image_url,
            total_tickets=event.total_tickets,
            available_tickets=event.available_tickets,
            price=event.price,
            status=event.status.value,
            created_at=event.created_at,
            updated_at=event.updated_at,
        )


class EventPaginationResponse(BaseModel):
    limit: int
    offset: int
    total: int


class EventListResponse(BaseModel):
    events: List[EventResponse]
    pagination: EventPaginationResponse


class EventDeleteResponse(BaseModel):
    message: str = 'Event deleted successfully'
