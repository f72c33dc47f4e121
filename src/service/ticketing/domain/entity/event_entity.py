from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import InsufficientInventoryError, ValidationError
from src.service.ticketing.domain.enum.event_status import EventStatus


def _validate_non_empty_string(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not value or not value.strip():
        raise ValidationError(f'Event {attribute.name} cannot be empty')


def _validate_non_negative(instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValidationError(f'Event {attribute.name} cannot be negative')


@attrs.define
class EventEntity:
    title: str = attrs.field(validator=_validate_non_empty_string)
    total_tickets: int = attrs.field(validator=_validate_non_negative)
    available_tickets: int = attrs.field(validator=_validate_non_negative)
    price: Decimal = attrs.field(converter=Decimal, validator=_validate_non_negative)
    description: str = ''
    short_description: str = ''
    venue: str = ''
    location: str = ''
    event_date: Optional[date] = None
    event_time: Optional[str] = None
    image_url: Optional[str] = None
    status: EventStatus = EventStatus.ACTIVE
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def create(
        cls,
        *,
        title: str,
        total_tickets: int,
        price: Decimal,
        description: str = '',
        short_description: str = '',
        venue: str = '',
        location: str = '',
        event_date: Optional[date] = None,
        event_time: Optional[str] = None,
        image_url: Optional[str] = None,
    ) -> 'EventEntity':
        now = datetime.now(timezone.utc)
        return cls(
            title=title,
            total_tickets=total_tickets,
            available_tickets=total_tickets,  # full inventory at creation
            price=price,
            description=description,
            short_description=short_description,
            venue=venue,
            location=location,
            event_date=event_date,
            event_time=event_time,
            image_url=image_url,
            status=EventStatus.ACTIVE,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.status == EventStatus.ACTIVE

    def ensure_can_book(self, *, tickets: int) -> None:
        if self.available_tickets < tickets:
            raise InsufficientInventoryError(available=self.available_tickets)

    @property
    def sold_tickets(self) -> int:
        return self.total_tickets - self.available_tickets

    def resize(self, *, total_tickets: int) -> None:
        """available_tickets moves by the same delta as the total; sold tickets stay sold."""
        sold = self.sold_tickets
        if total_tickets < sold:
            raise ValidationError(
                f'total_tickets cannot be lower than the {sold} tickets already sold'
            )
        self.available_tickets = total_tickets - sold
        self.total_tickets = total_tickets

    def update_details(self, *, total_tickets: Optional[int] = None, **fields: Any) -> None:
        for name, value in fields.items():
            setattr(self, name, value)
        if total_tickets is not None:
            self.resize(total_tickets=total_tickets)
        self.updated_at = datetime.now(timezone.utc)
