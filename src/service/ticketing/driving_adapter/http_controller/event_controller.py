from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.domain.entity.admin_user_entity import AdminUserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.admin_auth import require_admin
from src.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventCreateResponse,
    EventDeleteResponse,
    EventListResponse,
    EventPaginationResponse,
    EventResponse,
    EventUpdateRequest,
    EventUpdateResponse,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    limit: int = Query(default=20, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    search: Optional[str] = Query(default=None, max_length=100),
    upcoming: bool = Query(default=False),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> EventListResponse:
    events = await use_case.execute(
        limit=limit, offset=offset, search=search, upcoming=upcoming
    )
    return EventListResponse(
        events=[EventResponse.from_entity(event) for event in events],
        pagination=EventPaginationResponse(limit=limit, offset=offset, total=len(events)),
    )


@router.get('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: int,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> EventResponse:
    event = await use_case.execute(event_id=event_id)
    return EventResponse.from_entity(event)


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_admin: AdminUserEntity = Depends(require_admin),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> EventCreateResponse:
    event = await use_case.execute(
        title=request.title,
        total_tickets=request.total_tickets,
        price=request.price,
        description=request.description,
        short_description=request.short_description,
        venue=request.venue,
        location=request.location,
        event_date=request.event_date,
        event_time=request.event_time,
        image_url=request.image_url,
    )

    if event.id is None:
        raise ValueError('Event ID should not be None after creation.')

    return EventCreateResponse(id=event.id)


@router.put('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event(
    event_id: int,
    request: EventUpdateRequest,
    current_admin: AdminUserEntity = Depends(require_admin),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> EventUpdateResponse:
    await use_case.execute(event_id=event_id, changes=request.changes())
    return EventUpdateResponse()


@router.delete('/{event_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def delete_event(
    event_id: int,
    current_admin: AdminUserEntity = Depends(require_admin),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> EventDeleteResponse:
    await use_case.execute(event_id=event_id)
    return EventDeleteResponse()
