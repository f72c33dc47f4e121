"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketing.app.command import (
    cancel_booking_use_case,
    create_booking_use_case,
    create_event_use_case,
    delete_event_use_case,
    login_admin_use_case,
    update_event_use_case,
)
from src.service.ticketing.app.query import (
    get_booking_by_reference_use_case,
    get_event_use_case,
    list_bookings_use_case,
    list_events_use_case,
)
from src.service.ticketing.driving_adapter.http_controller import admin_controller
from src.service.ticketing.driving_adapter.http_controller.auth import admin_auth


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    cancel_booking_use_case,
    get_booking_by_reference_use_case,
    list_bookings_use_case,
    create_event_use_case,
    delete_event_use_case,
    get_event_use_case,
    list_events_use_case,
    login_admin_use_case,
    update_event_use_case,
    admin_controller,
    admin_auth,
]
