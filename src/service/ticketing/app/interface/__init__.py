"""Application layer interfaces (Ports)"""

from src.service.ticketing.app.interface.i_admin_user_command_repo import IAdminUserCommandRepo
from src.service.ticketing.app.interface.i_admin_user_query_repo import IAdminUserQueryRepo
from src.service.ticketing.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.ticketing.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.app.interface.i_password_hasher import IPasswordHasher

__all__ = [
    'IAdminUserCommandRepo',
    'IAdminUserQueryRepo',
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IEventCommandRepo',
    'IEventQueryRepo',
    'IPasswordHasher',
]
