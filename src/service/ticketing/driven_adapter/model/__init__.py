"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.ticketing.driven_adapter.model.admin_user_model import AdminUserModel
from src.service.ticketing.driven_adapter.model.booking_model import BookingModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel

__all__ = [
    'AdminUserModel',
    'BookingModel',
    'EventModel',
]
