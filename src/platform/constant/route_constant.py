from src.platform.config.core_setting import settings


API_PREFIX = settings.API_PREFIX

HEALTH = f'{API_PREFIX}/health'

# Admin
ADMIN_BASE = f'{API_PREFIX}/admin'
ADMIN_LOGIN = f'{ADMIN_BASE}/login'
ADMIN_VERIFY = f'{ADMIN_BASE}/verify'

# Events
EVENT_BASE = f'{API_PREFIX}/events'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'

# Bookings
BOOKING_BASE = f'{API_PREFIX}/bookings'
BOOKING_BY_REFERENCE = f'{BOOKING_BASE}/reference/{{booking_reference}}'
BOOKING_CANCEL = f'{BOOKING_BASE}/{{booking_id}}/cancel'
