import asyncio
from typing import Any, Optional

from fastapi.testclient import TestClient
from pydantic import SecretStr

from src.platform.constant.route_constant import ADMIN_LOGIN, BOOKING_BASE, EVENT_BASE
from src.platform.database.orm_db_setting import Database
from src.service.ticketing.app.command.create_admin_user_use_case import CreateAdminUserUseCase
from src.service.ticketing.driven_adapter.repo.admin_user_command_repo_impl import (
    AdminUserCommandRepoImpl,
)
from src.service.ticketing.driven_adapter.repo.admin_user_query_repo_impl import (
    AdminUserQueryRepoImpl,
)
from src.service.ticketing.driven_adapter.security.bcrypt_password_hasher import (
    BcryptPasswordHasher,
)
from test.util_constant import (
    DEFAULT_EVENT_PRICE,
    DEFAULT_EVENT_TITLE,
    DEFAULT_TOTAL_TICKETS,
    TEST_CUSTOMER_EMAIL,
    TEST_CUSTOMER_NAME,
    TEST_CUSTOMER_PHONE,
)


def create_admin_user(
    *, email: str, password: str, name: str, database_url: Optional[str] = None
) -> dict[str, Any]:
    """Admins have no sign-up route; insert them the way the CLI script does."""

    async def _create() -> dict[str, Any]:
        database = Database(url=database_url)
        try:
            use_case = CreateAdminUserUseCase(
                admin_user_query_repo=AdminUserQueryRepoImpl(session_factory=database.session),
                admin_user_command_repo=AdminUserCommandRepoImpl(
                    session_factory=database.session
                ),
                password_hasher=BcryptPasswordHasher(),
            )
            admin, _ = await use_case.execute(
                email=email, password=SecretStr(password), name=name
            )
            return admin.public_profile()
        finally:
            await database.dispose()

    return asyncio.run(_create())


def login_admin(client: TestClient, email: str, password: str) -> str:
    response = client.post(ADMIN_LOGIN, json={'email': email, 'password': password})
    assert response.status_code == 200, response.text
    return response.json()['token']


def create_event(client: TestClient, headers: dict[str, str], **overrides: Any) -> int:
    payload = {
        'title': DEFAULT_EVENT_TITLE,
        'venue': 'VOC Park',
        'location': 'Coimbatore',
        'event_date': '2026-12-20',
        'event_time': '19:30',
        'total_tickets': DEFAULT_TOTAL_TICKETS,
        'price': DEFAULT_EVENT_PRICE,
    } | overrides
    response = client.post(EVENT_BASE, json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()['id']


def booking_payload(event_id: int, tickets_booked: int = 1, **overrides: Any) -> dict[str, Any]:
    return {
        'event_id': event_id,
        'user_name': TEST_CUSTOMER_NAME,
        'user_email': TEST_CUSTOMER_EMAIL,
        'user_phone': TEST_CUSTOMER_PHONE,
        'tickets_booked': tickets_booked,
    } | overrides


def create_booking(client: TestClient, event_id: int, tickets_booked: int = 1) -> dict[str, Any]:
    response = client.post(BOOKING_BASE, json=booking_payload(event_id, tickets_booked))
    assert response.status_code == 201, response.text
    return response.json()
