"""
Fixtures for tests that drive use cases straight against a private SQLite file.

Each test gets its own database under tmp_path, so transaction and locking
behaviour is observed without the HTTP layer or the shared test database.
"""

from collections.abc import AsyncGenerator, Callable
from decimal import Decimal
from pathlib import Path

import pytest

from src.platform.database.orm_db_setting import Database
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.driven_adapter.repo.booking_query_repo_impl import BookingQueryRepoImpl
from src.service.ticketing.driven_adapter.repo.event_query_repo_impl import EventQueryRepoImpl


@pytest.fixture
async def database(tmp_path: Path) -> AsyncGenerator[Database, None]:
    db = Database(url=f'sqlite+aiosqlite:///{tmp_path / "ticketing.sqlite3"}')
    await db.create_tables()
    yield db
    await db.dispose()


@pytest.fixture
def uow_factory(database: Database) -> Callable[[], SqlAlchemyUnitOfWork]:
    def _factory() -> SqlAlchemyUnitOfWork:
        return SqlAlchemyUnitOfWork(session_factory=database.session)

    return _factory


@pytest.fixture
def event_query_repo(database: Database) -> EventQueryRepoImpl:
    return EventQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def booking_query_repo(database: Database) -> BookingQueryRepoImpl:
    return BookingQueryRepoImpl(session_factory=database.session)


@pytest.fixture
def seed_event(
    uow_factory: Callable[[], SqlAlchemyUnitOfWork],
) -> Callable[..., object]:
    async def _seed(*, total_tickets: int = 10, price: str = '50.00') -> EventEntity:
        return await CreateEventUseCase(uow=uow_factory()).execute(
            title='Jazz Night at the Park',
            venue='VOC Park',
            total_tickets=total_tickets,
            price=Decimal(price),
        )

    return _seed
