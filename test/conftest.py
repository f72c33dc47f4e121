"""
Test Configuration and Fixtures

This module provides:
- Environment setup (SQLite test database, log directory) before app imports
- Database cleanup between integration tests
- Session-scoped TestClient and admin/event helper fixtures

Architecture:
- Unit tests (test/**/unit/): pure, mocked repositories, no database
- Integration tests: real SQLite database through aiosqlite
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time (src.platform.config.core_setting)
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')

    test_db_dir = Path(__file__).parent / 'test_db'
    test_db_dir.mkdir(exist_ok=True)
    db_file = test_db_dir / f'ticketing_test_{worker_id}.sqlite3'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{db_file}'
    os.environ['TEST_DB_FILE'] = str(db_file)

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('SECRET_KEY', 'test_secret_key_for_pytest_only')
    os.environ.setdefault('DEBUG', 'true')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import asyncio  # noqa: E402
from collections.abc import AsyncGenerator, Callable, Generator  # noqa: E402
from typing import Any  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402
from sqlalchemy import text  # noqa: E402

from src.platform.database.orm_db_setting import Database  # noqa: E402
from test.shared.utils import create_admin_user, create_event, login_admin  # noqa: E402
from test.util_constant import (  # noqa: E402
    DEFAULT_PASSWORD,
    TEST_ADMIN_EMAIL,
    TEST_ADMIN_NAME,
)


# =============================================================================
# Pytest Hooks
# =============================================================================
def _is_unit_test_only_run(config: pytest.Config) -> bool:
    markexpr = config.getoption('markexpr', default='')
    if markexpr and 'unit' in str(markexpr) and 'not unit' not in str(markexpr):
        return True

    args = config.args or []
    test_paths = [arg for arg in args if arg and not arg.startswith('-')]
    return bool(test_paths and all('/unit/' in path or '\\unit\\' in path for path in test_paths))


def pytest_sessionstart(session: pytest.Session) -> None:
    if _is_unit_test_only_run(session.config):
        return
    asyncio.run(_setup_test_database())


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Database Setup and Cleanup
# =============================================================================
_TABLES_IN_DELETE_ORDER = ('booking', 'event', 'admin_user')


async def _setup_test_database() -> None:
    db_file = Path(os.environ['TEST_DB_FILE'])
    for suffix in ('', '-wal', '-shm'):
        Path(f'{db_file}{suffix}').unlink(missing_ok=True)

    database = Database()
    try:
        await database.create_tables()
    finally:
        await database.dispose()


async def _clean_all_tables() -> None:
    database = Database()
    try:
        async with database.engine.begin() as conn:
            for table in _TABLES_IN_DELETE_ORDER:
                await conn.execute(text(f'DELETE FROM {table}'))
    finally:
        await database.dispose()


@pytest.fixture(scope='function')
async def clean_database() -> AsyncGenerator[None, None]:
    await _clean_all_tables()
    yield


# =============================================================================
# Session-scoped Fixtures
# =============================================================================
@pytest.fixture(scope='session')
def client() -> Generator[TestClient, None, None]:
    from test.test_main import app

    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


# =============================================================================
# Function-scoped Fixtures (tables are emptied before each integration test)
# =============================================================================
@pytest.fixture
def admin_user(clean_database: None) -> dict[str, Any]:
    # Runs after clean_database
    return create_admin_user(
        email=TEST_ADMIN_EMAIL, password=DEFAULT_PASSWORD, name=TEST_ADMIN_NAME
    )


@pytest.fixture
def admin_token(client: TestClient, admin_user: dict[str, Any]) -> str:
    return login_admin(client, admin_user['email'], DEFAULT_PASSWORD)


@pytest.fixture
def admin_headers(admin_token: str) -> dict[str, str]:
    return {'Authorization': f'Bearer {admin_token}'}


@pytest.fixture
def event_factory(client: TestClient, admin_headers: dict[str, str]) -> Callable[..., int]:
    def _create(**overrides: Any) -> int:
        return create_event(client, admin_headers, **overrides)

    return _create


@pytest.fixture
def execute_sql_statement() -> Callable[..., list[dict[str, Any]] | None]:
    def _execute(
        statement: str, params: dict[str, Any] | None = None, fetch: bool = False
    ) -> list[dict[str, Any]] | None:
        async def _run() -> list[dict[str, Any]] | None:
            database = Database()
            try:
                async with database.engine.begin() as conn:
                    result = await conn.execute(text(statement), params or {})
                    if fetch:
                        return [dict(row._mapping) for row in result]
                return None
            finally:
                await database.dispose()

        return asyncio.run(_run())

    return _execute
