"""
SQLAlchemy async engine and session management

This module provides:
1. Database: an explicitly constructed data-access handle owning a bounded
   connection pool (provided through the DI container, or built directly in tests)
2. Base: the declarative base all ORM models register on

Engines are bound to the event loop that created them; when the running loop
changes (e.g. TestClient portal vs. pytest loop) a fresh engine is created.

SQLite (local dev / tests) runs every transaction as ``BEGIN IMMEDIATE`` so the
first statement of a unit of work already holds the write lock. This gives the
same lost-update protection that ``SELECT ... FOR UPDATE`` gives on PostgreSQL.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Optional

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.config.core_setting import normalize_async_url, settings
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


def _install_sqlite_locking(engine: AsyncEngine, *, busy_timeout_ms: int) -> None:
    @event.listens_for(engine.sync_engine, 'connect')
    def _sqlite_on_connect(dbapi_connection: Any, _: Any) -> None:
        # Take over BEGIN from the pysqlite driver
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute(f'PRAGMA busy_timeout={busy_timeout_ms};')
        cursor.execute('PRAGMA journal_mode=WAL;')
        cursor.execute('PRAGMA synchronous=NORMAL;')
        cursor.execute('PRAGMA foreign_keys=ON;')
        cursor.close()

    @event.listens_for(engine.sync_engine, 'begin')
    def _sqlite_on_begin(conn: Any) -> None:
        conn.exec_driver_sql('BEGIN IMMEDIATE')


class Database:
    """
    Owns one async engine (per event loop) and hands out sessions.

    Args:
        url: database URL; defaults to settings.DATABASE_URL_ASYNC. Plain
            ``sqlite://`` / ``postgresql://`` URLs are mapped to async drivers.
        echo: SQL echo, defaults to settings.DB_ECHO
    """

    def __init__(self, *, url: Optional[str] = None, echo: Optional[bool] = None) -> None:
        self.url = normalize_async_url(url or settings.DATABASE_URL_ASYNC)
        self._echo = settings.DB_ECHO if echo is None else echo
        self._engine: Optional[AsyncEngine] = None
        self._session_maker: Optional[async_sessionmaker[AsyncSession]] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith('sqlite')

    @property
    def engine(self) -> AsyncEngine:
        try:
            current_loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            current_loop = None

        if self._engine is None or (current_loop is not None and self._loop is not current_loop):
            if self._engine is not None:
                # Old engine's connections belong to a dead loop; let GC reclaim them
                Logger.base.warning('🔄 [DB] Event loop changed, creating a new engine')
            self._engine = self._create_engine()
            self._session_maker = async_sessionmaker(
                self._engine, class_=AsyncSession, expire_on_commit=False
            )
            self._loop = current_loop
        return self._engine

    @property
    def session_maker(self) -> async_sessionmaker[AsyncSession]:
        self.engine  # noqa: B018 - ensures the engine matches the running loop
        assert self._session_maker is not None
        return self._session_maker

    def _create_engine(self) -> AsyncEngine:
        if self.is_sqlite:
            engine = create_async_engine(self.url, echo=self._echo, pool_pre_ping=True)
            _install_sqlite_locking(engine, busy_timeout_ms=settings.SQLITE_BUSY_TIMEOUT_MS)
        else:
            engine = create_async_engine(
                self.url,
                echo=self._echo,
                pool_size=settings.DB_POOL_SIZE,
                max_overflow=settings.DB_POOL_MAX_OVERFLOW,
                pool_timeout=settings.DB_POOL_TIMEOUT,
                pool_recycle=settings.DB_POOL_RECYCLE,
                pool_pre_ping=settings.DB_POOL_PRE_PING,
            )
        Logger.base.info(f'🔗 [DB] Engine created for {engine.url.render_as_string()}')
        return engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions.

        The connection goes back to the pool when the block exits, whatever
        the exit path. Uncommitted work is rolled back on close.
        """
        async with self.session_maker() as session:
            yield session

    async def create_tables(self) -> None:
        """Create database tables if they don't exist"""
        # Register all models on Base.metadata
        import src.service.ticketing.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def drop_tables(self) -> None:
        import src.service.ticketing.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all, checkfirst=True)

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            Logger.base.info('🗄️  [DB] Engine disposed')
        self._engine = None
        self._session_maker = None
        self._loop = None
