"""
SQLAlchemy async engine and session management

This module provides:
1. Base: declarative base every ORM model registers with
2. Database: owns one async engine + session maker, injected through the DI container

The connection URL is passed in explicitly (from settings at startup), so tests can
point a Database at a throwaway SQLite file without touching global state.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger


class Base(DeclarativeBase):
    pass


class Database:
    """
    Async database handle for dependency injection

    The engine is created lazily on first use so that constructing the
    container never opens a connection.
    """

    def __init__(self, *, url: str, echo: bool = False, pool_pre_ping: bool = True) -> None:
        self._url = url
        self._echo = echo
        self._pool_pre_ping = pool_pre_ping
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            Logger.base.info(f'🔗 [DB] Creating engine for {self._url.split("@")[-1]}')
            self._engine = create_async_engine(
                self._url,
                echo=self._echo,
                pool_pre_ping=self._pool_pre_ping,
            )
        return self._engine

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        if self._session_factory is None:
            self._session_factory = async_sessionmaker(
                self.engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )
        return self._session_factory

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Context manager for database sessions

        Closing the session rolls back anything uncommitted. Driver and
        connection failures surface as PersistenceError; IntegrityError is
        left alone so repositories can map constraint violations themselves.
        """
        try:
            async with self.session_factory() as session:
                yield session
        except IntegrityError:
            raise
        except (SQLAlchemyError, OSError) as e:
            raise PersistenceError(detail=f'{type(e).__name__}: {e}') from e

    async def create_all(self) -> None:
        """Create tables if they don't exist"""
        # Register every model on Base.metadata before create_all
        import src.service.clubverse.driven_adapter.model  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._session_factory = None
