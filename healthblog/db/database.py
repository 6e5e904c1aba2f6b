"""Database engine and session management."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession as SQLModelAsyncSession

from healthblog.configs import pool_kwargs, settings
from healthblog.monitoring import get_logger

logger = get_logger(__name__)

STATEMENT_TIMEOUT_MS = 30000

SessionFactory = async_sessionmaker[SQLModelAsyncSession]


def _connect_args() -> dict[str, Any]:
    # asyncpg only; other drivers reject these keys
    if not settings.DATABASE_URL.startswith("postgresql+asyncpg"):
        return {}
    return {
        "command_timeout": STATEMENT_TIMEOUT_MS / 1000,
        "server_settings": {
            "statement_timeout": str(STATEMENT_TIMEOUT_MS),
            "lock_timeout": str(STATEMENT_TIMEOUT_MS),
        },
    }


def _configure_engine_events(engine: AsyncEngine) -> None:
    """Configure connection pool events for monitoring."""

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("New database connection established")

    @event.listens_for(engine.sync_engine, "checkin")
    def on_checkin(dbapi_connection: object, connection_record: object) -> None:
        logger.debug("Connection returned to pool")


def build_engine(url: str | None = None, **kwargs: Any) -> AsyncEngine:
    """
    Create an async engine for ``url`` (defaults to the configured database).

    Args:
        url: SQLAlchemy async database URL
        **kwargs: Extra keyword arguments for ``create_async_engine``

    Returns:
        AsyncEngine: Configured engine
    """
    if url is not None:
        return create_async_engine(url, echo=settings.DATABASE_ECHO, **kwargs)
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DATABASE_ECHO,
        connect_args=_connect_args(),
        **pool_kwargs(),
        **kwargs,
    )


def build_session_factory(bind: AsyncEngine) -> SessionFactory:
    """Create a session factory bound to ``bind``."""
    return async_sessionmaker(
        bind,
        class_=SQLModelAsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


engine: AsyncEngine = build_engine()

if settings.DEBUG:
    _configure_engine_events(engine)

async_session_maker: SessionFactory = build_session_factory(engine)


async def get_session() -> AsyncGenerator[AsyncSession]:
    """
    Dependency for getting async database sessions.

    One session per request: committed when the handler returns,
    rolled back when it raises.

    Yields:
        AsyncSession: Database session
    """
    async with transaction() as session:
        yield session


def get_session_factory() -> SessionFactory:
    """
    Dependency returning the session factory.

    Used by services that fan out independent queries concurrently,
    since a single ``AsyncSession`` cannot run statements in parallel.
    """
    return async_session_maker


@asynccontextmanager
async def transaction(
    factory: SessionFactory | None = None,
) -> AsyncGenerator[AsyncSession]:
    """
    Context manager for explicit transaction management.

    Args:
        factory: Session factory to use (defaults to the application one)

    Yields:
        AsyncSession: Database session within a transaction

    Example:
        ```python
        async with transaction() as session:
            session.add(UserDB(name="Jane", email="jane@example.com", ...))
            # Commits on successful exit, rolls back on exception
        ```
    """
    async with (factory or async_session_maker)() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Transaction error")
            raise
        finally:
            await session.close()


async def init_db(bind: AsyncEngine | None = None) -> None:
    """
    Create all tables defined in SQLModel models.

    Called on application startup. Existing tables are left untouched.
    """
    async with (bind or engine).begin() as conn:
        # Import all models to ensure they are registered
        from healthblog.models import (  # noqa: F401, PLC0415
            BlogDB,
            BookmarkDB,
            CategoryDB,
            SubscriberDB,
            UserDB,
        )

        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database initialized successfully!")


async def close_db() -> None:
    """
    Close database connections.

    Called on application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")
