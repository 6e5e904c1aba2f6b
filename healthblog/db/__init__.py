from healthblog.db.database import (
    SessionFactory,
    async_session_maker,
    build_engine,
    build_session_factory,
    close_db,
    engine,
    get_session,
    get_session_factory,
    init_db,
    transaction,
)

__all__ = [
    "SessionFactory",
    "async_session_maker",
    "build_engine",
    "build_session_factory",
    "close_db",
    "engine",
    "get_session",
    "get_session_factory",
    "init_db",
    "transaction",
]
