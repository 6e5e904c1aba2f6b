# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Must happen before healthblog is imported anywhere
os.environ["ENVIRONMENT"] = "testing"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./healthblog-test.db"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["SECRET_KEY"] = "test-secret-key-for-healthblog-tests"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from pathlib import Path  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession  # noqa: E402

from healthblog.db import (  # noqa: E402
    SessionFactory,
    build_engine,
    build_session_factory,
    get_session,
    get_session_factory,
    init_db,
    transaction,
)
from healthblog.main import app  # noqa: E402
from healthblog.managers.password_manager import hash_password  # noqa: E402
from healthblog.managers.token_manager import create_access_token  # noqa: E402
from healthblog.models import BlogDB, UserDB  # noqa: E402
from healthblog.repositories import BlogRepository, UserRepository  # noqa: E402

DEFAULT_PASSWORD = "secret123"

type UserFactory = Callable[..., Awaitable[UserDB]]
type BlogFactory = Callable[..., Awaitable[BlogDB]]


@pytest.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine]:
    """Create a fresh SQLite database with every table for one test."""
    test_engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(test_engine)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> SessionFactory:
    """Session factory bound to the test database."""
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory: SessionFactory) -> AsyncGenerator[AsyncSession]:
    """A database session left uncommitted unless the test commits it."""
    async with session_factory() as db_session:
        yield db_session


@pytest.fixture
async def client(session_factory: SessionFactory) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client wired to the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with transaction(session_factory) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session_factory: SessionFactory) -> UserFactory:
    """Return a factory that stores a user and commits it."""

    async def factory(
        name: str = "Jane Doe",
        email: str = "jane@example.com",
        password: str = DEFAULT_PASSWORD,
        role: str = "user",
    ) -> UserDB:
        async with transaction(session_factory) as db_session:
            return await UserRepository(db_session).create(
                {
                    "name": name,
                    "email": email,
                    "password_hash": await hash_password(password),
                    "role": role,
                },
            )

    return factory


@pytest.fixture
def make_blog(session_factory: SessionFactory) -> BlogFactory:
    """Return a factory that stores a blog post and commits it."""

    async def factory(author: UserDB, **overrides: Any) -> BlogDB:
        values: dict[str, Any] = {
            "title": "Hydration Basics",
            "content": "Drink water throughout the day.",
            "category": "Nutrition",
            "tags": ["water", "habits"],
            "author_id": author.id,
        }
        values.update(overrides)
        async with transaction(session_factory) as db_session:
            return await BlogRepository(db_session).create(values)

    return factory


@pytest.fixture
async def regular_user(make_user: UserFactory) -> UserDB:
    """A stored user with role ``user``."""
    return await make_user()


@pytest.fixture
async def admin_user(make_user: UserFactory) -> UserDB:
    """A stored user with role ``admin``."""
    return await make_user(name="Admin User", email="admin@healthblog.com", role="admin")


def bearer(user: UserDB) -> dict[str, str]:
    token = create_access_token(user_id=user.id, email=user.email, role=user.role)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers(regular_user: UserDB) -> dict[str, str]:
    """Create auth headers with a valid user access token."""
    return bearer(regular_user)


@pytest.fixture
def admin_headers(admin_user: UserDB) -> dict[str, str]:
    """Create auth headers with an admin access token."""
    return bearer(admin_user)
