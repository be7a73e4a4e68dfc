"""Shared fixtures: per-test SQLite database, API client, auth headers."""
import os

# Keep the application engine off PostgreSQL during tests
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

import catalog.models  # noqa: E402,F401
from catalog.database import Base, enable_sqlite_foreign_keys, get_db  # noqa: E402
from catalog.main import app  # noqa: E402


@pytest.fixture
async def engine(tmp_path):
    """Fresh SQLite database with foreign keys enforced."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    enable_sqlite_foreign_keys(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    """Session for driving services and repositories directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """Create test client."""

    async def override_get_db():
        """Override database dependency for testing."""
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def auth_headers(client: AsyncClient) -> dict:
    """Register a user and return a bearer header for it."""
    credentials = {"email": "test@example.com", "password": "testpassword123"}
    await client.post("/api/v1/auth/register", json=credentials)
    response = await client.post("/api/v1/auth/login", json=credentials)
    token = response.json()["access_token"]
    return {"Authorization": f"Bearer {token}"}
