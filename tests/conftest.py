import os

# before anything imports app.core.config
os.environ.setdefault("TELEMETRY_ENABLED", "false")
os.environ.setdefault("INTERNAL_ADMIN_KEY", "test-internal")
os.environ.setdefault("ENV", "dev")

import httpx
import pytest_asyncio
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Import Base + all models so metadata is complete
from app.models import Base

from app.main import app
from app.core.db import get_db
from app.services.storage import LocalObjectStore, get_photo_store

pytest_plugins = ["fixtures_seed"]


def _test_db_url() -> str:
    # in-memory SQLite unless a real database is provided
    return os.getenv("DATABASE_URL_TEST") or "sqlite+aiosqlite://"


@pytest_asyncio.fixture
async def async_engine():
    url = _test_db_url()
    if url.startswith("sqlite"):
        engine = create_async_engine(url, poolclass=StaticPool, connect_args={"check_same_thread": False})
    else:
        engine = create_async_engine(url, pool_pre_ping=True)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture
async def db_session(async_engine):
    session_factory = async_sessionmaker(bind=async_engine, expire_on_commit=False, class_=AsyncSession)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def photo_store(tmp_path):
    return LocalObjectStore(str(tmp_path / "uploads"), "/uploads")


@pytest_asyncio.fixture
async def client(db_session: AsyncSession, photo_store):
    """
    HTTP client that uses the test DB session via dependency override.
    """
    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_photo_store] = lambda: photo_store

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


class UnreachableSession:
    """Stands in for a session whose database cannot be reached."""

    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))

    async def commit(self):
        raise OperationalError("COMMIT", {}, ConnectionRefusedError("connection refused"))

    async def rollback(self):
        return None

    def begin_nested(self):
        raise OperationalError("SAVEPOINT", {}, ConnectionRefusedError("connection refused"))


@pytest_asyncio.fixture
async def offline_client():
    """HTTP client whose database session fails every query."""
    async def _override_get_db():
        yield UnreachableSession()

    app.dependency_overrides[get_db] = _override_get_db

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
