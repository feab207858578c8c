import os
import tempfile
from contextlib import asynccontextmanager

_test_dir = tempfile.mkdtemp(prefix="wikilens_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/app.db"
os.environ["STORAGE_DIR"] = os.path.join(_test_dir, "storage")
os.environ["SESSION_SECRET"] = "test-secret"
os.environ["LOG_LEVEL"] = "WARNING"

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from wikilens.core.database import Base, get_db
from wikilens.core.security import hash_password
from wikilens.main import app
from wikilens.models import User
from fakes import PASSWORD



def _enable_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def mock_client_factory():
    def build(handler):
        @asynccontextmanager
        async def factory():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                yield client
        return factory
    return build


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest_asyncio.fixture
async def user(db_session):
    user = User(
        name="Sara",
        email="sara@example.com",
        phone_number="09120000000",
        gender="female",
        password_hash=hash_password(PASSWORD),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def logged_in(client, user):
    res = await client.post("/login", json={"email": user.email, "password": PASSWORD})
    assert res.status_code == 200
    return client
