"""
Shared fixtures: a throwaway SQLite database per test and an HTTP client
bound to it.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base, get_db
from app.main import app
from app.models import Application, Job, JobStatus, User


@pytest_asyncio.fixture
async def engine(tmp_path):
    """File-backed database so concurrent sessions get separate connections."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session):
    async def _make_user(username: str, **fields) -> User:
        user = User(id=f"user-{username}", username=username, **fields)
        session.add(user)
        await session.commit()
        return user

    return _make_user


@pytest.fixture
def make_job(session):
    async def _make_job(client_id: str, title: str = "Build a landing page", **fields) -> Job:
        job = Job(client_id=client_id, title=title, description="Details", **fields)
        session.add(job)
        await session.commit()
        return job

    return _make_job


@pytest.fixture
def make_application(session):
    async def _make_application(job_id: str, freelancer_id: str, **fields) -> Application:
        fields.setdefault("proposal", "I can do this")
        fields.setdefault("estimated_duration", 7)
        fields.setdefault("bid_amount", 300.0)
        application = Application(job_id=job_id, freelancer_id=freelancer_id, **fields)
        session.add(application)
        await session.commit()
        return application

    return _make_application


@pytest_asyncio.fixture
async def marketplace(make_user, make_job):
    """Client C1 with an open job J1, freelancers F1 and F2."""
    client_user = await make_user("c1", role="CLIENT", avatar_url="https://img/c1.png")
    f1 = await make_user("f1", bio="Frontend developer", avatar_url="https://img/f1.png")
    f2 = await make_user("f2", bio="Backend developer")
    job = await make_job(client_user.id, status=JobStatus.OPEN.value)
    return {"client": client_user, "f1": f1, "f2": f2, "job": job}
