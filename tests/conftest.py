from typing import NamedTuple

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from vendorhub.db import get_db
from vendorhub.main import app
from vendorhub.models.base import Base
from vendorhub.models.profile import OnboardingStatus, Profile

PASSWORD = "chai-pass-123"


class Vendor(NamedTuple):
    email: str
    profile_id: int
    headers: dict


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def login(client, email: str, password: str = PASSWORD) -> dict:
    resp = await client.post("/api/auth/register", json={"email": email, "password": password})
    assert resp.status_code == 201, resp.text
    resp = await client.post("/api/auth/jwt/login", data={"username": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


async def set_profile(session_factory, profile_id: int, **values) -> None:
    async with session_factory() as session:
        await session.execute(update(Profile).where(Profile.id == profile_id).values(**values))
        await session.commit()


@pytest.fixture
def make_vendor(client, session_factory):
    """Registers a user, creates its profile on first sight, then forces status/admin in the DB."""

    async def _make(email: str, status: OnboardingStatus = OnboardingStatus.ACTIVE, is_admin: bool = False) -> Vendor:
        headers = await login(client, email)
        resp = await client.get("/api/profiles/me", headers=headers)
        assert resp.status_code == 200, resp.text
        profile_id = resp.json()["id"]
        await set_profile(session_factory, profile_id, onboarding_status=status, is_admin=is_admin)
        return Vendor(email=email, profile_id=profile_id, headers=headers)

    return _make


@pytest.fixture
async def vendor_a(make_vendor):
    return await make_vendor("chai.point@vendor.in")


@pytest.fixture
async def vendor_b(make_vendor):
    return await make_vendor("salon.style@vendor.in")


@pytest.fixture
async def admin(make_vendor):
    return await make_vendor("ops@vendorhub.in", is_admin=True)
