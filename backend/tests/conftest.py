"""Test fixtures for the backend."""
import os
from collections.abc import AsyncIterator, Awaitable, Callable

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")
os.environ.setdefault("ADMIN_PASSWORD", "Admin@12345")

from union_registry import models  # noqa: E402
from union_registry.bootstrap import ensure_admin_user  # noqa: E402
from union_registry.config import get_settings  # noqa: E402
from union_registry.database import build_engine  # noqa: E402
from union_registry.dependencies import get_db_session  # noqa: E402
from union_registry.main import app  # noqa: E402

from factories import dealer_payload  # noqa: E402

DealerFactory = Callable[..., Awaitable[tuple[dict, dict[str, str]]]]


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    """Fresh in-memory database per test, with the admin account seeded."""

    engine = build_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(models.Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        await ensure_admin_user(session)

    yield factory
    await engine.dispose()


@pytest_asyncio.fixture
async def client(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncClient]:
    """Provide an HTTP client bound to the per-test database."""

    async def _session_override() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = _session_override
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_headers(client: AsyncClient) -> dict[str, str]:
    response = await client.post(
        "/auth/admin-login", json={"password": get_settings().admin_password}
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}


@pytest_asyncio.fixture
async def make_dealer(client: AsyncClient, admin_headers: dict[str, str]) -> DealerFactory:
    """Create a dealer through the admin API and log in as its user.

    Returns the created dealer and bearer headers for that dealer.
    """

    async def _make(index: int = 1, **overrides) -> tuple[dict, dict[str, str]]:
        payload = dealer_payload(index, **overrides)
        created = await client.post("/admin/dealers", json=payload, headers=admin_headers)
        assert created.status_code == 201, created.text
        body = created.json()

        login = await client.post(
            "/auth/dealer-login",
            json={"email": payload["primary_contact_email"], "password": body["temp_pass"]},
        )
        assert login.status_code == 200, login.text
        return body["dealer"], {"Authorization": f"Bearer {login.json()['token']}"}

    return _make
