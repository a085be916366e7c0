"""
Pytest configuration for the application
"""
import datetime as dt
import os
from typing import AsyncGenerator, Dict
from uuid import UUID, uuid4

import httpx
import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from studiodesk.core.config import settings
from studiodesk.db.base import Base
from studiodesk.db.models import (
    ClassSession,
    Contract,
    ContractStatus,
    Member,
    MemberStatus,
    Plan,
    PlanType,
    SessionStatus,
)
from studiodesk.db.session import get_db
from studiodesk.main import create_application
from studiodesk.services import limits as limits_service


# Set test environment and override runtime settings to avoid external deps
os.environ["ENV"] = "test"
settings.ENV = "test"
settings.TENANT_RESOLVER = "header"
TEST_DATABASE_URI = os.getenv(
    "TEST_DATABASE_URI", "sqlite+aiosqlite:///./test_studiodesk.db"
)


class FakeRedis:
    """Minimal async Redis stub for rate limiting tests."""

    def __init__(self) -> None:
        self.store: Dict[str, int | str] = {}

    async def incr(self, key: str) -> int:
        current = int(self.store.get(key, 0)) + 1
        self.store[key] = current
        return current

    async def expire(self, key: str, seconds: int) -> None:
        self.store.setdefault(f"{key}:ttl", seconds)


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch) -> FakeRedis:
    """Patch the limits module to use an in-memory Redis stub."""

    fake = FakeRedis()
    monkeypatch.setattr(limits_service, "_redis_client", fake, raising=False)
    yield fake
    monkeypatch.setattr(limits_service, "_redis_client", None, raising=False)


@pytest_asyncio.fixture
async def test_db_engine():
    """
    Create a fresh schema for every test.
    """
    engine = create_async_engine(TEST_DATABASE_URI)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def session_factory(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_db_engine, expire_on_commit=False)


@pytest_asyncio.fixture
async def test_db(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """
    Session used by tests to seed and inspect rows directly.
    """
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_app(session_factory) -> AsyncGenerator[FastAPI, None]:
    """
    Create a FastAPI test application bound to the test database.
    """
    app = create_application()

    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = _override_get_db
    async with LifespanManager(app):
        yield app


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """
    Create an async HTTP client for testing.
    """
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(
        transport=transport,
        base_url="http://test",
    ) as async_client:
        yield async_client


class StudioSeeder:
    """Inserts rows for one studio through a plain session."""

    def __init__(self, session: AsyncSession, studio_id: UUID) -> None:
        self.session = session
        self.studio_id = studio_id

    async def _save(self, obj):
        self.session.add(obj)
        await self.session.commit()
        await self.session.refresh(obj)
        return obj

    async def member(self, status: MemberStatus = MemberStatus.ACTIVE, **kwargs) -> Member:
        return await self._save(
            Member(
                studio_id=kwargs.pop("studio_id", self.studio_id),
                first_name=kwargs.pop("first_name", "Ada"),
                last_name=kwargs.pop("last_name", "Lovelace"),
                status=status,
                **kwargs,
            )
        )

    async def plan(
        self,
        plan_type: PlanType = PlanType.LIMITED,
        class_limit: int | None = 10,
        is_active: bool = True,
        **kwargs,
    ) -> Plan:
        if plan_type == PlanType.UNLIMITED:
            class_limit = None
        return await self._save(
            Plan(
                studio_id=kwargs.pop("studio_id", self.studio_id),
                name=kwargs.pop("name", f"Plan {plan_type.value}"),
                type=plan_type,
                class_limit=class_limit,
                price_cents=kwargs.pop("price_cents", 9900),
                is_active=is_active,
                **kwargs,
            )
        )

    async def class_session(
        self, status: SessionStatus = SessionStatus.SCHEDULED, **kwargs
    ) -> ClassSession:
        starts_at = kwargs.pop(
            "starts_at", dt.datetime.now(dt.timezone.utc) + dt.timedelta(hours=1)
        )
        return await self._save(
            ClassSession(
                studio_id=kwargs.pop("studio_id", self.studio_id),
                class_type=kwargs.pop("class_type", "Reformer Pilates"),
                starts_at=starts_at,
                capacity=kwargs.pop("capacity", 12),
                status=status,
                **kwargs,
            )
        )

    async def contract(
        self,
        member: Member,
        plan: Plan | None = None,
        remaining_classes: int | None = 10,
        status: ContractStatus = ContractStatus.ACTIVE,
    ) -> Contract:
        plan = plan or await self.plan()
        limited = plan.type == PlanType.LIMITED
        return await self._save(
            Contract(
                studio_id=member.studio_id,
                member_id=member.id,
                plan_id=plan.id,
                status=status,
                plan_type_snapshot=plan.type,
                class_limit_snapshot=plan.class_limit,
                remaining_classes=remaining_classes if limited else None,
                start_date=dt.date.today(),
            )
        )

    async def reload(self, obj):
        await self.session.refresh(obj)
        return obj


@pytest.fixture
def studio_id() -> UUID:
    return uuid4()


@pytest.fixture
def seed(test_db: AsyncSession, studio_id: UUID) -> StudioSeeder:
    return StudioSeeder(test_db, studio_id)


@pytest.fixture
def headers(studio_id: UUID) -> Dict[str, str]:
    """Tenant header for the default test studio."""

    return {settings.TENANT_HEADER: str(studio_id)}
