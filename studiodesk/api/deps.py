"""Shared FastAPI dependencies."""
from __future__ import annotations

from typing import AsyncGenerator
from uuid import UUID

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.auth.tenant import resolve_tenant
from studiodesk.db.session import get_db
from studiodesk.services.limits import check_rate_limit


async def get_db_session(
    session: AsyncSession = Depends(get_db),
) -> AsyncGenerator[AsyncSession, None]:
    yield session


async def get_studio_id(studio_id: UUID = Depends(resolve_tenant)) -> UUID:
    """Resolve the caller's studio and apply its rate limit."""

    await check_rate_limit(studio_id)
    return studio_id
