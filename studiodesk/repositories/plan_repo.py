"""Repository utilities for membership plans."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.db.models.plan import Plan


class PlanRepo:
    """Data-access helpers for :class:`Plan`."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, studio_id: UUID, plan_id: UUID) -> Plan | None:
        result = await self.session.execute(
            select(Plan).where(Plan.id == plan_id, Plan.studio_id == studio_id)
        )
        return result.scalar_one_or_none()

    async def list_for_studio(
        self, studio_id: UUID, is_active: Optional[bool] = None
    ) -> list[Plan]:
        query = select(Plan).where(Plan.studio_id == studio_id)
        if is_active is not None:
            query = query.where(Plan.is_active == is_active)
        result = await self.session.execute(query.order_by(Plan.created_at.desc()))
        return list(result.scalars().all())

    async def create(self, plan: Plan) -> Plan:
        self.session.add(plan)
        await self.session.flush()
        await self.session.refresh(plan)
        return plan
