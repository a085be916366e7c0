"""Plan catalogue operations."""
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.core.exceptions import NotFoundError
from studiodesk.db.models.plan import Plan
from studiodesk.repositories.plan_repo import PlanRepo
from studiodesk.schemas.plan import PlanCreate

logger = logging.getLogger(__name__)


class PlanService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = PlanRepo(session)

    async def list_for_studio(self, studio_id: UUID, is_active: Optional[bool] = None) -> list[Plan]:
        return await self.repo.list_for_studio(studio_id, is_active=is_active)

    async def create(self, studio_id: UUID, body: PlanCreate) -> Plan:
        plan = Plan(studio_id=studio_id, **body.model_dump())
        return await self.repo.create(plan)

    async def deactivate(self, studio_id: UUID, plan_id: UUID) -> Plan:
        """Retire a plan from sale. Existing contracts keep their snapshot."""

        plan = await self.repo.get(studio_id, plan_id)
        if plan is None:
            raise NotFoundError("plan not found")
        if plan.is_active:
            plan.is_active = False
            await self.session.flush()
            logger.info("Plan %s deactivated (studio %s)", plan_id, studio_id)
        return plan
