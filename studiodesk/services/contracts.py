"""Contract lifecycle: create, pause and cancel."""
from __future__ import annotations

import datetime as dt
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.core.exceptions import InvalidStateError, NotFoundError
from studiodesk.db.models.contract import Contract
from studiodesk.db.models.enums import ContractStatus, PlanType
from studiodesk.repositories.contract_repo import ContractRepo
from studiodesk.repositories.member_repo import MemberRepo
from studiodesk.repositories.plan_repo import PlanRepo

logger = logging.getLogger(__name__)


def utc_today() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


class ContractService:
    """Manages contract state transitions. Never recalculates credit."""

    def __init__(self, session: AsyncSession) -> None:
        self.contracts = ContractRepo(session)
        self.members = MemberRepo(session)
        self.plans = PlanRepo(session)

    async def list_for_studio(
        self,
        studio_id: UUID,
        status: Optional[ContractStatus] = None,
        member_id: Optional[UUID] = None,
    ) -> list[Contract]:
        return await self.contracts.list_for_studio(
            studio_id, status=status, member_id=member_id
        )

    async def create(
        self,
        studio_id: UUID,
        member_id: UUID,
        plan_id: UUID,
        start_date: dt.date,
        end_date: Optional[dt.date] = None,
    ) -> Contract:
        """Create an ACTIVE contract from a snapshot of the plan."""

        member = await self.members.get(studio_id, member_id)
        if member is None:
            raise NotFoundError("member not found")

        plan = await self.plans.get(studio_id, plan_id)
        if plan is None:
            raise NotFoundError("plan not found")
        if not plan.is_active:
            raise InvalidStateError("plan is not active")
        if plan.type == PlanType.LIMITED and (
            plan.class_limit is None or plan.class_limit <= 0
        ):
            raise InvalidStateError(
                "plan is misconfigured: LIMITED plan has no valid class_limit"
            )

        remaining = plan.class_limit if plan.type == PlanType.LIMITED else None
        contract = Contract(
            studio_id=studio_id,
            member_id=member_id,
            plan_id=plan_id,
            status=ContractStatus.ACTIVE,
            plan_type_snapshot=plan.type,
            class_limit_snapshot=plan.class_limit,
            remaining_classes=remaining,
            start_date=start_date,
            end_date=end_date,
        )
        contract = await self.contracts.create(contract)
        logger.info(
            "Contract %s created for member %s on plan %s", contract.id, member_id, plan_id
        )
        return contract

    async def pause(
        self,
        studio_id: UUID,
        contract_id: UUID,
        paused_until: Optional[dt.date] = None,
    ) -> Contract:
        contract = await self._get(studio_id, contract_id)
        if contract.status != ContractStatus.ACTIVE:
            raise InvalidStateError("only ACTIVE contracts can be paused")

        contract.status = ContractStatus.PAUSED
        contract.paused_from = utc_today()
        contract.paused_until = paused_until
        return await self.contracts.save(contract)

    async def cancel(self, studio_id: UUID, contract_id: UUID) -> Contract:
        contract = await self._get(studio_id, contract_id)
        if contract.status == ContractStatus.CANCELLED:
            raise InvalidStateError("contract is already cancelled")

        contract.status = ContractStatus.CANCELLED
        if contract.end_date is None:
            contract.end_date = utc_today()
        return await self.contracts.save(contract)

    async def _get(self, studio_id: UUID, contract_id: UUID) -> Contract:
        contract = await self.contracts.get(studio_id, contract_id)
        if contract is None:
            raise NotFoundError("contract not found")
        return contract
