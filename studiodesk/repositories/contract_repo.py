"""Repository utilities for member contracts."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.db.models.contract import Contract
from studiodesk.db.models.enums import ContractStatus


class ContractRepo:
    """Data-access helpers for :class:`Contract`."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, studio_id: UUID, contract_id: UUID) -> Contract | None:
        result = await self.session.execute(
            select(Contract).where(
                Contract.id == contract_id, Contract.studio_id == studio_id
            )
        )
        return result.scalar_one_or_none()

    async def list_active_for_member(
        self, studio_id: UUID, member_id: UUID
    ) -> list[Contract]:
        result = await self.session.execute(
            select(Contract).where(
                Contract.studio_id == studio_id,
                Contract.member_id == member_id,
                Contract.status == ContractStatus.ACTIVE,
            )
        )
        return list(result.scalars().all())

    async def list_for_studio(
        self,
        studio_id: UUID,
        status: Optional[ContractStatus] = None,
        member_id: Optional[UUID] = None,
    ) -> list[Contract]:
        query = select(Contract).where(Contract.studio_id == studio_id)
        if status is not None:
            query = query.where(Contract.status == status)
        if member_id is not None:
            query = query.where(Contract.member_id == member_id)
        result = await self.session.execute(query.order_by(Contract.created_at.desc()))
        return list(result.scalars().all())

    async def create(self, contract: Contract) -> Contract:
        self.session.add(contract)
        await self.session.flush()
        await self.session.refresh(contract)
        return contract

    async def save(self, contract: Contract) -> Contract:
        self.session.add(contract)
        await self.session.flush()
        await self.session.refresh(contract)
        return contract

    async def consume_class(self, studio_id: UUID, contract_id: UUID) -> bool:
        """Atomically take one class off a LIMITED contract.

        The predicate and the write are a single UPDATE statement, so two
        transactions can never both pass ``remaining_classes > 0`` against
        the same stored value. Returns ``False`` when no row matched.
        """

        result = await self.session.execute(
            update(Contract)
            .where(
                Contract.id == contract_id,
                Contract.studio_id == studio_id,
                Contract.status == ContractStatus.ACTIVE,
                Contract.remaining_classes > 0,
            )
            .values(remaining_classes=Contract.remaining_classes - 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1
