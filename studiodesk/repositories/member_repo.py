"""Repository for studio members."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.db.models.enums import MemberStatus
from studiodesk.db.models.member import Member


class MemberRepo:
    """Data-access helpers for :class:`Member`."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get(self, studio_id: UUID, member_id: UUID) -> Member | None:
        result = await self.session.execute(
            select(Member).where(Member.id == member_id, Member.studio_id == studio_id)
        )
        return result.scalar_one_or_none()

    async def list_for_studio(
        self, studio_id: UUID, status: Optional[MemberStatus] = None
    ) -> list[Member]:
        query = select(Member).where(Member.studio_id == studio_id)
        if status is not None:
            query = query.where(Member.status == status)
        result = await self.session.execute(query.order_by(Member.created_at.desc()))
        return list(result.scalars().all())

    async def create(self, member: Member) -> Member:
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member
