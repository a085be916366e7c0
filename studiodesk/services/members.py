"""Member registry operations."""
from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.core.exceptions import InvalidStateError, NotFoundError
from studiodesk.db.models.enums import MemberStatus
from studiodesk.db.models.member import Member
from studiodesk.repositories.member_repo import MemberRepo
from studiodesk.schemas.member import MemberCreate, MemberUpdate

logger = logging.getLogger(__name__)


class MemberService:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.members = MemberRepo(session)

    async def list_for_studio(
        self, studio_id: UUID, status: Optional[MemberStatus] = None
    ) -> list[Member]:
        return await self.members.list_for_studio(studio_id, status=status)

    async def create(self, studio_id: UUID, body: MemberCreate) -> Member:
        member = await self.members.create(Member(studio_id=studio_id, **body.model_dump()))
        logger.info("Member %s registered (studio %s)", member.id, studio_id)
        return member

    async def get(self, studio_id: UUID, member_id: UUID) -> Member:
        member = await self.members.get(studio_id, member_id)
        if member is None:
            raise NotFoundError("member not found")
        return member

    async def update(self, studio_id: UUID, member_id: UUID, body: MemberUpdate) -> Member:
        member = await self.get(studio_id, member_id)
        for field, value in body.changes().items():
            setattr(member, field, value)
        await self.session.flush()
        return member

    async def deactivate(self, studio_id: UUID, member_id: UUID) -> Member:
        """Mark a member INACTIVE, which blocks further check-ins."""

        member = await self.get(studio_id, member_id)
        if member.status == MemberStatus.INACTIVE:
            raise InvalidStateError("member is already inactive")

        member.status = MemberStatus.INACTIVE
        await self.session.flush()
        logger.info("Member %s deactivated (studio %s)", member_id, studio_id)
        return member
