"""Check-in eligibility rules."""
from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.core.exceptions import ConflictError, InvalidStateError, NotFoundError
from studiodesk.db.models.contract import Contract
from studiodesk.db.models.enums import MemberStatus, SessionStatus
from studiodesk.repositories.contract_repo import ContractRepo
from studiodesk.repositories.member_repo import MemberRepo
from studiodesk.repositories.session_repo import ClassSessionRepo

logger = logging.getLogger(__name__)


class EligibilityChecker:
    """Read-only gate in front of the check-in transaction.

    Resolves the single ACTIVE contract a member can check in with. The
    checks are run with the caller's session, so when invoked inside the
    check-in transaction they observe the same snapshot as the writes.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.sessions = ClassSessionRepo(session)
        self.members = MemberRepo(session)
        self.contracts = ContractRepo(session)

    async def check(self, studio_id: UUID, session_id: UUID, member_id: UUID) -> Contract:
        class_session = await self.sessions.get(studio_id, session_id)
        if class_session is None:
            raise NotFoundError("session not found")
        if class_session.status == SessionStatus.CANCELLED:
            raise InvalidStateError("session is cancelled")

        member = await self.members.get(studio_id, member_id)
        if member is None:
            raise NotFoundError("member not found")
        if member.status != MemberStatus.ACTIVE:
            raise InvalidStateError("member is not active")

        contracts = await self.contracts.list_active_for_member(studio_id, member_id)
        if not contracts:
            raise InvalidStateError("no active contract for this member")
        if len(contracts) > 1:
            # Ambiguous data; never pick one silently
            logger.warning(
                "Member %s in studio %s has %d active contracts",
                member_id,
                studio_id,
                len(contracts),
            )
            raise ConflictError(
                "multiple active contracts for this member",
                details={"contract_ids": [str(c.id) for c in contracts]},
            )
        return contracts[0]
