"""
Check-in transaction engine.

A check-in inserts the attendance row first and only then takes a class
off the contract. Both happen in one database transaction:

* a natural-key collision on the insert means the member is already checked
  in, so the existing row is returned and no credit is touched;
* a conditional decrement that matches no row means another request used
  the last class, so the whole transaction (insert included) rolls back.

No application-level locking is used. Correctness relies on the unique
constraint on ``(studio_id, session_id, member_id)`` and on the single
``UPDATE ... WHERE remaining_classes > 0`` statement.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.core.exceptions import InsufficientCreditError, StorageError
from studiodesk.db.models.attendance import Attendance
from studiodesk.repositories.attendance_repo import AttendanceRepo
from studiodesk.repositories.contract_repo import ContractRepo
from studiodesk.services.eligibility import EligibilityChecker

logger = logging.getLogger(__name__)


@dataclass
class CheckInResult:
    """Outcome of a check-in attempt."""

    attendance: Attendance
    created: bool

    @property
    def already_checked_in(self) -> bool:
        return not self.created


class CheckInService:
    """Records attendance and consumes class credit exactly once."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.eligibility = EligibilityChecker(session)
        self.attendance = AttendanceRepo(session)
        self.contracts = ContractRepo(session)

    async def check_in(
        self, studio_id: UUID, session_id: UUID, member_id: UUID
    ) -> CheckInResult:
        """Check a member into a session.

        The session passed to the service must not have a transaction in
        progress; the service opens and owns it.

        Raises:
            NotFoundError: session or member missing in the studio.
            InvalidStateError: cancelled session, inactive member, no contract.
            InsufficientCreditError: the LIMITED contract has no classes left.
            ConflictError: more than one ACTIVE contract for the member.
            StorageError: unexpected database failure, nothing was written.
        """

        try:
            async with self.session.begin():
                contract = await self.eligibility.check(studio_id, session_id, member_id)

                attendance = await self.attendance.create_checked_in(
                    studio_id,
                    session_id,
                    member_id,
                    checked_in_at=datetime.now(timezone.utc),
                )

                if contract.is_limited:
                    consumed = await self.contracts.consume_class(studio_id, contract.id)
                    if not consumed:
                        # Raising here rolls back the attendance insert as well
                        raise InsufficientCreditError(contract.id)
                attendance_id = attendance.id
        except IntegrityError as exc:
            existing = await self.attendance.get_by_natural_key(
                studio_id, session_id, member_id
            )
            if existing is None:
                logger.exception(
                    "Check-in insert failed for member %s session %s",
                    member_id,
                    session_id,
                )
                raise StorageError() from exc
            logger.info(
                "Member %s already checked in to session %s (studio %s)",
                member_id,
                session_id,
                studio_id,
            )
            return CheckInResult(attendance=existing, created=False)
        except InsufficientCreditError:
            logger.info(
                "Check-in refused for member %s session %s: no classes remaining",
                member_id,
                session_id,
            )
            raise
        except SQLAlchemyError as exc:
            logger.exception(
                "Check-in transaction failed for member %s session %s",
                member_id,
                session_id,
            )
            raise StorageError() from exc

        logger.info(
            "Member %s checked in to session %s (studio %s)",
            member_id,
            session_id,
            studio_id,
        )
        created = await self.attendance.get(studio_id, attendance_id)
        return CheckInResult(attendance=created, created=True)
