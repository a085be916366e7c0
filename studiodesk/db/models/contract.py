"""Contract model binding a member to a plan snapshot."""
from __future__ import annotations

import datetime as dt
import uuid
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    Uuid,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from studiodesk.db.base import Base
from studiodesk.db.models.enums import ContractStatus, PlanType


class Contract(Base):
    """A member's subscription to a plan, frozen at creation time.

    ``plan_type_snapshot`` and ``class_limit_snapshot`` are copied from the
    plan when the contract is created, so later plan edits never change an
    existing contract. ``remaining_classes`` is only meaningful for LIMITED
    contracts and is only ever decremented by the check-in transaction.
    """

    __tablename__ = "contracts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    studio_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    member_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("members.id"), nullable=False, index=True
    )
    plan_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("plans.id"), nullable=False
    )
    status: Mapped[ContractStatus] = mapped_column(
        Enum(ContractStatus, native_enum=False, length=16),
        nullable=False,
        default=ContractStatus.ACTIVE,
    )
    plan_type_snapshot: Mapped[PlanType] = mapped_column(
        Enum(PlanType, native_enum=False, length=16), nullable=False
    )
    class_limit_snapshot: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    remaining_classes: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    start_date: Mapped[dt.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    paused_from: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    paused_until: Mapped[Optional[dt.date]] = mapped_column(Date, nullable=True)
    created_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        CheckConstraint(
            "remaining_classes IS NULL OR remaining_classes >= 0",
            name="ck_contract_remaining_classes_non_negative",
        ),
    )

    @property
    def is_limited(self) -> bool:
        return self.plan_type_snapshot == PlanType.LIMITED

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return (
            f"<Contract {self.id} member={self.member_id} status={self.status} "
            f"remaining={self.remaining_classes}>"
        )
