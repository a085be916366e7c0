"""Database models package exports."""

from studiodesk.db.models.attendance import Attendance
from studiodesk.db.models.class_session import ClassSession
from studiodesk.db.models.contract import Contract
from studiodesk.db.models.enums import (
    AttendanceStatus,
    BillingPeriod,
    ContractStatus,
    MemberStatus,
    PlanType,
    SessionStatus,
)
from studiodesk.db.models.member import Member
from studiodesk.db.models.plan import Plan

__all__ = [
    "Attendance",
    "AttendanceStatus",
    "BillingPeriod",
    "ClassSession",
    "Contract",
    "ContractStatus",
    "Member",
    "MemberStatus",
    "Plan",
    "PlanType",
    "SessionStatus",
]
