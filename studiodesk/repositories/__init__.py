"""Repository layer package."""

from studiodesk.repositories.attendance_repo import AttendanceRepo
from studiodesk.repositories.contract_repo import ContractRepo
from studiodesk.repositories.member_repo import MemberRepo
from studiodesk.repositories.plan_repo import PlanRepo
from studiodesk.repositories.session_repo import ClassSessionRepo

__all__ = [
    "AttendanceRepo",
    "ClassSessionRepo",
    "ContractRepo",
    "MemberRepo",
    "PlanRepo",
]
