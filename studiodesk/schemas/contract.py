"""Pydantic schemas for contract resources."""
import datetime as dt
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, model_validator

from studiodesk.db.models.enums import ContractStatus, PlanType


class ContractCreate(BaseModel):
    """Schema for creating a contract."""

    member_id: UUID = Field(..., description="Member identifier")
    plan_id: UUID = Field(..., description="Plan identifier")
    start_date: dt.date = Field(..., description="First day of the contract")
    end_date: Optional[dt.date] = Field(default=None, description="Last day, if fixed")

    @model_validator(mode="after")
    def check_dates(self) -> "ContractCreate":
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must be >= start_date")
        return self


class ContractPause(BaseModel):
    paused_until: Optional[dt.date] = None


class ContractRead(BaseModel):
    """Schema returned when reading a contract."""

    id: UUID
    studio_id: UUID
    member_id: UUID
    plan_id: UUID
    status: ContractStatus
    plan_type_snapshot: PlanType
    class_limit_snapshot: Optional[int] = None
    remaining_classes: Optional[int] = None
    start_date: dt.date
    end_date: Optional[dt.date] = None
    paused_from: Optional[dt.date] = None
    paused_until: Optional[dt.date] = None
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class ContractResponse(BaseModel):
    data: ContractRead


class ContractListResponse(BaseModel):
    data: list[ContractRead]
