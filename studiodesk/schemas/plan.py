"""Pydantic schemas for plan resources."""
from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from studiodesk.db.models.enums import BillingPeriod, PlanType
from studiodesk.schemas.common import upper_enum


class PlanCreate(BaseModel):
    """Schema for creating a plan.

    ``class_limit`` is required and positive for LIMITED plans and must be
    omitted for UNLIMITED ones.
    """

    name: str = Field(..., min_length=1, description="Plan name")
    type: PlanType
    class_limit: Optional[int] = Field(default=None, description="Classes per contract")
    billing_period: BillingPeriod
    price_cents: int = Field(..., gt=0)
    is_active: bool = True

    @field_validator("type", "billing_period", mode="before")
    @classmethod
    def normalize_enums(cls, value):
        return upper_enum(value)

    @field_validator("name")
    @classmethod
    def strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name is required")
        return value

    @model_validator(mode="after")
    def check_class_limit(self) -> "PlanCreate":
        if self.type == PlanType.LIMITED and (
            self.class_limit is None or self.class_limit <= 0
        ):
            raise ValueError("class_limit must be > 0 when type is LIMITED")
        if self.type == PlanType.UNLIMITED and self.class_limit is not None:
            raise ValueError("class_limit must be null/undefined when type is UNLIMITED")
        return self


class PlanRead(BaseModel):
    id: UUID
    studio_id: UUID
    name: str
    type: PlanType
    class_limit: Optional[int] = None
    billing_period: BillingPeriod
    price_cents: int
    is_active: bool
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PlanResponse(BaseModel):
    data: PlanRead


class PlanListResponse(BaseModel):
    data: list[PlanRead]
