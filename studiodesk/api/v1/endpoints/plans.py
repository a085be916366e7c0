"""Endpoints for the plan catalogue."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.api.deps import get_db_session, get_studio_id
from studiodesk.api.v1.endpoints.params import parse_bool_query, parse_id
from studiodesk.schemas.plan import PlanCreate, PlanListResponse, PlanResponse
from studiodesk.services.plans import PlanService


router = APIRouter(prefix="/plans", tags=["plans"])


@router.get("", response_model=PlanListResponse)
async def list_plans(
    is_active: Optional[str] = None,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    plans = await PlanService(db).list_for_studio(
        studio_id, is_active=parse_bool_query(is_active, "is_active")
    )
    return {"data": plans}


@router.post("", response_model=PlanResponse, status_code=status.HTTP_201_CREATED)
async def create_plan(
    body: PlanCreate,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    plan = await PlanService(db).create(studio_id, body)
    return {"data": plan}


@router.post("/{plan_id}/deactivate", response_model=PlanResponse)
async def deactivate_plan(
    plan_id: str,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    plan = await PlanService(db).deactivate(studio_id, parse_id(plan_id, "invalid plan id"))
    return {"data": plan}
