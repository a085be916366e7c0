"""Endpoints for the member registry."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.api.deps import get_db_session, get_studio_id
from studiodesk.api.v1.endpoints.params import parse_id
from studiodesk.db.models.enums import MemberStatus
from studiodesk.schemas.common import parse_enum_query
from studiodesk.schemas.member import (
    MemberCreate,
    MemberListResponse,
    MemberResponse,
    MemberUpdate,
)
from studiodesk.services.members import MemberService


router = APIRouter(prefix="/members", tags=["members"])


@router.get("", response_model=MemberListResponse)
async def list_members(
    status_query: Optional[str] = Query(default=None, alias="status"),
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        status_filter = parse_enum_query(MemberStatus, status_query)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid status query, expected: ACTIVE, FROZEN, INACTIVE",
        ) from exc

    members = await MemberService(db).list_for_studio(studio_id, status=status_filter)
    return {"data": members}


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
async def create_member(
    body: MemberCreate,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    member = await MemberService(db).create(studio_id, body)
    return {"data": member}


@router.get("/{member_id}", response_model=MemberResponse)
async def get_member(
    member_id: str,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    member = await MemberService(db).get(studio_id, parse_id(member_id, "invalid member id"))
    return {"data": member}


@router.patch("/{member_id}", response_model=MemberResponse)
async def update_member(
    member_id: str,
    body: MemberUpdate,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    member_uuid = parse_id(member_id, "invalid member id")
    member = await MemberService(db).update(studio_id, member_uuid, body)
    return {"data": member}


@router.post("/{member_id}/deactivate", response_model=MemberResponse)
async def deactivate_member(
    member_id: str,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    member_uuid = parse_id(member_id, "invalid member id")
    member = await MemberService(db).deactivate(studio_id, member_uuid)
    return {"data": member}
