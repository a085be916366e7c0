"""Endpoints for attendance check-in, listing and cancellation."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.api.deps import get_db_session, get_studio_id
from studiodesk.api.v1.endpoints.params import parse_id, parse_uuid_query
from studiodesk.db.models.enums import AttendanceStatus
from studiodesk.schemas.attendance import (
    AttendanceListResponse,
    AttendanceResponse,
    CheckInRequest,
    CheckInResponse,
)
from studiodesk.schemas.common import parse_enum_query
from studiodesk.services.attendance import AttendanceService
from studiodesk.services.checkin import CheckInService


router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.get("", response_model=AttendanceListResponse)
async def list_attendance(
    status_query: Optional[str] = Query(default=None, alias="status"),
    session_id: Optional[str] = None,
    member_id: Optional[str] = None,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        status_filter = parse_enum_query(AttendanceStatus, status_query)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid status query, expected: CHECKED_IN, CANCELLED, NO_SHOW",
        ) from exc

    records = await AttendanceService(db).list_for_studio(
        studio_id,
        status=status_filter,
        session_id=parse_uuid_query(session_id, "session_id"),
        member_id=parse_uuid_query(member_id, "member_id"),
    )
    return {"data": records}


@router.post(
    "/check-in",
    response_model=CheckInResponse,
    status_code=status.HTTP_201_CREATED,
)
async def check_in(
    body: CheckInRequest,
    response: Response,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    result = await CheckInService(db).check_in(studio_id, body.session_id, body.member_id)
    if result.already_checked_in:
        # 200 (not 201) tells the caller the row already existed
        response.status_code = status.HTTP_200_OK
    return {"data": result.attendance, "already_checked_in": result.already_checked_in}


@router.post("/{attendance_id}/cancel", response_model=AttendanceResponse)
async def cancel_attendance(
    attendance_id: str,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    attendance_uuid = parse_id(attendance_id, "invalid attendance id")
    attendance = await AttendanceService(db).cancel(studio_id, attendance_uuid)
    return {"data": attendance}
