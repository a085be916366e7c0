"""Endpoints for the class schedule."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.api.deps import get_db_session, get_studio_id
from studiodesk.api.v1.endpoints.params import parse_date_query, parse_id
from studiodesk.db.models.enums import SessionStatus
from studiodesk.schemas.class_session import (
    ClassSessionCreate,
    ClassSessionListResponse,
    ClassSessionResponse,
)
from studiodesk.schemas.common import parse_enum_query
from studiodesk.services.sessions import ClassSessionService


router = APIRouter(prefix="/sessions", tags=["sessions"])


@router.get("", response_model=ClassSessionListResponse)
async def list_sessions(
    status_query: Optional[str] = Query(default=None, alias="status"),
    date_from: Optional[str] = Query(default=None, alias="from"),
    date_to: Optional[str] = Query(default=None, alias="to"),
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        status_filter = parse_enum_query(SessionStatus, status_query)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid status query, expected: SCHEDULED, CANCELLED",
        ) from exc

    sessions = await ClassSessionService(db).list_for_studio(
        studio_id,
        status=status_filter,
        date_from=parse_date_query(date_from, "from"),
        date_to=parse_date_query(date_to, "to"),
    )
    return {"data": sessions}


@router.post("", response_model=ClassSessionResponse, status_code=status.HTTP_201_CREATED)
async def create_session(
    body: ClassSessionCreate,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    class_session = await ClassSessionService(db).create(studio_id, body)
    return {"data": class_session}


@router.get("/{session_id}", response_model=ClassSessionResponse)
async def get_session(
    session_id: str,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    session_uuid = parse_id(session_id, "invalid session id")
    class_session = await ClassSessionService(db).get(studio_id, session_uuid)
    return {"data": class_session}


@router.post("/{session_id}/cancel", response_model=ClassSessionResponse)
async def cancel_session(
    session_id: str,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    session_uuid = parse_id(session_id, "invalid session id")
    class_session = await ClassSessionService(db).cancel(studio_id, session_uuid)
    return {"data": class_session}
