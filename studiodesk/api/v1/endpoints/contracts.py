"""Endpoints for the contract lifecycle."""
from __future__ import annotations

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from studiodesk.api.deps import get_db_session, get_studio_id
from studiodesk.api.v1.endpoints.params import parse_id, parse_uuid_query
from studiodesk.db.models.enums import ContractStatus
from studiodesk.schemas.common import parse_enum_query
from studiodesk.schemas.contract import (
    ContractCreate,
    ContractListResponse,
    ContractPause,
    ContractResponse,
)
from studiodesk.services.contracts import ContractService


router = APIRouter(prefix="/contracts", tags=["contracts"])


@router.get("", response_model=ContractListResponse)
async def list_contracts(
    status_query: Optional[str] = Query(default=None, alias="status"),
    member_id: Optional[str] = None,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    try:
        status_filter = parse_enum_query(ContractStatus, status_query)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="invalid status query, expected: ACTIVE, PAUSED, CANCELLED, EXPIRED",
        ) from exc

    contracts = await ContractService(db).list_for_studio(
        studio_id,
        status=status_filter,
        member_id=parse_uuid_query(member_id, "member_id"),
    )
    return {"data": contracts}


@router.post("", response_model=ContractResponse, status_code=status.HTTP_201_CREATED)
async def create_contract(
    body: ContractCreate,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    contract = await ContractService(db).create(
        studio_id,
        member_id=body.member_id,
        plan_id=body.plan_id,
        start_date=body.start_date,
        end_date=body.end_date,
    )
    return {"data": contract}


@router.post("/{contract_id}/pause", response_model=ContractResponse)
async def pause_contract(
    contract_id: str,
    body: Optional[ContractPause] = Body(default=None),
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    contract_uuid = parse_id(contract_id, "invalid contract id")
    paused_until = body.paused_until if body is not None else None
    contract = await ContractService(db).pause(studio_id, contract_uuid, paused_until)
    return {"data": contract}


@router.post("/{contract_id}/cancel", response_model=ContractResponse)
async def cancel_contract(
    contract_id: str,
    studio_id: UUID = Depends(get_studio_id),
    db: AsyncSession = Depends(get_db_session),
):
    contract_uuid = parse_id(contract_id, "invalid contract id")
    contract = await ContractService(db).cancel(studio_id, contract_uuid)
    return {"data": contract}
