"""Path and query parameter parsing shared by the endpoints."""
from __future__ import annotations

import datetime as dt
from typing import Optional
from uuid import UUID

from fastapi import HTTPException, status


def parse_id(value: str, message: str) -> UUID:
    """Parse a path id, answering 400 with a message naming the resource.

    Path ids are taken as ``str`` rather than ``UUID`` so a malformed id
    yields ``{"message": "invalid member id"}`` and friends, the messages
    clients of the existing API match on, instead of the generic
    validation error body.
    """

    try:
        return UUID(value)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message) from exc


def parse_uuid_query(value: Optional[str], field_name: str) -> Optional[UUID]:
    if not value:
        return None
    return parse_id(value, f"invalid {field_name} query, expected a UUID")


def parse_bool_query(value: Optional[str], field_name: str) -> Optional[bool]:
    if value is None:
        return None
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"invalid {field_name} query, expected true or false",
    )


def parse_date_query(value: Optional[str], field_name: str) -> Optional[dt.date]:
    if not value:
        return None
    try:
        # fromisoformat also takes compact forms like 20260301
        if len(value) != 10:
            raise ValueError(value)
        return dt.date.fromisoformat(value)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"invalid {field_name} date, expected YYYY-MM-DD",
        ) from exc
