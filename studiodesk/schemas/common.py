"""Shared schema helpers."""
from __future__ import annotations

from enum import Enum
from typing import Any, Optional, Type
from uuid import UUID

from pydantic import BaseModel, ConfigDict


def upper_enum(value: Any) -> Any:
    """Accept enum names case-insensitively, as query strings often arrive."""

    if isinstance(value, str):
        return value.strip().upper()
    return value


def blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def parse_enum_query(enum_cls: Type[Enum], raw: Optional[str]) -> Optional[Enum]:
    if raw is None or raw == "":
        return None
    return enum_cls(upper_enum(raw))


class MemberSummary(BaseModel):
    id: UUID
    first_name: str
    last_name: str

    model_config = ConfigDict(from_attributes=True)
