"""Bearer-token studio resolution."""
from __future__ import annotations

from typing import Any, Dict
from uuid import UUID

import jwt
from fastapi import Request

from studiodesk.core.config import settings
from studiodesk.core.exceptions import TenantRequiredError


def decode_bearer(authorization: str | None) -> Dict[str, Any]:
    """Validate a bearer token and return decoded claims."""

    if not authorization or not authorization.lower().startswith("bearer "):
        raise TenantRequiredError("Missing bearer token")

    token = authorization.split(" ", 1)[1].strip()
    try:
        return jwt.decode(
            token,
            settings.JWT_SECRET,
            algorithms=[settings.JWT_ALG],
        )
    except jwt.InvalidTokenError as exc:
        raise TenantRequiredError("Invalid token") from exc


class TokenTenantResolver:
    """Reads the studio from the ``studio_id`` claim of a signed JWT."""

    claim = "studio_id"

    def __call__(self, request: Request) -> UUID:
        payload = decode_bearer(request.headers.get("authorization"))
        if self.claim not in payload:
            raise TenantRequiredError("Studio missing in token")
        try:
            return UUID(str(payload[self.claim]))
        except ValueError as exc:
            raise TenantRequiredError("Invalid studio identifier") from exc


def issue_token(studio_id: UUID, **claims: Any) -> str:
    """Sign a token carrying ``studio_id``. Used by tooling and tests."""

    payload = {"studio_id": str(studio_id), **claims}
    return jwt.encode(payload, settings.JWT_SECRET, algorithm=settings.JWT_ALG)
