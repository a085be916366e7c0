"""
Studio (tenant) resolution.

Handlers never look at headers or tokens directly. They depend on
:func:`resolve_tenant`, which delegates to the resolver selected by
``settings.TENANT_RESOLVER`` and yields an opaque studio UUID.
"""
from __future__ import annotations

from typing import Callable
from uuid import UUID

from fastapi import Request

from studiodesk.auth.jwt import TokenTenantResolver
from studiodesk.core.config import settings
from studiodesk.core.exceptions import TenantRequiredError

TenantResolver = Callable[[Request], UUID]


class HeaderTenantResolver:
    """Reads the studio from a request header (``x-studio-id`` by default)."""

    def __init__(self, header_name: str | None = None) -> None:
        self.header_name = header_name or settings.TENANT_HEADER

    def __call__(self, request: Request) -> UUID:
        raw = (request.headers.get(self.header_name) or "").strip()
        if not raw:
            raise TenantRequiredError(f"{self.header_name} required")
        try:
            return UUID(raw)
        except ValueError as exc:
            raise TenantRequiredError("Invalid studio identifier") from exc


def get_tenant_resolver() -> TenantResolver:
    if settings.TENANT_RESOLVER == "token":
        return TokenTenantResolver()
    return HeaderTenantResolver()


def resolve_tenant(request: Request) -> UUID:
    """FastAPI dependency returning the caller's studio id or failing with 401."""

    return get_tenant_resolver()(request)
