"""
Domain exception hierarchy for the studio back-office.
Every error carries the HTTP status it maps to so the API layer
can render it without knowing the individual types.
"""
from typing import Optional

from fastapi import status


class StudioDeskError(Exception):
    """Base exception for all studio domain errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_error_code: str = "STUDIODESK_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(self.message)


class TenantRequiredError(StudioDeskError):
    """The request could not be attributed to a studio."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_error_code = "TENANT_REQUIRED"


class NotFoundError(StudioDeskError):
    """A studio-scoped entity does not exist (or belongs to another studio)."""

    status_code = status.HTTP_404_NOT_FOUND
    default_error_code = "NOT_FOUND"


class InvalidStateError(StudioDeskError):
    """The entity is in the wrong status for the requested transition."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_error_code = "INVALID_STATE"


class InsufficientCreditError(InvalidStateError):
    """The contract has no classes left to consume."""

    default_error_code = "INSUFFICIENT_CREDIT"

    def __init__(self, contract_id=None):
        super().__init__(
            message="no classes remaining on this contract",
            details={"contract_id": str(contract_id)} if contract_id else None,
        )


class ConflictError(StudioDeskError):
    """Stored data is ambiguous and needs manual correction."""

    status_code = status.HTTP_409_CONFLICT
    default_error_code = "CONFLICT"


class StorageError(StudioDeskError):
    """Unexpected database failure. The message never exposes internals."""

    default_error_code = "STORAGE_ERROR"

    def __init__(self, message: str = "internal storage error"):
        super().__init__(message)
