"""Claro Inventory - Operation results returned by every state-mutating service."""
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ResultCode(str, Enum):
    # Success
    ASSIGNED = "ASSIGNED"
    REGISTERED = "REGISTERED"
    RMA_REGISTERED = "RMA_REGISTERED"
    SERVICE_ADDED = "SERVICE_ADDED"
    SERVICE_REMOVED = "SERVICE_REMOVED"
    ALERT_SENT = "ALERT_SENT"
    # Failure
    NOT_FOUND = "NOT_FOUND"
    NOT_AVAILABLE = "NOT_AVAILABLE"
    DUPLICATE_SERIAL = "DUPLICATE_SERIAL"
    ALREADY_IN_RMA = "ALREADY_IN_RMA"
    DUPLICATE_SERVICE = "DUPLICATE_SERVICE"
    VALIDATION_ERROR = "VALIDATION_ERROR"


class OperationResult(BaseModel):
    """Outcome of a state-mutating operation, shown to the operator as-is."""

    success: bool
    code: ResultCode | None = None
    message: str

    @classmethod
    def ok(cls, code: ResultCode, message: str) -> "OperationResult":
        return cls(success=True, code=code, message=message)

    @classmethod
    def fail(cls, code: ResultCode, message: str) -> "OperationResult":
        return cls(success=False, code=code, message=message)



class Meta(BaseModel):
    """Listing metadata: row count, column headers and per-column filter options."""

    total_count: int | None = None
    headers: dict[str, str] | None = None
    filter_options: dict[str, list[str]] | None = None
    threshold: int | None = None


class ApiResponse(BaseModel, Generic[T]):
    """Standard response envelope: {data, error, meta}."""

    data: T | None = None
    error: dict[str, Any] | None = None
    meta: Meta | None = None
