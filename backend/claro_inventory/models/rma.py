"""Claro Inventory - RMA record model."""
from datetime import date
from enum import Enum

from pydantic import BaseModel, field_validator

from claro_inventory.models.asset import normalize_serial


class RmaStatus(str, Enum):
    PENDING_REVIEW = "PENDING_REVIEW"
    DAMAGED_WRITTEN_OFF = "DAMAGED_WRITTEN_OFF"
    DAMAGED_AT_REPAIR_CENTER = "DAMAGED_AT_REPAIR_CENTER"
    APPROVED_FOR_RETURN = "APPROVED_FOR_RETURN"

    @property
    def label(self) -> str:
        return _RMA_STATUS_LABELS[self]


_RMA_STATUS_LABELS = {
    RmaStatus.PENDING_REVIEW: "RMA - Pendiente Revisión",
    RmaStatus.DAMAGED_WRITTEN_OFF: "Dañado - Baja",
    RmaStatus.DAMAGED_AT_REPAIR_CENTER: "Dañado - Centro Reparación",
    RmaStatus.APPROVED_FOR_RETURN: "RMA - Aprobado para Devolución",
}


class RmaRecord(BaseModel):
    """Returned or damaged unit. Read-only once created."""

    model_config = {"frozen": True}

    serial: str
    equipment_type: str
    technology: str
    status: RmaStatus = RmaStatus.PENDING_REVIEW
    causal: str
    registered_date: date
    reporting_technician_id: str
    reporting_technician_name: str

    @field_validator("serial")
    @classmethod
    def _upper_serial(cls, v: str) -> str:
        return normalize_serial(v)
