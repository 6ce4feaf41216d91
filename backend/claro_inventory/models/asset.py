"""Claro Inventory - Serialized asset model."""
from enum import Enum

from pydantic import BaseModel, field_validator, model_validator

VEHICLE_PREFIX = "Vehicle:"
CLIENT_PREFIX = "Client:"


class AssetStatus(str, Enum):
    IN_WAREHOUSE = "IN_WAREHOUSE"
    ASSIGNED_TO_TECHNICIAN = "ASSIGNED_TO_TECHNICIAN"
    INSTALLED_AT_CLIENT = "INSTALLED_AT_CLIENT"
    IN_RMA_PROCESS = "IN_RMA_PROCESS"

    @property
    def label(self) -> str:
        return _ASSET_STATUS_LABELS[self]


_ASSET_STATUS_LABELS = {
    AssetStatus.IN_WAREHOUSE: "Disponible en Bodega",
    AssetStatus.ASSIGNED_TO_TECHNICIAN: "Asignado a Técnico",
    AssetStatus.INSTALLED_AT_CLIENT: "Instalado en Cliente",
    AssetStatus.IN_RMA_PROCESS: "En Proceso RMA",
}


def normalize_serial(serial: str | None) -> str:
    """Serials are matched case-insensitively: trim and upper-case."""
    return (serial or "").strip().upper()


class SerializedAsset(BaseModel):
    """A uniquely identified unit of equipment tracked by serial number.

    `technician_id` holds the technician while the unit rides in a vehicle and
    the client id once installed; the location must agree with the status.
    """

    serial: str
    equipment_type: str
    technology: str
    status: AssetStatus = AssetStatus.IN_WAREHOUSE
    technician_id: str = ""
    technician_name: str = ""
    location: str

    @field_validator("serial")
    @classmethod
    def _upper_serial(cls, v: str) -> str:
        v = normalize_serial(v)
        if not v:
            raise ValueError("serial must not be empty")
        return v

    @model_validator(mode="after")
    def _check_status_consistency(self) -> "SerializedAsset":
        if self.status == AssetStatus.ASSIGNED_TO_TECHNICIAN:
            if not self.technician_id or self.location != VEHICLE_PREFIX + self.technician_id:
                raise ValueError("assigned assets must sit in the technician's vehicle")
        elif self.status == AssetStatus.INSTALLED_AT_CLIENT:
            if not self.technician_id or self.location != CLIENT_PREFIX + self.technician_id:
                raise ValueError("installed assets must be located at the client")
        elif self.technician_id or self.technician_name:
            raise ValueError(f"{self.status.value} assets carry no technician")
        return self
