"""Claro Inventory - Request bodies for the console forms."""
from pydantic import BaseModel


class AssignRequest(BaseModel):
    serial: str
    technician_id: str
    technician_name: str | None = None


class RegisterSerialRequest(BaseModel):
    serial: str
    equipment_type: str
    technology: str
    location: str | None = None  # defaults to the configured warehouse


class RegisterRmaRequest(BaseModel):
    serial: str
    causal: str
    technician_id: str
    technician_name: str | None = None
    fallback_type: str | None = None
    fallback_technology: str | None = None


class AddServiceRequest(BaseModel):
    code: str
    name: str
    service_type: str
