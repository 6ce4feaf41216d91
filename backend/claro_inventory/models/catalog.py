"""Claro Inventory - Reference data, bulk materials, consumption and technology matrix."""
import datetime
from enum import Enum

from pydantic import BaseModel, Field


class Technician(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str


class ReferenceData(BaseModel):
    """Static lookup lists supplied when a session starts."""

    model_config = {"frozen": True}

    technicians: tuple[Technician, ...]
    causal_codes: tuple[str, ...]
    equipment_types: tuple[str, ...]
    technologies: tuple[str, ...]
    warehouses: tuple[str, ...]

    def technician(self, technician_id: str) -> Technician | None:
        for tech in self.technicians:
            if tech.id == technician_id:
                return tech
        return None


class Criticality(str, Enum):
    HIGH = "Alta"
    MEDIUM = "Media"
    LOW = "Baja"


class Material(BaseModel):
    """Non-serialized material tracked only by quantity per warehouse."""

    sku: str
    name: str
    unit: str
    stock: int = Field(ge=0)
    location: str
    criticality: Criticality


class ConsumptionEntry(BaseModel):
    technician_id: str
    name: str
    date: datetime.date
    installed_equipment: int = Field(ge=0)
    consumed_materials: int = Field(ge=0)
    sync_status: str

    @property
    def is_sync_error(self) -> bool:
        return "Error" in self.sync_status


class CompatibleService(BaseModel):
    code: str
    name: str
    service_type: str


class TechnologyProfile(BaseModel):
    technology: str
    description: str
    compatible_services: list[CompatibleService] = []
