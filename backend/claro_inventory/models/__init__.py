"""Claro Inventory - Domain models."""
from claro_inventory.models.asset import AssetStatus, SerializedAsset, normalize_serial
from claro_inventory.models.catalog import (
    CompatibleService,
    ConsumptionEntry,
    Criticality,
    Material,
    ReferenceData,
    Technician,
    TechnologyProfile,
)
from claro_inventory.models.rma import RmaRecord, RmaStatus

__all__ = [
    "AssetStatus", "SerializedAsset", "normalize_serial",
    "RmaRecord", "RmaStatus",
    "Technician", "ReferenceData",
    "Material", "Criticality", "ConsumptionEntry",
    "CompatibleService", "TechnologyProfile",
]
