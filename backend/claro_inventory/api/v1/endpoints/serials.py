"""Claro Inventory - Serialized equipment endpoints: listing, lookup, intake."""
from typing import Annotated, Any

from fastapi import APIRouter, Query, status
from fastapi.responses import JSONResponse

from claro_inventory.api.deps import Inventory
from claro_inventory.core.responses import error_response, failure_response
from claro_inventory.core.tables import ComputedColumn, FieldColumn, table_listing
from claro_inventory.models.asset import SerializedAsset
from claro_inventory.schemas.common import ApiResponse, Meta, OperationResult
from claro_inventory.schemas.operations import RegisterSerialRequest

router = APIRouter()

SERIAL_COLUMNS = [
    FieldColumn(header="Serial", field="serial"),
    FieldColumn(header="Tipo de Equipo", field="equipment_type"),
    FieldColumn(header="Tecnología", field="technology"),
    FieldColumn(header="Estado", field="status"),
    ComputedColumn(header="Estado (texto)", key="status_label", compute=lambda a: a.status.label),
    FieldColumn(header="Asignado a ID", field="technician_id"),
    FieldColumn(header="Técnico/Cliente", field="technician_name"),
    FieldColumn(header="Ubicación Actual", field="location"),
]
SERIAL_FILTERS = ["equipment_type", "technology", "status", "location", "technician_name"]

MultiValue = Annotated[list[str] | None, Query()]


@router.get("", response_model=ApiResponse[list[dict[str, Any]]])
async def list_serials(
    inventory: Inventory,
    equipment_type: MultiValue = None,
    technology: MultiValue = None,
    status: MultiValue = None,
    location: MultiValue = None,
    technician_name: MultiValue = None,
):
    """All serialized equipment, filterable by any combination of columns."""
    rows, meta = table_listing(
        inventory.registry.snapshot(), SERIAL_COLUMNS, SERIAL_FILTERS,
        {
            "equipment_type": equipment_type,
            "technology": technology,
            "status": status,
            "location": location,
            "technician_name": technician_name,
        },
    )
    return ApiResponse(data=rows, meta=Meta(**meta))


@router.get("/{serial}", response_model=ApiResponse[SerializedAsset])
async def get_serial(serial: str, inventory: Inventory):
    asset = inventory.registry.get(serial)
    if asset is None:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error_response("NOT_FOUND", f"Serial {serial.strip().upper()} no encontrado."),
        )
    return ApiResponse(data=asset)


@router.post("", response_model=ApiResponse[OperationResult], status_code=status.HTTP_201_CREATED)
async def register_serial(body: RegisterSerialRequest, inventory: Inventory):
    """Register a serial as available in a warehouse (recovery path for unknown serials)."""
    result = inventory.intake.register_new_serial(
        body.serial,
        body.equipment_type,
        body.technology,
        body.location or inventory.settings.DEFAULT_WAREHOUSE,
    )
    if not result.success:
        return failure_response(result)
    return ApiResponse(data=result)
