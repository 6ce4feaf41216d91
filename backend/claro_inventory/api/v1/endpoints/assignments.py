"""Claro Inventory - Technician assignment endpoints (operations view)."""
from typing import Annotated, Any

from fastapi import APIRouter, Query

from claro_inventory.api.deps import Inventory
from claro_inventory.core.responses import failure_response
from claro_inventory.core.tables import FieldColumn, table_listing
from claro_inventory.schemas.common import ApiResponse, Meta, OperationResult
from claro_inventory.schemas.operations import AssignRequest

router = APIRouter()

ASSIGNMENT_COLUMNS = [
    FieldColumn(header="Serial", field="serial"),
    FieldColumn(header="Tipo de Equipo", field="equipment_type"),
    FieldColumn(header="Asignado a ID", field="technician_id"),
    FieldColumn(header="Técnico/Cliente", field="technician_name"),
    FieldColumn(header="Ubicación Actual", field="location"),
]
ASSIGNMENT_FILTERS = ["equipment_type", "technician_id", "technician_name", "location"]

MultiValue = Annotated[list[str] | None, Query()]


@router.get("", response_model=ApiResponse[list[dict[str, Any]]])
async def list_assigned(
    inventory: Inventory,
    equipment_type: MultiValue = None,
    technician_id: MultiValue = None,
    technician_name: MultiValue = None,
    location: MultiValue = None,
):
    """Equipment assigned to technicians or installed at clients."""
    rows, meta = table_listing(
        inventory.reports.assigned_or_installed(), ASSIGNMENT_COLUMNS, ASSIGNMENT_FILTERS,
        {
            "equipment_type": equipment_type,
            "technician_id": technician_id,
            "technician_name": technician_name,
            "location": location,
        },
    )
    return ApiResponse(data=rows, meta=Meta(**meta))


@router.post("", response_model=ApiResponse[OperationResult])
async def assign_serial(body: AssignRequest, inventory: Inventory):
    """Scan-to-assign: move a warehouse serial into a technician's vehicle.

    NOT_FOUND means the serial is unknown; the console offers POST /serials
    and a retry.
    """
    result = inventory.assignments.assign(body.serial, body.technician_id, body.technician_name)
    if not result.success:
        return failure_response(result)
    return ApiResponse(data=result)
