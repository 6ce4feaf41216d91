"""Claro Inventory - RMA endpoints."""
from typing import Annotated, Any

from fastapi import APIRouter, Query, status

from claro_inventory.api.deps import Inventory
from claro_inventory.core.responses import failure_response
from claro_inventory.core.tables import ComputedColumn, FieldColumn, table_listing
from claro_inventory.schemas.common import ApiResponse, Meta, OperationResult
from claro_inventory.schemas.operations import RegisterRmaRequest

router = APIRouter()

RMA_COLUMNS = [
    FieldColumn(header="Serial", field="serial"),
    FieldColumn(header="Tipo de Equipo", field="equipment_type"),
    FieldColumn(header="Tecnología", field="technology"),
    FieldColumn(header="Estado", field="status"),
    ComputedColumn(header="Estado (texto)", key="status_label", compute=lambda r: r.status.label),
    FieldColumn(header="Causal de Ingreso", field="causal"),
    FieldColumn(header="ID Técnico", field="reporting_technician_id"),
    FieldColumn(header="Técnico Reporta", field="reporting_technician_name"),
    FieldColumn(header="Fecha Registro", field="registered_date"),
]
RMA_FILTERS = [
    "equipment_type", "status", "causal",
    "reporting_technician_id", "reporting_technician_name", "registered_date",
]

MultiValue = Annotated[list[str] | None, Query()]


@router.get("", response_model=ApiResponse[list[dict[str, Any]]])
async def list_rma(
    inventory: Inventory,
    equipment_type: MultiValue = None,
    status: MultiValue = None,
    causal: MultiValue = None,
    reporting_technician_id: MultiValue = None,
    reporting_technician_name: MultiValue = None,
    registered_date: MultiValue = None,
):
    rows, meta = table_listing(
        inventory.ledger.snapshot(), RMA_COLUMNS, RMA_FILTERS,
        {
            "equipment_type": equipment_type,
            "status": status,
            "causal": causal,
            "reporting_technician_id": reporting_technician_id,
            "reporting_technician_name": reporting_technician_name,
            "registered_date": registered_date,
        },
    )
    return ApiResponse(data=rows, meta=Meta(**meta))


@router.post("", response_model=ApiResponse[OperationResult], status_code=status.HTTP_201_CREATED)
async def register_rma(body: RegisterRmaRequest, inventory: Inventory):
    """Register a returned/damaged unit. The serial leaves the asset registry."""
    result = inventory.rma.register_rma(
        body.serial,
        body.causal,
        body.technician_id,
        body.technician_name,
        fallback_type=body.fallback_type,
        fallback_technology=body.fallback_technology,
    )
    if not result.success:
        return failure_response(result)
    return ApiResponse(data=result)
