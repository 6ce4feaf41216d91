"""Claro Inventory - Reports endpoints: dashboard KPIs and daily consumption."""
from typing import Annotated, Any

from fastapi import APIRouter, Query

from claro_inventory.api.deps import Inventory
from claro_inventory.core.tables import FieldColumn, table_listing
from claro_inventory.schemas.common import ApiResponse, Meta

router = APIRouter()

CONSUMPTION_COLUMNS = [
    FieldColumn(header="ID Técnico", field="technician_id"),
    FieldColumn(header="Nombre", field="name"),
    FieldColumn(header="Fecha Consolidado", field="date"),
    FieldColumn(header="Equipos Instalados", field="installed_equipment"),
    FieldColumn(header="Materiales (Unidades)", field="consumed_materials"),
    FieldColumn(header="Estado (OFSC/SAP)", field="sync_status"),
]
CONSUMPTION_FILTERS = ["technician_id", "name", "date", "sync_status"]

MultiValue = Annotated[list[str] | None, Query()]


@router.get("/dashboard", response_model=ApiResponse[dict[str, int]])
async def get_dashboard(inventory: Inventory):
    """KPI dashboard: material stock, serialized totals, assignments, RMA, sync errors."""
    return ApiResponse(data=inventory.reports.dashboard())


@router.get("/consumption", response_model=ApiResponse[list[dict[str, Any]]])
async def get_consumption(
    inventory: Inventory,
    technician_id: MultiValue = None,
    name: MultiValue = None,
    date: MultiValue = None,
    sync_status: MultiValue = None,
):
    """Daily consolidated consumption per technician with OFSC/SAP status text."""
    rows, meta = table_listing(
        inventory.reports.consumption_log(), CONSUMPTION_COLUMNS, CONSUMPTION_FILTERS,
        {"technician_id": technician_id, "name": name, "date": date, "sync_status": sync_status},
    )
    return ApiResponse(data=rows, meta=Meta(**meta))
