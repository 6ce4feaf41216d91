"""Claro Inventory - Bulk material catalog endpoints and low-stock alerts."""
from typing import Annotated, Any

from fastapi import APIRouter, Query

from claro_inventory.api.deps import Inventory
from claro_inventory.core.responses import failure_response
from claro_inventory.core.tables import FieldColumn, table_listing
from claro_inventory.models.catalog import Material
from claro_inventory.schemas.common import ApiResponse, Meta, OperationResult

router = APIRouter()

MATERIAL_COLUMNS = [
    FieldColumn(header="SKU", field="sku"),
    FieldColumn(header="Nombre del Material", field="name"),
    FieldColumn(header="Unidad", field="unit"),
    FieldColumn(header="Stock Disponible", field="stock"),
    FieldColumn(header="Ubicación Principal", field="location"),
    FieldColumn(header="Criticidad", field="criticality"),
]
MATERIAL_FILTERS = ["unit", "location", "criticality"]

MultiValue = Annotated[list[str] | None, Query()]


@router.get("/materials", response_model=ApiResponse[list[dict[str, Any]]])
async def list_materials(
    inventory: Inventory,
    unit: MultiValue = None,
    location: MultiValue = None,
    criticality: MultiValue = None,
):
    """Stock per material per warehouse."""
    rows, meta = table_listing(
        inventory.catalog.list_materials(), MATERIAL_COLUMNS, MATERIAL_FILTERS,
        {"unit": unit, "location": location, "criticality": criticality},
    )
    return ApiResponse(data=rows, meta=Meta(**meta))


@router.get("/low-stock", response_model=ApiResponse[list[Material]])
async def low_stock(
    inventory: Inventory,
    threshold: int | None = Query(None, ge=0, description="Defaults to LOW_STOCK_THRESHOLD"),
):
    """Low-criticality materials below the stock threshold."""
    limit = inventory.catalog.low_stock_threshold if threshold is None else threshold
    alerts = inventory.catalog.low_stock_alerts(limit)
    return ApiResponse(data=alerts, meta=Meta(threshold=limit, total_count=len(alerts)))


@router.post("/low-stock/{sku}/alert", response_model=ApiResponse[OperationResult])
async def send_low_stock_alert(sku: str, inventory: Inventory):
    result = inventory.catalog.send_alert(sku)
    if not result.success:
        return failure_response(result)
    return ApiResponse(data=result)
