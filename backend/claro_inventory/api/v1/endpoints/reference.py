"""Claro Inventory - Reference data for the console's select inputs."""
from fastapi import APIRouter

from claro_inventory.api.deps import Inventory
from claro_inventory.models.catalog import ReferenceData
from claro_inventory.schemas.common import ApiResponse

router = APIRouter()


@router.get("", response_model=ApiResponse[ReferenceData])
async def get_reference(inventory: Inventory):
    return ApiResponse(data=inventory.reference)
