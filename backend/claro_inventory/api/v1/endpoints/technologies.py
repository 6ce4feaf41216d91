"""Claro Inventory - Technology / compatible service matrix endpoints."""
from fastapi import APIRouter, status

from claro_inventory.api.deps import Inventory
from claro_inventory.core.responses import failure_response
from claro_inventory.models.catalog import TechnologyProfile
from claro_inventory.schemas.common import ApiResponse, Meta, OperationResult
from claro_inventory.schemas.operations import AddServiceRequest

router = APIRouter()


@router.get("", response_model=ApiResponse[list[TechnologyProfile]])
async def list_technologies(inventory: Inventory):
    profiles = inventory.compatibility.list_profiles()
    return ApiResponse(data=profiles, meta=Meta(total_count=len(profiles)))


@router.post(
    "/{technology}/services",
    response_model=ApiResponse[OperationResult],
    status_code=status.HTTP_201_CREATED,
)
async def add_service(technology: str, body: AddServiceRequest, inventory: Inventory):
    result = inventory.compatibility.add_service(technology, body.code, body.name, body.service_type)
    if not result.success:
        return failure_response(result)
    return ApiResponse(data=result)


@router.delete("/{technology}/services/{code}", response_model=ApiResponse[OperationResult])
async def remove_service(technology: str, code: str, inventory: Inventory):
    result = inventory.compatibility.remove_service(technology, code)
    if not result.success:
        return failure_response(result)
    return ApiResponse(data=result)
