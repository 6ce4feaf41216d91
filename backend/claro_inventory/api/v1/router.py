"""Claro Inventory - API v1 router aggregation."""
from fastapi import APIRouter

from claro_inventory.api.v1.endpoints import (
    assignments,
    catalog,
    reference,
    reports,
    rma,
    serials,
    technologies,
)

api_router = APIRouter()

api_router.include_router(reference.router, prefix="/reference", tags=["reference"])
api_router.include_router(serials.router, prefix="/serials", tags=["serials"])
api_router.include_router(assignments.router, prefix="/assignments", tags=["assignments"])
api_router.include_router(rma.router, prefix="/rma", tags=["rma"])
api_router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
api_router.include_router(technologies.router, prefix="/technologies", tags=["technologies"])
api_router.include_router(reports.router, prefix="/reports", tags=["reports"])
