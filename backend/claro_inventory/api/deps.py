"""Claro Inventory - FastAPI dependencies."""
from typing import Annotated

from fastapi import Depends

from claro_inventory.db.session import InventorySession, get_inventory

Inventory = Annotated[InventorySession, Depends(get_inventory)]
