"""Claro Inventory - CatalogService: bulk materials and low-stock alerts."""
import logging
import threading
from collections.abc import Iterable

from claro_inventory.models.catalog import Criticality, Material
from claro_inventory.schemas.common import OperationResult, ResultCode

logger = logging.getLogger(__name__)


class CatalogService:
    """Non-serialized materials, stock shown per warehouse."""

    def __init__(self, materials: Iterable[Material], low_stock_threshold: int):
        self._lock = threading.Lock()
        self._materials = [m.model_copy() for m in materials]
        self.low_stock_threshold = low_stock_threshold

    def list_materials(self) -> list[Material]:
        with self._lock:
            return [m.model_copy() for m in self._materials]

    def total_stock(self) -> int:
        return sum(m.stock for m in self.list_materials())

    def low_stock_alerts(self, threshold: int | None = None) -> list[Material]:
        """Low-criticality materials below threshold need proactive restocking."""
        limit = self.low_stock_threshold if threshold is None else threshold
        return [
            m for m in self.list_materials()
            if m.criticality == Criticality.LOW and m.stock < limit
        ]

    def send_alert(self, sku: str) -> OperationResult:
        sku = (sku or "").strip().upper()
        material = next((m for m in self.list_materials() if m.sku == sku), None)
        if material is None:
            return OperationResult.fail(ResultCode.NOT_FOUND, f"SKU {sku} no existe en el catálogo.")
        # Delivery (mail/notification) is not wired; the alert is recorded in the log.
        logger.info("Low-stock alert for %s at %s (stock=%s)", material.sku, material.location, material.stock)
        return OperationResult.ok(
            ResultCode.ALERT_SENT,
            f"Alerta enviada para {material.sku} en {material.location}. Stock actual: {material.stock}.",
        )
