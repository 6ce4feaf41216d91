"""Claro Inventory - ReportService: dashboard KPIs, operations view, consumption log."""
from collections.abc import Iterable

from claro_inventory.db.store import AssetRegistry, RmaLedger
from claro_inventory.models.asset import CLIENT_PREFIX, SerializedAsset
from claro_inventory.models.catalog import ConsumptionEntry, Criticality
from claro_inventory.services.catalog_service import CatalogService


class ReportService:
    """Read-only aggregates over the session stores."""

    def __init__(
        self,
        registry: AssetRegistry,
        ledger: RmaLedger,
        catalog: CatalogService,
        consumption: Iterable[ConsumptionEntry],
    ):
        self.registry = registry
        self.ledger = ledger
        self.catalog = catalog
        self._consumption = tuple(consumption)

    def consumption_log(self) -> list[ConsumptionEntry]:
        return [e.model_copy() for e in self._consumption]

    def assigned_or_installed(self) -> list[SerializedAsset]:
        """Equipment held by a technician or installed at a client."""
        return [
            a for a in self.registry.snapshot()
            if a.technician_id or a.location.startswith(CLIENT_PREFIX)
        ]

    def dashboard(self) -> dict:
        """KPI payload for the home view."""
        assets = self.registry.snapshot()
        rma_total = len(self.ledger.snapshot())
        materials = self.catalog.list_materials()
        return {
            "total_material_stock": self.catalog.total_stock(),
            # RMA units still count as serialized equipment
            "total_serialized_equipment": len(assets) + rma_total,
            "assigned_to_technicians": sum(1 for a in assets if a.technician_id.startswith("T")),
            "total_rma": rma_total,
            "sync_errors": sum(1 for e in self._consumption if e.is_sync_error),
            "critical_skus": sum(1 for m in materials if m.criticality == Criticality.HIGH),
            "low_stock_alerts": len(self.catalog.low_stock_alerts()),
        }
