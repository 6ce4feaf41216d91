"""Claro Inventory - Inventory session: stores, reference data and services for one app lifetime."""
import logging

from fastapi import Request

from claro_inventory.config import Settings, get_settings
from claro_inventory.db import seed
from claro_inventory.db.store import AssetRegistry, RmaLedger
from claro_inventory.models.catalog import ReferenceData
from claro_inventory.services.assignment_service import AssignmentService
from claro_inventory.services.catalog_service import CatalogService
from claro_inventory.services.compatibility_service import CompatibilityService
from claro_inventory.services.intake_service import IntakeService
from claro_inventory.services.report_service import ReportService
from claro_inventory.services.rma_service import RmaService

logger = logging.getLogger(__name__)


class InventorySession:
    """
    Owns the asset registry and RMA ledger and wires them into the services.
    The presentation layer only calls services and reads snapshots.
    """

    def __init__(
        self,
        settings: Settings,
        reference: ReferenceData,
        registry: AssetRegistry,
        ledger: RmaLedger,
        catalog: CatalogService,
        compatibility: CompatibilityService,
        consumption=(),
    ):
        self.settings = settings
        self.reference = reference
        self.registry = registry
        self.ledger = ledger
        self.catalog = catalog
        self.compatibility = compatibility
        self.assignments = AssignmentService(registry, reference)
        self.intake = IntakeService(registry)
        self.rma = RmaService(registry, ledger, reference)
        self.reports = ReportService(registry, ledger, catalog, consumption)


def build_session(settings: Settings | None = None, seed_demo_data: bool | None = None) -> InventorySession:
    """Create a session; demo data is loaded unless disabled."""
    settings = settings or get_settings()
    if seed_demo_data is None:
        seed_demo_data = settings.SEED_DEMO_DATA

    reference = seed.default_reference_data()
    if seed_demo_data:
        registry = AssetRegistry(seed.demo_assets())
        ledger = RmaLedger(seed.demo_rma_records())
        materials = seed.demo_materials()
        profiles = seed.demo_technology_profiles()
        consumption = seed.demo_consumption()
    else:
        registry, ledger = AssetRegistry(), RmaLedger()
        materials, profiles, consumption = [], [], []

    logger.info(
        "Inventory session ready: %d serials, %d RMA records, %d materials",
        len(registry), len(ledger), len(materials),
    )
    return InventorySession(
        settings=settings,
        reference=reference,
        registry=registry,
        ledger=ledger,
        catalog=CatalogService(materials, settings.LOW_STOCK_THRESHOLD),
        compatibility=CompatibilityService(profiles),
        consumption=consumption,
    )


def get_inventory(request: Request) -> InventorySession:
    """Dependency: the session created in the app lifespan."""
    return request.app.state.inventory
