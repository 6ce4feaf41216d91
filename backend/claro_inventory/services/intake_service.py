"""Claro Inventory - IntakeService: register new serials into the warehouse."""
import logging

from claro_inventory.db.store import AssetRegistry
from claro_inventory.models.asset import AssetStatus, SerializedAsset, normalize_serial
from claro_inventory.schemas.common import OperationResult, ResultCode

logger = logging.getLogger(__name__)


class IntakeService:
    """New serials always enter as available in a warehouse."""

    def __init__(self, registry: AssetRegistry):
        self.registry = registry

    def register_new_serial(
        self,
        serial: str,
        equipment_type: str,
        technology: str,
        location: str,
    ) -> OperationResult:
        serial = normalize_serial(serial)
        missing = [
            name for name, value in (
                ("serial", serial),
                ("tipo de equipo", equipment_type),
                ("tecnología", technology),
                ("ubicación", location),
            )
            if not (value or "").strip()
        ]
        if missing:
            return OperationResult.fail(
                ResultCode.VALIDATION_ERROR, f"Campos obligatorios faltantes: {', '.join(missing)}."
            )

        with self.registry.lock:
            if serial in self.registry:
                logger.warning("Intake rejected: serial %s already registered", serial)
                return OperationResult.fail(
                    ResultCode.DUPLICATE_SERIAL, f"El serial {serial} ya existe en el inventario."
                )
            self.registry.add(SerializedAsset(
                serial=serial,
                equipment_type=equipment_type.strip(),
                technology=technology.strip(),
                status=AssetStatus.IN_WAREHOUSE,
                location=location.strip(),
            ))

        logger.info("Serial %s registered at %s", serial, location)
        return OperationResult.ok(
            ResultCode.REGISTERED,
            f"Serial {serial} agregado exitosamente como {AssetStatus.IN_WAREHOUSE.label}.",
        )
