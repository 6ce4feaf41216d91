"""Claro Inventory - AssignmentService: warehouse -> technician vehicle."""
import logging

from claro_inventory.db.store import AssetRegistry
from claro_inventory.models.asset import VEHICLE_PREFIX, AssetStatus, normalize_serial
from claro_inventory.models.catalog import ReferenceData
from claro_inventory.schemas.common import OperationResult, ResultCode

logger = logging.getLogger(__name__)


class AssignmentService:
    """Moves available serialized equipment into a technician's inventory."""

    def __init__(self, registry: AssetRegistry, reference: ReferenceData):
        self.registry = registry
        self.reference = reference

    def assign(
        self,
        serial: str,
        technician_id: str,
        technician_name: str | None = None,
    ) -> OperationResult:
        """Assign an IN_WAREHOUSE serial to a technician. No partial mutation on failure."""
        serial = normalize_serial(serial)
        technician_id = (technician_id or "").strip()
        if not serial:
            return OperationResult.fail(ResultCode.VALIDATION_ERROR, "Por favor, ingrese un número de serial.")
        if not technician_id:
            return OperationResult.fail(ResultCode.VALIDATION_ERROR, "Por favor, seleccione un técnico.")

        tech = self.reference.technician(technician_id)
        if tech is None:
            return OperationResult.fail(
                ResultCode.VALIDATION_ERROR, f"Error: Técnico {technician_id} no existe en el directorio."
            )
        technician_name = (technician_name or "").strip() or tech.name

        with self.registry.lock:
            asset = self.registry.get(serial)
            if asset is None:
                logger.warning("Assignment rejected: serial %s not found", serial)
                return OperationResult.fail(
                    ResultCode.NOT_FOUND,
                    f"Error: Serial {serial} no encontrado. "
                    "¿Desea registrarlo en el inventario maestro?",
                )
            if asset.status != AssetStatus.IN_WAREHOUSE:
                logger.warning("Assignment rejected: serial %s is %s", serial, asset.status.value)
                return OperationResult.fail(
                    ResultCode.NOT_AVAILABLE,
                    f"Error: Serial {serial} no está disponible. Estado: {asset.status.label}.",
                )

            self.registry.replace(asset.model_copy(update={
                "status": AssetStatus.ASSIGNED_TO_TECHNICIAN,
                "technician_id": technician_id,
                "technician_name": technician_name,
                "location": VEHICLE_PREFIX + technician_id,
            }))

        logger.info("Serial %s assigned to %s", serial, technician_id)
        return OperationResult.ok(
            ResultCode.ASSIGNED,
            f"Equipo {serial} asignado a {technician_name} ({technician_id}).",
        )
