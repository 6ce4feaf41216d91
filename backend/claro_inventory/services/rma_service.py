"""Claro Inventory - RmaService: move returned or damaged units into the RMA ledger."""
import logging
from datetime import date

from claro_inventory.db.store import AssetRegistry, RmaLedger
from claro_inventory.models.asset import normalize_serial
from claro_inventory.models.catalog import ReferenceData
from claro_inventory.models.rma import RmaRecord, RmaStatus
from claro_inventory.schemas.common import OperationResult, ResultCode

logger = logging.getLogger(__name__)


class RmaService:
    """Registers RMA records. An RMA consumes the asset: it leaves the registry."""

    def __init__(self, registry: AssetRegistry, ledger: RmaLedger, reference: ReferenceData):
        self.registry = registry
        self.ledger = ledger
        self.reference = reference

    def register_rma(
        self,
        serial: str,
        causal: str,
        technician_id: str,
        technician_name: str | None = None,
        fallback_type: str | None = None,
        fallback_technology: str | None = None,
    ) -> OperationResult:
        """
        Register `serial` in RMA as PENDING_REVIEW with today's date.
        Unknown serials take the caller's fallbacks, else the first reference
        equipment type / technology.
        """
        serial = normalize_serial(serial)
        technician_id = (technician_id or "").strip()
        if not serial or not causal or not technician_id:
            return OperationResult.fail(
                ResultCode.VALIDATION_ERROR, "Por favor, complete el Serial, el Técnico y la Causal."
            )
        if causal not in self.reference.causal_codes:
            return OperationResult.fail(ResultCode.VALIDATION_ERROR, f"Causal desconocida: {causal}.")
        tech = self.reference.technician(technician_id)
        if tech is None:
            return OperationResult.fail(
                ResultCode.VALIDATION_ERROR, f"Error: Técnico {technician_id} no existe en el directorio."
            )
        technician_name = (technician_name or "").strip() or tech.name

        with self.ledger.lock, self.registry.lock:
            if serial in self.ledger:
                logger.warning("RMA rejected: serial %s already in RMA", serial)
                return OperationResult.fail(
                    ResultCode.ALREADY_IN_RMA, f"El serial {serial} ya está registrado en RMA."
                )

            asset = self.registry.get(serial)
            if asset is not None:
                equipment_type, technology = asset.equipment_type, asset.technology
            else:
                equipment_type = fallback_type or self.reference.equipment_types[0]
                technology = fallback_technology or self.reference.technologies[0]

            record = RmaRecord(
                serial=serial,
                equipment_type=equipment_type,
                technology=technology,
                status=RmaStatus.PENDING_REVIEW,
                causal=causal,
                registered_date=date.today(),
                reporting_technician_id=technician_id,
                reporting_technician_name=technician_name,
            )
            if asset is not None:
                self.registry.remove(serial)
            self.ledger.add(record)

        logger.info("Serial %s registered in RMA (%s)", serial, causal)
        return OperationResult.ok(
            ResultCode.RMA_REGISTERED, f"Serial {serial} registrado en RMA con causal: {causal}."
        )
