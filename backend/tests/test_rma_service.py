"""RmaService: registry removal and append-only RMA ledger."""
from datetime import date

from claro_inventory.models.rma import RmaStatus
from claro_inventory.schemas.common import ResultCode


def test_register_rma_for_assigned_asset(session):
    result = session.rma.register_rma("DEC987654321", "Fallo de Encendido", "T001", "Juan Pérez")

    assert result.success
    assert result.code == ResultCode.RMA_REGISTERED
    assert "DEC987654321" in result.message
    assert "Fallo de Encendido" in result.message
    assert "DEC987654321" not in session.registry

    record = session.ledger.get("DEC987654321")
    assert record.causal == "Fallo de Encendido"
    assert record.status == RmaStatus.PENDING_REVIEW
    assert record.equipment_type == "Decodificador 4K"
    assert record.technology == "HFC"
    assert record.registered_date == date.today()
    assert record.reporting_technician_id == "T001"
    assert record.reporting_technician_name == "Juan Pérez"


def test_register_rma_for_warehouse_asset_lowercase(session):
    registry_before = len(session.registry)
    ledger_before = len(session.ledger)

    result = session.rma.register_rma(" rtr556677889", "Golpe/Daño Físico", "T022")

    assert result.success
    assert len(session.registry) == registry_before - 1
    assert len(session.ledger) == ledger_before + 1
    record = session.ledger.get("RTR556677889")
    assert record.equipment_type == "Router Mesh Extender"
    assert record.technology == "Fibra Optica"
    assert record.reporting_technician_name == "Maria Soto"


def test_duplicate_rma_rejected(session):
    assert session.rma.register_rma("RTR000111222", "Falla de Software", "T001").success
    ledger_size = len(session.ledger)

    result = session.rma.register_rma("rtr000111222", "Daño por Rayo", "T005")

    assert not result.success
    assert result.code == ResultCode.ALREADY_IN_RMA
    assert len(session.ledger) == ledger_size
    assert session.ledger.get("RTR000111222").causal == "Falla de Software"


def test_seeded_rma_serial_stays_in_registry_on_rejection(session):
    """DEC102938475 is in the seeded ledger and still listed as IN_RMA_PROCESS."""
    result = session.rma.register_rma("DEC102938475", "Fallo de Encendido", "T001")

    assert result.code == ResultCode.ALREADY_IN_RMA
    assert "DEC102938475" in session.registry


def test_unknown_serial_uses_reference_defaults(session):
    result = session.rma.register_rma("ZZZ000111", "No Retornó (Pérdida)", "T045")

    assert result.success
    record = session.ledger.get("ZZZ000111")
    assert record.equipment_type == session.reference.equipment_types[0]
    assert record.technology == session.reference.technologies[0]


def test_unknown_serial_uses_caller_fallbacks(session):
    session.rma.register_rma(
        "ZZZ000222", "Falla de Conectividad", "T045",
        fallback_type="Switch Ethernet", fallback_technology="Satelital",
    )

    record = session.ledger.get("ZZZ000222")
    assert record.equipment_type == "Switch Ethernet"
    assert record.technology == "Satelital"


def test_fallbacks_ignored_for_registered_asset(session):
    session.rma.register_rma(
        "ANT001122334", "Daño por Rayo", "T001",
        fallback_type="Switch Ethernet", fallback_technology="HFC",
    )

    record = session.ledger.get("ANT001122334")
    assert record.equipment_type == "Antena Satelital"
    assert record.technology == "Satelital"


def test_validation_errors_leave_stores_untouched(session):
    registry_before = session.registry.snapshot()
    ledger_before = session.ledger.snapshot()

    assert session.rma.register_rma("", "Fallo de Encendido", "T001").code == ResultCode.VALIDATION_ERROR
    assert session.rma.register_rma("RTR112233445", "", "T001").code == ResultCode.VALIDATION_ERROR
    assert session.rma.register_rma("RTR112233445", "Fallo de Encendido", "").code == ResultCode.VALIDATION_ERROR
    assert session.rma.register_rma("RTR112233445", "Se cayó", "T001").code == ResultCode.VALIDATION_ERROR

    assert session.registry.snapshot() == registry_before
    assert session.ledger.snapshot() == ledger_before


def test_serial_in_rma_can_no_longer_be_assigned(session):
    session.rma.register_rma("RTR112233445", "Falla de Software", "T001")

    assert session.assignments.assign("RTR112233445", "T001").code == ResultCode.NOT_FOUND


def test_register_rma_for_installed_asset(session):
    result = session.rma.register_rma("mod654321098", "Falla de Conectividad", "T005")

    assert result.code == ResultCode.RMA_REGISTERED
    assert "MOD654321098" not in session.registry

    record = session.ledger.get("MOD654321098")
    assert record.status == RmaStatus.PENDING_REVIEW
    assert record.equipment_type == "Modem Cable DOCSIS 3.1"
    assert record.technology == "HFC"
    assert record.reporting_technician_name == "Ana López"


def test_unknown_technician_rejected(session):
    registry_before = session.registry.snapshot()
    ledger_before = session.ledger.snapshot()

    result = session.rma.register_rma("RTR112233445", "Fallo de Encendido", "T999")

    assert not result.success
    assert result.code == ResultCode.VALIDATION_ERROR
    assert "T999" in result.message
    assert session.registry.snapshot() == registry_before
    assert session.ledger.snapshot() == ledger_before


def test_blank_technician_name_falls_back_to_directory(session):
    session.rma.register_rma("CCTV554433221", "Daño por Rayo", "T030", "   ")

    assert session.ledger.get("CCTV554433221").reporting_technician_name == "Felipe Diaz"
