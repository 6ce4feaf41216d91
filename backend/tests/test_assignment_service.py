"""AssignmentService: state-gated moves from warehouse to technician vehicle."""
from claro_inventory.db.store import AssetRegistry
from claro_inventory.models.asset import AssetStatus, SerializedAsset
from claro_inventory.schemas.common import ResultCode


def test_assign_available_serial_case_insensitive(session):
    result = session.assignments.assign("rtr112233445", "T001", "Juan Pérez")

    assert result.success
    assert result.code == ResultCode.ASSIGNED
    asset = session.registry.get("RTR112233445")
    assert asset.status == AssetStatus.ASSIGNED_TO_TECHNICIAN
    assert asset.technician_id == "T001"
    assert asset.technician_name == "Juan Pérez"
    assert asset.location == "Vehicle:T001"


def test_assign_unknown_serial_is_not_found(empty_session):
    result = empty_session.assignments.assign("XYZ999", "T001", "Juan Pérez")

    assert not result.success
    assert result.code == ResultCode.NOT_FOUND
    assert "registrarlo" in result.message
    assert len(empty_session.registry) == 0


def test_assign_already_assigned_is_not_available(session):
    before = session.registry.snapshot()
    result = session.assignments.assign("DEC987654321", "T005", "Ana López")

    assert not result.success
    assert result.code == ResultCode.NOT_AVAILABLE
    assert "Asignado a Técnico" in result.message
    assert session.registry.snapshot() == before


def test_installed_and_rma_statuses_are_not_available(session):
    for serial in ("MOD654321098", "DEC102938475"):
        result = session.assignments.assign(serial, "T001")
        assert result.code == ResultCode.NOT_AVAILABLE


def test_assign_fills_name_from_directory(session):
    result = session.assignments.assign("ANT001122334", "T022")

    assert result.success
    assert session.registry.get("ANT001122334").technician_name == "Maria Soto"


def test_assign_blank_name_falls_back_to_directory(session):
    result = session.assignments.assign("RTR000111222", "T050", "   ")

    assert result.success
    assert session.registry.get("RTR000111222").technician_name == "Ricardo Gómez"


def test_assign_validates_input(session):
    before = session.registry.snapshot()

    assert session.assignments.assign("   ", "T001").code == ResultCode.VALIDATION_ERROR
    assert session.assignments.assign("RTR112233445", "").code == ResultCode.VALIDATION_ERROR
    assert session.assignments.assign("RTR112233445", "T999").code == ResultCode.VALIDATION_ERROR
    assert session.registry.snapshot() == before


def test_second_assignment_of_same_serial_fails(session):
    assert session.assignments.assign("RTR000111222", "T001").success
    result = session.assignments.assign("RTR000111222", "T005")

    assert result.code == ResultCode.NOT_AVAILABLE
    assert session.registry.get("RTR000111222").technician_id == "T001"


def test_service_works_on_injected_registry(session):
    registry = AssetRegistry([
        SerializedAsset(serial="RTR1", equipment_type="ONT GPON", technology="Fibra Optica", location="Bodega Este"),
    ])
    service = type(session.assignments)(registry, session.reference)

    assert service.assign("rtr1", "T050").success
    assert registry.get("RTR1").location == "Vehicle:T050"
    assert session.registry.get("RTR1") is None
