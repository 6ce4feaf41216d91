"""IntakeService: registering new serials as available stock."""
from claro_inventory.models.asset import AssetStatus
from claro_inventory.schemas.common import ResultCode


def test_register_new_serial(empty_session):
    result = empty_session.intake.register_new_serial("ont555", "ONT GPON", "Fibra Optica", "Bodega Este")

    assert result.success
    assert result.code == ResultCode.REGISTERED
    assert "ONT555" in result.message
    asset = empty_session.registry.get("ONT555")
    assert asset.status == AssetStatus.IN_WAREHOUSE
    assert asset.technician_id == ""
    assert asset.technician_name == ""
    assert asset.location == "Bodega Este"


def test_duplicate_serial_rejected(empty_session):
    intake = empty_session.intake
    assert intake.register_new_serial("ONT555", "ONT GPON", "Fibra Optica", "Bodega Este").success

    result = intake.register_new_serial(" ont555 ", "Switch Ethernet", "HFC", "Bodega Sur")

    assert not result.success
    assert result.code == ResultCode.DUPLICATE_SERIAL
    assert [a.serial for a in empty_session.registry.snapshot()] == ["ONT555"]
    assert empty_session.registry.get("ONT555").equipment_type == "ONT GPON"


def test_seeded_serial_is_duplicate(session):
    result = session.intake.register_new_serial("RTR112233445", "Router Wi-Fi 6", "Fibra Optica", "Bodega Central")
    assert result.code == ResultCode.DUPLICATE_SERIAL


def test_missing_fields_rejected(empty_session):
    result = empty_session.intake.register_new_serial("ONT1", "", "HFC", " ")

    assert result.code == ResultCode.VALIDATION_ERROR
    assert "tipo de equipo" in result.message
    assert "ubicación" in result.message
    assert len(empty_session.registry) == 0


def test_not_found_recovery_flow(empty_session):
    """Unknown serial: register it, then the retried assignment succeeds."""
    first = empty_session.assignments.assign("XYZ999", "T001")
    assert first.code == ResultCode.NOT_FOUND

    assert empty_session.intake.register_new_serial("xyz999", "Cámara CCTV", "HFC", "Bodega Norte").success
    retry = empty_session.assignments.assign("XYZ999", "T001")

    assert retry.code == ResultCode.ASSIGNED
    assert empty_session.registry.get("XYZ999").location == "Vehicle:T001"
