"""CompatibilityService: technology to compatible-service matrix edits."""
from claro_inventory.schemas.common import ResultCode


def _codes(session, technology):
    return [s.code for s in session.compatibility.get_profile(technology).compatible_services]


def test_profiles_seeded(session):
    technologies = [p.technology for p in session.compatibility.list_profiles()]
    assert technologies == ["HFC", "Fibra Optica", "Satelital", "Red Fija Cobre", "Móvil 5G"]


def test_add_service_upper_cases_code(session):
    result = session.compatibility.add_service("Satelital", "tv_sat_4k", "Televisión Satelital 4K", "TV")

    assert result.code == ResultCode.SERVICE_ADDED
    assert _codes(session, "Satelital")[-1] == "TV_SAT_4K"


def test_add_duplicate_service_rejected(session):
    before = _codes(session, "HFC")
    result = session.compatibility.add_service("HFC", "int_docsis50", "Otro", "Internet")

    assert result.code == ResultCode.DUPLICATE_SERVICE
    assert _codes(session, "HFC") == before


def test_add_service_requires_all_fields(session):
    result = session.compatibility.add_service("HFC", "X1", "", "Internet")
    assert result.code == ResultCode.VALIDATION_ERROR


def test_add_service_unknown_technology(session):
    assert session.compatibility.add_service("WiMAX", "X1", "x", "Internet").code == ResultCode.NOT_FOUND


def test_remove_service(session):
    result = session.compatibility.remove_service("Móvil 5G", "mov_voz_pl")

    assert result.code == ResultCode.SERVICE_REMOVED
    assert _codes(session, "Móvil 5G") == ["MOV_DATOS_ILM"]
    assert session.compatibility.remove_service("Móvil 5G", "MOV_VOZ_PL").code == ResultCode.NOT_FOUND


def test_snapshots_are_detached(session):
    profile = session.compatibility.get_profile("HFC")
    profile.compatible_services.clear()
    assert len(session.compatibility.get_profile("HFC").compatible_services) == 7
