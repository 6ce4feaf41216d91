"""Claro Inventory - Reference lists and demo data loaded at startup."""
from datetime import date

from claro_inventory.models.asset import AssetStatus, SerializedAsset
from claro_inventory.models.catalog import (
    CompatibleService,
    ConsumptionEntry,
    Criticality,
    Material,
    ReferenceData,
    Technician,
    TechnologyProfile,
)
from claro_inventory.models.rma import RmaRecord, RmaStatus

TECHNICIANS = (
    Technician(id="T001", name="Juan Pérez"),
    Technician(id="T005", name="Ana López"),
    Technician(id="T015", name="Carlos Velez"),
    Technician(id="T022", name="Maria Soto"),
    Technician(id="T030", name="Felipe Diaz"),
    Technician(id="T045", name="Laura Rojas"),
    Technician(id="T050", name="Ricardo Gómez"),
    Technician(id="T061", name="Elena Castro"),
    Technician(id="T072", name="David Niño"),
)

CAUSAL_CODES = (
    "Fallo de Encendido",
    "Intermitencia Reportada",
    "Devolución Cliente (Cancelación)",
    "Golpe/Daño Físico",
    "Falla de Conectividad",
    "Mala Calidad de Señal",
    "Equipo Obsoleto (Upgrade)",
    "Falla de Software",
    "Daño por Rayo",
    "No Retornó (Pérdida)",
)

EQUIPMENT_TYPES = (
    "Decodificador 4K",
    "Router Wi-Fi 6",
    "Modem DOCSIS 3.1",
    "Decodificador HD",
    "Router Mesh Extender",
    "Modem Fibra GPON",
    "Antena Satelital",
    "Cámara CCTV",
    "ONT GPON",
    "Switch Ethernet",
)

TECHNOLOGIES = ("HFC", "Fibra Optica", "Satelital")

WAREHOUSES = (
    "Bodega Central",
    "Bodega Norte",
    "Bodega Sur",
    "Bodega Oeste",
    "Bodega Este",
    "Bodega Regional",
)


def default_reference_data() -> ReferenceData:
    return ReferenceData(
        technicians=TECHNICIANS,
        causal_codes=CAUSAL_CODES,
        equipment_types=EQUIPMENT_TYPES,
        technologies=TECHNOLOGIES,
        warehouses=WAREHOUSES,
    )


def demo_assets() -> list[SerializedAsset]:
    A = AssetStatus
    rows = [
        ("DEC987654321", "Decodificador 4K", "HFC", A.ASSIGNED_TO_TECHNICIAN, "T001", "Juan Pérez", "Vehicle:T001"),
        ("RTR112233445", "Router Wi-Fi 6", "Fibra Optica", A.IN_WAREHOUSE, "", "", "Bodega Central"),
        ("MOD654321098", "Modem Cable DOCSIS 3.1", "HFC", A.INSTALLED_AT_CLIENT, "C12345", "Cliente", "Client:C12345"),
        ("DEC102938475", "Decodificador HD", "Satelital", A.IN_RMA_PROCESS, "", "", "Centro de Reparación"),
        ("RTR556677889", "Router Mesh Extender", "Fibra Optica", A.IN_WAREHOUSE, "", "", "Bodega Norte"),
        ("MOD99877665", "Modem Fibra GPON", "Fibra Optica", A.ASSIGNED_TO_TECHNICIAN, "T015", "Carlos Velez", "Vehicle:T015"),
        ("ANT001122334", "Antena Satelital", "Satelital", A.IN_WAREHOUSE, "", "", "Bodega Sur"),
        ("CCTV554433221", "Cámara CCTV", "HFC", A.IN_WAREHOUSE, "", "", "Bodega Norte"),
        ("RTR000111222", "Router Wi-Fi 6", "Fibra Optica", A.IN_WAREHOUSE, "", "", "Bodega Central"),
    ]
    return [
        SerializedAsset(
            serial=serial, equipment_type=kind, technology=tech, status=status,
            technician_id=tid, technician_name=tname, location=location,
        )
        for serial, kind, tech, status, tid, tname, location in rows
    ]


def demo_rma_records() -> list[RmaRecord]:
    R = RmaStatus
    rows = [
        ("DEC102938475", "Decodificador HD", "Satelital", R.DAMAGED_WRITTEN_OFF,
         "Fallo de Encendido", date(2025, 10, 25), "T001", "Juan Pérez"),
        ("RTR001122334", "Router Wi-Fi 5", "HFC", R.PENDING_REVIEW,
         "Devolución Cliente (Cancelación)", date(2025, 10, 28), "T022", "Maria Soto"),
        ("MOD776655443", "Modem DOCSIS 3.0", "HFC", R.PENDING_REVIEW,
         "Intermitencia Reportada", date(2025, 11, 1), "T005", "Ana López"),
        ("DEC555444333", "Decodificador 4K", "Fibra Optica", R.DAMAGED_AT_REPAIR_CENTER,
         "Golpe/Daño Físico", date(2025, 11, 5), "T015", "Carlos Velez"),
    ]
    return [
        RmaRecord(
            serial=serial, equipment_type=kind, technology=tech, status=status,
            causal=causal, registered_date=registered, reporting_technician_id=tid,
            reporting_technician_name=tname,
        )
        for serial, kind, tech, status, causal, registered, tid, tname in rows
    ]


def demo_materials() -> list[Material]:
    C = Criticality
    rows = [
        ("CBL001", "Cable Coaxial RG-6", "Metros", 15000, "Bodega Central", C.HIGH),
        ("FIB005", "Fibra Óptica Monomodo (Indoor)", "Metros", 5000, "Bodega Norte", C.MEDIUM),
        ("ADP100", "Adaptador SC/APC", "Unidades", 8500, "Bodega Sur", C.LOW),
        ("CNCT02", "Conector F Macho", "Unidades", 25000, "Bodega Central", C.HIGH),
        ("CLMP01", "Grapa Plástica 1/4", "Unidades", 50000, "Bodega Oeste", C.LOW),
        ("TAPE05", "Cinta Aislante Eléctrica", "Rollos", 1500, "Bodega Sur", C.LOW),
        ("BATT12", "Batería Respaldo 12V", "Unidades", 35000, "Bodega Norte", C.MEDIUM),
        ("SPLT04", "Splitter 1x4 HFC", "Unidades", 12000, "Bodega Central", C.MEDIUM),
        ("ONTF01", "ONT Fibra Óptica Gigabit", "Unidades", 9000, "Bodega Este", C.HIGH),
        ("AMP02", "Amplificador de Señal HFC", "Unidades", 3000, "Bodega Norte", C.MEDIUM),
        ("FIBR50", "Bobina Fibra 500m (Exterior)", "Rollos", 100, "Bodega Oeste", C.HIGH),
        ("ADP101", "Adaptador SC/UPC", "Unidades", 1500, "Bodega Regional", C.LOW),
        ("CNCT03", "Conector RJ-45 Cat 6", "Unidades", 45000, "Bodega Sur", C.HIGH),
        ("BRKT01", "Soporte de Antena", "Unidades", 8000, "Bodega Central", C.LOW),
        ("FUSN01", "Manguito de Fusión", "Unidades", 20000, "Bodega Este", C.MEDIUM),
    ]
    return [
        Material(sku=sku, name=name, unit=unit, stock=stock, location=loc, criticality=crit)
        for sku, name, unit, stock, loc, crit in rows
    ]


SYNC_OK = "Sincronizado OK y enviado a SAP"


def demo_consumption() -> list[ConsumptionEntry]:
    rows = [
        ("T001", "Juan Pérez", date(2025, 11, 12), 5, 120, SYNC_OK),
        ("T005", "Ana López", date(2025, 11, 12), 3, 80, SYNC_OK),
        ("T015", "Carlos Velez", date(2025, 11, 12), 4, 95, "Error Consumo Material OFSC"),
        ("T022", "Maria Soto", date(2025, 11, 12), 6, 150, SYNC_OK),
        ("T030", "Felipe Diaz", date(2025, 11, 12), 2, 50, SYNC_OK),
        ("T045", "Laura Rojas", date(2025, 11, 12), 1, 30, "Error Envío SAP - Duplicidad"),
        ("T001", "Juan Pérez", date(2025, 11, 13), 4, 100, SYNC_OK),
        ("T005", "Ana López", date(2025, 11, 13), 0, 10, SYNC_OK),
        ("T022", "Maria Soto", date(2025, 11, 13), 5, 130, "Error Consumo Material OFSC"),
        ("T015", "Carlos Velez", date(2025, 11, 11), 2, 45, SYNC_OK),
        ("T045", "Laura Rojas", date(2025, 11, 11), 3, 70, "Error Envío SAP - Duplicidad"),
        ("T050", "Ricardo Gómez", date(2025, 11, 14), 7, 180, SYNC_OK),
        ("T061", "Elena Castro", date(2025, 11, 14), 3, 60, SYNC_OK),
        ("T072", "David Niño", date(2025, 11, 14), 1, 40, "Error Falta Autorización"),
        ("T050", "Ricardo Gómez", date(2025, 11, 15), 5, 140, SYNC_OK),
        ("T061", "Elena Castro", date(2025, 11, 15), 0, 15, SYNC_OK),
        ("T001", "Juan Pérez", date(2025, 11, 10), 6, 130, "Error Consumo Material OFSC"),
        ("T045", "Laura Rojas", date(2025, 11, 14), 4, 85, SYNC_OK),
    ]
    return [
        ConsumptionEntry(
            technician_id=tid, name=name, date=day, installed_equipment=installed,
            consumed_materials=consumed, sync_status=sync,
        )
        for tid, name, day, installed, consumed, sync in rows
    ]


def _services(*rows: tuple[str, str, str]) -> list[CompatibleService]:
    return [CompatibleService(code=code, name=name, service_type=kind) for code, name, kind in rows]


def demo_technology_profiles() -> list[TechnologyProfile]:
    return [
        TechnologyProfile(
            technology="HFC",
            description="Hybrid Fiber-Coaxial",
            compatible_services=_services(
                ("INT_DOCSIS50", "Internet Cable 50 Mbps", "Internet"),
                ("INT_DOCSIS300", "Internet Cable 300 Mbps", "Internet"),
                ("TV_DIG_BAS", "Televisión Digital Básica", "TV"),
                ("TV_DIG_PLUS", "Televisión Digital Plus", "TV"),
                ("TEL_FIJA_EST", "Telefonía Fija Estándar", "Telefonía"),
                ("INT_DOCSIS100", "Internet Cable 100 Mbps", "Internet"),
                ("PAQ_HFC_TRP", "Paquete Triple Play HFC", "Bundle"),
            ),
        ),
        TechnologyProfile(
            technology="Fibra Optica",
            description="Fiber to the Home (GPON)",
            compatible_services=_services(
                ("INT_GIGA", "Internet Fibra 1 Gbps", "Internet"),
                ("INT_500", "Internet Fibra 500 Mbps", "Internet"),
                ("TV_IP_PREM", "Televisión IP Premium", "TV"),
                ("PAQ_FIBRA_TRP", "Paquete Triple Play Fibra", "Bundle"),
                ("INT_200", "Internet Fibra 200 Mbps", "Internet"),
                ("TV_IP_BAS", "Televisión IP Básica", "TV"),
            ),
        ),
        TechnologyProfile(
            technology="Satelital",
            description="Direct-to-Home (DTH)",
            compatible_services=_services(
                ("TV_SAT_BAS", "Televisión Satelital Básica", "TV"),
                ("TV_SAT_HD", "Televisión Satelital HD", "TV"),
                ("TV_SAT_PREM", "Televisión Satelital Premium", "TV"),
            ),
        ),
        TechnologyProfile(
            technology="Red Fija Cobre",
            description="Antigua red de cobre para servicios de voz y datos (ADSL)",
            compatible_services=_services(
                ("TEL_FIJA_AVZ", "Telefonía Fija Avanzada", "Telefonía"),
                ("INT_ADSL10", "Internet ADSL 10 Mbps", "Internet"),
            ),
        ),
        TechnologyProfile(
            technology="Móvil 5G",
            description="Red de quinta generación para servicios de Internet de alta velocidad",
            compatible_services=_services(
                ("MOV_DATOS_ILM", "Datos Ilimitados", "Móvil"),
                ("MOV_VOZ_PL", "Voz Plan Corporativo", "Móvil"),
            ),
        ),
    ]
