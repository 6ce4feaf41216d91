"""Claro Inventory - CompatibilityService: technology -> compatible services matrix."""
import logging
import threading
from collections.abc import Iterable

from claro_inventory.models.catalog import CompatibleService, TechnologyProfile
from claro_inventory.schemas.common import OperationResult, ResultCode

logger = logging.getLogger(__name__)


class CompatibilityService:
    """Maintains which commercial services each access technology supports."""

    def __init__(self, profiles: Iterable[TechnologyProfile]):
        self._lock = threading.RLock()
        self._profiles: dict[str, TechnologyProfile] = {
            p.technology: p.model_copy(deep=True) for p in profiles
        }

    def list_profiles(self) -> list[TechnologyProfile]:
        with self._lock:
            return [p.model_copy(deep=True) for p in self._profiles.values()]

    def get_profile(self, technology: str) -> TechnologyProfile | None:
        with self._lock:
            profile = self._profiles.get(technology)
            return profile.model_copy(deep=True) if profile else None

    def add_service(self, technology: str, code: str, name: str, service_type: str) -> OperationResult:
        if not all((v or "").strip() for v in (technology, code, name, service_type)):
            return OperationResult.fail(
                ResultCode.VALIDATION_ERROR, "Todos los campos del nuevo servicio son obligatorios."
            )
        code = code.strip().upper()

        with self._lock:
            profile = self._profiles.get(technology)
            if profile is None:
                return OperationResult.fail(ResultCode.NOT_FOUND, f"Tecnología {technology} no existe.")
            if any(s.code.upper() == code for s in profile.compatible_services):
                return OperationResult.fail(
                    ResultCode.DUPLICATE_SERVICE,
                    f"El código de servicio {code} ya existe para {technology}.",
                )
            profile.compatible_services.append(
                CompatibleService(code=code, name=name.strip(), service_type=service_type.strip())
            )

        logger.info("Service %s added to %s", code, technology)
        return OperationResult.ok(ResultCode.SERVICE_ADDED, f"Servicio {code} agregado a {technology}.")

    def remove_service(self, technology: str, code: str) -> OperationResult:
        code = (code or "").strip().upper()
        with self._lock:
            profile = self._profiles.get(technology)
            if profile is None:
                return OperationResult.fail(ResultCode.NOT_FOUND, f"Tecnología {technology} no existe.")
            remaining = [s for s in profile.compatible_services if s.code.upper() != code]
            if len(remaining) == len(profile.compatible_services):
                return OperationResult.fail(
                    ResultCode.NOT_FOUND, f"Servicio {code} no existe para {technology}."
                )
            profile.compatible_services = remaining

        logger.info("Service %s removed from %s", code, technology)
        return OperationResult.ok(ResultCode.SERVICE_REMOVED, f"Servicio {code} eliminado de {technology}.")
