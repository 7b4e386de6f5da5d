"""Use case behind the /health endpoint."""

from src.application.dtos.health_dto import HealthReportDTO
from src.domain.ports.health_check import IBackendHealthCheck
from src.shared import get_logger

logger = get_logger(__name__)


class CheckBackendHealthUseCase:
    """Ping both backends and report their status and entity counts."""

    def __init__(self, health_check: IBackendHealthCheck, version: str) -> None:
        self._health_check = health_check
        self._version = version

    async def execute(self) -> HealthReportDTO:
        report = await self._health_check.check()
        logger.debug("health.checked", status=report.status.value)
        return HealthReportDTO.from_domain(report, self._version)
