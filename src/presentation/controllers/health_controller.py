"""
Health Router - Presentation Layer

Reports whether the device management and asset module backends answer,
with the entity counts each one returned. A backend that is down turns
the response into a 503 so load balancers can act on the status code.
"""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.application.dtos.health_dto import HealthReportDTO
from src.application.use_cases.health_use_cases import CheckBackendHealthUseCase
from src.domain.entities.health import ServiceStatus
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthReportDTO,
    responses={503: {"model": HealthReportDTO}},
)
@inject
async def health(
    response: Response,
    check_health_use_case: CheckBackendHealthUseCase = Depends(
        Provide["check_backend_health_use_case"]
    ),
) -> HealthReportDTO:
    try:
        report = await check_health_use_case.execute()
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Unable to check backend health",
        ) from exc

    if report.status is ServiceStatus.DOWN:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return report
