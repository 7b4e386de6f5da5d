"""DTOs for the /health response."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from src.domain.entities.health import BackendStatus, HealthReport, ServiceStatus

from .base import CamelModel


class BackendHealthDTO(CamelModel):
    status: ServiceStatus = Field(description="Result of pinging the backend")
    latency_ms: Optional[float] = Field(
        default=None, description="Ping round trip in milliseconds"
    )
    error: Optional[str] = Field(
        default=None, description="Why the ping did not succeed"
    )


class DeviceManagementHealthDTO(BackendHealthDTO):
    device_groups: Optional[int] = Field(
        default=None, description="Device groups held, including soft-deleted ones"
    )
    devices: Optional[int] = Field(default=None, description="Registered devices")

    @classmethod
    def from_domain(cls, backend: BackendStatus) -> "DeviceManagementHealthDTO":
        return cls(
            status=backend.status,
            latency_ms=backend.latency_ms,
            error=backend.error,
            device_groups=backend.counts.get("device_groups"),
            devices=backend.counts.get("devices"),
        )


class AssetModulesHealthDTO(BackendHealthDTO):
    asset_modules: Optional[int] = Field(
        default=None, description="Asset modules known to the manager"
    )
    assets: Optional[int] = Field(
        default=None, description="Assets across every module"
    )

    @classmethod
    def from_domain(cls, backend: BackendStatus) -> "AssetModulesHealthDTO":
        return cls(
            status=backend.status,
            latency_ms=backend.latency_ms,
            error=backend.error,
            asset_modules=backend.counts.get("asset_modules"),
            assets=backend.counts.get("assets"),
        )


class HealthReportDTO(CamelModel):
    """Body of ``GET /health``."""

    status: ServiceStatus = Field(description="Worst status of the two backends")
    version: str = Field(description="Service version")
    checked_at: datetime = Field(description="When the backends were pinged")
    device_management: DeviceManagementHealthDTO
    asset_modules: AssetModulesHealthDTO

    @classmethod
    def from_domain(cls, report: HealthReport, version: str) -> "HealthReportDTO":
        return cls(
            status=report.status,
            version=version,
            checked_at=report.checked_at,
            device_management=DeviceManagementHealthDTO.from_domain(
                report.device_management
            ),
            asset_modules=AssetModulesHealthDTO.from_domain(report.asset_modules),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "version": "1.0.0",
                "checkedAt": "2024-09-09T12:00:00Z",
                "deviceManagement": {
                    "status": "up",
                    "latencyMs": 0.1,
                    "error": None,
                    "deviceGroups": 3,
                    "devices": 12,
                },
                "assetModules": {
                    "status": "up",
                    "latencyMs": 0.1,
                    "error": None,
                    "assetModules": 1,
                    "assets": 4,
                },
            }
        }
    }
