"""Infrastructure implementation of the backend health check."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Awaitable, Callable, Dict

from src.domain.entities.health import BackendStatus, HealthReport, ServiceStatus
from src.domain.ports.asset_module_manager import IAssetModuleManager
from src.domain.ports.device_management import IDeviceManagement
from src.shared import get_logger

logger = get_logger(__name__)


class HealthCheckService:
    """Ping the device management and asset module backends concurrently."""

    def __init__(
        self,
        device_management: IDeviceManagement,
        asset_module_manager: IAssetModuleManager,
        *,
        timeout: float = 5.0,
    ) -> None:
        self._device_management = device_management
        self._asset_module_manager = asset_module_manager
        self._timeout = timeout

    async def check(self) -> HealthReport:
        device_management, asset_modules = await asyncio.gather(
            self._ping("device_management", self._device_management.ping),
            self._ping("asset_modules", self._asset_module_manager.ping),
        )
        return HealthReport(
            device_management=device_management, asset_modules=asset_modules
        )

    async def _ping(
        self, backend: str, ping: Callable[[], Awaitable[Dict[str, int]]]
    ) -> BackendStatus:
        """
        Ping one backend, bounded by the configured timeout.

        A timeout marks the backend degraded and any other failure marks it
        down; neither is raised to the caller.
        """
        start = perf_counter()
        try:
            counts = await asyncio.wait_for(ping(), timeout=self._timeout)
        except asyncio.TimeoutError:
            logger.warning("health.ping.timeout", backend=backend, timeout=self._timeout)
            return BackendStatus(
                status=ServiceStatus.DEGRADED,
                latency_ms=(perf_counter() - start) * 1000,
                error=f"No answer within {self._timeout}s",
            )
        except Exception as exc:
            logger.error("health.ping.failed", backend=backend, error=str(exc))
            return BackendStatus(
                status=ServiceStatus.DOWN,
                latency_ms=(perf_counter() - start) * 1000,
                error=str(exc),
            )
        return BackendStatus(
            status=ServiceStatus.UP,
            latency_ms=(perf_counter() - start) * 1000,
            counts=dict(counts),
        )
