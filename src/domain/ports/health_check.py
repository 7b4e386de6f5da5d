"""Port for checking the backends the service delegates to."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import HealthReport


class IBackendHealthCheck(Protocol):
    async def check(self) -> HealthReport:
        """Ping the device management and asset module backends."""
        ...
