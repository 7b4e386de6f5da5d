"""Backend availability as seen by the ``/health`` endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Optional


class ServiceStatus(str, Enum):
    UP = "up"
    DEGRADED = "degraded"
    DOWN = "down"


@dataclass(slots=True)
class BackendStatus:
    """
    Outcome of pinging one backend.

    ``counts`` holds the entity counters the backend reported; it stays
    empty when the ping timed out or failed.
    """

    status: ServiceStatus
    latency_ms: Optional[float] = None
    error: Optional[str] = None
    counts: Dict[str, int] = field(default_factory=dict)


@dataclass(slots=True)
class HealthReport:
    device_management: BackendStatus
    asset_modules: BackendStatus
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def status(self) -> ServiceStatus:
        """Worst status of the two backends."""
        statuses = {self.device_management.status, self.asset_modules.status}
        if ServiceStatus.DOWN in statuses:
            return ServiceStatus.DOWN
        if ServiceStatus.DEGRADED in statuses:
            return ServiceStatus.DEGRADED
        return ServiceStatus.UP
