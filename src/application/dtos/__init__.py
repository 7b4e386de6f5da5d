"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .base import CamelModel, SearchResultsDTO
from .device_group_dto import (
    DeviceDTO,
    DeviceGroupCreateDTO,
    DeviceGroupDTO,
    DeviceGroupElementDTO,
)
from .health_dto import (
    AssetModulesHealthDTO,
    BackendHealthDTO,
    DeviceManagementHealthDTO,
    HealthReportDTO,
)

__all__ = [
    "CamelModel",
    "SearchResultsDTO",
    "DeviceDTO",
    "DeviceGroupCreateDTO",
    "DeviceGroupDTO",
    "DeviceGroupElementDTO",
    "HealthReportDTO",
    "BackendHealthDTO",
    "DeviceManagementHealthDTO",
    "AssetModulesHealthDTO",
]
