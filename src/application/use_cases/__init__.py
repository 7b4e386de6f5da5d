"""
Use Cases Package - Application Layer

This package contains use cases that implement the business logic
of the application. Use cases orchestrate the flow of data to and from
the backends and copy results into DTOs.
"""

from .device_group_use_cases import (
    CreateDeviceGroupUseCase,
    DeleteDeviceGroupUseCase,
    GetDeviceGroupByTokenUseCase,
    ListDeviceGroupElementsUseCase,
    ListDeviceGroupsUseCase,
    UpdateDeviceGroupUseCase,
)
from .health_use_cases import CheckBackendHealthUseCase

__all__ = [
    "CreateDeviceGroupUseCase",
    "GetDeviceGroupByTokenUseCase",
    "UpdateDeviceGroupUseCase",
    "DeleteDeviceGroupUseCase",
    "ListDeviceGroupsUseCase",
    "ListDeviceGroupElementsUseCase",
    "CheckBackendHealthUseCase",
]
