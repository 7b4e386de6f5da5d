"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .device import Asset, AssetType, Device
from .device_group import (
    DeviceGroup,
    DeviceGroupCreateRequest,
    DeviceGroupElement,
    DeviceGroupElementCreateRequest,
    DeviceGroupElementType,
)
from .errors import (
    DeviceGroupNotFoundError,
    DeviceManagementError,
    DomainError,
    DuplicateDeviceGroupError,
    ErrorCode,
    ErrorLevel,
)
from .health import BackendStatus, HealthReport, ServiceStatus
from .search import SearchCriteria, SearchResults

__all__ = [
    "Asset",
    "AssetType",
    "Device",
    "DeviceGroup",
    "DeviceGroupCreateRequest",
    "DeviceGroupElement",
    "DeviceGroupElementCreateRequest",
    "DeviceGroupElementType",
    "SearchCriteria",
    "SearchResults",
    "HealthReport",
    "BackendStatus",
    "ServiceStatus",
    "DomainError",
    "DeviceManagementError",
    "DeviceGroupNotFoundError",
    "DuplicateDeviceGroupError",
    "ErrorCode",
    "ErrorLevel",
]
