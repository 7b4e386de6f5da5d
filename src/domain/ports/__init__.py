"""Domain ports package."""

from .asset_module_manager import IAssetModuleManager
from .device_management import IDeviceManagement
from .health_check import IBackendHealthCheck

__all__ = ["IAssetModuleManager", "IDeviceManagement", "IBackendHealthCheck"]
