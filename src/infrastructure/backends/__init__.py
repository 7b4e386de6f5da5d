"""
Backends Package - Infrastructure Layer

In-memory implementations of the device management and asset module
ports, plus the JSON seed loader that populates them.
"""

from .in_memory_asset_module_manager import InMemoryAssetModuleManager
from .in_memory_device_management import InMemoryDeviceManagement
from .seed_loader import SeedDocument, load_seed_file

__all__ = [
    "InMemoryAssetModuleManager",
    "InMemoryDeviceManagement",
    "SeedDocument",
    "load_seed_file",
]
