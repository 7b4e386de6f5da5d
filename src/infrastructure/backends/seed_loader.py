"""
Seed Loader - Infrastructure Layer

Populates the in-memory backends from a JSON document so a freshly
started service has groups, devices and assets to serve. Example::

    {
      "assets": [{"id": "esp32", "name": "ESP32 node", "asset_module_id": "devices"}],
      "devices": [{"hardware_id": "esp32-001", "asset_module_id": "devices",
                   "asset_id": "esp32"}],
      "device_groups": [{"token": "floor-1", "name": "Floor 1",
                         "elements": [{"type": "Device", "element_id": "esp32-001"}]}]
    }
"""

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.device import Asset, AssetType, Device
from src.domain.entities.device_group import (
    DeviceGroupCreateRequest,
    DeviceGroupElementCreateRequest,
    DeviceGroupElementType,
)
from src.shared import get_logger

from .in_memory_asset_module_manager import InMemoryAssetModuleManager
from .in_memory_device_management import InMemoryDeviceManagement

logger = get_logger(__name__)


class AssetSeed(BaseModel):
    id: str
    name: str
    asset_module_id: str
    type: AssetType = AssetType.DEVICE
    image_url: Optional[str] = None
    properties: Dict[str, str] = Field(default_factory=dict)


class DeviceSeed(BaseModel):
    hardware_id: str
    specification_token: Optional[str] = None
    site_token: Optional[str] = None
    asset_module_id: Optional[str] = None
    asset_id: Optional[str] = None
    comments: str = ""
    metadata: Dict[str, str] = Field(default_factory=dict)


class ElementSeed(BaseModel):
    type: DeviceGroupElementType
    element_id: str
    roles: List[str] = Field(default_factory=list)


class DeviceGroupSeed(BaseModel):
    token: Optional[str] = None
    name: str
    description: str = ""
    roles: List[str] = Field(default_factory=list)
    metadata: Dict[str, str] = Field(default_factory=dict)
    elements: List[ElementSeed] = Field(default_factory=list)


class SeedDocument(BaseModel):
    assets: List[AssetSeed] = Field(default_factory=list)
    devices: List[DeviceSeed] = Field(default_factory=list)
    device_groups: List[DeviceGroupSeed] = Field(default_factory=list)


async def load_seed_file(
    path: str,
    device_management: InMemoryDeviceManagement,
    asset_module_manager: InMemoryAssetModuleManager,
) -> SeedDocument:
    """
    Read a seed document and load it into the in-memory backends.

    Element references are stored as given; a device or nested group that
    does not exist simply has no details when elements are listed.

    Raises:
        FileNotFoundError: If ``path`` does not exist
        pydantic.ValidationError: If the document does not match the schema
        DeviceManagementError: If the backend rejects a seeded entity
    """
    document = SeedDocument.model_validate_json(
        Path(path).read_text(encoding="utf-8")
    )

    for asset in document.assets:
        asset_module_manager.register_asset(Asset(**asset.model_dump()))

    for device in document.devices:
        await device_management.add_device(Device(**device.model_dump()))

    for group_seed in document.device_groups:
        group = await device_management.create_device_group(
            DeviceGroupCreateRequest(
                token=group_seed.token,
                name=group_seed.name,
                description=group_seed.description,
                roles=list(group_seed.roles),
                metadata=dict(group_seed.metadata),
            )
        )
        if group_seed.elements:
            await device_management.add_device_group_elements(
                group.token,
                [
                    DeviceGroupElementCreateRequest(
                        type=element.type,
                        element_id=element.element_id,
                        roles=list(element.roles),
                    )
                    for element in group_seed.elements
                ],
            )

    logger.info(
        "seed.loaded",
        path=path,
        assets=len(document.assets),
        devices=len(document.devices),
        device_groups=len(document.device_groups),
    )
    return document
